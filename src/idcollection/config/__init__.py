"""Configuration module using Pydantic Settings.

Usage:
    from idcollection.config import CollectionSettings

    settings = CollectionSettings(identity_field="sku")
"""

from idcollection.config.settings import CollectionSettings

__all__ = [
    "CollectionSettings",
]
