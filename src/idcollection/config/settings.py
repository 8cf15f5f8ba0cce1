"""Configuration settings using Pydantic Settings.

Usage:
    from idcollection.config import CollectionSettings

    # Load from environment variables (IDCOLLECTION_*)
    settings = CollectionSettings()

    # Or override with explicit values
    settings = CollectionSettings(identity_field="sku")
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from idcollection.core.identity import DEFAULT_IDENTITY_FIELD


class CollectionSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for identity collections.

    Attributes:
        identity_field: Field read by the settings-driven identity function.
        warn_on_merge_overcount: Emit MergeOvercountWarning when merged
            collections share keys and the summed length overcounts.

    Environment Variables:
        IDCOLLECTION_IDENTITY_FIELD
        IDCOLLECTION_WARN_ON_MERGE_OVERCOUNT
    """

    model_config = SettingsConfigDict(
        env_prefix="IDCOLLECTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    identity_field: str = Field(default=DEFAULT_IDENTITY_FIELD, min_length=1)
    warn_on_merge_overcount: bool = True
