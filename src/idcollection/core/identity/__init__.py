"""Identity functionality: how items map to collection keys."""

from idcollection.core.identity.models import (
    DEFAULT_IDENTITY_FIELD,
    coerce_key,
    default_identity,
    field_identity,
    is_object_like,
    read_field,
)

__all__ = [
    "DEFAULT_IDENTITY_FIELD",
    "coerce_key",
    "default_identity",
    "field_identity",
    "is_object_like",
    "read_field",
]
