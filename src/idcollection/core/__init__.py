"""Core functionalities: stateless helpers and type aliases.

Architecture Note:
    core/ contains pure functions with no runtime state.
    The stateful container lives in collection/.
"""

from idcollection.core.filter import Filter, and_, or_
from idcollection.core.identity import (
    DEFAULT_IDENTITY_FIELD,
    coerce_key,
    default_identity,
    field_identity,
    is_object_like,
    read_field,
)
from idcollection.core.types import Comparator, GroupKey, IdentityFn, Iteratee, Predicate

__all__ = [
    # Types
    "Comparator",
    "GroupKey",
    "IdentityFn",
    "Iteratee",
    "Predicate",
    # Identity
    "DEFAULT_IDENTITY_FIELD",
    "coerce_key",
    "default_identity",
    "field_identity",
    "is_object_like",
    "read_field",
    # Filter
    "Filter",
    "and_",
    "or_",
]
