"""idcollection: identity-keyed, insertion-ordered collections.

Usage:
    from idcollection import IdentityCollection, and_

    users = IdentityCollection()
    users.add({"_id": 1, "role": "admin"}, {"_id": 2, "role": "viewer"})

    admins = users.find(lambda u: and_([is_active, is_admin], u))
    by_role = users.group_by("role")
    merged = IdentityCollection.merge(users, other_users)
"""

__version__ = "0.1.0"

# Collection
from idcollection.collection import (
    IdentityCollection,
    MergeOvercountWarning,
    merge,
)

# Configuration
from idcollection.config import CollectionSettings

# Core primitives
from idcollection.core import (
    DEFAULT_IDENTITY_FIELD,
    Comparator,
    Filter,
    GroupKey,
    IdentityFn,
    Iteratee,
    Predicate,
    and_,
    default_identity,
    field_identity,
    or_,
)

__all__ = [
    # Version
    "__version__",
    # Collection
    "IdentityCollection",
    "MergeOvercountWarning",
    "merge",
    # Config
    "CollectionSettings",
    # Core
    "DEFAULT_IDENTITY_FIELD",
    "default_identity",
    "field_identity",
    "Filter",
    "and_",
    "or_",
    # Types
    "Comparator",
    "GroupKey",
    "IdentityFn",
    "Iteratee",
    "Predicate",
]
