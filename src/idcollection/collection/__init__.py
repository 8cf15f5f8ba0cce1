"""Identity-keyed collection and cross-collection operations."""

from idcollection.collection.models import IdentityCollection
from idcollection.collection.operations import MergeOvercountWarning, merge

__all__ = [
    "IdentityCollection",
    "MergeOvercountWarning",
    "merge",
]
