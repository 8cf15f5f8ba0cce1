"""Operations across several collections."""

from __future__ import annotations

import warnings
from typing import Any, TypeVar

from idcollection.collection.models import IdentityCollection
from idcollection.config import CollectionSettings

T = TypeVar("T")
K = TypeVar("K")


class MergeOvercountWarning(UserWarning):
    """Merged collections shared identities, so the merged length overcounts."""


def merge(
    *collections: IdentityCollection[T, K],
    settings: CollectionSettings | None = None,
) -> IdentityCollection[T, K]:
    """Merge several collections into a new one.

    Uses the identity function of the first collection. Items are unioned in
    argument order, later collections overwriting earlier ones on shared keys.
    The merged ``length`` is the sum of the input lengths, so it is larger
    than ``len(merged.items)`` when inputs share identities. A
    MergeOvercountWarning is emitted in that case unless disabled through
    ``settings.warn_on_merge_overcount``.

    Collections with different identity functions should not be merged.

    Args:
        *collections: Collections to merge.
        settings: Settings to use. Loaded from the environment only when needed.

    Returns:
        New collection owning its own item dict.
    """
    if not collections:
        return IdentityCollection()

    merged: IdentityCollection[T, K] = IdentityCollection(collections[0].identity_fn)
    items: dict[Any, Any] = {}
    length = 0

    for collection in collections:
        items.update(collection.items)
        length += collection.length

    merged.items = items
    merged.length = length

    if length != len(items):
        settings = settings or CollectionSettings()
        if settings.warn_on_merge_overcount:
            warnings.warn(
                f"merge() summed length {length} but holds {len(items)} distinct keys. "
                f"Inputs shared identities; length keeps the summed value.",
                MergeOvercountWarning,
                stacklevel=2,
            )

    return merged
