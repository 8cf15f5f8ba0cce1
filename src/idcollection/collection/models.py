"""Identity-keyed collection.

Items are deduplicated by an identity function rather than by equality.
Iteration follows insertion order; re-adding an existing identity replaces
the stored item in place.

Usage:
    tasks = IdentityCollection()
    tasks.add({"_id": 1, "title": "write"}, {"_id": 2, "title": "review"})
    tasks.has(1)                     # True
    open_tasks = tasks.find(lambda t: t.get("done") is not True)
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from idcollection.config import CollectionSettings
from idcollection.core.filter import Filter
from idcollection.core.identity import (
    coerce_key,
    default_identity,
    field_identity,
    is_object_like,
    read_field,
)

if TYPE_CHECKING:
    from idcollection.core.types import Comparator, GroupKey, IdentityFn, Iteratee, Predicate

T = TypeVar("T")
K = TypeVar("K")


class IdentityCollection(Generic[T, K]):
    """Insertion-ordered store of items keyed by their identity.

    Structure:
        items[identity_of(item)] = item

    ``length`` is kept in step with ``items`` by every mutating method.
    Collections produced by ``merge`` are the exception: their length is the
    sum of the input lengths (see ``idcollection.collection.operations``).

    Args:
        identity_fn: Custom identity function. Defaults to the ``_id`` field,
            string-coerced.
    """

    filter = Filter

    def __init__(self, identity_fn: IdentityFn[T, K] | None = None):
        if identity_fn is not None and not callable(identity_fn):
            raise TypeError(f"identity_fn must be callable, got {type(identity_fn).__name__}")
        self._identity_fn = identity_fn
        self.items: dict[K, T] = {}
        self.length = 0

    @classmethod
    def from_settings(cls, settings: CollectionSettings | None = None) -> IdentityCollection[T, Any]:
        """Create an empty collection keyed by the configured identity field.

        Args:
            settings: Settings to use. Loaded from the environment when omitted.

        Returns:
            Empty collection whose identity reads ``settings.identity_field``.
        """
        settings = settings or CollectionSettings()
        return cls(field_identity(settings.identity_field))

    @property
    def identity_fn(self) -> IdentityFn[T, K] | None:
        """Custom identity function, or None when the default is in use."""
        return self._identity_fn

    def identity_of(self, item: T) -> K:
        """Compute the identity key of an item."""
        if self._identity_fn is not None:
            return self._identity_fn(item)
        return default_identity(item)  # type: ignore[return-value]

    def _lookup_key(self, key: Any) -> Any:
        """Match a raw key exactly, falling back to its coerced string form.

        Bools never match exactly, since ``True == 1`` would hit an int key.
        """
        if not isinstance(key, bool) and key in self.items:
            return key
        text = coerce_key(key)
        if text in self.items or isinstance(key, bool):
            return text
        return key

    def _resolve_key(self, id_or_item: Any) -> Any:
        if is_object_like(id_or_item):
            return self.identity_of(id_or_item)
        return self._lookup_key(id_or_item)

    # Mutation

    def add(self, *items: T) -> None:
        """Add items. An item whose identity is already stored replaces it."""
        for item in items:
            key = self.identity_of(item)
            if key not in self.items:
                self.length += 1
            self.items[key] = item

    def remove(self, *ids_or_items: Any) -> Any:
        """Remove items by raw key or by item.

        With a single argument, returns the removed item, or ``[]`` when the
        collection is empty or the key is absent. With several arguments,
        returns a list holding the single-argument result for each of them.

        Use ``remove_one`` / ``remove_many`` for None-based results.
        """
        if len(ids_or_items) == 1:
            return self._remove_single(ids_or_items[0])
        return [self._remove_single(id_or_item) for id_or_item in ids_or_items]

    def _remove_single(self, id_or_item: Any) -> T | list[Any]:
        removed = self.remove_one(id_or_item)
        if removed is None:
            return []
        return removed

    def remove_one(self, id_or_item: Any) -> T | None:
        """Remove one item by raw key or by item.

        Returns:
            The removed item, or None if nothing was stored under the key.
        """
        if not self.length:
            return None

        key = self._resolve_key(id_or_item)
        item = self.items.get(key)
        if item is None:
            return None

        del self.items[key]
        self.length -= 1
        return item

    def remove_many(self, ids_or_items: Iterable[Any]) -> list[T | None]:
        """Remove several items in order. One result per argument, None if absent."""
        return [self.remove_one(id_or_item) for id_or_item in ids_or_items]

    def clear(self) -> None:
        """Remove all items."""
        self.items = {}
        self.length = 0

    # Queries

    def has(self, id_or_item_or_predicate: Any) -> bool:
        """Check membership by raw key, by item, or by predicate.

        A predicate matches only when it returns exactly True; the search
        stops at the first match.

        Gotcha: any callable argument is treated as a predicate, including a
        stored item that defines ``__call__``. Check such items by key instead.
        """
        if not self.length:
            return False

        target = id_or_item_or_predicate
        if callable(target):
            return any(target(item) is True for item in self)

        return self.items.get(self._resolve_key(target)) is not None

    def do_when_has(self, key: Any, fn: Callable[..., Any], context: Any = None) -> None:
        """Invoke ``fn(context, item)`` if an item is stored under the raw ``key``.

        Args:
            key: Raw identity key. Items are not resolved.
            fn: Callback receiving the context and the item.
            context: First argument of ``fn``. Defaults to this collection.
        """
        if is_object_like(key):
            return
        item = self.items.get(self._lookup_key(key))
        if item is None:
            return
        fn(self if context is None else context, item)

    def find(self, predicate: Predicate[T]) -> IdentityCollection[T, K]:
        """Return a new collection of the items for which ``predicate`` is True."""
        result: IdentityCollection[T, K] = type(self)(self._identity_fn)
        for item in self:
            if predicate(item) is True:
                result.add(item)
        return result

    def group_by(self, key: str) -> dict[str, IdentityCollection[T, K]]:
        """Group items by the string form of a field value.

        The field should hold a GroupKey (str, int, float, bool); other
        values are stringified as-is and group unreliably.

        Args:
            key: Mapping key or attribute name to group on.

        Returns:
            Dict of coerced group value to a new collection, in first-seen order.
        """
        groups: dict[str, IdentityCollection[T, K]] = {}
        for item in self:
            value: GroupKey = read_field(item, key)
            group = coerce_key(value)
            if group not in groups:
                groups[group] = type(self)(self._identity_fn)
            groups[group].add(item)
        return groups

    def single(self) -> T | None:
        """Return the earliest inserted item still stored, or None if empty."""
        return next(iter(self), None)

    def sort(self, compare: Comparator[T] | None = None) -> list[T]:
        """Return the items as a list, sorted by ``compare`` when given.

        Without a comparator the list is in insertion order.
        """
        result = list(self)
        if callable(compare):
            result.sort(key=functools.cmp_to_key(compare))
        return result

    def each(self, iteratee: Iteratee[T, K], context: Any = None) -> None:
        """Call ``iteratee(context, item, key, items)`` in insertion order.

        ``context`` defaults to this collection. Iteration stops as soon as
        the iteratee returns exactly False.
        """
        context = self if context is None else context
        for key, item in list(self.items.items()):
            if iteratee(context, item, key, self.items) is False:
                break

    @staticmethod
    def merge(*collections: IdentityCollection[Any, Any], **kwargs: Any) -> IdentityCollection[Any, Any]:
        """Merge collections into a new one. See ``idcollection.collection.merge``."""
        from idcollection.collection.operations import merge

        return merge(*collections, **kwargs)

    # Python protocol

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self.items.values()))

    def __contains__(self, id_or_item: Any) -> bool:
        return self.has(id_or_item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(length={self.length}, keys={list(self.items)!r})"
