"""Core type definitions for idcollection."""

from collections.abc import Callable
from typing import Any

type IdentityFn[T, K] = Callable[[T], K]
"""Maps an item to its identity key. Must be pure and deterministic."""

type Predicate[T] = Callable[[T], Any]
"""Item filter. Collection methods only accept an exact ``True`` as a match."""

type Comparator[T] = Callable[[T, T], int]
"""Two-argument comparator: negative, zero or positive."""

type Iteratee[T, K] = Callable[[Any, T, K, dict[K, T]], Any]
"""Called as ``iteratee(context, item, key, items)``. Returning ``False`` stops iteration."""

type GroupKey = str | int | float | bool
"""Field values that group reliably. Anything else is stringified as-is."""
