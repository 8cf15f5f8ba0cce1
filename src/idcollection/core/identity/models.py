"""Identity extraction helpers.

Usage:
    key = default_identity({"_id": 7})      # "7"
    by_sku = field_identity("sku")
    key = by_sku(product)                     # str(product.sku)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

DEFAULT_IDENTITY_FIELD = "_id"

_PRIMITIVES = (str, bytes, int, float)  # bool is an int subclass


def is_object_like(value: Any) -> bool:
    """Check whether a value should be resolved through an identity function.

    Primitives and None are treated as raw keys; everything else is an item.
    """
    return value is not None and not isinstance(value, _PRIMITIVES)


def read_field(item: Any, name: str) -> Any:
    """Read a field from a mapping or an object, returning None when missing."""
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def coerce_key(value: Any) -> str:
    """Coerce a raw value to its key string.

    Bools become ``"true"``/``"false"`` and whole floats drop their fraction,
    so ``1``, ``1.0`` and ``"1"`` share one key. Everything else uses ``str()``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def field_identity(name: str) -> Callable[[Any], str]:
    """Build an identity function reading ``name`` and coercing it to str.

    Args:
        name: Mapping key or attribute name holding the identity.

    Returns:
        Identity function for use with IdentityCollection.
    """

    def identity(item: Any) -> str:
        return coerce_key(read_field(item, name))

    identity.__name__ = f"identity_{name}"
    return identity


def default_identity(item: Any) -> str:
    """Default identity: the item's ``_id`` field, coerced with coerce_key."""
    return coerce_key(read_field(item, DEFAULT_IDENTITY_FIELD))
