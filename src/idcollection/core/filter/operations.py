"""Pure predicate combinators.

Stateless functions composing a list of predicates against shared arguments.
Typically used inside a ``find`` predicate:

    collection.find(lambda item: and_([is_open, is_urgent], item))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def and_(predicates: Iterable[Callable[..., Any]], *args: Any) -> bool:
    """AND all predicate results, stopping at the first falsy one.

    Args:
        predicates: Predicates applied in order.
        *args: Arguments passed to every predicate.

    Returns:
        False at the first falsy result, True otherwise (also for no predicates).
    """
    for predicate in predicates:
        if not predicate(*args):
            return False
    return True


def or_(predicates: Iterable[Callable[..., Any]], *args: Any) -> Any:
    """OR all predicate results. Every predicate is invoked, no short-circuit.

    Args:
        predicates: Predicates applied in order.
        *args: Arguments passed to every predicate.

    Returns:
        None when there are no predicates, otherwise the accumulated ``or``
        of the results (first truthy value, or the last falsy one).
    """
    outcome = None
    for predicate in predicates:
        value = predicate(*args)
        outcome = outcome or value
    return outcome


class Filter:
    """Namespace exposing the combinators, e.g. ``IdentityCollection.filter.and_``."""

    and_ = staticmethod(and_)
    or_ = staticmethod(or_)
