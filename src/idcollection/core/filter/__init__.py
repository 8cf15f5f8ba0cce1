"""Predicate combinators (AND / OR over predicate lists)."""

from idcollection.core.filter.operations import Filter, and_, or_

__all__ = [
    "Filter",
    "and_",
    "or_",
]
