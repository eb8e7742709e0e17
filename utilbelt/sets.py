"""
Utilbelt Sets

Membership and set algebra helpers working on any collections.abc.Set. Algebra results are
OrderedSet instances that keep the order of the receiver followed by the other sets.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from typing import Any, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import OrderedSet
from .formatters import fmt_type

T = TypeVar("T")


# Methods --------------------------------------------------------------------------------------------------------------

def to_list(s: abc.Set[T]) -> list[T]:
    """Return the elements as a new list in iteration order."""
    return list(s)


def has_any(s: abc.Set[T], *items: Any) -> bool:
    """
    True if at least one of items is in s; False when no items are given.

    Examples:
        >>> has_any({1, 2, 3}, 0, 2)
        True
        >>> has_any({1, 2, 3})
        False
    """
    return any(item in s for item in items)


def includes(s: abc.Set[T], *items: Any) -> bool:
    """
    True if every one of items is in s; True when no items are given.

    A single set argument is expanded, so includes(s, {1, 2}) checks 1 and 2.

    Examples:
        >>> includes({1, 2, 3}, 1, 2)
        True
        >>> includes({1, 2, 3}, {1, 4})
        False
    """
    if len(items) == 1 and isinstance(items[0], abc.Set):
        items = tuple(items[0])
    return all(item in s for item in items)


def union(s: abc.Set[T], *others: abc.Set[T]) -> OrderedSet[T]:
    """
    Return a new OrderedSet with the elements of s and of all others.

    Raises:
        TypeError: If any of others is not a set.
    """
    _validate_sets(others, name="union")
    result = OrderedSet(s)
    result.update(*others)
    return result


def intersection(s: abc.Set[T], *others: abc.Set[T]) -> OrderedSet[T]:
    """
    Return a new OrderedSet with the elements of s that are in every one of others.

    With no others the result is a copy of s.

    Raises:
        TypeError: If any of others is not a set.
    """
    _validate_sets(others, name="intersection")
    return OrderedSet(item for item in s if all(item in other for other in others))


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_sets(others: tuple[Any, ...], *, name: str) -> None:
    for other in others:
        if not isinstance(other, abc.Set):
            raise TypeError(f"{name} arguments must be sets, but got {fmt_type(other)}")
