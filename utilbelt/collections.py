"""
Utilbelt Collections
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Hashable, Iterable, Iterator, MutableSet, Set
from typing import Any, Generic, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_value

# Classes --------------------------------------------------------------------------------------------------------------

T = TypeVar("T")


class OrderedSet(MutableSet, Generic[T]):
    """
    A set that remembers insertion order, with the stdlib MutableSet API.

    - Iteration, repr and to_list() follow first-insertion order; re-adding an element keeps
      its original position.
    - Membership, len(), add() and discard() are O(1), backed by a dict.
    - Compares equal to any Set with the same elements, order is ignored for equality.
    - Elements must be hashable.
    """

    def __init__(self, initial: Iterable[T] | None = None) -> None:
        self._items: dict[T, None] = {}
        if initial is not None:
            self.update(initial)

    # ----- Set required methods -----

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: T) -> None:
        """Add item at the end unless already present."""
        if not isinstance(item, Hashable):
            raise TypeError(f"OrderedSet elements must be hashable: {fmt_value(item)}")
        self._items[item] = None

    def discard(self, item: T) -> None:
        """Remove item if present."""
        self._items.pop(item, None)

    # ----- Helpers -----

    def update(self, *others: Iterable[T]) -> None:
        """Add all elements of the given iterables, in order."""
        for other in others:
            for item in other:
                self.add(item)

    def copy(self) -> "OrderedSet[T]":
        return self.__class__(self._items)

    def to_list(self) -> list[T]:
        """Return the elements as a new list in insertion order."""
        return list(self._items)

    def clear(self) -> None:
        """Remove all elements."""
        self._items.clear()

    # ----- Equality and representation -----

    @classmethod
    def _from_iterable(cls, it: Iterable[T]) -> "OrderedSet[T]":
        # Operators inherited from Set (|, &, -, ^) build results through this hook
        return cls(it)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._items)!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Set):
            return len(self) == len(other) and all(item in other for item in self._items)
        return NotImplemented

    __hash__ = None
