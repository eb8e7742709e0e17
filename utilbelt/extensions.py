"""
Method syntax for utilbelt operations.

XList, XDict, XSet and XStr subclass the built-in containers and expose the free functions of
utilbelt.sequences, mappings, sets, strings and deep as methods, so operations can be chained:

    >>> XList([3, 1, 3, 2]).unique().sort_asc().last()
    3

Built-in types are never patched; use wrap() to convert a plain value.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from typing import Any, Callable, Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from . import deep, mappings, sequences, sets, strings
from .collections import OrderedSet
from .formatters import fmt_type


# Classes --------------------------------------------------------------------------------------------------------------

class XList(list):
    """list with the utilbelt sequence operations as methods; list results are XList."""

    # ----- Constructors -----

    @classmethod
    def range(cls, start: int | float, end: int | float | None = None, step: int | float = 1) -> "XList":
        return cls(sequences.num_range(start, end, step))

    @classmethod
    def repeat(cls, length: int, value: Any) -> "XList":
        return cls(sequences.repeat(length, value))

    @classmethod
    def zip(cls, *seqs: Sequence[Any]) -> "XList":
        return cls(XList(row) for row in sequences.zip_all(*seqs))

    # ----- Access and aggregation -----

    def first(self) -> Any:
        return sequences.first(self)

    def last(self) -> Any:
        return sequences.last(self)

    def sum_by(self, selector: str | Callable | None = None) -> int | float:
        return sequences.sum_by(self, selector)

    def average(self, selector: str | Callable | None = None) -> int | float:
        return sequences.average(self, selector)

    # ----- Transformations -----

    def unique(self) -> "XList":
        return XList(sequences.unique(self))

    def chunk(self, size: int) -> "XList":
        return XList(XList(part) for part in sequences.chunk(self, size))

    def compact(self) -> "XList":
        return XList(sequences.compact(self))

    def enumerated(self) -> "XList":
        return XList(sequences.enumerated(self))

    def shuffle(self, *, seed: int | None = None) -> "XList":
        return XList(sequences.shuffle(self, seed=seed))

    def sort_asc(self, selector: str | Callable | None = None) -> "XList":
        return XList(sequences.sort_asc(self, selector))

    def sort_desc(self, selector: str | Callable | None = None) -> "XList":
        return XList(sequences.sort_desc(self, selector))

    def swap(self, i: int, j: int) -> "XList":
        """Swap two elements in place and return self."""
        sequences.swap(self, i, j)
        return self

    # ----- Conversions -----

    def group_by(self, selector: str | Callable) -> "XDict":
        return XDict((key, XList(items)) for key, items in sequences.group_by(self, selector).items())

    def count_by(self, selector: str | Callable | None = None) -> "XDict":
        return XDict(sequences.count_by(self, selector))

    def to_map(self, key: str | Callable | None = None, value: str | Callable | None = None) -> "XDict":
        return XDict(sequences.to_map(self, key, value))

    def to_set(self, selector: str | Callable | None = None) -> "XSet":
        return XSet(sequences.to_set(self, selector))

    # ----- Deep operations -----

    def deep_clone(self, *, max_depth: int | None = None) -> "XList":
        return deep.deep_clone(self, max_depth=max_depth)

    def deep_equals(self, other: Any, *, max_depth: int | None = None) -> bool:
        return deep.deep_equals(self, other, max_depth=max_depth)


class XDict(dict):
    """dict with the utilbelt mapping and deep operations as methods."""

    def to_list(self, mode: mappings.ListMode = "entries") -> "XList | XDict":
        result = mappings.to_list(self, mode)
        return XDict(result) if isinstance(result, dict) else XList(result)

    def ensure_list(self, key: Any) -> list:
        """Return the list at key, storing a new empty one first if missing."""
        return mappings.ensure_list(self, key)

    def deep_clone(self, *, max_depth: int | None = None) -> "XDict":
        return deep.deep_clone(self, max_depth=max_depth)

    def deep_merge(self, source: abc.Mapping, *, max_depth: int | None = None) -> "XDict":
        """Return a deep clone of self with source merged in; self is not modified."""
        return deep.deep_merge(self, source, max_depth=max_depth)

    def deep_equals(self, other: Any, *, max_depth: int | None = None) -> bool:
        return deep.deep_equals(self, other, max_depth=max_depth)


class XSet(OrderedSet):
    """OrderedSet with the utilbelt set operations as methods; set results are XSet."""

    def has_any(self, *items: Any) -> bool:
        return sets.has_any(self, *items)

    def includes(self, *items: Any) -> bool:
        return sets.includes(self, *items)

    def union(self, *others: abc.Set) -> "XSet":
        return XSet(sets.union(self, *others))

    def intersection(self, *others: abc.Set) -> "XSet":
        return XSet(sets.intersection(self, *others))


class XStr(str):
    """
    str with the utilbelt text operations as methods; str results are XStr.

    capitalize() follows utilbelt.strings.capitalize(): only the first character changes.
    """

    def capitalize(self) -> "XStr":
        return XStr(strings.capitalize(self))

    def split_words(self) -> XList:
        return XList(XStr(w) for w in strings.split_words(self))

    def camel_case(self) -> "XStr":
        return XStr(strings.camel_case(self))

    def kebab_case(self) -> "XStr":
        return XStr(strings.kebab_case(self))

    def snake_case(self) -> "XStr":
        return XStr(strings.snake_case(self))

    def truncate(self, n: int, *, ellipsis: str = "...") -> "XStr":
        return XStr(strings.truncate(self, n, ellipsis=ellipsis))

    def reverse(self) -> "XStr":
        return XStr(strings.reverse(self))

    def is_empty(self) -> bool:
        return strings.is_empty(self)

    def slugify(self) -> "XStr":
        return XStr(strings.slugify(self))

    def replace_range(self, start: int, end: int, replacement: str = "") -> "XStr":
        return XStr(strings.replace_range(self, start, end, replacement))


# Methods --------------------------------------------------------------------------------------------------------------

def wrap(value: Any) -> XList | XDict | XSet | XStr:
    """
    Convert a built-in value into its method-syntax counterpart.

    str → XStr, Mapping → XDict, Set → XSet, any other iterable → XList.
    Values that are already wrapped are returned unchanged.

    Raises:
        TypeError: If value is not text, a mapping or an iterable.

    Examples:
        >>> wrap("hello world").camel_case()
        'helloWorld'
        >>> wrap({3, 1}).has_any(1)
        True
    """
    if isinstance(value, (XList, XDict, XSet, XStr)):
        return value
    if isinstance(value, str):
        return XStr(value)
    if isinstance(value, abc.Mapping):
        return XDict(value)
    if isinstance(value, abc.Set):
        return XSet(value)
    if isinstance(value, abc.Iterable) and not isinstance(value, (bytes, bytearray)):
        return XList(value)
    raise TypeError(f"cannot wrap {fmt_type(value)}: expected str, mapping, set or iterable")
