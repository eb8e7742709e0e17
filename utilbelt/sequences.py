"""
Utilbelt Sequences

Convenience operations over sequences, plus the range/repeat/zip constructors.
Operations return new lists and leave their input untouched, except swap() which mutates
the sequence it is given.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import random
from typing import Any, Callable, Iterable, Sequence, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import OrderedSet
from .formatters import fmt_type, fmt_value
from .selectors import resolve_selector
from .validators import is_number, validate_index, validate_int

T = TypeVar("T")


# Methods --------------------------------------------------------------------------------------------------------------

def first(seq: Sequence[T]) -> T | None:
    """Return the first element, or None for an empty sequence."""
    return seq[0] if len(seq) else None


def last(seq: Sequence[T]) -> T | None:
    """Return the last element, or None for an empty sequence."""
    return seq[-1] if len(seq) else None


def sum_by(seq: Iterable[T], selector: str | Callable | None = None) -> int | float:
    """
    Sum the elements, or the values the selector derives from them.

    Without a selector every element must be a number. bool is not accepted as a number.

    Args:
        seq: Elements to sum.
        selector: Field name or callable producing a number per element.

    Returns:
        The sum, 0 for an empty input.

    Raises:
        TypeError: If a summed value is not a number.
        InvalidSelectorError: If selector is neither a field name nor a callable.

    Examples:
        >>> sum_by([1, 2, 3])
        6
        >>> sum_by([{"x": 1}, {"x": 2}], "x")
        3
    """
    return _total(seq, selector, name="sum_by")


def average(seq: Sequence[T], selector: str | Callable | None = None) -> int | float:
    """
    Arithmetic mean of the elements, or of the values the selector derives from them.

    Returns 0 for an empty sequence. Same argument rules as sum_by().

    Examples:
        >>> average([2, 4, 6])
        4.0
        >>> average([])
        0
    """
    if len(seq) == 0:
        return 0
    return _total(seq, selector, name="average") / len(seq)


def unique(seq: Iterable[T]) -> list[T]:
    """
    Return the elements without duplicates, in first-seen order.

    Hashable elements are deduplicated by equality, unhashable ones (lists, dicts) by identity.
    Booleans are kept apart from numbers, so 1 and True are both retained.

    Examples:
        >>> unique([1, True, 0, False, 1])
        [1, True, 0, False]
    """
    seen_values = set()
    seen_ids = set()
    result = []
    for item in seq:
        if isinstance(item, abc.Hashable):
            # True == 1 and hash(True) == hash(1)
            key = (isinstance(item, bool), item)
            if key in seen_values:
                continue
            seen_values.add(key)
        else:
            if id(item) in seen_ids:
                continue
            seen_ids.add(id(item))
        result.append(item)
    return result


def chunk(seq: Sequence[T], size: int) -> list[list[T]]:
    """
    Split a sequence into consecutive chunks of the given size; the last chunk may be shorter.

    Raises:
        TypeError: If size is not an integer.
        ValueError: If size is not positive.

    Examples:
        >>> chunk([1, 2, 3], 2)
        [[1, 2], [3]]
    """
    validate_int(size, name="chunk size", min_value=1)
    return [list(seq[i:i + size]) for i in range(0, len(seq), size)]


def group_by(seq: Iterable[T], selector: str | Callable) -> dict[Any, list[T]]:
    """
    Group elements by the key the selector derives from each of them.

    Args:
        seq: Elements to group.
        selector: Field name or callable producing a hashable key. Required.

    Returns:
        dict mapping each key to its elements, keys in first-encounter order.

    Raises:
        MissingSelectorError: If selector is None.
        InvalidSelectorError: If selector is neither a field name nor a callable.
        TypeError: If a derived key is not hashable.

    Examples:
        >>> group_by(["a", "ab", "b"], len)
        {1: ['a', 'b'], 2: ['ab']}
    """
    key_of = resolve_selector(selector, name="group_by selector")
    groups: dict[Any, list[T]] = {}
    for index, item in enumerate(seq):
        key = _hashable_key(key_of(item, index), name="group_by")
        groups.setdefault(key, []).append(item)
    return groups


def count_by(seq: Iterable[T], selector: str | Callable | None = None) -> dict[Any, int]:
    """
    Count elements per derived key; without a selector, count occurrences of each element.

    Examples:
        >>> count_by(["a", "b", "a"])
        {'a': 2, 'b': 1}
        >>> count_by([1, 2, 3, 4], lambda n: n % 2 == 0)
        {False: 2, True: 2}
    """
    key_of = resolve_selector(selector, _element, name="count_by selector")
    counts: dict[Any, int] = {}
    for index, item in enumerate(seq):
        key = _hashable_key(key_of(item, index), name="count_by")
        counts[key] = counts.get(key, 0) + 1
    return counts


def to_map(
        seq: Iterable[T],
        key: str | Callable | None = None,
        value: str | Callable | None = None,
) -> dict[Any, Any]:
    """
    Build a dict from a sequence.

    Args:
        seq: Source elements.
        key: Selector for the keys, defaults to the element's position.
        value: Selector for the values, defaults to the element itself.

    Returns:
        dict in first-encounter key order; a repeated key keeps the last value.

    Examples:
        >>> to_map(["a", "b"])
        {0: 'a', 1: 'b'}
        >>> to_map([{"id": 7, "name": "x"}], key="id", value="name")
        {7: 'x'}
    """
    key_of = resolve_selector(key, _position, name="to_map key")
    value_of = resolve_selector(value, _element, name="to_map value")
    result: dict[Any, Any] = {}
    for index, item in enumerate(seq):
        result[_hashable_key(key_of(item, index), name="to_map")] = value_of(item, index)
    return result


def to_set(seq: Iterable[T], selector: str | Callable | None = None) -> OrderedSet:
    """
    Collect the elements, or the values the selector derives from them, into an OrderedSet.

    Examples:
        >>> to_set([3, 1, 3, 2])
        OrderedSet([3, 1, 2])
    """
    value_of = resolve_selector(selector, _element, name="to_set selector")
    return OrderedSet(value_of(item, index) for index, item in enumerate(seq))


def sort_asc(seq: Iterable[T], selector: str | Callable | None = None) -> list[T]:
    """
    Return a new list sorted in ascending order, stable for equal keys.

    Sort keys are the elements themselves, or the values the selector derives from them.
    All keys must be numbers, or all keys must be strings.

    Raises:
        TypeError: If a key is neither a number nor a string, or numbers and strings are mixed.

    Examples:
        >>> sort_asc([3, 1, 2])
        [1, 2, 3]
        >>> sort_asc([{"v": 2}, {"v": 1}], "v")
        [{'v': 1}, {'v': 2}]
    """
    return _sort_by(seq, selector, descending=False)


def sort_desc(seq: Iterable[T], selector: str | Callable | None = None) -> list[T]:
    """
    Return a new list sorted in descending order, stable for equal keys.

    Same key rules as sort_asc().
    """
    return _sort_by(seq, selector, descending=True)


def swap(seq: abc.MutableSequence[T], i: int, j: int) -> abc.MutableSequence[T]:
    """
    Swap the elements at positions i and j in place and return the same sequence.

    Raises:
        TypeError: If seq is not a mutable sequence or an index is not an integer.
        IndexError: If an index is negative or past the end.
    """
    if not isinstance(seq, abc.MutableSequence):
        raise TypeError(f"swap requires a mutable sequence, but got {fmt_type(seq)}")
    validate_index(i, len(seq), name="i")
    validate_index(j, len(seq), name="j")
    if i != j:
        seq[i], seq[j] = seq[j], seq[i]
    return seq


def shuffle(seq: Iterable[T], *, seed: int | None = None) -> list[T]:
    """
    Return a shuffled copy of the elements, the input is left untouched.

    Uses the Fisher-Yates algorithm. When seed is given a dedicated random.Random(seed)
    makes the result deterministic, otherwise the module-level generator is used.
    """
    rng = random.Random(seed) if seed is not None else random
    result = list(seq)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def compact(seq: Iterable[T]) -> list[T]:
    """Return the truthy elements: drops None, False, zeros, empty strings and empty containers."""
    return [item for item in seq if item]


def enumerated(seq: Iterable[T]) -> list[tuple[T, int]]:
    """
    Pair every element with its position, value first.

    Examples:
        >>> enumerated(["a", "b"])
        [('a', 0), ('b', 1)]
    """
    return [(item, index) for index, item in enumerate(seq)]


# Constructors ---------------------------------------------------------------------------------------------------------

def num_range(start: int | float, end: int | float | None = None, step: int | float = 1) -> list[int | float]:
    """
    Generate numbers from start (inclusive) to end (exclusive) by step.

    With a single argument the range is [0, start). Floats are accepted, unlike range().

    Raises:
        TypeError: If an argument is not a number.
        ValueError: If step is 0.

    Examples:
        >>> num_range(5)
        [0, 1, 2, 3, 4]
        >>> num_range(5, 1, -1)
        [5, 4, 3, 2]
        >>> num_range(0, 1, 0.25)
        [0, 0.25, 0.5, 0.75]
    """
    if end is None:
        start, end = 0, start
    for name, arg in (("start", start), ("end", end), ("step", step)):
        if not is_number(arg):
            raise TypeError(f"num_range {name} must be a number, but got {fmt_type(arg)}")
    if step == 0:
        raise ValueError("num_range step must not be 0")

    result = []
    current = start
    while (current < end) if step > 0 else (current > end):
        result.append(current)
        current += step
    return result


def repeat(length: int, value: T | Callable[[], T]) -> list[T]:
    """
    Build a list of the given length filled with value.

    If value is callable it is called once per slot and its results are used instead.

    Raises:
        TypeError: If length is not an integer.
        ValueError: If length is negative.

    Examples:
        >>> repeat(3, "a")
        ['a', 'a', 'a']
        >>> repeat(2, list)
        [[], []]
    """
    validate_int(length, name="repeat length", min_value=0)
    if callable(value):
        return [value() for _ in range(length)]
    return [value] * length


def zip_all(*seqs: Sequence[Any]) -> list[list[Any]]:
    """
    Combine sequences element-wise, padding shorter ones with None.

    Examples:
        >>> zip_all([1, 2], ["a"])
        [[1, 'a'], [2, None]]
        >>> zip_all()
        []
    """
    if not seqs:
        return []
    longest = max(len(s) for s in seqs)
    return [[s[i] if i < len(s) else None for s in seqs] for i in range(longest)]


# Private Methods ------------------------------------------------------------------------------------------------------

def _element(item: Any) -> Any:
    return item


def _position(item: Any, index: int) -> int:
    return index


def _hashable_key(key: Any, *, name: str) -> abc.Hashable:
    if not isinstance(key, abc.Hashable):
        raise TypeError(f"{name} key must be hashable, but got {fmt_value(key)}")
    return key


def _total(seq: Iterable[Any], selector: str | Callable | None, *, name: str) -> int | float:
    value_of = resolve_selector(selector, _element, name=f"{name} selector")
    total = 0
    for index, item in enumerate(seq):
        value = value_of(item, index)
        if not is_number(value):
            raise TypeError(f"{name} requires numbers, but got {fmt_value(value)}; pass a selector for other elements")
        total += value
    return total


def _sort_by(seq: Iterable[T], selector: str | Callable | None, *, descending: bool) -> list[T]:
    """Shared implementation of sort_asc() and sort_desc()."""
    items = list(seq)
    if not items:
        return items

    key_of = resolve_selector(selector, _element, name="sort selector")
    keys = [key_of(item, index) for index, item in enumerate(items)]

    if all(is_number(k) for k in keys) or all(isinstance(k, str) for k in keys):
        order = sorted(range(len(items)), key=keys.__getitem__, reverse=descending)
        return [items[i] for i in order]

    for k in keys:
        if not is_number(k) and not isinstance(k, str):
            raise TypeError(f"sort keys must be numbers or strings, but got {fmt_value(k)}")
    raise TypeError("sort keys must be all numbers or all strings, not a mix of both")
