"""
Utilbelt Deep Value Engine

Structural clone, merge and equality over nested value graphs built from mappings (records),
non-text sequences, functions, None and scalars. All three operations share value_kind()
as their single classification of a value.

Cycles are not detected: a self-referencing input recurses until Python's recursion limit,
or until max_depth when one is given.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import copy
import logging
import math
import numbers
from enum import StrEnum, unique
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidMergeSourceError
from .formatters import fmt_type, fmt_value

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class ValueKind(StrEnum):
    """Closed classification of values in a nested value graph."""
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    RECORD = "record"
    FUNCTION = "function"
    ABSENT = "absent"


# Sequences treated as atomic values rather than containers of elements
_ATOMIC_SEQUENCES = (str, bytes, bytearray, range, memoryview)


# Methods --------------------------------------------------------------------------------------------------------------

def value_kind(value: Any) -> ValueKind:
    """
    Classify a value for the deep operations.

    Returns:
        ABSENT for None, FUNCTION for callables other than classes, RECORD for mappings,
        SEQUENCE for non-text sequences (list, tuple, ...) and SCALAR for anything else.

    Examples:
        >>> value_kind([1, 2])
        <ValueKind.SEQUENCE: 'sequence'>
        >>> value_kind("text")
        <ValueKind.SCALAR: 'scalar'>
    """
    if value is None:
        return ValueKind.ABSENT
    if callable(value) and not isinstance(value, type):
        return ValueKind.FUNCTION
    if isinstance(value, abc.Mapping):
        return ValueKind.RECORD
    if isinstance(value, abc.Sequence) and not isinstance(value, _ATOMIC_SEQUENCES):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def deep_clone(value: Any, *, max_depth: int | None = None) -> Any:
    """
    Return a structural copy of value in which no mutable record or sequence node is shared with the original.

    Cloning rules per node:
        - list (and subclasses): shallow copy of the instance with every element cloned.
        - tuple: rebuilt from cloned elements, named tuples positionally. An empty tuple comes
          back as the interpreter's shared empty tuple, which is immutable and safe to share.
        - any other sequence: a list of cloned elements.
        - dict (and subclasses such as defaultdict, OrderedDict): shallow copy of the instance
          with every value cloned. Keys are hashable and kept as they are.
        - any other mapping: a dict of cloned values.
        - mutable set and bytearray leaves: copied.
        - functions, None and other scalars: kept by reference.

    Args:
        value: Any nested value.
        max_depth: Maximum number of nested record/sequence levels, None for unlimited.

    Returns:
        The cloned value.

    Raises:
        RecursionError: If nesting exceeds max_depth.

    Examples:
        >>> src = {"a": [{"b": 1}]}
        >>> dst = deep_clone(src)
        >>> dst == src, dst["a"][0] is src["a"][0]
        (True, False)
    """
    return _clone(value, 0, max_depth)


def deep_merge(target: abc.Mapping, source: abc.Mapping, *, max_depth: int | None = None) -> abc.MutableMapping:
    """
    Merge source into a deep clone of target and return the clone.

    For every key of source: when both the field in the working copy and the source field are
    records, they are merged recursively; otherwise the source value replaces the field as a
    whole. Sequences are replaced, never merged element-wise. Values taken from source are
    cloned too, so the result shares no record or sequence node with either argument.

    Args:
        target: Mapping to merge into. It is not mutated.
        source: Mapping to merge from. It is not mutated.
        max_depth: Maximum number of nested record/sequence levels, None for unlimited.

    Returns:
        The merged mapping, of the same type as target when target is a dict.

    Raises:
        InvalidMergeSourceError: If source is None or not a mapping.
        TypeError: If target is not a mapping.
        RecursionError: If nesting exceeds max_depth.

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}, "e": 4})
        {'a': 1, 'b': {'c': 2, 'd': 3}, 'e': 4}
        >>> deep_merge({"tags": [1, 2]}, {"tags": [3]})
        {'tags': [3]}
    """
    if not isinstance(source, abc.Mapping):
        raise InvalidMergeSourceError(f"merge source must be a non-null mapping, but got {fmt_type(source)}")
    if not isinstance(target, abc.Mapping):
        raise TypeError(f"merge target must be a mapping, but got {fmt_type(target)}")

    merged = _clone(target, 0, max_depth)
    _merge_into(merged, source, 0, max_depth)
    return merged


def deep_equals(a: Any, b: Any, *, max_depth: int | None = None) -> bool:
    """
    Compare two values structurally.

    Rules, applied in order:
        1. If either value is a function, they are unequal, even the very same function.
        2. Values of different categories are unequal. Categories are None, bool, number,
           str, binary, sequence, record, and the concrete type for anything else.
        3. Equal scalars are equal, except zeros of opposite sign (0.0 vs -0.0).
        4. NaN equals NaN.
        5. None equals only None.
        6. A sequence never equals a record.
        7. Sequences are equal when they have the same length and are equal position by position.
        8. Records are equal when they have the same keys and equal values for every key.
           A key holding None differs from a missing key.

    Records and sequences are always compared element by element, never by identity, so a
    record holding a function is unequal even to itself.

    Args:
        a: First value.
        b: Second value.
        max_depth: Maximum number of nested record/sequence levels, None for unlimited.

    Returns:
        bool: True if the values are structurally equal.

    Raises:
        RecursionError: If nesting exceeds max_depth.

    Examples:
        >>> deep_equals([1, [2, 3]], [1, [2, 3]])
        True
        >>> deep_equals([1, [2, 3]], [1, [3, 2]])
        False
        >>> deep_equals(0.0, -0.0)
        False
        >>> deep_equals({"a": None}, {})
        False
    """
    return _equals(a, b, 0, max_depth)


# Private Methods ------------------------------------------------------------------------------------------------------

def _check_depth(depth: int, max_depth: int | None) -> None:
    if max_depth is not None and depth >= max_depth:
        raise RecursionError(f"value nesting exceeds max_depth {fmt_value(max_depth)}")


def _clone(value: Any, depth: int, max_depth: int | None) -> Any:
    kind = value_kind(value)

    if kind is ValueKind.RECORD:
        _check_depth(depth, max_depth)
        if isinstance(value, dict):
            clone = copy.copy(value)
            for key, item in value.items():
                clone[key] = _clone(item, depth + 1, max_depth)
            return clone
        return {key: _clone(item, depth + 1, max_depth) for key, item in value.items()}

    if kind is ValueKind.SEQUENCE:
        _check_depth(depth, max_depth)
        items = [_clone(item, depth + 1, max_depth) for item in value]
        if isinstance(value, list):
            if type(value) is list:
                return items
            clone = copy.copy(value)
            clone[:] = items
            return clone
        if isinstance(value, tuple):
            if hasattr(value, "_fields"):
                return type(value)(*items)
            return type(value)(items)
        return items

    if kind is ValueKind.SCALAR and isinstance(value, (abc.MutableSet, bytearray)):
        return copy.deepcopy(value)

    return value


def _merge_into(target: abc.MutableMapping, source: abc.Mapping, depth: int, max_depth: int | None) -> None:
    """Overlay source onto target in place; target is a record at nesting level depth."""
    _check_depth(depth, max_depth)

    for key, value in source.items():
        current = target.get(key)
        if (
                key in target
                and value_kind(current) is ValueKind.RECORD
                and value_kind(value) is ValueKind.RECORD
        ):
            # Records of a cloned target are always dicts, so they can be merged in place
            _merge_into(current, value, depth + 1, max_depth)
            continue

        if value_kind(current) is ValueKind.RECORD:
            logger.debug("deep_merge replaces record at key %r with %s", key, fmt_type(value))
        target[key] = _clone(value, depth + 1, max_depth)


def _equals(a: Any, b: Any, depth: int, max_depth: int | None) -> bool:
    kind_a, kind_b = value_kind(a), value_kind(b)

    if kind_a is ValueKind.FUNCTION or kind_b is ValueKind.FUNCTION:
        return False

    if _category(a) != _category(b):
        return False

    if kind_a is ValueKind.ABSENT or kind_b is ValueKind.ABSENT:
        return kind_a is kind_b

    if kind_a is ValueKind.SCALAR and kind_b is ValueKind.SCALAR:
        return _scalar_equals(a, b)

    if kind_a is not kind_b:
        return False

    _check_depth(depth, max_depth)

    if kind_a is ValueKind.SEQUENCE:
        if len(a) != len(b):
            return False
        return all(_equals(x, y, depth + 1, max_depth) for x, y in zip(a, b))

    # Records: a key holding None is not the same as a missing key
    if a.keys() != b.keys():
        return False
    return all(_equals(a[key], b[key], depth + 1, max_depth) for key in a)


def _category(value: Any) -> Any:
    """Type category used by deep_equals() to reject mixed-type comparisons early."""
    if value is None:
        return "absent"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "text"
    if isinstance(value, (bytes, bytearray)):
        return "binary"
    kind = value_kind(value)
    if kind in (ValueKind.SEQUENCE, ValueKind.RECORD):
        return kind.value
    return type(value)


def _scalar_equals(a: Any, b: Any) -> bool:
    if a is b or a == b:
        if isinstance(a, (int, float)) and isinstance(b, (int, float)) and a == 0:
            # 0.0 == -0.0 in Python, the sign of zero is observable though
            return math.copysign(1, a) == math.copysign(1, b)
        return True
    return _is_nan(a) and _is_nan(b)


def _is_nan(value: Any) -> bool:
    return isinstance(value, numbers.Number) and value != value
