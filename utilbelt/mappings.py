"""
Utilbelt Mappings
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from typing import Any, Literal, Mapping

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value
from .validators import is_number

# Classes --------------------------------------------------------------------------------------------------------------

ListMode = Literal["entries", "keys", "values", "record"]


# Methods --------------------------------------------------------------------------------------------------------------

def to_list(mapping: Mapping, mode: ListMode = "entries") -> list | dict[str, Any]:
    """
    Project a mapping into a list, or into a record with string keys.

    Args:
        mapping: Source mapping.
        mode: What to return:
            - "entries" (default): list of (key, value) tuples
            - "keys": list of keys
            - "values": list of values
            - "record": dict with str keys; number keys are converted with str()

    Returns:
        A new list, or a new dict for mode="record".

    Raises:
        TypeError: If mode="record" and a key is neither a string nor a number.
        ValueError: If mode is unknown.

    Examples:
        >>> to_list({"a": 1, "b": 2})
        [('a', 1), ('b', 2)]
        >>> to_list({1: "x", 2: "y"}, mode="record")
        {'1': 'x', '2': 'y'}
    """
    if mode == "entries":
        return list(mapping.items())
    if mode == "keys":
        return list(mapping.keys())
    if mode == "values":
        return list(mapping.values())
    if mode == "record":
        record: dict[str, Any] = {}
        for key, value in mapping.items():
            if isinstance(key, str):
                record[key] = value
            elif is_number(key):
                record[str(key)] = value
            else:
                raise TypeError(f"record keys must be strings or numbers, but got {fmt_value(key)}")
        return record
    raise ValueError(f"Invalid mode: {fmt_value(mode)}. Must be 'entries', 'keys', 'values' or 'record'")


def ensure_list(mapping: abc.MutableMapping, key: Any) -> list:
    """
    Return the list stored at key, storing a new empty list first if the key is missing.

    Mutates mapping when the key is missing.

    Raises:
        TypeError: If mapping is not mutable, key is None, or the stored value is not a list.

    Examples:
        >>> groups = {}
        >>> ensure_list(groups, "a").append(1)
        >>> groups
        {'a': [1]}
    """
    if not isinstance(mapping, abc.MutableMapping):
        raise TypeError(f"ensure_list requires a mutable mapping, but got {fmt_type(mapping)}")
    if key is None:
        raise TypeError("ensure_list key must not be None")

    if key not in mapping:
        mapping[key] = []
    value = mapping[key]
    if not isinstance(value, abc.MutableSequence):
        raise TypeError(f"value at key {fmt_value(key)} is not a list: {fmt_type(value)}")
    return value
