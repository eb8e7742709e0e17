"""
Argument validators shared by the container operations.

Validators return the validated value unchanged, so they can be used inline:

    size = validate_int(size, name="size", min_value=1)
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value


# Methods --------------------------------------------------------------------------------------------------------------

def is_int(value: Any) -> bool:
    """True for int instances, excluding bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: Any) -> bool:
    """True for int and float instances, excluding bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_int(value: Any, *, name: str = "value", min_value: int | None = None) -> int:
    """
    Validate that value is an integer, optionally not below min_value.

    Args:
        value: Value to check. bool is rejected even though it subclasses int.
        name: Argument name used in error messages.
        min_value: Inclusive lower bound, or None for no bound.

    Returns:
        int: The original value if valid.

    Raises:
        TypeError: If value is not an integer.
        ValueError: If value is below min_value.

    Examples:
        >>> validate_int(3, name="size", min_value=1)
        3
        >>> validate_int(0, name="size", min_value=1)
        Traceback (most recent call last):
            ...
        ValueError: size must be >= 1, but got <int: 0>
    """
    if not is_int(value):
        raise TypeError(f"{name} must be an integer, but got {fmt_type(value)}")
    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, but got {fmt_value(value)}")
    return value


def validate_index(index: Any, length: int, *, name: str = "index", allow_end: bool = False) -> int:
    """
    Validate a non-negative position inside a container of the given length.

    Args:
        index: Position to check. Negative positions are rejected, there is no wrap-around.
        length: Length of the container.
        name: Argument name used in error messages.
        allow_end: Accept index == length (an insertion point after the last element).

    Returns:
        int: The original index if valid.

    Raises:
        TypeError: If index is not an integer.
        IndexError: If index is outside the container.
    """
    if not is_int(index):
        raise TypeError(f"{name} must be an integer, but got {fmt_type(index)}")
    upper = length if allow_end else length - 1
    if index < 0 or index > upper:
        raise IndexError(f"{name} out of range [0, {upper}]: {fmt_value(index)}")
    return index
