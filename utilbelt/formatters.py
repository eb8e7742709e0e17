"""
Compact type and value formatters for exception messages.

Every error raised by utilbelt embeds offending arguments through fmt_type() or fmt_value(),
so messages look the same across modules and never fail on objects with a broken __repr__.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Constants ------------------------------------------------------------------------------------------------------------

_MAX_REPR = 80


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any) -> str:
    """
    Format the type of an object (or a type itself) as a display token.

    Returns:
        Token like "<type: int>".

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(dict)
        '<type: dict>'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    type_name = getattr(cls, "__name__", None) or str(cls)
    return f"<type: {type_name}>"


def fmt_value(x: Any) -> str:
    """
    Format a value as a type-value token for exception messages.

    Long reprs are cut to 80 characters, a failing __repr__ is reported instead of raised.
    A ">" inside the repr is escaped so the token stays unambiguous.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("abc")
        "<str: 'abc'>"
    """
    type_name = type(x).__name__
    try:
        repr_ = repr(x)
    except Exception as e:
        repr_ = f"<{type_name} object (repr failed: {type(e).__name__})>"

    repr_ = _fmt_truncate(repr_.replace(">", "\\>"), _MAX_REPR)
    return f"<{type_name}: {repr_}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(repr_: str, max_len: int, ellipsis: str = "...") -> str:
    """Cut repr_ to max_len characters, keeping quotes of a quoted repr outside the ellipsis."""
    if len(repr_) <= max_len:
        return repr_
    if len(repr_) >= 2 and repr_[0] in ("'", '"') and repr_[-1] == repr_[0]:
        inner = repr_[1:1 + max(1, max_len - 2)]
        return f"{repr_[0]}{inner}{repr_[0]}{ellipsis}"
    return repr_[:max(1, max_len)] + ellipsis
