"""
Utilbelt Selectors

A selector tells an operation how to derive a value from each element: by field name or
by a callable. Operations resolve a selector once per call into a plain accessor
`(item, index=None) -> value` and then apply it to every element.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, TypeAlias

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidSelectorError, MissingSelectorError
from .formatters import fmt_type

logger = logging.getLogger(__name__)

Accessor: TypeAlias = Callable[..., Any]


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class ByKey:
    """
    Selector reading a named field off each element.

    Mappings are read with item.get(name), other objects with getattr(item, name, None).
    A missing field yields None, never an error, and the value is returned as-is.
    """
    name: str

    def accessor(self) -> Accessor:
        name = self.name

        def read_field(item: Any, index: int | None = None) -> Any:
            if isinstance(item, abc.Mapping):
                return item.get(name)
            return getattr(item, name, None)

        return read_field


@dataclass(frozen=True)
class ByFunction:
    """
    Selector applying a callable to each element.

    The callable receives the element. The element's index is passed as a second argument
    when with_index is True, or, with the default with_index=None, when the signature has
    two required positional parameters. Optional parameters never receive the index, so
    round, str.strip or str.split are called with the element only.
    """
    fn: Callable[..., Any]
    with_index: bool | None = None

    def accessor(self) -> Accessor:
        fn = self.fn
        with_index = _requires_index(fn) if self.with_index is None else self.with_index
        if with_index:
            return lambda item, index=None: fn(item, index)
        return lambda item, index=None: fn(item)


Selector: TypeAlias = ByKey | ByFunction


# Methods --------------------------------------------------------------------------------------------------------------

def as_selector(selector: Any, *, name: str = "selector") -> Selector | None:
    """
    Normalize raw selector input into its tagged form.

    Args:
        selector: A field name (str), a callable, a ByKey/ByFunction, or None.
        name: Argument name used in error messages.

    Returns:
        ByKey or ByFunction, or None when no selector was given.

    Raises:
        InvalidSelectorError: If selector is anything else (number, mapping, bool, ...).

    Examples:
        >>> as_selector("age")
        ByKey(name='age')
        >>> as_selector(None) is None
        True
    """
    if selector is None or isinstance(selector, (ByKey, ByFunction)):
        return selector
    if isinstance(selector, str):
        return ByKey(selector)
    if callable(selector):
        return ByFunction(selector)
    raise InvalidSelectorError(f"{name} must be a callable or a field name, but got {fmt_type(selector)}")


def resolve_selector(
        selector: Any = None,
        fallback: Callable[..., Any] | None = None,
        *,
        name: str = "selector",
) -> Accessor:
    """
    Resolve a selector into an accessor function `(item, index=None) -> value`.

    Args:
        selector: A field name, a callable, a ByKey/ByFunction, or None.
        fallback: Extractor used when selector is None. Each operation passes its own
            default, e.g. the element itself or its index.
        name: Argument name used in error messages.

    Returns:
        Accessor applying the selector to a single element.

    Raises:
        InvalidSelectorError: If selector is neither a field name nor a callable,
            or if fallback is given but not callable.
        MissingSelectorError: If selector is None and no fallback is given.

    Examples:
        >>> resolve_selector("x")({"x": 5})
        5
        >>> resolve_selector(lambda i: i * 2)(5)
        10
        >>> resolve_selector(None, fallback=abs)(-42)
        42
    """
    tagged = as_selector(selector, name=name)
    if tagged is not None:
        return tagged.accessor()

    if fallback is None:
        raise MissingSelectorError(f"{name} is required: no default extractor for this operation")
    if not callable(fallback):
        raise InvalidSelectorError(f"fallback must be callable, but got {fmt_type(fallback)}")

    logger.debug("%s not given, using fallback %r", name, fallback)
    return ByFunction(fallback).accessor()


# Private Methods ------------------------------------------------------------------------------------------------------

def _requires_index(fn: Callable[..., Any]) -> bool:
    """True if fn has at least two positional parameters without a default."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # Some builtins expose no signature, call them with the element only
        return False

    required = 0
    for param in signature.parameters.values():
        if (
                param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
                and param.default is param.empty
        ):
            required += 1
    return required >= 2
