"""Caller-side diagnostics for Calarith.

The arithmetic core never warns or logs: a string date silently becomes an
invalid Instant. Callers that want to hear about that misuse wrap their
calls with the helpers here, which emit a TextInputWarning through the
standard ``warnings`` machinery (so ``-W error`` and
``warnings.catch_warnings`` behave as usual).

    - check_input(value): warn if value is a string, return it unchanged
    - @warn_on_text_input: run check_input on every argument of a call
"""

from __future__ import annotations

import functools
import warnings
from collections.abc import Mapping
from typing import Any, Callable, ParamSpec, TypeVar

P = ParamSpec("P")
T = TypeVar("T")

TEXT_INPUT_MESSAGE = (
    "Calarith does not accept strings as dates and treats them as invalid. "
    "Convert the string to a datetime or epoch milliseconds first."
)


class TextInputWarning(UserWarning):
    """A string was passed where a date was expected."""

    pass


def check_input(value: T, *, stacklevel: int = 2) -> T:
    """Warn if a value is a string, then return it unchanged.

    Interval-like values (mappings with ``start``/``end`` keys, or objects
    with ``start``/``end`` attributes) have their endpoints checked.

    Args:
        value: The value about to be passed to a Calarith function.
        stacklevel: Passed to ``warnings.warn``.

    Returns:
        The value itself.

    Examples:
        >>> check_input(0)
        0
        >>> check_input("2014-01-01")  # emits TextInputWarning
        '2014-01-01'
    """
    for candidate in _candidates(value):
        if isinstance(candidate, str):
            warnings.warn(TEXT_INPUT_MESSAGE, TextInputWarning, stacklevel=stacklevel)
            break
    return value


def _candidates(value: Any) -> list[Any]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, Mapping):
        return [value.get("start"), value.get("end")]
    if hasattr(value, "start") and hasattr(value, "end"):
        return [value.start, value.end]
    return [value]


def warn_on_text_input(func: Callable[P, T]) -> Callable[P, T]:
    """Wrap a function so string arguments emit a TextInputWarning.

    The wrapped function still runs, so the string still becomes an
    invalid Instant inside it.

    Args:
        func: The function to wrap.

    Returns:
        A wrapper with the same name and docstring.

    Examples:
        >>> from calarith import get_month
        >>> checked_get_month = warn_on_text_input(get_month)
        >>> checked_get_month("2014-01-01")  # emits TextInputWarning
        nan
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        for arg in (*args, *kwargs.values()):
            check_input(arg, stacklevel=3)
        return func(*args, **kwargs)

    wrapper._warns_on_text = True  # type: ignore[attr-defined]
    return wrapper


__all__ = [
    "TEXT_INPUT_MESSAGE",
    "TextInputWarning",
    "check_input",
    "warn_on_text_input",
]
