"""Comparison operations for instants.

This module provides ordering and interval membership tests over raw
inputs. Arguments are canonicalized first; any comparison involving an
invalid Instant is False, like comparisons with NaN.

Interval rules:
    - Both endpoints are included.
    - An interval whose start is after its end, or whose endpoints are
      invalid, is a caller error and raises InvalidIntervalError rather
      than answering False.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from calarith.convert.canonical import to_instant
from calarith.core.instant import Instant
from calarith.errors import InvalidIntervalError


def is_before(date: Any, date_to_compare: Any) -> bool:
    """Test if the first date is before the second one.

    Args:
        date: The date that should be before the other one.
        date_to_compare: The date to compare with.

    Returns:
        True if ``date`` is strictly earlier. False if either is invalid.

    Examples:
        >>> is_before(Instant(1989, 6, 10), Instant(1987, 1, 11))
        False
    """
    return to_instant(date) < to_instant(date_to_compare)


def _endpoints(interval: Any) -> tuple[Any, Any]:
    if isinstance(interval, Mapping):
        return interval.get("start"), interval.get("end")
    return getattr(interval, "start", None), getattr(interval, "end", None)


def validate_interval(interval: Any) -> tuple[Instant, Instant]:
    """Canonicalize and check an interval's endpoints.

    Accepts an Interval, a mapping with ``"start"`` and ``"end"`` keys,
    or any object with ``start`` and ``end`` attributes. Missing endpoints
    are treated as invalid.

    Args:
        interval: The interval to check.

    Returns:
        The canonical (start, end) Instants.

    Raises:
        InvalidIntervalError: If start is after end or either endpoint is
            invalid.

    Examples:
        >>> start, end = validate_interval({"start": 0, "end": 1000})
        >>> end.epoch_millis
        1000
    """
    raw_start, raw_end = _endpoints(interval)
    start = to_instant(raw_start)
    end = to_instant(raw_end)

    if not start <= end:
        raise InvalidIntervalError("Invalid interval")

    return start, end


def is_within_interval(date: Any, interval: Any) -> bool:
    """Test if the given date is within the interval, ends included.

    Args:
        date: The date to check.
        interval: The interval to check against.

    Returns:
        True if ``start <= date <= end``. False if ``date`` is invalid.

    Raises:
        InvalidIntervalError: If start is after end or either endpoint is
            invalid.

    Examples:
        >>> from calarith.core.interval import Interval
        >>> is_within_interval(
        ...     Instant(2014, 0, 3),
        ...     Interval(Instant(2014, 0, 1), Instant(2014, 0, 7)),
        ... )
        True
        >>> is_within_interval(
        ...     Instant(2014, 0, 10),
        ...     Interval(Instant(2014, 0, 1), Instant(2014, 0, 7)),
        ... )
        False
    """
    start, end = validate_interval(interval)
    instant = to_instant(date)
    return start <= instant <= end


__all__ = [
    "is_before",
    "validate_interval",
    "is_within_interval",
]
