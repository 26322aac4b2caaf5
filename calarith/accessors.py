"""Calendar field accessors.

Functions:
    get_month: Local month index (0-11).
    get_weekday: Local day of the week (0=Sunday).
    get_days_in_month: Number of days in the local month.

Each returns NaN for input that canonicalizes to an invalid Instant.
"""

from __future__ import annotations

import math
from typing import Any

from calarith.convert.canonical import to_instant
from calarith.core.instant import Instant


def get_month(date: Any) -> int | float:
    """Return the 0-based month of the given date.

    Examples:
        >>> get_month(Instant(2012, 1, 29))
        1
    """
    return to_instant(date).month


def get_weekday(date: Any) -> int | float:
    """Return the day of the week of the given date (0=Sunday).

    Examples:
        >>> get_weekday(Instant(2012, 1, 29))  # a Wednesday
        3
    """
    return to_instant(date).weekday


def get_days_in_month(date: Any) -> int | float:
    """Return the number of days in the month of the given date.

    The count is read from day 0 of the following month at local
    midnight, which is the last day of the date's own month.

    Args:
        date: The given date.

    Returns:
        The number of days (28-31), or NaN if ``date`` is invalid.

    Examples:
        >>> get_days_in_month(Instant(2000, 1))
        29
        >>> get_days_in_month(Instant(1900, 1))
        28
    """
    instant = to_instant(date)
    if not instant.is_valid:
        return math.nan
    return Instant(instant.year, instant.month + 1, 0).day


__all__ = [
    "get_month",
    "get_weekday",
    "get_days_in_month",
]
