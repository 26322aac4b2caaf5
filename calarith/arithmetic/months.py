"""Month arithmetic for instants.

This module provides month boundaries and month addition with
end-of-month clamping.

Clamping behavior:
    When adding months lands on a day the target month does not have
    (e.g., Jan 31 + 1 month), the result is the last day of the target
    month instead of overflowing into the month after it.

Every month boundary is found with the "day 0 of the next month" rule:
day 0 of a month is the last day of the month before it, which absorbs
month lengths, leap years, and year rollover without a lookup table.

Examples:
    add_months(Instant(2014, 8, 1), 5)  -> Instant(2015, 1, 1)
    add_months(Instant(2023, 0, 31), 1) -> Instant(2023, 1, 28)
    add_months(Instant(2024, 0, 31), 1) -> Instant(2024, 1, 29)
"""

from __future__ import annotations

import math
from typing import Any

from calarith.convert.canonical import to_instant, to_integer
from calarith.core.instant import Instant


def start_of_month(date: Any) -> Instant:
    """Return the start of the month for the given date.

    The result is day 1 at 00:00:00.000 local time.

    Args:
        date: The original date.

    Returns:
        A new Instant, invalid if ``date`` is invalid.

    Examples:
        >>> start_of_month(Instant(2014, 8, 2, 11, 55, 0))
        Instant(2014, 8, 1, 0, 0, 0, millisecond=0)
    """
    return to_instant(date).replace(day=1, hour=0, minute=0, second=0, millisecond=0)


def end_of_month(date: Any) -> Instant:
    """Return the end of the month for the given date.

    The result is the last day of the month at 23:59:59.999 local time.

    Args:
        date: The original date.

    Returns:
        A new Instant, invalid if ``date`` is invalid.

    Examples:
        >>> end_of_month(Instant(2014, 8, 2, 11, 55, 0))
        Instant(2014, 8, 30, 23, 59, 59, millisecond=999)
    """
    instant = to_instant(date)
    return instant.replace(
        month=instant.month + 1,
        day=0,
        hour=23,
        minute=59,
        second=59,
        millisecond=999,
    )


def add_months(date: Any, amount: Any) -> Instant:
    """Add the specified number of months to the given date.

    Positive fractional amounts are floored and negative ones ceiled.
    The day of the month is clamped to the last day of the target month
    and the local time of day is kept.

    Args:
        date: The date to be changed.
        amount: The number of months to add; negative subtracts.

    Returns:
        A new Instant, invalid if ``date`` is invalid or ``amount`` is
        not a number.

    Examples:
        >>> add_months(Instant(2014, 8, 1), 5)
        Instant(2015, 1, 1, 0, 0, 0, millisecond=0)

        >>> add_months(Instant(2014, 0, 31, 9, 30), 1)
        Instant(2014, 1, 28, 9, 30, 0, millisecond=0)
    """
    instant = to_instant(date)
    months = to_integer(amount)
    if isinstance(months, float) and math.isnan(months):
        return Instant.invalid()
    if not instant.is_valid:
        return instant
    if months == 0:
        # Re-deriving fields could move a time in a repeated DST hour
        return instant

    day_of_month = instant.day
    end_of_desired_month = instant.replace(month=instant.month + months + 1, day=0)
    if not end_of_desired_month.is_valid or day_of_month >= end_of_desired_month.day:
        return end_of_desired_month

    # end_of_desired_month may have had its wall time moved by a DST
    # transition on the last day of the month, so rebuild from the
    # original instant to keep its time of day.
    return instant.replace(
        year=end_of_desired_month.year,
        month=end_of_desired_month.month,
        day=day_of_month,
    )


__all__ = [
    "start_of_month",
    "end_of_month",
    "add_months",
]
