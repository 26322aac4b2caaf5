"""Calendar utilities for Calarith.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, and conversions between civil
dates and day counts relative to the Unix epoch (1970-01-01).

Month arguments named ``month`` are 1-based; arguments named
``month_index`` are 0-based and may lie outside 0-11.

This module is not part of the public API.
"""

from __future__ import annotations

from calarith._internal.constants import DAYS_IN_MONTH, UNIX_EPOCH_WEEKDAY


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be 0 or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1. Years before 1 give ordinals <= 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day of the month; values past the month end count on.

    Returns:
        The ordinal day number.
    """
    y = year - 1
    # Floor division keeps this valid for years <= 0
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day), month 1-based.
    """
    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    # 400-year cycles: each has 146097 days. divmod floors, so any
    # negative ordinal lands in a whole earlier cycle.
    n400, n = divmod(n, 146097)

    # 100-year cycles within the 400: each has 36524 days (except last which has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: each has 365 days (except leap year)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a 4-year or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    doy = n + 1
    month, day = _doy_to_md(year, doy)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


_UNIX_EPOCH_ORDINAL = ymd_to_ordinal(1970, 1, 1)


def make_day(year: int, month_index: int, day: int) -> int:
    """Return days since 1970-01-01 for a possibly out-of-range date.

    Month and day overflow roll over into neighbouring months and years,
    so ``make_day(2020, 2, 0)`` is the last day of February 2020 and
    ``make_day(2020, 13, 1)`` is 2021-02-01.

    Args:
        year: The year.
        month_index: The 0-based month, any integer.
        day: The day of the month, any integer.

    Returns:
        Signed number of days since the Unix epoch.

    Examples:
        >>> make_day(1970, 0, 1)
        0
        >>> make_day(1970, 0, 0)
        -1
    """
    year += month_index // 12
    month_index %= 12
    first = ymd_to_ordinal(year, month_index + 1, 1)
    return first - _UNIX_EPOCH_ORDINAL + day - 1


def day_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to (year, month_index, day)."""
    year, month, day = ordinal_to_ymd(days + _UNIX_EPOCH_ORDINAL)
    return (year, month - 1, day)


def day_to_weekday(days: int) -> int:
    """Convert days since 1970-01-01 to weekday (Sunday=0, Saturday=6)."""
    return (days + UNIX_EPOCH_WEEKDAY) % 7


__all__ = [
    "is_leap_year",
    "days_in_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "make_day",
    "day_to_ymd",
    "day_to_weekday",
]
