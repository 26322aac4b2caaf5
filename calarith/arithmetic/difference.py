"""Differences between instants.

Both functions canonicalize their arguments and return a signed count of
``left - right``. An invalid argument makes the result NaN.
"""

from __future__ import annotations

import math
from typing import Any

from calarith._internal.constants import MILLIS_PER_MINUTE
from calarith.convert.canonical import to_instant


def difference_in_milliseconds(left: Any, right: Any) -> int | float:
    """Return the number of milliseconds between two dates.

    Args:
        left: The later date.
        right: The earlier date.

    Returns:
        ``left - right`` in milliseconds, or NaN if either is invalid.

    Examples:
        >>> from calarith.core.instant import Instant
        >>> difference_in_milliseconds(
        ...     Instant(2014, 6, 2, 12, 30, 21, 700),
        ...     Instant(2014, 6, 2, 12, 30, 20, 600),
        ... )
        1100
    """
    return to_instant(left).epoch_millis - to_instant(right).epoch_millis


def difference_in_minutes(left: Any, right: Any) -> int | float:
    """Return the number of full minutes between two dates.

    A minute counts only once it has fully elapsed in the direction of
    the sign, so the result is truncated toward zero.

    Args:
        left: The later date.
        right: The earlier date.

    Returns:
        Signed whole minutes, or NaN if either date is invalid.

    Examples:
        >>> from calarith.core.instant import Instant
        >>> difference_in_minutes(
        ...     Instant(2014, 6, 2, 12, 20, 0),
        ...     Instant(2014, 6, 2, 12, 7, 59),
        ... )
        12
        >>> difference_in_minutes(
        ...     Instant(2000, 0, 1, 10, 0, 0),
        ...     Instant(2000, 0, 1, 10, 1, 59),
        ... )
        -1
    """
    diff = difference_in_milliseconds(left, right)
    if isinstance(diff, float) and math.isnan(diff):
        return diff

    minutes = abs(diff) // MILLIS_PER_MINUTE
    return minutes if diff >= 0 else -minutes


__all__ = [
    "difference_in_milliseconds",
    "difference_in_minutes",
]
