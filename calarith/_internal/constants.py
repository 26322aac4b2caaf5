"""Internal constants for Calarith.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR  # 86_400_000

# Largest representable distance from the Unix epoch, in either direction
# (100,000,000 days, the ECMAScript time range)
MAX_EPOCH_MILLIS: int = 100_000_000 * MILLIS_PER_DAY  # 8.64e15

# 1970-01-01 was a Thursday (Sunday=0)
UNIX_EPOCH_WEEKDAY: int = 4

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


__all__ = [
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "MAX_EPOCH_MILLIS",
    "UNIX_EPOCH_WEEKDAY",
    "DAYS_IN_MONTH",
]
