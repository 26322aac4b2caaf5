"""Calarith: calendar arithmetic over local-time instants.

Calarith normalizes heterogeneous date inputs into canonical instants and
computes derived calendar values with precisely defined rounding: signed
differences, month boundaries, month addition with end-of-month clamping,
and inclusive interval membership. Local time follows the host's rules.

Malformed input never raises. It becomes an invalid Instant that flows
through arithmetic and surfaces as NaN, the way NaN flows through float
math. Only an unusable interval raises (InvalidIntervalError).

Core Types:
    Instant: Millisecond-precision point in time, read in local time
    Interval: Raw (start, end) pair, both ends inclusive

Conversion:
    to_instant: Canonicalize a raw date input
    to_integer: Canonicalize a raw amount

Operations:
    difference_in_milliseconds, difference_in_minutes
    get_month, get_weekday, get_days_in_month
    start_of_month, end_of_month, add_months
    is_before, validate_interval, is_within_interval

Exceptions:
    CalarithError: Base exception
    InvalidIntervalError: Interval start after end, or invalid endpoint

Example:
    >>> from calarith import Instant, add_months
    >>> add_months(Instant(2014, 0, 31), 1)
    Instant(2014, 1, 28, 0, 0, 0, millisecond=0)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from calarith.core.instant import Instant
from calarith.core.interval import Interval

# Conversion
from calarith.convert import to_instant, to_integer

# Operations
from calarith.accessors import get_days_in_month, get_month, get_weekday
from calarith.arithmetic import (
    add_months,
    difference_in_milliseconds,
    difference_in_minutes,
    end_of_month,
    is_before,
    is_within_interval,
    start_of_month,
    validate_interval,
)

# Exceptions
from calarith.errors import CalarithError, InvalidIntervalError

__all__: list[str] = [
    "__version__",
    # Core types
    "Instant",
    "Interval",
    # Conversion
    "to_instant",
    "to_integer",
    # Operations
    "difference_in_milliseconds",
    "difference_in_minutes",
    "get_month",
    "get_weekday",
    "get_days_in_month",
    "start_of_month",
    "end_of_month",
    "add_months",
    "is_before",
    "validate_interval",
    "is_within_interval",
    # Exceptions
    "CalarithError",
    "InvalidIntervalError",
]
