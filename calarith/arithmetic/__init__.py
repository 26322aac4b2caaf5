"""Calendar arithmetic operations.

This module provides functions for calendar arithmetic over raw inputs.
Every function canonicalizes its date arguments with
``calarith.convert.to_instant`` and propagates invalid Instants.

Difference Operations (from calarith.arithmetic.difference):
    - difference_in_milliseconds: Signed millisecond difference
    - difference_in_minutes: Signed whole minutes, truncated toward zero

Month Operations (from calarith.arithmetic.months):
    - start_of_month: Day 1 at 00:00:00.000 local time
    - end_of_month: Last day at 23:59:59.999 local time
    - add_months: Add months with end-of-month clamping

Comparison Operations (from calarith.arithmetic.comparisons):
    - is_before: Strict ordering
    - validate_interval: Check an interval's endpoints
    - is_within_interval: Inclusive interval membership
"""

from __future__ import annotations

from calarith.arithmetic.difference import (
    difference_in_milliseconds,
    difference_in_minutes,
)
from calarith.arithmetic.months import (
    add_months,
    end_of_month,
    start_of_month,
)
from calarith.arithmetic.comparisons import (
    is_before,
    is_within_interval,
    validate_interval,
)

__all__ = [
    # Difference operations
    "difference_in_milliseconds",
    "difference_in_minutes",
    # Month operations
    "start_of_month",
    "end_of_month",
    "add_months",
    # Comparison operations
    "is_before",
    "validate_interval",
    "is_within_interval",
]
