"""Internal utilities for Calarith.

This module contains private implementation details:
    - Constants and magic numbers
    - Proleptic Gregorian calendar math
    - Host local-time offset resolution

Note: This module is not part of the public API.
"""

from __future__ import annotations

from calarith._internal.calendar import days_in_month, is_leap_year
from calarith._internal.localtime import local_offset, local_to_epoch

__all__: list[str] = [
    "days_in_month",
    "is_leap_year",
    "local_offset",
    "local_to_epoch",
]
