"""Core value types for Calarith.

This module exports:
    - Instant: Millisecond-precision point in time, read in local time
    - Interval: Raw (start, end) pair checked by the interval validator
"""

from __future__ import annotations

from calarith.core.instant import Instant
from calarith.core.interval import Interval

__all__: list[str] = [
    "Instant",
    "Interval",
]
