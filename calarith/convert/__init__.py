"""Input conversion utilities.

This module provides the canonicalization entry points used by every
Calarith operation:
    - to_instant: raw date input to Instant (or an invalid Instant)
    - to_integer: raw amount to a truncated integer (or NaN)

Examples:
    >>> from calarith.convert import to_instant
    >>> to_instant(1392098430000).is_valid
    True
"""

from __future__ import annotations

from calarith.convert.canonical import to_instant, to_integer

__all__ = [
    "to_instant",
    "to_integer",
]
