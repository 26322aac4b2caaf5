"""Interval type pairing two raw endpoints.

An Interval is a plain (start, end) pair with no invariant of its own.
Endpoints stay in their raw form until an operation canonicalizes and
validates them, so an inverted Interval can be built but is rejected by
every operation that uses it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Interval:
    """A closed time span between two raw endpoints.

    Both endpoints are included in the interval. Each endpoint may be
    anything the canonicalizer accepts: an Instant, a datetime, or a
    numeric epoch-millisecond timestamp.

    Attributes:
        start: Start of the interval (inclusive).
        end: End of the interval (inclusive).

    Examples:
        >>> from calarith.core.instant import Instant
        >>> Interval(Instant(2014, 0, 1), Instant(2014, 0, 7)).start
        Instant(2014, 0, 1, 0, 0, 0, millisecond=0)

        >>> Interval(10, 0)  # inverted intervals are only rejected on use
        Interval(start=10, end=0)
    """

    start: Any
    end: Any


__all__ = ["Interval"]
