"""Calarith exception hierarchy.

All Calarith-specific exceptions inherit from CalarithError.

Malformed inputs are not errors: they canonicalize to an invalid Instant
that propagates through arithmetic. Only caller-contract violations raise.
"""

from __future__ import annotations


class CalarithError(Exception):
    """Base exception for all Calarith errors."""

    pass


class InvalidIntervalError(CalarithError):
    """Interval cannot be used for membership tests.

    Raised when an interval's start is after its end, or when either
    endpoint canonicalizes to an invalid Instant.

    Examples:
        - start = 2014-01-07, end = 2014-01-01
        - start = "2014-01-01" (strings are never parsed)
        - end missing from a mapping interval
    """

    pass


__all__ = [
    "CalarithError",
    "InvalidIntervalError",
]
