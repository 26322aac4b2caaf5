"""Canonicalization of raw inputs.

Every public Calarith function passes its date arguments through
``to_instant`` and its amounts through ``to_integer``. Both functions are
total: malformed input becomes an invalid Instant or NaN, never an
exception, so the caller sees invalidity at the end of the computation.

Functions:
    to_instant: Convert a raw input to an Instant.
    to_integer: Convert a raw amount to an integer, or NaN.

Examples:
    >>> from calarith.convert import to_instant, to_integer
    >>> to_instant(0).epoch_millis
    0
    >>> to_instant("2014-02-11").is_valid
    False
    >>> to_integer(-2.5)
    -2
"""

from __future__ import annotations

import datetime as _datetime
import math
from numbers import Real
from typing import Any

from calarith.core.instant import Instant


def to_instant(value: Any) -> Instant:
    """Convert a raw input to an Instant.

    If the value is an Instant, a new Instant with the same epoch
    milliseconds is returned. A ``datetime.datetime`` is converted with
    ``Instant.from_datetime``. A real number (but not a bool) is treated
    as milliseconds since the Unix epoch. Anything else, strings included,
    gives an invalid Instant: strings are never parsed.

    Args:
        value: The value to convert.

    Returns:
        A new Instant, possibly invalid.

    Examples:
        >>> to_instant(Instant(2014, 1, 11, 11, 30, 30))
        Instant(2014, 1, 11, 11, 30, 30, millisecond=0)

        >>> to_instant(1392098430000).epoch_millis
        1392098430000

        >>> to_instant(None).is_valid
        False
    """
    if isinstance(value, Instant):
        return Instant._from_internal(value._millis)
    if isinstance(value, _datetime.datetime):
        return Instant.from_datetime(value)
    if isinstance(value, Real) and not isinstance(value, bool):
        return Instant.from_epoch_millis(value)
    return Instant.invalid()


def to_integer(value: Any) -> int | float:
    """Convert a raw amount to an integer, truncating toward zero.

    ``None`` and booleans give NaN. Real numbers are used as they are and
    other values go through ``float()``; a failed or non-finite
    conversion gives NaN. Positive values are floored and negative values
    are ceiled, so the magnitude never grows.

    Args:
        value: The amount to convert.

    Returns:
        An int, or ``math.nan``.

    Examples:
        >>> to_integer(2.5)
        2
        >>> to_integer(-2.5)
        -2
        >>> to_integer("12")
        12
        >>> to_integer(True)
        nan
    """
    if value is None or isinstance(value, bool):
        return math.nan

    if isinstance(value, int):
        return int(value)
    if isinstance(value, Real):
        number = value
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return math.nan

    if not math.isfinite(number):
        return math.nan

    return math.ceil(number) if number < 0 else math.floor(number)


__all__ = [
    "to_instant",
    "to_integer",
]
