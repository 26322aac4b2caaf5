"""Instant class representing a point in time in the host's local time.

This module provides the Instant class: an immutable, millisecond-precision
point in time whose calendar fields are read in the host's local time. An
Instant may be invalid, in which case every numeric view of it is NaN.
"""

from __future__ import annotations

import datetime as _datetime
import math
import time
from numbers import Real

from calarith._internal.calendar import day_to_weekday, day_to_ymd, make_day
from calarith._internal.constants import (
    MAX_EPOCH_MILLIS,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from calarith._internal.localtime import local_offset, local_to_epoch

_UTC_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)
_ONE_MILLISECOND = _datetime.timedelta(milliseconds=1)


class Instant:
    """A point in time with millisecond precision, read in local time.

    Instant stores a signed count of milliseconds since the Unix epoch
    (1970-01-01T00:00:00Z). Calendar fields are derived from the host's
    local-time rules each time they are read.

    Constructing an Instant from fields follows rollover rules rather than
    validation: out-of-range months and days carry into neighbouring
    months and years, so day 0 is the last day of the previous month.

    An Instant can be invalid. Invalid instants are produced from
    malformed input and propagate through arithmetic instead of raising.
    Every numeric property of an invalid Instant is NaN, and an invalid
    Instant compares unequal to everything, itself included.

    Months are 0-based (January is 0) and weekdays start at Sunday (0).

    Attributes:
        year: The local year.
        month: The local month index (0-11).
        day: The local day of the month (1-31).
        hour: The local hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        millisecond: The millisecond (0-999).
        weekday: The local day of the week (0=Sunday, 6=Saturday).
        epoch_millis: Milliseconds since the Unix epoch.

    Examples:
        >>> i = Instant(2014, 8, 1)  # 1 September 2014, local midnight
        >>> i.month
        8
        >>> Instant(2020, 1, 30).day  # 30 February rolls over
        1
        >>> Instant.invalid() == Instant.invalid()
        False
    """

    __slots__ = ("_millis",)

    def __init__(
        self,
        year: int,
        month: int,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> None:
        """Create an Instant from local-time fields.

        Args:
            year: The year (can be 0 or negative).
            month: The 0-based month; any integer, overflow rolls over.
            day: The day of the month; any integer, overflow rolls over.
            hour: The hour; any integer.
            minute: The minute; any integer.
            second: The second; any integer.
            millisecond: The millisecond; any integer.

        Examples:
            >>> Instant(2014, 6, 2, 12, 30, 20, 600)
            Instant(2014, 6, 2, 12, 30, 20, millisecond=600)

            >>> Instant(2020, 13, 1)  # month 13 of 2020 is February 2021
            Instant(2021, 1, 1, 0, 0, 0, millisecond=0)
        """
        self._millis: int | None = _resolve_local(
            year, month, day, hour, minute, second, millisecond
        )

    @classmethod
    def _from_internal(cls, millis: int | None) -> Instant:
        """Create an Instant from integer epoch milliseconds.

        Args:
            millis: Epoch milliseconds, or None for an invalid Instant.

        Returns:
            A new Instant instance.
        """
        instance = object.__new__(cls)
        if millis is not None and abs(millis) > MAX_EPOCH_MILLIS:
            millis = None
        instance._millis = millis
        return instance

    @classmethod
    def from_epoch_millis(cls, millis: Real) -> Instant:
        """Create an Instant from milliseconds since the Unix epoch.

        Fractional milliseconds are truncated toward zero. Non-finite
        values and values beyond the supported range give an invalid
        Instant.

        Args:
            millis: Milliseconds since 1970-01-01T00:00:00Z.

        Returns:
            The Instant for that timestamp.

        Examples:
            >>> Instant.from_epoch_millis(1392098430000).epoch_millis
            1392098430000

            >>> Instant.from_epoch_millis(float("inf")).is_valid
            False
        """
        if not isinstance(millis, int) and not math.isfinite(millis):
            return cls.invalid()
        return cls._from_internal(int(millis))

    @classmethod
    def from_datetime(cls, dt: _datetime.datetime) -> Instant:
        """Create an Instant from a standard library datetime.

        Naive datetimes are read as local wall-clock time. Aware datetimes
        denote an absolute point and keep it. Microseconds are truncated
        to milliseconds.

        Args:
            dt: The datetime to convert.

        Returns:
            The Instant for that datetime.

        Examples:
            >>> import datetime
            >>> Instant.from_datetime(datetime.datetime(2014, 2, 11, 11, 30, 30))
            Instant(2014, 1, 11, 11, 30, 30, millisecond=0)
        """
        if dt.tzinfo is not None and dt.utcoffset() is not None:
            return cls._from_internal((dt - _UTC_EPOCH) // _ONE_MILLISECOND)
        return cls(
            dt.year,
            dt.month - 1,
            dt.day,
            dt.hour,
            dt.minute,
            dt.second,
            dt.microsecond // 1000,
        )

    @classmethod
    def now(cls) -> Instant:
        """Return the current instant.

        Examples:
            >>> Instant.now().is_valid
            True
        """
        return cls._from_internal(time.time_ns() // 1_000_000)

    @classmethod
    def invalid(cls) -> Instant:
        """Return an invalid Instant.

        Examples:
            >>> Instant.invalid().is_valid
            False
        """
        return cls._from_internal(None)

    # Validity and raw value

    @property
    def is_valid(self) -> bool:
        """Return True unless this is an invalid Instant."""
        return self._millis is not None

    @property
    def epoch_millis(self) -> int | float:
        """Return milliseconds since the Unix epoch, or NaN if invalid."""
        if self._millis is None:
            return math.nan
        return self._millis

    # Local-time fields

    def _local_parts(self) -> tuple[int, int]:
        """Return (days since epoch, milliseconds into day) in local time."""
        assert self._millis is not None
        local = self._millis + local_offset(self._millis)
        return divmod(local, MILLIS_PER_DAY)

    def _fields(self) -> tuple[int, int, int, int, int, int, int]:
        days, ms = self._local_parts()
        year, month, day = day_to_ymd(days)
        hour, ms = divmod(ms, MILLIS_PER_HOUR)
        minute, ms = divmod(ms, MILLIS_PER_MINUTE)
        second, ms = divmod(ms, MILLIS_PER_SECOND)
        return (year, month, day, hour, minute, second, ms)

    @property
    def year(self) -> int | float:
        """Return the local year, or NaN if invalid."""
        if self._millis is None:
            return math.nan
        return day_to_ymd(self._local_parts()[0])[0]

    @property
    def month(self) -> int | float:
        """Return the local month index (0-11), or NaN if invalid."""
        if self._millis is None:
            return math.nan
        return day_to_ymd(self._local_parts()[0])[1]

    @property
    def day(self) -> int | float:
        """Return the local day of the month (1-31), or NaN if invalid."""
        if self._millis is None:
            return math.nan
        return day_to_ymd(self._local_parts()[0])[2]

    @property
    def hour(self) -> int | float:
        """Return the local hour (0-23), or NaN if invalid."""
        if self._millis is None:
            return math.nan
        return self._local_parts()[1] // MILLIS_PER_HOUR

    @property
    def minute(self) -> int | float:
        """Return the local minute (0-59), or NaN if invalid."""
        if self._millis is None:
            return math.nan
        return (self._local_parts()[1] % MILLIS_PER_HOUR) // MILLIS_PER_MINUTE

    @property
    def second(self) -> int | float:
        """Return the local second (0-59), or NaN if invalid."""
        if self._millis is None:
            return math.nan
        return (self._local_parts()[1] % MILLIS_PER_MINUTE) // MILLIS_PER_SECOND

    @property
    def millisecond(self) -> int | float:
        """Return the millisecond within the second (0-999), or NaN if invalid."""
        if self._millis is None:
            return math.nan
        return self._millis % MILLIS_PER_SECOND

    @property
    def weekday(self) -> int | float:
        """Return the local day of the week (0=Sunday), or NaN if invalid."""
        if self._millis is None:
            return math.nan
        return day_to_weekday(self._local_parts()[0])

    # Replacement

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        millisecond: int | None = None,
    ) -> Instant:
        """Return a new Instant with specified local-time fields replaced.

        Any field not specified keeps its current local value. Replaced
        fields may be out of range and roll over, and the resulting wall
        time is resolved against the host's local-time rules again.

        Args:
            year: New year value.
            month: New 0-based month value.
            day: New day-of-month value.
            hour: New hour value.
            minute: New minute value.
            second: New second value.
            millisecond: New millisecond value.

        Returns:
            A new Instant, or an invalid Instant if this one is invalid.

        Examples:
            >>> Instant(2014, 8, 2, 11, 55).replace(day=1, hour=0, minute=0)
            Instant(2014, 8, 1, 0, 0, 0, millisecond=0)

            >>> Instant(2014, 8, 2).replace(month=9, day=0)  # last day of September
            Instant(2014, 8, 30, 0, 0, 0, millisecond=0)
        """
        if self._millis is None:
            return Instant.invalid()

        fields = self._fields()
        replacements = (year, month, day, hour, minute, second, millisecond)
        merged = [
            current if new is None else new
            for current, new in zip(fields, replacements)
        ]
        return Instant._from_internal(_resolve_local(*merged))

    # Conversion

    def to_datetime(self) -> _datetime.datetime:
        """Return this Instant as an aware datetime in the host's local offset.

        Returns:
            An aware datetime whose tzinfo is the fixed local offset in
            effect at this instant.

        Raises:
            ValueError: If this Instant is invalid.
            OverflowError: If the instant is outside the datetime range.

        Examples:
            >>> Instant(2014, 1, 11, 11, 30, 30).to_datetime().hour
            11
        """
        if self._millis is None:
            raise ValueError("cannot convert an invalid Instant to datetime")

        offset = _datetime.timedelta(milliseconds=local_offset(self._millis))
        utc = _UTC_EPOCH + self._millis * _ONE_MILLISECOND
        return utc.astimezone(_datetime.timezone(offset))

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        """Check equality with another Instant.

        Two Instants are equal if both are valid and they have the same
        epoch milliseconds.
        """
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis is not None and self._millis == other._millis

    def __ne__(self, other: object) -> bool:
        """Check inequality with another Instant."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this Instant is earlier than another.

        Always False when either Instant is invalid.
        """
        if not isinstance(other, Instant):
            return NotImplemented
        if self._millis is None or other._millis is None:
            return False
        return self._millis < other._millis

    def __le__(self, other: object) -> bool:
        """Check if this Instant is earlier than or equal to another."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: object) -> bool:
        """Check if this Instant is later than another."""
        if not isinstance(other, Instant):
            return NotImplemented
        return other < self

    def __ge__(self, other: object) -> bool:
        """Check if this Instant is later than or equal to another."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self == other or self > other

    def __hash__(self) -> int:
        return hash(self._millis)

    def __repr__(self) -> str:
        """Return a detailed string representation."""
        if self._millis is None:
            return "Instant.invalid()"
        year, month, day, hour, minute, second, ms = self._fields()
        return (
            f"Instant({year}, {month}, {day}, {hour}, {minute}, "
            f"{second}, millisecond={ms})"
        )


def _resolve_local(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
) -> int | None:
    """Resolve local-time fields to epoch milliseconds, None if out of range."""
    local = (
        make_day(year, month, day) * MILLIS_PER_DAY
        + hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millisecond
    )
    # Local offsets never exceed a day
    if abs(local) > MAX_EPOCH_MILLIS + MILLIS_PER_DAY:
        return None

    millis = local_to_epoch(local)
    if abs(millis) > MAX_EPOCH_MILLIS:
        return None
    return millis


__all__ = ["Instant"]
