"""Tests for the Instant class."""

from __future__ import annotations

import datetime
import math

import pytest

from calarith.core.instant import Instant


class TestInstantConstruction:
    """Tests for building Instants from local fields."""

    def test_fields_round_trip(self) -> None:
        """Fields passed to the constructor are read back unchanged."""
        i = Instant(2014, 6, 2, 12, 30, 21, 700)

        assert i.year == 2014
        assert i.month == 6
        assert i.day == 2
        assert i.hour == 12
        assert i.minute == 30
        assert i.second == 21
        assert i.millisecond == 700

    def test_defaults_to_midnight_on_first(self) -> None:
        """Omitted fields default to day 1 at midnight."""
        i = Instant(2014, 8)

        assert (i.day, i.hour, i.minute, i.second, i.millisecond) == (1, 0, 0, 0, 0)

    def test_day_zero_is_last_day_of_previous_month(self) -> None:
        """Day 0 rolls back to the last day of the month before."""
        assert Instant(2020, 2, 0) == Instant(2020, 1, 29)
        assert Instant(2021, 2, 0) == Instant(2021, 1, 28)

    def test_month_overflow_rolls_into_next_year(self) -> None:
        """Month 13 of a year is February of the next year."""
        assert Instant(2020, 13, 1) == Instant(2021, 1, 1)

    def test_negative_month_rolls_into_previous_year(self) -> None:
        """Month -1 is December of the previous year."""
        assert Instant(2020, -1, 15) == Instant(2019, 11, 15)

    def test_day_overflow_rolls_into_next_month(self) -> None:
        """Day 31 of November is December 1."""
        assert Instant(2021, 10, 31) == Instant(2021, 11, 1)

    def test_time_overflow_rolls_into_next_day(self) -> None:
        """Hour 24 is midnight of the next day."""
        assert Instant(2021, 0, 1, 24) == Instant(2021, 0, 2)
        assert Instant(2021, 0, 1, 0, 0, 0, -1) == Instant(2020, 11, 31, 23, 59, 59, 999)

    def test_year_zero_and_negative_years(self) -> None:
        """Proleptic Gregorian years before 1 are supported."""
        assert Instant(0, 1, 29).day == 29  # year 0 is a leap year
        assert Instant(-1, 1, 29) == Instant(-1, 2, 1)
        assert Instant(0, 0, 0) == Instant(-1, 11, 31)

    def test_out_of_range_fields_are_invalid(self) -> None:
        """Fields beyond the supported range give an invalid Instant."""
        assert not Instant(300_000, 0, 1).is_valid
        assert not Instant(-300_000, 0, 1).is_valid


class TestInstantFactories:
    """Tests for the alternate constructors."""

    def test_from_epoch_millis(self) -> None:
        """Epoch milliseconds map to UTC fields when the host is in UTC."""
        i = Instant.from_epoch_millis(1392098430000)

        assert i.epoch_millis == 1392098430000
        assert (i.year, i.month, i.day) == (2014, 1, 11)
        assert (i.hour, i.minute, i.second) == (6, 0, 30)

    def test_from_epoch_millis_truncates_toward_zero(self) -> None:
        """Fractional milliseconds are dropped toward zero."""
        assert Instant.from_epoch_millis(1.9).epoch_millis == 1
        assert Instant.from_epoch_millis(-1.9).epoch_millis == -1

    def test_from_epoch_millis_non_finite(self) -> None:
        """NaN and infinities give invalid Instants."""
        assert not Instant.from_epoch_millis(math.nan).is_valid
        assert not Instant.from_epoch_millis(math.inf).is_valid
        assert not Instant.from_epoch_millis(-math.inf).is_valid

    def test_from_epoch_millis_range_limits(self) -> None:
        """The range is +/- 8.64e15 milliseconds inclusive."""
        assert Instant.from_epoch_millis(8.64e15).is_valid
        assert Instant.from_epoch_millis(-8.64e15).is_valid
        assert not Instant.from_epoch_millis(8_640_000_000_000_001).is_valid
        assert not Instant.from_epoch_millis(-8_640_000_000_000_001).is_valid

    def test_range_limit_fields(self) -> None:
        """The range ends on known calendar dates."""
        latest = Instant.from_epoch_millis(8_640_000_000_000_000)
        earliest = Instant.from_epoch_millis(-8_640_000_000_000_000)

        assert (latest.year, latest.month, latest.day) == (275760, 8, 13)
        assert (earliest.year, earliest.month, earliest.day) == (-271821, 3, 20)

    def test_epoch_is_thursday(self) -> None:
        """1970-01-01 was a Thursday."""
        assert Instant.from_epoch_millis(0).weekday == 4

    def test_from_naive_datetime(self) -> None:
        """Naive datetimes are read as local wall-clock time."""
        dt = datetime.datetime(2014, 2, 11, 11, 30, 30, 123456)

        assert Instant.from_datetime(dt) == Instant(2014, 1, 11, 11, 30, 30, 123)

    def test_from_aware_datetime(self) -> None:
        """Aware datetimes keep their absolute point in time."""
        tz = datetime.timezone(datetime.timedelta(hours=2))
        dt = datetime.datetime(1970, 1, 1, 2, 0, 0, tzinfo=tz)

        assert Instant.from_datetime(dt).epoch_millis == 0

    def test_now_is_valid(self) -> None:
        """now() returns a valid Instant near the system clock."""
        before = Instant.from_datetime(datetime.datetime.now(datetime.timezone.utc))
        now = Instant.now()

        assert now.is_valid
        assert abs(now.epoch_millis - before.epoch_millis) < 60_000


class TestInvalidInstant:
    """Tests for the invalid variant."""

    def test_numeric_views_are_nan(self) -> None:
        """Every numeric property of an invalid Instant is NaN."""
        i = Instant.invalid()
        for name in (
            "epoch_millis",
            "year",
            "month",
            "day",
            "hour",
            "minute",
            "second",
            "millisecond",
            "weekday",
        ):
            assert math.isnan(getattr(i, name)), name

    def test_invalid_not_equal_to_itself(self) -> None:
        """Invalid Instants compare like NaN."""
        i = Instant.invalid()

        assert i != i
        assert not i == Instant.invalid()
        assert not i < Instant(2014, 0, 1)
        assert not i >= Instant(2014, 0, 1)
        assert not Instant(2014, 0, 1) > i

    def test_replace_keeps_invalid(self) -> None:
        """Replacing fields of an invalid Instant stays invalid."""
        assert not Instant.invalid().replace(day=1).is_valid

    def test_to_datetime_raises(self) -> None:
        """An invalid Instant cannot become a datetime."""
        with pytest.raises(ValueError, match="invalid Instant"):
            Instant.invalid().to_datetime()

    def test_repr(self) -> None:
        """The invalid variant has its own repr."""
        assert repr(Instant.invalid()) == "Instant.invalid()"


class TestInstantReplace:
    """Tests for Instant.replace()."""

    def test_replace_returns_new_instant(self) -> None:
        """replace() never changes the original."""
        original = Instant(2014, 8, 2, 11, 55)
        replaced = original.replace(day=1)

        assert replaced is not original
        assert original.day == 2
        assert replaced.day == 1
        assert (replaced.hour, replaced.minute) == (11, 55)

    def test_replace_rolls_over(self) -> None:
        """Replaced fields follow constructor rollover rules."""
        i = Instant(2014, 0, 31, 9, 30)

        assert i.replace(month=1) == Instant(2014, 2, 3, 9, 30)
        assert i.replace(month=2, day=0) == Instant(2014, 1, 28, 9, 30)


class TestInstantComparison:
    """Tests for equality, ordering and hashing."""

    def test_equality_by_epoch(self) -> None:
        """Instants with the same epoch milliseconds are equal."""
        assert Instant(2014, 0, 1) == Instant.from_epoch_millis(Instant(2014, 0, 1).epoch_millis)

    def test_not_equal_to_other_types(self) -> None:
        """Instants never equal plain numbers."""
        assert Instant.from_epoch_millis(0) != 0

    def test_ordering(self) -> None:
        """Ordering follows the timeline."""
        early = Instant(2014, 0, 1)
        late = Instant(2014, 0, 2)

        assert early < late
        assert early <= late
        assert late > early
        assert late >= early
        assert early <= Instant(2014, 0, 1)

    def test_hash_consistent_with_equality(self) -> None:
        """Equal Instants hash the same and deduplicate in sets."""
        assert len({Instant(2014, 0, 1), Instant(2014, 0, 1), Instant(2014, 0, 2)}) == 2

    def test_repr(self) -> None:
        """repr shows local fields with a 0-based month."""
        assert repr(Instant(2014, 6, 2, 12, 30, 20, 600)) == (
            "Instant(2014, 6, 2, 12, 30, 20, millisecond=600)"
        )


class TestInstantToDatetime:
    """Tests for conversion to the standard library."""

    def test_to_datetime_local_fields(self) -> None:
        """The datetime carries the same local wall-clock fields."""
        dt = Instant(2014, 1, 11, 11, 30, 30, 250).to_datetime()

        assert (dt.year, dt.month, dt.day) == (2014, 2, 11)
        assert (dt.hour, dt.minute, dt.second) == (11, 30, 30)
        assert dt.microsecond == 250_000
        assert dt.utcoffset() == datetime.timedelta(0)

    def test_to_datetime_round_trip(self) -> None:
        """from_datetime(to_datetime()) gives back the same Instant."""
        i = Instant(1999, 11, 31, 23, 59, 59, 999)

        assert Instant.from_datetime(i.to_datetime()) == i
