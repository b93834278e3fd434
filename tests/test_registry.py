"""Tests for the unit and field registries and zone references."""

from __future__ import annotations

import datetime

import pytest


class TestUnitResolution:
    """Tests for to_unit."""

    @pytest.mark.parametrize(
        ("ref", "expected"),
        [
            ("ns", "NANOS"),
            ("us", "MICROS"),
            ("ms", "MILLIS"),
            ("milliseconds", "MILLIS"),
            ("s", "SECONDS"),
            ("sec", "SECONDS"),
            ("min", "MINUTES"),
            ("hr", "HOURS"),
            ("hours", "HOURS"),
            ("half-day", "HALF_DAYS"),
            ("days", "DAYS"),
            ("week", "WEEKS"),
            ("months", "MONTHS"),
            ("year", "YEARS"),
            ("decades", "DECADES"),
            ("century", "CENTURIES"),
            ("millennia", "MILLENNIA"),
            ("eras", "ERAS"),
            ("forever", "FOREVER"),
        ],
    )
    def test_aliases(self, ref: str, expected: str) -> None:
        """Short and long aliases resolve to the same unit."""
        from tempus.units import Unit, to_unit

        assert to_unit(ref) is Unit[expected]

    def test_keyword_prefix(self) -> None:
        """A leading ':' is ignored."""
        from tempus.units import Unit, to_unit

        assert to_unit(":ms") is Unit.MILLIS

    def test_member_name(self) -> None:
        """The enum member name resolves."""
        from tempus.units import Unit, to_unit

        assert to_unit("HALF_DAYS") is Unit.HALF_DAYS

    def test_unit_passes_through(self) -> None:
        """A Unit resolves to itself."""
        from tempus.units import Unit, to_unit

        assert to_unit(Unit.WEEKS) is Unit.WEEKS

    def test_none_is_forever(self) -> None:
        """An absent unit means FOREVER."""
        from tempus.units import Unit, to_unit

        assert to_unit(None) is Unit.FOREVER

    def test_unknown_unit(self) -> None:
        """Unresolvable references raise UnknownUnit carrying the input."""
        from tempus.errors import UnknownUnit
        from tempus.units import to_unit

        with pytest.raises(UnknownUnit) as exc_info:
            to_unit("fortnights")
        assert exc_info.value.given == "fortnights"
        with pytest.raises(UnknownUnit):
            to_unit(3)

    def test_every_unit_keyword_resolves_back(self) -> None:
        """The canonical keyword of each unit resolves to that unit."""
        from tempus.units import Unit, to_unit, unit_keyword

        for unit in Unit:
            assert to_unit(unit_keyword(unit)) is unit

    def test_unit_keyword(self) -> None:
        """unit_keyword() returns the canonical alias."""
        from tempus.units import Unit, unit_keyword

        assert unit_keyword("milliseconds") == "ms"
        assert unit_keyword(Unit.HALF_DAYS) == "half-days"


class TestUnitProperties:
    """Tests for Unit properties and ordering."""

    def test_ordering(self) -> None:
        """Units order from shortest to longest."""
        from tempus.units import Unit

        assert Unit.NANOS < Unit.MILLIS < Unit.DAYS < Unit.MONTHS < Unit.FOREVER
        assert Unit.DAYS <= Unit.DAYS
        assert Unit.ERAS > Unit.MILLENNIA

    def test_lengths(self) -> None:
        """Exact units know their length in nanoseconds."""
        from tempus.units import Unit

        assert Unit.MILLIS.nanos == 1_000_000
        assert Unit.HALF_DAYS.nanos == 43_200 * 1_000_000_000
        assert Unit.WEEKS.duration.seconds == 7 * 86_400

    def test_estimated(self) -> None:
        """Units past WEEKS are estimates."""
        from tempus.units import Unit

        assert not Unit.WEEKS.is_duration_estimated
        assert Unit.MONTHS.is_duration_estimated
        assert Unit.HOURS.is_time_based
        assert Unit.YEARS.is_date_based


class TestFieldResolution:
    """Tests for to_field and Field validation."""

    @pytest.mark.parametrize(
        ("ref", "expected"),
        [
            ("ns", "NANO_OF_SECOND"),
            ("ms", "MILLI_OF_SECOND"),
            ("s", "SECOND_OF_MINUTE"),
            ("hour", "HOUR_OF_DAY"),
            ("days", "DAY_OF_MONTH"),
            ("day-of-year", "DAY_OF_YEAR"),
            (":day-of-week", "DAY_OF_WEEK"),
            ("month", "MONTH_OF_YEAR"),
            ("year", "YEAR"),
            ("offset-seconds", "OFFSET_SECONDS"),
            ("EPOCH_DAY", "EPOCH_DAY"),
        ],
    )
    def test_aliases(self, ref: str, expected: str) -> None:
        """Field aliases resolve."""
        from tempus.units import Field, to_field

        assert to_field(ref) is Field[expected]

    def test_unknown_field(self) -> None:
        """Unresolvable references raise UnknownField."""
        from tempus.errors import UnknownField
        from tempus.units import to_field

        with pytest.raises(UnknownField):
            to_field("fortnight-of-year")
        with pytest.raises(UnknownField):
            to_field(None)

    def test_check(self) -> None:
        """check() validates type and range."""
        from tempus.errors import ValidationError
        from tempus.units import Field

        assert Field.MONTH_OF_YEAR.check(12) == 12
        with pytest.raises(ValidationError):
            Field.MONTH_OF_YEAR.check(13)
        with pytest.raises(ValidationError):
            Field.NANO_OF_SECOND.check(1_000_000_000)
        with pytest.raises(ValidationError):
            Field.DAY_OF_MONTH.check(True)

    def test_str_is_keyword(self) -> None:
        """str() of a field is its keyword."""
        from tempus.units import Field

        assert str(Field.DAY_OF_YEAR) == "day-of-year"


class TestZoneReferences:
    """Tests for to_timezone and to_offset."""

    def test_offset_strings(self) -> None:
        """Numeric offsets become fixed offsets."""
        from tempus.units import UTC, to_timezone

        assert to_timezone("Z") is UTC
        assert to_timezone("+05:30").utcoffset(None) == datetime.timedelta(
            hours=5, minutes=30
        )
        assert to_timezone("-0800").utcoffset(None) == datetime.timedelta(hours=-8)

    def test_numeric_hours(self) -> None:
        """ints and floats are hours east of UTC."""
        from tempus.units import to_timezone

        assert to_timezone(5).utcoffset(None) == datetime.timedelta(hours=5)
        assert to_timezone(-3.5).utcoffset(None) == datetime.timedelta(hours=-3.5)

    def test_duration_offset(self) -> None:
        """Durations and timedeltas are offsets."""
        from tempus.core import Duration
        from tempus.units import to_timezone

        assert to_timezone(Duration(hours=2)).utcoffset(None) == datetime.timedelta(hours=2)
        assert to_timezone(datetime.timedelta(hours=-1)).utcoffset(None) == datetime.timedelta(
            hours=-1
        )

    def test_region(self) -> None:
        """Region names become ZoneInfo instances."""
        from zoneinfo import ZoneInfo

        from tempus.units import to_timezone

        assert to_timezone("Europe/Paris") == ZoneInfo("Europe/Paris")

    def test_aware_value(self) -> None:
        """Aware datetimes contribute their tzinfo."""
        from tempus.units import UTC, to_timezone

        assert to_timezone(datetime.datetime(2025, 1, 1, tzinfo=UTC)) is UTC

    def test_invalid_references(self) -> None:
        """Bad references raise TimezoneError."""
        from tempus.errors import TimezoneError
        from tempus.units import to_timezone

        with pytest.raises(TimezoneError):
            to_timezone("Mars/Olympus_Mons")
        with pytest.raises(TimezoneError):
            to_timezone("+19:00")
        with pytest.raises(TimezoneError):
            to_timezone(True)
        with pytest.raises(TimezoneError):
            to_timezone(datetime.datetime(2025, 1, 1))

    def test_to_offset_region_at_instant(self) -> None:
        """Region zones resolve to the offset in force at a moment."""
        from tempus.units import UTC, to_offset

        winter = datetime.datetime(2025, 1, 15, tzinfo=UTC)
        summer = datetime.datetime(2025, 7, 15, tzinfo=UTC)
        assert to_offset("Europe/Paris", winter).utcoffset(None) == datetime.timedelta(hours=1)
        assert to_offset("Europe/Paris", summer).utcoffset(None) == datetime.timedelta(hours=2)
