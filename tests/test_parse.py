"""Tests for ISO 8601 parsing and formatting."""

from __future__ import annotations

import datetime

import pytest


class TestParseInstant:
    """Tests for parse_instant."""

    def test_default_millisecond_resolution(self) -> None:
        """Sub-millisecond digits are truncated by default."""
        from tempus.format import parse_instant

        i = parse_instant("2025-03-22T15:12:01.861482Z")
        assert i.epoch_second == 1742656321
        assert i.nano == 861_000_000

    def test_microsecond_resolution(self) -> None:
        """A finer resolution keeps more digits."""
        from tempus.format import parse_instant
        from tempus.units import Unit

        assert parse_instant("2025-03-22T15:12:01.861482Z", Unit.MICROS).nano == 861_482_000
        assert parse_instant("2025-03-22T15:12:01.861482Z", "us").nano == 861_482_000

    def test_no_truncation(self) -> None:
        """resolution=None keeps every digit given."""
        from tempus.format import parse_instant

        assert parse_instant("2025-03-22T15:12:01.000001Z", None).nano == 1_000

    def test_coarser_resolution(self) -> None:
        """Seconds resolution drops the fraction."""
        from tempus.format import parse_instant

        assert parse_instant("2025-03-22T15:12:01.861Z", "s").nano == 0

    def test_offset_normalization(self) -> None:
        """Offsets are applied and discarded."""
        from tempus.format import parse_instant

        a = parse_instant("2025-03-22T10:12:01.861482-05:00")
        b = parse_instant("2025-03-22T15:12:01.861482Z")
        assert a == b

    def test_offset_with_seconds(self) -> None:
        """Offsets may carry seconds."""
        from tempus.format import parse_instant

        i = parse_instant("1970-01-01T00:00:00+00:00:30")
        assert i.epoch_second == -30

    def test_no_fraction(self) -> None:
        """The fraction is optional."""
        from tempus.format import parse_instant

        assert parse_instant("1970-01-01T00:00:01Z").epoch_second == 1

    @pytest.mark.parametrize(
        "text",
        [
            "2025-03-22 15:12:01Z",
            "2025-13-01T00:00:00Z",
            "2025-02-29T00:00:00Z",
            "2025-03-22T24:00:00Z",
            "2025-03-22T15:12:01",
            "2025-03-22T15:12:01.1234567Z",
            "2025-03-22T15:12:01Zjunk",
            "2025-03-22T15:12:01+19:00",
            "2025-3-22T15:12:01Z",
            "",
        ],
    )
    def test_malformed(self, text: str) -> None:
        """Text deviating from the grammar raises MalformedInput."""
        from tempus.errors import MalformedInput
        from tempus.format import parse_instant

        with pytest.raises(MalformedInput):
            parse_instant(text)

    def test_error_position(self) -> None:
        """The error names the first deviating character."""
        from tempus.errors import MalformedInput
        from tempus.format import parse_instant

        with pytest.raises(MalformedInput) as exc_info:
            parse_instant("2025-03-22 15:12:01Z")
        assert exc_info.value.position == 10
        assert exc_info.value.text == "2025-03-22 15:12:01Z"


class TestParseTemporal:
    """Tests for parse_temporal."""

    def test_offset_kept(self) -> None:
        """Text with an offset becomes an aware datetime."""
        from tempus.format import parse_temporal

        dt = parse_temporal("2025-03-22T10:12:01.5-05:00")
        assert isinstance(dt, datetime.datetime)
        assert dt.utcoffset() == datetime.timedelta(hours=-5)
        assert dt.hour == 10
        assert dt.microsecond == 500_000

    def test_no_offset_is_utc_instant(self) -> None:
        """Text without an offset is read as UTC."""
        from tempus.core import Instant
        from tempus.format import parse_temporal

        assert parse_temporal("2025-03-22T15:12:01") == Instant(1742656321)


class TestDurationText:
    """Tests for parse_duration and format_duration."""

    @pytest.mark.parametrize(
        ("text", "seconds", "nanos"),
        [
            ("PT15M", 900, 0),
            ("P2DT3H4M", 2 * 86400 + 3 * 3600 + 240, 0),
            ("-PT6H3M", -21780, 0),
            ("PT20.345S", 20, 345_000_000),
            ("PT-0.5S", -1, 500_000_000),
            ("PT1,5S", 1, 500_000_000),
            ("pt1h", 3600, 0),
            ("P-1DT1H", -82800, 0),
            ("-PT-1M", 60, 0),
        ],
    )
    def test_parse(self, text: str, seconds: int, nanos: int) -> None:
        """The duration grammar accepts signed components."""
        from tempus.format import parse_duration

        d = parse_duration(text)
        assert (d.seconds, d.nanos) == (seconds, nanos)

    @pytest.mark.parametrize("text", ["P", "PT", "P1DT", "P1Y", "PT1.5M", "1H", "PT1H2", ""])
    def test_parse_malformed(self, text: str) -> None:
        """Text outside the grammar raises MalformedInput."""
        from tempus.errors import MalformedInput
        from tempus.format import parse_duration

        with pytest.raises(MalformedInput):
            parse_duration(text)

    @pytest.mark.parametrize(
        ("kwargs", "text"),
        [
            ({}, "PT0S"),
            ({"seconds": 90, "nanoseconds": 500_000_000}, "PT1M30.5S"),
            ({"seconds": -90}, "-PT1M30S"),
            ({"days": 1, "seconds": 9000}, "P1DT2H30M"),
            ({"days": 2}, "P2D"),
            ({"nanoseconds": 1}, "PT0.000000001S"),
        ],
    )
    def test_format(self, kwargs: dict[str, int], text: str) -> None:
        """Durations format to ISO-8601 text."""
        from tempus.core import Duration
        from tempus.format import format_duration

        assert format_duration(Duration(**kwargs)) == text

    def test_format_then_parse(self) -> None:
        """Formatted durations parse back to the same value."""
        from tempus.core import Duration
        from tempus.format import format_duration, parse_duration

        d = Duration(days=-3, hours=4, milliseconds=7)
        assert parse_duration(format_duration(d)) == d


class TestFormatting:
    """Tests for format_utc, format_with_zone and format_instant."""

    def test_format_utc_millis(self) -> None:
        """format_utc always writes three fraction digits."""
        from tempus.core import Instant
        from tempus.format import format_utc

        assert format_utc(Instant(1742656321, 861_482_000)) == "2025-03-22T15:12:01.861Z"
        assert format_utc(0) == "1970-01-01T00:00:00.000Z"

    def test_format_utc_coerces(self) -> None:
        """format_utc accepts anything to_instant accepts."""
        from tempus.format import format_utc

        assert format_utc(datetime.date(2025, 3, 22)) == "2025-03-22T00:00:00.000Z"
        assert format_utc("2025-03-22T10:12:01.861-05:00") == "2025-03-22T15:12:01.861Z"

    @pytest.mark.parametrize(
        "millis",
        [0, 1, -1, 1742656321861, -86_400_000, 253402300799999, -62167219200001],
    )
    def test_round_trip(self, millis: int) -> None:
        """Millisecond instants survive format_utc then parse_instant."""
        from tempus.core import Instant
        from tempus.format import format_utc, parse_instant

        i = Instant.from_epoch_milli(millis)
        assert parse_instant(format_utc(i)) == i

    def test_format_with_fixed_zone(self) -> None:
        """The wall clock is shown in the zone with its offset."""
        from tempus.format import format_with_zone

        text = format_with_zone("2025-03-22T15:12:01.861Z", "-05:00")
        assert text == "2025-03-22T10:12:01.861-05:00"

    def test_format_with_region_zone(self) -> None:
        """Region zones render their offset at the instant."""
        from tempus.format import format_with_zone

        assert format_with_zone(0, "Europe/Paris") == "1970-01-01T01:00:00.000+01:00"
        assert format_with_zone(0, "UTC") == "1970-01-01T00:00:00.000+00:00"

    def test_format_instant_precision(self) -> None:
        """format_instant picks 0, 3, 6 or 9 digits."""
        from tempus.core import Instant
        from tempus.format import format_instant

        assert format_instant(Instant(0)) == "1970-01-01T00:00:00Z"
        assert format_instant(Instant(0, 120_000_000)) == "1970-01-01T00:00:00.120Z"
        assert format_instant(Instant(-1)) == "1969-12-31T23:59:59Z"

    def test_years_before_zero(self) -> None:
        """Years before 0000 are written and read with a leading minus."""
        from tempus.format import format_utc, parse_instant

        zero = parse_instant("0000-01-01T00:00:00Z")
        assert zero.to_epoch_milli() == -62167219200000
        text = "-0001-12-31T23:59:59.999Z"
        before = parse_instant(text)
        assert before.to_epoch_milli() == zero.to_epoch_milli() - 1
        assert format_utc(before) == text

    def test_minus_zero_year_rejected(self) -> None:
        """Year zero has no negative form."""
        from tempus.errors import MalformedInput
        from tempus.format import parse_instant

        with pytest.raises(MalformedInput) as exc_info:
            parse_instant("-0000-01-01T00:00:00Z")
        assert exc_info.value.position == 1

    def test_year_beyond_range_rejected(self) -> None:
        """Instants past year 9999 cannot be written."""
        from tempus.core import Instant
        from tempus.errors import ValidationError
        from tempus.format import format_instant, format_utc, parse_instant

        last = parse_instant("9999-12-31T23:59:59.999Z")
        after = Instant.from_epoch_milli(last.to_epoch_milli() + 1)
        with pytest.raises(ValidationError):
            format_utc(after)
        with pytest.raises(ValidationError):
            format_instant(after)
