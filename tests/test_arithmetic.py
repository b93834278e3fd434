"""Tests for arithmetic and comparison over coercible values.

These tests verify that operations accept any temporal category and
return a value of the caller's kind.
"""

from __future__ import annotations

import datetime
from zoneinfo import ZoneInfo

import pytest

UTC = datetime.timezone.utc


class TestAdd:
    """Tests for add."""

    def test_instant_plus_amounts(self) -> None:
        """Instants accept durations, timedeltas, millis and text."""
        from tempus.arithmetic import add
        from tempus.core import Duration, Instant

        assert add(Instant.EPOCH, Duration(seconds=1)) == Instant(1)
        assert add(Instant.EPOCH, datetime.timedelta(seconds=1)) == Instant(1)
        assert add(Instant.EPOCH, 1000) == Instant(1)
        assert add(Instant.EPOCH, "PT1S") == Instant(1)

    def test_keeps_caller_kind(self) -> None:
        """Zoned, local and calendar values come back as themselves."""
        from tempus.arithmetic import add
        from tempus.core import YearMonth

        paris = ZoneInfo("Europe/Paris")
        dt = datetime.datetime(2025, 3, 22, 12, tzinfo=paris)
        result = add(dt, "PT1H")
        assert result.tzinfo is paris
        assert result.hour == 13

        assert add(datetime.date(2025, 3, 22), "P10D") == datetime.date(2025, 4, 1)
        assert add(datetime.time(23, 30), "PT1H") == datetime.time(0, 30)
        assert add(datetime.datetime(2025, 1, 1), 500) == datetime.datetime(
            2025, 1, 1, 0, 0, 0, 500_000
        )
        assert add(YearMonth(2025, 1), "P31D") == YearMonth(2025, 2)

    def test_durations(self) -> None:
        """Spans add to spans."""
        from tempus.arithmetic import add
        from tempus.core import Duration

        assert add(Duration(seconds=1), 500) == Duration(milliseconds=1500)
        assert add(datetime.timedelta(seconds=1), "PT1S") == Duration(seconds=2)
        assert add(1000, 1000) == Duration(seconds=2)

    def test_duration_plus_point(self) -> None:
        """A span plus a point gives the point's kind."""
        from tempus.arithmetic import add
        from tempus.core import Duration, Instant

        assert add(Duration(seconds=5), Instant.EPOCH) == Instant(5)
        assert add(Duration(days=1), datetime.date(2025, 3, 22)) == datetime.date(2025, 3, 23)

    def test_text_left(self) -> None:
        """Text is read as an instant, else as a duration."""
        from tempus.arithmetic import add
        from tempus.core import Duration, Instant

        assert add("1970-01-01T00:00:00Z", "PT1M") == Instant(60)
        assert add("PT1M", "PT1M") == Duration(minutes=2)

    def test_absent_is_identity(self) -> None:
        """None plus an amount is that amount as a Duration."""
        from tempus.arithmetic import add
        from tempus.core import Duration

        d = Duration(seconds=5)
        assert add(None, d) == d
        assert add(None, "PT5S") == d
        assert add(None, None) == Duration.ZERO

    def test_point_plus_point_rejected(self) -> None:
        """A point is not a duration."""
        from tempus.arithmetic import add
        from tempus.core import Instant
        from tempus.errors import UnsupportedConversion

        with pytest.raises(UnsupportedConversion):
            add(Instant.EPOCH, datetime.date(2025, 1, 1))

    def test_unclassifiable_left(self) -> None:
        """Values without a category are rejected."""
        from tempus.arithmetic import add
        from tempus.errors import UnclassifiableInput

        with pytest.raises(UnclassifiableInput):
            add(1.5, 1000)


class TestSubtract:
    """Tests for subtract."""

    def test_points(self) -> None:
        """Points shift backwards and keep their kind."""
        from tempus.arithmetic import subtract
        from tempus.core import Instant

        assert subtract(Instant(10), 1000) == Instant(9)
        assert subtract(datetime.date(2025, 3, 1), "P1D") == datetime.date(2025, 2, 28)

    def test_spans(self) -> None:
        """Spans subtract without commuting."""
        from tempus.arithmetic import subtract
        from tempus.core import Duration

        assert subtract(Duration(seconds=1), 250) == Duration(milliseconds=750)
        assert subtract(1000, "PT2S") == Duration(seconds=-1)

    def test_absent(self) -> None:
        """None minus an amount is its negation."""
        from tempus.arithmetic import subtract
        from tempus.core import Duration

        assert subtract(None, 250) == Duration(milliseconds=-250)


class TestUnitShifts:
    """Tests for plus_*/minus_* helpers."""

    def test_epoch_millis_are_instants(self) -> None:
        """ints are points in time here."""
        from tempus.arithmetic import plus_millis
        from tempus.core import Instant

        assert plus_millis(0, 1500) == Instant(1, 500_000_000)

    def test_keeps_kind(self) -> None:
        """Each kind comes back as itself."""
        from tempus.arithmetic import minus_seconds, plus_nanos, plus_seconds
        from tempus.core import Duration, Instant

        assert plus_seconds(datetime.time(12), 90) == datetime.time(12, 1, 30)
        assert minus_seconds(Duration(seconds=5), 2) == Duration(seconds=3)
        assert plus_nanos(Instant.EPOCH, 5).nano == 5
        assert plus_seconds(None, 3) == Duration(seconds=3)
        assert plus_seconds(datetime.timedelta(seconds=1), 1) == Duration(seconds=2)

    def test_minus_millis(self) -> None:
        """minus_millis on text."""
        from tempus.arithmetic import minus_millis
        from tempus.core import Instant

        assert minus_millis("1970-01-01T00:00:01Z", 1) == Instant(0, 999_000_000)


class TestScaling:
    """Tests for multiply, divide and negate."""

    def test_multiply(self) -> None:
        """Spans multiply by ints."""
        from tempus.arithmetic import multiply
        from tempus.core import Duration

        assert multiply("PT1M", 3) == Duration(minutes=3)
        assert multiply(1000, -2) == Duration(seconds=-2)
        assert multiply(datetime.timedelta(seconds=1), 0) == Duration.ZERO

    def test_multiply_absent(self) -> None:
        """None times anything is zero."""
        from tempus.arithmetic import multiply
        from tempus.core import Duration

        assert multiply(None, 42) == Duration.ZERO

    def test_divide_by_scalar(self) -> None:
        """An int divisor is a scalar."""
        from tempus.arithmetic import divide
        from tempus.core import Duration

        assert divide(Duration(seconds=100), 3) == Duration(seconds=33, nanoseconds=333_333_333)
        assert divide("PT1M", 4) == Duration(seconds=15)

    def test_divide_by_span(self) -> None:
        """A span divisor counts whole divisors."""
        from tempus.arithmetic import divide
        from tempus.core import Duration

        assert divide(Duration(hours=1), "PT7M") == 8
        assert divide(Duration(hours=1), datetime.timedelta(minutes=-7)) == -8

    def test_divide_absent(self) -> None:
        """None divides to zero, but never by zero."""
        from tempus.arithmetic import divide
        from tempus.core import Duration
        from tempus.errors import DivisionByZero

        assert divide(None, 5) == Duration.ZERO
        assert divide(None, "PT1S") == 0
        with pytest.raises(DivisionByZero):
            divide(None, 0)
        with pytest.raises(DivisionByZero):
            divide(None, Duration.ZERO)

    def test_divide_by_zero(self) -> None:
        """Zero divisors fail, including zero by zero."""
        from tempus.arithmetic import divide
        from tempus.core import Duration
        from tempus.errors import DivisionByZero

        with pytest.raises(DivisionByZero):
            divide(Duration(seconds=1), 0)
        with pytest.raises(DivisionByZero):
            divide(Duration.ZERO, Duration.ZERO)

    def test_negate(self) -> None:
        """negate flips the sign of a span."""
        from tempus.arithmetic import negate
        from tempus.core import Duration

        assert negate(1000) == Duration(seconds=-1)
        assert negate("-PT1S") == Duration(seconds=1)
        assert negate(None) == Duration.ZERO

    @pytest.mark.parametrize(
        "value",
        [
            "instant",
            datetime.datetime(2025, 3, 22, tzinfo=UTC),
            datetime.date(2025, 3, 22),
            "2025-03-22T15:12:01Z",
        ],
    )
    def test_scalar_on_point_rejected(self, value: object) -> None:
        """Scaling a point in time raises UnsupportedOperation."""
        from tempus.arithmetic import divide, multiply, negate
        from tempus.core import Instant
        from tempus.errors import UnsupportedOperation

        if value == "instant":
            value = Instant.from_epoch_milli(1742656321861)
        with pytest.raises(UnsupportedOperation):
            multiply(value, 2)
        with pytest.raises(UnsupportedOperation):
            divide(value, 2)
        with pytest.raises(UnsupportedOperation):
            negate(value)

    def test_scalar_on_unparseable_text(self) -> None:
        """Unreadable text surfaces the duration parse failure."""
        from tempus.arithmetic import divide, multiply, negate
        from tempus.errors import MalformedInput, UnsupportedConversion

        for op in (lambda v: multiply(v, 2), lambda v: divide(v, 2), negate):
            with pytest.raises(MalformedInput) as exc_info:
                op("garbage")
            assert exc_info.value.text == "garbage"
            assert not isinstance(exc_info.value, UnsupportedConversion)

    def test_scalar_on_duration_text(self) -> None:
        """Duration text scales as a span."""
        from tempus.arithmetic import divide, multiply, negate
        from tempus.core import Duration

        assert multiply("PT1M", 3) == Duration(minutes=3)
        assert divide("PT1M", 4) == Duration(seconds=15)
        assert negate("PT2S") == Duration(seconds=-2)


class TestTruncateTo:
    """Tests for truncate_to."""

    def test_text_parsed_at_resolution(self) -> None:
        """Text is parsed at the requested unit."""
        from tempus.arithmetic import truncate_to
        from tempus.core import Instant

        assert truncate_to("2025-03-22T15:12:01.861482Z", "s") == Instant(1742656321)

    def test_keeps_kind(self) -> None:
        """Zoned and local values truncate on their UTC view."""
        from tempus.arithmetic import truncate_to
        from tempus.core import Duration

        dt = datetime.datetime(2025, 3, 22, 15, 12, 1, 861482, tzinfo=UTC)
        assert truncate_to(dt, "min") == datetime.datetime(2025, 3, 22, 15, 12, tzinfo=UTC)
        assert truncate_to(datetime.time(12, 34, 56), "hr") == datetime.time(12)
        assert truncate_to(datetime.timedelta(seconds=90), "min") == Duration(minutes=1)

    def test_nanos_is_identity(self) -> None:
        """Truncating to nanoseconds changes nothing."""
        from tempus.arithmetic import truncate_to
        from tempus.core import Instant

        i = Instant.from_epoch_milli(1742656321725)
        assert truncate_to(i, "ns") == i

    @pytest.mark.parametrize("unit", ["ns", "us", "ms", "s", "min", "hr", "days"])
    def test_idempotent(self, unit: str) -> None:
        """Truncation is idempotent for every supported unit."""
        from tempus.arithmetic import truncate_to
        from tempus.core import Instant

        i = Instant(1742656321, 861_482_123)
        once = truncate_to(i, unit)
        assert truncate_to(once, unit) == once

    def test_epoch_millis_and_absent(self) -> None:
        """ints are instants; None is zero."""
        from tempus.arithmetic import truncate_to
        from tempus.core import Duration, Instant

        assert truncate_to(1500, "s") == Instant(1)
        assert truncate_to(None, "s") == Duration.ZERO

    def test_duration_text(self) -> None:
        """Duration text falls back to a Duration."""
        from tempus.arithmetic import truncate_to
        from tempus.core import Duration

        assert truncate_to("PT1M30.5S", "s") == Duration(seconds=90)

    def test_long_unit_rejected(self) -> None:
        """Units longer than a day are rejected."""
        from tempus.arithmetic import truncate_to
        from tempus.core import Instant
        from tempus.errors import UnsupportedOperation

        with pytest.raises(UnsupportedOperation):
            truncate_to(Instant.EPOCH, "years")


class TestGetNano:
    """Tests for get_nano."""

    def test_values(self) -> None:
        """get_nano reads the fraction of the value's own clock."""
        from tempus.arithmetic import get_nano
        from tempus.core import Duration, Instant

        assert get_nano(Instant(0, 27)) == 27
        assert get_nano(Duration(milliseconds=1500)) == 500_000_000
        assert get_nano(datetime.time(0, 0, 0, 5)) == 5_000
        assert get_nano("2025-03-22T15:12:01.861Z") == 861_000_000
        assert get_nano(1001) == 1_000_000
        assert get_nano(None) == 0


class TestComparisons:
    """Tests for compare and friends."""

    def test_mixed_points(self) -> None:
        """Points of any kind compare as instants."""
        from tempus.arithmetic import compare, equal, is_after, is_before

        assert compare("2025-03-22T15:12:01Z", 0) == 1
        assert equal(datetime.date(1970, 1, 2), 86_400_000)
        assert is_before(datetime.datetime(2025, 1, 1, tzinfo=UTC), "2025-01-01T00:00:01Z")
        assert is_after(datetime.datetime(2025, 1, 1, 1, tzinfo=UTC), datetime.datetime(2025, 1, 1))

    def test_spans(self) -> None:
        """Spans compare as durations."""
        from tempus.arithmetic import compare
        from tempus.core import Duration

        assert compare(Duration(seconds=1), 1000) == 0
        assert compare("PT1M", datetime.timedelta(minutes=2)) == -1

    def test_point_and_span_rejected(self) -> None:
        """A point is not comparable to a span."""
        from tempus.arithmetic import compare
        from tempus.core import Duration, Instant
        from tempus.errors import UnsupportedConversion

        with pytest.raises(UnsupportedConversion):
            compare(Instant.EPOCH, Duration.ZERO)

    def test_text_kinds_must_agree(self) -> None:
        """Text on both sides must read as the same kind."""
        from tempus.arithmetic import compare

        with pytest.raises(TypeError):
            compare("PT1S", "1970-01-01T00:00:00Z")

    def test_min_max_return_originals(self) -> None:
        """min_value and max_value return the values as given."""
        from tempus.arithmetic import max_value, min_value

        d = datetime.date(2025, 1, 1)
        text = "2024-06-01T00:00:00Z"
        assert min_value(d, text, 2_000_000_000_000) is text
        assert max_value(d, text, 2_000_000_000_000) == 2_000_000_000_000
        with pytest.raises(ValueError):
            min_value()

    def test_between_and_until(self) -> None:
        """between gives a Duration; until counts whole units."""
        from tempus.arithmetic import between, until
        from tempus.core import Duration

        assert between(0, "1970-01-01T00:01:00Z") == Duration(minutes=1)
        assert until("2025-03-22T21:53:26Z", "2025-12-25T00:00:00Z", "days") == 277
        assert until(datetime.date(2025, 1, 31), datetime.date(2025, 3, 31), "months") == 2

    def test_now(self) -> None:
        """now() is an Instant near the host clock."""
        from tempus.arithmetic import now
        from tempus.core import Instant

        assert isinstance(now(), Instant)
