"""ISO 8601 parsing and formatting.

This module converts between text and the canonical types.

Instants:
    - [-]YYYY-MM-DDTHH:MM:SS[.f](Z|+HH:MM|-HH:MM[:SS])
    - Years run from -9999 to 9999; a leading '-' marks years before 0000
    - The fraction is introduced by '.' and has 0 to 6 digits
    - parse_instant requires the offset; parse_temporal makes it optional

Durations:
    - [-+]PnDTnHnMn.nS, each component optionally signed
    - At least one component; 'T' must be followed by a time component

Examples:
    >>> parse_instant("2025-03-22T15:12:01.861482Z")
    Instant(epoch_second=1742656321, nano=861000000)

    >>> parse_instant("2025-03-22T15:12:01.861482Z", "us").nano
    861482000

    >>> format_utc(Instant(1742656321, 861_000_000))
    '2025-03-22T15:12:01.861Z'

    >>> parse_duration("PT1H30M")
    Duration(seconds=5400, nanos=0)

    >>> format_duration(Duration(days=1, seconds=9000))
    'P1DT2H30M'
"""

from __future__ import annotations

import datetime as _dt
import re
from typing import Any, NamedTuple

from tempus._internal.calendar import (
    days_in_month,
    epoch_day_to_ymd,
    ymd_to_epoch_day,
)
from tempus._internal.constants import (
    DEFAULT_RESOLUTION,
    MAX_OFFSET_SECONDS,
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.errors import MalformedInput, TimezoneError, ValidationError
from tempus.units.registry import to_unit
from tempus.units.timezone import fixed_offset, to_timezone


class _Fields(NamedTuple):
    """Components read from instant text."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    nanos: int
    offset_seconds: int | None

    def epoch_seconds(self) -> int:
        """Return the epoch second the fields denote (UTC if no offset)."""
        epoch_day = ymd_to_epoch_day(self.year, self.month, self.day)
        second_of_day = (
            self.hour * SECONDS_PER_HOUR + self.minute * SECONDS_PER_MINUTE + self.second
        )
        return epoch_day * SECONDS_PER_DAY + second_of_day - (self.offset_seconds or 0)


class _Cursor:
    """A position in the text being parsed.

    Every read either consumes the expected characters or raises
    MalformedInput naming the position where the text deviates.
    """

    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def fail(self, reason: str, pos: int | None = None) -> MalformedInput:
        return MalformedInput(self.text, self.pos if pos is None else pos, reason)

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def literal(self, ch: str) -> None:
        if self.peek() != ch:
            raise self.fail(f"expected {ch!r}")
        self.pos += 1

    def number(self, width: int, name: str, low: int, high: int) -> int:
        start = self.pos
        chunk = self.text[start : start + width]
        if len(chunk) != width or not chunk.isascii() or not chunk.isdigit():
            # Report the first offending character
            for i, ch in enumerate(chunk):
                if not ("0" <= ch <= "9"):
                    raise self.fail(f"expected {width}-digit {name}", start + i)
            raise self.fail(f"expected {width}-digit {name}", start + len(chunk))
        value = int(chunk)
        if not low <= value <= high:
            raise self.fail(f"{name} must be {low}-{high}, got {value}", start)
        self.pos += width
        return value

    def fraction(self, max_digits: int) -> int:
        """Read up to max_digits fraction digits, returning nanoseconds."""
        start = self.pos
        while self.pos < len(self.text) and "0" <= self.text[self.pos] <= "9":
            self.pos += 1
        digits = self.text[start : self.pos]
        if len(digits) > max_digits:
            raise self.fail(f"at most {max_digits} fraction digits allowed", start + max_digits)
        if not digits:
            return 0
        return int(digits.ljust(9, "0"))


def _read_offset(cursor: _Cursor) -> int:
    """Read 'Z' or +HH:MM[:SS], returning offset seconds."""
    start = cursor.pos
    sign_char = cursor.peek()
    if sign_char == "Z":
        cursor.pos += 1
        return 0
    if sign_char not in ("+", "-"):
        raise cursor.fail("expected 'Z' or a numeric offset")
    cursor.pos += 1
    hours = cursor.number(2, "offset hours", 0, 18)
    cursor.literal(":")
    minutes = cursor.number(2, "offset minutes", 0, 59)
    seconds = 0
    if cursor.peek() == ":":
        cursor.pos += 1
        seconds = cursor.number(2, "offset seconds", 0, 59)
    total = hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
    if total > MAX_OFFSET_SECONDS:
        raise cursor.fail("offset must be within +/-18:00", start)
    return -total if sign_char == "-" else total


def _read_fields(text: str, offset_required: bool) -> _Fields:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    cursor = _Cursor(text)

    # Years before 0000 carry a leading minus sign
    if cursor.peek() == "-":
        cursor.pos += 1
        year = -cursor.number(4, "year", 1, -MIN_YEAR)
    else:
        year = cursor.number(4, "year", 0, MAX_YEAR)
    cursor.literal("-")
    month = cursor.number(2, "month", 1, 12)
    cursor.literal("-")
    day_pos = cursor.pos
    day = cursor.number(2, "day", 1, 31)
    if day > days_in_month(year, month):
        raise cursor.fail(f"day {day} does not exist in {year:04d}-{month:02d}", day_pos)
    cursor.literal("T")
    hour = cursor.number(2, "hour", 0, 23)
    cursor.literal(":")
    minute = cursor.number(2, "minute", 0, 59)
    cursor.literal(":")
    second = cursor.number(2, "second", 0, 59)

    nanos = 0
    if cursor.peek() == ".":
        cursor.pos += 1
        nanos = cursor.fraction(6)

    offset: int | None = None
    if not cursor.at_end() or offset_required:
        offset = _read_offset(cursor)
    if not cursor.at_end():
        raise cursor.fail("unexpected trailing text")

    return _Fields(year, month, day, hour, minute, second, nanos, offset)


def parse_instant(text: str, resolution: Any = DEFAULT_RESOLUTION) -> Instant:
    """Parse ISO-8601 text with an offset into an Instant.

    The offset is applied and then discarded. The result is truncated to
    the resolution, which defaults to milliseconds.

    Args:
        text: Text such as "2025-03-22T10:12:01.861482-05:00".
        resolution: A unit reference to truncate to, or None for no
            truncation.

    Returns:
        The parsed Instant.

    Raises:
        MalformedInput: If the text deviates from the grammar.
        UnknownUnit: If the resolution does not name a unit.
        UnsupportedOperation: If the resolution is longer than a day.

    Examples:
        >>> parse_instant("2025-03-22T10:12:01.861482-05:00")
        Instant(epoch_second=1742656321, nano=861000000)

        >>> parse_instant("2025-03-22T15:12:01.861482Z", None).nano
        861482000
    """
    fields = _read_fields(text, offset_required=True)
    instant = Instant._from_internal(fields.epoch_seconds(), fields.nanos)
    if resolution is None:
        return instant
    return instant.truncated_to(to_unit(resolution))


def parse_temporal(text: str) -> Any:
    """Parse ISO-8601 text, keeping the offset when one is present.

    Returns:
        An aware datetime with a fixed-offset tzinfo when the text has an
        offset, otherwise an Instant reading the text as UTC.

    Raises:
        MalformedInput: If the text deviates from the grammar.

    Examples:
        >>> parse_temporal("2025-03-22T10:12:01-05:00").utcoffset()
        datetime.timedelta(days=-1, seconds=68400)

        >>> parse_temporal("2025-03-22T15:12:01")
        Instant(epoch_second=1742656321, nano=0)
    """
    fields = _read_fields(text, offset_required=False)
    if fields.offset_seconds is None:
        return Instant._from_internal(fields.epoch_seconds(), fields.nanos)
    if fields.year < 1:
        raise MalformedInput(text, 0, "years before 0001 cannot carry an offset")
    return _dt.datetime(
        fields.year,
        fields.month,
        fields.day,
        fields.hour,
        fields.minute,
        fields.second,
        fields.nanos // 1_000,
        tzinfo=fixed_offset(fields.offset_seconds),
    )


# Follows the java.time grammar: optional leading sign, optionally
# signed components, '.' or ',' before up to nine fraction digits
_DURATION_PATTERN = re.compile(
    r"([-+]?)P"
    r"(?:([-+]?[0-9]+)D)?"
    r"(T(?:([-+]?[0-9]+)H)?(?:([-+]?[0-9]+)M)?(?:([-+]?[0-9]+)(?:[.,]([0-9]{0,9}))?S)?)?",
    re.IGNORECASE,
)


def parse_duration(text: str) -> Duration:
    """Parse an ISO-8601 duration strictly.

    Args:
        text: Text such as "PT15M", "P2DT3H4M" or "-PT6H3M".

    Returns:
        The parsed Duration.

    Raises:
        MalformedInput: If the text does not match the grammar.

    Examples:
        >>> parse_duration("PT20.345S")
        Duration(seconds=20, nanos=345000000)

        >>> parse_duration("-PT6H3M")
        Duration(seconds=-21780, nanos=0)

        >>> parse_duration("PT-0.5S")
        Duration(seconds=-1, nanos=500000000)
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    match = _DURATION_PATTERN.fullmatch(text)
    if match is None:
        raise MalformedInput(text, None, "not an ISO-8601 duration")

    negate, days, time_part, hours, minutes, seconds, fraction = match.groups()
    if time_part is not None and time_part.upper() == "T":
        raise MalformedInput(text, match.start(3) + 1, "'T' must be followed by a component")
    if days is None and hours is None and minutes is None and seconds is None:
        raise MalformedInput(text, None, "no duration components")

    total = 0
    if days is not None:
        total += int(days) * SECONDS_PER_DAY * NANOS_PER_SECOND
    if hours is not None:
        total += int(hours) * SECONDS_PER_HOUR * NANOS_PER_SECOND
    if minutes is not None:
        total += int(minutes) * SECONDS_PER_MINUTE * NANOS_PER_SECOND
    if seconds is not None:
        whole = int(seconds)
        frac = int(fraction.ljust(9, "0")) if fraction else 0
        if seconds.startswith("-"):
            frac = -frac
        total += whole * NANOS_PER_SECOND + frac
    if negate == "-":
        total = -total
    return Duration.from_nanos(total)


def format_duration(duration: Duration) -> str:
    """Format a Duration as ISO-8601 text.

    Negative durations are written with a single leading '-'. The zero
    duration is "PT0S".

    Examples:
        >>> format_duration(Duration(seconds=90, nanoseconds=500_000_000))
        'PT1M30.5S'

        >>> format_duration(Duration(seconds=-90))
        '-PT1M30S'
    """
    total = duration.total_nanos()
    if total == 0:
        return "PT0S"

    is_negative = total < 0
    total = abs(total)
    whole_seconds, nanos = divmod(total, NANOS_PER_SECOND)
    days, remaining = divmod(whole_seconds, SECONDS_PER_DAY)
    hours, remaining = divmod(remaining, SECONDS_PER_HOUR)
    minutes, secs = divmod(remaining, SECONDS_PER_MINUTE)

    parts = ["-" if is_negative else "", "P"]
    if days:
        parts.append(f"{days}D")
    if hours or minutes or secs or nanos:
        parts.append("T")
        if hours:
            parts.append(f"{hours}H")
        if minutes:
            parts.append(f"{minutes}M")
        if secs or nanos:
            if nanos:
                frac = f"{nanos:09d}".rstrip("0")
                parts.append(f"{secs}.{frac}S")
            else:
                parts.append(f"{secs}S")
    return "".join(parts)


def _wall_clock(epoch_second: int) -> str:
    epoch_day, second_of_day = divmod(epoch_second, SECONDS_PER_DAY)
    year, month, day = epoch_day_to_ymd(epoch_day)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError(
            f"year {year} is outside the formattable range {MIN_YEAR} to {MAX_YEAR}"
        )
    hours, remaining = divmod(second_of_day, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remaining, SECONDS_PER_MINUTE)
    year_str = f"-{-year:04d}" if year < 0 else f"{year:04d}"
    return f"{year_str}-{month:02d}-{day:02d}T{hours:02d}:{minutes:02d}:{seconds:02d}"


def _offset_text(offset_seconds: int) -> str:
    sign = "-" if offset_seconds < 0 else "+"
    hours, remaining = divmod(abs(offset_seconds), SECONDS_PER_HOUR)
    minutes, seconds = divmod(remaining, SECONDS_PER_MINUTE)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


def format_instant(instant: Instant) -> str:
    """Format an Instant in UTC with 0, 3, 6 or 9 fraction digits.

    Raises:
        ValidationError: If the instant falls outside years -9999 to 9999.

    Examples:
        >>> format_instant(Instant(0, 500_000))
        '1970-01-01T00:00:00.000500Z'
    """
    text = _wall_clock(instant.epoch_second)
    nanos = instant.nano
    if nanos:
        if nanos % 1_000_000 == 0:
            text += f".{nanos // 1_000_000:03d}"
        elif nanos % 1_000 == 0:
            text += f".{nanos // 1_000:06d}"
        else:
            text += f".{nanos:09d}"
    return text + "Z"


def format_utc(value: Any) -> str:
    """Format any instant-coercible value as yyyy-MM-ddTHH:mm:ss.SSSZ.

    Raises:
        ValidationError: If the instant falls outside years -9999 to 9999.

    Examples:
        >>> format_utc(0)
        '1970-01-01T00:00:00.000Z'
    """
    from tempus.convert.coerce import to_instant

    instant = to_instant(value)
    millis = instant.nano // NANOS_PER_MILLISECOND
    return f"{_wall_clock(instant.epoch_second)}.{millis:03d}Z"


def format_with_zone(value: Any, zone: Any) -> str:
    """Format an instant-coercible value with an explicit numeric offset.

    The wall clock is rendered in the zone and followed by the zone's
    offset at that instant, e.g. "2025-03-22T10:12:01.861-05:00".

    Raises:
        TimezoneError: If the zone reference does not name a zone.
    """
    from tempus.convert.coerce import to_instant

    instant = to_instant(value)
    tz = to_timezone(zone)
    offset = instant.to_datetime().astimezone(tz).utcoffset()
    if offset is None:
        raise TimezoneError(zone, "zone has no offset")
    offset_seconds = offset.days * SECONDS_PER_DAY + offset.seconds
    millis = instant.nano // NANOS_PER_MILLISECOND
    wall = _wall_clock(instant.epoch_second + offset_seconds)
    return f"{wall}.{millis:03d}{_offset_text(offset_seconds)}"


__all__ = [
    "parse_instant",
    "parse_temporal",
    "parse_duration",
    "format_duration",
    "format_instant",
    "format_utc",
    "format_with_zone",
]
