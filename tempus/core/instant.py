"""Instant class representing an absolute point on the time-line.

This module provides the Instant class, the canonical zone-free point in
time. An Instant is stored as signed seconds since 1970-01-01T00:00:00Z
plus a nanosecond-of-second in [0, 1_000_000_000).
"""

from __future__ import annotations

import datetime as _dt
import time as _time
from typing import Any, ClassVar

from tempus._internal.calendar import epoch_day_to_ymd
from tempus._internal.constants import (
    DEFAULT_RESOLUTION,
    NANOS_PER_DAY,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from tempus.core.duration import Duration, _trunc_div
from tempus.errors import UnsupportedOperation, ValidationError
from tempus.units.registry import to_unit
from tempus.units.unit import Unit

_EPOCH_DATETIME = _dt.datetime(1970, 1, 1, tzinfo=_dt.timezone.utc)

# Number of months in each calendar-based unit
_MONTHS_PER_UNIT: dict[Unit, int] = {
    Unit.MONTHS: 1,
    Unit.YEARS: 12,
    Unit.DECADES: 120,
    Unit.CENTURIES: 1_200,
    Unit.MILLENNIA: 12_000,
}


class Instant:
    """An instantaneous point on the time-line, independent of any zone.

    Instants are immutable, hashable and totally ordered by
    (epoch_second, nano).

    Examples:
        >>> i = Instant.from_epoch_milli(1742656321861)
        >>> i.epoch_second
        1742656321
        >>> i.nano
        861000000

        >>> str(Instant.from_epoch_second(0))
        '1970-01-01T00:00:00Z'

        >>> Instant.from_epoch_second(10) - Instant.from_epoch_second(4)
        Duration(seconds=6, nanos=0)
    """

    __slots__ = ("_seconds", "_nanos")

    EPOCH: ClassVar[Instant]

    def __init__(self, epoch_second: int = 0, nano_adjustment: int = 0) -> None:
        """Create an Instant from epoch seconds and a nano adjustment.

        The adjustment may be any integer; it is carried into the seconds.

        Args:
            epoch_second: Seconds since 1970-01-01T00:00:00Z.
            nano_adjustment: Nanoseconds to add to the seconds.
        """
        total = epoch_second * NANOS_PER_SECOND + nano_adjustment
        self._seconds, self._nanos = divmod(total, NANOS_PER_SECOND)

    @classmethod
    def _from_internal(cls, seconds: int, nanos: int) -> Instant:
        """Create an Instant from already-normalized fields."""
        result = object.__new__(cls)
        result._seconds = seconds
        result._nanos = nanos
        return result

    @classmethod
    def _of_nanos(cls, total_nanos: int) -> Instant:
        return cls._from_internal(*divmod(total_nanos, NANOS_PER_SECOND))

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def from_epoch_second(cls, epoch_second: int, nano_adjustment: int = 0) -> Instant:
        """Create an Instant from seconds since the epoch."""
        return cls(epoch_second, nano_adjustment)

    @classmethod
    def from_epoch_milli(cls, epoch_milli: int) -> Instant:
        """Create an Instant from milliseconds since the epoch.

        Examples:
            >>> Instant.from_epoch_milli(-1)
            Instant(epoch_second=-1, nano=999000000)
        """
        return cls._of_nanos(epoch_milli * NANOS_PER_MILLISECOND)

    @classmethod
    def from_epoch_nanos(cls, epoch_nanos: int) -> Instant:
        """Create an Instant from nanoseconds since the epoch."""
        return cls._of_nanos(epoch_nanos)

    @classmethod
    def from_datetime(cls, dt: _dt.datetime) -> Instant:
        """Create an Instant from a datetime.

        Aware datetimes are converted through their UTC offset; naive
        datetimes are read as UTC.

        Examples:
            >>> Instant.from_datetime(datetime.datetime(1970, 1, 2))
            Instant(epoch_second=86400, nano=0)
        """
        if dt.tzinfo is None or dt.utcoffset() is None:
            dt = dt.replace(tzinfo=_dt.timezone.utc)
        delta = dt - _EPOCH_DATETIME
        return cls._from_internal(
            delta.days * SECONDS_PER_DAY + delta.seconds,
            delta.microseconds * 1_000,
        )

    @classmethod
    def now(cls) -> Instant:
        """Return the current instant from the host clock."""
        return cls._of_nanos(_time.time_ns())

    @classmethod
    def parse(cls, text: str, resolution: Any = DEFAULT_RESOLUTION) -> Instant:
        """Parse ISO-8601 text; see tempus.format.iso8601.parse_instant."""
        from tempus.format.iso8601 import parse_instant

        return parse_instant(text, resolution)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def epoch_second(self) -> int:
        """Return the seconds since the epoch (floored)."""
        return self._seconds

    @property
    def nano(self) -> int:
        """Return the nanosecond-of-second, in [0, 1e9)."""
        return self._nanos

    def to_epoch_milli(self) -> int:
        """Return milliseconds since the epoch, floored.

        Examples:
            >>> Instant(-1, 999_999_999).to_epoch_milli()
            -1
        """
        return self.to_epoch_nanos() // NANOS_PER_MILLISECOND

    def to_epoch_nanos(self) -> int:
        return self._seconds * NANOS_PER_SECOND + self._nanos

    def to_datetime(self, tz: _dt.tzinfo | None = _dt.timezone.utc) -> _dt.datetime:
        """Return the datetime for this instant in a zone.

        Sub-microsecond precision is truncated. Pass tz=None for a naive
        datetime holding the UTC wall clock.

        Raises:
            ValidationError: If the instant is outside the datetime range.
        """
        try:
            result = _EPOCH_DATETIME + _dt.timedelta(
                seconds=self._seconds, microseconds=self._nanos // 1_000
            )
        except OverflowError as e:
            raise ValidationError(
                f"instant {self!r} is outside the supported datetime range"
            ) from e
        if tz is None:
            return result.replace(tzinfo=None)
        if tz is _dt.timezone.utc:
            return result
        return result.astimezone(tz)

    def epoch_day(self) -> int:
        """Return the UTC epoch day containing this instant."""
        return self._seconds // SECONDS_PER_DAY

    def nano_of_day(self) -> int:
        """Return the nanosecond within the UTC day."""
        return (self._seconds % SECONDS_PER_DAY) * NANOS_PER_SECOND + self._nanos

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def plus(self, duration: Duration) -> Instant:
        return Instant._of_nanos(self.to_epoch_nanos() + duration.total_nanos())

    def minus(self, duration: Duration) -> Instant:
        return Instant._of_nanos(self.to_epoch_nanos() - duration.total_nanos())

    def plus_seconds(self, seconds: int) -> Instant:
        return Instant._from_internal(self._seconds + seconds, self._nanos)

    def plus_millis(self, millis: int) -> Instant:
        return Instant._of_nanos(self.to_epoch_nanos() + millis * NANOS_PER_MILLISECOND)

    def plus_nanos(self, nanos: int) -> Instant:
        return Instant._of_nanos(self.to_epoch_nanos() + nanos)

    def minus_seconds(self, seconds: int) -> Instant:
        return self.plus_seconds(-seconds)

    def minus_millis(self, millis: int) -> Instant:
        return self.plus_millis(-millis)

    def minus_nanos(self, nanos: int) -> Instant:
        return self.plus_nanos(-nanos)

    def truncated_to(self, unit: Any) -> Instant:
        """Drop all precision finer than a unit.

        Truncation is relative to the UTC day, so the unit must be at
        most DAYS and divide a day evenly.

        Raises:
            UnsupportedOperation: If the unit is longer than a day.

        Examples:
            >>> Instant(1742656321, 861_482_000).truncated_to("ms")
            Instant(epoch_second=1742656321, nano=861000000)
        """
        u = to_unit(unit)
        if u is Unit.NANOS:
            return self
        if u > Unit.DAYS or NANOS_PER_DAY % u.nanos:
            raise UnsupportedOperation("truncate", f"an instant to {u.value}", self)
        nod = self.nano_of_day()
        return Instant._of_nanos(self.to_epoch_nanos() - nod % u.nanos)

    def until(self, end: Instant, unit: Any) -> int:
        """Return the number of whole units from this instant to end.

        Units up to WEEKS are measured by exact span. MONTHS and longer
        use the proleptic Gregorian calendar in UTC, counting only
        complete months. The result is negative if end is earlier.

        Raises:
            UnsupportedOperation: For FOREVER.

        Examples:
            >>> start = Instant.parse("2025-03-22T21:53:26Z")
            >>> start.until(Instant.parse("2025-12-25T00:00:00Z"), "days")
            277
        """
        u = to_unit(unit)
        if u is Unit.FOREVER:
            raise UnsupportedOperation("measure", "an amount of forever", self)
        if not u.is_duration_estimated:
            span = end.to_epoch_nanos() - self.to_epoch_nanos()
            return _trunc_div(span, u.nanos)
        if u is Unit.ERAS:
            return _era(end) - _era(self)
        return _trunc_div(_months_between(self, end), _MONTHS_PER_UNIT[u])

    def is_before(self, other: Instant) -> bool:
        return self < other

    def is_after(self, other: Instant) -> bool:
        return self > other

    # =========================================================================
    # Operators
    # =========================================================================

    def __add__(self, other: object) -> Instant:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Any:
        """Subtract a Duration (-> Instant) or an Instant (-> Duration)."""
        if isinstance(other, Duration):
            return self.minus(other)
        if isinstance(other, Instant):
            return Duration.between(other, self)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return (self._seconds, self._nanos) < (other._seconds, other._nanos)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return (self._seconds, self._nanos) <= (other._seconds, other._nanos)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return (self._seconds, self._nanos) > (other._seconds, other._nanos)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return (self._seconds, self._nanos) >= (other._seconds, other._nanos)

    def __hash__(self) -> int:
        return hash((Instant, self._seconds, self._nanos))

    def __repr__(self) -> str:
        return f"Instant(epoch_second={self._seconds}, nano={self._nanos})"

    def __str__(self) -> str:
        """Return ISO-8601 text in UTC with as many fraction digits as needed."""
        from tempus.format.iso8601 import format_instant

        return format_instant(self)


Instant.EPOCH = Instant()


def _era(instant: Instant) -> int:
    year = epoch_day_to_ymd(instant.epoch_day())[0]
    return 1 if year >= 1 else 0


def _months_between(start: Instant, end: Instant) -> int:
    """Count complete calendar months from start to end in UTC."""
    y1, m1, d1 = epoch_day_to_ymd(start.epoch_day())
    y2, m2, d2 = epoch_day_to_ymd(end.epoch_day())
    months = (y2 * 12 + m2) - (y1 * 12 + m1)
    start_rest = (d1, start.nano_of_day())
    end_rest = (d2, end.nano_of_day())
    if months > 0 and end_rest < start_rest:
        months -= 1
    elif months < 0 and end_rest > start_rest:
        months += 1
    return months


__all__ = ["Instant"]
