"""Duration class representing a signed span of time.

This module provides the Duration class, the canonical span type. A
Duration is stored as signed seconds plus a nanosecond adjustment that is
always in [0, 1_000_000_000); the sign lives in the seconds.
"""

from __future__ import annotations

import datetime as _dt
from typing import TYPE_CHECKING, Any, ClassVar

from tempus._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from tempus.errors import DivisionByZero, UnsupportedOperation, ValidationError
from tempus.units.registry import to_unit
from tempus.units.unit import Unit

if TYPE_CHECKING:
    from tempus.core.instant import Instant


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder matching _trunc_div (takes the sign of a)."""
    return a - b * _trunc_div(a, b)


class Duration:
    """A signed span of time with nanosecond precision.

    The internal representation is normalized such that:
    - `_seconds` holds the sign and may be any integer
    - `_nanos` is always in the range [0, 1_000_000_000)

    A span of -0.5 seconds is therefore stored as seconds=-1,
    nanos=500_000_000.

    Examples:
        >>> d = Duration(hours=1, minutes=30)
        >>> d.seconds
        5400

        >>> Duration(milliseconds=-500)
        Duration(seconds=-1, nanos=500000000)

        >>> str(Duration(days=1, seconds=3661))
        'P1DT1H1M1S'
    """

    __slots__ = ("_seconds", "_nanos")

    ZERO: ClassVar[Duration]

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        All parameters can be positive, negative, or zero. The resulting
        duration is normalized to canonical form.

        Args:
            days: Number of 24-hour days.
            hours: Number of hours.
            minutes: Number of minutes.
            seconds: Number of seconds.
            milliseconds: Number of milliseconds.
            microseconds: Number of microseconds.
            nanoseconds: Number of nanoseconds.

        Examples:
            >>> Duration(seconds=90)
            Duration(seconds=90, nanos=0)

            >>> Duration(milliseconds=1500)
            Duration(seconds=1, nanos=500000000)
        """
        total_nanos = (
            days * NANOS_PER_DAY
            + hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + seconds * NANOS_PER_SECOND
            + milliseconds * NANOS_PER_MILLISECOND
            + microseconds * NANOS_PER_MICROSECOND
            + nanoseconds
        )
        self._seconds, self._nanos = divmod(total_nanos, NANOS_PER_SECOND)

    @classmethod
    def _from_internal(cls, seconds: int, nanos: int) -> Duration:
        """Create a Duration from already-normalized fields."""
        result = object.__new__(cls)
        result._seconds = seconds
        result._nanos = nanos
        return result

    @classmethod
    def _of_nanos(cls, total_nanos: int) -> Duration:
        return cls._from_internal(*divmod(total_nanos, NANOS_PER_SECOND))

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def zero(cls) -> Duration:
        """Return the zero-length duration."""
        return cls.ZERO

    @classmethod
    def of(cls, amount: int, unit: Any) -> Duration:
        """Create a Duration of an amount of a unit.

        Units longer than WEEKS have no exact length and are rejected.

        Args:
            amount: The number of units (can be negative).
            unit: A unit reference.

        Returns:
            The Duration.

        Raises:
            UnsupportedOperation: If the unit's length is an estimate.

        Examples:
            >>> Duration.of(3, "min")
            Duration(seconds=180, nanos=0)
        """
        u = to_unit(unit)
        if u.is_duration_estimated:
            raise UnsupportedOperation("create a duration of", "an estimated unit", u)
        return cls._of_nanos(amount * u.nanos)

    @classmethod
    def from_days(cls, days: int) -> Duration:
        """Create a Duration of standard 24-hour days."""
        return cls._from_internal(days * SECONDS_PER_DAY, 0)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        """Create a Duration from a number of hours."""
        return cls._from_internal(hours * SECONDS_PER_HOUR, 0)

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        """Create a Duration from a number of minutes."""
        return cls._from_internal(minutes * SECONDS_PER_MINUTE, 0)

    @classmethod
    def from_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        """Create a Duration from seconds and an optional nano adjustment.

        Examples:
            >>> Duration.from_seconds(3, -1)
            Duration(seconds=2, nanos=999999999)
        """
        return cls._of_nanos(seconds * NANOS_PER_SECOND + nano_adjustment)

    @classmethod
    def from_millis(cls, millis: int) -> Duration:
        """Create a Duration from a number of milliseconds."""
        return cls._of_nanos(millis * NANOS_PER_MILLISECOND)

    @classmethod
    def from_micros(cls, micros: int) -> Duration:
        """Create a Duration from a number of microseconds."""
        return cls._of_nanos(micros * NANOS_PER_MICROSECOND)

    @classmethod
    def from_nanos(cls, nanos: int) -> Duration:
        """Create a Duration from a number of nanoseconds."""
        return cls._of_nanos(nanos)

    @classmethod
    def from_timedelta(cls, delta: _dt.timedelta) -> Duration:
        """Create a Duration from a timedelta, exactly.

        Examples:
            >>> Duration.from_timedelta(datetime.timedelta(days=-1))
            Duration(seconds=-86400, nanos=0)
        """
        return cls._from_internal(
            delta.days * SECONDS_PER_DAY + delta.seconds,
            delta.microseconds * NANOS_PER_MICROSECOND,
        )

    @classmethod
    def between(cls, start: Instant, end: Instant) -> Duration:
        """Return the Duration from start to end (negative if end is earlier)."""
        return cls._of_nanos(end.to_epoch_nanos() - start.to_epoch_nanos())

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Parse an ISO-8601 duration such as "PT1H30M" or "-P1DT0.5S".

        Raises:
            MalformedInput: If the text does not match the grammar.
        """
        from tempus.format.iso8601 import parse_duration

        return parse_duration(text)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def seconds(self) -> int:
        """Return the signed whole seconds (floored)."""
        return self._seconds

    @property
    def nanos(self) -> int:
        """Return the nanosecond adjustment, always in [0, 1e9)."""
        return self._nanos

    @property
    def units(self) -> tuple[Unit, Unit]:
        """Return the units this duration is stored in."""
        return (Unit.SECONDS, Unit.NANOS)

    def get(self, unit: Any) -> int:
        """Return the stored amount for SECONDS or NANOS.

        Raises:
            UnsupportedOperation: For any other unit.
        """
        u = to_unit(unit)
        if u is Unit.SECONDS:
            return self._seconds
        if u is Unit.NANOS:
            return self._nanos
        raise UnsupportedOperation("get", f"unit {u.value} of a duration", self)

    def total_nanos(self) -> int:
        """Return the total length in nanoseconds (exact)."""
        return self._seconds * NANOS_PER_SECOND + self._nanos

    @property
    def is_zero(self) -> bool:
        return self._seconds == 0 and self._nanos == 0

    @property
    def is_negative(self) -> bool:
        return self._seconds < 0

    @property
    def is_positive(self) -> bool:
        return not self.is_negative and not self.is_zero

    # =========================================================================
    # Conversions
    # =========================================================================

    def to_days(self) -> int:
        """Return the number of whole days, truncated toward zero."""
        return _trunc_div(self._seconds, SECONDS_PER_DAY)

    def to_hours(self) -> int:
        return _trunc_div(self._seconds, SECONDS_PER_HOUR)

    def to_minutes(self) -> int:
        return _trunc_div(self._seconds, SECONDS_PER_MINUTE)

    def to_seconds(self) -> int:
        return self._seconds

    def to_millis(self) -> int:
        """Return the total length in milliseconds, truncated toward zero.

        Examples:
            >>> Duration(nanoseconds=-1_500_000).to_millis()
            -1
        """
        return _trunc_div(self.total_nanos(), NANOS_PER_MILLISECOND)

    def to_nanos(self) -> int:
        return self.total_nanos()

    def to_timedelta(self) -> _dt.timedelta:
        """Return the equivalent timedelta, truncated to microseconds."""
        micros = _trunc_div(self.total_nanos(), NANOS_PER_MICROSECOND)
        return _dt.timedelta(microseconds=micros)

    def to_days_part(self) -> int:
        return _trunc_div(self._seconds, SECONDS_PER_DAY)

    def to_hours_part(self) -> int:
        return _trunc_mod(self.to_hours(), 24)

    def to_minutes_part(self) -> int:
        return _trunc_mod(self.to_minutes(), 60)

    def to_seconds_part(self) -> int:
        return _trunc_mod(self._seconds, 60)

    def to_millis_part(self) -> int:
        return self._nanos // NANOS_PER_MILLISECOND

    def to_nanos_part(self) -> int:
        return self._nanos

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def plus(self, other: Duration) -> Duration:
        """Return this duration plus another."""
        return Duration._of_nanos(self.total_nanos() + other.total_nanos())

    def minus(self, other: Duration) -> Duration:
        """Return this duration minus another."""
        return Duration._of_nanos(self.total_nanos() - other.total_nanos())

    def plus_days(self, days: int) -> Duration:
        return Duration._of_nanos(self.total_nanos() + days * NANOS_PER_DAY)

    def plus_hours(self, hours: int) -> Duration:
        return Duration._of_nanos(self.total_nanos() + hours * NANOS_PER_HOUR)

    def plus_minutes(self, minutes: int) -> Duration:
        return Duration._of_nanos(self.total_nanos() + minutes * NANOS_PER_MINUTE)

    def plus_seconds(self, seconds: int) -> Duration:
        return Duration._from_internal(self._seconds + seconds, self._nanos)

    def plus_millis(self, millis: int) -> Duration:
        return Duration._of_nanos(self.total_nanos() + millis * NANOS_PER_MILLISECOND)

    def plus_nanos(self, nanos: int) -> Duration:
        return Duration._of_nanos(self.total_nanos() + nanos)

    def minus_days(self, days: int) -> Duration:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> Duration:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> Duration:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> Duration:
        return self.plus_seconds(-seconds)

    def minus_millis(self, millis: int) -> Duration:
        return self.plus_millis(-millis)

    def minus_nanos(self, nanos: int) -> Duration:
        return self.plus_nanos(-nanos)

    def multiplied_by(self, scalar: int) -> Duration:
        """Return this duration multiplied by an integer.

        Raises:
            TypeError: If scalar is not an integer.
        """
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            raise TypeError(
                f"can only multiply a Duration by an int, not {type(scalar).__name__}"
            )
        return Duration._of_nanos(self.total_nanos() * scalar)

    def divided_by(self, divisor: int | Duration) -> Any:
        """Divide by an integer scalar or by another Duration.

        Dividing by an integer returns a Duration; dividing by a Duration
        returns the whole number of times the divisor fits. Both round
        toward zero.

        Args:
            divisor: An int or a Duration.

        Returns:
            A Duration for an int divisor, an int for a Duration divisor.

        Raises:
            DivisionByZero: If the divisor is zero.
            TypeError: If the divisor is neither an int nor a Duration.

        Examples:
            >>> Duration(seconds=100).divided_by(3)
            Duration(seconds=33, nanos=333333333)

            >>> Duration(hours=1).divided_by(Duration(minutes=7))
            8
        """
        if isinstance(divisor, Duration):
            if divisor.is_zero:
                raise DivisionByZero(self)
            return _trunc_div(self.total_nanos(), divisor.total_nanos())
        if not isinstance(divisor, int) or isinstance(divisor, bool):
            raise TypeError(
                f"can only divide a Duration by an int or a Duration, not {type(divisor).__name__}"
            )
        if divisor == 0:
            raise DivisionByZero(self)
        return Duration._of_nanos(_trunc_div(self.total_nanos(), divisor))

    def negated(self) -> Duration:
        return Duration._of_nanos(-self.total_nanos())

    def abs(self) -> Duration:
        return self.negated() if self.is_negative else self

    def truncated_to(self, unit: Any) -> Duration:
        """Truncate toward zero to a whole number of a unit.

        The unit must be at most DAYS and divide a day evenly.

        Raises:
            UnsupportedOperation: If the unit is longer than a day.

        Examples:
            >>> Duration(seconds=-90).truncated_to("min")
            Duration(seconds=-60, nanos=0)
        """
        u = to_unit(unit)
        if u is Unit.NANOS:
            return self
        if u > Unit.DAYS or NANOS_PER_DAY % u.nanos:
            raise UnsupportedOperation("truncate", f"a duration to {u.value}", self)
        total = self.total_nanos()
        return Duration._of_nanos(total - _trunc_mod(total, u.nanos))

    def with_seconds(self, seconds: int) -> Duration:
        return Duration._from_internal(seconds, self._nanos)

    def with_nanos(self, nano_of_second: int) -> Duration:
        """Return a copy with the nanosecond adjustment replaced.

        Raises:
            ValidationError: If the value is outside [0, 1e9).
        """
        if not 0 <= nano_of_second < NANOS_PER_SECOND:
            raise ValidationError(
                f"nano-of-second must be 0-999999999, got {nano_of_second}"
            )
        return Duration._from_internal(self._seconds, nano_of_second)

    # =========================================================================
    # Operators
    # =========================================================================

    def __add__(self, other: object) -> Any:
        """Add a Duration, or shift an Instant (Duration + Instant -> Instant)."""
        from tempus.core.instant import Instant

        if isinstance(other, Duration):
            return self.plus(other)
        if isinstance(other, Instant):
            return other.plus(self)
        return NotImplemented

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other: object) -> Duration:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> Any:
        if not isinstance(other, (int, Duration)) or isinstance(other, bool):
            return NotImplemented
        return self.divided_by(other)

    def __neg__(self) -> Duration:
        return self.negated()

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) < (other._seconds, other._nanos)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) <= (other._seconds, other._nanos)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) > (other._seconds, other._nanos)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) >= (other._seconds, other._nanos)

    def __hash__(self) -> int:
        return hash((Duration, self._seconds, self._nanos))

    def __bool__(self) -> bool:
        return not self.is_zero

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, nanos={self._nanos})"

    def __str__(self) -> str:
        """Return the ISO-8601 representation, e.g. "PT1H30M"."""
        from tempus.format.iso8601 import format_duration

        return format_duration(self)


Duration.ZERO = Duration()


__all__ = ["Duration"]
