"""Unit enumeration for standard time units.

This module provides the Unit enum representing time measurement units
from nanoseconds up to eras and "forever". Units are used for truncation,
duration construction and decomposition, and "until" computations.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from tempus._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)

if TYPE_CHECKING:
    from tempus.core.duration import Duration


class Unit(Enum):
    """Standard time units, totally ordered from NANOS to FOREVER.

    Each member's value is its canonical keyword alias. Units up to and
    including DAYS have an exact length; WEEKS is exactly seven days;
    MONTHS and longer carry the average-Gregorian estimate (a year of
    365.2425 days).

    Examples:
        >>> Unit.HOURS.nanos
        3600000000000

        >>> Unit.MILLIS < Unit.SECONDS
        True

        >>> Unit.MONTHS.is_date_based
        True
    """

    NANOS = "ns"
    MICROS = "us"
    MILLIS = "ms"
    SECONDS = "s"
    MINUTES = "min"
    HOURS = "hr"
    HALF_DAYS = "half-days"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"
    DECADES = "decades"
    CENTURIES = "centuries"
    MILLENNIA = "millennia"
    ERAS = "eras"
    FOREVER = "forever"

    @property
    def nanos(self) -> int:
        """Return the (estimated) length of one unit in nanoseconds."""
        return _UNIT_NANOS[self]

    @property
    def duration(self) -> Duration:
        """Return the (estimated) length of one unit as a Duration.

        Examples:
            >>> Unit.MINUTES.duration
            Duration(seconds=60, nanos=0)
        """
        from tempus.core.duration import Duration

        return Duration(nanoseconds=_UNIT_NANOS[self])

    @property
    def is_time_based(self) -> bool:
        """Return True for units shorter than a day."""
        return _RANK[self] < _RANK[Unit.DAYS]

    @property
    def is_date_based(self) -> bool:
        """Return True for DAYS and longer, excluding FOREVER."""
        return _RANK[Unit.DAYS] <= _RANK[self] < _RANK[Unit.FOREVER]

    @property
    def is_duration_estimated(self) -> bool:
        """Return True if the unit's length is an estimate."""
        return _RANK[self] > _RANK[Unit.WEEKS]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return _RANK[self] < _RANK[other]

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return _RANK[self] <= _RANK[other]

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return _RANK[self] > _RANK[other]

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return _RANK[self] >= _RANK[other]


_RANK: dict[Unit, int] = {unit: rank for rank, unit in enumerate(Unit)}

# Average Gregorian year: 365.2425 days
_NANOS_PER_YEAR = 31_556_952 * NANOS_PER_SECOND

_UNIT_NANOS: dict[Unit, int] = {
    Unit.NANOS: 1,
    Unit.MICROS: NANOS_PER_MICROSECOND,
    Unit.MILLIS: NANOS_PER_MILLISECOND,
    Unit.SECONDS: NANOS_PER_SECOND,
    Unit.MINUTES: NANOS_PER_MINUTE,
    Unit.HOURS: NANOS_PER_HOUR,
    Unit.HALF_DAYS: 12 * NANOS_PER_HOUR,
    Unit.DAYS: NANOS_PER_DAY,
    Unit.WEEKS: 7 * NANOS_PER_DAY,
    Unit.MONTHS: _NANOS_PER_YEAR // 12,
    Unit.YEARS: _NANOS_PER_YEAR,
    Unit.DECADES: 10 * _NANOS_PER_YEAR,
    Unit.CENTURIES: 100 * _NANOS_PER_YEAR,
    Unit.MILLENNIA: 1_000 * _NANOS_PER_YEAR,
    Unit.ERAS: 1_000_000_000 * _NANOS_PER_YEAR,
    # Largest signed 64-bit second count plus the largest nano-of-second
    Unit.FOREVER: (2**63 - 1) * NANOS_PER_SECOND + 999_999_999,
}


__all__ = ["Unit"]
