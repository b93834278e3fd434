"""Field enumeration for calendar and clock components.

This module provides the Field enum used to read ("get") and replace
("with") individual components of temporal values, as opposed to Unit,
which measures amounts of time.
"""

from __future__ import annotations

from enum import Enum

from tempus._internal.constants import (
    MAX_OFFSET_SECONDS,
    NANOS_PER_DAY,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    SECONDS_PER_DAY,
)
from tempus.errors import ValidationError


class Field(Enum):
    """Calendar and clock fields.

    Each member's value is its canonical keyword alias. Time-based fields
    describe the wall clock within a day; date-based fields describe the
    proleptic Gregorian calendar; INSTANT_SECONDS and OFFSET_SECONDS are
    neither.

    Examples:
        >>> Field.DAY_OF_YEAR.value
        'day-of-year'

        >>> Field.HOUR_OF_DAY.is_time_based
        True
    """

    NANO_OF_SECOND = "nano-of-second"
    NANO_OF_DAY = "nano-of-day"
    MICRO_OF_SECOND = "micro-of-second"
    MICRO_OF_DAY = "micro-of-day"
    MILLI_OF_SECOND = "milli-of-second"
    MILLI_OF_DAY = "milli-of-day"
    SECOND_OF_MINUTE = "second-of-minute"
    SECOND_OF_DAY = "second-of-day"
    MINUTE_OF_HOUR = "minute-of-hour"
    MINUTE_OF_DAY = "minute-of-day"
    HOUR_OF_AMPM = "hour-of-ampm"
    HOUR_OF_DAY = "hour-of-day"
    AMPM_OF_DAY = "ampm-of-day"
    DAY_OF_WEEK = "day-of-week"
    ALIGNED_WEEK_OF_MONTH = "aligned-week-of-month"
    ALIGNED_WEEK_OF_YEAR = "aligned-week-of-year"
    DAY_OF_MONTH = "day-of-month"
    DAY_OF_YEAR = "day-of-year"
    EPOCH_DAY = "epoch-day"
    MONTH_OF_YEAR = "month-of-year"
    PROLEPTIC_MONTH = "proleptic-month"
    YEAR_OF_ERA = "year-of-era"
    YEAR = "year"
    ERA = "era"
    INSTANT_SECONDS = "instant-seconds"
    OFFSET_SECONDS = "offset-seconds"

    @property
    def is_time_based(self) -> bool:
        """Return True for fields within a single day."""
        return self in _TIME_FIELDS

    @property
    def is_date_based(self) -> bool:
        """Return True for calendar fields."""
        return self in _DATE_FIELDS

    @property
    def value_range(self) -> tuple[int, int] | None:
        """Return the inclusive (min, max) range, or None if unbounded."""
        return _RANGES.get(self)

    def check(self, value: int) -> int:
        """Validate a value for this field.

        Args:
            value: The candidate value.

        Returns:
            The value unchanged.

        Raises:
            ValidationError: If the value is not an int or is out of range.
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValidationError(
                f"{self.value} must be an integer, got {type(value).__name__}"
            )
        bounds = _RANGES.get(self)
        if bounds is not None and not bounds[0] <= value <= bounds[1]:
            raise ValidationError(
                f"{self.value} must be between {bounds[0]} and {bounds[1]}, got {value}"
            )
        return value

    def __str__(self) -> str:
        return self.value


_TIME_FIELDS = frozenset(
    {
        Field.NANO_OF_SECOND,
        Field.NANO_OF_DAY,
        Field.MICRO_OF_SECOND,
        Field.MICRO_OF_DAY,
        Field.MILLI_OF_SECOND,
        Field.MILLI_OF_DAY,
        Field.SECOND_OF_MINUTE,
        Field.SECOND_OF_DAY,
        Field.MINUTE_OF_HOUR,
        Field.MINUTE_OF_DAY,
        Field.HOUR_OF_AMPM,
        Field.HOUR_OF_DAY,
        Field.AMPM_OF_DAY,
    }
)

_DATE_FIELDS = frozenset(
    {
        Field.DAY_OF_WEEK,
        Field.ALIGNED_WEEK_OF_MONTH,
        Field.ALIGNED_WEEK_OF_YEAR,
        Field.DAY_OF_MONTH,
        Field.DAY_OF_YEAR,
        Field.EPOCH_DAY,
        Field.MONTH_OF_YEAR,
        Field.PROLEPTIC_MONTH,
        Field.YEAR_OF_ERA,
        Field.YEAR,
        Field.ERA,
    }
)

_RANGES: dict[Field, tuple[int, int]] = {
    Field.NANO_OF_SECOND: (0, 999_999_999),
    Field.NANO_OF_DAY: (0, NANOS_PER_DAY - 1),
    Field.MICRO_OF_SECOND: (0, 999_999),
    Field.MICRO_OF_DAY: (0, NANOS_PER_DAY // NANOS_PER_MICROSECOND - 1),
    Field.MILLI_OF_SECOND: (0, 999),
    Field.MILLI_OF_DAY: (0, NANOS_PER_DAY // NANOS_PER_MILLISECOND - 1),
    Field.SECOND_OF_MINUTE: (0, 59),
    Field.SECOND_OF_DAY: (0, SECONDS_PER_DAY - 1),
    Field.MINUTE_OF_HOUR: (0, 59),
    Field.MINUTE_OF_DAY: (0, 24 * 60 - 1),
    Field.HOUR_OF_AMPM: (0, 11),
    Field.HOUR_OF_DAY: (0, 23),
    Field.AMPM_OF_DAY: (0, 1),
    Field.DAY_OF_WEEK: (1, 7),
    Field.ALIGNED_WEEK_OF_MONTH: (1, 5),
    Field.ALIGNED_WEEK_OF_YEAR: (1, 53),
    Field.DAY_OF_MONTH: (1, 31),
    Field.DAY_OF_YEAR: (1, 366),
    Field.MONTH_OF_YEAR: (1, 12),
    Field.YEAR_OF_ERA: (1, 10_000),
    Field.ERA: (0, 1),
    Field.OFFSET_SECONDS: (-MAX_OFFSET_SECONDS, MAX_OFFSET_SECONDS),
}


__all__ = ["Field"]
