"""Calendar utilities for Tempus.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, and conversions between
(year, month, day) triples, ordinals and epoch days.

Epoch day 0 = 1970-01-01. Ordinal 1 = 0001-01-01.

This module is not part of the public API.
"""

from __future__ import annotations

from tempus._internal.constants import (
    DAYS_IN_MONTH,
    MAX_YEAR,
    MIN_YEAR,
    UNIX_EPOCH_ORDINAL,
)
from tempus.errors import ValidationError

# Days in a full 400-year Gregorian cycle
_DAYS_PER_400_YEARS = 146_097


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValidationError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    The ordinal for 0000-12-31 (last day of 1 BCE) is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    y = year - 1

    # Python's // floors toward negative infinity, so this holds for
    # negative years as well
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    if ordinal <= 0:
        # Shift into positive ordinals by whole 400-year cycles
        cycles = -ordinal // _DAYS_PER_400_YEARS + 1
        year, month, day = ordinal_to_ymd(ordinal + cycles * _DAYS_PER_400_YEARS)
        return (year - 400 * cycles, month, day)

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = doy_to_md(year, n + 1)
    return (year, month, day)


def doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-indexed day-of-year to (month, day).

    Raises:
        ValidationError: If doy is outside the year.
    """
    if doy < 1 or doy > days_in_year(year):
        raise ValidationError(
            f"day-of-year must be between 1 and {days_in_year(year)} for {year}, got {doy}"
        )
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValidationError(f"invalid day of year: {doy} for year {year}")


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to days since 1970-01-01."""
    return ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to (year, month, day)."""
    return ordinal_to_ymd(epoch_day + UNIX_EPOCH_ORDINAL)


def epoch_day_to_day_of_week(epoch_day: int) -> int:
    """Return the ISO day of week (Monday=1, Sunday=7).

    1970-01-01 was a Thursday.
    """
    return (epoch_day + 3) % 7 + 1


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-indexed day of the year."""
    return days_before_month(year, month) + day


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid date.

    Raises:
        ValidationError: If the date is invalid.
    """
    validate_year(year)
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_year(year: int) -> None:
    """Validate that a year is within MIN_YEAR to MAX_YEAR.

    Raises:
        ValidationError: If the year is out of range.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "doy_to_md",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "epoch_day_to_day_of_week",
    "day_of_year",
    "validate_date",
    "validate_year",
]
