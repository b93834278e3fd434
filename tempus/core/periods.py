"""Year and YearMonth value types.

These are calendar periods without a day: a proleptic Gregorian year, and
a year paired with a month. Both can be anchored to the epoch day of
their first day, which is how they take part in instant arithmetic.
"""

from __future__ import annotations

from tempus._internal.calendar import (
    days_in_month,
    days_in_year,
    epoch_day_to_ymd,
    is_leap_year,
    validate_year,
    ymd_to_epoch_day,
)
from tempus.errors import ValidationError


class Year:
    """A year in the proleptic Gregorian calendar.

    Examples:
        >>> Year(2024).is_leap
        True
        >>> Year(2025).to_epoch_day()
        20089
        >>> str(Year(2025))
        '2025'
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        validate_year(value)
        self._value = value

    @classmethod
    def from_epoch_day(cls, epoch_day: int) -> Year:
        """Return the year containing an epoch day."""
        return cls(epoch_day_to_ymd(epoch_day)[0])

    @property
    def value(self) -> int:
        return self._value

    @property
    def is_leap(self) -> bool:
        return is_leap_year(self._value)

    def length(self) -> int:
        """Return the number of days in the year."""
        return days_in_year(self._value)

    def at_month(self, month: int) -> YearMonth:
        return YearMonth(self._value, month)

    def to_epoch_day(self) -> int:
        """Return the epoch day of January 1st."""
        return ymd_to_epoch_day(self._value, 1, 1)

    def plus_years(self, years: int) -> Year:
        return Year(self._value + years)

    def with_year(self, year: int) -> Year:
        return Year(year)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash((Year, self._value))

    def __repr__(self) -> str:
        return f"Year({self._value})"

    def __str__(self) -> str:
        return str(self._value)


class YearMonth:
    """A month of a year in the proleptic Gregorian calendar.

    Examples:
        >>> ym = YearMonth(2024, 2)
        >>> ym.length_of_month()
        29
        >>> str(ym)
        '2024-02'
    """

    __slots__ = ("_year", "_month")

    def __init__(self, year: int, month: int) -> None:
        validate_year(year)
        if month < 1 or month > 12:
            raise ValidationError(f"month must be 1-12, got {month}")
        self._year = year
        self._month = month

    @classmethod
    def from_epoch_day(cls, epoch_day: int) -> YearMonth:
        """Return the year-month containing an epoch day."""
        year, month, _ = epoch_day_to_ymd(epoch_day)
        return cls(year, month)

    @classmethod
    def from_proleptic_month(cls, proleptic_month: int) -> YearMonth:
        year, month0 = divmod(proleptic_month, 12)
        return cls(year, month0 + 1)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def proleptic_month(self) -> int:
        """Return the month count from year 0, month 1."""
        return self._year * 12 + self._month - 1

    def length_of_month(self) -> int:
        return days_in_month(self._year, self._month)

    def to_epoch_day(self) -> int:
        """Return the epoch day of the first of the month."""
        return ymd_to_epoch_day(self._year, self._month, 1)

    def with_year(self, year: int) -> YearMonth:
        return YearMonth(year, self._month)

    def with_month(self, month: int) -> YearMonth:
        return YearMonth(self._year, month)

    def plus_months(self, months: int) -> YearMonth:
        return YearMonth.from_proleptic_month(self.proleptic_month + months)

    def _key(self) -> tuple[int, int]:
        return (self._year, self._month)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash((YearMonth, self._year, self._month))

    def __repr__(self) -> str:
        return f"YearMonth({self._year}, {self._month})"

    def __str__(self) -> str:
        if self._year < 0:
            return f"-{-self._year:04d}-{self._month:02d}"
        return f"{self._year:04d}-{self._month:02d}"


__all__ = ["Year", "YearMonth"]
