"""Dates in non-ISO calendar systems.

ChronoDate is the base for calendar systems that share the Gregorian
month and day structure but number their years differently. Each date is
stored as an epoch day, so conversion to and from the time-line is exact.
"""

from __future__ import annotations

from typing import ClassVar

from tempus._internal.calendar import epoch_day_to_ymd, validate_date, ymd_to_epoch_day


class ChronoDate:
    """A date in a year-offset calendar system.

    Subclasses set YEAR_OFFSET (calendar year minus ISO year), plus the
    calendar and era names used for display.
    """

    __slots__ = ("_epoch_day",)

    YEAR_OFFSET: ClassVar[int] = 0
    CALENDAR: ClassVar[str] = "ISO"
    ERA_NAME: ClassVar[str] = "CE"

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a date from this calendar's proleptic year, month and day.

        Raises:
            ValidationError: If the date does not exist.
        """
        iso_year = year - self.YEAR_OFFSET
        validate_date(iso_year, month, day)
        self._epoch_day = ymd_to_epoch_day(iso_year, month, day)

    @classmethod
    def from_epoch_day(cls, epoch_day: int) -> ChronoDate:
        """Create a date of this calendar system from an epoch day."""
        result = object.__new__(cls)
        result._epoch_day = epoch_day
        return result

    def to_epoch_day(self) -> int:
        return self._epoch_day

    @property
    def year(self) -> int:
        """Return the proleptic year in this calendar system."""
        return epoch_day_to_ymd(self._epoch_day)[0] + self.YEAR_OFFSET

    @property
    def month(self) -> int:
        return epoch_day_to_ymd(self._epoch_day)[1]

    @property
    def day(self) -> int:
        return epoch_day_to_ymd(self._epoch_day)[2]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChronoDate):
            return NotImplemented
        return type(self) is type(other) and self._epoch_day == other._epoch_day

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ChronoDate) or type(self) is not type(other):
            return NotImplemented
        return self._epoch_day < other._epoch_day

    def __hash__(self) -> int:
        return hash((type(self), self._epoch_day))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.year}, {self.month}, {self.day})"

    def __str__(self) -> str:
        return f"{self.CALENDAR} {self.ERA_NAME} {self.year}-{self.month:02d}-{self.day:02d}"


class ThaiBuddhistDate(ChronoDate):
    """A date in the Thai solar calendar (Buddhist Era, ISO year + 543).

    Examples:
        >>> ThaiBuddhistDate(2568, 3, 22).to_epoch_day()
        20169
        >>> str(ThaiBuddhistDate.from_epoch_day(0))
        'ThaiBuddhist BE 2513-01-01'
    """

    __slots__ = ()

    YEAR_OFFSET = 543
    CALENDAR = "ThaiBuddhist"
    ERA_NAME = "BE"


class MinguoDate(ChronoDate):
    """A date in the Minguo calendar (Republic of China, ISO year - 1911).

    Examples:
        >>> MinguoDate(114, 3, 22).to_epoch_day()
        20169
    """

    __slots__ = ()

    YEAR_OFFSET = -1911
    CALENDAR = "Minguo"
    ERA_NAME = "ROC"


__all__ = ["ChronoDate", "ThaiBuddhistDate", "MinguoDate"]
