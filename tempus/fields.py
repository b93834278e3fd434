"""Reading and replacing calendar and clock fields.

Fields are read from the wall clock the caller's value shows: zoned and
offset values in their own zone, Instants and zone-free values in UTC.
Replacing a field returns a value of the same kind as the one given.

Examples:
    >>> get_field("2025-03-22T21:53:26Z", "day-of-year")
    81
    >>> get_field(datetime.date(2025, 3, 22), Field.DAY_OF_WEEK)
    6
    >>> with_field(datetime.date(2025, 1, 31), "month", 2)
    datetime.date(2025, 2, 28)
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Callable, NamedTuple

from tempus._internal.calendar import (
    day_of_year,
    days_in_month,
    doy_to_md,
    epoch_day_to_day_of_week,
    epoch_day_to_ymd,
    validate_date,
    validate_year,
    ymd_to_epoch_day,
)
from tempus._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from tempus.convert.classify import Category, classify
from tempus.convert.coerce import to_instant, to_temporal
from tempus.convert.transform import is_transformable, reconstruct, transform
from tempus.core.chrono import ChronoDate
from tempus.core.instant import Instant
from tempus.core.periods import Year, YearMonth
from tempus.errors import UnsupportedField, ValidationError
from tempus.units.field import Field
from tempus.units.registry import to_field
from tempus.units.timezone import fixed_offset

_WALL_CLOCK_CATEGORIES = frozenset(
    {
        Category.INSTANT,
        Category.ZONED_DATE_TIME,
        Category.OFFSET_DATE_TIME,
        Category.LOCAL_DATE_TIME,
    }
)

# Fields available on values that have a year but no month or day
_YEAR_FIELDS = frozenset({Field.YEAR, Field.YEAR_OF_ERA, Field.ERA})
_YEAR_MONTH_FIELDS = _YEAR_FIELDS | {Field.MONTH_OF_YEAR, Field.PROLEPTIC_MONTH}


class _View(NamedTuple):
    """The civil fields a value exposes.

    epoch_day is None for times of day; nano_of_day is None for dates and
    periods; offset_seconds is None for zone-free values. year_offset is
    the calendar year minus the ISO year.
    """

    category: Category
    epoch_day: int | None
    nano_of_day: int | None
    offset_seconds: int | None
    date_fields: frozenset[Field] | None
    year_offset: int = 0
    tzinfo: _dt.tzinfo | None = None
    chrono_type: type[ChronoDate] | None = None
    source: Any = None

    def day(self, field: Any) -> int:
        if self.epoch_day is None:
            raise UnsupportedField(field, self.source)
        return self.epoch_day

    def nanos(self, field: Any) -> int:
        if self.nano_of_day is None:
            raise UnsupportedField(field, self.source)
        return self.nano_of_day

    def offset(self, field: Any) -> int:
        if self.offset_seconds is None:
            raise UnsupportedField(field, self.source)
        return self.offset_seconds


def _time_nanos(t: _dt.time | _dt.datetime) -> int:
    return (
        t.hour * NANOS_PER_HOUR
        + t.minute * NANOS_PER_MINUTE
        + t.second * NANOS_PER_SECOND
        + t.microsecond * NANOS_PER_MICROSECOND
    )


def _offset_of(value: _dt.datetime | _dt.time) -> int | None:
    offset = value.utcoffset()
    if offset is None:
        return None
    return offset.days * SECONDS_PER_DAY + offset.seconds


def _view(value: Any) -> _View:
    return _view_of(value)._replace(source=value)


def _view_of(value: Any) -> _View:
    category = classify(value)

    if category is Category.INSTANT:
        return _View(category, value.epoch_day(), value.nano_of_day(), None, None)
    if category in (
        Category.ZONED_DATE_TIME,
        Category.OFFSET_DATE_TIME,
        Category.LOCAL_DATE_TIME,
    ):
        epoch_day = ymd_to_epoch_day(value.year, value.month, value.day)
        return _View(
            category,
            epoch_day,
            _time_nanos(value),
            _offset_of(value),
            None,
            tzinfo=value.tzinfo,
        )
    if category is Category.LOCAL_DATE:
        epoch_day = ymd_to_epoch_day(value.year, value.month, value.day)
        return _View(category, epoch_day, None, None, None)
    if category in (Category.LOCAL_TIME, Category.OFFSET_TIME):
        return _View(
            category, None, _time_nanos(value), _offset_of(value), None, tzinfo=value.tzinfo
        )
    if category is Category.YEAR:
        return _View(category, value.to_epoch_day(), None, None, _YEAR_FIELDS)
    if category is Category.YEAR_MONTH:
        return _View(category, value.to_epoch_day(), None, None, _YEAR_MONTH_FIELDS)
    if category is Category.CALENDAR_DATE:
        return _View(
            category,
            value.to_epoch_day(),
            None,
            None,
            None,
            year_offset=value.YEAR_OFFSET,
            chrono_type=type(value),
        )
    if category in (Category.ISO_TEXT, Category.EPOCH_MILLIS):
        return _view_of(to_temporal(value))
    if category is Category.LEGACY_DATE:
        return _view_of(to_instant(value))
    raise UnsupportedField("any field", value)


def _check_supported(view: _View, field: Field, value: Any) -> None:
    if field is Field.OFFSET_SECONDS:
        ok = view.offset_seconds is not None
    elif field is Field.INSTANT_SECONDS:
        ok = view.epoch_day is not None and view.nano_of_day is not None
    elif field.is_time_based:
        ok = view.nano_of_day is not None
    elif view.epoch_day is None:
        ok = False
    elif view.date_fields is not None:
        ok = field in view.date_fields
    else:
        ok = True
    if not ok:
        raise UnsupportedField(field, value)


def _year_of_era(year: int) -> int:
    return year if year >= 1 else 1 - year


def _read(view: _View, field: Field) -> int:
    if field is Field.OFFSET_SECONDS:
        return view.offset(field)
    if field is Field.INSTANT_SECONDS:
        local_seconds = view.day(field) * SECONDS_PER_DAY + view.nanos(field) // NANOS_PER_SECOND
        return local_seconds - (view.offset_seconds or 0)

    if field.is_time_based:
        nod = view.nanos(field)
        sod = nod // NANOS_PER_SECOND
        hour = sod // 3600
        return {
            Field.NANO_OF_SECOND: nod % NANOS_PER_SECOND,
            Field.NANO_OF_DAY: nod,
            Field.MICRO_OF_SECOND: nod % NANOS_PER_SECOND // NANOS_PER_MICROSECOND,
            Field.MICRO_OF_DAY: nod // NANOS_PER_MICROSECOND,
            Field.MILLI_OF_SECOND: nod % NANOS_PER_SECOND // NANOS_PER_MILLISECOND,
            Field.MILLI_OF_DAY: nod // NANOS_PER_MILLISECOND,
            Field.SECOND_OF_MINUTE: sod % 60,
            Field.SECOND_OF_DAY: sod,
            Field.MINUTE_OF_HOUR: sod // 60 % 60,
            Field.MINUTE_OF_DAY: sod // 60,
            Field.HOUR_OF_AMPM: hour % 12,
            Field.HOUR_OF_DAY: hour,
            Field.AMPM_OF_DAY: hour // 12,
        }[field]

    epoch_day = view.day(field)
    iso_year, month, day = epoch_day_to_ymd(epoch_day)
    year = iso_year + view.year_offset
    if field is Field.DAY_OF_WEEK:
        return epoch_day_to_day_of_week(epoch_day)
    if field is Field.ALIGNED_WEEK_OF_MONTH:
        return (day - 1) // 7 + 1
    if field is Field.ALIGNED_WEEK_OF_YEAR:
        return (day_of_year(iso_year, month, day) - 1) // 7 + 1
    if field is Field.DAY_OF_MONTH:
        return day
    if field is Field.DAY_OF_YEAR:
        return day_of_year(iso_year, month, day)
    if field is Field.EPOCH_DAY:
        return epoch_day
    if field is Field.MONTH_OF_YEAR:
        return month
    if field is Field.PROLEPTIC_MONTH:
        return year * 12 + month - 1
    if field is Field.YEAR_OF_ERA:
        return _year_of_era(year)
    if field is Field.YEAR:
        return year
    return 1 if year >= 1 else 0


def get_field(value: Any, field: Any) -> int:
    """Read a field from a temporal value.

    Args:
        value: Any point in time Tempus can classify. Text and epoch
            milliseconds are read through to_temporal.
        field: A field reference ("day-of-year", "ms", Field.YEAR, ...).

    Returns:
        The field's value.

    Raises:
        UnknownField: If the reference does not name a field.
        UnsupportedField: If the value has no such field, e.g. an hour
            on a date or an offset on a zone-free value.

    Examples:
        >>> get_field(Instant.from_epoch_milli(1742656321861), "ms")
        861
    """
    f = to_field(field)
    view = _view(value)
    _check_supported(view, f, value)
    return _read(view, f)


# =============================================================================
# Replacement
# =============================================================================


def _with_time(nod: int, field: Field, new: int) -> int:
    nano = nod % NANOS_PER_SECOND
    sod = nod // NANOS_PER_SECOND
    hour, minute, second = sod // 3600, sod // 60 % 60, sod % 60

    if field is Field.NANO_OF_SECOND:
        return nod - nano + new
    if field is Field.MICRO_OF_SECOND:
        return nod - nano + new * NANOS_PER_MICROSECOND
    if field is Field.MILLI_OF_SECOND:
        return nod - nano + new * NANOS_PER_MILLISECOND
    if field is Field.NANO_OF_DAY:
        return new
    if field is Field.MICRO_OF_DAY:
        return new * NANOS_PER_MICROSECOND
    if field is Field.MILLI_OF_DAY:
        return new * NANOS_PER_MILLISECOND
    if field is Field.SECOND_OF_MINUTE:
        second = new
    elif field is Field.SECOND_OF_DAY:
        hour, minute, second = new // 3600, new // 60 % 60, new % 60
    elif field is Field.MINUTE_OF_HOUR:
        minute = new
    elif field is Field.MINUTE_OF_DAY:
        hour, minute = divmod(new, 60)
    elif field is Field.HOUR_OF_AMPM:
        hour = hour // 12 * 12 + new
    elif field is Field.HOUR_OF_DAY:
        hour = new
    elif field is Field.AMPM_OF_DAY:
        hour = hour % 12 + new * 12
    return (hour * 3600 + minute * 60 + second) * NANOS_PER_SECOND + nano


def _clamped(iso_year: int, month: int, day: int) -> int:
    validate_year(iso_year)
    return ymd_to_epoch_day(iso_year, month, min(day, days_in_month(iso_year, month)))


def _with_date(view: _View, field: Field, new: int) -> int:
    epoch_day = view.day(field)
    iso_year, month, day = epoch_day_to_ymd(epoch_day)
    offset = view.year_offset
    year = iso_year + offset

    if field is Field.DAY_OF_WEEK:
        return epoch_day + new - epoch_day_to_day_of_week(epoch_day)
    if field is Field.ALIGNED_WEEK_OF_MONTH:
        return epoch_day + (new - ((day - 1) // 7 + 1)) * 7
    if field is Field.ALIGNED_WEEK_OF_YEAR:
        current = (day_of_year(iso_year, month, day) - 1) // 7 + 1
        return epoch_day + (new - current) * 7
    if field is Field.DAY_OF_MONTH:
        validate_date(iso_year, month, new)
        return ymd_to_epoch_day(iso_year, month, new)
    if field is Field.DAY_OF_YEAR:
        new_month, new_day = doy_to_md(iso_year, new)
        return ymd_to_epoch_day(iso_year, new_month, new_day)
    if field is Field.EPOCH_DAY:
        return new
    if field is Field.MONTH_OF_YEAR:
        return _clamped(iso_year, new, day)
    if field is Field.PROLEPTIC_MONTH:
        new_year, month0 = divmod(new, 12)
        return _clamped(new_year - offset, month0 + 1, day)
    if field is Field.YEAR:
        return _clamped(new - offset, month, day)
    if field is Field.YEAR_OF_ERA:
        new_year = new if year >= 1 else 1 - new
        return _clamped(new_year - offset, month, day)
    # ERA
    era = 1 if year >= 1 else 0
    new_year = year if new == era else 1 - year
    return _clamped(new_year - offset, month, day)


def _naive_datetime(epoch_day: int, nod: int) -> _dt.datetime:
    year, month, day = epoch_day_to_ymd(epoch_day)
    if not 1 <= year <= 9999:
        raise ValidationError(f"year {year} is outside the datetime range")
    sod, nano = divmod(nod, NANOS_PER_SECOND)
    return _dt.datetime(
        year,
        month,
        day,
        sod // 3600,
        sod // 60 % 60,
        sod % 60,
        nano // NANOS_PER_MICROSECOND,
    )


def _rebuild(view: _View, epoch_day: int, nod: int, tz: _dt.tzinfo | None) -> Any:
    # Categories without a date ignore epoch_day; those without a time ignore nod
    category = view.category

    if category is Category.INSTANT:
        return Instant.from_epoch_second(epoch_day * SECONDS_PER_DAY, nod)
    if category in (
        Category.ZONED_DATE_TIME,
        Category.OFFSET_DATE_TIME,
        Category.LOCAL_DATE_TIME,
    ):
        return _naive_datetime(epoch_day, nod).replace(tzinfo=tz)
    if category is Category.LOCAL_DATE:
        return _naive_datetime(epoch_day, 0).date()
    if category in (Category.LOCAL_TIME, Category.OFFSET_TIME):
        return _naive_datetime(0, nod).time().replace(tzinfo=tz)
    if category is Category.YEAR:
        return Year.from_epoch_day(epoch_day)
    if category is Category.YEAR_MONTH:
        return YearMonth.from_epoch_day(epoch_day)
    if view.chrono_type is None:
        raise UnsupportedField("any field", view.source)
    return view.chrono_type.from_epoch_day(epoch_day)


def with_field(value: Any, field: Any, new_value: int) -> Any:
    """Return a copy of a temporal value with one field replaced.

    Changing the month or year clamps the day of month to the new
    month's length. Replacing INSTANT_SECONDS keeps the nanosecond and
    the zone; replacing OFFSET_SECONDS keeps the wall clock and attaches
    the new fixed offset.

    Args:
        value: A point in time. Text and epoch milliseconds are read
            through to_temporal, so the result is an Instant or an aware
            datetime.
        field: A field reference.
        new_value: The new value of the field.

    Returns:
        A value of the same kind as value.

    Raises:
        UnknownField: If the reference does not name a field.
        UnsupportedField: If the value has no such field.
        ValidationError: If new_value is out of range for the field.

    Examples:
        >>> i = Instant.from_epoch_milli(1742656321725)
        >>> with_field(i, "ns", 27).nano
        27
        >>> with_field(i, "hour-of-day", 0)
        Instant(epoch_second=1742602321, nano=725000000)
    """
    f = to_field(field)
    view = _view(value)
    _check_supported(view, f, value)
    f.check(new_value)

    epoch_day = 0 if view.epoch_day is None else view.epoch_day
    nod = 0 if view.nano_of_day is None else view.nano_of_day
    tz = view.tzinfo

    if f is Field.OFFSET_SECONDS:
        tz = fixed_offset(new_value)
    elif f is Field.INSTANT_SECONDS:
        instant = Instant.from_epoch_second(new_value, nod % NANOS_PER_SECOND)
        if view.category is Category.INSTANT:
            return instant
        if view.tzinfo is not None:
            return instant.to_datetime(view.tzinfo)
        return _rebuild(view, instant.epoch_day(), instant.nano_of_day(), None)
    elif f.is_time_based:
        nod = _with_time(nod, f, new_value)
        if not 0 <= nod < NANOS_PER_DAY:
            raise ValidationError(f"{f.value}={new_value} leaves the day")
    else:
        epoch_day = _with_date(view, f, new_value)

    return _rebuild(view, epoch_day, nod, tz)


def adjust(value: Any, adjuster: Callable[[Instant], Any]) -> Any:
    """Apply a function to the Instant view of a value.

    The value is transformed to an Instant, passed to the adjuster, and
    the adjuster's result (anything to_instant accepts) is rebuilt as a
    value of the original kind.

    Examples:
        >>> adjust(datetime.date(2025, 3, 22), lambda i: i.plus_seconds(86400))
        datetime.date(2025, 3, 23)
    """
    if not is_transformable(value):
        value = to_temporal(value)
    instant, recipe = transform(value)
    return reconstruct(recipe, to_instant(adjuster(instant)))


__all__ = ["get_field", "with_field", "adjust"]
