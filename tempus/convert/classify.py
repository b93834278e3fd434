"""Temporal category classification.

Every value entering Tempus is first placed into exactly one Category.
Canonical types are recognized first, then zone- and calendar-bearing
types by their most specific category, and raw ints and strings last.

Examples:
    >>> classify(Instant.EPOCH)
    <Category.INSTANT: 'instant'>
    >>> classify(datetime.datetime(2025, 3, 22))
    <Category.LOCAL_DATE_TIME: 'local-date-time'>
    >>> classify(1742656321861)
    <Category.EPOCH_MILLIS: 'epoch-millis'>
"""

from __future__ import annotations

import datetime as _dt
import time as _time
from enum import Enum
from typing import Any

from tempus.core.chrono import ChronoDate
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.periods import Year, YearMonth
from tempus.errors import UnclassifiableInput


class Category(Enum):
    """The temporal categories a value can belong to."""

    INSTANT = "instant"
    DURATION = "duration"
    ZONED_DATE_TIME = "zoned-date-time"
    OFFSET_DATE_TIME = "offset-date-time"
    OFFSET_TIME = "offset-time"
    LOCAL_DATE_TIME = "local-date-time"
    LOCAL_DATE = "local-date"
    LOCAL_TIME = "local-time"
    YEAR = "year"
    YEAR_MONTH = "year-month"
    CALENDAR_DATE = "calendar-date"
    DURATION_LIKE = "duration-like"
    EPOCH_MILLIS = "epoch-millis"
    ISO_TEXT = "iso-text"
    LEGACY_DATE = "legacy-date"
    ABSENT = "absent"

    @property
    def is_point(self) -> bool:
        """Return True for categories that denote a point in time."""
        return self in POINT_CATEGORIES

    @property
    def is_span(self) -> bool:
        """Return True for categories that denote a span of time."""
        return self in (Category.DURATION, Category.DURATION_LIKE)


POINT_CATEGORIES = frozenset(
    {
        Category.INSTANT,
        Category.ZONED_DATE_TIME,
        Category.OFFSET_DATE_TIME,
        Category.OFFSET_TIME,
        Category.LOCAL_DATE_TIME,
        Category.LOCAL_DATE,
        Category.LOCAL_TIME,
        Category.YEAR,
        Category.YEAR_MONTH,
        Category.CALENDAR_DATE,
        Category.LEGACY_DATE,
    }
)


def _classify_datetime(value: _dt.datetime) -> Category:
    if value.tzinfo is None or value.utcoffset() is None:
        return Category.LOCAL_DATE_TIME
    if isinstance(value.tzinfo, _dt.timezone):
        return Category.OFFSET_DATE_TIME
    return Category.ZONED_DATE_TIME


def _classify_time(value: _dt.time) -> Category:
    if value.tzinfo is None:
        return Category.LOCAL_TIME
    if value.utcoffset() is None:
        # A region zone has no offset without a date
        raise UnclassifiableInput(value)
    return Category.OFFSET_TIME


def classify(value: Any) -> Category:
    """Place a value in its temporal category.

    Args:
        value: Any value.

    Returns:
        The value's Category.

    Raises:
        UnclassifiableInput: If the value belongs to no category. This
            includes bools, floats and times whose zone has no fixed
            offset.
    """
    if isinstance(value, Instant):
        return Category.INSTANT
    if isinstance(value, Duration):
        return Category.DURATION

    # datetime is a subclass of date, so it must be tested first
    if isinstance(value, _dt.datetime):
        return _classify_datetime(value)
    if isinstance(value, _dt.date):
        return Category.LOCAL_DATE
    if isinstance(value, _dt.time):
        return _classify_time(value)
    if isinstance(value, YearMonth):
        return Category.YEAR_MONTH
    if isinstance(value, Year):
        return Category.YEAR
    if isinstance(value, ChronoDate):
        return Category.CALENDAR_DATE
    if isinstance(value, _dt.timedelta):
        return Category.DURATION_LIKE
    if isinstance(value, _time.struct_time):
        return Category.LEGACY_DATE

    if value is None:
        return Category.ABSENT
    if isinstance(value, bool):
        raise UnclassifiableInput(value)
    if isinstance(value, int):
        return Category.EPOCH_MILLIS
    if isinstance(value, str):
        return Category.ISO_TEXT
    raise UnclassifiableInput(value)


__all__ = ["Category", "POINT_CATEGORIES", "classify"]
