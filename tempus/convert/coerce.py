"""Coercion of classified values to the canonical types.

Zone-free values are read as UTC. Text is tried against each accepted
form in a fixed order, and the first form that parses wins.

Examples:
    >>> to_instant("2025-03-22T15:12:01.861Z")
    Instant(epoch_second=1742656321, nano=861000000)
    >>> to_instant(datetime.date(1970, 1, 2))
    Instant(epoch_second=86400, nano=0)
    >>> to_duration(1500)
    Duration(seconds=1, nanos=500000000)
    >>> to_duration(None)
    Duration(seconds=0, nanos=0)
"""

from __future__ import annotations

import datetime as _dt
import logging
import re
from typing import Any, Callable, Sequence

from tempus._internal.calendar import ymd_to_epoch_day
from tempus._internal.constants import (
    LOCAL_TIME_REFERENCE_EPOCH_DAY,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from tempus.convert.classify import Category, classify
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.errors import (
    MalformedInput,
    TempusError,
    UnrecognizedFormat,
    UnsupportedConversion,
)
from tempus.format.iso8601 import parse_duration, parse_instant, parse_temporal

logger = logging.getLogger(__name__)

# Signed decimal digits, the only accepted epoch-millisecond text
_MILLIS_TEXT = re.compile(r"[-+]?[0-9]+")

_REFERENCE_DATE = _dt.date(1970, 1, 1) + _dt.timedelta(days=LOCAL_TIME_REFERENCE_EPOCH_DAY)


def _first_of(
    value: Any,
    attempts: Sequence[tuple[str, Callable[[Any], Any]]],
) -> tuple[Any, list[TempusError]]:
    """Run attempts in order and return the first result.

    Each attempt either returns a result or raises a TempusError. Failures
    are collected in order; the result is None if every attempt failed.
    """
    failures: list[TempusError] = []
    for name, attempt in attempts:
        try:
            return attempt(value), failures
        except TempusError as e:
            logger.debug("%s attempt failed for %r: %s", name, value, e)
            failures.append(e)
    return None, failures


def _parse_epoch_millis(text: str) -> Instant:
    if not _MILLIS_TEXT.fullmatch(text):
        raise MalformedInput(text, None, "not an integer")
    return Instant.from_epoch_milli(int(text))


def _parse_millis_duration(text: str) -> Duration:
    if not _MILLIS_TEXT.fullmatch(text):
        raise MalformedInput(text, None, "not an integer")
    return to_duration(int(text))


def _epoch_day_instant(epoch_day: int) -> Instant:
    return Instant.from_epoch_second(epoch_day * SECONDS_PER_DAY)


def _struct_time_instant(value: Any) -> Instant:
    epoch_day = ymd_to_epoch_day(value.tm_year, value.tm_mon, value.tm_mday)
    second_of_day = (
        value.tm_hour * SECONDS_PER_HOUR + value.tm_min * SECONDS_PER_MINUTE + value.tm_sec
    )
    gmtoff = getattr(value, "tm_gmtoff", None) or 0
    return Instant.from_epoch_second(epoch_day * SECONDS_PER_DAY + second_of_day - gmtoff)


def to_instant(value: Any) -> Instant:
    """Convert a point-in-time value to an Instant.

    Args:
        value: An Instant, a datetime, date or time, a Year, YearMonth or
            ChronoDate, epoch milliseconds, ISO text, or a struct_time.

    Returns:
        The canonical Instant.

    Raises:
        UnclassifiableInput: If the value has no temporal category.
        UnrecognizedFormat: If text is neither an ISO instant nor an
            integer.
        UnsupportedConversion: For spans and None.
    """
    category = classify(value)

    if category is Category.INSTANT:
        return value
    if category in (
        Category.ZONED_DATE_TIME,
        Category.OFFSET_DATE_TIME,
        Category.LOCAL_DATE_TIME,
    ):
        return Instant.from_datetime(value)
    if category is Category.LOCAL_DATE:
        return _epoch_day_instant(ymd_to_epoch_day(value.year, value.month, value.day))
    if category in (Category.LOCAL_TIME, Category.OFFSET_TIME):
        return Instant.from_datetime(_dt.datetime.combine(_REFERENCE_DATE, value))
    if category in (Category.YEAR, Category.YEAR_MONTH, Category.CALENDAR_DATE):
        return _epoch_day_instant(value.to_epoch_day())
    if category is Category.EPOCH_MILLIS:
        return Instant.from_epoch_milli(value)
    if category is Category.LEGACY_DATE:
        return _struct_time_instant(value)
    if category is Category.ISO_TEXT:
        result, _ = _first_of(
            value,
            [
                ("iso instant", parse_instant),
                ("epoch millis", _parse_epoch_millis),
            ],
        )
        if result is None:
            raise UnrecognizedFormat(value)
        return result

    logger.debug("no instant conversion for %s value %r", category.value, value)
    raise UnsupportedConversion(value, "an instant")


def to_duration(value: Any) -> Duration:
    """Convert a span value to a Duration.

    Args:
        value: A Duration, a timedelta, integer milliseconds, ISO duration
            text (or integer-millisecond text), or None.

    Returns:
        The canonical Duration. None and 0 give Duration.ZERO.

    Raises:
        UnclassifiableInput: If the value has no temporal category.
        MalformedInput: If text is neither an ISO duration nor an integer;
            the ISO parse failure is the one raised.
        UnsupportedConversion: For points in time.
    """
    category = classify(value)

    if category is Category.DURATION:
        return value
    if category is Category.DURATION_LIKE:
        return Duration.from_timedelta(value)
    if category is Category.EPOCH_MILLIS:
        return Duration.ZERO if value == 0 else Duration.from_millis(value)
    if category is Category.ABSENT:
        return Duration.ZERO
    if category is Category.ISO_TEXT:
        result, failures = _first_of(
            value,
            [
                ("iso duration", parse_duration),
                ("integer millis", _parse_millis_duration),
            ],
        )
        if result is None:
            raise failures[0]
        return result

    logger.debug("no duration conversion for %s value %r", category.value, value)
    raise UnsupportedConversion(value, "a duration")


def to_temporal(value: Any) -> Any:
    """Convert a value to a point in time, keeping any zone it carries.

    Zoned and offset values are returned unchanged. Text with an offset
    becomes an aware datetime. Everything else becomes an Instant.

    Raises:
        UnrecognizedFormat: If text is neither ISO date-time text nor an
            integer.
    """
    category = classify(value)

    if category in (
        Category.ZONED_DATE_TIME,
        Category.OFFSET_DATE_TIME,
        Category.OFFSET_TIME,
    ):
        return value
    if category is Category.ISO_TEXT:
        result, _ = _first_of(
            value,
            [
                ("iso date-time", parse_temporal),
                ("epoch millis", _parse_epoch_millis),
            ],
        )
        if result is None:
            raise UnrecognizedFormat(value)
        return result
    return to_instant(value)


def to_time_object(value: Any) -> Instant | Duration:
    """Convert a value to an Instant if possible, else to a Duration.

    Raises:
        UnsupportedConversion: If the value is neither.

    Examples:
        >>> to_time_object("PT1M")
        Duration(seconds=60, nanos=0)
    """
    result, _ = _first_of(
        value,
        [
            ("instant", to_instant),
            ("duration", to_duration),
        ],
    )
    if result is None:
        raise UnsupportedConversion(value, "a time object")
    return result


__all__ = ["to_instant", "to_duration", "to_temporal", "to_time_object"]
