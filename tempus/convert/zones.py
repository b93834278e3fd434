"""Placing values in zones.

Instants and local date-times are zone-free and are placed in UTC unless
a zone is given. Zoned and offset values keep their zone unless a new one
is given, in which case they move to it at the same instant.
"""

from __future__ import annotations

import datetime as _dt
import logging
from typing import Any

from tempus.convert.classify import Category, classify
from tempus.convert.coerce import to_temporal
from tempus.errors import UnsupportedOperation
from tempus.units.timezone import UTC, to_timezone

logger = logging.getLogger(__name__)

_EPOCH_DATE = _dt.date(1970, 1, 1)


def to_zone(value: Any, tz: Any = None) -> Any:
    """Return a zone-bearing version of a value.

    Args:
        value: An Instant, a datetime or time, or anything to_temporal
            accepts.
        tz: A zone reference, or None to keep the value's zone (UTC for
            zone-free values).

    Returns:
        An aware datetime for instants and date-times; an aware time for
        offset times moved to a fixed offset; other values unchanged.

    Raises:
        TimezoneError: If tz does not name a zone.
        UnsupportedOperation: If tz is given for a value that cannot carry
            a zone, such as a date.

    Examples:
        >>> to_zone(Instant.EPOCH, "+01:00")
        datetime.datetime(1970, 1, 1, 1, 0, tzinfo=datetime.timezone(datetime.timedelta(seconds=3600)))
    """
    category = classify(value)
    if category in (Category.ISO_TEXT, Category.EPOCH_MILLIS, Category.LEGACY_DATE):
        return to_zone(to_temporal(value), tz)

    target = to_timezone(tz) if tz is not None else None

    if category is Category.INSTANT:
        return value.to_datetime(target or UTC)
    if category is Category.LOCAL_DATE_TIME:
        return value.replace(tzinfo=target or UTC)
    if category in (Category.ZONED_DATE_TIME, Category.OFFSET_DATE_TIME):
        return value if target is None else value.astimezone(target)
    if category is Category.OFFSET_TIME:
        if target is None:
            return value
        moved = _dt.datetime.combine(_EPOCH_DATE, value).astimezone(target)
        if isinstance(target, _dt.timezone):
            return moved.timetz()
        # A region zone needs a date; the time is placed on 1970-01-01
        return moved
    if target is None:
        return value
    logger.debug("cannot place %s value %r in zone %r", category.value, value, tz)
    raise UnsupportedOperation("change the timezone of", category.value, value)


def has_zone(value: Any) -> bool:
    """Return True if the value carries a zone or offset.

    Examples:
        >>> has_zone(datetime.datetime(2025, 1, 1, tzinfo=datetime.timezone.utc))
        True
        >>> has_zone(Instant.EPOCH)
        False
    """
    if isinstance(value, (_dt.datetime, _dt.time)):
        return value.tzinfo is not None
    return False


def zone(value: Any) -> _dt.tzinfo:
    """Return the zone a value carries, or UTC if it carries none."""
    if isinstance(value, (_dt.datetime, _dt.time)) and value.tzinfo is not None:
        return value.tzinfo
    return UTC


__all__ = ["to_zone", "has_zone", "zone"]
