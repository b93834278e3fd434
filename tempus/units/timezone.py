"""Zone specifier coercion.

Zones are carried as standard ``datetime.tzinfo`` objects: fixed offsets
are ``datetime.timezone`` instances and region zones are
``zoneinfo.ZoneInfo`` instances. This module turns the loose references
callers pass around (strings, hour counts, durations, zone-bearing
values) into one of those.
"""

from __future__ import annotations

import datetime as _dt
import re
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tempus._internal.constants import MAX_OFFSET_SECONDS, SECONDS_PER_HOUR
from tempus.errors import TimezoneError

UTC: _dt.timezone = _dt.timezone.utc

# +HH, +HHMM, +HH:MM, +HH:MM:SS (and unsigned-colon variants)
_OFFSET_PATTERN = re.compile(r"^([+-])(\d{1,2})(?::?(\d{2})(?::?(\d{2}))?)?$")


def fixed_offset(offset_seconds: int) -> _dt.timezone:
    """Return a fixed-offset tzinfo for a number of seconds east of UTC.

    Raises:
        TimezoneError: If the offset is outside +/- 18 hours.

    Examples:
        >>> fixed_offset(19800)
        datetime.timezone(datetime.timedelta(seconds=19800))
    """
    if abs(offset_seconds) > MAX_OFFSET_SECONDS:
        raise TimezoneError(
            offset_seconds,
            f"offset must be within +/-{MAX_OFFSET_SECONDS} seconds",
        )
    if offset_seconds == 0:
        return UTC
    return _dt.timezone(_dt.timedelta(seconds=offset_seconds))


def offset_from_string(s: str) -> _dt.timezone:
    """Parse a numeric offset string.

    Supported formats:
        - "Z", "z" or "UTC": UTC
        - "+HH:MM" or "-HH:MM", optionally followed by ":SS"
        - "+HHMM" or "-HHMM"
        - "+HH" or "-HH"

    Raises:
        TimezoneError: If the string is not a valid offset.

    Examples:
        >>> offset_from_string("-05:00").utcoffset(None)
        datetime.timedelta(days=-1, seconds=68400)
    """
    text = s.strip()
    if text.upper() in ("Z", "UTC"):
        return UTC

    match = _OFFSET_PATTERN.match(text)
    if not match:
        raise TimezoneError(s, "cannot parse offset")

    sign_str, hours_str, minutes_str, seconds_str = match.groups()
    hours = int(hours_str)
    minutes = int(minutes_str) if minutes_str else 0
    seconds = int(seconds_str) if seconds_str else 0
    if minutes > 59 or seconds > 59:
        raise TimezoneError(s, "offset minutes and seconds must be 0-59")

    total = hours * SECONDS_PER_HOUR + minutes * 60 + seconds
    return fixed_offset(-total if sign_str == "-" else total)


def to_timezone(ref: Any) -> _dt.tzinfo:
    """Coerce a zone reference to a tzinfo.

    Args:
        ref: A tzinfo, an offset or region string ("+05:30", "Z",
            "Europe/Paris"), an int or float number of hours, a Duration
            or timedelta offset, or an aware datetime/time whose tzinfo
            is taken.

    Returns:
        The tzinfo the reference names.

    Raises:
        TimezoneError: If the reference does not name a zone.

    Examples:
        >>> to_timezone(5)
        datetime.timezone(datetime.timedelta(seconds=18000))
        >>> to_timezone("Europe/Paris")
        zoneinfo.ZoneInfo(key='Europe/Paris')
    """
    from tempus.core.duration import Duration

    if isinstance(ref, _dt.tzinfo):
        return ref
    if isinstance(ref, str):
        text = ref.strip()
        if text.upper() in ("Z", "UTC") or text[:1] in ("+", "-"):
            return offset_from_string(text)
        try:
            return ZoneInfo(text)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise TimezoneError(ref, "unknown region") from e
    if isinstance(ref, bool):
        raise TimezoneError(ref)
    if isinstance(ref, int):
        return fixed_offset(ref * SECONDS_PER_HOUR)
    if isinstance(ref, float):
        return fixed_offset(round(ref * SECONDS_PER_HOUR))
    if isinstance(ref, Duration):
        if ref.nanos:
            raise TimezoneError(ref, "offset must be a whole number of seconds")
        return fixed_offset(ref.seconds)
    if isinstance(ref, _dt.timedelta):
        if ref.microseconds:
            raise TimezoneError(ref, "offset must be a whole number of seconds")
        return fixed_offset(ref.days * 86_400 + ref.seconds)
    if isinstance(ref, (_dt.datetime, _dt.time)) and ref.tzinfo is not None:
        return ref.tzinfo
    raise TimezoneError(ref)


def to_offset(ref: Any, at: _dt.datetime | None = None) -> _dt.timezone:
    """Coerce a zone reference to a fixed offset.

    Region zones are resolved to their offset at ``at`` (an aware
    datetime), or at the current moment when ``at`` is None. Aware
    datetimes resolve to their own offset.

    Raises:
        TimezoneError: If the reference does not name a zone.

    Examples:
        >>> to_offset("+01:00")
        datetime.timezone(datetime.timedelta(seconds=3600))
    """
    if isinstance(ref, _dt.datetime) and ref.tzinfo is not None:
        offset = ref.utcoffset()
    else:
        tz = to_timezone(ref)
        if isinstance(tz, _dt.timezone):
            return tz
        moment = at if at is not None else _dt.datetime.now(UTC)
        offset = moment.astimezone(tz).utcoffset()
    if offset is None:
        raise TimezoneError(ref, "zone has no offset")
    return fixed_offset(int(offset.total_seconds()))


__all__ = [
    "UTC",
    "fixed_offset",
    "offset_from_string",
    "to_timezone",
    "to_offset",
]
