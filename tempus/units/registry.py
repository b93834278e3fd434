"""Symbolic unit and field references.

Callers may name a unit or field by the enum member itself, a short code
("ms", "day-of-year"), a keyword form (":ms") or the member's native name
("MILLIS"). The alias tables are built once at import and are read-only.

Examples:
    >>> to_unit("ms")
    <Unit.MILLIS: 'ms'>
    >>> to_unit(":hours")
    <Unit.HOURS: 'hr'>
    >>> to_unit(None)
    <Unit.FOREVER: 'forever'>
    >>> to_field("day-of-year")
    <Field.DAY_OF_YEAR: 'day-of-year'>
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from tempus.errors import UnknownField, UnknownUnit
from tempus.units.field import Field
from tempus.units.unit import Unit

logger = logging.getLogger(__name__)


def _build_unit_aliases() -> Mapping[str, Unit]:
    table: dict[str, Unit] = {
        "ns": Unit.NANOS,
        "nano": Unit.NANOS,
        "nanos": Unit.NANOS,
        "nanoseconds": Unit.NANOS,
        "us": Unit.MICROS,
        "micro": Unit.MICROS,
        "micros": Unit.MICROS,
        "microseconds": Unit.MICROS,
        "ms": Unit.MILLIS,
        "milli": Unit.MILLIS,
        "millis": Unit.MILLIS,
        "milliseconds": Unit.MILLIS,
        "s": Unit.SECONDS,
        "sec": Unit.SECONDS,
        "secs": Unit.SECONDS,
        "second": Unit.SECONDS,
        "seconds": Unit.SECONDS,
        "min": Unit.MINUTES,
        "mins": Unit.MINUTES,
        "minute": Unit.MINUTES,
        "minutes": Unit.MINUTES,
        "hr": Unit.HOURS,
        "hrs": Unit.HOURS,
        "hour": Unit.HOURS,
        "hours": Unit.HOURS,
        "half-day": Unit.HALF_DAYS,
        "half-days": Unit.HALF_DAYS,
        "day": Unit.DAYS,
        "days": Unit.DAYS,
        "week": Unit.WEEKS,
        "weeks": Unit.WEEKS,
        "month": Unit.MONTHS,
        "months": Unit.MONTHS,
        "year": Unit.YEARS,
        "years": Unit.YEARS,
        "decade": Unit.DECADES,
        "decades": Unit.DECADES,
        "century": Unit.CENTURIES,
        "centuries": Unit.CENTURIES,
        "millennium": Unit.MILLENNIA,
        "millennia": Unit.MILLENNIA,
        "era": Unit.ERAS,
        "eras": Unit.ERAS,
        "forever": Unit.FOREVER,
    }
    return MappingProxyType(table)


def _build_field_aliases() -> Mapping[str, Field]:
    table: dict[str, Field] = {field.value: field for field in Field}
    table.update(
        {
            "ns": Field.NANO_OF_SECOND,
            "nano": Field.NANO_OF_SECOND,
            "nanos": Field.NANO_OF_SECOND,
            "us": Field.MICRO_OF_SECOND,
            "micro": Field.MICRO_OF_SECOND,
            "micros": Field.MICRO_OF_SECOND,
            "ms": Field.MILLI_OF_SECOND,
            "milli": Field.MILLI_OF_SECOND,
            "millis": Field.MILLI_OF_SECOND,
            "s": Field.SECOND_OF_MINUTE,
            "sec": Field.SECOND_OF_MINUTE,
            "second": Field.SECOND_OF_MINUTE,
            "seconds": Field.SECOND_OF_MINUTE,
            "min": Field.MINUTE_OF_HOUR,
            "minute": Field.MINUTE_OF_HOUR,
            "minutes": Field.MINUTE_OF_HOUR,
            "hr": Field.HOUR_OF_DAY,
            "hour": Field.HOUR_OF_DAY,
            "hours": Field.HOUR_OF_DAY,
            "ampm": Field.AMPM_OF_DAY,
            "day": Field.DAY_OF_MONTH,
            "days": Field.DAY_OF_MONTH,
            "weekday": Field.DAY_OF_WEEK,
            "month": Field.MONTH_OF_YEAR,
            "months": Field.MONTH_OF_YEAR,
            "years": Field.YEAR,
            "offset": Field.OFFSET_SECONDS,
        }
    )
    return MappingProxyType(table)


UNIT_ALIASES: Mapping[str, Unit] = _build_unit_aliases()
FIELD_ALIASES: Mapping[str, Field] = _build_field_aliases()


def _strip_keyword(ref: str) -> str:
    return ref[1:] if ref.startswith(":") else ref


def to_unit(ref: Any) -> Unit:
    """Resolve a unit reference to a Unit.

    Args:
        ref: A Unit, an alias string ("ms", ":ms"), the native member
            name ("MILLIS"), or None.

    Returns:
        The resolved Unit. None resolves to Unit.FOREVER.

    Raises:
        UnknownUnit: If the reference does not name a unit.
    """
    if ref is None:
        return Unit.FOREVER
    if isinstance(ref, Unit):
        return ref
    if isinstance(ref, str):
        key = _strip_keyword(ref)
        unit = UNIT_ALIASES.get(key)
        if unit is not None:
            return unit
        if key in Unit.__members__:
            return Unit[key]
    logger.debug("unit reference %r did not resolve", ref)
    raise UnknownUnit(ref)


def to_field(ref: Any) -> Field:
    """Resolve a field reference to a Field.

    Args:
        ref: A Field, an alias string ("day-of-year", ":ms"), or the
            native member name ("DAY_OF_YEAR").

    Returns:
        The resolved Field.

    Raises:
        UnknownField: If the reference does not name a field.
    """
    if isinstance(ref, Field):
        return ref
    if isinstance(ref, str):
        key = _strip_keyword(ref)
        field = FIELD_ALIASES.get(key)
        if field is not None:
            return field
        if key in Field.__members__:
            return Field[key]
    logger.debug("field reference %r did not resolve", ref)
    raise UnknownField(ref)


def unit_keyword(unit: Any) -> str:
    """Return the canonical keyword alias of a unit reference.

    Examples:
        >>> unit_keyword("milliseconds")
        'ms'
        >>> unit_keyword(Unit.HALF_DAYS)
        'half-days'
    """
    return to_unit(unit).value


__all__ = [
    "UNIT_ALIASES",
    "FIELD_ALIASES",
    "to_unit",
    "to_field",
    "unit_keyword",
]
