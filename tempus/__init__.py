"""Tempus: canonical instants and durations for heterogeneous time values.

Tempus reads any temporal value Python code is likely to hold (Instants,
datetimes, dates, times, timedeltas, epoch milliseconds, ISO 8601 text,
struct_time, calendar periods) as one of two canonical types and does
arithmetic on it without losing the caller's kind of value.

Core Types:
    Instant: Point on the UTC time-line (epoch second + nanosecond)
    Duration: Signed span of time with nanosecond precision
    Year, YearMonth: Calendar periods without a day
    ThaiBuddhistDate, MinguoDate: Non-ISO calendar dates

Units:
    Unit: Time measurement units (NANOS through FOREVER)
    Field: Calendar and clock fields

Conversion:
    classify: Temporal category of any value
    to_instant, to_duration, to_temporal, to_time_object: Coercion
    transform, reconstruct: Instant views that can be undone
    to_zone, zone, has_zone: Placing values in zones

Exceptions:
    TempusError: Base exception
    ValidationError: Invalid input values
    MalformedInput: Failed to parse text
    UnsupportedConversion, UnsupportedOperation: Operations a category lacks

Example:
    >>> import datetime
    >>> from tempus import add, to_instant
    >>> add(datetime.date(2025, 3, 22), "P10D")
    datetime.date(2025, 4, 1)
    >>> to_instant("2025-03-22T15:12:01.861Z").to_epoch_milli()
    1742656321861
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from tempus.core.chrono import ChronoDate, MinguoDate, ThaiBuddhistDate
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.periods import Year, YearMonth

# Units
from tempus.units.field import Field
from tempus.units.registry import to_field, to_unit, unit_keyword
from tempus.units.timezone import UTC, to_offset, to_timezone
from tempus.units.unit import Unit

# Exceptions
from tempus.errors import (
    DivisionByZero,
    MalformedInput,
    NoTransformAvailable,
    TempusError,
    TimezoneError,
    UnclassifiableInput,
    UnknownField,
    UnknownUnit,
    UnrecognizedFormat,
    UnsupportedConversion,
    UnsupportedField,
    UnsupportedOperation,
    ValidationError,
)

# Format functions
from tempus.format import (
    format_duration,
    format_instant,
    format_utc,
    format_with_zone,
    parse_duration,
    parse_instant,
    parse_temporal,
)

# Conversion
from tempus.convert import (
    Category,
    Recipe,
    classify,
    has_zone,
    is_transformable,
    reconstruct,
    to_duration,
    to_instant,
    to_temporal,
    to_time_object,
    to_zone,
    transform,
    zone,
)

# Arithmetic
from tempus.arithmetic import (
    add,
    between,
    compare,
    divide,
    equal,
    get_nano,
    is_after,
    is_before,
    max_value,
    min_value,
    minus_millis,
    minus_nanos,
    minus_seconds,
    multiply,
    negate,
    now,
    plus_millis,
    plus_nanos,
    plus_seconds,
    subtract,
    truncate_to,
    until,
)

# Fields
from tempus.fields import adjust, get_field, with_field

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Instant",
    "Duration",
    "Year",
    "YearMonth",
    "ChronoDate",
    "ThaiBuddhistDate",
    "MinguoDate",
    # Units
    "Unit",
    "Field",
    "to_unit",
    "to_field",
    "unit_keyword",
    "UTC",
    "to_timezone",
    "to_offset",
    # Exceptions
    "TempusError",
    "ValidationError",
    "UnclassifiableInput",
    "UnsupportedConversion",
    "MalformedInput",
    "UnrecognizedFormat",
    "UnknownUnit",
    "UnknownField",
    "UnsupportedField",
    "UnsupportedOperation",
    "NoTransformAvailable",
    "DivisionByZero",
    "TimezoneError",
    # Format functions
    "parse_instant",
    "parse_temporal",
    "parse_duration",
    "format_duration",
    "format_instant",
    "format_utc",
    "format_with_zone",
    # Conversion
    "Category",
    "classify",
    "to_instant",
    "to_duration",
    "to_temporal",
    "to_time_object",
    "Recipe",
    "is_transformable",
    "transform",
    "reconstruct",
    "to_zone",
    "has_zone",
    "zone",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "negate",
    "truncate_to",
    "plus_millis",
    "plus_seconds",
    "plus_nanos",
    "minus_millis",
    "minus_seconds",
    "minus_nanos",
    "get_nano",
    "compare",
    "equal",
    "is_before",
    "is_after",
    "min_value",
    "max_value",
    "between",
    "until",
    "now",
    # Fields
    "get_field",
    "with_field",
    "adjust",
]
