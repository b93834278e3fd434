"""Internal constants for Tempus.

These constants define the limits, defaults and magic numbers used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Year limits for the calendar value types (Year, YearMonth, ChronoDate)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Ordinal (0001-01-01 = 1) of the Unix epoch, 1970-01-01
UNIX_EPOCH_ORDINAL: int = 719_163

# Local times are anchored to this epoch day when viewed as an instant
LOCAL_TIME_REFERENCE_EPOCH_DAY: int = 0  # 1970-01-01

# Fixed offsets are limited to +/- 18 hours
MAX_OFFSET_SECONDS: int = 18 * SECONDS_PER_HOUR

# Default truncation applied by parse_instant
DEFAULT_RESOLUTION: str = "ms"


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
    "LOCAL_TIME_REFERENCE_EPOCH_DAY",
    "MAX_OFFSET_SECONDS",
    "DEFAULT_RESOLUTION",
]
