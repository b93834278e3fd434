"""Core temporal value types.

This module provides:
    - Instant: The canonical zone-free point in time
    - Duration: The canonical signed span of time
    - Year, YearMonth: Calendar periods without a day
    - ChronoDate, ThaiBuddhistDate, MinguoDate: Non-ISO calendar dates
"""

from __future__ import annotations

from tempus.core.chrono import ChronoDate, MinguoDate, ThaiBuddhistDate
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.periods import Year, YearMonth

__all__: list[str] = [
    "Instant",
    "Duration",
    "Year",
    "YearMonth",
    "ChronoDate",
    "ThaiBuddhistDate",
    "MinguoDate",
]
