"""Internal utilities for Tempus.

This module contains private implementation details:
    - Constants, limits and defaults
    - Proleptic Gregorian calendar helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from tempus._internal.calendar import (
    epoch_day_to_ymd,
    validate_date,
    validate_year,
    ymd_to_epoch_day,
)

__all__: list[str] = [
    "epoch_day_to_ymd",
    "validate_date",
    "validate_year",
    "ymd_to_epoch_day",
]
