"""Units, fields and zone references.

This module provides:
    - Unit: Time measurement units (NANOS through FOREVER)
    - Field: Calendar and clock fields
    - to_unit / to_field: Symbolic reference resolution
    - to_timezone / to_offset / fixed_offset: Zone reference coercion
"""

from __future__ import annotations

from tempus.units.field import Field
from tempus.units.registry import to_field, to_unit, unit_keyword
from tempus.units.timezone import UTC, fixed_offset, to_offset, to_timezone
from tempus.units.unit import Unit

__all__: list[str] = [
    "Unit",
    "Field",
    "to_unit",
    "to_field",
    "unit_keyword",
    "UTC",
    "to_timezone",
    "to_offset",
    "fixed_offset",
]
