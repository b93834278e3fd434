"""Text parsing and formatting for Tempus.

This module provides:
    - parse_instant / parse_temporal: ISO 8601 instant text
    - parse_duration / format_duration: ISO 8601 duration text
    - format_utc / format_with_zone: Millisecond-precision renderers
"""

from __future__ import annotations

from tempus.format.iso8601 import (
    format_duration,
    format_instant,
    format_utc,
    format_with_zone,
    parse_duration,
    parse_instant,
    parse_temporal,
)

__all__: list[str] = [
    "parse_instant",
    "parse_temporal",
    "parse_duration",
    "format_duration",
    "format_instant",
    "format_utc",
    "format_with_zone",
]
