"""Classification, coercion and round-trip transforms.

This module provides:
    - classify / Category: Temporal category of any value
    - to_instant / to_duration / to_temporal / to_time_object: Coercion
    - transform / reconstruct / Recipe: Instant views that can be undone
    - to_zone / has_zone / zone: Placing values in zones
"""

from __future__ import annotations

from tempus.convert.classify import Category, classify
from tempus.convert.coerce import to_duration, to_instant, to_temporal, to_time_object
from tempus.convert.transform import Recipe, is_transformable, reconstruct, transform
from tempus.convert.zones import has_zone, to_zone, zone

__all__: list[str] = [
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
]
