"""Temporal arithmetic and comparisons.

The functions in this module are the canonical implementations of
arithmetic over any coercible temporal value. They preserve the caller's
kind of value through the round-trip transform.

Arithmetic Operations (from tempus.arithmetic.ops):
    - add, subtract: Shift by a duration-like amount
    - plus_millis, plus_seconds, plus_nanos: Shift by a unit amount
    - minus_millis, minus_seconds, minus_nanos: Shift back by a unit amount
    - multiply, divide, negate: Scale spans
    - truncate_to: Drop precision finer than a unit
    - get_nano: Nanosecond-of-second

Comparison Operations (from tempus.arithmetic.comparisons):
    - compare, equal, is_before, is_after: Ordering
    - min_value, max_value: Extremes
    - between, until: Measuring
    - now: The current instant
"""

from __future__ import annotations

from tempus.arithmetic.comparisons import (
    between,
    compare,
    equal,
    is_after,
    is_before,
    max_value,
    min_value,
    now,
    until,
)
from tempus.arithmetic.ops import (
    add,
    divide,
    get_nano,
    minus_millis,
    minus_nanos,
    minus_seconds,
    multiply,
    negate,
    plus_millis,
    plus_nanos,
    plus_seconds,
    subtract,
    truncate_to,
)

__all__ = [
    # Arithmetic operations
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
    # Comparison operations
    "compare",
    "equal",
    "is_before",
    "is_after",
    "min_value",
    "max_value",
    "between",
    "until",
    "now",
]
