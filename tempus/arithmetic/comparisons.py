"""Comparisons and measurements between temporal values.

Values are coerced before comparing: if either side is a span both are
read as Durations, if either side is a point in time both are read as
Instants. Ints and text on both sides are read as time objects and must
agree in kind.

Supported Operations:
    - compare: Return -1, 0, or 1
    - equal, is_before, is_after: Ordering tests
    - min_value, max_value: Extremes, returned as given
    - between: Duration from start to end
    - until: Whole units from start to end
    - now: The current Instant
"""

from __future__ import annotations

from typing import Any

from tempus.convert.classify import classify
from tempus.convert.coerce import to_duration, to_instant, to_time_object
from tempus.core.duration import Duration
from tempus.core.instant import Instant


def _coerce_pair(left: Any, right: Any) -> tuple[Any, Any]:
    left_category = classify(left)
    right_category = classify(right)
    if left_category.is_span or right_category.is_span:
        return to_duration(left), to_duration(right)
    if left_category.is_point or right_category.is_point:
        return to_instant(left), to_instant(right)

    a = to_time_object(left)
    b = to_time_object(right)
    if type(a) is not type(b):
        raise TypeError(
            f"cannot compare {type(a).__name__} with {type(b).__name__}: {left!r}, {right!r}"
        )
    return a, b


def compare(left: Any, right: Any) -> int:
    """Compare two temporal values, returning -1, 0, or 1.

    Raises:
        UnsupportedConversion: If one side is a point in time and the
            other a span.
        TypeError: If two text values read as different kinds.

    Examples:
        >>> compare("2025-03-22T15:12:01Z", 0)
        1
        >>> compare(Duration.from_seconds(1), 1000)
        0
    """
    a, b = _coerce_pair(left, right)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def equal(left: Any, right: Any) -> bool:
    """Test whether two values denote the same instant or span."""
    return compare(left, right) == 0


def is_before(left: Any, right: Any) -> bool:
    """Test whether left is earlier (or shorter) than right."""
    return compare(left, right) < 0


def is_after(left: Any, right: Any) -> bool:
    """Test whether left is later (or longer) than right."""
    return compare(left, right) > 0


def min_value(*values: Any) -> Any:
    """Return the earliest (or shortest) of the given values, unconverted.

    Raises:
        ValueError: If no values provided.
    """
    if not values:
        raise ValueError("min_value requires at least one argument")

    result = values[0]
    for value in values[1:]:
        if is_before(value, result):
            result = value
    return result


def max_value(*values: Any) -> Any:
    """Return the latest (or longest) of the given values, unconverted.

    Raises:
        ValueError: If no values provided.
    """
    if not values:
        raise ValueError("max_value requires at least one argument")

    result = values[0]
    for value in values[1:]:
        if is_after(value, result):
            result = value
    return result


def between(start: Any, end: Any) -> Duration:
    """Return the Duration from start to end.

    Examples:
        >>> between(0, "1970-01-01T00:01:00Z")
        Duration(seconds=60, nanos=0)
    """
    return Duration.between(to_instant(start), to_instant(end))


def until(start: Any, end: Any, unit: Any) -> int:
    """Return the number of whole units from start to end.

    Units up to WEEKS are measured by exact span; MONTHS and longer by
    the UTC calendar.

    Raises:
        UnknownUnit: If the unit does not resolve.
        UnsupportedOperation: For FOREVER (including a None unit).

    Examples:
        >>> until("2025-03-22T21:53:26Z", "2025-12-25T00:00:00Z", "days")
        277
        >>> until("2025-01-31T00:00:00Z", "2025-02-28T00:00:00Z", "months")
        0
    """
    return to_instant(start).until(to_instant(end), unit)


def now() -> Instant:
    """Return the current Instant from the host clock."""
    return Instant.now()


__all__ = [
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
