"""Arithmetic over any coercible temporal value.

This module is the canonical arithmetic engine. Every operation accepts
Instants, Durations, or anything Tempus can classify, and returns a value
of the caller's kind where one makes sense.

Type Combinations:
    - Instant + duration-like -> Instant
    - Duration + duration-like -> Duration
    - Duration + point in time -> point in time
    - zoned/offset/local/calendar value + duration-like -> same kind,
      rebuilt through the round-trip transform
    - int + duration-like -> Duration (the int is milliseconds)
    - text -> read as an instant, else as a duration, then as above
    - None + v -> v as a Duration

Scaling (multiply, divide, negate) is defined for spans only. Applying
it to any point in time raises UnsupportedOperation.

Examples:
    >>> add(Instant.EPOCH, 1000)
    Instant(epoch_second=1, nano=0)

    >>> add(datetime.date(2025, 3, 22), "P10D")
    datetime.date(2025, 4, 1)

    >>> multiply("PT1M", 3)
    Duration(seconds=180, nanos=0)

    >>> divide(Duration.from_hours(1), "PT7M")
    8
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from tempus.convert.classify import Category, classify
from tempus.convert.coerce import to_duration, to_instant, to_time_object
from tempus.convert.transform import (
    TRANSFORMABLE_CATEGORIES,
    is_transformable,
    reconstruct,
    transform,
)
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.errors import DivisionByZero, MalformedInput, UnsupportedOperation
from tempus.format.iso8601 import parse_instant

logger = logging.getLogger(__name__)


def _shift(value: Any, fn: Callable[[Instant], Instant]) -> Any:
    """Apply fn to the Instant view of value and rebuild the result."""
    instant, recipe = transform(value)
    return reconstruct(recipe, fn(instant))


def _reject_point(op: str, value: Any, category: Category) -> None:
    if category.is_point:
        raise UnsupportedOperation(op, "instant", value)


def _text_span(op: str, value: Any) -> Duration:
    """Read text as a span, rejecting text that names an instant.

    A failed duration parse propagates unchanged.
    """
    try:
        to_instant(value)
    except MalformedInput:
        return to_duration(value)
    raise UnsupportedOperation(op, "instant", value)


# =============================================================================
# Addition and subtraction
# =============================================================================


def _add_to_duration(left: Duration, right: Any) -> Any:
    # Duration + point in time commutes to the point's kind
    if not isinstance(right, Duration) and is_transformable(right):
        return add(right, left)
    return left.plus(to_duration(right))


def add(left: Any, right: Any) -> Any:
    """Add a duration-like amount to a temporal value.

    Args:
        left: A point in time, a span, text, epoch milliseconds, or None.
        right: A duration-like amount (Duration, timedelta, int
            milliseconds, ISO duration text), or a point in time when
            left is a span.

    Returns:
        A value of the same kind as left (a Duration for ints, timedeltas
        and None), or of right's kind when a span is added to a point.

    Raises:
        UnclassifiableInput: If left has no temporal category.
        UnsupportedConversion: If right cannot be read as a duration.

    Examples:
        >>> add(None, "PT5S")
        Duration(seconds=5, nanos=0)
        >>> add(Duration.from_seconds(5), Instant.EPOCH)
        Instant(epoch_second=5, nano=0)
    """
    category = classify(left)

    if category is Category.ABSENT:
        return to_duration(right)
    if category is Category.INSTANT:
        return left.plus(to_duration(right))
    if category in (Category.DURATION, Category.DURATION_LIKE, Category.EPOCH_MILLIS):
        return _add_to_duration(to_duration(left), right)
    if category in TRANSFORMABLE_CATEGORIES:
        amount = to_duration(right)
        return _shift(left, lambda i: i.plus(amount))
    return add(to_time_object(left), right)


def subtract(left: Any, right: Any) -> Any:
    """Subtract a duration-like amount from a temporal value.

    Args:
        left: A point in time, a span, text, epoch milliseconds, or None.
        right: A duration-like amount.

    Returns:
        A value of the same kind as left (a Duration for ints, timedeltas
        and None).

    Raises:
        UnclassifiableInput: If left has no temporal category.
        UnsupportedConversion: If right cannot be read as a duration.

    Examples:
        >>> subtract(None, 250)
        Duration(seconds=-1, nanos=750000000)
    """
    category = classify(left)

    if category is Category.ABSENT:
        return to_duration(right).negated()
    if category is Category.INSTANT:
        return left.minus(to_duration(right))
    if category in (Category.DURATION, Category.DURATION_LIKE, Category.EPOCH_MILLIS):
        return to_duration(left).minus(to_duration(right))
    if category in TRANSFORMABLE_CATEGORIES:
        amount = to_duration(right)
        return _shift(left, lambda i: i.minus(amount))
    return subtract(to_time_object(left), right)


def _apply_amount(left: Any, method: str, amount: int) -> Any:
    """Call a plus_*/minus_* method through the usual dispatch."""
    category = classify(left)

    if category is Category.ABSENT:
        return getattr(Duration.ZERO, method)(amount)
    if category in (Category.INSTANT, Category.DURATION):
        return getattr(left, method)(amount)
    if category is Category.DURATION_LIKE:
        return getattr(Duration.from_timedelta(left), method)(amount)
    if category in TRANSFORMABLE_CATEGORIES:
        return _shift(left, lambda i: getattr(i, method)(amount))
    if category in (Category.EPOCH_MILLIS, Category.LEGACY_DATE):
        # Epoch milliseconds are a point in time here
        return getattr(to_instant(left), method)(amount)
    return _apply_amount(to_time_object(left), method, amount)


def plus_millis(value: Any, millis: int) -> Any:
    """Add milliseconds to a temporal value, keeping its kind.

    Examples:
        >>> plus_millis(0, 1500)
        Instant(epoch_second=1, nano=500000000)
    """
    return _apply_amount(value, "plus_millis", millis)


def plus_seconds(value: Any, seconds: int) -> Any:
    """Add seconds to a temporal value, keeping its kind."""
    return _apply_amount(value, "plus_seconds", seconds)


def plus_nanos(value: Any, nanos: int) -> Any:
    """Add nanoseconds to a temporal value, keeping its kind."""
    return _apply_amount(value, "plus_nanos", nanos)


def minus_millis(value: Any, millis: int) -> Any:
    return _apply_amount(value, "minus_millis", millis)


def minus_seconds(value: Any, seconds: int) -> Any:
    return _apply_amount(value, "minus_seconds", seconds)


def minus_nanos(value: Any, nanos: int) -> Any:
    return _apply_amount(value, "minus_nanos", nanos)


# =============================================================================
# Scaling
# =============================================================================


def multiply(value: Any, scalar: int) -> Duration:
    """Multiply a span by an integer.

    Args:
        value: A span (Duration, timedelta, int milliseconds, ISO
            duration text) or None.
        scalar: The integer multiplier.

    Returns:
        The scaled Duration. None gives Duration.ZERO.

    Raises:
        UnsupportedOperation: If value is a point in time.
        TypeError: If scalar is not an int.

    Examples:
        >>> multiply(None, 42)
        Duration(seconds=0, nanos=0)
    """
    category = classify(value)
    if category is Category.ABSENT:
        return Duration.ZERO
    _reject_point("multiply", value, category)
    if category is Category.ISO_TEXT:
        return _text_span("multiply", value).multiplied_by(scalar)
    return to_duration(value).multiplied_by(scalar)


def divide(value: Any, divisor: Any) -> Any:
    """Divide a span by an integer or by another span.

    An int divisor is a scalar and gives a Duration. Any other divisor is
    read as a duration and gives the whole number of times it fits. Both
    round toward zero.

    Args:
        value: A span or None.
        divisor: An int scalar, or a duration-like divisor.

    Returns:
        A Duration for a scalar divisor, an int for a span divisor.

    Raises:
        UnsupportedOperation: If value is a point in time.
        DivisionByZero: If the divisor is zero, including for None.

    Examples:
        >>> divide(Duration.from_seconds(100), 3)
        Duration(seconds=33, nanos=333333333)
    """
    category = classify(value)
    if category is not Category.ABSENT:
        _reject_point("divide", value, category)
    if category is Category.ISO_TEXT:
        return divide(_text_span("divide", value), divisor)

    scalar = isinstance(divisor, int) and not isinstance(divisor, bool)
    if category is Category.ABSENT:
        if scalar:
            if divisor == 0:
                raise DivisionByZero(value)
            return Duration.ZERO
        if to_duration(divisor).is_zero:
            raise DivisionByZero(value)
        return 0

    dividend = to_duration(value)
    if scalar:
        return dividend.divided_by(divisor)
    return dividend.divided_by(to_duration(divisor))


def negate(value: Any) -> Duration:
    """Negate a span.

    Raises:
        UnsupportedOperation: If value is a point in time.

    Examples:
        >>> negate(1000)
        Duration(seconds=-1, nanos=0)
    """
    category = classify(value)
    if category is Category.ABSENT:
        return Duration.ZERO
    _reject_point("negate", value, category)
    if category is Category.ISO_TEXT:
        return _text_span("negate", value).negated()
    return to_duration(value).negated()


# =============================================================================
# Truncation
# =============================================================================


def truncate_to(value: Any, unit: Any) -> Any:
    """Drop all precision finer than a unit, keeping the value's kind.

    Text is parsed at the requested resolution directly. Epoch
    milliseconds are read as an instant. None gives Duration.ZERO.

    Raises:
        UnsupportedOperation: If the unit is longer than a day.
        UnknownUnit: If the unit does not resolve.

    Examples:
        >>> truncate_to("2025-03-22T15:12:01.861482Z", "s")
        Instant(epoch_second=1742656321, nano=0)
    """
    category = classify(value)

    if category is Category.ABSENT:
        return Duration.ZERO
    if category in (Category.INSTANT, Category.DURATION):
        return value.truncated_to(unit)
    if category is Category.DURATION_LIKE:
        return Duration.from_timedelta(value).truncated_to(unit)
    if category in TRANSFORMABLE_CATEGORIES:
        return _shift(value, lambda i: i.truncated_to(unit))
    if category is Category.ISO_TEXT:
        try:
            return parse_instant(value, unit)
        except MalformedInput as e:
            logger.debug("truncating %r as a time object: %s", value, e)
    return truncate_to(to_time_object(value), unit)


def get_nano(value: Any) -> int:
    """Return the nanosecond-of-second of a temporal value.

    Zone-bearing and local values report their own wall clock's fraction.
    None gives 0.

    Examples:
        >>> get_nano("2025-03-22T15:12:01.861Z")
        861000000
    """
    category = classify(value)

    if category is Category.ABSENT:
        return 0
    if category is Category.INSTANT:
        return value.nano
    if category is Category.DURATION:
        return value.nanos
    if category is Category.DURATION_LIKE:
        return Duration.from_timedelta(value).nanos
    if category in (
        Category.ZONED_DATE_TIME,
        Category.OFFSET_DATE_TIME,
        Category.LOCAL_DATE_TIME,
        Category.OFFSET_TIME,
        Category.LOCAL_TIME,
    ):
        return value.microsecond * 1_000
    if category is Category.ISO_TEXT:
        return get_nano(to_time_object(value))
    return to_instant(value).nano


__all__ = [
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
]
