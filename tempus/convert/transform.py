"""Round-trip transform between caller values and Instants.

transform() splits a zone- or calendar-bearing value into its Instant
view and a Recipe recording what is needed to rebuild a value of the same
kind. reconstruct() applies a Recipe to a (usually shifted) Instant.

Zone-free values are read as UTC, and local times are anchored to
1970-01-01. Rebuilt stdlib values carry microsecond precision.

Examples:
    >>> instant, recipe = transform(datetime.date(2025, 3, 22))
    >>> reconstruct(recipe, instant.plus(Duration.from_days(10)))
    datetime.date(2025, 4, 1)
"""

from __future__ import annotations

import datetime as _dt
import logging
from dataclasses import dataclass
from typing import Any

from tempus._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from tempus.convert.classify import Category, classify
from tempus.convert.coerce import to_instant
from tempus.core.chrono import ChronoDate
from tempus.core.instant import Instant
from tempus.core.periods import Year, YearMonth
from tempus.errors import NoTransformAvailable, UnclassifiableInput

logger = logging.getLogger(__name__)

TRANSFORMABLE_CATEGORIES = frozenset(
    {
        Category.INSTANT,
        Category.ZONED_DATE_TIME,
        Category.OFFSET_DATE_TIME,
        Category.OFFSET_TIME,
        Category.LOCAL_DATE_TIME,
        Category.LOCAL_DATE,
        Category.LOCAL_TIME,
        Category.YEAR,
        Category.YEAR_MONTH,
        Category.CALENDAR_DATE,
    }
)


@dataclass(frozen=True)
class Recipe:
    """How to rebuild a value of a category from an Instant.

    Attributes:
        category: The category of the value that was transformed.
        tzinfo: The zone or offset taken from the value, if it had one.
        chrono_type: The ChronoDate subclass, for calendar-system dates.
    """

    category: Category
    tzinfo: _dt.tzinfo | None = None
    chrono_type: type[ChronoDate] | None = None


def is_transformable(value: Any) -> bool:
    """Return True if transform() has a rule for the value."""
    try:
        return classify(value) in TRANSFORMABLE_CATEGORIES
    except UnclassifiableInput:
        return False


def transform(value: Any) -> tuple[Instant, Recipe]:
    """Split a value into its Instant view and a reconstruction Recipe.

    Args:
        value: An Instant or a zone-, offset-, local- or calendar-bearing
            value.

    Returns:
        The Instant view of the value and the Recipe to rebuild it.

    Raises:
        NoTransformAvailable: If the value's category has no inverse.

    Examples:
        >>> dt = datetime.datetime(2025, 3, 22, 12, tzinfo=ZoneInfo("Europe/Paris"))
        >>> instant, recipe = transform(dt)
        >>> recipe.tzinfo
        zoneinfo.ZoneInfo(key='Europe/Paris')
    """
    try:
        category = classify(value)
    except UnclassifiableInput as e:
        raise NoTransformAvailable(value) from e
    if category not in TRANSFORMABLE_CATEGORIES:
        logger.debug("no transform for %s value %r", category.value, value)
        raise NoTransformAvailable(value)

    if category in (
        Category.ZONED_DATE_TIME,
        Category.OFFSET_DATE_TIME,
        Category.OFFSET_TIME,
    ):
        recipe = Recipe(category, tzinfo=value.tzinfo)
    elif category is Category.CALENDAR_DATE:
        recipe = Recipe(category, chrono_type=type(value))
    else:
        recipe = Recipe(category)
    return to_instant(value), recipe


def _local_time(instant: Instant) -> _dt.time:
    nod = instant.nano_of_day()
    hour, nod = divmod(nod, NANOS_PER_HOUR)
    minute, nod = divmod(nod, NANOS_PER_MINUTE)
    second, nod = divmod(nod, NANOS_PER_SECOND)
    return _dt.time(hour, minute, second, nod // NANOS_PER_MICROSECOND)


def reconstruct(recipe: Recipe, instant: Instant) -> Any:
    """Rebuild a value of the recipe's category from an Instant.

    Zoned and offset values get the recipe's tzinfo back; zone-free values
    are read off the instant in UTC.

    Args:
        recipe: A Recipe produced by transform().
        instant: The Instant to rebuild from.

    Returns:
        A value of the same category as the transformed value.

    Raises:
        ValidationError: If the instant is outside the range the target
            type can represent.
    """
    category = recipe.category

    if category is Category.INSTANT:
        return instant
    if category in (Category.ZONED_DATE_TIME, Category.OFFSET_DATE_TIME):
        return instant.to_datetime(recipe.tzinfo)
    if category is Category.OFFSET_TIME:
        return instant.to_datetime(recipe.tzinfo).timetz()
    if category is Category.LOCAL_DATE_TIME:
        return instant.to_datetime(None)
    if category is Category.LOCAL_DATE:
        return instant.to_datetime(None).date()
    if category is Category.LOCAL_TIME:
        return _local_time(instant)
    if category is Category.YEAR:
        return Year.from_epoch_day(instant.epoch_day())
    if category is Category.YEAR_MONTH:
        return YearMonth.from_epoch_day(instant.epoch_day())
    if category is Category.CALENDAR_DATE and recipe.chrono_type is not None:
        return recipe.chrono_type.from_epoch_day(instant.epoch_day())
    raise NoTransformAvailable(recipe)


__all__ = [
    "Recipe",
    "TRANSFORMABLE_CATEGORIES",
    "is_transformable",
    "transform",
    "reconstruct",
]
