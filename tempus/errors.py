"""Tempus exception hierarchy.

All Tempus-specific exceptions inherit from TempusError. Every error
carries the value, text, or reference that triggered it so callers can
report it without re-deriving anything.
"""

from __future__ import annotations

from typing import Any


class TempusError(Exception):
    """Base exception for all Tempus errors."""

    pass


class ValidationError(TempusError):
    """Invalid input values.

    Raised when a temporal component is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Setting nano-of-second to 1_000_000_000
    """

    pass


class UnclassifiableInput(TempusError):
    """A value does not belong to any known temporal category.

    Examples:
        - A float, a list, or an arbitrary object
        - A bool (never treated as epoch milliseconds)
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"cannot classify {type(value).__name__} as a temporal value: {value!r}"
        )


class UnsupportedConversion(TempusError):
    """A classified value has no conversion rule for the requested target.

    Examples:
        - Converting a Duration to an Instant
        - Converting a zoned datetime to a Duration
    """

    def __init__(self, value: Any, target: str) -> None:
        self.value = value
        self.target = target
        self.observed_type = type(value)
        super().__init__(
            f"don't know how to convert type {type(value).__name__} to {target}: {value!r}"
        )


class MalformedInput(TempusError):
    """Text failed strict grammar parsing.

    The position is the index of the first character that deviates from
    the grammar, or None when the text is rejected as a whole.

    Examples:
        - "2025-03-22 15:12:01Z" (space instead of 'T')
        - "2025-13-01T00:00:00Z" (month out of range)
        - "P1Y" (years are not part of the duration grammar)
    """

    def __init__(self, text: str, position: int | None = None, reason: str = "") -> None:
        self.text = text
        self.position = position
        self.reason = reason
        where = f" at position {position}" if position is not None else ""
        detail = f": {reason}" if reason else ""
        super().__init__(f"malformed input {text!r}{where}{detail}")


class UnrecognizedFormat(MalformedInput):
    """Text matched none of the accepted date/time formats.

    Raised after every fallback (ISO instant, epoch milliseconds) failed.
    """

    def __init__(self, text: str) -> None:
        super().__init__(text, None, "unknown date/time format")


class UnknownUnit(TempusError, LookupError):
    """A symbolic unit reference did not resolve."""

    def __init__(self, given: Any) -> None:
        self.given = given
        super().__init__(f"unknown time unit: {given!r}")


class UnknownField(TempusError, LookupError):
    """A symbolic field reference did not resolve."""

    def __init__(self, given: Any) -> None:
        self.given = given
        super().__init__(f"unknown temporal field: {given!r}")


class UnsupportedField(TempusError):
    """A field is valid but not available on the given value.

    Examples:
        - Reading hour-of-day from a date
        - Reading offset-seconds from a zone-free value
    """

    def __init__(self, field: Any, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"field {field} is not supported by {type(value).__name__}: {value!r}"
        )


class UnsupportedOperation(TempusError):
    """An operation has no meaning for the kind of value it was given.

    Examples:
        - Multiplying, dividing or negating an instant
        - Truncating to a unit longer than a day
    """

    def __init__(self, op: str, on: str, value: Any = None) -> None:
        self.op = op
        self.on = on
        self.value = value
        super().__init__(f"cannot {op} {on}: {value!r}")


class NoTransformAvailable(TempusError):
    """The round-trip transform has no inverse rule for a value."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"unknown temporal object, no transform available: {value!r}"
        )


class DivisionByZero(TempusError, ZeroDivisionError):
    """A duration was divided by zero (including zero by zero)."""

    def __init__(self, dividend: Any = None) -> None:
        self.dividend = dividend
        super().__init__(f"cannot divide {dividend!r} by zero")


class TimezoneError(TempusError):
    """Invalid or unknown timezone.

    Examples:
        - Invalid UTC offset format
        - Offset outside valid range (-18h to +18h)
        - Unknown region identifier
    """

    def __init__(self, given: Any, reason: str = "") -> None:
        self.given = given
        detail = f": {reason}" if reason else ""
        super().__init__(f"invalid timezone {given!r}{detail}")


__all__ = [
    "TempusError",
    "ValidationError",
    "UnclassifiableInput",
    "UnsupportedConversion",
    "MalformedInput",
    "UnrecognizedFormat",
    "UnknownUnit",
    "UnknownField",
    "UnsupportedField",
    "UnsupportedOperation",
    "NoTransformAvailable",
    "DivisionByZero",
    "TimezoneError",
]
