"""Error hierarchy.

Every error the library raises derives from ChronorangeError. None of them
are logged or retried here; they surface to the caller as-is.
"""
from __future__ import annotations

from typing import Any


class ChronorangeError(Exception):
    """Base class for all library errors."""


class InvalidDateInputError(ChronorangeError, ValueError):
    """Raised when a date-like value cannot be turned into an instant."""

    def __init__(self, value: Any, reason: str = "") -> None:
        self.value = value
        message = f"Invalid date input: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DateOutOfRangeError(InvalidDateInputError):
    """Raised when calendar arithmetic leaves the supported instant range."""


class InvalidRangeError(ChronorangeError, ValueError):
    """Raised when an evaluator sees start > end."""

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Invalid range: [{start}, {end}]")


class InvalidComparisonOperatorError(ChronorangeError, ValueError):
    """Raised for an operator outside <=, <, =, >, >=."""

    def __init__(self, operator: Any) -> None:
        self.operator = operator
        super().__init__(
            f"Invalid comparison operator: {operator}; "
            "only >=, >, =, <, and <= are accepted."
        )


class InvalidPrecisionError(ChronorangeError, ValueError):
    """Raised for a precision name that is not a Precision member."""

    def __init__(self, precision: Any) -> None:
        self.precision = precision
        super().__init__(
            f"Invalid precision: {precision!r}; expected one of "
            "year, month, day, hours, minutes, seconds, milliseconds."
        )


class InvalidFormatValueError(ChronorangeError, ValueError):
    """Raised when a value cannot be rendered for a format token."""

    def __init__(self, value: Any, token: str) -> None:
        self.value = value
        self.token = token
        super().__init__(f"Cannot format {value!r} with token {token!r}")
