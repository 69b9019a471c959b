"""Leaf domain definitions: types, errors and options.

Re-exports the public names:
    from chronorange.domain import Precision, DateOptions, InvalidDateInputError
"""
from chronorange.domain.errors import (
    ChronorangeError,
    DateOutOfRangeError,
    InvalidComparisonOperatorError,
    InvalidDateInputError,
    InvalidFormatValueError,
    InvalidPrecisionError,
    InvalidRangeError,
)
from chronorange.domain.options import DEFAULT_OPTIONS, DateOptions
from chronorange.domain.types import (
    EPOCH,
    MAX_SUPPORTED_INSTANT,
    MIN_SUPPORTED_INSTANT,
    DateLike,
    Instant,
    Precision,
    Predicate,
)

__all__ = [
    "ChronorangeError",
    "DateOutOfRangeError",
    "InvalidComparisonOperatorError",
    "InvalidDateInputError",
    "InvalidFormatValueError",
    "InvalidPrecisionError",
    "InvalidRangeError",
    "DEFAULT_OPTIONS",
    "DateOptions",
    "EPOCH",
    "MAX_SUPPORTED_INSTANT",
    "MIN_SUPPORTED_INSTANT",
    "DateLike",
    "Instant",
    "Precision",
    "Predicate",
]
