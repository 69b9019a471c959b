"""Immutable date and date-range values."""
from chronorange.values.date import DateValue, create_date
from chronorange.values.date_range import DateRange, create_date_range

__all__ = [
    "DateValue",
    "create_date",
    "DateRange",
    "create_date_range",
]
