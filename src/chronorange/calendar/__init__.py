"""Instant normalization and calendar arithmetic."""
from chronorange.calendar.arithmetic import replace_fields, shift, shift_many, truncate
from chronorange.calendar.normalizer import (
    datetime_to_instant,
    from_instant,
    now,
    to_instant,
)

__all__ = [
    "replace_fields",
    "shift",
    "shift_many",
    "truncate",
    "datetime_to_instant",
    "from_instant",
    "now",
    "to_instant",
]
