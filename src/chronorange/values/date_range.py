"""DateRange: a range spec held for display and reuse.

Built in STRICT mode, so an open end stays None instead of turning into a
sentinel. Matching still goes through the regular constraint machinery.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from chronorange.constraints.constraint_set import create_constraint_set
from chronorange.constraints.evaluator import RangeConstraint
from chronorange.constraints.ranges import Range, RangeMode, normalize_range
from chronorange.domain.options import DEFAULT_OPTIONS, DateOptions
from chronorange.domain.types import Instant, Precision
from chronorange.values.date import DateValue


@dataclass(frozen=True, slots=True)
class DateRange:
    bounds: Range
    options: DateOptions = field(default=DEFAULT_OPTIONS, compare=False, repr=False)

    @classmethod
    def create(
        cls, start: Any = None, end: Any = None, options: DateOptions | None = None
    ) -> DateRange:
        """Factory: both ends optional, reversed ends are reordered."""
        opts = options or DEFAULT_OPTIONS
        return cls(normalize_range((start, end), RangeMode.STRICT, opts), opts)

    @property
    def start(self) -> Instant | None:
        return self.bounds.start

    @property
    def end(self) -> Instant | None:
        return self.bounds.end

    @property
    def is_open(self) -> bool:
        return self.bounds.is_open

    def start_date(self) -> DateValue | None:
        return None if self.start is None else DateValue(self.start, self.options)

    def end_date(self) -> DateValue | None:
        return None if self.end is None else DateValue(self.end, self.options)

    def as_constraint(self) -> RangeConstraint:
        return RangeConstraint(self.bounds)

    def matches(self, date: Any, precision: Precision | str = Precision.MILLISECONDS) -> bool:
        return create_constraint_set(self.as_constraint(), options=self.options).match(
            date, precision
        )

    def __str__(self) -> str:
        start = self.start_date()
        end = self.end_date()
        return f"[{'..' if start is None else start}, {'..' if end is None else end}]"


def create_date_range(
    start: Any = None, end: Any = None, options: DateOptions | None = None
) -> DateRange:
    """Module-level alias for DateRange.create."""
    return DateRange.create(start, end, options)
