"""DateValue: the immutable date object the rest of the library hands out.

Every operation that "changes" a date returns a new DateValue. Getters and
setters are separate methods (get_hours / with_hours) so a call site always
reads as one or the other.

All field accessors read UTC. Months are 1-12 and weekdays follow
datetime.weekday() (0=Monday, 6=Sunday).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from chronorange.calendar.arithmetic import replace_fields, shift_many, truncate
from chronorange.calendar.normalizer import from_instant, now, to_instant
from chronorange.constraints.comparison import ComparisonOperator, compare
from chronorange.constraints.constraint_set import create_constraint_set
from chronorange.domain.options import DEFAULT_OPTIONS, DateOptions
from chronorange.domain.types import Instant, Precision
from chronorange.formatting.formatter import create_formatter


@dataclass(frozen=True, slots=True, order=True)
class DateValue:
    """A point in time with millisecond precision.

    Equality, hashing and ordering use the instant only; ``options`` is
    carried along so derived values normalize the same way.
    """
    instant: Instant
    options: DateOptions = field(default=DEFAULT_OPTIONS, compare=False, repr=False)

    @classmethod
    def create(cls, value: Any = None, options: DateOptions | None = None) -> DateValue:
        """Factory: normalize any date-like value. None means "now"."""
        opts = options or DEFAULT_OPTIONS
        instant = to_instant(now() if value is None else value, opts)
        return cls(instant, opts)

    # ── Accessors ──

    def to_datetime(self) -> datetime:
        return from_instant(self.instant)

    def get_time(self) -> Instant:
        return self.instant

    def get_year(self) -> int:
        return self.to_datetime().year

    def get_month(self) -> int:
        return self.to_datetime().month

    def get_day(self) -> int:
        return self.to_datetime().day

    def get_weekday(self) -> int:
        return self.to_datetime().weekday()

    def get_hours(self) -> int:
        return self.to_datetime().hour

    def get_minutes(self) -> int:
        return self.to_datetime().minute

    def get_seconds(self) -> int:
        return self.to_datetime().second

    def get_milliseconds(self) -> int:
        return self.to_datetime().microsecond // 1000

    # ── Arithmetic ──

    def add(self, **amounts: int) -> DateValue:
        """Copy moved forward, e.g. add(month=1, day=2). Keywords are precision names."""
        return self._derive(shift_many(self.instant, amounts))

    def subtract(self, **amounts: int) -> DateValue:
        """Copy moved backward; mirror of add()."""
        return self._derive(shift_many(self.instant, amounts, sign=-1))

    def with_fields(self, **fields: int) -> DateValue:
        """Copy with calendar fields replaced, e.g. with_fields(year=1999, day=5)."""
        return self._derive(replace_fields(self.instant, **fields))

    def with_year(self, year: int) -> DateValue:
        return self.with_fields(year=year)

    def with_month(self, month: int) -> DateValue:
        return self.with_fields(month=month)

    def with_day(self, day: int) -> DateValue:
        return self.with_fields(day=day)

    def with_hours(self, hours: int) -> DateValue:
        return self.with_fields(hours=hours)

    def with_minutes(self, minutes: int) -> DateValue:
        return self.with_fields(minutes=minutes)

    def with_seconds(self, seconds: int) -> DateValue:
        return self.with_fields(seconds=seconds)

    def with_milliseconds(self, milliseconds: int) -> DateValue:
        return self.with_fields(milliseconds=milliseconds)

    def truncate(self, precision: Precision | str) -> DateValue:
        """Copy floored to the start of its year/month/day/... ."""
        return DateValue(truncate(self.instant, precision), self.options)

    # ── Matching and comparison ──

    def matches(self, *constraints: Any, precision: Precision | str = Precision.MILLISECONDS) -> bool:
        """True if this date satisfies at least one constraint. No constraints -> False."""
        return create_constraint_set(*constraints, options=self.options).match(self, precision)

    def is_(
        self,
        operator: ComparisonOperator | str,
        other: Any,
        precision: Precision | str = Precision.DAY,
    ) -> bool:
        """Compare with ``other`` at ``precision``: date.is_("<", other, "month")."""
        return compare(operator, self, other, precision, self.options)

    # ── Presentation ──

    def format(self, fmt: str, timezone: str | None = None) -> str:
        return create_formatter(fmt, timezone).format(self)

    def __str__(self) -> str:
        return self.to_datetime().isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def _derive(self, instant: Instant) -> DateValue:
        # Re-run the normalizer so options (e.g. noon normalization) still hold.
        return DateValue(to_instant(instant, self.options), self.options)


def create_date(value: Any = None, options: DateOptions | None = None) -> DateValue:
    """Module-level alias for DateValue.create."""
    return DateValue.create(value, options)
