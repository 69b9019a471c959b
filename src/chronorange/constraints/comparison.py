"""Precision-aware comparison operators.

Each operator becomes one range relative to the other date, and the range
is matched through the same ConstraintSet machinery as any user constraint:

    <=   (None, other)
    <    (None, other - 1 unit)
    =    (other, other)
    >    (other + 1 unit, None)
    >=   (other, None)

Both sides are truncated to the precision first, so at DAY precision
09:00 and 21:00 on the same date compare equal. "1 unit" is a calendar
unit (see calendar.arithmetic.shift), not a fixed number of milliseconds.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from chronorange.calendar.arithmetic import shift, truncate
from chronorange.calendar.normalizer import to_instant
from chronorange.constraints.constraint_set import create_constraint_set
from chronorange.constraints.ranges import Range
from chronorange.domain.errors import DateOutOfRangeError, InvalidComparisonOperatorError
from chronorange.domain.options import DateOptions
from chronorange.domain.types import Instant, Precision


class ComparisonOperator(Enum):
    LESS_OR_EQUAL = "<="
    LESS = "<"
    EQUAL = "="
    GREATER = ">"
    GREATER_OR_EQUAL = ">="

    @classmethod
    def parse(cls, value: ComparisonOperator | str) -> ComparisonOperator:
        """Accept a member or its symbol. Raises InvalidComparisonOperatorError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidComparisonOperatorError(value) from None

    def reference_range(
        self, other: Instant, precision: Precision
    ) -> tuple[Instant | None, Instant | None]:
        """Range of instants that satisfy ``x <op> other``.

        Raises DateOutOfRangeError when the strict operators would need a
        bound past the supported range.
        """
        if self is ComparisonOperator.LESS_OR_EQUAL:
            return (None, other)
        if self is ComparisonOperator.LESS:
            return (None, shift(other, precision, -1))
        if self is ComparisonOperator.EQUAL:
            return (other, other)
        if self is ComparisonOperator.GREATER:
            return (shift(other, precision, 1), None)
        return (other, None)


def compare(
    operator: ComparisonOperator | str,
    date: Any,
    other: Any,
    precision: Precision | str = Precision.DAY,
    options: DateOptions | None = None,
) -> bool:
    """Evaluate ``date <operator> other`` at ``precision``.

    The operator is validated first, so a bad operator raises even when
    ``other`` is None. A None ``other`` is never comparable and yields False.
    """
    op = ComparisonOperator.parse(operator)
    precision = Precision.parse(precision)
    if other is None:
        return False

    reference = truncate(to_instant(other, options), precision)
    try:
        bounds = op.reference_range(reference, precision)
    except DateOutOfRangeError:
        # Nothing lies strictly before the minimum or after the maximum.
        return False
    # The reference instants are final; a Range keeps options from reapplying.
    return create_constraint_set(Range(*bounds), options=options).match(
        date, precision
    )
