"""Constraint evaluator.

A constraint is one of two variants:

    RangeConstraint(spec)     spec is anything normalize_range accepts
    PredicateConstraint(fn)   fn(instant) -> bool

Raw user input is lifted into a variant once, by as_constraint(). After
that each variant builds its own evaluator, so callers never type-test.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeAlias

from chronorange.calendar.arithmetic import truncate
from chronorange.constraints.ranges import RangeMode, normalize_range
from chronorange.domain.errors import InvalidRangeError
from chronorange.domain.options import DateOptions
from chronorange.domain.types import Instant, Precision, Predicate

Evaluator: TypeAlias = Callable[[Instant], bool]


@dataclass(frozen=True, slots=True)
class RangeConstraint:
    """Inclusive range test. A single date is a range of one instant."""
    spec: Any

    def evaluator(
        self,
        precision: Precision = Precision.MILLISECONDS,
        options: DateOptions | None = None,
    ) -> Evaluator:
        bounds = normalize_range(self.spec, RangeMode.COMPARISON, options)
        start = truncate(bounds.start, precision)
        end = truncate(bounds.end, precision)

        def matches(instant: Instant) -> bool:
            if start > end:
                raise InvalidRangeError(start, end)
            return start <= instant <= end

        return matches


@dataclass(frozen=True, slots=True)
class PredicateConstraint:
    """Caller-supplied test. Receives the instant truncated to the match precision."""
    fn: Predicate

    def evaluator(
        self,
        precision: Precision = Precision.MILLISECONDS,
        options: DateOptions | None = None,
    ) -> Evaluator:
        return self.fn


Constraint: TypeAlias = RangeConstraint | PredicateConstraint


def as_constraint(raw: Any) -> Constraint:
    """Lift a raw constraint (date-like, pair, Range or callable) into a variant."""
    if isinstance(raw, (RangeConstraint, PredicateConstraint)):
        return raw
    if callable(raw):
        return PredicateConstraint(raw)
    return RangeConstraint(raw)


def to_evaluator(
    raw: Any,
    precision: Precision | str = Precision.MILLISECONDS,
    options: DateOptions | None = None,
) -> Evaluator:
    """Functional shortcut: as_constraint(raw).evaluator(...)."""
    return as_constraint(raw).evaluator(Precision.parse(precision), options)
