"""Constraint set: zero or more constraints joined with OR.

An empty set matches nothing. That is deliberate: an entity with no
constraints is not "unrestricted", it is "never".

Usage:
    holidays = create_constraint_set(
        "2024-12-25",
        ("2024-12-30", "2025-01-02"),
        lambda instant: create_date(instant).get_weekday() >= 5,
    )
    holidays.match("2024-12-31")          # True
    holidays.match("2024-12-26T09:30Z")   # False (a Thursday)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from chronorange.calendar.arithmetic import truncate
from chronorange.calendar.normalizer import to_instant
from chronorange.constraints.evaluator import Constraint, as_constraint
from chronorange.domain.options import DEFAULT_OPTIONS, DateOptions
from chronorange.domain.types import Precision


@dataclass(frozen=True, slots=True)
class ConstraintSet:
    """Immutable OR of constraints.

    Evaluators are rebuilt on every match() call; nothing is cached, so a
    set can be shared freely between threads.
    """
    constraints: tuple[Constraint, ...] = ()
    options: DateOptions = field(default=DEFAULT_OPTIONS)

    def __len__(self) -> int:
        return len(self.constraints)

    def match(self, date: Any, precision: Precision | str = Precision.MILLISECONDS) -> bool:
        """True if ``date`` satisfies at least one constraint at ``precision``."""
        if not self.constraints:
            return False
        precision = Precision.parse(precision)
        instant = truncate(to_instant(date, self.options), precision)
        return any(
            constraint.evaluator(precision, self.options)(instant)
            for constraint in self.constraints
        )

    def extend(self, *constraints: Any) -> ConstraintSet:
        """New set with extra constraints appended."""
        lifted = tuple(as_constraint(c) for c in constraints)
        return ConstraintSet(self.constraints + lifted, self.options)


def create_constraint_set(*constraints: Any, options: DateOptions | None = None) -> ConstraintSet:
    """Factory: lift each raw constraint and freeze them into a set."""
    return ConstraintSet(
        tuple(as_constraint(c) for c in constraints),
        options or DEFAULT_OPTIONS,
    )


def matches(
    date: Any,
    constraints: Iterable[Any],
    precision: Precision | str = Precision.MILLISECONDS,
    options: DateOptions | None = None,
) -> bool:
    """Functional form of ConstraintSet.match."""
    return create_constraint_set(*constraints, options=options).match(date, precision)
