"""Range normalization, constraint evaluation and comparison operators.

Layering, bottom to top:
    ranges          spec -> ordered Range
    evaluator       Range | predicate -> instant test
    constraint_set  OR of evaluators
    comparison      <=, <, =, >, >= as single-range constraint sets
"""
from chronorange.constraints.comparison import ComparisonOperator, compare
from chronorange.constraints.constraint_set import (
    ConstraintSet,
    create_constraint_set,
    matches,
)
from chronorange.constraints.evaluator import (
    Constraint,
    PredicateConstraint,
    RangeConstraint,
    as_constraint,
    to_evaluator,
)
from chronorange.constraints.ranges import Range, RangeMode, normalize_range

__all__ = [
    "ComparisonOperator",
    "compare",
    "ConstraintSet",
    "create_constraint_set",
    "matches",
    "Constraint",
    "PredicateConstraint",
    "RangeConstraint",
    "as_constraint",
    "to_evaluator",
    "Range",
    "RangeMode",
    "normalize_range",
]
