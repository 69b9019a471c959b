"""Range normalizer.

A range spec is one of:
  - a single date-like value           -> (value, value)
  - a 2-item tuple/list (start, end)   -> either item may be None (open end)
  - an existing Range

Specs are converted to an ordered Range of instants. Backwards input is
reordered, never rejected:

    normalize_range(("1988-12-25", "1987-12-25"))
    # same Range as normalize_range(("1987-12-25", "1988-12-25"))

In COMPARISON mode open ends become the supported min/max instants so the
evaluator can do a plain inclusive comparison. In STRICT mode open ends stay
None, which is what DateRange shows to callers.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from chronorange.calendar.normalizer import to_instant
from chronorange.domain.errors import InvalidDateInputError
from chronorange.domain.options import DateOptions
from chronorange.domain.types import (
    MAX_SUPPORTED_INSTANT,
    MIN_SUPPORTED_INSTANT,
    Instant,
)

log = logging.getLogger(__name__)


class RangeMode(Enum):
    COMPARISON = auto()
    STRICT = auto()


@dataclass(frozen=True, slots=True)
class Range:
    """Inclusive interval [start, end] in epoch milliseconds.

    None on either side means unbounded. Ranges built by normalize_range
    always satisfy start <= end when both ends are set.
    """
    start: Instant | None
    end: Instant | None

    @property
    def is_open(self) -> bool:
        return self.start is None or self.end is None


def normalize_range(
    spec: Any,
    mode: RangeMode = RangeMode.COMPARISON,
    options: DateOptions | None = None,
) -> Range:
    """Turn a range spec into an ascending Range.

    A Range is taken as already normalized: its ends are used as instants
    and are not passed through the options again.

    Raises InvalidDateInputError for unparseable members or for a sequence
    that is not a pair.
    """
    if isinstance(spec, Range):
        start, end = spec.start, spec.end
    else:
        start_like, end_like = _split(spec)
        start = None if start_like is None else to_instant(start_like, options)
        end = None if end_like is None else to_instant(end_like, options)

    start_key = MIN_SUPPORTED_INSTANT if start is None else start
    end_key = MAX_SUPPORTED_INSTANT if end is None else end
    if start_key > end_key:
        log.debug("reordering reversed range [%s, %s]", start, end)
        start, end = end, start

    if mode is RangeMode.COMPARISON:
        if start is None:
            start = MIN_SUPPORTED_INSTANT
        if end is None:
            end = MAX_SUPPORTED_INSTANT
    return Range(start, end)


def _split(spec: Any) -> tuple[Any, Any]:
    if isinstance(spec, (tuple, list)):
        if len(spec) != 2:
            raise InvalidDateInputError(spec, "a range needs exactly two items")
        return spec[0], spec[1]
    if spec is None:
        raise InvalidDateInputError(spec, "a single-date range cannot be None")
    return spec, spec
