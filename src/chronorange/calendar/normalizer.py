"""Instant normalizer: any supported date-like input -> epoch milliseconds.

Accepted inputs:
  - ISO-8601 strings, date or date-time, with or without an offset
    ("2022-01-28", "2022-01-28T12:00:00.000Z", "2022-01-28T09:00:00-03:00")
  - int/float epoch milliseconds (fractions truncated toward zero)
  - datetime (naive values are read in options.timezone)
  - date (midnight in options.timezone)
  - DateValue (its instant, re-normalized under the given options)

Everything outside [MIN_SUPPORTED_INSTANT, MAX_SUPPORTED_INSTANT] is
rejected with InvalidDateInputError.
"""
from __future__ import annotations

import logging
import math
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

from dateutil import parser as dateutil_parser

from chronorange.domain.errors import InvalidDateInputError
from chronorange.domain.options import DEFAULT_OPTIONS, DateOptions
from chronorange.domain.types import (
    EPOCH,
    MAX_SUPPORTED_INSTANT,
    MIN_SUPPORTED_INSTANT,
    Instant,
)

log = logging.getLogger(__name__)

_ONE_MS = timedelta(milliseconds=1)


def to_instant(value: Any, options: DateOptions | None = None) -> Instant:
    """Convert a date-like value to an instant. Raises InvalidDateInputError."""
    opts = options or DEFAULT_OPTIONS
    instant = _convert(value, opts)
    if not MIN_SUPPORTED_INSTANT <= instant <= MAX_SUPPORTED_INSTANT:
        raise InvalidDateInputError(value, "outside the supported range")
    if opts.normalize:
        instant = _to_noon(instant)
    return instant


def from_instant(instant: Instant) -> datetime:
    """Aware UTC datetime for an instant."""
    try:
        return EPOCH + timedelta(milliseconds=instant)
    except OverflowError as exc:
        raise InvalidDateInputError(instant, "outside the supported range") from exc


def datetime_to_instant(dt: datetime) -> Instant:
    """Epoch milliseconds for an aware datetime; sub-millisecond digits dropped."""
    return (dt - EPOCH) // _ONE_MS


def now() -> Instant:
    return datetime_to_instant(datetime.now(timezone.utc))


def _convert(value: Any, opts: DateOptions) -> Instant:
    # Deferred: chronorange.values.date imports this module.
    from chronorange.values.date import DateValue

    if isinstance(value, DateValue):
        return value.instant

    if isinstance(value, bool):
        raise InvalidDateInputError(value, "booleans are not timestamps")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidDateInputError(value, "timestamp must be finite")
        return int(value)
    if isinstance(value, datetime):
        return _from_datetime(value, opts)
    if isinstance(value, date):
        return _from_datetime(datetime.combine(value, time()), opts)
    if isinstance(value, str):
        return _from_string(value, opts)
    raise InvalidDateInputError(value, f"unsupported type {type(value).__name__}")


def _from_datetime(dt: datetime, opts: DateOptions) -> Instant:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=opts.tzinfo())
    try:
        return datetime_to_instant(dt.astimezone(timezone.utc))
    except OverflowError as exc:
        raise InvalidDateInputError(dt, "outside the supported range") from exc


def _from_string(text: str, opts: DateOptions) -> Instant:
    stripped = text.strip()
    if not stripped:
        raise InvalidDateInputError(text, "empty string")
    try:
        parsed = dateutil_parser.isoparse(stripped)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateInputError(text, "not an ISO-8601 date") from exc
    instant = _from_datetime(parsed, opts)
    log.debug("parsed %r as instant %d", text, instant)
    return instant


def _to_noon(instant: Instant) -> Instant:
    dt = from_instant(instant)
    noon = dt.replace(hour=12, minute=0, second=0, microsecond=0)
    return datetime_to_instant(noon)
