"""Calendar arithmetic on instants.

shift() moves an instant by whole calendar units using relativedelta, so
"one month" after Jan 31 is the last day of February rather than a fixed
number of milliseconds. truncate() drops every component finer than the
requested precision.
"""
from __future__ import annotations

from datetime import datetime

from dateutil.relativedelta import relativedelta

from chronorange.calendar.normalizer import datetime_to_instant, from_instant
from chronorange.domain.errors import DateOutOfRangeError, InvalidDateInputError
from chronorange.domain.types import Instant, Precision

# Precision -> (relativedelta keyword, multiplier)
_DELTA_KEYWORDS: dict[Precision, tuple[str, int]] = {
    Precision.YEAR: ("years", 1),
    Precision.MONTH: ("months", 1),
    Precision.DAY: ("days", 1),
    Precision.HOURS: ("hours", 1),
    Precision.MINUTES: ("minutes", 1),
    Precision.SECONDS: ("seconds", 1),
    Precision.MILLISECONDS: ("microseconds", 1000),
}

# Precision -> datetime.replace() keyword for settable fields
_FIELD_KEYWORDS: dict[Precision, str] = {
    Precision.YEAR: "year",
    Precision.MONTH: "month",
    Precision.DAY: "day",
    Precision.HOURS: "hour",
    Precision.MINUTES: "minute",
    Precision.SECONDS: "second",
}


def shift(instant: Instant, unit: Precision | str, amount: int) -> Instant:
    """Move ``instant`` by ``amount`` units. Raises DateOutOfRangeError."""
    precision = Precision.parse(unit)
    keyword, multiplier = _DELTA_KEYWORDS[precision]
    delta = relativedelta(**{keyword: amount * multiplier})
    try:
        shifted = from_instant(instant) + delta
    except (OverflowError, ValueError) as exc:
        raise DateOutOfRangeError(instant, f"shift by {amount} {precision.value}") from exc
    return datetime_to_instant(shifted)


def shift_many(instant: Instant, amounts: dict[str, int], sign: int = 1) -> Instant:
    """Apply several shifts in insertion order, e.g. {"year": 1, "day": -2}."""
    for unit, amount in amounts.items():
        instant = shift(instant, unit, sign * amount)
    return instant


def truncate(instant: Instant, precision: Precision | str) -> Instant:
    """Floor ``instant`` to the start of its enclosing precision unit.

    Components are accumulated from the year down to ``precision``; anything
    finer is dropped, never rounded. Truncating at MILLISECONDS is a no-op.
    """
    precision = Precision.parse(precision)
    if precision is Precision.MILLISECONDS:
        return instant
    dt = from_instant(instant)
    components = (
        dt.year,
        dt.month,
        dt.day,
        dt.hour,
        dt.minute,
        dt.second,
    )
    defaults = (1, 1, 1, 0, 0, 0)
    keep = precision.rank + 1
    kept = components[:keep] + defaults[keep:]
    return datetime_to_instant(datetime(*kept, tzinfo=dt.tzinfo))


def replace_fields(instant: Instant, **fields: int) -> Instant:
    """Set calendar fields (year, month, day, hours, minutes, seconds, milliseconds).

    Keyword names are precision names. Invalid combinations such as
    month=2, day=30 raise InvalidDateInputError.
    """
    dt = from_instant(instant)
    replacements: dict[str, int] = {}
    for name, value in fields.items():
        precision = Precision.parse(name)
        if precision is Precision.MILLISECONDS:
            replacements["microsecond"] = value * 1000
        else:
            replacements[_FIELD_KEYWORDS[precision]] = value
    try:
        updated = dt.replace(**replacements)
    except ValueError as exc:
        raise InvalidDateInputError(fields, str(exc)) from exc
    return datetime_to_instant(updated)
