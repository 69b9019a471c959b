"""Token-based date formatter.

    create_formatter("dddd, MMMM DD YYYY [at] hh:mm A").format("2024-03-01T15:04:00Z")
    # 'Friday, March 01 2024 at 03:04 PM'

Dates render in UTC unless a zoneinfo key is given. Names are English.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Any, Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from chronorange.calendar.normalizer import from_instant, to_instant
from chronorange.domain.errors import InvalidFormatValueError
from chronorange.formatting.tokenizer import Token, tokenize

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12


_RENDERERS: dict[str, Callable[[datetime], str]] = {
    "YYYY": lambda dt: f"{dt.year:04d}",
    "MM": lambda dt: f"{dt.month:02d}",
    "MMM": lambda dt: MONTH_NAMES[dt.month - 1][:3],
    "MMMM": lambda dt: MONTH_NAMES[dt.month - 1],
    "DD": lambda dt: f"{dt.day:02d}",
    "ddd": lambda dt: WEEKDAY_NAMES[dt.weekday()][:3],
    "dddd": lambda dt: WEEKDAY_NAMES[dt.weekday()],
    "HH": lambda dt: f"{dt.hour:02d}",
    "hh": lambda dt: f"{_hour12(dt):02d}",
    "mm": lambda dt: f"{dt.minute:02d}",
    "ss": lambda dt: f"{dt.second:02d}",
    "SSS": lambda dt: f"{dt.microsecond // 1000:03d}",
    "a": lambda dt: "am" if dt.hour < 12 else "pm",
    "A": lambda dt: "AM" if dt.hour < 12 else "PM",
}


@dataclass(frozen=True, slots=True)
class DateFormatter:
    """A parsed format, ready to apply to any date-like value."""
    tokens: tuple[Token, ...]
    zone: tzinfo = timezone.utc

    def format(self, date: Any) -> str | None:
        """Render ``date``; None passes through as None."""
        if date is None:
            return None
        instant = to_instant(date)
        try:
            dt = from_instant(instant).astimezone(self.zone)
        except (OverflowError, ValueError) as exc:
            raise InvalidFormatValueError(date, "zone") from exc
        return "".join(
            _RENDERERS[token.text](dt) if token.is_field else token.text
            for token in self.tokens
        )


def create_formatter(fmt: str, timezone_key: str | None = None) -> DateFormatter:
    """Factory: tokenize once, format many times."""
    zone: tzinfo = timezone.utc
    if timezone_key is not None:
        try:
            zone = ZoneInfo(timezone_key)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise InvalidFormatValueError(timezone_key, "zone") from exc
    return DateFormatter(tokenize(fmt), zone)
