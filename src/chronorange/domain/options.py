"""Normalizer options.

Passed explicitly to every call that turns input into an instant; there is
no module-level default that callers can mutate.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from chronorange.domain.errors import InvalidDateInputError

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class DateOptions:
    """Configuration for the instant normalizer.

    normalize: move every normalized input to 12:00:00.000 UTC on its day.
        Handy when only the calendar date matters; wrong for time-of-day logic.
    timezone: zoneinfo key applied to inputs that carry no offset
        (naive datetimes, dates, ISO strings without an offset).
    """
    normalize: bool = False
    timezone: str = "UTC"

    def __post_init__(self) -> None:
        # Fail at construction rather than on first use.
        self.tzinfo()

    def tzinfo(self) -> ZoneInfo:
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise InvalidDateInputError(self.timezone, "unknown timezone") from exc

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> DateOptions:
        """Build options from CHRONORANGE_NORMALIZE / CHRONORANGE_TIMEZONE."""
        env = os.environ if environ is None else environ
        return cls(
            normalize=env.get("CHRONORANGE_NORMALIZE", "").strip().lower() in _TRUTHY,
            timezone=env.get("CHRONORANGE_TIMEZONE", "UTC") or "UTC",
        )


DEFAULT_OPTIONS = DateOptions()
