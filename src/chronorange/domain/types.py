"""Shared type aliases, the precision enum, and the supported instant bounds."""
from __future__ import annotations

from datetime import date, datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Callable, TypeAlias, Union

from chronorange.domain.errors import InvalidPrecisionError

if TYPE_CHECKING:
    from chronorange.values.date import DateValue

Instant: TypeAlias = int  # Unix epoch milliseconds (UTC)
DateLike: TypeAlias = Union[str, int, float, datetime, date, "DateValue"]
Predicate: TypeAlias = Callable[[Instant], bool]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# The range a Python datetime can represent, expressed in epoch milliseconds.
MIN_SUPPORTED_INSTANT: Instant = -62_135_596_800_000          # 0001-01-01T00:00:00.000Z
MAX_SUPPORTED_INSTANT: Instant = 253_402_300_799_999          # 9999-12-31T23:59:59.999Z


class Precision(Enum):
    """Granularity at which two instants are compared.

    Members are ordered coarse to fine; ``rank`` exposes that order.
    """
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @classmethod
    def parse(cls, value: Precision | str) -> Precision:
        """Accept a member or its string value. Raises InvalidPrecisionError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidPrecisionError(value) from None


_RANKS: dict[Precision, int] = {p: i for i, p in enumerate(Precision)}
