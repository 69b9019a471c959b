"""Shared fixtures for constraint and comparison tests.

The three reference dates sit one year apart, all at 12:00 UTC.
"""
from __future__ import annotations

import pytest

from chronorange.calendar.normalizer import to_instant

DAY_MS = 86_400_000


@pytest.fixture()
def date1() -> int:
    return to_instant("1987-12-25T12:00:00.000Z")


@pytest.fixture()
def date2() -> int:
    return to_instant("1988-12-25T12:00:00.000Z")


@pytest.fixture()
def date3() -> int:
    return to_instant("1989-12-25T12:00:00.000Z")
