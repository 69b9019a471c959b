"""Tests for shift, truncate and replace_fields."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from chronorange.calendar.arithmetic import replace_fields, shift, shift_many, truncate
from chronorange.calendar.normalizer import to_instant
from chronorange.domain.errors import (
    DateOutOfRangeError,
    InvalidDateInputError,
    InvalidPrecisionError,
)
from chronorange.domain.types import MAX_SUPPORTED_INSTANT, MIN_SUPPORTED_INSTANT, Precision

instants = st.integers(min_value=MIN_SUPPORTED_INSTANT, max_value=MAX_SUPPORTED_INSTANT)
precisions = st.sampled_from(list(Precision))


def iso(value: str) -> int:
    return to_instant(value)


# ── shift ──

def test_shift_day():
    assert shift(iso("2001-12-25T12:00:00Z"), "day", 1) == iso("2001-12-26T12:00:00Z")
    assert shift(iso("2001-12-25T12:00:00Z"), Precision.DAY, -1) == iso("2001-12-24T12:00:00Z")


def test_shift_month_crosses_year():
    assert shift(iso("2001-12-25T12:00:00Z"), "month", 1) == iso("2002-01-25T12:00:00Z")


def test_shift_month_clamps_to_month_end():
    assert shift(iso("2000-01-31T08:00:00Z"), "month", 1) == iso("2000-02-29T08:00:00Z")
    assert shift(iso("2001-01-31T08:00:00Z"), "month", 1) == iso("2001-02-28T08:00:00Z")


def test_shift_year_from_leap_day():
    assert shift(iso("2000-02-29T00:00:00Z"), "year", 1) == iso("2001-02-28T00:00:00Z")


def test_shift_time_units():
    base = iso("2000-01-01T00:00:00Z")
    assert shift(base, "hours", 25) == iso("2000-01-02T01:00:00Z")
    assert shift(base, "minutes", -1) == iso("1999-12-31T23:59:00Z")
    assert shift(base, "seconds", 90) == iso("2000-01-01T00:01:30Z")
    assert shift(base, "milliseconds", 1) == base + 1


def test_shift_past_max_raises():
    with pytest.raises(DateOutOfRangeError):
        shift(MAX_SUPPORTED_INSTANT, "milliseconds", 1)
    with pytest.raises(DateOutOfRangeError):
        shift(MAX_SUPPORTED_INSTANT, "year", 1)


def test_shift_past_min_raises():
    with pytest.raises(DateOutOfRangeError):
        shift(MIN_SUPPORTED_INSTANT, "day", -1)


def test_out_of_range_is_invalid_input():
    with pytest.raises(InvalidDateInputError):
        shift(MIN_SUPPORTED_INSTANT, "month", -1)


def test_shift_unknown_unit():
    with pytest.raises(InvalidPrecisionError, match="fortnight"):
        shift(0, "fortnight", 1)


def test_shift_many_in_order():
    base = iso("2000-01-31T00:00:00Z")
    # month first clamps to Feb 29, then one day -> Mar 1
    assert shift_many(base, {"month": 1, "day": 1}) == iso("2000-03-01T00:00:00Z")


def test_shift_many_negative_sign():
    base = iso("2001-12-25T12:00:00Z")
    assert shift_many(base, {"year": 1, "day": 1}, sign=-1) == iso("2000-12-24T12:00:00Z")


# ── truncate ──

@pytest.mark.parametrize(
    "precision, expected",
    [
        ("year", "2023-01-01T00:00:00.000Z"),
        ("month", "2023-07-01T00:00:00.000Z"),
        ("day", "2023-07-15T00:00:00.000Z"),
        ("hours", "2023-07-15T13:00:00.000Z"),
        ("minutes", "2023-07-15T13:45:00.000Z"),
        ("seconds", "2023-07-15T13:45:30.000Z"),
        ("milliseconds", "2023-07-15T13:45:30.123Z"),
    ],
)
def test_truncate_each_precision(precision, expected):
    assert truncate(iso("2023-07-15T13:45:30.123Z"), precision) == iso(expected)


def test_truncate_before_epoch_floors():
    assert truncate(-1, "day") == iso("1969-12-31T00:00:00Z")


def test_truncate_month_end_and_next_month_stay_distinct():
    jan_31 = truncate(iso("2023-01-31T18:00:00Z"), "day")
    feb_01 = truncate(iso("2023-02-01T06:00:00Z"), "day")
    assert jan_31 == iso("2023-01-31T00:00:00Z")
    assert feb_01 == iso("2023-02-01T00:00:00Z")
    assert jan_31 < feb_01


def test_truncate_extremes():
    assert truncate(MAX_SUPPORTED_INSTANT, "year") == iso("9999-01-01T00:00:00Z")
    assert truncate(MAX_SUPPORTED_INSTANT, "day") == iso("9999-12-31T00:00:00Z")
    assert truncate(MIN_SUPPORTED_INSTANT, "year") == MIN_SUPPORTED_INSTANT


@given(instants, precisions)
def test_truncate_idempotent_and_floor(instant, precision):
    once = truncate(instant, precision)
    assert truncate(once, precision) == once
    assert once <= instant


@given(instants, instants, precisions)
def test_truncate_monotone(a, b, precision):
    lo, hi = sorted((a, b))
    assert truncate(lo, precision) <= truncate(hi, precision)


# ── replace_fields ──

def test_replace_year_month_day():
    base = iso("2001-12-25T12:00:00Z")
    assert replace_fields(base, year=1999) == iso("1999-12-25T12:00:00Z")
    assert replace_fields(base, month=11) == iso("2001-11-25T12:00:00Z")
    assert replace_fields(base, day=5) == iso("2001-12-05T12:00:00Z")


def test_replace_time_fields():
    base = iso("2001-12-25T12:00:00Z")
    updated = replace_fields(base, hours=1, minutes=2, seconds=3, milliseconds=4)
    assert updated == iso("2001-12-25T01:02:03.004Z")


def test_replace_invalid_combination():
    with pytest.raises(InvalidDateInputError):
        replace_fields(iso("2001-01-30T00:00:00Z"), month=2)


def test_replace_unknown_field():
    with pytest.raises(InvalidPrecisionError):
        replace_fields(0, week=3)
