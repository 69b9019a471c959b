"""Tests for Range and normalize_range."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from chronorange.constraints.ranges import Range, RangeMode, normalize_range
from chronorange.domain.errors import InvalidDateInputError
from chronorange.domain.options import DateOptions
from chronorange.domain.types import MAX_SUPPORTED_INSTANT, MIN_SUPPORTED_INSTANT

instants = st.integers(min_value=MIN_SUPPORTED_INSTANT, max_value=MAX_SUPPORTED_INSTANT)


# ── Shapes ──

def test_single_value_is_zero_width(date1):
    assert normalize_range(date1) == Range(date1, date1)


def test_single_iso_string(date1):
    assert normalize_range("1987-12-25T12:00:00.000Z") == Range(date1, date1)


def test_pair(date1, date2):
    assert normalize_range((date1, date2)) == Range(date1, date2)


def test_list_pair(date1, date2):
    assert normalize_range([date1, date2]) == Range(date1, date2)


def test_mixed_input_types(date1, date2):
    assert normalize_range(("1987-12-25T12:00:00Z", date2)) == Range(date1, date2)


def test_range_passthrough(date1, date2):
    assert normalize_range(Range(date2, date1)) == Range(date1, date2)


def test_range_ends_skip_noon_snap(date1):
    # Range ends are instants already; normalize must not move them.
    morning = date1 - 3 * 3_600_000
    opts = DateOptions(normalize=True)
    assert normalize_range(Range(morning, morning), options=opts) == Range(morning, morning)
    assert normalize_range((morning, morning), options=opts) == Range(date1, date1)


# ── Ordering ──

def test_reversed_pair_is_reordered(date1, date2):
    assert normalize_range((date2, date1)) == normalize_range((date1, date2))


def test_reversed_pair_reordered_in_strict_mode(date1, date3):
    assert normalize_range((date3, date1), RangeMode.STRICT) == Range(date1, date3)


@given(instants, instants)
def test_order_never_matters(a, b):
    forward = normalize_range((a, b))
    backward = normalize_range((b, a))
    assert forward == backward
    assert forward.start <= forward.end


# ── Open ends ──

def test_open_end_comparison_mode(date1):
    assert normalize_range((date1, None)) == Range(date1, MAX_SUPPORTED_INSTANT)


def test_open_start_comparison_mode(date1):
    assert normalize_range((None, date1)) == Range(MIN_SUPPORTED_INSTANT, date1)


def test_fully_open_comparison_mode():
    assert normalize_range((None, None)) == Range(MIN_SUPPORTED_INSTANT, MAX_SUPPORTED_INSTANT)


def test_open_ends_preserved_in_strict_mode(date1):
    assert normalize_range((date1, None), RangeMode.STRICT) == Range(date1, None)
    assert normalize_range((None, date1), RangeMode.STRICT) == Range(None, date1)
    assert normalize_range((None, None), RangeMode.STRICT) == Range(None, None)


# ── Invalid specs ──

def test_wrong_arity_raises(date1):
    with pytest.raises(InvalidDateInputError, match="exactly two"):
        normalize_range((date1,))
    with pytest.raises(InvalidDateInputError, match="exactly two"):
        normalize_range([date1, date1, date1])


def test_none_single_value_raises():
    with pytest.raises(InvalidDateInputError):
        normalize_range(None)


def test_unparseable_member_raises(date1):
    with pytest.raises(InvalidDateInputError):
        normalize_range((date1, "whenever"))


# ── Range value ──

def test_is_open():
    assert Range(None, 1).is_open is True
    assert Range(1, None).is_open is True
    assert Range(1, 1).is_open is False


def test_frozen():
    r = Range(1, 2)
    with pytest.raises(AttributeError):
        r.start = 0  # type: ignore[misc]
