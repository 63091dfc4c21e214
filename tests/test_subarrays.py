import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraydrills.subarrays import (
    count_subarrays_with_sum,
    count_subarrays_with_xor,
    longest_nonnegative_subarray_with_sum,
    longest_subarray_with_sum,
    max_subarray_sum,
)

SAMPLE = [1, 2, 3, 1, 1, 1, 1, 4, 2, 3]


def _has_window(values, length, k):
    return any(
        sum(values[start:start + length]) == k
        for start in range(len(values) - length + 1)
    )


def test_longest_sample():
    assert longest_subarray_with_sum(SAMPLE, 3) == 3
    assert longest_nonnegative_subarray_with_sum(SAMPLE, 3) == 3


def test_count_sample():
    assert count_subarrays_with_sum(SAMPLE, 3) == 5


def test_xor_sample():
    assert count_subarrays_with_xor([4, 2, 2, 6, 4], 6) == 4


def test_kadane_sample():
    assert max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3]) == 7


def test_no_match_gives_none():
    assert longest_subarray_with_sum([5, 6], 1) is None
    assert longest_nonnegative_subarray_with_sum([5, 6], 1) is None
    assert longest_subarray_with_sum([], 0) is None


def test_negative_values_rejected_by_window():
    with pytest.raises(ValueError):
        longest_nonnegative_subarray_with_sum([1, -1, 2], 1)


def test_all_negative_kadane_is_zero():
    assert max_subarray_sum([-3, -1, -7]) == 0
    assert max_subarray_sum([]) == 0


@given(st.lists(st.integers(0, 6), max_size=25), st.integers(0, 15))
def test_window_agrees_with_prefix_method(values, k):
    assert longest_nonnegative_subarray_with_sum(values, k) == longest_subarray_with_sum(values, k)


@given(st.lists(st.integers(-5, 5), max_size=25), st.integers(-8, 8))
def test_longest_is_a_real_window(values, k):
    length = longest_subarray_with_sum(values, k)
    has_any = count_subarrays_with_sum(values, k) > 0
    assert (length is not None) == has_any
    if length is not None:
        assert _has_window(values, length, k)
        assert not any(
            _has_window(values, longer, k) for longer in range(length + 1, len(values) + 1)
        )


@given(st.lists(st.integers(-5, 5), min_size=1, max_size=25))
def test_whole_array_is_counted(values):
    assert count_subarrays_with_sum(values, sum(values)) >= 1
    assert longest_subarray_with_sum(values, sum(values)) == len(values)


@given(st.lists(st.integers(0, 30), min_size=1, max_size=25))
def test_xor_count_over_all_targets_covers_every_window(values):
    total = sum(count_subarrays_with_xor(values, k) for k in range(32))
    assert total * 2 == len(values) * (len(values) + 1)


@given(st.lists(st.integers(0, 20), max_size=25))
def test_kadane_nonnegative_is_total(values):
    assert max_subarray_sum(values) == sum(values)


@given(st.lists(st.integers(-20, 20), min_size=1, max_size=25))
def test_kadane_bounds(values):
    result = max_subarray_sum(values)
    assert result >= max(max(values), 0)
    assert result <= sum(value for value in values if value > 0)