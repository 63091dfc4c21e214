import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraydrills.basics import (
    left_rotate,
    move_zeros,
    remove_duplicates,
    second_largest,
    union_sorted,
)

int_lists = st.lists(st.integers(-20, 20), max_size=30)


def test_left_rotate_worked_example():
    assert left_rotate([1, 2, 3, 4, 5, 6], 2) == [3, 4, 5, 6, 1, 2]


@given(st.lists(st.integers(), min_size=1, max_size=20), st.integers(0, 50))
def test_left_rotate_round_trip(values, d):
    rotated = left_rotate(values, d)
    assert sorted(rotated) == sorted(values)
    back = left_rotate(rotated, len(values) - d % len(values))
    assert back == values


def test_left_rotate_empty():
    assert left_rotate([], 3) == []


def test_move_zeros_worked_example():
    values = [1, 2, 0, 3, 0, 0, 4, 5, 2, 0, 3, 0]
    assert move_zeros(values) == [1, 2, 3, 4, 5, 2, 3, 0, 0, 0, 0, 0]


@given(st.lists(st.integers(-3, 3), max_size=30))
def test_move_zeros_invariants(values):
    result = move_zeros(values)
    assert len(result) == len(values)
    assert result.count(0) == values.count(0)
    nonzero_count = len(values) - values.count(0)
    assert 0 not in result[:nonzero_count]
    assert all(v == 0 for v in result[nonzero_count:])


def test_remove_duplicates_worked_example():
    assert remove_duplicates([1, 1, 1, 2, 2, 2, 2, 2, 3, 3]) == [1, 2, 3]


@given(int_lists)
def test_remove_duplicates_sorted_input(values):
    ordered = sorted(values)
    result = remove_duplicates(ordered)
    assert set(result) == set(values)
    assert all(a < b for a, b in zip(result, result[1:]))


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=30))
def test_second_largest_invariant(values):
    result = second_largest(values)
    below = [v for v in values if v < max(values)]
    if below:
        assert result == max(below)
    else:
        assert result is None


def test_second_largest_empty_raises():
    with pytest.raises(ValueError):
        second_largest([])


def test_union_sorted_worked_example():
    assert union_sorted([1, 1, 2, 3, 4, 5], [2, 3, 4, 4, 5, 6]) == [1, 2, 3, 4, 5, 6]


@given(int_lists, int_lists)
def test_union_sorted_invariants(first, second):
    result = union_sorted(sorted(first), sorted(second))
    assert set(result) == set(first) | set(second)
    assert all(a < b for a, b in zip(result, result[1:]))