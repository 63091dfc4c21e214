import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraydrills.combinatorics import binomial_row, n_choose_r, pascal_row


@given(st.integers(0, 60), st.integers(0, 60))
def test_n_choose_r_matches_comb(n, r):
    assert n_choose_r(n, r) == math.comb(n, r)


def test_n_choose_r_r_greater_than_n():
    assert n_choose_r(3, 5) == 0


@given(st.integers(0, 60))
def test_binomial_row_sum_and_symmetry(n):
    row = binomial_row(n)
    assert len(row) == n + 1
    assert sum(row) == 2**n
    assert row == row[::-1]


@given(st.integers(0, 40))
def test_binomial_row_entries(n):
    assert binomial_row(n) == [n_choose_r(n, k) for k in range(n + 1)]


def test_binomial_row_negative_raises():
    with pytest.raises(ValueError):
        binomial_row(-1)


@given(st.integers(1, 60))
def test_pascal_row_is_previous_binomial_row(n):
    assert pascal_row(n) == binomial_row(n - 1)


def test_pascal_row_zero_is_single_one():
    assert pascal_row(0) == [1]