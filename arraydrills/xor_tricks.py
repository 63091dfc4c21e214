"""Finding missing, unpaired and duplicated numbers with xor and sum identities."""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Iterable


def missing_number(values: Iterable[int]) -> int:
    """Return the one number from 1..n+1 absent from n distinct values."""
    items = list(values)
    expected = reduce(xor, range(1, len(items) + 2), 0)
    return reduce(xor, items, expected)


def single_number(values: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, values, 0)


def repeating_and_missing(values: Iterable[int]) -> tuple[int, int]:
    """Return (repeating, missing) for a list of 1..n where one number replaces another."""
    items = list(values)
    n = len(items)
    difference = sum(items) - n * (n + 1) // 2
    square_difference = sum(value * value for value in items) - n * (n + 1) * (2 * n + 1) // 6
    if difference == 0 or square_difference % difference:
        raise ValueError("values do not hold exactly one repeated and one missing number")
    both = square_difference // difference
    if (both + difference) % 2:
        raise ValueError("values do not hold exactly one repeated and one missing number")
    repeating = (both + difference) // 2
    missing = repeating - difference
    if (
        not 1 <= missing <= n
        or not 1 <= repeating <= n
        or items.count(repeating) != 2
        or missing in items
    ):
        raise ValueError("values do not hold exactly one repeated and one missing number")
    return repeating, missing