"""Elementary array manipulations: rotation, compaction, deduplication and unions."""

from __future__ import annotations

from heapq import merge
from itertools import groupby
from typing import Iterable, Sequence


def left_rotate(values: Sequence[int], d: int) -> list[int]:
    """Rotate values left by d places."""
    if not values:
        return []
    shift = d % len(values)
    return list(values[shift:]) + list(values[:shift])


def move_zeros(values: Iterable[int]) -> list[int]:
    """Move every zero to the end, keeping the order of the other values."""
    items = list(values)
    nonzero = [value for value in items if value != 0]
    return nonzero + [0] * (len(items) - len(nonzero))


def remove_duplicates(values: Iterable[int]) -> list[int]:
    """Collapse runs of equal values in a sorted sequence to a single value each."""
    return [key for key, _ in groupby(values)]


def second_largest(values: Iterable[int]) -> int | None:
    """Return the largest value strictly below the maximum, or None if there is none."""
    items = iter(values)
    try:
        largest = next(items)
    except StopIteration:
        raise ValueError("cannot find the second largest of an empty sequence") from None
    runner_up: int | None = None
    for value in items:
        if value > largest:
            runner_up, largest = largest, value
        elif value != largest and (runner_up is None or value > runner_up):
            runner_up = value
    return runner_up


def union_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the distinct values of two sorted sequences, in ascending order."""
    return [key for key, _ in groupby(merge(first, second))]