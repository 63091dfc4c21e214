"""Linear-time drills over sequences: profits, leaders, runs, permutations and partitions."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def max_profit(prices: Iterable[int]) -> int:
    """Return the best gain from buying on one day and selling on the same or a later day."""
    items = iter(prices)
    try:
        lowest = next(items)
    except StopIteration:
        raise ValueError("cannot compute a profit from no prices") from None
    best = 0
    for price in items:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def leaders(values: Iterable[int]) -> list[int]:
    """Return the values greater than everything to their right, listed from right to left."""
    result: list[int] = []
    for value in reversed(list(values)):
        if not result or value > result[-1]:
            result.append(value)
    return result


def longest_consecutive(values: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers found among the values."""
    present = set(values)
    longest = 0
    for start in present:
        if start - 1 in present:
            continue
        end = start
        while end + 1 in present:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def next_permutation(values: Iterable[int]) -> list[int]:
    """Return the next permutation in ascending order; the last one wraps to the first."""
    items = list(values)
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
        None,
    )
    if pivot is None:
        return items[::-1]
    successor = next(j for j in range(len(items) - 1, pivot, -1) if items[j] > items[pivot])
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return items


def rearrange_by_sign(values: Iterable[int]) -> list[int]:
    """Alternate positive and non-positive values, starting with a positive one.

    The relative order within each group is kept. Both groups must be the same size.
    """
    items = list(values)
    positives = [value for value in items if value > 0]
    others = [value for value in items if value <= 0]
    if len(positives) != len(others):
        raise ValueError("values must hold as many positive as non-positive numbers")
    return [value for pair in zip(positives, others) for value in pair]


def sort_012(values: Iterable[int]) -> list[int]:
    """Sort a sequence made only of 0s, 1s and 2s."""
    counts = Counter(values)
    unexpected = set(counts) - {0, 1, 2}
    if unexpected:
        raise ValueError(f"values must be 0, 1 or 2, got {sorted(unexpected)}")
    return [0] * counts[0] + [1] * counts[1] + [2] * counts[2]