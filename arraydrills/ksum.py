"""Finding pairs, triplets and quadruplets of values with a given sum."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence


def two_sum(values: Iterable[int], k: int) -> tuple[int, int]:
    """Return positions (i, j), i < j, in the sorted values whose entries sum to k.

    Raises ValueError when no two values sum to k.
    """
    items = sorted(values)
    left, right = 0, len(items) - 1
    while left < right:
        total = items[left] + items[right]
        if total > k:
            right -= 1
        elif total < k:
            left += 1
        else:
            return left, right
    raise ValueError(f"no two values sum to {k}")


def _pairs(items: Sequence[int], start: int, target: int) -> Iterator[tuple[int, int]]:
    """Yield distinct pairs from sorted items[start:] that sum to target, in ascending order."""
    left, right = start, len(items) - 1
    while left < right:
        total = items[left] + items[right]
        if total < target:
            left += 1
        elif total > target:
            right -= 1
        else:
            yield items[left], items[right]
            left += 1
            right -= 1
            while left < right and items[left] == items[left - 1]:
                left += 1
            while left < right and items[right] == items[right + 1]:
                right -= 1


def three_sum(values: Iterable[int]) -> list[tuple[int, int, int]]:
    """Return every distinct ascending triplet of values that sums to zero, in sorted order."""
    items = sorted(values)
    result: list[tuple[int, int, int]] = []
    for i, first in enumerate(items):
        if i and first == items[i - 1]:
            continue
        result.extend((first, second, third) for second, third in _pairs(items, i + 1, -first))
    return result


def four_sum(values: Iterable[int], target: int) -> list[tuple[int, int, int, int]]:
    """Return every distinct ascending quadruplet of values that sums to target, in sorted order."""
    items = sorted(values)
    result: list[tuple[int, int, int, int]] = []
    for i, first in enumerate(items):
        if i and first == items[i - 1]:
            continue
        for j in range(i + 1, len(items)):
            second = items[j]
            if j != i + 1 and second == items[j - 1]:
                continue
            result.extend(
                (first, second, third, fourth)
                for third, fourth in _pairs(items, j + 1, target - first - second)
            )
    return result