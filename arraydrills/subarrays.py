"""Subarray queries driven by prefix sums, prefix xors and sliding windows."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def longest_subarray_with_sum(values: Iterable[int], k: int) -> int | None:
    """Return the length of the longest contiguous run summing to k.

    Works for negative values as well. Returns None when no run sums to k.
    """
    first_seen: dict[int, int] = {}
    best: int | None = None
    total = 0
    for index, value in enumerate(values):
        total += value
        candidates = []
        if total == k:
            candidates.append(index + 1)
        start = first_seen.get(total - k)
        if start is not None:
            candidates.append(index - start)
        for length in candidates:
            if best is None or length > best:
                best = length
        first_seen.setdefault(total, index)
    return best


def longest_nonnegative_subarray_with_sum(values: Sequence[int], k: int) -> int | None:
    """Return the length of the longest contiguous run summing to k, using a sliding window.

    Every value must be non-negative. Returns None when no run sums to k.
    """
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    best: int | None = None
    left = 0
    total = 0
    for right, value in enumerate(values):
        total += value
        while total > k and left <= right:
            total -= values[left]
            left += 1
        if total == k and left <= right:
            length = right - left + 1
            if best is None or length > best:
                best = length
    return best


def count_subarrays_with_sum(values: Iterable[int], k: int) -> int:
    """Count the contiguous runs whose sum is k."""
    seen = Counter({0: 1})
    total = 0
    count = 0
    for value in values:
        total += value
        count += seen[total - k]
        seen[total] += 1
    return count


def count_subarrays_with_xor(values: Iterable[int], k: int) -> int:
    """Count the contiguous runs whose bitwise xor is k."""
    seen = Counter({0: 1})
    running = 0
    count = 0
    for value in values:
        running ^= value
        count += seen[running ^ k]
        seen[running] += 1
    return count


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a contiguous run, never less than zero."""
    best: int | None = None
    current = 0
    for value in values:
        current += value
        if best is None or current > best:
            best = current
        if current < 0:
            current = 0
    if best is None or best <= 0:
        return 0
    return best