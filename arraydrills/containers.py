"""Small drills over the standard containers: sorting, counting, heaps and ordered lookups."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections import Counter
from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Summary:
    """Basic statistics of a sequence of integers."""

    minimum: int
    maximum: int
    total: int
    threes: int
    contains_two: bool


def summarize(values: Iterable[int]) -> Summary:
    """Return the minimum, maximum, sum, number of 3s and presence of a 2."""
    items = list(values)
    if not items:
        raise ValueError("cannot summarize an empty sequence")
    return Summary(
        minimum=min(items),
        maximum=max(items),
        total=sum(items),
        threes=items.count(3),
        contains_two=2 in items,
    )


def sort_pairs(pairs: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort pairs by second element descending, ties by first element ascending."""
    return sorted(pairs, key=lambda pair: (-pair[1], pair[0]))


def word_counts(words: Iterable[str]) -> dict[str, int]:
    """Count occurrences of each word, keyed in sorted order."""
    return dict(sorted(Counter(words).items()))


def count_queries(words: Iterable[str], queries: Iterable[str]) -> list[int]:
    """For each query, report how many times it occurred among the words."""
    counts = Counter(words)
    return [counts[query] for query in queries]


def _half(value: int) -> int:
    """Divide by two, truncating toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


def max_halving_total(values: Iterable[int], k: int) -> int:
    """Repeat k times: add the largest value to a total and add its half to the pool,
    then drop one copy of the pool's largest value. Return the total."""
    if k < 0:
        raise ValueError("k must not be negative")
    heap = [-value for value in values]
    if k and not heap:
        raise ValueError("cannot take values from an empty collection")
    heapq.heapify(heap)
    total = 0
    for _ in range(k):
        largest = -heap[0]
        total += largest
        heapq.heappushpop(heap, -_half(largest))
    return total


def rank_by_marks(entries: Iterable[tuple[str, int]]) -> list[tuple[str, int]]:
    """Order (name, marks) entries from highest to lowest marks.

    Entries with equal marks come out in reverse order of arrival.
    """
    ascending = sorted(entries, key=lambda entry: entry[1])
    return ascending[::-1]


def extremes_mask(values: Sequence[int]) -> str:
    """Mark with '1' each position holding a prefix minimum or a suffix maximum."""
    prefix_min = list(accumulate(values, min))
    suffix_max = list(accumulate(reversed(values), max))[::-1]
    return "".join(
        "1" if low >= value or high <= value else "0"
        for value, low, high in zip(values, prefix_min, suffix_max)
    )


def lower_bound(values: Iterable[int], target: int) -> int | None:
    """Return the smallest distinct value not less than target, or None."""
    ordered = sorted(set(values))
    index = bisect_left(ordered, target)
    return ordered[index] if index < len(ordered) else None