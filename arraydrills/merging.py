"""Merging overlapping intervals and redistributing two sorted lists."""

from __future__ import annotations

from heapq import merge
from typing import Iterable, Sequence


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Merge overlapping or touching [start, end] intervals, returned in ascending order."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted((start, end) for start, end in intervals):
        if merged and start <= merged[-1][1]:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> tuple[list[int], list[int]]:
    """Merge two sorted lists, keeping their lengths.

    The first result holds the smallest len(first) values and the second the rest,
    both in ascending order.
    """
    combined = list(merge(first, second))
    return combined[: len(first)], combined[len(first):]