"""Majority elements by Boyer-Moore voting."""

from __future__ import annotations

from typing import Iterable


def majority_element(values: Iterable[int]) -> int | None:
    """Return the value occurring more than n // 2 times, or None if there is none."""
    items = list(values)
    candidate: int | None = None
    count = 0
    for value in items:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if items and items.count(candidate) > len(items) // 2:
        return candidate
    return None


def majority_elements(values: Iterable[int]) -> list[int]:
    """Return the values occurring more than n // 3 times; there are at most two."""
    items = list(values)
    first: int | None = None
    second: int | None = None
    first_count = second_count = 0
    for value in items:
        if first_count == 0 and value != second:
            first, first_count = value, 1
        elif second_count == 0 and value != first:
            second, second_count = value, 1
        elif value == first:
            first_count += 1
        elif value == second:
            second_count += 1
        else:
            first_count -= 1
            second_count -= 1
    threshold = len(items) // 3
    result: list[int] = []
    for candidate in (first, second):
        if candidate is not None and candidate not in result and items.count(candidate) > threshold:
            result.append(candidate)
    return result