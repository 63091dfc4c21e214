"""Binomial coefficients and rows of Pascal's triangle."""

from __future__ import annotations


def n_choose_r(n: int, r: int) -> int:
    """Return the number of ways to choose r items from n; zero when r exceeds n."""
    if r > n:
        return 0
    result = 1
    for i in range(r):
        result = result * (n - i) // (i + 1)
    return result


def pascal_row(n: int) -> list[int]:
    """Return the n-th row of Pascal's triangle, counting rows from one."""
    row = [1]
    for i in range(1, n):
        row.append(row[-1] * (n - i) // i)
    return row


def binomial_row(n: int) -> list[int]:
    """Return the coefficients C(n, 0) through C(n, n)."""
    if n < 0:
        raise ValueError("n must not be negative")
    row = [1]
    for i in range(1, n + 1):
        row.append(row[-1] * (n - i + 1) // i)
    return row