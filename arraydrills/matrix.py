"""Matrix drills: zeroing rows and columns, rotation and spiral filling."""

from __future__ import annotations

from typing import Iterator, Sequence


def _rows(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return rows


def set_matrix_zeroes(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy in which every row and column holding a zero is filled with zeros."""
    rows = _rows(matrix)
    zero_rows = {i for i, row in enumerate(rows) if 0 in row}
    zero_cols = {j for row in rows for j, value in enumerate(row) if value == 0}
    return [
        [0 if i in zero_rows or j in zero_cols else value for j, value in enumerate(row)]
        for i, row in enumerate(rows)
    ]


def rotate_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a square matrix rotated a quarter turn clockwise."""
    rows = _rows(matrix)
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return [list(column) for column in zip(*reversed(rows))]


def _spiral_order(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    """Yield cell coordinates in clockwise spiral order from the top-left corner."""
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        for j in range(left, right + 1):
            yield top, j
        top += 1
        for i in range(top, bottom + 1):
            yield i, right
        right -= 1
        if top <= bottom:
            for j in range(right, left - 1, -1):
                yield bottom, j
            bottom -= 1
        if left <= right:
            for i in range(bottom, top - 1, -1):
                yield i, left
            left += 1


def spiral_matrix(rows: int, cols: int) -> list[list[int]]:
    """Return a rows x cols grid filled with 1, 2, ... along a clockwise spiral."""
    if rows < 0 or cols < 0:
        raise ValueError("dimensions must not be negative")
    grid = [[0] * cols for _ in range(rows)]
    for number, (i, j) in enumerate(_spiral_order(rows, cols), start=1):
        grid[i][j] = number
    return grid