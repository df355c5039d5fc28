"""Answers to small grid puzzles."""

from __future__ import annotations

from collections.abc import Sequence


def moves_to_center(matrix: Sequence[Sequence[int]]) -> int:
    """Adjacent row or column swaps needed to move the single 1 of a 5x5
    matrix to its centre."""
    rows = [list(row) for row in matrix]
    if len(rows) != 5 or any(len(row) != 5 for row in rows):
        raise ValueError("matrix must be 5x5")
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            if value == 1:
                return abs(2 - i) + abs(2 - j)
    raise ValueError("matrix holds no 1")


def can_paint_square(grid: Sequence[str | Sequence[str]]) -> bool:
    """True when a 4x4 grid of ``.`` and ``#`` has, or can get by repainting
    at most one cell, a 2x2 square of one colour."""
    rows = ["".join(row) for row in grid]
    if len(rows) != 4 or any(len(row) != 4 for row in rows):
        raise ValueError("grid must be 4x4")
    if any(set(row) - {".", "#"} for row in rows):
        raise ValueError("grid cells must be '.' or '#'")
    for top, bottom in zip(rows, rows[1:]):
        for j in range(3):
            block = top[j : j + 2] + bottom[j : j + 2]
            if block.count("#") != 2:
                return True
    return False