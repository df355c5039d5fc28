"""N-queens enumeration by backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement as a tuple of 1-based columns, one per row."""
    if n < 0:
        raise ValueError("board size must be non-negative")
    columns: set[int] = set()
    sums: set[int] = set()
    diffs: set[int] = set()
    placed: list[int] = []

    def place(row: int) -> Iterator[tuple[int, ...]]:
        if row == n + 1:
            yield tuple(placed)
            return
        for col in range(1, n + 1):
            if col in columns or col + row in sums or col - row in diffs:
                continue
            columns.add(col)
            sums.add(col + row)
            diffs.add(col - row)
            placed.append(col)
            yield from place(row + 1)
            placed.pop()
            columns.discard(col)
            sums.discard(col + row)
            diffs.discard(col - row)

    yield from place(1)


def format_solution(solution: Sequence[int]) -> str:
    """Render a placement as ``(row,column) : (1,c1)(2,c2)...``."""
    cells = "".join(f"({row},{col})" for row, col in enumerate(solution, start=1))
    return f"(row,column) : {cells}"