"""A stack that reports its minimum in constant time."""

from __future__ import annotations

from collections.abc import Iterable


class MinStack:
    """Stack of values, each stored with the minimum at the time it was pushed."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def push(self, value: int) -> None:
        current = value if not self._items else min(value, self._items[-1][1])
        self._items.append((value, current))

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()[0]

    def top(self) -> int:
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def minimum(self) -> int:
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]

    def __len__(self) -> int:
        return len(self._items)


def minimum_until_negative(values: Iterable[int]) -> int:
    """Push values until a negative one appears and return the stack minimum."""
    stack = MinStack()
    for value in values:
        if value < 0:
            break
        stack.push(value)
    if not stack:
        raise ValueError("no non-negative values before the terminator")
    return stack.minimum()