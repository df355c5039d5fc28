"""Greedy answers to short contest problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def burglar_matches(capacity: int, containers: Iterable[tuple[int, int]]) -> int:
    """Most matches that fit in ``capacity`` boxes.

    ``containers`` holds ``(boxes, matches_per_box)`` pairs; the fullest
    boxes are taken first.
    """
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    total = 0
    for boxes, per_box in sorted(containers, key=lambda c: (c[1], c[0]), reverse=True):
        if capacity == 0:
            break
        taken = min(boxes, capacity)
        total += taken * per_box
        capacity -= taken
    return total


def burglar_matches_by_count(capacity: int, containers: Iterable[tuple[int, int]]) -> int:
    """Same answer as :func:`burglar_matches`, taking whole containers until one
    no longer fits and then filling the rest from it."""
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    total = 0
    ordered = sorted(containers, key=lambda c: (c[1], c[0]), reverse=True)
    for boxes, per_box in ordered:
        if boxes > capacity:
            total += per_box * capacity
            break
        total += boxes * per_box
        capacity -= boxes
    return total


def min_max_digits(length: int, digit_sum: int) -> tuple[str, str]:
    """Smallest and largest ``length``-digit numbers whose digits add to ``digit_sum``.

    When no such number exists both are ``"-1"``.
    """
    if length < 0 or digit_sum < 0:
        raise ValueError("length and digit sum must be non-negative")
    if digit_sum == 0 and length == 1:
        return "0", "0"
    if digit_sum == 0 or digit_sum > 9 * length:
        return "-1", "-1"

    largest: list[int] = []
    remaining = digit_sum
    for _ in range(length):
        digit = min(9, remaining)
        largest.append(digit)
        remaining -= digit

    smallest = largest[::-1]
    if smallest[0] == 0:
        first_nonzero = next(k for k, d in enumerate(smallest) if d)
        smallest[first_nonzero] -= 1
        smallest[0] = 1

    return "".join(map(str, smallest)), "".join(map(str, largest))


def max_ones_after_flip(bits: Sequence[int]) -> int:
    """Most ones obtainable after flipping exactly one non-empty segment."""
    if not bits:
        raise ValueError("at least one bit is required")
    ones = 0
    current = best = -1
    for bit in bits:
        if bit not in (0, 1):
            raise ValueError(f"bits must be 0 or 1, got {bit!r}")
        if bit:
            ones += 1
            current = max(current - 1, -1)
        else:
            current = max(1, current + 1)
        best = max(best, current)
    return ones + best