"""Counting and case-analysis answers to short contest problems."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import accumulate, chain


def command_probability(sent: str, received: str) -> float:
    """Probability that the received commands, with each ``?`` chosen by a fair
    coin, end at the same position as the sent ones.

    ``sent`` holds ``+`` and ``-``; ``received`` also holds ``?`` for
    commands that were not recognised.
    """
    if len(sent) != len(received):
        raise ValueError("sent and received commands must have the same length")
    if set(sent) - {"+", "-"}:
        raise ValueError("sent commands may only contain '+' and '-'")
    if set(received) - {"+", "-", "?"}:
        raise ValueError("received commands may only contain '+', '-' and '?'")
    plus = sent.count("+") - received.count("+")
    minus = sent.count("-") - received.count("-")
    if plus < 0 or minus < 0:
        return 0.0
    unknown = plus + minus
    return math.comb(unknown, plus) / 2**unknown


def cupcakes_happy(tastiness: Sequence[int]) -> bool:
    """True when every proper contiguous segment sums to less than the whole.

    It is enough to check the prefixes and the suffixes that leave at least
    one element out.
    """
    values = list(tastiness)
    if not values:
        raise ValueError("at least one cupcake is required")
    total = sum(values)
    prefixes = accumulate(values[:-1])
    suffixes = accumulate(reversed(values[1:]))
    return all(partial < total for partial in chain(prefixes, suffixes))


def candy_days(r: int, g: int, b: int) -> int:
    """Most days one can eat two candies of different colours each day."""
    if min(r, g, b) < 0:
        raise ValueError("candy counts must be non-negative")
    total = r + g + b
    return min(total // 2, total - max(r, g, b))


def tokens_saved(tokens: Iterable[int], a: int, b: int) -> list[int]:
    """Tokens kept each day when ``w`` tokens buy ``floor(w*a/b)`` dollars and
    the most money must still be earned."""
    if a <= 0 or b <= 0:
        raise ValueError("a and b must be positive")
    saved = []
    for x in tokens:
        if x < 0:
            raise ValueError("token counts must be non-negative")
        saved.append(((a * x) % b) // a)
    return saved


def _is_beautiful(number: str) -> bool:
    return number[0] <= "1" and set(number[1:]) <= {"0"}


def tanks_product(numbers: Iterable[str | int]) -> str:
    """Product of numbers of which all but at most one are a power of ten.

    The result is written as a decimal string; a single ``0`` makes it ``"0"``.
    """
    result = "1"
    zeroes = 0
    for raw in numbers:
        number = str(raw)
        if not number.isdigit():
            raise ValueError(f"not a non-negative decimal number: {raw!r}")
        if number == "0":
            return "0"
        if _is_beautiful(number):
            zeroes += len(number) - 1
        else:
            result = number
    return result + "0" * zeroes


def taxi_count(groups: Iterable[int]) -> int:
    """Fewest four-seat taxis for groups of 1 to 4 children that must ride together."""
    counts = {size: 0 for size in range(1, 5)}
    for group in groups:
        if group not in counts:
            raise ValueError(f"group size must be between 1 and 4, got {group}")
        counts[group] += 1

    taxis = counts[4] + counts[3]
    singles = max(0, counts[1] - counts[3])
    pairs, odd_pair = divmod(counts[2], 2)
    taxis += pairs
    if odd_pair:
        taxis += 1
        singles = max(0, singles - 2)
    taxis += -(-singles // 4)
    return taxis


def triangle_minutes(a: int, b: int, c: int) -> int:
    """Fewest unit lengthenings that make three sticks form a proper triangle."""
    if min(a, b, c) <= 0:
        raise ValueError("stick lengths must be positive")
    longest = max(a, b, c)
    others = a + b + c - longest
    return max(0, longest - (others - 1))