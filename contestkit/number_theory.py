"""Small number-theory helpers."""

from __future__ import annotations

_INT32_MASK = 0xFFFFFFFF
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` with ``a*x + b*y == d`` where ``d`` is the gcd."""
    if a == 0:
        return b, 0, 1
    q = _trunc_div(b, a)
    d, x1, y1 = extended_gcd(b - q * a, a)
    return d, y1 - q * x1, x1


def add_one(x: int) -> int:
    """Add one to a 32-bit signed integer using only bit operations (wraps around)."""
    if not _INT32_MIN <= x <= _INT32_MAX:
        raise ValueError("value does not fit in a signed 32-bit integer")
    u = x & _INT32_MASK
    m = 1
    while u & m:
        u ^= m
        m = (m << 1) & _INT32_MASK
    u ^= m
    return u - (1 << 32) if u & (1 << 31) else u


def opposite_signs(x: int, y: int) -> bool:
    """Return True when ``x`` and ``y`` have opposite signs."""
    return (x ^ y) < 0


def max_divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` for as long as ``b`` divides it evenly."""
    if a == 0 or abs(b) <= 1:
        raise ValueError("a must be non-zero and |b| greater than one")
    while a % b == 0:
        a //= b
    return a


def is_ugly(n: int) -> bool:
    """Return True when the only prime factors of ``n`` are 2, 3 and 5."""
    if n <= 0:
        return False
    for p in (2, 3, 5):
        n = max_divide(n, p)
    return n == 1


def nth_ugly_number(n: int) -> int:
    """Return the ``n``-th ugly number, counting 1 as the first."""
    value, count = 1, 1
    while count < n:
        value += 1
        if is_ugly(value):
            count += 1
    return value


def linear_sieve(limit: int) -> list[int]:
    """Return all primes up to ``limit`` inclusive using a linear sieve."""
    if limit < 2:
        return []
    lowest = [0] * (limit + 1)
    primes: list[int] = []
    for i in range(2, limit + 1):
        if lowest[i] == 0:
            lowest[i] = i
            primes.append(i)
        for p in primes:
            if p > lowest[i] or i * p > limit:
                break
            lowest[i * p] = p
    return primes


def coin_exchange(n: int) -> int:
    """Best value for a coin ``n`` that may be split into n//2, n//3 and n//4."""
    if n < 0:
        raise ValueError("coin value must be non-negative")
    memo: dict[int, int] = {}

    def solve(k: int) -> int:
        if k <= 4:
            return k
        if k not in memo:
            memo[k] = max(k, solve(k // 2) + solve(k // 3) + solve(k // 4))
        return memo[k]

    return solve(n)