import math

import pytest

from contestkit.number_theory import (
    add_one,
    coin_exchange,
    extended_gcd,
    is_ugly,
    linear_sieve,
    max_divide,
    nth_ugly_number,
    opposite_signs,
)


@pytest.mark.parametrize("a,b", [(30, 12), (12, 30), (7, 5), (0, 9), (100, 1), (17, 17)])
def test_extended_gcd_bezout(a, b):
    d, x, y = extended_gcd(a, b)
    assert d == math.gcd(a, b)
    assert a * x + b * y == d


def test_extended_gcd_zero_first():
    assert extended_gcd(0, 5) == (5, 0, 1)


@pytest.mark.parametrize("x", [0, 1, 5, 7, 15, 1023, -5, -2, 123456])
def test_add_one_matches_increment(x):
    assert add_one(x) == x + 1


def test_add_one_wraps():
    assert add_one(-1) == 0
    assert add_one(2**31 - 1) == -(2**31)


def test_add_one_rejects_large():
    with pytest.raises(ValueError):
        add_one(2**40)


@pytest.mark.parametrize(
    "x,y,expected",
    [(1, -1, True), (-3, 4, True), (3, 4, False), (-3, -4, False), (0, 5, False)],
)
def test_opposite_signs(x, y, expected):
    assert opposite_signs(x, y) is expected


def test_max_divide():
    assert max_divide(96, 2) == 3
    assert max_divide(7, 3) == 7
    with pytest.raises(ValueError):
        max_divide(0, 2)
    with pytest.raises(ValueError):
        max_divide(5, 1)


def test_is_ugly():
    assert is_ugly(1)
    assert is_ugly(2 * 3 * 5 * 5)
    assert not is_ugly(14)
    assert not is_ugly(0)


def test_nth_ugly_sequence_invariants():
    values = [nth_ugly_number(k) for k in range(1, 30)]
    assert values[0] == 1
    assert all(is_ugly(v) for v in values)
    assert values == sorted(set(values))
    for k, v in enumerate(values, start=1):
        assert sum(is_ugly(i) for i in range(1, v + 1)) == k


def test_linear_sieve_primes():
    primes = linear_sieve(100)
    assert len(primes) == 25
    assert primes[0] == 2 and primes[-1] == 97
    for p in primes:
        assert all(p % d for d in range(2, math.isqrt(p) + 1))


def test_linear_sieve_includes_limit_and_small():
    assert linear_sieve(1) == []
    assert linear_sieve(2) == [2]
    assert linear_sieve(97)[-1] == 97


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4])
def test_coin_exchange_small(n):
    assert coin_exchange(n) == n


def test_coin_exchange_splits_when_profitable():
    assert coin_exchange(12) == 13
    for n in range(0, 200):
        assert coin_exchange(n) >= n
    big = 10**9
    assert coin_exchange(big) == max(
        big, coin_exchange(big // 2) + coin_exchange(big // 3) + coin_exchange(big // 4)
    )


def test_coin_exchange_negative():
    with pytest.raises(ValueError):
        coin_exchange(-1)