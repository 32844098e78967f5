"""Tests for the modular inverse."""

import math
import random

import pytest

from modarith.arith.fixed import Int32, Int64
from modarith.arith.inverse import has_inverse, mod_inverse
from modarith.errors import InvalidModulusError

# (a, modulus, inverse)
KNOWN_INVERSES = [
    (633, 2801, 177),
    (271, 383, 106),
    (2983498573497, 903455098240, 515317423113),
    (60192921923322822, 427414198414469, 368992488398249),
]


@pytest.mark.parametrize("a,m,expected", KNOWN_INVERSES)
def test_known_inverses(a, m, expected):
    assert math.gcd(a, m) == 1
    assert mod_inverse(a, m) == expected
    assert (a * expected) % m == 1


def test_non_invertible():
    assert mod_inverse(4, 8) is None
    assert not has_inverse(4, 8)


def test_zero_has_no_inverse():
    assert mod_inverse(0, 7) is None


def test_negative_value_is_canonicalized():
    r = mod_inverse(-3, 7)
    assert 0 <= r < 7
    assert (-3 * r) % 7 == 1


def test_modulus_one():
    # Everything is congruent to 0 and 0 * 0 ≡ 1 (mod 1).
    assert mod_inverse(5, 1) == 0


def test_result_in_range_random():
    rng = random.Random(1)
    for _ in range(300):
        m = rng.randint(2, 10**20)
        a = rng.randint(-10**20, 10**20)
        r = mod_inverse(a, m)
        if math.gcd(a, m) == 1:
            assert 0 <= r < m
            assert (a * r) % m == 1
        else:
            assert r is None


@pytest.mark.parametrize("m", [0, -7])
def test_invalid_modulus(m):
    with pytest.raises(InvalidModulusError):
        mod_inverse(3, m)


def test_fixed_width_backend():
    r = mod_inverse(Int64(633), Int64(2801))
    assert isinstance(r, Int64)
    assert r == 177


def test_fixed_width_min_value():
    # -2**63 ≡ 1 (mod 3)
    assert mod_inverse(Int64(Int64.MIN), Int64(3)) == 1


@pytest.mark.parametrize("cls", [Int32, Int64])
def test_fixed_width_range_edges(cls):
    for m in (cls.MAX, 3, 1000):
        for a in (cls.MIN, cls.MIN + 1, cls.MAX, -1):
            r = mod_inverse(cls(a), cls(m))
            if math.gcd(a, m) == 1:
                assert r == pow(a, -1, m)
            else:
                assert r is None
