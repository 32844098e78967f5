"""Tests for the extended Euclidean algorithm."""

import math
import random

import pytest

from modarith.arith.egcd import Bezout, extended_gcd, gcd
from modarith.arith.fixed import Int32, Int64


def _check(a, b):
    g, x, y = extended_gcd(a, b)
    assert g >= 0
    assert a * x + b * y == g
    return g


def test_basic():
    assert _check(240, 46) == 2


def test_returns_bezout_triple():
    result = extended_gcd(633, 2801)
    assert isinstance(result, Bezout)
    assert result.gcd == 1
    assert 633 * result.x + 2801 * result.y == 1


def test_zero_operands():
    assert _check(12, 0) == 12
    assert _check(0, 12) == 12
    assert _check(-12, 0) == 12
    assert _check(0, -12) == 12


def test_both_zero_rejected():
    with pytest.raises(ValueError):
        extended_gcd(0, 0)


def test_negative_operands():
    assert _check(-4, 6) == 2
    assert _check(4, -6) == 2
    assert _check(-4, -6) == 2


def test_coprime_large():
    assert _check(2983498573497, 903455098240) == 1
    assert _check(60192921923322822, 427414198414469) == 1


def test_matches_math_gcd():
    rng = random.Random(0)
    for _ in range(200):
        a = rng.randint(-10**30, 10**30)
        b = rng.randint(-10**30, 10**30)
        if a == 0 and b == 0:
            continue
        assert _check(a, b) == math.gcd(a, b)


def test_gcd_helper():
    assert gcd(8, 12) == 4
    assert gcd(17, 5) == 1


def test_fixed_width_backend():
    g, x, y = extended_gcd(Int64(240), Int64(46))
    assert isinstance(g, Int64)
    assert g == 2
    assert Int64(240) * x + Int64(46) * y == g


def test_fixed_width_min_operand():
    g, x, y = extended_gcd(Int64(Int64.MIN), Int64(-1))
    assert g == 1
    assert Int64.MIN * int(x) + -1 * int(y) == 1


@pytest.mark.parametrize("cls", [Int32, Int64])
def test_fixed_width_range_edges(cls):
    edges = [cls.MIN, cls.MIN + 1, cls.MAX, -1]
    for a in edges:
        for b in edges:
            expected = math.gcd(a, b)
            if expected > cls.MAX:
                # gcd(MIN, MIN) = 2**(BITS-1) is not representable
                with pytest.raises(OverflowError):
                    extended_gcd(cls(a), cls(b))
                continue
            g, x, y = extended_gcd(cls(a), cls(b))
            assert isinstance(g, cls)
            assert g == expected
            assert a * int(x) + b * int(y) == expected
