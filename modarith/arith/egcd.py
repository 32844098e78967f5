"""Extended Euclidean algorithm.

API
---
extended_gcd(a, b)  -> Bezout(gcd, x, y)  with  a*x + b*y == gcd >= 0
gcd(a, b)           -> gcd only

Works over any ``modarith.numeric.Integer``.  Fixed-width operands are
widened to twice their width for the loop, so intermediates never
overflow; ``OverflowError`` is raised only when the final gcd or a
coefficient does not fit the operand type.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from modarith.numeric import I, is_bounded, one_of, zero_of


class Bezout(NamedTuple):
    """Result of ``extended_gcd``: ``a*x + b*y == gcd``."""

    gcd: Any
    x: Any
    y: Any


def _euclid(a, b) -> Bezout:
    zero = zero_of(a)
    # Invariants: a*old_x + b*old_y == old_r  and  a*x + b*y == r
    old_r, r = a, b
    old_x, x = one_of(a), zero
    old_y, y = zero, one_of(a)
    while r != zero:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y

    # Floored division can leave the last non-zero remainder negative.
    if old_r < zero:
        return Bezout(-old_r, -old_x, -old_y)
    return Bezout(old_r, old_x, old_y)


def extended_gcd(a: I, b: I) -> Bezout:
    """Return ``(g, x, y)`` with ``g = gcd(|a|, |b|)`` and ``a*x + b*y = g``.

    The coefficients satisfy Bézout's identity exactly but are not
    guaranteed to be the minimal pair.  At least one of *a*, *b* must be
    non-zero.
    """
    zero = zero_of(a)
    if a == zero and b == zero:
        raise ValueError("gcd(0, 0) is undefined")

    if not is_bounded(a):
        return _euclid(a, b)

    # Quotient-coefficient products need up to twice the operand width.
    cls = type(a)
    g, x, y = _euclid(a.widen(), b.widen())
    return Bezout(g.narrow(cls), x.narrow(cls), y.narrow(cls))


def gcd(a: I, b: I) -> I:
    """Greatest common divisor of *a* and *b* (non-negative)."""
    return extended_gcd(a, b).gcd
