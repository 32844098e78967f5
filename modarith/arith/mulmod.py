"""Modular multiplication and the helpers built on it.

``mul_mod`` is kept apart from a plain multiply-then-reduce because a
fixed-width backend can overflow on the raw product.  Strategies:

  native    – ``(a % m) * (b % m) % m``; right for unbounded ``int``
  widening  – multiply in a type of twice the width, then narrow back
  binary    – double-and-add with an overflow-free ``add_mod``; every
              intermediate stays below ``m``
  auto      – ``native`` for unbounded types, ``binary`` for bounded ones

The default is ``auto``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from modarith.arith.inverse import mod_inverse
from modarith.numeric import I, check_modulus, is_bounded, mod_floor, one_of, zero_of


class MulModStrategy(str, Enum):
    AUTO = "auto"
    NATIVE = "native"
    WIDENING = "widening"
    BINARY = "binary"


def add_mod(a: I, b: I, m: I) -> I:
    """``(a + b) mod m`` without any intermediate exceeding ``m``."""
    a = mod_floor(a, m)
    b = mod_floor(b, m)
    gap = m - b
    if a < gap:
        return a + b
    return a - gap


def _mul_native(a: I, b: I, m: I) -> I:
    return mod_floor(mod_floor(a, m) * mod_floor(b, m), m)


def _mul_widening(a: I, b: I, m: I) -> I:
    if not hasattr(m, "widen"):
        # Unbounded integers are already as wide as they need to be.
        return _mul_native(a, b, m)
    wm = m.widen()
    product = mod_floor(mod_floor(a, m).widen() * mod_floor(b, m).widen(), wm)
    return product.narrow(type(m))


def _mul_binary(a: I, b: I, m: I) -> I:
    zero = zero_of(m)
    two = one_of(m) + one_of(m)
    a = mod_floor(a, m)
    b = mod_floor(b, m)
    result = zero
    while b != zero:
        if b % two != zero:
            result = add_mod(result, a, m)
        a = add_mod(a, a, m)
        b = b // two
    return result


_STRATEGIES = {
    MulModStrategy.NATIVE: _mul_native,
    MulModStrategy.WIDENING: _mul_widening,
    MulModStrategy.BINARY: _mul_binary,
}


def resolve_strategy(
    m, strategy: Union[MulModStrategy, str, None] = None
) -> MulModStrategy:
    """Turn *strategy* (``auto`` when omitted) into a concrete strategy for *m*'s type."""
    chosen = MulModStrategy(strategy or MulModStrategy.AUTO)
    if chosen is MulModStrategy.AUTO:
        return MulModStrategy.BINARY if is_bounded(m) else MulModStrategy.NATIVE
    return chosen


def mul_mod(a: I, b: I, m: I, strategy: Union[MulModStrategy, str, None] = None) -> I:
    """Return ``(a * b) mod m`` in ``[0, m)``."""
    check_modulus(m)
    return _STRATEGIES[resolve_strategy(m, strategy)](a, b, m)


def pow_mod(
    base: I, exponent: int, m: I, strategy: Union[MulModStrategy, str, None] = None
) -> Optional[I]:
    """Square-and-multiply over ``mul_mod``.

    A negative *exponent* inverts *base* first; if *base* has no inverse
    the result is ``None``.
    """
    check_modulus(m)
    exponent = int(exponent)
    if exponent < 0:
        inv = mod_inverse(base, m)
        if inv is None:
            return None
        base, exponent = inv, -exponent

    result = mod_floor(one_of(m), m)
    base = mod_floor(base, m)
    while exponent:
        if exponent & 1:
            result = mul_mod(result, base, m, strategy)
        base = mul_mod(base, base, m, strategy)
        exponent >>= 1
    return result
