"""Modular inverse via the extended Euclidean algorithm.

This is the only place where invertibility is decided.  A missing
inverse is an ordinary outcome and is returned as ``None``.
"""

from __future__ import annotations

from typing import Optional

from modarith.arith.egcd import extended_gcd
from modarith.numeric import I, check_modulus, mod_floor, one_of


def mod_inverse(a: I, m: I) -> Optional[I]:
    """Return ``r`` in ``[0, m)`` with ``a*r ≡ 1 (mod m)``, or ``None``.

    ``None`` means ``gcd(a, m) != 1``; this includes ``a ≡ 0`` for ``m > 1``.
    """
    check_modulus(m)
    g, x, _ = extended_gcd(mod_floor(a, m), m)
    if g != one_of(m):
        return None
    # x may be negative
    return mod_floor(x, m)


def has_inverse(a: I, m: I) -> bool:
    return mod_inverse(a, m) is not None
