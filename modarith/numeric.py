"""Integer capability contract.

The engine never assumes a concrete integer representation.  Anything
that behaves like ``Integer`` below works: Python ``int`` natively, or
``modarith.arith.fixed.FixedInt`` for a fixed-width signed backend.

Required: ``+ - *``, unary ``-``, ``==``, ``<``, and floored ``//`` / ``%``
(the remainder is non-negative whenever the divisor is positive).
Identities are built from the operand's own type: ``type(a)(0)`` and
``type(a)(1)``.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

from modarith.errors import InvalidModulusError


class Integer(Protocol):
    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def __neg__(self): ...

    def __floordiv__(self, other): ...

    def __mod__(self, other): ...

    def __eq__(self, other) -> bool: ...

    def __lt__(self, other) -> bool: ...


I = TypeVar("I", bound=Integer)


def zero_of(a: I) -> I:
    """Additive identity of *a*'s type."""
    return type(a)(0)


def one_of(a: I) -> I:
    """Multiplicative identity of *a*'s type."""
    return type(a)(1)


def is_bounded(a) -> bool:
    """True for fixed-width backends (types that declare ``BITS``)."""
    return hasattr(type(a), "BITS")


def check_modulus(m: I) -> I:
    """Return *m* unchanged, or raise if it is not strictly positive."""
    if not zero_of(m) < m:
        raise InvalidModulusError(m)
    return m


def mod_floor(a: I, m: I) -> I:
    """Reduce *a* into ``[0, m)`` using floored remainder."""
    return a % m
