"""Residue classes modulo m.

A ``Residue`` denotes the equivalence class of ``value`` modulo
``modulus`` and always stores its canonical member in ``[0, modulus)``.
Instances are immutable; every operation returns a fresh residue.

Binary operations require both operands to share a modulus.  Combining
residues of different moduli raises ``ModulusMismatchError``.  A missing
inverse is not an error: ``inverse`` and ``div`` return ``None``.

    >>> x = Residue(633, 2801)
    >>> x.inverse()
    Residue(value=177, modulus=2801)
    >>> x * x.inverse() == Residue.one(2801)
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from modarith.arith.fixed import FixedInt
from modarith.arith.inverse import mod_inverse
from modarith.arith.mulmod import add_mod, mul_mod, pow_mod
from modarith.errors import ModulusMismatchError
from modarith.numeric import check_modulus, mod_floor


@dataclass(frozen=True)
class Residue:
    value: Any
    modulus: Any

    def __post_init__(self) -> None:
        if not _is_integer(self.modulus):
            raise TypeError(f"modulus must be an integer, got {type(self.modulus).__name__}")
        m = check_modulus(self.modulus)
        v = self.value
        if isinstance(v, bool) or not isinstance(v, (int, type(m))):
            raise TypeError(f"value must be int or {type(m).__name__}, got {type(v).__name__}")
        if not isinstance(v, type(m)):
            # plain int lifted into the modulus' fixed-width type
            v = type(m)(v)
        object.__setattr__(self, "value", mod_floor(v, m))

    # ---- identities ----

    @classmethod
    def zero(cls, modulus) -> "Residue":
        """Additive identity ``0 mod modulus``."""
        return cls(type(modulus)(0), modulus)

    @classmethod
    def one(cls, modulus) -> "Residue":
        """Multiplicative identity ``1 mod modulus`` (``0`` when modulus is 1)."""
        return cls(type(modulus)(1), modulus)

    # ---- accessors ----

    def unwrap(self):
        """The canonical representative, in the modulus' integer type."""
        return self.value

    def __int__(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return f"{self.value} (mod {self.modulus})"

    # ---- inversion ----

    def inverse(self) -> Optional["Residue"]:
        """Multiplicative inverse, or ``None`` if ``gcd(value, modulus) != 1``."""
        inv = mod_inverse(self.value, self.modulus)
        if inv is None:
            return None
        return Residue(inv, self.modulus)

    def has_inverse(self) -> bool:
        return self.inverse() is not None

    def div(self, other: "Residue") -> Optional["Residue"]:
        """``self * other⁻¹``, or ``None`` if *other* is not invertible."""
        _check_same_modulus(self, other)
        inv = other.inverse()
        if inv is None:
            return None
        return self * inv

    # ---- operators ----

    def __add__(self, other):
        if not isinstance(other, Residue):
            return NotImplemented
        _check_same_modulus(self, other)
        return Residue(add_mod(self.value, other.value, self.modulus), self.modulus)

    def __sub__(self, other):
        if not isinstance(other, Residue):
            return NotImplemented
        _check_same_modulus(self, other)
        return Residue(mod_floor(self.value - other.value, self.modulus), self.modulus)

    def __mul__(self, other):
        if not isinstance(other, Residue):
            return NotImplemented
        _check_same_modulus(self, other)
        return Residue(mul_mod(self.value, other.value, self.modulus), self.modulus)

    def __neg__(self):
        return Residue(mod_floor(-self.value, self.modulus), self.modulus)

    def __truediv__(self, other):
        if not isinstance(other, Residue):
            return NotImplemented
        result = self.div(other)
        if result is None:
            raise ZeroDivisionError(f"{other.value} has no inverse modulo {other.modulus}")
        return result

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        result = pow_mod(self.value, exponent, self.modulus)
        if result is None:
            raise ZeroDivisionError(f"{self.value} has no inverse modulo {self.modulus}")
        return Residue(result, self.modulus)


def _is_integer(n) -> bool:
    return isinstance(n, FixedInt) or (isinstance(n, int) and not isinstance(n, bool))


def _check_same_modulus(x: Residue, y: Residue) -> None:
    if x.modulus != y.modulus:
        raise ModulusMismatchError(x.modulus, y.modulus)


# ---------------------------------------------------------------------------
# Functional API
# ---------------------------------------------------------------------------


def _require(x) -> Residue:
    if not isinstance(x, Residue):
        raise TypeError(f"expected Residue, got {type(x).__name__}")
    return x


def add(x: Residue, y: Residue) -> Residue:
    return _require(x) + _require(y)


def sub(x: Residue, y: Residue) -> Residue:
    return _require(x) - _require(y)


def mul(x: Residue, y: Residue) -> Residue:
    return _require(x) * _require(y)


def neg(x: Residue) -> Residue:
    return -_require(x)


def inverse(x: Residue) -> Optional[Residue]:
    return _require(x).inverse()


def has_inverse(x: Residue) -> bool:
    return _require(x).has_inverse()


def zero(modulus) -> Residue:
    return Residue.zero(modulus)


def one(modulus) -> Residue:
    return Residue.one(modulus)
