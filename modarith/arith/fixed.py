"""Fixed-width signed integer backend.

``FixedInt`` subclasses behave like Python ints restricted to
``[-2**(BITS-1), 2**(BITS-1) - 1]``.  Any result outside that range
raises ``OverflowError``; nothing ever wraps around silently.  Division
and remainder are floored, matching Python's ``int``.

Use ``fixed_width(bits)`` to obtain the class for a given width, or one
of the predefined ``Int32`` / ``Int64`` / ``Int128``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Type, Union


class FixedInt:
    """Base class; concrete widths are created by ``fixed_width``."""

    BITS: int
    MIN: int
    MAX: int

    __slots__ = ("_v",)

    def __init__(self, value: Union[int, "FixedInt"] = 0) -> None:
        v = int(value)
        cls = type(self)
        if v < cls.MIN or v > cls.MAX:
            raise OverflowError(f"{v} does not fit in {cls.__name__}")
        self._v = v

    # ---- coercion ----

    def _c(self, other) -> int:
        if isinstance(other, type(self)):
            return other._v
        if isinstance(other, int) and not isinstance(other, bool):
            return type(self)(other)._v
        raise TypeError(f"expected {type(self).__name__} or int, got {type(other).__name__}")

    def _wrap(self, v: int) -> "FixedInt":
        return type(self)(v)

    # ---- arithmetic ----

    def __add__(self, other):
        return self._wrap(self._v + self._c(other))

    def __radd__(self, other):
        return self._wrap(self._c(other) + self._v)

    def __sub__(self, other):
        return self._wrap(self._v - self._c(other))

    def __rsub__(self, other):
        return self._wrap(self._c(other) - self._v)

    def __mul__(self, other):
        return self._wrap(self._v * self._c(other))

    def __rmul__(self, other):
        return self._wrap(self._c(other) * self._v)

    def __floordiv__(self, other):
        return self._wrap(self._v // self._c(other))

    def __mod__(self, other):
        return self._wrap(self._v % self._c(other))

    def __neg__(self):
        return self._wrap(-self._v)

    def __abs__(self):
        return self._wrap(abs(self._v))

    # ---- comparison ----

    def __eq__(self, other):
        if isinstance(other, FixedInt):
            return self._v == other._v
        if isinstance(other, int):
            return self._v == other
        return NotImplemented

    def __lt__(self, other):
        return self._v < self._c(other)

    def __le__(self, other):
        return self._v <= self._c(other)

    def __gt__(self, other):
        return self._v > self._c(other)

    def __ge__(self, other):
        return self._v >= self._c(other)

    def __hash__(self):
        return hash(self._v)

    # ---- conversion ----

    def __int__(self):
        return self._v

    def __bool__(self):
        return self._v != 0

    def __repr__(self):
        return f"{type(self).__name__}({self._v})"

    def widen(self) -> "FixedInt":
        """Same value in the type of twice this width."""
        return fixed_width(2 * type(self).BITS)(self._v)

    def narrow(self, cls: Type["FixedInt"]) -> "FixedInt":
        """Same value in *cls*; raises ``OverflowError`` if it does not fit."""
        return cls(self._v)


@lru_cache(maxsize=None)
def fixed_width(bits: int) -> Type[FixedInt]:
    """Return the ``FixedInt`` subclass for *bits*-wide signed integers."""
    if bits < 2:
        raise ValueError(f"Width must be at least 2 bits, got {bits}")
    return type(
        f"Int{bits}",
        (FixedInt,),
        {
            "__slots__": (),
            "BITS": bits,
            "MIN": -(1 << (bits - 1)),
            "MAX": (1 << (bits - 1)) - 1,
        },
    )


Int32 = fixed_width(32)
Int64 = fixed_width(64)
Int128 = fixed_width(128)
