"""Contract-violation errors.

These signal bugs at the call site (a non-positive modulus, residues of
different moduli combined).  Mathematical absence, such as a value with
no modular inverse, is never an exception: it is returned as ``None``.
"""

from __future__ import annotations


class ContractViolation(ValueError):
    """Raised when a caller breaks a precondition of the engine."""


class InvalidModulusError(ContractViolation):
    """Raised when a modulus is not strictly positive."""

    def __init__(self, modulus) -> None:
        self.modulus = modulus
        super().__init__(f"Modulus must be positive, got {modulus}")


class ModulusMismatchError(ContractViolation):
    """Raised when a binary operator receives residues of different moduli."""

    def __init__(self, left, right) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Moduli differ: {left} != {right}")
