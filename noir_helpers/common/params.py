"""
Prime Field Parameters.

This module describes the prime field that all circuit values live in.
Noir's default proving backend works over the BN254 scalar field:

    P = 21888242871839275222246405745257275088548364400416034343698204186575808495617

which is a 254-bit prime, so every field element fits in 32 bytes.

Key Parameters:
    - modulus: The prime P
    - max_bit_size: Longest allowed bit decomposition (254 for BN254)
    - max_exponent_bits: pow32 only accepts exponents below 2^32
    - max_radix / max_radix_length: Limits for radix decomposition

The modulus's own bit and byte patterns are exposed as lookup tables. They
are computed once per FieldParams and handed out as read-only numpy arrays,
so no caller can corrupt them for everybody else.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import cached_property
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class FieldParams:
    """
    Parameters of a prime field.

    Attributes:
        name: Identifier for this field (e.g., "bn254")
        modulus: The prime modulus. Primality is not checked.
        max_bit_size: Longest bit decomposition allowed. Defaults to the
                      bit length of the modulus.
        max_exponent_bits: Exponents must be below 2^max_exponent_bits
        max_radix: Largest radix accepted by radix decomposition
        max_radix_length: Largest digit count of a radix decomposition

    Example:
        >>> small = FieldParams(name="tiny", modulus=97)
        >>> small.num_bits, small.num_bytes
        (7, 1)
    """

    name: str
    modulus: int
    max_bit_size: Optional[int] = None
    max_exponent_bits: int = 32
    max_radix: int = 256
    max_radix_length: int = 256

    def __post_init__(self):
        """Validate configuration."""
        if self.modulus < 3 or self.modulus % 2 == 0:
            raise ValueError("modulus must be an odd prime")
        if self.max_bit_size is not None and self.max_bit_size < self.modulus.bit_length():
            raise ValueError(
                f"max_bit_size must be at least {self.modulus.bit_length()} "
                f"to cover the modulus"
            )
        if self.max_exponent_bits < 1:
            raise ValueError("max_exponent_bits must be at least 1")
        if self.max_radix < 2 or self.max_radix & (self.max_radix - 1):
            raise ValueError("max_radix must be a power of 2 and >= 2")
        if self.max_radix_length < 1:
            raise ValueError("max_radix_length must be at least 1")

    @property
    def num_bits(self) -> int:
        """Maximum number of bits of a field element."""
        if self.max_bit_size is None:
            return self.modulus.bit_length()
        return self.max_bit_size

    @property
    def num_bytes(self) -> int:
        """Byte length of the modulus."""
        return (self.modulus.bit_length() + 7) // 8

    @property
    def max_exponent(self) -> int:
        """Exclusive upper bound for pow32 exponents."""
        return 1 << self.max_exponent_bits

    # Lookup tables (built on first access, never mutated)

    @cached_property
    def mod_le_bits(self) -> np.ndarray:
        """Modulus bits, least significant first."""
        bits = [(self.modulus >> i) & 1 for i in range(self.num_bits)]
        return _frozen(bits)

    @cached_property
    def mod_be_bits(self) -> np.ndarray:
        """Modulus bits, most significant first."""
        return _frozen(self.mod_le_bits[::-1])

    @cached_property
    def mod_le_bytes(self) -> np.ndarray:
        """Modulus bytes, least significant first."""
        return _frozen(list(self.modulus.to_bytes(self.num_bytes, "little")))

    @cached_property
    def mod_be_bytes(self) -> np.ndarray:
        """Modulus bytes, most significant first."""
        return _frozen(list(self.modulus.to_bytes(self.num_bytes, "big")))

    def summary(self) -> str:
        """Return configuration summary string."""
        return (
            f"FieldParams '{self.name}':\n"
            f"  Modulus: {self.modulus}\n"
            f"  Modulus (hex): {hex(self.modulus)}\n"
            f"  Bits: {self.num_bits}  Bytes: {self.num_bytes}\n"
            f"  pow32 exponent limit: 2^{self.max_exponent_bits}\n"
            f"  Radix: power of 2 in [2, {self.max_radix}], "
            f"at most {self.max_radix_length} digits"
        )

    def __repr__(self) -> str:
        return f"FieldParams(name='{self.name}', bits={self.num_bits})"


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=np.uint8)
    arr.setflags(write=False)
    return arr


# =============================================================================
# PREDEFINED FIELDS
# =============================================================================

BN254_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617

BN254 = FieldParams(name="bn254", modulus=BN254_MODULUS, max_bit_size=254)
