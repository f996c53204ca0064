"""
Finite Field Arithmetic for Noir Circuit Inputs.

This module implements modular arithmetic over the BN254 scalar field, the
field that Noir's default proving backend (Barretenberg, Grumpkin curve)
uses for every ``Field`` value.

Key Concepts:
    - All arithmetic is done modulo a prime p
    - Addition: (a + b) mod p
    - Multiplication: (a * b) mod p
    - Subtraction: (a - b + p) mod p (to keep positive)
    - Division: a * b^(-1) mod p (multiply by modular inverse)
    - Inversion: Find b such that a * b = 1 mod p (extended Euclid)

Input values are reduced into [0, p): a value at or above the modulus, or a
negative value, is accepted and mapped to its canonical residue.

Decompositions:
    - Bits and bytes, in little- and big-endian order
    - Digits in a power-of-two radix, whose minimum length is rounded up to
      the next power of two (Noir's to_radix requires this)

Example:
    >>> a = FieldElement(300)
    >>> a.to_le_bits(9)
    [0, 0, 1, 1, 0, 1, 0, 0, 1]
    >>> (a + 1).to_hex()
    '0x12d'
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import ClassVar, List, Sequence, Union
import operator
import re

import numpy as np

from .errors import (
    BitSizeExceeded,
    DivisionByZero,
    ExponentTooLarge,
    InvalidInput,
    InvalidRadix,
    LengthOutOfRange,
    ModuloByZero,
    NegativeExponent,
    NotInvertible,
)
from .kinds import DataKind
from .params import BN254, FieldParams

FieldInput = Union["FieldElement", int, str, float]

_DECIMAL_RE = re.compile(r"-?[0-9]+")
_HEX_RE = re.compile(r"-?0x[0-9a-fA-F]+")


def parse_integer(value: object) -> int:
    """
    Parse a circuit input into a Python integer.

    Accepted forms:
        - int (bool is rejected), or anything implementing __index__
        - float with no fractional part
        - decimal string, optionally signed: "42", "-7"
        - 0x-prefixed hexadecimal string, optionally signed: "0x2a", "-0x2a"
        - FieldElement (its canonical residue)

    Raises:
        InvalidInput: If the value is not an integer in one of these forms
    """
    if isinstance(value, FieldElement):
        return value.value
    if isinstance(value, (bool, np.bool_)):
        raise InvalidInput("Field input must be an integer, got a boolean")
    if isinstance(value, str):
        if _DECIMAL_RE.fullmatch(value):
            return int(value, 10)
        if _HEX_RE.fullmatch(value):
            return int(value, 16)
        raise InvalidInput(f"String must be a decimal or hexadecimal number: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidInput(f"Field input must be an integer, got {value!r}")
        return int(value)
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidInput(
            f"Unsupported field input type: {type(value).__name__}"
        ) from None


@dataclass(frozen=True, eq=False)
class FieldElement:
    """
    An element of the prime field Z_p.

    This class represents a single value in modular arithmetic. Instances
    are immutable: every operation returns a new element.

    Attributes:
        value: The canonical integer value (always in range [0, p-1])
        params: Class-level FieldParams (BN254 unless built via for_params)

    Example:
        >>> a = FieldElement("0x2a")
        >>> b = FieldElement(58)
        >>> print(a + b)
        100
    """
    value: int
    params: ClassVar[FieldParams] = BN254
    data_kind: ClassVar[DataKind] = DataKind.FIELD

    def __post_init__(self):
        """Parse the input and reduce it modulo p."""
        object.__setattr__(self, "value", parse_integer(self.value) % self.params.modulus)

    @classmethod
    def for_params(cls, params: FieldParams) -> type:
        """
        Return the FieldElement class bound to another prime field.

        The returned class is cached per FieldParams, so repeated calls give
        the same class and its elements compare equal.
        """
        if params == FieldElement.params:
            return FieldElement
        return _field_class(params)

    def __repr__(self) -> str:
        return f"Field<{self.value}>"

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __hash__(self) -> int:
        return hash((self.value, self.params.modulus))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldElement):
            return self.value == other.value and self.params == other.params
        if isinstance(other, (int, str, float)):
            return self.equals(other)
        return NotImplemented

    def _coerce(self, other: FieldInput) -> FieldElement:
        """Coerce an operand into an element of this field."""
        if isinstance(other, FieldElement):
            if other.params != self.params:
                raise TypeError(
                    f"Cannot combine elements of {self.params.name} and {other.params.name}"
                )
            return other
        return type(self)(other)

    # Arithmetic Operations

    def add(self, other: FieldInput) -> FieldElement:
        """Addition in the field: (a + b) mod p"""
        total = self.value + self._coerce(other).value
        p = self.params.modulus
        return type(self)(total - p if total >= p else total)

    def sub(self, other: FieldInput) -> FieldElement:
        """Subtraction in the field: (a - b + p) mod p"""
        p = self.params.modulus
        return type(self)((self.value - self._coerce(other).value + p) % p)

    def mul(self, other: FieldInput) -> FieldElement:
        """Multiplication in the field: (a * b) mod p"""
        return type(self)((self.value * self._coerce(other).value) % self.params.modulus)

    def div(self, other: FieldInput) -> FieldElement:
        """
        Division in the field: a * b^(-1) mod p

        Raises:
            DivisionByZero: If other is the zero residue
            NotInvertible: If other has no inverse (only for composite moduli)
        """
        divisor = self._coerce(other)
        if divisor.value == 0:
            raise DivisionByZero("Division by zero")
        return self.mul(divisor.inverse())

    def mod(self, other: FieldInput) -> FieldElement:
        """
        Non-negative remainder of the canonical values: ((a % b) + b) % b

        Raises:
            ModuloByZero: If other is the zero residue
        """
        rhs = self._coerce(other).value
        if rhs == 0:
            raise ModuloByZero("Cannot modulo by zero")
        return type(self)(((self.value % rhs) + rhs) % rhs)

    def inverse(self) -> FieldElement:
        """
        Compute modular inverse using Extended Euclidean Algorithm.

        Finds b such that a * b ≡ 1 (mod p)

        Raises:
            DivisionByZero: If self.value is 0 (no inverse exists)
            NotInvertible: If gcd(a, p) != 1

        Returns:
            FieldElement b such that self * b = 1
        """
        if self.value == 0:
            raise DivisionByZero("Cannot invert zero")

        p = self.params.modulus
        old_r, r = self.value, p
        old_s, s = 1, 0

        while r != 0:
            quotient = old_r // r
            old_r, r = r, old_r - quotient * r
            old_s, s = s, old_s - quotient * s

        # old_r is the gcd, old_s the Bezout coefficient of self.value
        if old_r != 1:
            raise NotInvertible(f"Input is not invertible (gcd = {old_r})")

        return type(self)(old_s % p)

    def pow32(self, exponent: Union[FieldElement, int]) -> FieldElement:
        """
        Exponentiation using square-and-multiply.

        Noir's ``Field::pow_32`` only supports exponents below 2^32, and so
        does this method.

        Args:
            exponent: A FieldElement or a plain int

        Raises:
            NegativeExponent: If a plain int exponent is negative
            ExponentTooLarge: If the exponent is >= 2^32
        """
        if isinstance(exponent, FieldElement):
            exp = exponent.value
        elif isinstance(exponent, int) and not isinstance(exponent, bool):
            exp = exponent
        else:
            raise InvalidInput(f"Exponent must be a FieldElement or int, got {exponent!r}")

        if exp < 0:
            raise NegativeExponent("Negative exponents are not allowed")
        if exp >= self.params.max_exponent:
            raise ExponentTooLarge(
                f"Exponent too large: exceeds 2^{self.params.max_exponent_bits} limit"
            )

        p = self.params.modulus
        result = 1
        base = self.value

        while exp > 0:
            if exp & 1:
                result = (result * base) % p
            base = (base * base) % p
            exp >>= 1

        return type(self)(result)

    def __add__(self, other: FieldInput) -> FieldElement:
        return self.add(other)

    def __radd__(self, other: int) -> FieldElement:
        return self.add(other)

    def __sub__(self, other: FieldInput) -> FieldElement:
        return self.sub(other)

    def __rsub__(self, other: int) -> FieldElement:
        return type(self)(other).sub(self)

    def __mul__(self, other: FieldInput) -> FieldElement:
        return self.mul(other)

    def __rmul__(self, other: int) -> FieldElement:
        return self.mul(other)

    def __truediv__(self, other: FieldInput) -> FieldElement:
        return self.div(other)

    def __rtruediv__(self, other: int) -> FieldElement:
        return type(self)(other).div(self)

    def __mod__(self, other: FieldInput) -> FieldElement:
        return self.mod(other)

    def __pow__(self, exponent: Union[FieldElement, int]) -> FieldElement:
        return self.pow32(exponent)

    def __neg__(self) -> FieldElement:
        """Negation: -a = p - a"""
        return type(self)((self.params.modulus - self.value) % self.params.modulus)

    # Predicates and checks

    def is_zero(self) -> bool:
        """Check if this element is zero."""
        return self.value == 0

    def equals(self, other: FieldInput) -> bool:
        """Value equality after parsing other the same way as the constructor."""
        try:
            return self.value == self._coerce(other).value
        except InvalidInput:
            return False

    def assert_max_bit_size(self, bit_size: int) -> None:
        """
        Assert that the value fits in bit_size bits.

        Raises:
            BitSizeExceeded: If the value needs more than bit_size bits
        """
        if self.value.bit_length() > bit_size:
            raise BitSizeExceeded(f"Field value exceeds {bit_size} bits")

    def sgn0(self) -> int:
        """
        Parity of the canonical value (0 if even, 1 if odd).

        Hash-to-curve style protocols use this to pick a canonical square
        root; it is not the sign of a value read as signed.
        """
        return self.value & 1

    def clone(self) -> FieldElement:
        """Return a copy of this element."""
        return type(self)(self.value)

    # Decompositions

    def _check_length(self, length: int, min_length: int, max_length: int) -> None:
        if not isinstance(length, int) or isinstance(length, bool):
            raise InvalidInput(f"Length must be an integer, got {length!r}")
        if length < min_length or length > max_length:
            raise LengthOutOfRange(length, min_length, max_length)

    def to_le_bits(self, length: int) -> List[int]:
        """
        Decompose into bits, least significant first.

        Args:
            length: Number of bits, between the value's bit length and 254

        Raises:
            LengthOutOfRange: If length is outside that window
        """
        self._check_length(length, self.value.bit_length(), self.params.num_bits)
        return [(self.value >> i) & 1 for i in range(length)]

    def to_be_bits(self, length: int) -> List[int]:
        """Decompose into bits, most significant first. See to_le_bits."""
        self._check_length(length, self.value.bit_length(), self.params.num_bits)
        return [(self.value >> i) & 1 for i in range(length - 1, -1, -1)]

    def to_le_bytes(self, length: int) -> List[int]:
        """
        Decompose into bytes, least significant first.

        Args:
            length: Number of bytes, between ceil(bit_length / 8) and 32

        Raises:
            LengthOutOfRange: If length is outside that window
        """
        min_length = (self.value.bit_length() + 7) // 8
        self._check_length(length, min_length, self.params.num_bytes)
        return list(self.value.to_bytes(length, "little"))

    def to_be_bytes(self, length: int) -> List[int]:
        """Decompose into bytes, most significant first. See to_le_bytes."""
        min_length = (self.value.bit_length() + 7) // 8
        self._check_length(length, min_length, self.params.num_bytes)
        return list(self.value.to_bytes(length, "big"))

    def _min_radix_length(self, radix: int) -> int:
        """
        Minimum digit count in the given radix, rounded up to a power of 2.

        Example: 300 needs 9 bits; in radix 4 (2 bits per digit) that is
        ceil(9 / 2) = 5 digits, which rounds up to 8.
        """
        radix_bits = _radix_bits(radix, self.params)
        if self.value == 0:
            return 1

        raw_length = -(-self.value.bit_length() // radix_bits)

        rounded = 1
        while rounded < raw_length:
            rounded <<= 1
        return rounded

    def to_le_radix(self, radix: int, length: int) -> List[int]:
        """
        Decompose into digits of the given radix, least significant first.

        Args:
            radix: Power of 2 in [2, 256]
            length: Number of digits, between the rounded minimum and 256

        Raises:
            InvalidRadix: If radix is not an allowed power of 2
            LengthOutOfRange: If length is outside the valid window
        """
        min_length = self._min_radix_length(radix)
        self._check_length(length, min_length, self.params.max_radix_length)

        digits = []
        v = self.value
        for _ in range(length):
            digits.append(v % radix)
            v //= radix
        return digits

    def to_be_radix(self, radix: int, length: int) -> List[int]:
        """Decompose into digits, most significant first. See to_le_radix."""
        return self.to_le_radix(radix, length)[::-1]

    # Reassembly (inverse of the decompositions)

    @classmethod
    def from_le_bits(cls, bits: Sequence[int]) -> FieldElement:
        """Rebuild an element from little-endian bits."""
        return cls.from_le_radix(2, bits)

    @classmethod
    def from_be_bits(cls, bits: Sequence[int]) -> FieldElement:
        """Rebuild an element from big-endian bits."""
        return cls.from_le_radix(2, list(bits)[::-1])

    @classmethod
    def from_le_bytes(cls, data: Sequence[int]) -> FieldElement:
        """Rebuild an element from little-endian bytes (at most 32)."""
        raw = bytes(data)
        if len(raw) > cls.params.num_bytes:
            raise LengthOutOfRange(len(raw), 0, cls.params.num_bytes)
        return cls(int.from_bytes(raw, "little"))

    @classmethod
    def from_be_bytes(cls, data: Sequence[int]) -> FieldElement:
        """Rebuild an element from big-endian bytes (at most 32)."""
        raw = bytes(data)
        if len(raw) > cls.params.num_bytes:
            raise LengthOutOfRange(len(raw), 0, cls.params.num_bytes)
        return cls(int.from_bytes(raw, "big"))

    @classmethod
    def from_le_radix(cls, radix: int, digits: Sequence[int]) -> FieldElement:
        """
        Rebuild an element as sum(digit[i] * radix^i).

        Raises:
            InvalidRadix: If radix is not an allowed power of 2
            InvalidInput: If a digit is outside [0, radix)
        """
        _radix_bits(radix, cls.params)
        total = 0
        for i, digit in enumerate(digits):
            if (isinstance(digit, bool) or not isinstance(digit, (int, np.integer))
                    or not 0 <= digit < radix):
                raise InvalidInput(f"Digit {digit} at position {i} is not valid in radix {radix}")
            total += int(digit) * radix ** i
        return cls(total)

    @classmethod
    def from_be_radix(cls, radix: int, digits: Sequence[int]) -> FieldElement:
        """Rebuild an element from most-significant-first digits."""
        return cls.from_le_radix(radix, list(digits)[::-1])

    # Serialization

    def to_hex(self) -> str:
        """Canonical lowercase hex with '0x' prefix and no padding."""
        return hex(self.value)

    def to_string(self) -> str:
        """Canonical decimal string."""
        return str(self.value)

    def to_circuit_inputs(self) -> str:
        """Circuit input form of a Field: its hex string."""
        return self.to_hex()

    # Modulus lookup tables

    @classmethod
    def mod_le_bits(cls) -> np.ndarray:
        return cls.params.mod_le_bits

    @classmethod
    def mod_be_bits(cls) -> np.ndarray:
        return cls.params.mod_be_bits

    @classmethod
    def mod_le_bytes(cls) -> np.ndarray:
        return cls.params.mod_le_bytes

    @classmethod
    def mod_be_bytes(cls) -> np.ndarray:
        return cls.params.mod_be_bytes

    @classmethod
    def mod_num_bits(cls) -> int:
        return cls.params.num_bits

    @classmethod
    def zero(cls) -> FieldElement:
        """Return the additive identity (0)."""
        return cls(0)

    @classmethod
    def one(cls) -> FieldElement:
        """Return the multiplicative identity (1)."""
        return cls(1)


def _radix_bits(radix: int, params: FieldParams) -> int:
    """log2(radix), after checking radix is a power of 2 in [2, max_radix]."""
    if not isinstance(radix, int) or isinstance(radix, bool):
        raise InvalidRadix(f"radix must be an integer, got {radix!r}")
    if radix < 2 or radix > params.max_radix:
        raise InvalidRadix(f"radix must be between 2 and {params.max_radix}, got {radix}")
    if radix & (radix - 1):
        raise InvalidRadix(f"radix must be a power of 2, got {radix}")
    return radix.bit_length() - 1


@lru_cache(maxsize=None)
def _field_class(params: FieldParams) -> type:
    return type(f"FieldElement_{params.name}", (FieldElement,), {"params": params})
