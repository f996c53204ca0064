"""
Fixed-Width Integers (u8 ... u64, i8 ... i64).

Noir integers are field elements with a static range. Here an integer is a
pair: an IntegerType describing the range, and the integer value itself.
The type object doubles as the constructor:

    >>> x = U8(100)
    >>> y = U8(200)
    >>> print(x.wrapping_add(y))
    44

Two kinds of arithmetic exist:
    - add/sub/mul/div/mod (and + - * / %) run in the prime field, exactly
      like Noir's Field operations, and re-wrap the result in the same
      integer type WITHOUT re-checking the range. U8(200) + U8(100) is a
      U8 holding 300.
    - wrapping_add/wrapping_sub/wrapping_mul run modulo the type's range
      (MAX - MIN + 1) and always land back inside [MIN, MAX].

Only construction validates the range.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, ClassVar, Union

from ..common.errors import InvalidInput, OutOfRange
from ..common.field import FieldElement, parse_integer
from ..common.kinds import DataKind

IntegerInput = Union[int, str, float, FieldElement]


@dataclass(frozen=True)
class IntegerType:
    """
    Static description of a fixed-width integer type.

    Calling an IntegerType builds a BoundedInteger of that type, so the type
    can be passed around wherever a constructor is expected (for example as
    a BoundedVec default factory: ``lambda: U8(0)``).

    Attributes:
        name: Noir type name (e.g., "u8", "i64")
        min_value: Smallest allowed value (inclusive)
        max_value: Largest allowed value (inclusive)
    """
    name: str
    min_value: int
    max_value: int

    def __post_init__(self):
        """Validate bounds."""
        if self.min_value > self.max_value:
            raise ValueError("min_value must not exceed max_value")
        if max(abs(self.min_value), abs(self.max_value)) >= FieldElement.params.modulus // 2:
            raise ValueError(f"{self.name} does not fit in the field")

    @property
    def signed(self) -> bool:
        return self.min_value < 0

    @property
    def range_size(self) -> int:
        """Number of representable values: MAX - MIN + 1."""
        return self.max_value - self.min_value + 1

    @property
    def bits(self) -> int:
        """Width of the type in bits."""
        return (self.range_size - 1).bit_length()

    def validate(self, value: int) -> int:
        """
        Return value unchanged if it is inside [MIN, MAX].

        Raises:
            OutOfRange: Otherwise, naming the exact bounds
        """
        if value < self.min_value or value > self.max_value:
            raise OutOfRange(value, self.min_value, self.max_value)
        return value

    def __call__(self, value: IntegerInput) -> BoundedInteger:
        return BoundedInteger(self, value)

    def __repr__(self) -> str:
        return self.name.upper()


@dataclass(frozen=True)
class BoundedInteger:
    """
    A fixed-width integer value.

    Attributes:
        int_type: The IntegerType giving the static range
        value: The integer value (negative for signed types)

    Example:
        >>> a = I8(-111)
        >>> str(a)
        '-111'
        >>> U16(65535).wrapping_add(U16(2)).value
        1
    """
    int_type: IntegerType
    value: int
    data_kind: ClassVar[DataKind] = DataKind.INTEGER

    def __post_init__(self):
        """Parse the input and check it against the type's range."""
        object.__setattr__(self, "value", self.int_type.validate(parse_integer(self.value)))

    @classmethod
    def _unchecked(cls, int_type: IntegerType, element: FieldElement) -> BoundedInteger:
        """Wrap a field result without range validation."""
        value = element.value
        # signed types read residues in the upper half of the field as negative
        if int_type.signed and value > (element.params.modulus - 1) // 2:
            value -= element.params.modulus
        obj = cls.__new__(cls)
        object.__setattr__(obj, "int_type", int_type)
        object.__setattr__(obj, "value", value)
        return obj

    @property
    def field(self) -> FieldElement:
        """This integer as a field element."""
        return FieldElement(self.value)

    @property
    def min_value(self) -> int:
        return self.int_type.min_value

    @property
    def max_value(self) -> int:
        return self.int_type.max_value

    def __repr__(self) -> str:
        return f"{self.int_type!r}<{self.value}>"

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def _check_operand(self, other: object) -> BoundedInteger:
        if not isinstance(other, BoundedInteger) or other.int_type != self.int_type:
            raise TypeError(
                f"Expected {self.int_type!r} operand, got {other!r}"
            )
        return other

    # Field arithmetic (modulo p, range not enforced)

    def _field_op(self, other: BoundedInteger,
                  op: Callable[[FieldElement, FieldElement], FieldElement]) -> BoundedInteger:
        rhs = self._check_operand(other)
        return BoundedInteger._unchecked(self.int_type, op(self.field, rhs.field))

    def add(self, other: BoundedInteger) -> BoundedInteger:
        return self._field_op(other, FieldElement.add)

    def sub(self, other: BoundedInteger) -> BoundedInteger:
        return self._field_op(other, FieldElement.sub)

    def mul(self, other: BoundedInteger) -> BoundedInteger:
        return self._field_op(other, FieldElement.mul)

    def div(self, other: BoundedInteger) -> BoundedInteger:
        """Field division (multiply by inverse), not integer division."""
        return self._field_op(other, FieldElement.div)

    def mod(self, other: BoundedInteger) -> BoundedInteger:
        return self._field_op(other, FieldElement.mod)

    def __add__(self, other: BoundedInteger) -> BoundedInteger:
        return self.add(other)

    def __sub__(self, other: BoundedInteger) -> BoundedInteger:
        return self.sub(other)

    def __mul__(self, other: BoundedInteger) -> BoundedInteger:
        return self.mul(other)

    def __truediv__(self, other: BoundedInteger) -> BoundedInteger:
        return self.div(other)

    def __mod__(self, other: BoundedInteger) -> BoundedInteger:
        return self.mod(other)

    # Wrapping arithmetic (modulo the type's range)

    def _wrapping_op(self, other: BoundedInteger,
                     op: Callable[[int, int], int]) -> BoundedInteger:
        """
        Shift both operands by -MIN, apply op modulo the range size, then
        shift back by +MIN. The result is always inside [MIN, MAX].
        """
        rhs = self._check_operand(other)
        t = self.int_type
        a = self.value - t.min_value
        b = rhs.value - t.min_value
        return BoundedInteger(t, op(a, b) % t.range_size + t.min_value)

    def wrapping_add(self, other: BoundedInteger) -> BoundedInteger:
        return self._wrapping_op(other, lambda a, b: a + b)

    def wrapping_sub(self, other: BoundedInteger) -> BoundedInteger:
        return self._wrapping_op(other, lambda a, b: a - b)

    def wrapping_mul(self, other: BoundedInteger) -> BoundedInteger:
        return self._wrapping_op(other, lambda a, b: a * b)

    # Serialization

    def equals(self, other: Union[BoundedInteger, IntegerInput]) -> bool:
        """
        Equality with another integer of the same type or a plain value.

        Unparseable input compares unequal.
        """
        if isinstance(other, BoundedInteger):
            return self == other
        try:
            return self.value == parse_integer(other)
        except InvalidInput:
            return False

    def to_string(self) -> str:
        """Decimal string, with a leading '-' for negative values."""
        return str(self.value)

    def to_hex(self) -> str:
        """Hex string of the field residue."""
        return self.field.to_hex()

    def to_circuit_inputs(self) -> str:
        """Circuit input form of an integer: its decimal string."""
        return self.to_string()


# =============================================================================
# NOIR INTEGER TYPES
# =============================================================================

U1 = IntegerType("u1", 0, 1)
U8 = IntegerType("u8", 0, 2**8 - 1)
U16 = IntegerType("u16", 0, 2**16 - 1)
U32 = IntegerType("u32", 0, 2**32 - 1)
U64 = IntegerType("u64", 0, 2**64 - 1)
U128 = IntegerType("u128", 0, 2**128 - 1)

I8 = IntegerType("i8", -(2**7), 2**7 - 1)
I16 = IntegerType("i16", -(2**15), 2**15 - 1)
I32 = IntegerType("i32", -(2**31), 2**31 - 1)
I64 = IntegerType("i64", -(2**63), 2**63 - 1)

INTEGER_TYPES = {t.name: t for t in (U1, U8, U16, U32, U64, U128, I8, I16, I32, I64)}
