"""
Error types raised by noir_helpers.

Every error derives from NoirHelpersError so callers can catch the whole
family at once, and also from the closest builtin exception (ValueError,
IndexError, ZeroDivisionError, ...) so ordinary Python handlers keep working.

Hierarchy:
    NoirHelpersError
    ├── InvalidInput           (ValueError)
    ├── OutOfRange             (ValueError)
    ├── DivisionByZero         (ZeroDivisionError)
    ├── ModuloByZero           (ZeroDivisionError)
    ├── NotInvertible          (ArithmeticError)
    ├── ExponentTooLarge       (ValueError)
    ├── NegativeExponent       (ValueError)
    ├── BitSizeExceeded        (ValueError)
    ├── LengthOutOfRange       (ValueError)
    ├── InvalidRadix           (ValueError)
    ├── LengthMismatch         (ValueError)
    ├── IndexOutOfBounds       (IndexError)
    ├── ContainerFull          (IndexError)
    ├── ContainerEmpty         (IndexError)
    ├── ContainerOverflow      (IndexError)
    └── UnsupportedValueType   (TypeError)
"""

from __future__ import annotations
from typing import Optional


class NoirHelpersError(Exception):
    """Base class for all noir_helpers errors."""


class InvalidInput(NoirHelpersError, ValueError):
    """Input cannot be parsed as an integer value."""


class OutOfRange(NoirHelpersError, ValueError):
    """
    Value lies outside the static bounds of an integer type.

    Attributes:
        value: The rejected value
        min_value: Lower bound of the type (inclusive)
        max_value: Upper bound of the type (inclusive)
    """

    def __init__(self, value: int, min_value: int, max_value: int):
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"Value must be in range [{min_value}, {max_value}], got {value}"
        )


class DivisionByZero(NoirHelpersError, ZeroDivisionError):
    """Division by the zero residue."""


class ModuloByZero(NoirHelpersError, ZeroDivisionError):
    """Remainder by the zero residue."""


class NotInvertible(NoirHelpersError, ArithmeticError):
    """Extended Euclid found no inverse (gcd != 1)."""


class ExponentTooLarge(NoirHelpersError, ValueError):
    """Exponent is not below the exponent limit (2^32 for pow32)."""


class NegativeExponent(NoirHelpersError, ValueError):
    """Exponent is negative."""


class BitSizeExceeded(NoirHelpersError, ValueError):
    """Value needs more bits than allowed."""


class LengthOutOfRange(NoirHelpersError, ValueError):
    """
    Requested decomposition length lies outside the valid window.

    Attributes:
        length: The requested length
        min_length: Smallest length that represents the value losslessly
        max_length: Largest length the field allows
    """

    def __init__(self, length: int, min_length: int, max_length: int):
        self.length = length
        self.min_length = min_length
        self.max_length = max_length
        super().__init__(
            f"Length must be between {min_length} and {max_length}, got {length}"
        )


class InvalidRadix(NoirHelpersError, ValueError):
    """Radix is not a power of two inside the allowed window."""


class LengthMismatch(NoirHelpersError, ValueError):
    """Number of items differs from the declared fixed length."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Length mismatch: expected {expected}, got {actual}")


class IndexOutOfBounds(NoirHelpersError, IndexError):
    """Index outside [0, length)."""

    def __init__(self, index: int, length: Optional[int] = None):
        self.index = index
        self.length = length
        if length is None:
            super().__init__(f"Index {index} out of bounds")
        else:
            super().__init__(f"Index {index} out of bounds for length {length}")


class ContainerFull(NoirHelpersError, IndexError):
    """push() on a bounded vector already at capacity."""


class ContainerEmpty(NoirHelpersError, IndexError):
    """pop() on an empty bounded vector."""


class ContainerOverflow(NoirHelpersError, IndexError):
    """Bulk extend would exceed a bounded vector's capacity."""


class UnsupportedValueType(NoirHelpersError, TypeError):
    """Value is not one of the circuit data types."""
