"""
Noir Helpers
============

Typed values for building Noir circuit inputs: BN254 field elements,
fixed-width integers, booleans, strings, fixed arrays and bounded vectors,
plus the encoder that turns a struct of them into the input map Noir's
witness executor expects.

Modules:
    - common: Field arithmetic, field parameters, errors
    - data_types: Integers, scalars and containers
    - encoding: Circuit input encoding

Quick Start:
    >>> from noir_helpers import FieldElement, U8, BoundedVec, to_circuit_inputs
    >>> vec = BoundedVec(4, lambda: U8(0))
    >>> vec.extend_from_array([U8(1), U8(2)])
    >>> to_circuit_inputs({"x": FieldElement(42), "v": vec})
    {'x': '0x2a', 'v': {'storage': ['1', '2', '0', '0'], 'len': 2}}
"""

__version__ = "0.2.1"

from .common import BN254, DataKind, FieldElement, FieldParams
from .common.errors import (
    NoirHelpersError,
    InvalidInput,
    OutOfRange,
    DivisionByZero,
    ModuloByZero,
    NotInvertible,
    ExponentTooLarge,
    NegativeExponent,
    BitSizeExceeded,
    LengthOutOfRange,
    InvalidRadix,
    LengthMismatch,
    IndexOutOfBounds,
    ContainerFull,
    ContainerEmpty,
    ContainerOverflow,
    UnsupportedValueType,
)
from .data_types import (
    BoundedInteger,
    IntegerType,
    U1, U8, U16, U32, U64, U128,
    I8, I16, I32, I64,
    Bool,
    Str,
    FixedSizeArray,
    BoundedVec,
)
from .encoding import to_circuit_inputs, to_input_value

__all__ = [
    "BN254",
    "DataKind",
    "FieldElement",
    "FieldParams",
    "BoundedInteger",
    "IntegerType",
    "U1", "U8", "U16", "U32", "U64", "U128",
    "I8", "I16", "I32", "I64",
    "Bool",
    "Str",
    "FixedSizeArray",
    "BoundedVec",
    "to_circuit_inputs",
    "to_input_value",
    # Errors
    "NoirHelpersError",
    "InvalidInput",
    "OutOfRange",
    "DivisionByZero",
    "ModuloByZero",
    "NotInvertible",
    "ExponentTooLarge",
    "NegativeExponent",
    "BitSizeExceeded",
    "LengthOutOfRange",
    "InvalidRadix",
    "LengthMismatch",
    "IndexOutOfBounds",
    "ContainerFull",
    "ContainerEmpty",
    "ContainerOverflow",
    "UnsupportedValueType",
]
