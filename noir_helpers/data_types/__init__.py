"""
Circuit data types.

This module provides:
    - Fixed-width integers (U8 ... U128, I8 ... I64)
    - Scalars (Bool, Str)
    - Containers (FixedSizeArray, BoundedVec)

Any of these, together with FieldElement and string-keyed mappings of them,
can be encoded with noir_helpers.encoding.to_circuit_inputs.
"""

from .integer import (
    BoundedInteger,
    IntegerType,
    INTEGER_TYPES,
    U1, U8, U16, U32, U64, U128,
    I8, I16, I32, I64,
)
from .scalars import Bool, Str
from .array import FixedSizeArray
from .bounded_vec import BoundedVec

__all__ = [
    "BoundedInteger",
    "IntegerType",
    "INTEGER_TYPES",
    "U1", "U8", "U16", "U32", "U64", "U128",
    "I8", "I16", "I32", "I64",
    "Bool",
    "Str",
    "FixedSizeArray",
    "BoundedVec",
]
