"""
Tags for the closed set of circuit data types.

Each data type class carries a ``data_kind`` class attribute naming its
variant. The encoder dispatches on this tag instead of probing the class
hierarchy, and checks at import time that it handles every member.
"""

from enum import Enum


class DataKind(Enum):
    """Variants of the circuit DataType union."""
    FIELD = "field"              # FieldElement
    INTEGER = "integer"          # BoundedInteger (U8 ... I64)
    BOOL = "bool"                # Bool
    STR = "str"                  # Str
    ARRAY = "array"              # FixedSizeArray
    BOUNDED_VEC = "bounded_vec"  # BoundedVec
    STRUCT = "struct"            # Mapping[str, DataType]
