"""
Common utilities for noir_helpers.

This module provides:
    - Finite field arithmetic (FieldElement)
    - Field configuration (FieldParams, BN254)
    - The error hierarchy
"""

from .params import FieldParams, BN254, BN254_MODULUS
from .field import FieldElement, parse_integer
from .kinds import DataKind
from . import errors

__all__ = [
    "FieldParams",
    "BN254",
    "BN254_MODULUS",
    "FieldElement",
    "parse_integer",
    "DataKind",
    "errors",
]
