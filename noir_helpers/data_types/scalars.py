"""
Scalar wrappers for Noir ``bool`` and ``str<N>`` inputs.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, List

from ..common.errors import InvalidInput
from ..common.kinds import DataKind
from .integer import U8, BoundedInteger


@dataclass(frozen=True)
class Bool:
    """
    A boolean circuit value.

    Example:
        >>> Bool(True).not_().value()
        False
    """
    val: bool
    data_kind: ClassVar[DataKind] = DataKind.BOOL

    def __post_init__(self):
        if not isinstance(self.val, bool):
            raise InvalidInput(f"Bool expects a bool, got {type(self.val).__name__}")

    def value(self) -> bool:
        return self.val

    def eq(self, other: Bool) -> bool:
        return self.val == other.val

    def not_(self) -> Bool:
        """Logical NOT, as a new Bool."""
        return Bool(not self.val)

    def __bool__(self) -> bool:
        return self.val

    def to_circuit_inputs(self) -> bool:
        return self.val


@dataclass(frozen=True)
class Str:
    """
    A string circuit value.

    Noir's ``str<N>`` is passed to the witness executor as the raw string;
    as_bytes() gives the UTF-8 bytes as u8 values for circuits that take
    ``[u8; N]`` instead.
    """
    val: str
    data_kind: ClassVar[DataKind] = DataKind.STR

    def __post_init__(self):
        if not isinstance(self.val, str):
            raise InvalidInput(f"Str expects a str, got {type(self.val).__name__}")

    def value(self) -> str:
        return self.val

    def eq(self, other: Str) -> bool:
        return self.val == other.val

    def as_bytes(self) -> List[BoundedInteger]:
        """UTF-8 encoding of the string, one U8 per byte."""
        return [U8(b) for b in self.val.encode("utf-8")]

    def __len__(self) -> int:
        return len(self.val)

    def __str__(self) -> str:
        return self.val

    def to_circuit_inputs(self) -> str:
        return self.val
