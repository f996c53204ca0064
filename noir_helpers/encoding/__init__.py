"""
Circuit input encoding.

Key Components:
    - to_circuit_inputs: Encode a struct of named circuit values
    - to_input_value: Encode one value (recursively)
    - kind_of: Classify a value by its DataKind tag
"""

from .core import InputValue, kind_of, to_circuit_inputs, to_input_value

__all__ = [
    "InputValue",
    "kind_of",
    "to_circuit_inputs",
    "to_input_value",
]
