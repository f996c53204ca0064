"""
Noir Helpers - Demo Entry Point

Prints worked examples of the circuit data types as tables:
    1. field       - Field arithmetic and bit/byte/radix decompositions
    2. integers    - Field vs. wrapping arithmetic on fixed-width integers
    3. containers  - FixedSizeArray and BoundedVec behaviour
    4. encoding    - A nested struct encoded as circuit inputs

Run with:
    noir-helpers-demo                  # all sections
    noir-helpers-demo --section field
    python -m noir_helpers.main --verbose
"""

import argparse
import json
import logging
import sys

from tabulate import tabulate

from .common.errors import NoirHelpersError
from .common.field import FieldElement
from .common.params import BN254
from .data_types import (
    Bool,
    BoundedVec,
    FixedSizeArray,
    I8,
    Str,
    U8,
    U32,
)
from .encoding import to_circuit_inputs

SECTIONS = ("field", "integers", "containers", "encoding")


def print_header(title: str):
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


def run_field():
    """Field arithmetic and decompositions."""
    print_header("FIELD ELEMENTS")
    print(BN254.summary())

    a = FieldElement(300)
    b = FieldElement(7)
    rows = [
        ["a + b", (a + b).to_string()],
        ["a - b", (a - b).to_string()],
        ["b - a", (b - a).to_hex()],
        ["a * b", (a * b).to_string()],
        ["a / b", (a / b).to_hex()],
        ["(a / b) * b", ((a / b) * b).to_string()],
        ["a % b", (a % b).to_string()],
        ["b.pow32(10)", b.pow32(10).to_string()],
    ]
    print(f"\na = {a}, b = {b}\n")
    print(tabulate(rows, headers=["Expression", "Result"], tablefmt="github"))

    rows = [
        ["to_le_bits(9)", a.to_le_bits(9)],
        ["to_be_bits(9)", a.to_be_bits(9)],
        ["to_le_bytes(2)", a.to_le_bytes(2)],
        ["to_be_bytes(4)", a.to_be_bytes(4)],
        ["to_le_radix(16, 4)", a.to_le_radix(16, 4)],
        ["to_be_radix(4, 8)", a.to_be_radix(4, 8)],
    ]
    print(f"\nDecompositions of {a} ({a.to_hex()}):\n")
    print(tabulate(rows, headers=["Call", "Output"], tablefmt="github"))


def run_integers():
    """Field arithmetic vs. wrapping arithmetic."""
    print_header("FIXED-WIDTH INTEGERS")
    print("\nField operations run modulo p and keep the type without a range")
    print("check; wrapping operations run modulo the type's range.\n")

    pairs = [(U8(100), U8(200)), (U8(255), U8(1)), (U32(2**31), U32(2**31)), (I8(-100), I8(27))]
    rows = []
    for x, y in pairs:
        rows.append([
            repr(x), repr(y),
            str(x + y),
            str(x.wrapping_add(y)),
            str(x.wrapping_sub(y)),
            str(x.wrapping_mul(y)),
        ])
    print(tabulate(rows, headers=["a", "b", "a + b", "wrapping_add", "wrapping_sub", "wrapping_mul"],
                   tablefmt="github"))

    print()
    try:
        U8(256)
    except NoirHelpersError as e:
        print(f"U8(256) -> {type(e).__name__}: {e}")


def run_containers():
    """Fixed arrays and bounded vectors."""
    print_header("CONTAINERS")

    arr = FixedSizeArray(3, [U8(1), U8(2), U8(3)])
    print(f"\n{arr!r}")
    print(f"  at(-1) = {arr.at(-1)}")
    print(f"  map(x * index) = {arr.map(lambda x, i: str(x.wrapping_mul(U8(i))))}")

    vec = BoundedVec(4, lambda: U8(0))
    rows = []
    steps = [
        ("push(U8(5))", lambda: vec.push(U8(5))),
        ("extend_from_array([6, 7])", lambda: vec.extend_from_array([U8(6), U8(7)])),
        ("extend_from_array([8, 9])", lambda: vec.extend_from_array([U8(8), U8(9)])),
        ("pop()", lambda: vec.pop()),
        ("push(U8(8))", lambda: vec.push(U8(8))),
        ("push(U8(9))", lambda: vec.push(U8(9))),
        ("push(U8(10))", lambda: vec.push(U8(10))),
    ]
    for label, step in steps:
        try:
            result = step()
            outcome = "ok" if result is None else f"-> {result}"
        except NoirHelpersError as e:
            outcome = type(e).__name__
        rows.append([label, outcome, vec.len(), json.dumps(vec.to_circuit_inputs())])

    print()
    print(tabulate(rows, headers=["Call", "Outcome", "len", "Circuit input"], tablefmt="github"))


def run_encoding():
    """A nested struct encoded as circuit inputs."""
    print_header("CIRCUIT INPUT ENCODING")

    signers = BoundedVec(3, lambda: FieldElement(0))
    signers.push(FieldElement("0x1234"))
    inputs = {
        "root": FieldElement(2).pow32(2**32 - 1),
        "amount": U32(1000),
        "delta": I8(-5),
        "enabled": Bool(True),
        "memo": Str("hello"),
        "path": FixedSizeArray(2, [FieldElement(1), FieldElement(2)]),
        "signers": signers,
        "meta": {"nonce": U8(7), "bytes": FixedSizeArray(5, Str("hello").as_bytes())},
    }
    print()
    print(json.dumps(to_circuit_inputs(inputs), indent=2))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="noir-helpers-demo",
        description="Worked examples of Noir circuit data types.",
    )
    parser.add_argument("--section", default="all", choices=["all", *SECTIONS],
                        help="Which demo to run (default: all)")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose and not logging.getLogger().handlers:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    demos = {
        "field": run_field,
        "integers": run_integers,
        "containers": run_containers,
        "encoding": run_encoding,
    }
    selected = SECTIONS if args.section == "all" else (args.section,)
    for name in selected:
        demos[name]()
    return 0


if __name__ == "__main__":
    sys.exit(main())
