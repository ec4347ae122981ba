"""Building contracts step by step, and the command-line entry point."""

from __future__ import annotations

import os
import sys

from dsltocpp.codegen import generate_code, write_to_file
from dsltocpp.nodes import Contract, DataType, Function, Literal, TypeKind, ValueKind, VarDecl

PROGRAM_NAME = "dsl_to_cpp"

_TYPE_NAMES = {
    "int": TypeKind.INT,
    "bool": TypeKind.BOOL,
    "address": TypeKind.ADDRESS,
}


def parse_type(type_name: str) -> TypeKind:
    """Map a type name to its kind; unknown names fall back to uint."""
    return _TYPE_NAMES.get(type_name, TypeKind.UINT)


def create_contract(name: str) -> Contract:
    return Contract(name)


def add_variable(contract: Contract, type_name: str, name: str, value: str) -> VarDecl:
    """Append a state variable initialised with a literal and return it."""
    decl = VarDecl(DataType(parse_type(type_name)), name, Literal(ValueKind.INTEGER, value))
    contract.variables.append(decl)
    return decl


def add_function(contract: Contract, name: str, return_type: str) -> Function:
    """Append an empty function and return it."""
    function = Function(name, DataType(parse_type(return_type)))
    contract.functions.append(function)
    return function


def write_contract(contract: Contract, filename: str | os.PathLike) -> None:
    write_to_file(generate_code(contract), filename)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(f"Usage: {PROGRAM_NAME} <input.dsl> [output.cpp]", file=sys.stderr)
        return 1
    print("AST-based compiler (demonstration only)")
    return 0


if __name__ == "__main__":
    sys.exit(main())