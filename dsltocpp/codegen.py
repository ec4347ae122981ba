"""Rendering a contract to C++ source and saving it."""

from __future__ import annotations

import os

from dsltocpp.nodes import Contract


def generate_code(contract: Contract) -> str:
    """Return the full C++ translation unit for a contract."""
    return contract.generate_code()


def write_to_file(code: str, filename: str | os.PathLike) -> None:
    """Write generated code to a file; raises OSError if it cannot be opened."""
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(code)