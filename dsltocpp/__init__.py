"""Build contract syntax trees and generate C++ source from them."""

__version__ = "0.1.0"

__all__ = ["builder", "codegen", "nodes"]