"""Syntax tree for contract definitions and the C++ code each node emits."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

INDENT_WIDTH = 4
INCLUDES = "#include <cstdint>\n#include <iostream>\n\n"
MAIN_FUNCTION = (
    "int main() {\n"
    "    // Call some functions to demonstrate compilation\n"
    "    return 0;\n"
    "}\n"
)


def _indent(level: int) -> str:
    return " " * (level * INDENT_WIDTH)


class TypeKind(Enum):
    """Data types of the contract language, valued by their C++ spelling."""

    UINT = "uint32_t"
    INT = "int32_t"
    BOOL = "bool"
    ADDRESS = "uint64_t"


class ValueKind(Enum):
    """Kinds of literal values."""

    INTEGER = "integer"
    BOOLEAN = "boolean"
    ADDRESS_VAL = "address"


class BinaryOperator(Enum):
    """Binary operators, valued by their C++ symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    EQUAL = "=="
    NOTEQUAL = "!="
    GREATERTHAN = ">"
    LESSERTHAN = "<"
    GREATEREQUAL = ">="
    LESSEREQUAL = "<="
    AND = "&&"
    OR = "||"


class UnaryOperator(Enum):
    """Unary operators, valued by their C++ symbol."""

    NOT = "!"
    NEGATE = "-"


@dataclass
class DataType:
    """A data type annotation."""

    kind: TypeKind = TypeKind.UINT

    def to_cpp_type(self) -> str:
        return self.kind.value


class Expression(ABC):
    """Base of all expressions."""

    @abstractmethod
    def generate_code(self) -> str:
        """Return the C++ text of the expression."""


@dataclass
class Literal(Expression):
    kind: ValueKind
    value: str

    def generate_code(self) -> str:
        return self.value


@dataclass
class Identifier(Expression):
    name: str

    def generate_code(self) -> str:
        return self.name


@dataclass
class BinaryOp(Expression):
    op: BinaryOperator
    left: Expression
    right: Expression

    def generate_code(self) -> str:
        return f"({self.left.generate_code()} {self.op.value} {self.right.generate_code()})"


@dataclass
class UnaryOp(Expression):
    op: UnaryOperator
    operand: Expression

    def generate_code(self) -> str:
        return f"({self.op.value}{self.operand.generate_code()})"


class Statement(ABC):
    """Base of all statements."""

    @abstractmethod
    def generate_code(self, indent: int = 0) -> str:
        """Return the C++ text of the statement at the given nesting level."""


@dataclass
class VarDecl(Statement):
    type: DataType
    name: str
    initializer: Expression | None = None

    def generate_code(self, indent: int = 0) -> str:
        text = f"{_indent(indent)}{self.type.to_cpp_type()} {self.name}"
        if self.initializer is not None:
            text += f" = {self.initializer.generate_code()}"
        return text + ";\n"


@dataclass
class Assignment(Statement):
    variable: str
    value: Expression

    def generate_code(self, indent: int = 0) -> str:
        return f"{_indent(indent)}{self.variable} = {self.value.generate_code()};\n"


@dataclass
class IfStatement(Statement):
    condition: Expression
    then_stmts: list[Statement] = field(default_factory=list)
    else_stmts: list[Statement] = field(default_factory=list)

    def generate_code(self, indent: int = 0) -> str:
        pad = _indent(indent)
        parts = [f"{pad}if ({self.condition.generate_code()}) {{\n"]
        parts.extend(stmt.generate_code(indent + 1) for stmt in self.then_stmts)
        if self.else_stmts:
            parts.append(f"{pad}}} else {{\n")
            parts.extend(stmt.generate_code(indent + 1) for stmt in self.else_stmts)
        parts.append(f"{pad}}}\n")
        return "".join(parts)


@dataclass
class ReturnStatement(Statement):
    value: Expression

    def generate_code(self, indent: int = 0) -> str:
        return f"{_indent(indent)}return {self.value.generate_code()};\n"


@dataclass
class Parameter:
    type: DataType
    name: str

    def generate_code(self) -> str:
        return f"{self.type.to_cpp_type()} {self.name}"


@dataclass
class Function:
    name: str
    return_type: DataType
    parameters: list[Parameter] = field(default_factory=list)
    body: list[Statement] = field(default_factory=list)

    def generate_code(self) -> str:
        params = ", ".join(p.generate_code() for p in self.parameters)
        body = "".join(stmt.generate_code(1) for stmt in self.body)
        return f"{self.return_type.to_cpp_type()} {self.name}({params}) {{\n{body}}}\n\n"


@dataclass
class Contract:
    name: str
    variables: list[VarDecl] = field(default_factory=list)
    functions: list[Function] = field(default_factory=list)

    def generate_code(self) -> str:
        variables = "".join(var.generate_code(0) for var in self.variables)
        functions = "".join(func.generate_code() for func in self.functions)
        return f"{INCLUDES}{variables}\n{functions}{MAIN_FUNCTION}"