import pytest

from dsltocpp.nodes import (
    Assignment,
    BinaryOp,
    BinaryOperator,
    Contract,
    DataType,
    Function,
    Identifier,
    IfStatement,
    Literal,
    Parameter,
    ReturnStatement,
    TypeKind,
    UnaryOp,
    UnaryOperator,
    ValueKind,
    VarDecl,
)


@pytest.mark.parametrize(
    "kind, expected",
    [
        (TypeKind.UINT, "uint32_t"),
        (TypeKind.INT, "int32_t"),
        (TypeKind.BOOL, "bool"),
        (TypeKind.ADDRESS, "uint64_t"),
    ],
)
def test_data_type_to_cpp(kind, expected):
    assert DataType(kind).to_cpp_type() == expected


def test_default_data_type_is_uint():
    assert DataType().to_cpp_type() == "uint32_t"


def test_literal_and_identifier():
    assert Literal(ValueKind.INTEGER, "42").generate_code() == "42"
    assert Identifier("balance").generate_code() == "balance"


@pytest.mark.parametrize(
    "op, symbol",
    [
        (BinaryOperator.ADD, " + "),
        (BinaryOperator.MOD, " % "),
        (BinaryOperator.EQUAL, " == "),
        (BinaryOperator.LESSEREQUAL, " <= "),
        (BinaryOperator.AND, " && "),
        (BinaryOperator.OR, " || "),
    ],
)
def test_binary_op(op, symbol):
    code = BinaryOp(op, Identifier("a"), Identifier("b")).generate_code()
    assert code == "(a" + symbol + "b)"


def test_unary_ops():
    x = Identifier("x")
    assert UnaryOp(UnaryOperator.NOT, x).generate_code() == "(!x)"
    assert UnaryOp(UnaryOperator.NEGATE, x).generate_code() == "(-x)"


def test_nested_expression_parenthesised():
    inner = BinaryOp(BinaryOperator.MUL, Identifier("b"), Identifier("c"))
    outer = BinaryOp(BinaryOperator.SUB, Identifier("a"), inner)
    code = outer.generate_code()
    assert code.startswith("(a - (")
    assert code.count("(") == code.count(")") == 2


def test_var_decl_with_and_without_initializer():
    bare = VarDecl(DataType(TypeKind.BOOL), "flag")
    assert bare.generate_code() == "bool flag;\n"
    init = VarDecl(DataType(TypeKind.INT), "n", Literal(ValueKind.INTEGER, "5"))
    assert init.generate_code(1) == "    int32_t n = 5;\n"


def test_assignment_and_return_indent():
    assign = Assignment("x", Literal(ValueKind.INTEGER, "1"))
    assert assign.generate_code(2) == " " * 8 + "x = 1;\n"
    ret = ReturnStatement(Identifier("x"))
    assert ret.generate_code(0) == "return x;\n"


def test_if_without_else():
    stmt = IfStatement(Identifier("c"), [Assignment("x", Identifier("y"))])
    lines = stmt.generate_code(0).splitlines()
    assert lines == ["if (c) {", "    x = y;", "}"]
    assert "else" not in stmt.generate_code()


def test_if_with_else_indented():
    stmt = IfStatement(
        Identifier("c"),
        [ReturnStatement(Identifier("a"))],
        [ReturnStatement(Identifier("b"))],
    )
    lines = stmt.generate_code(1).splitlines()
    assert lines == [
        "    if (c) {",
        "        return a;",
        "    } else {",
        "        return b;",
        "    }",
    ]


def test_parameter():
    assert Parameter(DataType(TypeKind.ADDRESS), "to").generate_code() == "uint64_t to"


def test_function_code():
    func = Function(
        "add",
        DataType(TypeKind.INT),
        [Parameter(DataType(TypeKind.INT), "a"), Parameter(DataType(TypeKind.INT), "b")],
        [ReturnStatement(BinaryOp(BinaryOperator.ADD, Identifier("a"), Identifier("b")))],
    )
    code = func.generate_code()
    assert code.startswith("int32_t add(int32_t a, int32_t b) {\n")
    assert "    return (a + b);\n" in code
    assert code.endswith("}\n\n")


def test_function_without_parameters():
    code = Function("f", DataType()).generate_code()
    assert code == "uint32_t f() {\n}\n\n"


def test_contract_code_order():
    contract = Contract(
        "Token",
        [VarDecl(DataType(), "supply", Literal(ValueKind.INTEGER, "100"))],
        [Function("total", DataType())],
    )
    code = contract.generate_code()
    assert code.startswith("#include <cstdint>\n#include <iostream>\n\n")
    assert code.index("uint32_t supply = 100;") < code.index("uint32_t total()")
    assert code.index("uint32_t total()") < code.index("int main() {")
    assert code.endswith("    return 0;\n}\n")


def test_empty_contract_contains_main():
    code = Contract("Empty").generate_code()
    assert "int main() {\n" in code
    assert "// Call some functions to demonstrate compilation" in code