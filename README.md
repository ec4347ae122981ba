# dsltocpp

`dsltocpp` models a small contract language as a syntax tree and turns it
into a self-contained C++ source file. A contract holds typed state
variables and functions. Its types map onto fixed-width C++ types:

| Contract type | C++ type   |
|---------------|------------|
| `uint`        | `uint32_t` |
| `int`         | `int32_t`  |
| `bool`        | `bool`     |
| `address`     | `uint64_t` |

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Building a contract

The `dsltocpp.builder` module offers a short way to put a contract
together and write it out:

```python
from dsltocpp.builder import create_contract, add_variable, add_function, write_contract

contract = create_contract("Wallet")
add_variable(contract, "uint", "total", "100")
add_variable(contract, "bool", "active", "true")
add_function(contract, "balance", "uint")

write_contract(contract, "wallet.cpp")
```

`wallet.cpp` then holds:

```cpp
#include <cstdint>
#include <iostream>

uint32_t total = 100;
bool active = true;

uint32_t balance() {
}

int main() {
    // Call some functions to demonstrate compilation
    return 0;
}
```

- `parse_type(type_name)` turns a type name into a `TypeKind`. Any name
  other than `int`, `bool` or `address` is read as `uint`.
- `add_variable` appends a `VarDecl` whose initialiser is the given value
  text, copied into the output as it is, and returns the declaration.
- `add_function` appends an empty `Function` and returns it, so its
  `parameters` and `body` lists can be filled in afterwards.
- `write_contract` generates the code and writes it to the named file.

## Generating code without writing a file

`dsltocpp.codegen.generate_code(contract)` returns the C++ text as a string,
and `dsltocpp.codegen.write_to_file(code, filename)` stores a string you
already have. If the file cannot be opened, `OSError` is raised.

## Working with the tree directly

`dsltocpp.nodes` holds the syntax tree itself:

- `DataType`, with `to_cpp_type()`, over the enum `TypeKind`;
- the expressions `Literal` (with a `ValueKind`), `Identifier`,
  `BinaryOp` (with a `BinaryOperator`) and `UnaryOp` (with a
  `UnaryOperator`);
- the statements `VarDecl`, `Assignment`, `IfStatement` and
  `ReturnStatement`;
- `Parameter`, `Function` and `Contract`.

Every node has a `generate_code` method; statements take an indent level,
each level being four spaces. Binary and unary expressions are always
wrapped in parentheses:

```python
from dsltocpp.nodes import BinaryOp, BinaryOperator, Identifier

expr = BinaryOp(
    BinaryOperator.ADD,
    Identifier("a"),
    BinaryOp(BinaryOperator.MUL, Identifier("b"), Identifier("c")),
)
expr.generate_code()  # "(a + (b * c))"
```

An `IfStatement` writes an `else` branch only when `else_stmts` is not
empty.

## Command line

```
dsl-to-cpp input.dsl [output.cpp]
```

The command checks that an input file was named and prints a line saying
it is the tree-based compiler, exiting with status 0; without an input
file it prints a usage line to standard error and exits with status 1.

## What it does not do

There is no reader for contract source text. The command does not open,
parse or translate the input file and writes no output file; contracts
are built only from Python, through `dsltocpp.builder` or
`dsltocpp.nodes`. The generated code is not type-checked: names and
literal values are copied into the output unchanged.