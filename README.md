# minieval

`minieval` is a small tree-walking evaluator. You build a program as a tree of
node objects and evaluate it against an `Environment` that holds variables.

## Values

`minieval.environment.Value` is a frozen dataclass with a `type` (a
`ValueType`: `INT`, `FLOAT`, `STRING` or `BOOL`) and a `data` field. Build
values with these constructors:

- `Value.int_(i)`: a 32-bit signed integer. Wider input wraps around.
- `Value.float_(f)`: a number rounded to single precision.
- `Value.string(s)`
- `Value.bool_(b)`: any truthy input becomes `True`.

`value.truthy()` tells you whether the data counts as true.

## Nodes

`minieval.nodes` provides frozen dataclasses that derive from `Node`:

- literals: `IntNode(value)`, `FloatNode(value)`, `BoolNode(value)`,
  `StringNode(value)`
- variables: `VarNode(name)` and `AssignNode(left, right)`
- operators: `UnaryOpNode(expr, op)` and `BinaryOpNode(left, right, op)`
- control flow: `BlockNode(nodes)`, `IfElseNode(cond, then_block, else_block=None)`,
  `WhileNode(cond, body)`, `ForNode(init, cond, incr, body)`

## Evaluation

`minieval.evaluator.evaluate(node, env)` evaluates a tree and returns a
`Value`. The functions `eval_unary_op(expr, op)` and
`eval_binary_op(left, right, op)` apply a single operator to values.

Operators:

- Unary `!`, `+` and `-` apply to ints and floats. On a float, `!` gives
  `1.0` or `0.0`. On a bool, only `!` applies.
- Ints support `+ - * /`, where `/` truncates toward zero. They also support
  `&& ||` and `== != > < >= <=`, which give bools.
- Floats support the same operators as ints.
- Bools support `&& || == !=`.
- Strings support `+` (concatenation), `==` and `!=`.

When an int meets a float in a binary operation, the int is promoted to a
float. Strings do not mix with other types, and floats do not mix with bools.

Control flow:

- A `BlockNode` gives the value of its last statement. An empty block gives
  the int 0.
- An assignment gives the assigned value.
- `if` without an else branch, `while` and `for` give the int 0.
- Conditions in `if`, `while` and `for` must be bools.

Evaluation errors raise `EvalError`. The cases are:

- an undefined variable
- an assignment to something other than a variable
- division by zero
- an operator that a type does not support
- mixing incompatible types
- a condition that is not a bool

## Example

```python
from minieval.environment import Environment
from minieval.evaluator import evaluate
from minieval.nodes import (
    AssignNode, BinaryOpNode, BlockNode, ForNode, IntNode, VarNode,
)

env = Environment()
program = BlockNode([
    AssignNode(VarNode("total"), IntNode(0)),
    ForNode(
        AssignNode(VarNode("i"), IntNode(1)),
        BinaryOpNode(VarNode("i"), IntNode(5), "<="),
        AssignNode(VarNode("i"), BinaryOpNode(VarNode("i"), IntNode(1), "+")),
        AssignNode(VarNode("total"),
                   BinaryOpNode(VarNode("total"), VarNode("i"), "+")),
    ),
])
evaluate(program, env)
print(env.get("total").data)   # 15
```

## Environment

`Environment` maps names to values. Use `insert(key, value)` or the typed
helpers `insert_int`, `insert_float`, `insert_string` and `insert_bool` to add
a name. `get(key)` returns `None` when the name is not bound. The environment
also supports `in`, `len()` and iteration over names.

## Command line

```
minieval
```

This command creates an empty environment and exits with status 0. It takes
no arguments apart from `--help`.

## What it does not do

There is no parser. Programs are built in Python as node trees, and the
`minieval` command does not read or run program text.