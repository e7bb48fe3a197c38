"""Tree-walking evaluation of syntax trees."""

from __future__ import annotations

import operator
from typing import Callable

from .environment import Environment, Value, ValueType
from .nodes import (
    AssignNode,
    BinaryOpNode,
    BlockNode,
    BoolNode,
    FloatNode,
    ForNode,
    IfElseNode,
    IntNode,
    Node,
    StringNode,
    UnaryOpNode,
    VarNode,
    WhileNode,
)


class EvalError(Exception):
    """Raised when a program cannot be evaluated."""


_ARITHMETIC: dict[str, Callable] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}
_LOGIC: dict[str, Callable] = {
    "&&": lambda a, b: bool(a) and bool(b),
    "||": lambda a, b: bool(a) or bool(b),
}
_COMPARISON: dict[str, Callable] = {
    "==": operator.eq,
    "!=": operator.ne,
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
}
_EQUALITY = frozenset({"==", "!="})
_NUMERIC = frozenset({ValueType.INT, ValueType.FLOAT, ValueType.BOOL})
_NOTHING = Value.int_(0)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def eval_unary_op(expr: Value, op: str) -> Value:
    """Apply a prefix operator to a value."""
    kind = expr.type
    if kind is ValueType.INT:
        if op == "!":
            return Value.int_(not expr.data)
        if op == "+":
            return Value.int_(expr.data)
        if op == "-":
            return Value.int_(-expr.data)
    elif kind is ValueType.FLOAT:
        if op == "!":
            return Value.float_(0.0 if expr.data else 1.0)
        if op == "+":
            return Value.float_(expr.data)
        if op == "-":
            return Value.float_(-expr.data)
    elif kind is ValueType.BOOL and op == "!":
        return Value.bool_(not expr.data)
    raise EvalError(f"operator {op!r} does not apply to {kind.value}")


def eval_binary_op(left: Value, right: Value, op: str) -> Value:
    """Apply an infix operator to two values, promoting int to float."""
    if left.type is ValueType.FLOAT and right.type is ValueType.INT:
        right = Value.float_(right.data)
    elif left.type is ValueType.INT and right.type is ValueType.FLOAT:
        left = Value.float_(left.data)

    if (left.type is ValueType.STRING) != (right.type is ValueType.STRING):
        raise EvalError(f"cannot combine {left.type.value} and {right.type.value}")
    if ValueType.FLOAT in (left.type, right.type) and left.type is not right.type:
        raise EvalError(f"cannot combine {left.type.value} and {right.type.value}")

    kind = left.type
    a, b = left.data, right.data

    if kind is ValueType.INT:
        if op in _ARITHMETIC:
            return Value.int_(_ARITHMETIC[op](int(a), int(b)))
        if op == "/":
            if b == 0:
                raise EvalError("division by zero")
            return Value.int_(_truncating_div(int(a), int(b)))
    elif kind is ValueType.FLOAT:
        if op in _ARITHMETIC:
            return Value.float_(_ARITHMETIC[op](a, b))
        if op == "/":
            if b == 0.0:
                raise EvalError("division by zero")
            return Value.float_(a / b)
    elif kind is ValueType.STRING:
        if op == "+":
            return Value.string(a + b)
        if op in _EQUALITY:
            return Value.bool_(_COMPARISON[op](a, b))

    if kind in _NUMERIC:
        if op in _LOGIC:
            return Value.bool_(_LOGIC[op](a, b))
        if op in _COMPARISON and (kind is not ValueType.BOOL or op in _EQUALITY):
            return Value.bool_(_COMPARISON[op](a, b))

    raise EvalError(f"operator {op!r} does not apply to {kind.value}")


def _condition(cond: Node, env: Environment) -> bool:
    value = evaluate(cond, env)
    if value.type is not ValueType.BOOL:
        raise EvalError(f"condition must be bool, not {value.type.value}")
    return bool(value.data)


def evaluate(node: Node, env: Environment) -> Value:
    """Evaluate ``node`` in ``env`` and return its value."""
    match node:
        case IntNode(value):
            return Value.int_(value)
        case FloatNode(value):
            return Value.float_(value)
        case BoolNode(value):
            return Value.bool_(value)
        case StringNode(value):
            return Value.string(value)
        case VarNode(name):
            found = env.get(name)
            if found is None:
                raise EvalError(f"undefined variable {name!r}")
            return found
        case AssignNode(left, right):
            if not isinstance(left, VarNode):
                raise EvalError("assignment target must be a variable")
            value = evaluate(right, env)
            env.insert(left.name, value)
            return value
        case UnaryOpNode(expr, op):
            return eval_unary_op(evaluate(expr, env), op)
        case BinaryOpNode(left, right, op):
            left_value = evaluate(left, env)
            right_value = evaluate(right, env)
            return eval_binary_op(left_value, right_value, op)
        case BlockNode(nodes):
            result = _NOTHING
            for child in nodes:
                result = evaluate(child, env)
            return result
        case IfElseNode(cond, then_block, else_block):
            if _condition(cond, env):
                return evaluate(then_block, env)
            if else_block is not None:
                return evaluate(else_block, env)
            return _NOTHING
        case WhileNode(cond, body):
            # The condition is evaluated once before the loop proper.
            evaluate(cond, env)
            while _condition(cond, env):
                evaluate(body, env)
            return _NOTHING
        case ForNode(init, cond, incr, body):
            evaluate(init, env)
            while _condition(cond, env):
                evaluate(body, env)
                evaluate(incr, env)
            return _NOTHING
    raise EvalError(f"cannot evaluate {type(node).__name__}")