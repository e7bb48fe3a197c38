"""Syntax tree nodes for the expression language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Node:
    """Base class of all syntax tree nodes."""


@dataclass(frozen=True)
class IntNode(Node):
    """An integer literal."""

    value: int


@dataclass(frozen=True)
class FloatNode(Node):
    """A floating-point literal."""

    value: float


@dataclass(frozen=True)
class BoolNode(Node):
    """A boolean literal; any truthy input is stored as True."""

    value: bool

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bool(self.value))


@dataclass(frozen=True)
class StringNode(Node):
    """A string literal."""

    value: str


@dataclass(frozen=True)
class VarNode(Node):
    """A reference to a named variable."""

    name: str


@dataclass(frozen=True)
class AssignNode(Node):
    """Assignment of the value of ``right`` to the variable ``left``."""

    left: Node
    right: Node


@dataclass(frozen=True)
class UnaryOpNode(Node):
    """A prefix operator applied to one expression."""

    expr: Node
    op: str


@dataclass(frozen=True)
class BinaryOpNode(Node):
    """An infix operator applied to two expressions."""

    left: Node
    right: Node
    op: str


@dataclass(frozen=True)
class BlockNode(Node):
    """A sequence of statements; its value is that of the last one."""

    nodes: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))


@dataclass(frozen=True)
class IfElseNode(Node):
    """A conditional with an optional else branch."""

    cond: Node
    then_block: Node
    else_block: Optional[Node] = None


@dataclass(frozen=True)
class WhileNode(Node):
    """A loop that runs ``body`` while ``cond`` holds."""

    cond: Node
    body: Node


@dataclass(frozen=True)
class ForNode(Node):
    """A loop with initialiser, condition and increment."""

    init: Node
    cond: Node
    incr: Node
    body: Node