"""AST node definitions for the integer declaration language.

This module defines the three AST node dataclasses built by the parser:
`NumberNode`, `BinaryOpNode` and `VarDeclNode`. The `NodeType` enum tags
each node kind; the pretty-printer, JSON encoder and visualizer match on
the node classes (or on `node.type`).

Conventions:
- Nodes are frozen dataclasses and keep the tokens they were built from,
    so the exact source lexemes stay available to later consumers.
- Each composite node owns its children; the tree has no back-references.
- Constructors validate the token kinds they are given and raise
    `ValueError` on a mismatch. The parser only builds valid nodes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union
from tokens import Token, TokenType


class NodeType(Enum):
    NUMBER = auto()
    BINARY_OP = auto()
    VAR_DECL = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    pass


# Expression Nodes
@dataclass(frozen=True)
class NumberNode(ASTNode):
    token: Token
    type: NodeType = field(default=NodeType.NUMBER, init=False)

    def __post_init__(self) -> None:
        if self.token.type != TokenType.INTEGER:
            raise ValueError(f"Number node needs an INTEGER token, got {self.token}")

    @property
    def value(self) -> int:
        return int(self.token.value)


# Long `a + b - c ...` chains nest arbitrarily deep on the left, so equality,
# hashing and repr walk the tree with an explicit stack instead of recursing.
@dataclass(frozen=True, eq=False, repr=False)
class BinaryOpNode(ASTNode):
    left: Expression
    operator: Token
    right: Expression
    type: NodeType = field(default=NodeType.BINARY_OP, init=False)

    def __post_init__(self) -> None:
        if self.operator.type not in (TokenType.PLUS, TokenType.MINUS):
            raise ValueError(f"Unsupported binary operator {self.operator}")
        if self.left is None or self.right is None:
            raise ValueError("Binary operation needs both operands")

    @property
    def op(self) -> str:
        return self.operator.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryOpNode):
            return NotImplemented
        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if isinstance(a, BinaryOpNode) and isinstance(b, BinaryOpNode):
                if a.operator != b.operator:
                    return False
                stack.append((a.right, b.right))
                stack.append((a.left, b.left))
            elif isinstance(a, BinaryOpNode) or isinstance(b, BinaryOpNode):
                return False
            elif a != b:
                return False
        return True

    def __hash__(self) -> int:
        # Pre-order token sequence; operator arity is fixed so it is unambiguous.
        items = []
        stack = [self]
        while stack:
            n = stack.pop()
            if isinstance(n, BinaryOpNode):
                items.append(n.operator)
                stack.append(n.right)
                stack.append(n.left)
            else:
                items.append(n)
        return hash(tuple(items))

    def __repr__(self) -> str:
        parts = []
        stack: list = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, BinaryOpNode):
                parts.append("BinaryOpNode(left=")
                stack.append(")")
                stack.append(item.right)
                stack.append(f", operator={item.operator!r}, right=")
                stack.append(item.left)
            else:
                parts.append(repr(item))
        return "".join(parts)


# Statement Nodes
@dataclass(frozen=True)
class VarDeclNode(ASTNode):
    var_type: Token
    identifier: Token
    expression: Expression
    type: NodeType = field(default=NodeType.VAR_DECL, init=False)

    def __post_init__(self) -> None:
        if self.var_type.type != TokenType.KEYWORD_INT:
            raise ValueError(f"Unsupported declaration type {self.var_type}")
        if self.identifier.type != TokenType.IDENTIFIER:
            raise ValueError(f"Expected identifier token, got {self.identifier}")
        if self.expression is None:
            raise ValueError("Variable declaration needs an initializer")

    @property
    def name(self) -> str:
        return self.identifier.value

    @property
    def type_name(self) -> str:
        return self.var_type.value


Expression = Union[NumberNode, BinaryOpNode]
Node = Union[NumberNode, BinaryOpNode, VarDeclNode]
