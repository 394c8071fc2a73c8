"""Pretty-printer for tokens and the AST.

Provides `PrettyPrinter.print_ast(node, indent)` which renders an AST into a
readable multi-line string, `PrettyPrinter.print_tokens(tokens)` for a token
dump, and `PrettyPrinter.print_surface(node)` for a one-line source-like
rendering. The printer is intended for debugging, tests and development.

Long `+`/`-` chains nest deeply on the left, so both tree printers walk the
tree with an explicit work stack rather than recursing.

Examples:
    PrettyPrinter.print_ast(var_decl_node)
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Tuple, Union
from ast_nodes import *
from tokens import Token


class PrettyPrinter:
    @staticmethod
    def print_tokens(tokens: Iterable[Token]) -> str:
        """Render one `Type: ..., Value: '...'` line per token."""
        return "\n".join(
            f"Type: {token.type.display_name}, Value: '{token.value}'"
            for token in tokens
        )

    @staticmethod
    def print_ast(node: Optional[Node], indent: int = 0) -> str:
        """Pretty print an AST node and return as string."""
        if node is None:
            return ""

        lines = []
        # Items are (node or heading text, indent level), popped in order.
        stack: List[Tuple[Union[ASTNode, str], int]] = [(node, indent)]
        while stack:
            item, level = stack.pop()
            indent_str = "  " * level

            match item:
                case str():
                    lines.append(f"{indent_str}{item}")

                case VarDeclNode(expression=expr):
                    lines.append(f"{indent_str}VarDecl: {item.name} ({item.type_name})")
                    stack.append((expr, level + 2))
                    stack.append(("Value:", level + 1))

                case BinaryOpNode(left=left, right=right):
                    lines.append(f"{indent_str}BinaryOp: {item.op}")
                    stack.append((right, level + 2))
                    stack.append(("Right:", level + 1))
                    stack.append((left, level + 2))
                    stack.append(("Left:", level + 1))

                case NumberNode(token=token):
                    lines.append(f"{indent_str}Number: {token.value}")

                case _:
                    lines.append(f"{indent_str}Unknown node type: {type(item)}")

        return "\n".join(lines)

    @staticmethod
    def print_surface(node: Optional[Node]) -> str:
        """Return a compact, source-like one-line representation of an AST node.

        Left-nested operations print without parentheses since they already
        group to the left; a right operand that is itself an operation is
        parenthesized.
        """
        if node is None:
            return ""

        match node:
            case NumberNode(token=token):
                return token.value
            case BinaryOpNode():
                # Collect the left spine, then emit it from the innermost operand out.
                tail = []
                current: ASTNode = node
                while isinstance(current, BinaryOpNode):
                    tail.append(current)
                    current = current.left
                parts = [PrettyPrinter.print_surface(current)]
                for op_node in reversed(tail):
                    rhs = PrettyPrinter.print_surface(op_node.right)
                    if isinstance(op_node.right, BinaryOpNode):
                        rhs = f"({rhs})"
                    parts.append(f"{op_node.op} {rhs}")
                return " ".join(parts)
            case VarDeclNode(expression=expr):
                return f"{node.type_name} {node.name} = {PrettyPrinter.print_surface(expr)};"
            case _:
                return " ".join(
                    line.strip() for line in PrettyPrinter.print_ast(node).splitlines()
                )
