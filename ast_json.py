"""Convert tokens and AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a flat node table
describing the AST, plus `tokens_to_json` for a token stream. Tokens keep
their exact lexeme text; numbers are not reinterpreted here.

The tree is encoded as `{"root": 0, "nodes": [...]}` where each node dict
refers to its children by index into `nodes`. Long `+`/`-` chains nest
deeply, and a flat table keeps the output within the `json` encoder's
nesting limit.
"""

from typing import Any, Dict, Iterable, List, Optional
from ast_nodes import *
from tokens import Token


def token_to_json(token: Token) -> Dict[str, Any]:
    return {
        "type": token.type.name,
        "value": token.value,
        "line": token.line,
        "column": token.column,
    }


def tokens_to_json(tokens: Iterable[Token]) -> List[Dict[str, Any]]:
    return [token_to_json(t) for t in tokens]


def ast_to_json(node: Optional[Node]) -> Any:
    if node is None:
        return None

    nodes: List[Optional[Dict[str, Any]]] = []

    def reserve() -> int:
        nodes.append(None)
        return len(nodes) - 1

    stack = [(node, reserve())]
    while stack:
        n, index = stack.pop()
        match n:
            case NumberNode(token=token):
                nodes[index] = {"node_type": "Number", "value": token.value}
            case BinaryOpNode(left=left, right=right):
                left_index, right_index = reserve(), reserve()
                nodes[index] = {
                    "node_type": "BinaryOp",
                    "operator": n.op,
                    "left": left_index,
                    "right": right_index,
                }
                stack.append((right, right_index))
                stack.append((left, left_index))
            case VarDeclNode(expression=expr):
                expr_index = reserve()
                nodes[index] = {
                    "node_type": "VarDecl",
                    "var_type": n.type_name,
                    "var_name": n.name,
                    "expression": expr_index,
                }
                stack.append((expr, expr_index))
            case _:
                raise TypeError(f"Cannot serialize {type(n).__name__}")

    return {"root": 0, "nodes": nodes}
