"""Graphviz visualization helpers for the AST.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Each AST node becomes one box; edges are labelled with the child role
(`value`, `left`, `right`).
"""

from typing import Optional
from ast_nodes import *
from graphviz import Digraph


def _node_label(node: ASTNode) -> str:
    match node:
        case NumberNode(token=token):
            return f"Number\\n{token.value}"
        case BinaryOpNode():
            return f"BinaryOp\\n{node.op}"
        case VarDeclNode():
            return f"VarDecl\\n{node.type_name} {node.name}"
        case _:
            return type(node).__name__


def render_ast_dot(node: Optional[Node]) -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    The returned object is not rendered; call `dot.source` to inspect the
    DOT text or `dot.render(filename, format=...)` to write files (requires
    Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("node", shape="box", fontname="Helvetica")
    if node is None:
        return dot

    # (node, parent name, edge label); explicit stack since `+`/`-` chains
    # nest deeply on the left.
    stack = [(node, None, None)]
    counter = 0
    while stack:
        n, parent, role = stack.pop()
        name = f"n{counter}"
        counter += 1
        dot.node(name, label=_node_label(n))
        if parent is not None:
            dot.edge(parent, name, label=role)
        match n:
            case BinaryOpNode(left=left, right=right):
                stack.append((right, name, "right"))
                stack.append((left, name, "left"))
            case VarDeclNode(expression=expr):
                stack.append((expr, name, "value"))

    return dot


def write_and_render(node: Node, out_path: str, fmt: str = "svg") -> None:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(ast, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # render appends the extension automatically
    dot.render(out_path, cleanup=True)
