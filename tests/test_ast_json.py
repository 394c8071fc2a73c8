import json

from tests.utils import lex, parse_text
from ast_json import ast_to_json, tokens_to_json

DEEP_SRC = "int x = " + " + ".join(["1"] * 3000) + ";"


def test_ast_to_json_shape():
    ast = parse_text("int x = 1 - 2;").node
    data = ast_to_json(ast)
    assert data == {
        "root": 0,
        "nodes": [
            {"node_type": "VarDecl", "var_type": "int", "var_name": "x", "expression": 1},
            {"node_type": "BinaryOp", "operator": "-", "left": 2, "right": 3},
            {"node_type": "Number", "value": "1"},
            {"node_type": "Number", "value": "2"},
        ],
    }
    # Must be serializable as-is.
    json.dumps(data)


def test_ast_to_json_child_indices_point_at_children():
    data = ast_to_json(parse_text("int x = 1 + 2 - 3;").node)
    nodes = data["nodes"]
    outer = nodes[nodes[data["root"]]["expression"]]
    assert outer["operator"] == "-"
    assert nodes[outer["right"]] == {"node_type": "Number", "value": "3"}
    inner = nodes[outer["left"]]
    assert inner["operator"] == "+"
    assert nodes[inner["left"]]["value"] == "1"
    assert nodes[inner["right"]]["value"] == "2"


def test_ast_to_json_deep_expression_serializes():
    data = ast_to_json(parse_text(DEEP_SRC).node)
    # 1 VarDecl + 2999 BinaryOps + 3000 Numbers
    assert len(data["nodes"]) == 6000
    assert json.loads(json.dumps(data)) == data


def test_ast_to_json_none():
    assert ast_to_json(None) is None


def test_tokens_to_json_keeps_lexemes_and_positions():
    data = tokens_to_json(lex("int a"))
    assert data[0] == {"type": "KEYWORD_INT", "value": "int", "line": 1, "column": 1}
    assert data[1]["value"] == "a"
    assert data[-1]["type"] == "EOF"
