from tests.utils import lex, parse_text
from pretty_printer import PrettyPrinter


def test_print_ast_matches_tree_layout():
    ast = parse_text("int result = 10 + 20;").node
    assert PrettyPrinter.print_ast(ast) == "\n".join(
        [
            "VarDecl: result (int)",
            "  Value:",
            "    BinaryOp: +",
            "      Left:",
            "        Number: 10",
            "      Right:",
            "        Number: 20",
        ]
    )


def test_print_ast_of_none_is_empty():
    assert PrettyPrinter.print_ast(None) == ""


def test_print_tokens_uses_long_type_names():
    out = PrettyPrinter.print_tokens(lex("int x = 1;"))
    assert out.splitlines() == [
        "Type: KEYWORD_INT, Value: 'int'",
        "Type: IDENTIFIER, Value: 'x'",
        "Type: OPERATOR_ASSIGN, Value: '='",
        "Type: INTEGER_LITERAL, Value: '1'",
        "Type: PUNCTUATION_SEMICOLON, Value: ';'",
        "Type: END_OF_FILE, Value: ''",
    ]


def test_print_surface_round_trips_source_shape():
    ast = parse_text("int   x=1+2 -3 ;").node
    assert PrettyPrinter.print_surface(ast) == "int x = 1 + 2 - 3;"


def _chain(terms: int) -> str:
    return "int x = " + " - ".join(str(i) for i in range(terms)) + ";"


def test_print_ast_handles_long_expression():
    ast = parse_text(_chain(1200)).node
    lines = PrettyPrinter.print_ast(ast).splitlines()
    assert lines[0] == "VarDecl: x (int)"
    assert lines[2] == "    BinaryOp: -"
    assert sum(1 for line in lines if line.strip().startswith("Number:")) == 1200


def test_print_surface_handles_long_expression():
    src = _chain(3000)
    ast = parse_text(src).node
    assert PrettyPrinter.print_surface(ast) == src
