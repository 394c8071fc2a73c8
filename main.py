from __future__ import annotations
import json
import logging
from typing import List, Optional
from lexer import Lexer
from tokens import Token
from parser import Parser, ParseResult
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json, tokens_to_json
from ast_viz import write_and_render

SAMPLE_PROGRAM = "int result = 10 + 20;"


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token]) -> ParseResult:
    """Parse tokens into AST."""
    parser = Parser(tokens)
    return parser.parse()


def parse_text(text: str) -> ParseResult:
    """Lex and parse a source text."""
    return parse_tokens(lex(text))


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = True,
    dump_json_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> bool:
    """Process a single statement: lex, parse and optionally print stages.

    Returns True when parsing succeeded.
    """
    tokens = lex(text)
    if print_tokens:
        print(f"Tokens ({len(tokens)}):")
        print(PrettyPrinter.print_tokens(tokens))

    result = parse_tokens(tokens)
    if not result.ok:
        print(f"Parsing failed: {result.error}")
        return False

    if print_ast:
        print("\nAST:")
        print(PrettyPrinter.print_ast(result.node))

    if dump_json_path:
        export = {
            "source": text,
            "tokens": tokens_to_json(tokens),
            "ast": ast_to_json(result.node),
        }
        try:
            with open(dump_json_path, "w", encoding="utf-8") as fh:
                json.dump(export, fh, indent=2)
            print(f"Wrote tokens+AST JSON to {dump_json_path}")
        except OSError as e:
            print(f"Failed to write JSON to {dump_json_path}: {e}")

    # Optionally render visualization via Graphviz
    if viz_path:
        try:
            write_and_render(result.node, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except Exception as e:
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    return True


def interactive_mode(print_tokens: bool = False, print_ast: bool = True) -> None:
    """Run an interactive REPL reading one statement per line from stdin."""
    print("\nInteractive Parser Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter statement: ").strip()
            if text.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not text:
                continue

            process_program(text, print_tokens=print_tokens, print_ast=print_ast)

        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Tokenize and parse an integer declaration from a file, "
        "interactively, or from the built-in sample"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--dump-json", dest="dump_json", help="Path to write tokens+AST JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        dest="verbose",
        action="store_true",
        help="Log lexer and parser diagnostics",
    )
    parser.set_defaults(print_tokens=False, print_ast=True)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    if args.interactive:
        interactive_mode(print_tokens=args.print_tokens, print_ast=args.print_ast)
        return 0

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1
    else:
        text = SAMPLE_PROGRAM
        print(f"Input Code:\n{text}\n")

    ok = process_program(
        text,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        dump_json_path=args.dump_json,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    import sys

    sys.exit(main())
