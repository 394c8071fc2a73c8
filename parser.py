"""
Parser for the integer declaration language.

Overview and approach:
- This parser is a small hand-written recursive-descent parser. Each grammar
    rule is one method and the call structure mirrors the grammar:

        statement           := variable_declaration
        variable_declaration := 'int' IDENTIFIER '=' expression ';'
        expression          := term (('+' | '-') term)*
        term                := INTEGER

- `+` and `-` share one precedence level and fold to the left, so
    `10 + 20 - 5` parses as `(10 + 20) - 5`. `*` and `/` are lexed but no rule
    accepts them.

Error handling:
- Grammar violations are not raised. A rule that cannot finish returns
    `None` and the rule that noticed the problem records a `ParseError`
    (rule name, expected token type, token found). `None` short-circuits every
    enclosing rule, and `parse()` returns a `ParseResult` holding either the
    tree or the last recorded error.
- The parser never rewinds: tokens are committed as soon as they are consumed.

Examples:
    Parser(Lexer("int x = 1 + 2;").tokenize()).parse().node
    -> VarDeclNode(x, BinaryOpNode(Number(1), +, Number(2)))
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence
from tokens import Token, TokenType
from ast_nodes import BinaryOpNode, Expression, Node, NumberNode, VarDeclNode


@dataclass(frozen=True)
class ParseError:
    rule: str
    expected: TokenType
    found: Token
    message: str

    def __str__(self) -> str:
        found = self.found.value if self.found.value else str(self.found.type)
        # Tokens synthesized by the parser carry no source position.
        where = ""
        if self.found.line:
            where = f" at line {self.found.line}, column {self.found.column}"
        return f"Parse error{where}: {self.message} (found {found!r})"


@dataclass(frozen=True)
class ParseResult:
    node: Optional[Node] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.node is not None


class Parser:
    def __init__(self, tokens: Sequence[Token]):
        self.tokens: List[Token] = list(tokens) or [Token(TokenType.EOF, "")]
        self.pos = 0
        self.errors: List[ParseError] = []
        self._parsed = False
        self._logger = logging.getLogger("Parser")

    def peek(self) -> Token:
        """Return current token without consuming it."""
        # Clamp to the last token (EOF) if the cursor somehow overruns.
        return self.tokens[min(self.pos, len(self.tokens) - 1)]

    def advance(self) -> None:
        """Move to next token, staying on the final token once reached."""
        if self.pos < len(self.tokens) - 1:
            self.pos += 1

    def check(self, token_type: TokenType) -> bool:
        return self.peek().type == token_type

    def error(self, rule: str, expected: TokenType, message: str) -> None:
        """Record a grammar violation at the current token."""
        err = ParseError(rule=rule, expected=expected, found=self.peek(), message=message)
        self.errors.append(err)
        self._logger.debug("%s", err)

    def parse_term(self) -> Optional[NumberNode]:
        """Parse term: INTEGER. Returns None without a diagnostic otherwise."""
        token = self.peek()
        if token.type == TokenType.INTEGER:
            self.advance()
            return NumberNode(token)
        return None

    def parse_expression(self) -> Optional[Expression]:
        """Parse expression: term (('+' | '-') term)*"""
        left: Optional[Expression] = self.parse_term()
        if left is None:
            self.error("expression", TokenType.INTEGER, "expected a number after '='")
            return None

        while self.peek().type in (TokenType.PLUS, TokenType.MINUS):
            operator = self.peek()
            self.advance()
            right = self.parse_term()
            if right is None:
                self.error(
                    "expression",
                    TokenType.INTEGER,
                    "expected a number or identifier after operator",
                )
                return None
            left = BinaryOpNode(left=left, operator=operator, right=right)

        return left

    def parse_variable_declaration(self) -> Optional[VarDeclNode]:
        """Parse variable declaration: 'int' identifier '=' expression ';'"""
        var_type = self.peek()
        self.advance()

        if not self.check(TokenType.IDENTIFIER):
            self.error(
                "variable_declaration",
                TokenType.IDENTIFIER,
                "expected identifier after int",
            )
            return None
        identifier = self.peek()
        self.advance()

        if not self.check(TokenType.ASSIGN):
            self.error("variable_declaration", TokenType.ASSIGN, "expected equals sign")
            return None
        self.advance()

        expression = self.parse_expression()
        if expression is None:
            return None

        if not self.check(TokenType.SEMICOLON):
            self.error(
                "variable_declaration", TokenType.SEMICOLON, "expected semicolon"
            )
            return None
        self.advance()

        return VarDeclNode(
            var_type=var_type, identifier=identifier, expression=expression
        )

    def parse_statement(self) -> Optional[Node]:
        """Parse a statement. Only variable declarations are supported."""
        if self.check(TokenType.KEYWORD_INT):
            return self.parse_variable_declaration()
        self.error("statement", TokenType.KEYWORD_INT, "no valid statement")
        return None

    def parse(self) -> ParseResult:
        """Parse a single statement from the token sequence."""
        if self._parsed:
            raise RuntimeError("Parser.parse() may only be called once")
        self._parsed = True

        node = self.parse_statement()
        if node is None:
            return ParseResult(error=self.errors[-1])
        return ParseResult(node=node)
