"""
Lexer for the integer declaration language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`.
- It recognizes the `int` keyword, identifiers, integer literals, the
    single-character operators `+ - * /`, the assignment `=` and the `;`
    terminator, and skips whitespace.

Examples:
    Input:  "int result = 10 + 20;"
    Tokens: [KEYWORD_INT, IDENTIFIER('result'), ASSIGN, INTEGER('10'), PLUS,
             INTEGER('20'), SEMICOLON, EOF]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- Checks are ordered operator -> digit -> letter -> fallback. Any character
    that matches none of them becomes a single-character UNKNOWN token, so the
    lexer never fails; rejecting bad input is left to the parser.
- Once the input is exhausted every further call returns an EOF token.
"""

from __future__ import annotations
import logging
import string
from typing import Iterator, List, Optional
from tokens import Token, TokenType

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)

SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "=": TokenType.ASSIGN,
    ";": TokenType.SEMICOLON,
}


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

        self.keywords = {
            "int": TokenType.KEYWORD_INT,
        }
        self._logger = logging.getLogger("Lexer")

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def skip_whitespace(self) -> None:
        """Skip whitespace characters."""
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def integer(self) -> str:
        """Scan a maximal run of digits, returned verbatim."""
        result = []
        while self.current_char is not None and self.current_char in DIGITS:
            result.append(self.current_char)
            self.advance()
        return "".join(result)

    def identifier(self) -> str:
        """Scan an identifier or keyword: a letter followed by letters or digits."""
        result = [self.current_char]
        self.advance()

        while self.current_char is not None and (
            self.current_char in LETTERS or self.current_char in DIGITS
        ):
            result.append(self.current_char)
            self.advance()

        return "".join(result)

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        self.skip_whitespace()

        line, column = self.line, self.column
        char: Optional[str] = self.current_char

        if char is None:
            return Token(TokenType.EOF, "", line, column)

        token_type = SINGLE_CHAR_TOKENS.get(char)
        if token_type is not None:
            self.advance()
            return Token(token_type, char, line, column)

        if char in DIGITS:
            return Token(TokenType.INTEGER, self.integer(), line, column)

        # Identifiers must start with a letter; keywords are identifiers
        # found in `self.keywords`.
        if char in LETTERS:
            ident = self.identifier()
            token_type = self.keywords.get(ident, TokenType.IDENTIFIER)
            return Token(token_type, ident, line, column)

        self._logger.debug(
            "Unknown character %r at line %d, column %d", char, line, column
        )
        self.advance()
        return Token(TokenType.UNKNOWN, char, line, column)

    def tokenize(self) -> List[Token]:
        """Return all tokens up to and including the first EOF."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens

    def __iter__(self) -> Iterator[Token]:
        """Iterate the remaining tokens; a fresh Lexer matches `tokenize()`."""
        return iter(self.tokenize())
