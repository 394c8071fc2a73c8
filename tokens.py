"""Token definitions for the lexer.

This module defines the `TokenType` enum for the closed set of token kinds
recognized by the lexer and a small frozen `Token` dataclass that holds a
token type and the exact lexeme it was scanned from. Tokens are the atomic
units produced by the lexer and consumed by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field


class TokenType(Enum):
    # Keywords
    KEYWORD_INT = auto()

    # Literals
    IDENTIFIER = auto()
    INTEGER = auto()

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    ASSIGN = auto()
    SEMICOLON = auto()

    # Special
    EOF = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        """Long name used in token dumps (e.g. `OPERATOR_PLUS`)."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    TokenType.KEYWORD_INT: "KEYWORD_INT",
    TokenType.IDENTIFIER: "IDENTIFIER",
    TokenType.INTEGER: "INTEGER_LITERAL",
    TokenType.PLUS: "OPERATOR_PLUS",
    TokenType.MINUS: "OPERATOR_MINUS",
    TokenType.STAR: "OPERATOR_MULTIPLY",
    TokenType.SLASH: "OPERATOR_DIVIDE",
    TokenType.ASSIGN: "OPERATOR_ASSIGN",
    TokenType.SEMICOLON: "PUNCTUATION_SEMICOLON",
    TokenType.EOF: "END_OF_FILE",
    TokenType.UNKNOWN: "UNKNOWN",
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str = ""
    # Source position of the first character; not part of token identity.
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"
