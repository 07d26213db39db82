"""
Token definitions for the Lox scanner.

This module defines the closed set of token types, including:
- Single and double character punctuation/operators
- Literal-bearing kinds (identifiers, strings, numbers)
- Reserved keywords
- End of input

Each TokenType's value is its canonical display text, used in diagnostics.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Union


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Member values double as the canonical rendering of the kind.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # ========================================================================
    # Literals (payload lives in Token.literal)
    # ========================================================================
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FUN = "fun"
    FOR = "for"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    # ========================================================================
    # Special
    # ========================================================================
    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


LiteralPayload = Union[float, str]


def format_number(value: float) -> str:
    """Render a float the way Lox source would spell it (``123``, ``1.5``)."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Literal-bearing kinds carry their decoded payload in ``literal``; it is
    decoded once by the scanner and never re-parsed downstream.
    """
    type: TokenType
    line: int                                   # 1-based source line
    literal: Optional[LiteralPayload] = None

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER:
            return format_number(self.literal)
        if self.type == TokenType.STRING:
            return f'"{self.literal}"'
        if self.type == TokenType.IDENTIFIER:
            return self.literal
        return self.type.value

    def __repr__(self) -> str:
        if self.literal is not None:
            return f"Token({self.type.name}, {self.literal!r}, line={self.line})"
        return f"Token({self.type.name}, line={self.line})"

    @property
    def is_literal(self) -> bool:
        """Check if this token can be turned directly into a literal node."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved keyword."""
        return self.type.value in KEYWORDS


# Lookup table used by the scanner for keyword recognition
KEYWORDS = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

LITERAL_TYPES = frozenset({
    TokenType.NUMBER,
    TokenType.STRING,
    TokenType.TRUE,
    TokenType.FALSE,
    TokenType.NIL,
})

# Operators that may be followed by '=' to form a two-character operator
COMPOUND_OPERATORS = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "/": TokenType.SLASH,
    "*": TokenType.STAR,
}
