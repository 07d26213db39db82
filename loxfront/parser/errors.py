"""
Error handling for the Lox parser.

Syntax errors form a closed set of ParseError subclasses. Each exposes the
source line it pertains to so drivers can format every error the same way.
Also holds the token set used to resynchronize after an error.
"""

from typing import List, Optional

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Base class for syntax errors.

    Subclasses set ``code`` and build their own one-line message.
    """

    code: str = ""

    def __init__(self, message: str, line: int, help_text: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            severity="error",
            code=self.code,
            help_text=help_text,
        )

    def __str__(self) -> str:
        return self.message


class UnterminatedParentheses(ParseError):
    """A '(' whose matching ')' never arrived."""

    code = "P001"

    def __init__(self, line: int, open_line: int):
        super().__init__(
            f"Parser Error: Expecting terminating parentheses at line {line}, "
            f"unterminated parentheses located at line {open_line}",
            line,
            f"The opening '(' at line {open_line} was never closed; add a closing ')'.",
        )
        self.open_line = open_line


class NonPrimaryToken(ParseError):
    """A token that cannot begin an expression, found where one was expected."""

    code = "P002"

    def __init__(self, token: Token):
        super().__init__(
            f"Parser Error: Unsupported token {token} at line {token.line}",
            token.line,
            "Expressions start with a number, string, true, false, nil, '(', '!' or '-'.",
        )
        self.token = token


class EmptyPrimary(ParseError):
    """The token stream ended where an expression was expected."""

    code = "P003"

    def __init__(self, line: int):
        super().__init__(
            f"Parser Error: Expecting a token here at line {line}, none found.",
            line,
            "The input ended in the middle of an expression.",
        )


class EmptyExpression(ParseError):
    """A parenthesized group with nothing inside it."""

    code = "P004"

    def __init__(self, line: int):
        super().__init__(
            f"Parser Error: Empty expressions are illegal, found at line {line}",
            line,
            "Parentheses must contain an expression.",
        )


class SyntaxErrorRecovery:
    """
    Utilities for error recovery in the parser.

    After a syntax error the parser skips ahead to a token that plausibly
    starts a new top-level construct, so one mistake does not cascade.
    """

    # Keywords that begin a statement or declaration
    STATEMENT_BOUNDARIES = frozenset({
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    })

    @staticmethod
    def synchronize_to_statement_boundary(tokens: List[Token], current_pos: int) -> int:
        """
        Find where to resume parsing after an error.

        The token at ``current_pos`` is always skipped. Returns the position
        of the next statement boundary, of the EOF token, or ``len(tokens)``.
        """
        if current_pos < len(tokens) and tokens[current_pos].type != TokenType.EOF:
            current_pos += 1

        while current_pos < len(tokens):
            token = tokens[current_pos]
            if token.type == TokenType.EOF:
                return current_pos
            if token.type in SyntaxErrorRecovery.STATEMENT_BOUNDARIES:
                return current_pos
            current_pos += 1

        return current_pos


# Parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unterminated parentheses",
    "P002": "Token cannot start an expression",
    "P003": "Unexpected end of input",
    "P004": "Empty parenthesized expression",
}
