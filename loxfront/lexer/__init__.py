"""
Lox Lexer Package

Implements the lexical scanner for Lox: a single pass over the source text
with one character of lookahead, producing an EOF-terminated token list.

Key Features:
- Two-character operator disambiguation (!=, ==, <=, >=)
- Maximal-munch identifiers checked against a fixed keyword table
- Batch error reporting: every lexical error in one pass
- 1-based line tracking for diagnostics
"""

from .tokens import Token, TokenType, KEYWORDS
from .scanner import Scanner, scan_all
from .errors import (
    Diagnostic, ScanError, ScanErrors, UnknownCharacter, UnterminatedString,
    UnparseableDigit,
)

__all__ = [
    "Scanner",
    "scan_all",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "ScanError",
    "ScanErrors",
    "UnknownCharacter",
    "UnterminatedString",
    "UnparseableDigit",
]
