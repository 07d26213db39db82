"""
Lox Front End Package

Converts Lox source text into a validated expression tree.

Architecture:
    loxfront/
    ├── lexer/           # Tokens, scanner, lexical errors
    ├── parser/          # AST, recursive descent parser, visitors, printer
    ├── config.py        # Driver configuration
    └── cli.py           # File runner and interactive prompt

The lexer and parser packages never print or exit; only the command-line
driver talks to the outside world.
"""

from ._version import __version__, __license__

from .lexer import Scanner, scan_all, Token, TokenType, ScanError, ScanErrors
from .parser import Parser, AstPrinter, ParseError, Visitor, MutVisitor

__all__ = [
    # Core classes
    "Scanner",
    "scan_all",
    "Parser",
    "AstPrinter",
    "Visitor",
    "MutVisitor",
    "Token",
    "TokenType",

    # Errors
    "ScanError",
    "ScanErrors",
    "ParseError",

    # Version info
    "__version__",
    "__license__",
]
