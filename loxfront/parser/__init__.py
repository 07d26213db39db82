"""
Lox Parser Package

Implements a recursive descent parser for Lox expressions and the
structures around it.

Key Features:
- Precedence climbing through one grammar method per level
- Immutable, structurally comparable AST nodes
- Closed, line-annotated syntax error types
- Statement-boundary synchronization for multi-expression input
- Read-only and stateful visitor contracts, plus a canonical printer
"""

from .ast_nodes import Binary, Unary, Grouping, Literal, LiteralValue, LiteralKind, Expr
from .parser import Parser, parse_string
from .errors import (
    ParseError, UnterminatedParentheses, NonPrimaryToken, EmptyPrimary, EmptyExpression,
)
from .visitor import Visitor, MutVisitor, UnhandledExpressionError
from .ast_printer import AstPrinter

__all__ = [
    # Core parser
    "Parser",
    "parse_string",

    # AST nodes
    "Expr", "Binary", "Unary", "Grouping", "Literal", "LiteralValue", "LiteralKind",

    # Traversal
    "Visitor", "MutVisitor", "UnhandledExpressionError", "AstPrinter",

    # Error handling
    "ParseError", "UnterminatedParentheses", "NonPrimaryToken", "EmptyPrimary",
    "EmptyExpression",
]
