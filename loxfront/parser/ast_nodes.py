"""
Abstract Syntax Tree node definitions for Lox expressions.

The expression tree is a closed sum of four node kinds. Nodes are immutable
and compare structurally, so two parses of the same tokens produce equal
trees. Consumers walk the tree through the contracts in ``visitor``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..lexer.tokens import Token, format_number


class LiteralKind(Enum):
    """Discriminant of a literal value."""
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    NIL = "nil"


@dataclass(frozen=True)
class LiteralValue:
    """
    A literal value: a number, string, boolean or nil.

    Build instances through the constructors below rather than by passing
    ``kind`` by hand.
    """
    kind: LiteralKind
    value: Optional[Union[float, str, bool]] = None

    @classmethod
    def number(cls, value: float) -> "LiteralValue":
        return cls(LiteralKind.NUMBER, float(value))

    @classmethod
    def string(cls, value: str) -> "LiteralValue":
        return cls(LiteralKind.STRING, value)

    @classmethod
    def boolean(cls, value: bool) -> "LiteralValue":
        return cls(LiteralKind.BOOLEAN, bool(value))

    @classmethod
    def nil(cls) -> "LiteralValue":
        return cls(LiteralKind.NIL)

    @classmethod
    def from_python(cls, value: Optional[Union[float, int, str, bool]]) -> "LiteralValue":
        """Wrap a raw Python value; ``None`` becomes nil."""
        # bool first: it is a subclass of int
        if value is None:
            return cls.nil()
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, (int, float)):
            return cls.number(value)
        if isinstance(value, str):
            return cls.string(value)
        raise TypeError(f"Cannot make a literal from {type(value).__name__}")

    def __str__(self) -> str:
        if self.kind == LiteralKind.NUMBER:
            return format_number(self.value)
        if self.kind == LiteralKind.STRING:
            return f'"{self.value}"'
        if self.kind == LiteralKind.BOOLEAN:
            return "true" if self.value else "false"
        return "nil"


@dataclass(frozen=True)
class Binary:
    """Binary operation: ``left operator right``."""
    left: "Expr"
    operator: Token
    right: "Expr"


@dataclass(frozen=True)
class Unary:
    """Prefix operation: ``operator right``."""
    operator: Token
    right: "Expr"


@dataclass(frozen=True)
class Grouping:
    """An explicitly parenthesized sub-expression, kept as its own node."""
    expression: "Expr"


@dataclass(frozen=True)
class Literal:
    """A literal number, string, boolean or nil."""
    value: LiteralValue

    @classmethod
    def of(cls, value: Optional[Union[float, int, str, bool]]) -> "Literal":
        return cls(LiteralValue.from_python(value))


Expr = Union[Binary, Unary, Grouping, Literal]

