"""
Canonical string rendering of Lox expression trees.

Every node is wrapped in parentheses and tagged with its kind, e.g.
``(Binary * (Unary - (Literal 123)) (Grouping (Literal "string literal")))``.
Used for diagnostics and for comparing trees in tests.
"""

from typing import Iterable

from .ast_nodes import Binary, Expr, Grouping, Literal, Unary
from .visitor import Visitor


class AstPrinter(Visitor[str]):
    """Renders an expression as a fully parenthesized string."""

    def render(self, expr: Expr) -> str:
        return self.visit_expression(expr)

    def render_all(self, exprs: Iterable[Expr]) -> str:
        """Render several expressions, one per line."""
        return "\n".join(self.render(expr) for expr in exprs)

    def visit_binary(self, expr: Binary) -> str:
        return (f"(Binary {expr.operator} {self.visit_expression(expr.left)} "
                f"{self.visit_expression(expr.right)})")

    def visit_unary(self, expr: Unary) -> str:
        return f"(Unary {expr.operator} {self.visit_expression(expr.right)})"

    def visit_grouping(self, expr: Grouping) -> str:
        return f"(Grouping {self.visit_expression(expr.expression)})"

    def visit_literal(self, expr: Literal) -> str:
        return f"(Literal {expr.value})"
