"""
Traversal contracts for Lox expression trees.

Two separate contracts, because their users need different things:

- ``Visitor``: read-only walks (printing, inspection). Implementations
  should not change state while walking.
- ``MutVisitor``: walks that carry evolving state from node to node, such as
  an evaluator.

Both declare one abstract method per node kind, so a consumer missing a case
cannot be instantiated, and both route through one central dispatch.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .ast_nodes import Binary, Expr, Grouping, Literal, Unary

R = TypeVar("R")


class UnhandledExpressionError(TypeError):
    """Raised when a walk meets an object outside the closed node set."""

    def __init__(self, node: object):
        super().__init__(f"Unhandled expression node: {type(node).__name__}")
        self.node = node


def _dispatch(visitor, expr: Expr):
    if isinstance(expr, Binary):
        return visitor.visit_binary(expr)
    if isinstance(expr, Unary):
        return visitor.visit_unary(expr)
    if isinstance(expr, Grouping):
        return visitor.visit_grouping(expr)
    if isinstance(expr, Literal):
        return visitor.visit_literal(expr)
    raise UnhandledExpressionError(expr)


class Visitor(ABC, Generic[R]):
    """
    Read-only traversal computing an ``R`` from an expression.

    Implementations keep no state between nodes, so each result depends only
    on the subtree visited and one instance can be reused for any tree.
    """

    def visit_expression(self, expr: Expr) -> R:
        return _dispatch(self, expr)

    @abstractmethod
    def visit_binary(self, expr: Binary) -> R:
        pass

    @abstractmethod
    def visit_unary(self, expr: Unary) -> R:
        pass

    @abstractmethod
    def visit_grouping(self, expr: Grouping) -> R:
        pass

    @abstractmethod
    def visit_literal(self, expr: Literal) -> R:
        pass


class MutVisitor(ABC, Generic[R]):
    """
    Stateful traversal computing an ``R`` from an expression.

    Implementations may update their own attributes as they go; results of
    one node can depend on what earlier nodes did. Use a fresh instance per
    walk unless the accumulated state is meant to carry over.
    """

    def visit_expression(self, expr: Expr) -> R:
        return _dispatch(self, expr)

    @abstractmethod
    def visit_binary(self, expr: Binary) -> R:
        pass

    @abstractmethod
    def visit_unary(self, expr: Unary) -> R:
        pass

    @abstractmethod
    def visit_grouping(self, expr: Grouping) -> R:
        pass

    @abstractmethod
    def visit_literal(self, expr: Literal) -> R:
        pass
