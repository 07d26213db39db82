"""
Lox Recursive Descent Parser

One method per grammar rule, nested from lowest to highest binding power:

    expression  := equality
    equality    := comparison ( ( "!=" | "==" ) comparison )*
    comparison  := term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        := factor ( ( "-" | "+" ) factor )*
    factor      := unary ( ( "/" | "*" ) unary )*
    unary       := ( "!" | "-" ) unary | primary
    primary     := NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"

Every binary level shares one left-associative loop, so precedence falls
out of the call structure without a precedence table.
"""

import logging
from typing import Callable, FrozenSet, Iterable, List, Optional

from ..lexer.tokens import Token, TokenType
from .ast_nodes import Binary, Expr, Grouping, Literal, LiteralValue, Unary
from .errors import (
    ParseError, UnterminatedParentheses, NonPrimaryToken, EmptyPrimary,
    EmptyExpression, SyntaxErrorRecovery
)

logger = logging.getLogger(__name__)

EQUALITY_OPERATORS = frozenset({TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL})
COMPARISON_OPERATORS = frozenset({
    TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL
})
TERM_OPERATORS = frozenset({TokenType.MINUS, TokenType.PLUS})
FACTOR_OPERATORS = frozenset({TokenType.SLASH, TokenType.STAR})
UNARY_OPERATORS = frozenset({TokenType.BANG, TokenType.MINUS})


class Parser:
    """
    Lox expression parser.

    Owns its own copy of the token sequence and a cursor into it. Build a new
    Parser for every token sequence; nothing carries over between instances.
    """

    def __init__(self, tokens: Iterable[Token]):
        """
        Initialize parser with a token sequence.

        Args:
            tokens: Tokens from the scanner, normally ending with EOF
        """
        self.tokens: List[Token] = list(tokens)
        self.current = 0
        self.errors: List[ParseError] = []
        # Line of the most recently consumed token
        self.prev_line: Optional[int] = None

    def parse(self) -> Expr:
        """
        Parse a single expression.

        Returns:
            Root of the expression tree

        Raises:
            ParseError: On the first syntax error
        """
        return self._expression()

    def parse_all(self) -> List[Expr]:
        """
        Parse top-level expressions until the end of input.

        Errors do not stop parsing: each one is recorded in ``self.errors``
        and the parser resynchronizes before trying the next expression.

        Returns:
            The expressions that parsed successfully, in order
        """
        expressions = []

        while not self.is_at_end():
            try:
                expressions.append(self.parse())
            except ParseError as e:
                self.errors.append(e)
                logger.debug("Synchronizing after syntax error: %s", e)
                self.synchronize()

        logger.debug("Parsed %d expressions with %d errors", len(expressions), len(self.errors))
        return expressions

    def synchronize(self):
        """
        Discard tokens up to the next statement-leading keyword.

        The current token is always discarded first. The EOF token is never
        discarded.
        """
        self.current = SyntaxErrorRecovery.synchronize_to_statement_boundary(
            self.tokens, self.current
        )

    def is_at_end(self) -> bool:
        """Check if no tokens remain apart from EOF."""
        token = self._peek()
        return token is None or token.type == TokenType.EOF

    def has_errors(self) -> bool:
        """Check if parse_all recorded any errors."""
        return len(self.errors) > 0

    # Grammar rules, lowest precedence first

    def _expression(self) -> Expr:
        return self._equality()

    def _equality(self) -> Expr:
        return self._binary(self._comparison, EQUALITY_OPERATORS)

    def _comparison(self) -> Expr:
        return self._binary(self._term, COMPARISON_OPERATORS)

    def _term(self) -> Expr:
        return self._binary(self._factor, TERM_OPERATORS)

    def _factor(self) -> Expr:
        return self._binary(self._unary, FACTOR_OPERATORS)

    def _binary(self, operand: Callable[[], Expr], operators: FrozenSet[TokenType]) -> Expr:
        """Parse ``operand (operator operand)*`` folding to the left."""
        expr = operand()

        while self._check(operators):
            operator = self._advance()
            right = operand()
            expr = Binary(expr, operator, right)

        return expr

    def _unary(self) -> Expr:
        if self._check(UNARY_OPERATORS):
            operator = self._advance()
            right = self._unary()
            return Unary(operator, right)

        return self._primary()

    def _primary(self) -> Expr:
        if self.is_at_end():
            raise EmptyPrimary(self._last_line())

        token = self._peek()

        if token.type == TokenType.LEFT_PAREN:
            return self._grouping()

        if token.type == TokenType.FALSE:
            return self._literal(LiteralValue.boolean(False))
        if token.type == TokenType.TRUE:
            return self._literal(LiteralValue.boolean(True))
        if token.type == TokenType.NIL:
            return self._literal(LiteralValue.nil())
        if token.type == TokenType.NUMBER:
            return self._literal(LiteralValue.number(token.literal))
        if token.type == TokenType.STRING:
            return self._literal(LiteralValue.string(token.literal))

        raise NonPrimaryToken(token)

    def _grouping(self) -> Grouping:
        """Parse ``"(" expression ")"``; the current token is the '('."""
        open_paren = self._advance()

        if self._check({TokenType.RIGHT_PAREN}):
            raise EmptyExpression(self._peek().line)

        expr = self._expression()

        if self._check({TokenType.RIGHT_PAREN}):
            self._advance()
            return Grouping(expr)

        next_token = self._peek()
        line = next_token.line if next_token is not None else self._last_line()
        raise UnterminatedParentheses(line, open_paren.line)

    def _literal(self, value: LiteralValue) -> Literal:
        self._advance()
        return Literal(value)

    # Utility methods

    def _check(self, token_types) -> bool:
        """Check if the current token is one of ``token_types`` without consuming."""
        token = self._peek()
        return token is not None and token.type in token_types

    def _advance(self) -> Token:
        """Consume and return the current token."""
        token = self.tokens[self.current]
        self.current += 1
        self.prev_line = token.line
        return token

    def _peek(self) -> Optional[Token]:
        """Return the current token, or None past the end of the list."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None

    def _last_line(self) -> int:
        """Line of the last consumed token, falling back to the EOF token's."""
        if self.prev_line is not None:
            return self.prev_line
        token = self._peek()
        return token.line if token is not None else 1


def parse_string(source: str) -> Expr:
    """
    Convenience function to parse one expression from a source string.

    Raises:
        ScanErrors: If the source has lexical errors
        ParseError: If the expression is malformed
    """
    from ..lexer import scan_all

    return Parser(scan_all(source)).parse()
