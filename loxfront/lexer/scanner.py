"""
Lox Scanner - turns source text into tokens

Walks the source one character at a time with a single character of
lookahead. Lexical errors are collected rather than raised immediately so a
whole file's problems can be reported in one pass.
"""

import logging
from typing import Iterator, List

from .tokens import (
    Token, TokenType, KEYWORDS, COMPOUND_OPERATORS, SINGLE_CHAR_TOKENS
)
from .errors import (
    ScanError, ScanErrors, UnknownCharacter, UnterminatedString, UnparseableDigit
)

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class Scanner:
    """
    Lox lexical analyzer.

    A Scanner is bound to one source string. Use a fresh instance for every
    source; nothing is shared between instances.
    """

    def __init__(self, source: str):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete, in-memory source text
        """
        self.source = source
        self.pos = 0
        self.line = 1
        self.errors: List[ScanError] = []

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens terminated by exactly one EOF token

        Raises:
            ScanErrors: If any lexical error was found; carries all of them
        """
        tokens = list(self.iter_tokens())
        logger.debug("Scanned %d tokens with %d errors", len(tokens), len(self.errors))

        if self.errors:
            raise ScanErrors(self.errors, tokens)

        return tokens

    def iter_tokens(self) -> Iterator[Token]:
        """
        Lazily yield tokens in source order.

        Errors do not stop the iteration; they are appended to ``self.errors``
        and scanning resumes with the next character.
        """
        self.pos = 0
        self.line = 1
        self.errors = []

        while True:
            self._skip_whitespace_and_comments()
            if self._is_at_end():
                break

            char = self._advance()
            try:
                token = self._scan_token(char)
            except ScanError as e:
                logger.debug("Recovered from lexical error: %s", e)
                self.errors.append(e)
                continue
            yield token

        yield Token(TokenType.EOF, self.line)

    def has_errors(self) -> bool:
        """Check if the scanner encountered any errors."""
        return len(self.errors) > 0

    def _scan_token(self, char: str) -> Token:
        """Scan one token whose first character has already been consumed."""
        if char in SINGLE_CHAR_TOKENS:
            return Token(SINGLE_CHAR_TOKENS[char], self.line)

        if char in COMPOUND_OPERATORS:
            single, compound = COMPOUND_OPERATORS[char]
            if self._peek() == "=":
                self._advance()
                return Token(compound, self.line)
            return Token(single, self.line)

        if char == '"':
            return self._scan_string()

        if char in DIGITS:
            return self._scan_number(char)

        if char.isalpha() or char == "_":
            return self._scan_identifier(char)

        raise UnknownCharacter(char, self.line)

    def _scan_string(self) -> Token:
        """Scan a string literal; the opening quote is already consumed."""
        start_line = self.line
        value_parts = []

        while not self._is_at_end():
            char = self._advance()
            if char == '"':
                return Token(TokenType.STRING, start_line, "".join(value_parts))
            if char == "\n":
                self.line += 1
            value_parts.append(char)

        raise UnterminatedString(start_line)

    def _scan_number(self, first: str) -> Token:
        """
        Scan a number literal.

        Letters are taken along with digits and dots, so ``123abc`` is a
        single malformed number rather than a number followed by a name.
        """
        chars = [first]
        while not self._is_at_end():
            char = self._peek()
            if not (char in DIGITS or char == "." or char.isalpha()):
                break
            chars.append(self._advance())

        text = "".join(chars)
        try:
            value = float(text)
        except ValueError:
            raise UnparseableDigit(text, self.line) from None

        return Token(TokenType.NUMBER, self.line, value)

    def _scan_identifier(self, first: str) -> Token:
        """Scan an identifier or keyword (maximal munch, then table lookup)."""
        chars = [first]
        while not self._is_at_end():
            char = self._peek()
            if not (char.isalpha() or char == "_" or char in DIGITS):
                break
            chars.append(self._advance())

        text = "".join(chars)
        token_type = KEYWORDS.get(text)
        if token_type is not None:
            return Token(token_type, self.line)
        return Token(TokenType.IDENTIFIER, self.line, text)

    def _skip_whitespace_and_comments(self):
        """Skip whitespace and // comments, counting newlines."""
        while not self._is_at_end():
            char = self._peek()

            if char.isspace():
                if char == "\n":
                    self.line += 1
                self._advance()
                continue

            # Line comments run up to (not including) the newline
            if char == "/" and self._peek(1) == "/":
                while not self._is_at_end() and self._peek() != "\n":
                    self._advance()
                continue

            break

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self.pos]
        self.pos += 1
        return char

    def _peek(self, offset: int = 0) -> str:
        """Look ahead without consuming; returns '' past the end."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return ""

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)


def scan_all(source: str) -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string

    Returns:
        List of tokens ending with EOF

    Raises:
        ScanErrors: If scanning found lexical errors
    """
    return Scanner(source).scan_tokens()
