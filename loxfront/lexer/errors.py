"""
Error handling for the Lox scanner.

Lexical errors form a closed set: every ScanError raised or collected by the
scanner is one of the subclasses defined here. Each carries the source line
and a Diagnostic with an error code and help text for richer reporting.
"""

from typing import List, Optional
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """Structured description of an error, shared by scanner and parser."""
    message: str
    line: int
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> line {self.line}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class ScanError(Exception):
    """
    Base class for lexical errors.

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


class UnknownCharacter(ScanError):
    """A character that cannot start any token."""

    code = "L001"

    def __init__(self, char: str, line: int):
        if char.isprintable():
            help_text = f"The character '{char}' is not valid in Lox source code."
        else:
            help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."
        super().__init__(
            f"Scanner Error: Unrecognised character {char} at line {line}",
            line,
            help_text,
        )
        self.char = char


class UnterminatedString(ScanError):
    """End of input reached before a string's closing quote."""

    code = "L002"

    def __init__(self, line: int):
        super().__init__(
            f"Scanner Error: Unterminated string at line {line}",
            line,
            'String literals must be closed with a matching " quote.',
        )


class UnparseableDigit(ScanError):
    """A number-shaped lexeme that does not parse as a float."""

    code = "L003"

    def __init__(self, text: str, line: int):
        super().__init__(
            f"Scanner Error: Unparseable digit {text} at line {line}",
            line,
            "Numbers are digits with an optional fractional part; "
            "separate a number from a following name with whitespace.",
        )
        self.text = text


class ScanErrors(Exception):
    """
    Raised once per scan when one or more lexical errors were found.

    ``errors`` is never empty and is ordered by position in the source.
    ``partial_tokens`` holds the tokens that did scan, for context only.
    """

    def __init__(self, errors: List[ScanError], partial_tokens: Optional[list] = None):
        if not errors:
            raise ValueError("ScanErrors requires at least one error")
        super().__init__(f"{len(errors)} lexical error(s)")
        self.errors = list(errors)
        self.partial_tokens = list(partial_tokens or [])

    def __str__(self) -> str:
        return "\n".join(str(error) for error in self.errors)


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unrecognised character",
    "L002": "Unterminated string literal",
    "L003": "Unparseable numeric literal",
}
