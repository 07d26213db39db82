"""
Command-line driver for the Lox front end.

Runs a script file once, or reads an interactive prompt line by line. Each
source is scanned and parsed with fresh Scanner and Parser instances; parsed
expressions are echoed in their canonical form and errors are reported as
``[line N] Error: message``.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO, Union

from .config import DriverConfig
from .lexer import Scanner, ScanError, ScanErrors
from .parser import AstPrinter, ParseError, Parser

logger = logging.getLogger(__name__)


class Lox:
    """Runs sources through the front end and reports the outcome."""

    def __init__(
        self,
        config: Optional[DriverConfig] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
        stdin: Optional[TextIO] = None,
    ):
        self.config = config or DriverConfig()
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.stdin = stdin or sys.stdin
        self.printer = AstPrinter()
        self.had_error = False

    def run(self, source: str) -> bool:
        """
        Scan and parse one source.

        Returns:
            True if no error was reported
        """
        try:
            tokens = Scanner(source).scan_tokens()
        except ScanErrors as e:
            for error in e.errors:
                self.report(error)
            return False

        if self.config.show_tokens:
            print(" ".join(str(token) for token in tokens), file=self.out)

        parser = Parser(tokens)
        expressions = parser.parse_all()
        for error in parser.errors:
            self.report(error)

        for expr in expressions:
            print(self.printer.render(expr), file=self.out)

        return not parser.has_errors()

    def run_file(self, path: str) -> int:
        """Run a script file; returns the process exit status."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                source = f.read()
        except OSError as e:
            print(f"Could not read {path}: {e.strerror}", file=self.err)
            return 1

        logger.debug("Running %s (%d characters)", path, len(source))
        self.run(source)
        return 1 if self.had_error else 0

    def run_prompt(self) -> int:
        """Read-parse-print loop until end of input."""
        while True:
            self.out.write(self.config.prompt)
            self.out.flush()
            line = self.stdin.readline()
            if not line:
                break
            self.run(line)
            self.had_error = False

        return 0

    def report(self, error: Union[ScanError, ParseError]):
        """Write one error to the error stream."""
        self.had_error = True
        print(f"[line {error.line}] Error: {error}", file=self.err)
        if self.config.explain:
            self.err.write(str(error.diagnostic))


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lox",
        description="Scan and parse Lox expressions and print their syntax trees.",
    )
    parser.add_argument("script", nargs="?", help="Script to run; omit for an interactive prompt")
    parser.add_argument("--tokens", action="store_true", help="Print the token list before each tree")
    parser.add_argument("--explain", action="store_true", help="Add help text to every error")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    config = DriverConfig.from_env()
    config.show_tokens = args.tokens
    config.explain = args.explain
    if args.verbose:
        config.log_level = "DEBUG"

    try:
        level = config.numeric_log_level()
    except ValueError as e:
        arg_parser.error(str(e))
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    lox = Lox(config)
    if args.script:
        return lox.run_file(args.script)
    return lox.run_prompt()


if __name__ == "__main__":
    sys.exit(main())
