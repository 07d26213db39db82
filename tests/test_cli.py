"""
Tests for the command-line driver and its configuration.

The driver is exercised with in-memory streams so nothing touches the
real terminal.
"""

import io
import os
import sys
import tempfile
import unittest
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxfront.cli import Lox, main
from loxfront.config import DriverConfig


class TestLoxDriver(unittest.TestCase):
    """Test cases for running sources through the driver."""

    def setUp(self):
        """Set up test fixtures."""
        self.out = io.StringIO()
        self.err = io.StringIO()

    def _lox(self, **config) -> Lox:
        return Lox(DriverConfig(**config), out=self.out, err=self.err)

    def _write_script(self, source: str) -> str:
        handle = tempfile.NamedTemporaryFile("w", suffix=".lox", delete=False, encoding="utf-8")
        with handle:
            handle.write(source)
        self.addCleanup(os.remove, handle.name)
        return handle.name

    def test_run_prints_tree(self):
        """Test that a valid source is echoed in canonical form."""
        lox = self._lox()
        self.assertTrue(lox.run("1 + 2"))
        self.assertEqual(self.out.getvalue(), "(Binary + (Literal 1) (Literal 2))\n")
        self.assertEqual(self.err.getvalue(), "")

    def test_run_reports_scan_errors(self):
        """Test that every lexical error is reported with its line."""
        lox = self._lox()
        self.assertFalse(lox.run('@\n"abc'))
        self.assertEqual(
            self.err.getvalue(),
            "[line 1] Error: Scanner Error: Unrecognised character @ at line 1\n"
            "[line 2] Error: Scanner Error: Unterminated string at line 2\n",
        )
        self.assertTrue(lox.had_error)
        self.assertEqual(self.out.getvalue(), "")

    def test_run_reports_parse_errors(self):
        """Test that syntax errors are reported and good expressions still print."""
        lox = self._lox()
        self.assertFalse(lox.run("1 )"))
        self.assertEqual(self.out.getvalue(), "(Literal 1)\n")
        self.assertEqual(
            self.err.getvalue(),
            "[line 1] Error: Parser Error: Unsupported token ) at line 1\n",
        )

    def test_explain_adds_diagnostic(self):
        """Test that --explain appends the coded diagnostic."""
        lox = self._lox(explain=True)
        lox.run("()")
        output = self.err.getvalue()
        self.assertIn("ERROR[P004]", output)
        self.assertIn("help:", output)

    def test_show_tokens(self):
        """Test that the token list is printed before the tree."""
        lox = self._lox(show_tokens=True)
        lox.run("1 >= 2")
        lines = self.out.getvalue().splitlines()
        self.assertEqual(lines[0], "1 >= 2 EOF")
        self.assertEqual(lines[1], "(Binary >= (Literal 1) (Literal 2))")

    def test_run_file_success(self):
        """Test that a clean script exits with status 0."""
        path = self._write_script("(1 + 2) * 3\n")
        self.assertEqual(self._lox().run_file(path), 0)

    def test_run_file_failure(self):
        """Test that a script with errors exits with status 1."""
        path = self._write_script("1 +\n")
        self.assertEqual(self._lox().run_file(path), 1)
        self.assertIn("Expecting a token here", self.err.getvalue())

    def test_run_missing_file(self):
        """Test that an unreadable script is reported, not raised."""
        missing = os.path.join(tempfile.gettempdir(), "does-not-exist-lox-script.lox")
        self.assertEqual(self._lox().run_file(missing), 1)
        self.assertIn("Could not read", self.err.getvalue())

    def test_run_prompt(self):
        """Test that each prompt line is independent."""
        stdin = io.StringIO("1\n(\n2 * 2\n")
        lox = Lox(DriverConfig(prompt="> "), out=self.out, err=self.err, stdin=stdin)
        self.assertEqual(lox.run_prompt(), 0)
        self.assertFalse(lox.had_error)
        self.assertEqual(
            self.out.getvalue(),
            "> (Literal 1)\n> > (Binary * (Literal 2) (Literal 2))\n> ",
        )
        self.assertEqual(
            self.err.getvalue(),
            "[line 1] Error: Parser Error: Expecting a token here at line 1, none found.\n",
        )


class TestMain(unittest.TestCase):
    """Test cases for the console entry point."""

    def test_main_runs_script(self):
        """Test main() with a script and the --tokens flag."""
        handle = tempfile.NamedTemporaryFile("w", suffix=".lox", delete=False, encoding="utf-8")
        with handle:
            handle.write("!true")
        self.addCleanup(os.remove, handle.name)

        with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            status = main(["--tokens", handle.name])

        self.assertEqual(status, 0)
        self.assertEqual(stdout.getvalue(), "! true EOF\n(Unary ! (Literal true))\n")

    def test_main_rejects_bad_log_level(self):
        """Test that an unknown LOX_LOG_LEVEL is a usage error."""
        with mock.patch.dict(os.environ, {"LOX_LOG_LEVEL": "chatty"}):
            with mock.patch("sys.stderr", new_callable=io.StringIO):
                with self.assertRaises(SystemExit) as ctx:
                    main([])
        self.assertEqual(ctx.exception.code, 2)


class TestDriverConfig(unittest.TestCase):
    """Test cases for driver configuration."""

    def test_defaults(self):
        """Test the default settings."""
        config = DriverConfig()
        self.assertEqual(config.prompt, "> ")
        self.assertEqual(config.log_level, "WARNING")
        self.assertFalse(config.explain)

    def test_from_env(self):
        """Test that the log level can come from the environment."""
        config = DriverConfig.from_env({"LOX_LOG_LEVEL": "debug"})
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.numeric_log_level(), 10)

    def test_from_env_without_variable(self):
        """Test that a missing variable keeps the default."""
        self.assertEqual(DriverConfig.from_env({}).log_level, "WARNING")

    def test_unknown_level(self):
        """Test that an unknown level name is refused."""
        with self.assertRaises(ValueError):
            DriverConfig(log_level="chatty").numeric_log_level()


if __name__ == '__main__':
    unittest.main()
