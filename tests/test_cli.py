"""
Tests for the lox-scan command line driver.

Author: xwest
"""

import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox import cli
from lox.lexer import ErrorReporter


class TestLoxScanCli(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def _write_script(self, source: str) -> str:
        path = os.path.join(self.tmpdir.name, "script.lox")
        with open(path, "w", encoding="utf-8") as f:
            f.write(source)
        return path

    def _main(self, argv, stdin: str = ""):
        out, err = io.StringIO(), io.StringIO()
        with mock.patch.object(sys, "stdin", io.StringIO(stdin)):
            with redirect_stdout(out), redirect_stderr(err):
                code = cli.main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_too_many_arguments(self):
        code, out, _ = self._main(["a.lox", "b.lox"])
        self.assertEqual(code, cli.EXIT_USAGE)
        self.assertEqual(out.strip(), "Usage: lox-scan [script]")

    def test_option_like_argument_is_a_path(self):
        """A lone '-x' is a script path, so a missing file exits 66, not 2."""
        code, _, err = self._main(["-x"])
        self.assertEqual(code, cli.EXIT_NO_INPUT)
        self.assertIn("Could not read -x", err)

    def test_help_flag_is_a_path(self):
        code, _, _ = self._main(["-h"])
        self.assertEqual(code, cli.EXIT_NO_INPUT)

    def test_script_plus_option_is_too_many_arguments(self):
        path = self._write_script("1;\n")
        code, out, _ = self._main([path, "-x"])
        self.assertEqual(code, cli.EXIT_USAGE)
        self.assertEqual(out.strip(), "Usage: lox-scan [script]")

    def test_file_prints_tokens(self):
        path = self._write_script('print "hi";\n')
        code, out, err = self._main([path])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), [
            "PRINT print null",
            'STRING "hi" hi',
            "SEMICOLON ; null",
            "EOF  null",
        ])
        self.assertEqual(err, "")

    def test_file_with_errors_exits_65(self):
        path = self._write_script("var a = 1;\nvar b = a @ 2;\n")
        code, out, err = self._main([path])
        self.assertEqual(code, cli.EXIT_DATA_ERROR)
        self.assertEqual(err, "[line 2] Error: Unexpected character.\n")
        # Scanning carried on past the bad character
        self.assertIn("NUMBER 2 2.0", out)

    def test_missing_file(self):
        code, _, err = self._main([os.path.join(self.tmpdir.name, "nope.lox")])
        self.assertEqual(code, cli.EXIT_NO_INPUT)
        self.assertIn("Could not read", err)

    def test_prompt_scans_each_line(self):
        code, out, _ = self._main([], stdin="1 + 2\nnil\n")
        self.assertEqual(code, 0)
        self.assertIn("PLUS + null", out)
        self.assertIn("NIL nil null", out)
        self.assertEqual(out.count("> "), 3)

    def test_prompt_resets_errors_between_lines(self):
        created = []

        def make_reporter(*args, **kwargs):
            reporter = ErrorReporter(*args, **kwargs)
            created.append(reporter)
            return reporter

        with mock.patch.object(cli, "ErrorReporter", side_effect=make_reporter):
            code, _, err = self._main([], stdin="@\nok\n")
        self.assertEqual(code, 0)
        self.assertEqual(err, "[line 1] Error: Unexpected character.\n")
        self.assertEqual(len(created), 1)
        self.assertFalse(created[0].had_error)

    def test_run_uses_given_reporter(self):
        reporter = ErrorReporter()
        out = io.StringIO()
        with redirect_stdout(out):
            cli.run('"open', reporter)
        self.assertTrue(reporter.had_error)
        self.assertEqual(out.getvalue(), "EOF  null\n")


if __name__ == '__main__':
    unittest.main()
