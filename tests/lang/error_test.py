import io
import unittest

from lox.lang.error import Diagnostics, LoxError, LoxRuntimeError, ParseError
from lox.syntax.token import Token, TokenType


class DiagnosticsTestCase(unittest.TestCase):

    def test_report(self):
        stream = io.StringIO()
        diagnostics = Diagnostics(stream=stream)

        self.assertFalse(diagnostics.get())
        diagnostics.report(3, "at end", "unexpectedly reached end of file")

        self.assertTrue(diagnostics.get())
        self.assertEqual(diagnostics.messages, ["[line 3] Error at end: unexpectedly reached end of file"])
        self.assertIn("[line 3] Error at end", stream.getvalue())
        self.assertIn("unexpectedly reached end of file", stream.getvalue())

    def test_error_has_empty_location(self):
        diagnostics = Diagnostics(quiet=True)
        diagnostics.error(1, "unexpected character '@'")
        self.assertEqual(diagnostics.messages, ["[line 1] Error : unexpected character '@'"])

    def test_flag(self):
        diagnostics = Diagnostics(quiet=True)
        diagnostics.set(True)
        self.assertTrue(diagnostics.get())
        diagnostics.set(False)
        self.assertFalse(diagnostics.had_error)

    def test_quiet(self):
        stream = io.StringIO()
        diagnostics = Diagnostics(quiet=True, stream=stream)
        diagnostics.error(1, "unterminated string")

        self.assertEqual(stream.getvalue(), "")
        self.assertEqual(len(diagnostics.messages), 1)

    def test_runtime_error(self):
        stream = io.StringIO()
        diagnostics = Diagnostics(stream=stream)
        diagnostics.runtime_error(LoxRuntimeError(Token(TokenType.MINUS, "-", None, 4), "Operands must be numbers"))

        self.assertFalse(diagnostics.get())
        self.assertTrue(diagnostics.had_runtime_error)
        self.assertEqual(diagnostics.messages, ["Operands must be numbers\n[line 4]"])
        self.assertIn("[line 4]", stream.getvalue())

        diagnostics.reset()
        self.assertFalse(diagnostics.had_runtime_error)

    def test_parse_error(self):
        eof = ParseError(Token(TokenType.EOF, "", None, 2))
        self.assertEqual(eof.msg, "unexpectedly reached end of file")
        self.assertEqual(eof.location, "at end")
        self.assertEqual(eof.line, 2)

        unexpected = ParseError(Token(TokenType.RIGHT_PAREN, ")", None, 5))
        self.assertEqual(unexpected.msg, "unexpected token ')' (RIGHT_PAREN)")
        self.assertEqual(unexpected.location, "at ')'")

    def test_context_manager(self):
        diagnostics = Diagnostics(quiet=True)

        with diagnostics:
            raise LoxError("'missing.lox' could not be opened")
        self.assertEqual(diagnostics.messages[-1], "error: 'missing.lox' could not be opened")
        self.assertTrue(diagnostics.get())

        with diagnostics:
            raise LoxRuntimeError(Token(TokenType.PLUS, "+", None, 1), "Operands must be two numbers or two strings")
        self.assertTrue(diagnostics.had_runtime_error)

        with diagnostics:
            raise ValueError("boom")
        self.assertEqual(diagnostics.messages[-1], "[internal] error: unknown error: 'ValueError: boom'")

        with diagnostics:
            raise RecursionError()
        self.assertEqual(diagnostics.messages[-1], "error: maximum recursion depth exceeded")

        count = len(diagnostics.messages)
        with diagnostics:
            raise ParseError(Token(TokenType.EOF, "", None, 1))
        self.assertEqual(len(diagnostics.messages), count)  # already reported by whoever raised it

        with self.assertRaises(SystemExit):
            with diagnostics:
                raise SystemExit(65)

    def test_recursion_is_a_runtime_failure(self):
        diagnostics = Diagnostics(quiet=True)

        with diagnostics:
            raise RecursionError("maximum recursion depth exceeded while calling a Python object")
        self.assertTrue(diagnostics.had_runtime_error)
        self.assertFalse(diagnostics.get())
        self.assertEqual(diagnostics.messages, ["error: maximum recursion depth exceeded"])


if __name__ == '__main__':
    unittest.main()
