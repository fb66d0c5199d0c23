import unittest

from lox.lang.error import Diagnostics, ParseError
from lox.runtime.interpreter import evaluate
from lox.syntax.expr import Binary, Grouping, Literal, Unary
from lox.syntax.parser import parse
from lox.syntax.printer import literal_str, read_prefix, to_infix, to_prefix
from lox.syntax.scanner import scan
from lox.syntax.token import Token, TokenType


def tree(source):
    return parse(scan(source))


class PrinterTestCase(unittest.TestCase):

    def test_prefix(self):
        expression = Binary(
            Unary(Token(TokenType.MINUS, "-"), Literal(123.0)),
            Token(TokenType.STAR, "*"),
            Grouping(Literal(45.67)),
        )
        self.assertEqual(to_prefix(expression), "(* (- 123) (group 45.67))")

        should_pass = {
            "1 + 2": "(+ 1 2)",
            "1 + 2 * 3": "(+ 1 (* 2 3))",
            "!nil == false": "(== (! nil) false)",
            "\"a\" + \"b c\"": "(+ \"a\" \"b c\")",
            "(true)": "(group true)",
        }
        for case, result in should_pass.items():
            self.assertEqual(to_prefix(tree(case)), result, case)

    def test_infix(self):
        should_pass = {
            "1 + 2": "(1 + 2)",
            "-123 * (45.67)": "((-123) * (group 45.67))",
            "1 - 2 - 3": "((1 - 2) - 3)",
            "!\"s\" != nil": "((!\"s\") != nil)",
        }
        for case, result in should_pass.items():
            self.assertEqual(to_infix(tree(case)), result, case)

    def test_literal_str(self):
        should_pass = {
            None: "nil", True: "true", False: "false", "x": "\"x\"", 7.0: "7", 2.5: "2.5", 1e-07: "0.0000001",
            1e21: "1000000000000000000000",
        }
        for case, result in should_pass.items():
            self.assertEqual(literal_str(case), result, case)

    def test_round_trip(self):
        should_pass = [
            "1 + 2 * 3",
            "(1 + 2) * 3",
            "-(-1)",
            "!!true == !false",
            "1 < 2 != 3 >= 4",
            "\"a\" + \"multi\nline\"",
            "nil == (((nil)))",
            "0.0000001 / 123.456 - 100000000000000000000000",
            "1 - 2 - 3 / 4 / 5",
        ]
        for case in should_pass:
            expression = tree(case)
            self.assertEqual(read_prefix(to_prefix(expression)), expression, case)

    def test_long_chains(self):
        expression = tree(" + ".join(["1"] * 5000))

        prefix = to_prefix(expression)
        self.assertTrue(prefix.startswith("(+ (+ (+ "))
        self.assertTrue(prefix.endswith(" 1 1) 1) 1)"))
        self.assertTrue(to_infix(expression).startswith("((((1 + 1) + 1) + 1)"))

        # read back without recursing, then compared by value: == on a 5000 deep tree recurses
        self.assertEqual(evaluate(read_prefix(prefix)), 5000.0)
        self.assertEqual(to_prefix(read_prefix(prefix)), prefix)

    def test_read_prefix_errors(self):
        should_fail = ["(+ 1)", "(! 1 2)", "(+ 1 2 3)", "(group 1", "(foo 1 2)", "(+ 1 2) 3", "x", ""]
        for case in should_fail:
            self.assertRaises(ParseError, read_prefix, case, Diagnostics(quiet=True))

        with self.assertRaises(ParseError) as context:
            read_prefix("(* 1)", Diagnostics(quiet=True))
        self.assertEqual(context.exception.msg, "'*' cannot take 1 operand(s)")


if __name__ == '__main__':
    unittest.main()
