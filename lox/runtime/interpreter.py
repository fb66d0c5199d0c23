"""Tree-walking evaluator for lox expressions. Evaluation has no side effects: there is no environment, so evaluating
the same tree always gives the same value or the same LoxRuntimeError.
"""

import math

from lox.lang.error import LoxError, LoxRuntimeError
from lox.runtime.value import is_equal, is_truthy
from lox.syntax.expr import Binary, Grouping, Literal, Unary
from lox.syntax.token import TokenType


ARITHMETIC = {
    TokenType.MINUS: lambda left, right: left - right,
    TokenType.STAR: lambda left, right: left * right,
    TokenType.SLASH: lambda left, right: divide(left, right),
}

RELATIONAL = {
    TokenType.GREATER: lambda left, right: left > right,
    TokenType.GREATER_EQUAL: lambda left, right: left >= right,
    TokenType.LESS: lambda left, right: left < right,
    TokenType.LESS_EQUAL: lambda left, right: left <= right,
}

NUMERIC = {**ARITHMETIC, **RELATIONAL}


def divide(left, right):
    """IEEE-754 division. Python raises ZeroDivisionError for x / 0.0, lox gives inf, -inf or nan."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def is_number(value):
    return isinstance(value, float)


class Interpreter:
    """Evaluates expression trees. Operands of a Binary are evaluated left first, so when both sides would fail, the
    left side's error is the one raised.
    """

    def evaluate(self, expr):
        if isinstance(expr, Literal):
            return expr.value
        elif isinstance(expr, Grouping):
            return self.evaluate(expr.expression)
        elif isinstance(expr, Unary):
            return self.unary(expr)
        elif isinstance(expr, Binary):
            return self.binary(expr)
        raise LoxError(f"cannot evaluate '{type(expr).__name__}'", internal=True)

    def unary(self, expr):
        operand = self.evaluate(expr.operand)
        operator = expr.operator

        if operator.type is TokenType.MINUS:
            if not is_number(operand):
                raise LoxRuntimeError(operator, "Operand must be a number")
            return -operand
        elif operator.type is TokenType.BANG:
            return not is_truthy(operand)

        raise LoxError(f"unknown unary operator '{operator.lexeme}'", internal=True)

    def binary(self, expr):
        # loop down the left spine, long chains such as 1 + 1 + ... + 1 are left-deep
        spine = []
        while isinstance(expr, Binary):
            spine.append(expr)
            expr = expr.left

        left = self.evaluate(expr)
        for node in reversed(spine):
            left = self.apply(node.operator, left, self.evaluate(node.right))
        return left

    def apply(self, operator, left, right):
        """Applies a binary operator to two evaluated operands."""
        if operator.type is TokenType.PLUS:
            if is_number(left) and is_number(right):
                return left + right
            if isinstance(left, str) and isinstance(right, str):
                return left + right
            raise LoxRuntimeError(operator, "Operands must be two numbers or two strings")

        elif operator.type in NUMERIC:
            if not (is_number(left) and is_number(right)):
                raise LoxRuntimeError(operator, "Operands must be numbers")
            return NUMERIC[operator.type](left, right)

        elif operator.type is TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        elif operator.type is TokenType.BANG_EQUAL:
            return not is_equal(left, right)

        raise LoxError(f"unknown binary operator '{operator.lexeme}'", internal=True)


def evaluate(expr):
    """Returns the value of expr. Raises LoxRuntimeError when an operator gets operands of the wrong kind."""
    return Interpreter().evaluate(expr)
