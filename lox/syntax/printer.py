"""Debug rendering of expression trees, in two styles:

- prefix: (* (- 123) (group 45.67))     ; operator first, every node parenthesized
- infix:  ((-123) * (group 45.67))      ; operator between operands, still fully parenthesized

Prefix form can be read back with read_prefix, which re-lexes it with the Scanner: for any tree the Parser produces,
read_prefix(to_prefix(tree)) == tree.
"""

from decimal import Decimal

from lox.lang.error import Diagnostics, ParseError
from lox.runtime.value import number_str
from lox.syntax.expr import Binary, Grouping, Literal, Unary
from lox.syntax.parser import KEYWORD_LITERALS, UNARY
from lox.syntax.scanner import Scanner
from lox.syntax.token import TokenType


OPERATORS = (
    TokenType.BANG, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL, TokenType.GREATER, TokenType.GREATER_EQUAL,
    TokenType.LESS, TokenType.LESS_EQUAL, TokenType.MINUS, TokenType.PLUS, TokenType.SLASH, TokenType.STAR,
)


def literal_str(value):
    """Renders a literal so that the Scanner reads it back as the same value."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f"\"{value}\""
    if value != value or value in (float("inf"), float("-inf")) or value.is_integer():
        return number_str(value)
    return format(Decimal(repr(value)), "f")  # never exponent notation: "1e-07" would not scan as one number


def render(expr, binary, unary):
    """Renders expr, formatting operator nodes with binary(op, left, right) and unary(op, operand)."""
    spine = []  # left-deep chains are walked with a loop
    while isinstance(expr, Binary):
        spine.append(expr)
        expr = expr.left

    if isinstance(expr, Literal):
        text = literal_str(expr.value)
    elif isinstance(expr, Grouping):
        text = f"(group {render(expr.expression, binary, unary)})"
    elif isinstance(expr, Unary):
        text = unary(expr.operator.lexeme, render(expr.operand, binary, unary))
    else:
        raise TypeError(f"not an expression: {expr!r}")

    for node in reversed(spine):
        text = binary(node.operator.lexeme, text, render(node.right, binary, unary))
    return text


def to_prefix(expr):
    return render(expr, lambda op, left, right: f"({op} {left} {right})", lambda op, operand: f"({op} {operand})")


def to_infix(expr):
    return render(expr, lambda op, left, right: f"({left} {op} {right})", lambda op, operand: f"({op}{operand})")


class PrefixReader:
    """Reads the output of to_prefix back into an expression tree.

    ```
    <node> ::= <literal>
             | "(" "group" <node> ")"
             | "(" <operator> <node> ")"           ; Unary, operator must be "!" or "-"
             | "(" <operator> <node> <node> ")"    ; Binary
    ```

    Open parentheses are kept on an explicit stack, so deeply nested input does not recurse.
    """

    def __init__(self, source, diagnostics=None):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.tokens = Scanner(source, self.diagnostics).scan_tokens()
        self.current = 0

    def read(self):
        stack = []  # [head token, operands] per open parenthesis
        result = None

        while True:
            token = self.advance()

            if token.type in KEYWORD_LITERALS:
                node = Literal(KEYWORD_LITERALS[token.type])
            elif token.type in (TokenType.NUMBER, TokenType.STRING):
                node = Literal(token.literal)
            elif token.type is TokenType.LEFT_PAREN:
                head = self.advance()
                if not (head.type in OPERATORS or (head.type is TokenType.IDENTIFIER and head.lexeme == "group")):
                    raise self.error(head)
                stack.append((head, []))
                continue
            elif token.type is TokenType.RIGHT_PAREN and stack:
                head, operands = stack.pop()
                node = self.build(head, operands)
            else:
                raise self.error(token)

            if stack:
                stack[-1][1].append(node)
            else:
                result = node
                break

        if self.peek().type is not TokenType.EOF:
            raise self.error(self.peek())
        return result

    def build(self, head, operands):
        if head.type is TokenType.IDENTIFIER:
            if len(operands) == 1:
                return Grouping(operands[0])
        elif len(operands) == 1 and head.type in UNARY:
            return Unary(head, operands[0])
        elif len(operands) == 2 and head.type is not TokenType.BANG:
            return Binary(operands[0], head, operands[1])
        raise self.error(head, f"'{head.lexeme}' cannot take {len(operands)} operand(s)")

    def peek(self):
        return self.tokens[self.current]

    def advance(self):
        token = self.peek()
        if token.type is not TokenType.EOF:
            self.current += 1
        return token

    def error(self, token, msg=None):
        error = ParseError(token, msg)
        self.diagnostics.report(error.line, error.location, error.msg)
        return error


def read_prefix(source, diagnostics=None):
    """Returns the expression tree written in prefix form in source."""
    return PrefixReader(source, diagnostics).read()
