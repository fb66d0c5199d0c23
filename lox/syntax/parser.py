"""Recursive-descent parser for lox expressions. One method per precedence level, lowest to highest:

```
expression -> equality
equality   -> comparison ( ( "!=" | "==" ) comparison )*
comparison -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
term       -> factor ( ( "-" | "+" ) factor )*
factor     -> unary ( ( "/" | "*" ) unary )*
unary      -> ( "!" | "-" ) unary | primary
primary    -> NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"
```

Binary levels loop instead of recursing on the right, which makes them left-associative: 1 - 2 - 3 = ((1 - 2) - 3).
One token of lookahead is enough for this grammar, so the parser never backtracks. There is no error recovery
either: the first ParseError aborts the whole parse.
"""

from contextlib import contextmanager

from lox.lang.error import Diagnostics, ParseError
from lox.syntax.expr import Binary, Grouping, Literal, Unary
from lox.syntax.token import Token, TokenType


EQUALITY = (TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)
COMPARISON = (TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL)
TERM = (TokenType.MINUS, TokenType.PLUS)
FACTOR = (TokenType.SLASH, TokenType.STAR)
UNARY = (TokenType.BANG, TokenType.MINUS)

KEYWORD_LITERALS = {TokenType.FALSE: False, TokenType.TRUE: True, TokenType.NIL: None}

END = Token(TokenType.EOF, "", None, 0)  # stands in for a missing EOF token


class Parser:
    """Parses a token list (as produced by the Scanner, ending in EOF) into a single expression tree."""
    MAX_DEPTH = 32  # nested groupings/unary operators

    def __init__(self, tokens, diagnostics=None):
        self.tokens = tokens
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()

        self.current = 0
        self.depth = 0

    def parse(self):
        """Returns the expression tree. Raises ParseError (after reporting it) if tokens are not one expression."""
        expr = self.expression()
        if not self.at_end():
            raise self.error(self.peek())
        return expr

    def expression(self):
        return self.equality()

    def equality(self):
        return self._binary(self.comparison, EQUALITY)

    def comparison(self):
        return self._binary(self.term, COMPARISON)

    def term(self):
        return self._binary(self.factor, TERM)

    def factor(self):
        return self._binary(self.unary, FACTOR)

    def unary(self):
        if self.match(*UNARY):
            operator = self.previous()
            with self._nested():
                return Unary(operator, self.unary())
        return self.primary()

    def primary(self):
        token = self.peek()

        if token.type in KEYWORD_LITERALS:
            self.advance()
            return Literal(KEYWORD_LITERALS[token.type])

        if token.type in (TokenType.NUMBER, TokenType.STRING):
            self.advance()
            return Literal(token.literal)

        if token.type is TokenType.LEFT_PAREN:
            self.advance()
            with self._nested():
                expr = self.expression()
            if not self.match(TokenType.RIGHT_PAREN):
                raise self.error(self.peek())
            return Grouping(expr)

        raise self.error(token)

    def _binary(self, operand, operators):
        """Parses operand (op operand)* and folds the result into a left-deep tree."""
        expr = operand()
        while self.match(*operators):
            operator = self.previous()
            expr = Binary(expr, operator, operand())
        return expr

    @contextmanager
    def _nested(self):
        if self.depth >= self.MAX_DEPTH:
            raise self.error(self.peek(), "expression nested too deeply")

        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    def match(self, *types):
        """Consumes the current token if it is one of types."""
        if self.peek().type in types:
            self.advance()
            return True
        return False

    def advance(self):
        if not self.at_end():
            self.current += 1
        return self.previous()

    def at_end(self):
        return self.peek().type is TokenType.EOF

    def peek(self):
        if self.current >= len(self.tokens):
            return END
        return self.tokens[self.current]

    def previous(self):
        return self.tokens[self.current - 1]

    def error(self, token, msg=None):
        """Reports a ParseError at token and returns it for the caller to raise."""
        error = ParseError(token, msg)
        self.diagnostics.report(error.line, error.location, error.msg)
        return error


def parse(tokens, diagnostics=None):
    """Returns the expression tree for tokens. Raises ParseError on the first syntax error."""
    return Parser(tokens, diagnostics).parse()
