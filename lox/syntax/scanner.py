"""Lexical analysis for lox: turns source text into a list of Tokens in a single left-to-right pass.

Lexical grammar (as far as the Scanner cares):

```
<token>      ::= "(" | ")" | "{" | "}" | "," | "." | "-" | "+" | ";" | "*" | "/"
               | "!" | "!=" | "=" | "==" | ">" | ">=" | "<" | "<="   ; two-character operators win (maximal munch)
               | <string> | <number> | <identifier>
<string>     ::= '"' <char>* '"'                                     ; may span lines, no escapes
<number>     ::= <digit>+ ( "." <digit>+ )?                          ; "1." is NUMBER then DOT
<identifier> ::= ( <alpha> | "_" ) ( <alpha> | <digit> | "_" )*      ; keywords are reclassified

<comment>    ::= "//" <char>* <newline>                              ; discarded
```

Errors never stop the scan: they are reported through Diagnostics and the Scanner carries on with the next character.
"""

from lox.lang.error import Diagnostics, LoxError
from lox.syntax.token import KEYWORDS, Token, TokenType


SINGLE = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# first character: (type if followed by "=", type otherwise)
DOUBLE = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}

WHITESPACE = " \r\t"


def is_digit(char):
    return "0" <= char <= "9"


def is_alpha(char):
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def is_alphanumeric(char):
    return is_alpha(char) or is_digit(char)


class Scanner:
    """Single-use scanner over a fully materialized source string. start and current index into source: start is the
    first character of the lexeme being scanned, current is the next character to consume.
    """

    def __init__(self, source, diagnostics=None):
        self.source = source
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()

        self.tokens = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.unterminated = False  # source ended inside a string
        self._done = False

    def scan_tokens(self):
        """Scans all of source and returns the tokens, always ending with a single EOF token."""
        if self._done:
            raise LoxError("Scanner has already consumed its input", internal=True)
        self._done = True

        while not self.at_end():
            self.start = self.current
            self.scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def scan_token(self):
        char = self.advance()

        if char in SINGLE:
            self.add_token(SINGLE[char])

        elif char in DOUBLE:
            double, single = DOUBLE[char]
            self.add_token(double if self.match("=") else single)

        elif char == "/":
            if self.match("/"):
                while self.peek() != "\n" and not self.at_end():  # comment runs until end of line
                    self.advance()
            else:
                self.add_token(TokenType.SLASH)

        elif char in WHITESPACE:
            pass

        elif char == "\n":
            self.line += 1

        elif char == "\"":
            self.string()

        elif is_digit(char):
            self.number()

        elif is_alpha(char):
            self.identifier()

        else:
            self.diagnostics.error(self.line, f"unexpected character '{char}'")

    def string(self):
        while self.peek() != "\"" and not self.at_end():
            if self.peek() == "\n":
                self.line += 1
            self.advance()

        if self.at_end():
            self.unterminated = True
            self.diagnostics.error(self.line, "unterminated string")
            return

        self.advance()  # closing "
        self.add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def number(self):
        while is_digit(self.peek()):
            self.advance()

        # fractional part only if a digit follows the dot
        if self.peek() == "." and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()

        self.add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def identifier(self):
        while is_alphanumeric(self.peek()):
            self.advance()

        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def at_end(self):
        return self.current >= len(self.source)

    def advance(self):
        char = self.source[self.current]
        self.current += 1
        return char

    def match(self, expected):
        """Consumes the next character only if it is expected."""
        if self.peek() != expected:
            return False
        self.current += 1
        return True

    def peek(self):
        """Returns the next character, or "" at end of input."""
        return self.source[self.current:self.current + 1]

    def peek_next(self):
        return self.source[self.current + 1:self.current + 2]

    def add_token(self, token_type, literal=None):
        self.tokens.append(Token(token_type, self.source[self.start:self.current], literal, self.line))


def scan(source, diagnostics=None):
    """Returns the list of Tokens in source. Problems are reported to diagnostics (a throwaway one if None)."""
    return Scanner(source, diagnostics).scan_tokens()
