"""Session control for lox. Runs the whole pipeline (source text -> tokens -> expression tree -> value) either once
for a script file or once per line in interactive mode.
"""

from lox.lang.error import Diagnostics, LoxError, LoxRuntimeError, ParseError
from lox.runtime.interpreter import Interpreter
from lox.runtime.value import stringify
from lox.syntax.parser import Parser
from lox.syntax.printer import to_infix, to_prefix
from lox.syntax.scanner import Scanner
from lox.syntax.token import TokenType


class Session:
    """Governs a lox session. Errors go to diagnostics, which the caller owns and inspects afterwards."""
    SH_FILE = "<in>"  # interactive mode filename
    PRINTERS = {"prefix": to_prefix, "infix": to_infix}

    def __init__(self, diagnostics, path=SH_FILE, debug=None):
        if debug is not None and debug not in Session.PRINTERS:
            raise LoxError(f"unknown tree format '{debug}'", internal=True)

        self.diagnostics = diagnostics
        self.path = path    # used for error messages
        self.debug = debug  # if set, print each parsed tree in this format

        self.interpreter = Interpreter()
        self.results = []   # stringified values waiting to be displayed

    def run(self, source):
        """Runs source through the pipeline and returns its value, or None if an error was reported. Since nil is also
        None, check diagnostics (or results) to tell the two apart.
        """
        errors = self.diagnostics.errors

        tokens = Scanner(source, self.diagnostics).scan_tokens()
        try:
            expr = Parser(tokens, self.diagnostics).parse()
        except ParseError:
            return None

        if self.diagnostics.errors > errors:  # lexical errors: the tree is not trustworthy
            return None

        if self.debug:
            print(Session.PRINTERS[self.debug](expr))

        try:
            value = self.interpreter.evaluate(expr)
        except LoxRuntimeError as error:
            self.diagnostics.runtime_error(error)
            return None

        self.results.append(stringify(value))
        return value

    def pop(self):
        """Removes and returns the oldest result."""
        return self.results.pop(0)

    @staticmethod
    def read(path):
        try:
            with open(path, "r", encoding="utf-8") as file:
                return file.read()
        except (OSError, UnicodeDecodeError):
            raise LoxError(f"'{path}' could not be opened")

    @staticmethod
    def needs_continuation(source):
        """Whether source is unfinished: an open string or more "(" than ")". Used for line continuations."""
        scanner = Scanner(source, Diagnostics(quiet=True))
        tokens = scanner.scan_tokens()

        if scanner.unterminated:
            return True

        balance = 0
        for token in tokens:
            if token.type is TokenType.LEFT_PAREN:
                balance += 1
            elif token.type is TokenType.RIGHT_PAREN:
                balance -= 1
        return balance > 0
