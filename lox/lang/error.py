"""Error handling for the lox interpreter. Three kinds of errors can occur while running a program:

1. Lexical diagnostics: reported by the Scanner through Diagnostics.report, never raised
2. ParseError: raised by the Parser on the first syntax error, after it has been reported
3. LoxRuntimeError: raised by the Interpreter when an operator is applied to operands of the wrong kind

Only LoxErrors should be encountered during running: if another type of error makes it all the way to Diagnostics,
it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class LoxError(Exception):
    """Base class for every error the interpreter raises on purpose."""

    def __init__(self, msg, internal=False):
        super().__init__(msg)
        self.msg = msg
        self.internal = internal


class ParseError(LoxError):
    """Raised when the token sequence does not match the expression grammar. token is the offending token: when it is
    the EOF token, the parser ran out of input.
    """

    def __init__(self, token, msg=None):
        if msg is None:
            msg = ParseError.describe(token)
        super().__init__(msg)
        self.token = token

    @staticmethod
    def describe(token):
        """Returns the message for an unexpected token."""
        if ParseError.at_end(token):
            return "unexpectedly reached end of file"
        return f"unexpected token '{token.lexeme}' ({token.type.name})"

    @staticmethod
    def at_end(token):
        return token is None or token.type.name == "EOF"

    @property
    def location(self):
        """Location text used by Diagnostics.report."""
        if ParseError.at_end(self.token):
            return "at end"
        return f"at '{self.token.lexeme}'"

    @property
    def line(self):
        return self.token.line if self.token is not None else 0


class LoxRuntimeError(LoxError):
    """Raised during evaluation. Carries the operator token so the error can point at the right line."""

    def __init__(self, token, msg):
        super().__init__(msg)
        self.token = token

    def __str__(self):
        return f"{self.msg}\n[line {self.token.line}]"


class Diagnostics:
    """Collects errors for one run of the interpreter and renders them to stderr. Replaces a process-wide error flag:
    whoever runs the pipeline owns one Diagnostics object and inspects it afterwards.

    Also a context manager that will suppress LoxErrors (and a few Python errors) after rendering them.
    """
    ERROR = "red"

    def __init__(self, quiet=False, stream=None):
        self.quiet = quiet
        self.stream = stream
        self.messages = []  # plain text of everything rendered, in order

        self.errors = 0                 # number of report calls
        self.had_error = False          # lexical and parse errors
        self.had_runtime_error = False  # evaluation errors

    def get(self):
        return self.had_error

    def set(self, had_error):
        self.had_error = had_error

    def reset(self):
        """Clears both flags. messages is kept."""
        self.had_error = False
        self.had_runtime_error = False

    def error(self, line, msg):
        """Reports an error that has no meaningful location (lexical errors)."""
        self.report(line, "", msg)

    def report(self, line, location, msg):
        """Renders '[line N] Error LOCATION: MSG' and marks that an error occurred."""
        prefix = f"[line {line}] Error {location}"
        self.messages.append(f"{prefix}: {msg}")
        self._print(colored(prefix, Diagnostics.ERROR, attrs=["bold"]) + ": " + msg)
        self.had_error = True
        self.errors += 1

    def runtime_error(self, error):
        """Renders a LoxRuntimeError. Does not touch had_error."""
        self.messages.append(str(error))
        self._print(colored(error.msg, Diagnostics.ERROR) + f"\n[line {error.token.line}]")
        self.had_runtime_error = True

    def throw(self, error, runtime=False):
        """Renders an error that escaped the pipeline. Internal errors get a marker so they stand out. runtime errors
        set had_runtime_error instead of had_error.
        """
        msg = f"error: {error.msg}"
        if error.internal:
            msg = "[internal] " + msg

        self.messages.append(msg)
        self._print(colored(msg, Diagnostics.ERROR, attrs=["bold"]))
        if runtime:
            self.had_runtime_error = True
        else:
            self.had_error = True

    def _print(self, text):
        if not self.quiet:
            print(text, file=self.stream if self.stream is not None else sys.stderr)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None or exc_type is SystemExit:
            return False

        if exc_type is KeyboardInterrupt:
            self.throw(LoxError("keyboard interrupt"))
        elif exc_type is RecursionError:
            self.throw(LoxError("maximum recursion depth exceeded"), runtime=True)
        elif issubclass(exc_type, LoxRuntimeError):
            self.runtime_error(exc_val)
        elif issubclass(exc_type, ParseError):
            pass  # the Parser reports before raising
        elif issubclass(exc_type, LoxError):
            self.throw(exc_val)
        else:
            self.throw(LoxError(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))

        return True
