"""lox expression interpreter.

For reference, basic program flow:
    1. Scanner (syntax/scanner.py): source text -> list of Tokens, reporting lexical errors without stopping
    2. Parser (syntax/parser.py): Tokens -> one expression tree, by recursive descent over precedence levels
    3. Interpreter (runtime/interpreter.py): expression tree -> value (float, str, bool or None)

Errors are collected by a Diagnostics object (lang/error.py) that the caller owns.
"""

from lox.lang.error import Diagnostics, LoxError, LoxRuntimeError, ParseError
from lox.runtime.interpreter import evaluate
from lox.syntax.parser import parse
from lox.syntax.scanner import scan


__all__ = ["Diagnostics", "LoxError", "LoxRuntimeError", "ParseError", "evaluate", "parse", "scan"]
