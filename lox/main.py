"""Uses the lox pipeline to run a script file or an interactive shell. Called from the lox console script and from
`python -m lox`.

Exit statuses follow sysexits.h.
"""

import argparse
import sys

from lox.lang.error import Diagnostics, LoxError
from lox.lang.session import Session
from lox.lang.shell import Shell


EX_OK = 0
EX_USAGE = 64     # bad command line
EX_DATAERR = 65   # lexical or parse error in the script
EX_NOINPUT = 66   # script could not be read
EX_SOFTWARE = 70  # runtime error in the script


class ArgumentParser(argparse.ArgumentParser):
    """argparse exits with status 2 on bad usage, lox uses 64."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EX_USAGE, f"{self.prog}: error: {message}\n")


def build_parser():
    parser = ArgumentParser(prog="lox")
    parser.add_argument("script", help="file to interpret and run (if empty, goes to interactive mode)", nargs="*")
    parser.add_argument("--ast", choices=sorted(Session.PRINTERS), default=None,
                        help="print each parsed expression tree in this form before evaluating it")
    return parser


def run_file(path, debug=None, diagnostics=None):
    """Runs path once and returns the exit status."""
    if diagnostics is None:
        diagnostics = Diagnostics()

    with diagnostics:
        sess = Session(diagnostics, path, debug=debug)
        try:
            source = Session.read(path)
        except LoxError as error:
            diagnostics.throw(error)
            return EX_NOINPUT

        sess.run(source)
        for result in sess.results:
            print(result)

    if diagnostics.get():
        return EX_DATAERR
    if diagnostics.had_runtime_error:
        return EX_SOFTWARE
    return EX_OK


def run_prompt(debug=None, diagnostics=None):
    """Runs the interactive shell until exit/EOF."""
    if diagnostics is None:
        diagnostics = Diagnostics()

    Shell(Session(diagnostics, Session.SH_FILE, debug=debug)).cmdloop()
    return EX_OK


def main(argv=None):
    """Runs lox interpreter. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.script) > 1:
        parser.print_usage(sys.stderr)
        return EX_USAGE
    elif args.script:
        return run_file(args.script[0], debug=args.ast)
    return run_prompt(debug=args.ast)
