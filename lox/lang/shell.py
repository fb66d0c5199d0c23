"""Handles interactive mode for the lox interpreter. Uses cmd as backend."""

import cmd

from lox.lang.session import Session


class Shell(cmd.Cmd):
    """lox expression shell. Every line is an independent program: no error ends the loop."""
    intro = "lox expression interpreter :: Python backend\nType 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self._tmp_line = ""

    def default(self, line):
        """Evaluates an arbitrary lox expression."""
        line = self._tmp_line + line

        if Session.needs_continuation(line):
            self._tmp_line = line + "\n"
            self.prompt = self.secondary_prompt
            return

        self.execute(line)

    def execute(self, source):
        """Runs source through the session, prints its results and clears any pending continuation."""
        self._tmp_line = ""
        self.prompt = self._tmp_prompt

        with self.sess.diagnostics:  # needed because cmd.Cmd automatically exits on Exception
            self.sess.run(source)
            while self.sess.results:
                print(self.sess.pop())

        self.sess.diagnostics.reset()  # interactive mode never fails on a mistake

    def do_help(self, arg):
        """Prints a short introduction to the expression language."""
        print("Welcome to the lox interpreter!\n\n"
              "Type an expression and press enter to evaluate it. Numbers, strings, true, false \n"
              "and nil can be combined with + - * / (arithmetic), < <= > >= (comparison), \n"
              "== != (equality), ! (not) and parentheses. Try '(1 + 2) * 3' or '\"a\" + \"b\"'.\n\n"
              "An unclosed '(' or '\"' continues the expression on the next line, an empty line ends it.")

    def emptyline(self):
        """Do not repeat previous command on empty line. Ends a continuation: the pending text is run as is."""
        if self._tmp_line:
            self.execute(self._tmp_line)
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
