"""Session control for the Ei language. Drives scan -> parse -> interpret, either for a source file or for lines typed
into the interactive shell.
"""

import sys

from ei.lang.error import EiError
from ei.runtime.interpreter import Interpreter
from ei.syntax.parser import Parser
from ei.syntax.scanner import scan
from ei.syntax.tokens import TokenKind
from ei.syntax.tree import Program


class Session:
    """Governs an Ei session: one interpreter, plus the statements that were accepted but not yet run."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, out=None, warn_skipped=False, cmd_line=False):
        self.error_handler = error_handler

        self.path = path                  # used for error messages
        self.warn_skipped = warn_skipped  # whether dropped statements are reported as warnings
        self.cmd_line = cmd_line          # whether or not in command-line mode

        self.interpreter = Interpreter(out if out is not None else sys.stdout)
        self.program = Program.empty()  # everything added so far, used by dump
        self.to_exec = []               # statements added but not yet run
        self.skipped = []               # Skips from every add, in order

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r", encoding="utf-8") as file:
                    source = file.read()
            except OSError:
                raise EiError("'{}' could not be opened", path, diagnosis=False)

            self.add(source)

        elif not cmd_line:
            raise EiError("'<in>' is a reserved filename", diagnosis=False)

    @staticmethod
    def preprocess_line(line, prev=""):
        """Joins a shell line onto the unfinished previous one. Returns the updated line and whether it still needs a
        continuation, i.e. has more '(' tokens than ')' tokens. Parentheses inside string literals do not count.
        """
        line = f"{prev}\n{line}" if prev else line
        kinds = [token.kind for token in scan(line)]
        return line, kinds.count(TokenKind.LEFT_PAREN) > kinds.count(TokenKind.RIGHT_PAREN)

    def add(self, source):
        """Scans and parses source, queueing its statements for run. Statements that do not parse are left out, and are
        reported as warnings if self.warn_skipped.
        """
        self.error_handler.register_source(self.path, source)

        parser = Parser(scan(source))
        program = parser.parse_program()

        self.program.statements.extend(program.statements)
        self.to_exec.extend(program.statements)
        self.skipped.extend(parser.skipped)

        if self.warn_skipped:
            for skip in parser.skipped:
                snippet = skip.token.lexeme if skip.token is not None else "end of input"
                self.error_handler.warn("statement skipped: " + skip.reason + " ('{}')", snippet, token=skip.token)

        return program

    def run(self):
        """Runs the queued statements in order. Any EvaluationError propagates and stops the run."""
        try:
            while self.to_exec:
                stmt = self.to_exec.pop(0)
                self.interpreter.execute(stmt)
        finally:
            if self.cmd_line:
                self.to_exec = []  # never rerun what is left after an error

    def dump(self):
        """Returns the structural dump of every statement added so far."""
        return self.program.display()
