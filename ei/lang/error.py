"""Error handling for the Ei language. Only EiErrors should be encountered during running: if another type of error is
raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Scanning and parsing never raise (bad input becomes UNKNOWN tokens or dropped statements), so in practice every
EiError comes either from loading a file or from evaluation, where each one is fatal for the run.
"""

import sys

from termcolor import colored


class EiError(Exception):
    """Templates an error/warning message so that it can be used to throw an Ei error/warning."""

    def __init__(self, msg, snippets=None, token=None, diagnosis=True, internal=False):
        """snippets are bolded and substituted into the {} fields of msg. token, if given, is the token at fault and is
        underlined in the diagnosis.
        """
        if snippets is None:
            snippets = []
        if isinstance(snippets, str):
            snippets = [snippets]

        self.plain_msg = msg.format(*snippets)
        self.msg = msg.format(*(colored(snippet, attrs=["bold"]) for snippet in snippets))

        self.token = token
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.plain_msg)


class EvaluationError(EiError):
    """Raised while evaluating an accepted program. Always fatal for the current run."""


class UnknownCalleeError(EvaluationError):
    """A name was called that has no entry in the function table."""


class NotCallableError(EvaluationError):
    """Something that is not a function reference was called."""


class ArityError(EvaluationError):
    """A native callable was given the wrong number of arguments."""


class ArgumentTypeError(EvaluationError):
    """A native callable was given an argument of the wrong type."""


def locate(source, offset):
    """Returns (line, line_num, col) of offset in source. line_num and col are 1-based."""
    line_start = source.rfind("\n", 0, offset) + 1
    line_end = source.find("\n", offset)
    if line_end == -1:
        line_end = len(source)

    line_num = source.count("\n", 0, offset) + 1
    return source[line_start:line_end], line_num, offset - line_start + 1


class ErrorHandler:
    """Context manager that will silently suppress Python errors and raise custom Ei errors/warnings."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, file=None):
        self.fatal = fatal
        self.file = file  # where reports are printed, sys.stdout if None
        self.traceback = {}  # path: source, reports point into the most recently registered one

    def register_source(self, path, source):
        """Registers source under path so that token offsets can be turned into lines and columns."""
        self.traceback.pop(path, None)
        self.traceback[path] = source

    def _print(self, *args):
        print(*args, file=self.file if self.file is not None else sys.stdout)

    def _origin(self, token):
        """Returns (path, line, line_num, col) of token in the most recently registered source."""
        if not self.traceback:
            return None, None, None, None

        path, source = list(self.traceback.items())[-1]
        if token is None or source is None or token.offset > len(source):
            return path, None, None, None
        return (path, *locate(source, token.offset))

    @staticmethod
    def diagnose(line, col, length, warning=False):
        """Returns line with the offending part highlighted and bolded, underlined with ^~~~."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR
        start = col - 1
        end = start + max(length, 1)

        diagnosis = "  " + line[:start]
        diagnosis += colored(line[start:end], color, attrs=["bold"])
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), color, attrs=["bold"])

        return diagnosis

    def _report(self, error, label, color):
        path, line, line_num, col = self._origin(error.token)

        report = ""
        if path is not None and line_num is not None:
            report += colored(f"{path}:{line_num}:{col}: ", attrs=["bold"])
        elif path is not None:
            report += colored(f"{path}: ", attrs=["bold"])

        if error.internal:
            report += colored("[internal] ", color, attrs=["bold"])

        report += colored(f"{label}: ", color, attrs=["bold"]) + error.msg
        self._print(report)

        if not error.internal and error.diagnosis and line is not None:
            length = len(error.token.lexeme.splitlines()[0]) if error.token.lexeme.strip() else 1
            self._print(ErrorHandler.diagnose(line, col, length, warning=color == ErrorHandler.WARNING))

    def warn(self, *args, **kwargs):
        """Generates and prints a warning message based on args. Never stops the run."""
        self._report(EiError(*args, **kwargs), "warning", ErrorHandler.WARNING)

    def throw(self, error):
        """Prints error, which must be an EiError. Exits the process if self.fatal."""
        self._report(error, "error", ErrorHandler.ERROR)

        if self.fatal:
            sys.exit(1)
        self.traceback = {}  # if error occurred, reset traceback (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(EiError("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(EiError("maximum nesting depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, EiError):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(EiError(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
