"""Tree-walking interpreter for Ei. Evaluates an accepted Program statement by statement against a table of native
callables.

Evaluation is strict: every inconsistency found while evaluating (unknown callee, calling a non-function, wrong arity
or argument type) raises an EvaluationError, which stops the run. There is no recovery mid-statement and statements
after the failing one are never executed.
"""

import sys

from ei.lang.error import EvaluationError, NotCallableError, UnknownCalleeError
from ei.runtime.natives import standard_natives
from ei.runtime.values import NativeFunctionReference, StringValue, type_name
from ei.syntax.tree import ExprStmt, FunctionApplication, Identifier, Literal


class Interpreter:
    """Evaluates syntax trees. Each instance owns its output sink and its function table."""

    def __init__(self, out=None, natives=None):
        """out is the sink natives write to (sys.stdout if None). natives is a dict of name: native callable; if None,
        the standard natives bound to out are used. The table is copied, so later changes to natives are not seen.
        """
        self.out = out if out is not None else sys.stdout
        self.functions = dict(natives) if natives is not None else standard_natives(self.out)

        self._rules = {
            Identifier: self.eval_identifier,
            Literal: self.eval_literal,
            FunctionApplication: self.eval_function_application,
        }

    def interpret(self, program):
        """Executes program's statements in order, for effect."""
        for stmt in program.statements:
            self.execute(stmt)

    def execute(self, stmt):
        """Executes a single statement and returns its value."""
        if isinstance(stmt, ExprStmt):
            return self.evaluate(stmt.expression)
        raise TypeError(f"not a statement: {stmt!r}")

    def evaluate(self, expression):
        """Dispatches on the type of expression to the rule that evaluates it."""
        try:
            rule = self._rules[type(expression)]
        except KeyError:
            raise TypeError(f"not an expression: {expression!r}") from None
        return rule(expression)

    def eval_identifier(self, expression):
        # no variables yet: every identifier names a function
        return NativeFunctionReference(expression.name.lexeme)

    def eval_literal(self, expression):
        return StringValue(expression.value.text)

    def eval_function_application(self, expression):
        callee = self.evaluate(expression.callee)
        if not isinstance(callee, NativeFunctionReference):
            raise NotCallableError("cannot call a non-function, tried to call a {}", type_name(callee),
                                   token=_anchor(expression.callee))

        args = [self.evaluate(arg) for arg in expression.args]

        try:
            function = self.functions[callee.name]
        except KeyError:
            raise UnknownCalleeError("unknown function '{}'", callee.name, token=_anchor(expression.callee)) from None

        try:
            return function(args)
        except EvaluationError as error:
            if error.token is None:
                error.token = _anchor(expression.callee)  # natives do not know where they were called from
            raise


def _anchor(expression):
    """Returns the first token of expression, used to point at it in error messages."""
    if isinstance(expression, Identifier):
        return expression.name
    elif isinstance(expression, Literal):
        return expression.token
    elif isinstance(expression, FunctionApplication):
        return _anchor(expression.callee)
    return None
