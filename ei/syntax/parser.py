"""Predictive recursive-descent parser for Ei, with a single token of lookahead. See tree.py for the grammar.

Each grammar rule is one method. A rule that cannot match returns None instead of raising: the miss propagates up to
the enclosing statement, which is then dropped from the program without any error. Parsing never fails, it only
produces a shorter program. Dropped statements are recorded in Parser.skipped so that a caller can report them.
"""

from dataclasses import dataclass
from typing import Optional

from ei.syntax.scanner import scan
from ei.syntax.tokens import Token, TokenKind
from ei.syntax.tree import ExprStmt, FunctionApplication, Identifier, Literal, Program, StringLiteral

_EXHAUSTED = object()


@dataclass(frozen=True)
class Skip:
    """Why a statement was left out of the program. token is None if the source ended mid-statement."""
    reason: str
    token: Optional[Token] = None


class Parser:
    """Pulls tokens from any iterable of Tokens on demand, never holding more than one token it has not consumed."""

    def __init__(self, tokens):
        self.tokens = iter(tokens)
        self.lookahead = None
        self.skipped = []

    def parse_program(self):
        """Parses statements until the token stream runs out. Statements that fail to parse are left out."""
        statements = []
        while self.peek() is not None:
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
        return Program(statements)

    def parse_statement(self):
        return self.expression_statement()

    def expression_statement(self):
        expression = self.expression()
        if expression is None:
            return None

        if not self.match(TokenKind.SEMICOLON):
            # the token that should have been ';' stays in the stream and starts the next statement
            self.skip("expected ';' after expression", self.peek())
            return None

        return ExprStmt(expression)

    def expression(self):
        """<primary>, or <primary> "(" args ")" if a '(' follows it immediately. There is only one level of call
        syntax: the result of a call is never called again here.
        """
        callee = self.primary()
        if callee is None or not self.match(TokenKind.LEFT_PAREN):
            return callee

        args = self.arguments()
        if args is None:
            return None
        return FunctionApplication(callee, args)

    def arguments(self):
        """Comma-separated, possibly empty list of expressions closed by ')'. Assumes '(' has been consumed."""
        args = []
        if self.match(TokenKind.RIGHT_PAREN):
            return args

        while True:
            arg = self.expression()
            if arg is None:
                return None
            args.append(arg)

            if self.match(TokenKind.RIGHT_PAREN):
                return args
            if not self.match(TokenKind.COMMA):
                self.skip("expected ',' or ')' in argument list", self.peek())
                return None

    def primary(self):
        """Consumes exactly one token, returning the expression it stands for or None."""
        token = self.advance()

        if token is None:
            self.skip("unexpected end of input")
            return None
        elif token.kind is TokenKind.STRING:
            return Literal(StringLiteral(token.value), token)
        elif token.kind is TokenKind.IDENTIFIER:
            return Identifier(token)

        self.skip(f"expected an expression, found '{token.lexeme}'", token)
        return None

    def peek(self):
        """Returns the next token without consuming it, or None at the end of the stream."""
        if self.lookahead is None:
            self.lookahead = next(self.tokens, _EXHAUSTED)
        return None if self.lookahead is _EXHAUSTED else self.lookahead

    def advance(self):
        token = self.peek()
        if token is not None:
            self.lookahead = None
        return token

    def match(self, kind):
        """Consumes the next token only if it is of the given kind. Returns whether it did."""
        token = self.peek()
        if token is not None and token.kind is kind:
            self.advance()
            return True
        return False

    def skip(self, reason, token=None):
        self.skipped.append(Skip(reason, token))


def parse(tokens):
    """Parses an iterable of Tokens into a Program."""
    return Parser(tokens).parse_program()


def parse_source(source):
    """Scans and parses source text. Returns the Parser too, so skipped statements can be inspected."""
    parser = Parser(scan(source))
    return parser.parse_program(), parser
