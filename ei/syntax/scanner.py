"""Single-pass lexical scanner for Ei. Turns source text into a lazy, forward-only stream of Tokens.

Scanning is total: unrecognized characters become UNKNOWN tokens rather than errors, and an unterminated string
simply runs to the end of the source. Every emitted lexeme is a verbatim slice of the source, so joining the lexemes
with the whitespace skipped between them gives back the original text.
"""

from ei.syntax.tokens import DOUBLE, KEYWORDS, SINGLE, SINGLE_FALLBACK, Token, TokenKind


# str.isspace also accepts these, but they are not Unicode White_Space
SEPARATORS = "\x1c\x1d\x1e\x1f"


def is_whitespace(char):
    return char.isspace() and char not in SEPARATORS


def can_start_identifier(char):
    return char == "_" or ("a" <= char <= "z") or ("A" <= char <= "Z")


def can_continue_identifier(char):
    return can_start_identifier(char) or "0" <= char <= "9"


class Scanner:
    """Iterator of Tokens over a source string. Not restartable: scan the same text again with a new Scanner."""

    def __init__(self, source):
        self.source = source
        self.start = 0  # offset of the token being built
        self.pos = 0    # offset of the next unread character

    def __iter__(self):
        return self

    def __next__(self):
        self.skip_whitespace()
        self.start = self.pos

        char = self.advance()
        if char is None:
            raise StopIteration

        return Token(self.classify(char), self.lexeme, self.start)

    @property
    def lexeme(self):
        """Source text of the token being built."""
        return self.source[self.start:self.pos]

    def classify(self, char):
        """Returns the TokenKind for a token starting with char, consuming the rest of its characters."""
        if char in SINGLE:
            return SINGLE[char]

        if char in DOUBLE:
            for second, kind in DOUBLE[char].items():
                if self.consume(second):
                    return kind
            return SINGLE_FALLBACK.get(char, TokenKind.UNKNOWN)

        if char == "\"":
            self.consume_until(lambda c: c == "\"")
            self.consume("\"")  # absent if the string is unterminated
            return TokenKind.STRING

        if can_start_identifier(char):
            self.consume_until(lambda c: not can_continue_identifier(c))
            return KEYWORDS.get(self.lexeme, TokenKind.IDENTIFIER)

        return TokenKind.UNKNOWN

    def peek(self):
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def advance(self):
        char = self.peek()
        if char is not None:
            self.pos += 1
        return char

    def consume(self, expected):
        """Consumes the next character only if it is expected. Returns whether it did."""
        if self.peek() == expected:
            self.pos += 1
            return True
        return False

    def consume_until(self, should_stop):
        """Consumes characters until should_stop(char) holds for the next one or the source runs out."""
        while self.peek() is not None and not should_stop(self.peek()):
            self.pos += 1

    def skip_whitespace(self):
        self.consume_until(lambda c: not is_whitespace(c))


def scan(source):
    """Returns a fresh token stream over source."""
    return Scanner(source)
