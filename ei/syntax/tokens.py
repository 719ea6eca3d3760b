"""Token model for the Ei language: the closed set of lexical categories and the tokens the scanner emits.

Formally, the lexical grammar of Ei can be loosely defined as follows:

```
<punctuation> ::= "{" | "}" | "(" | ")" | "." | "," | ":" | ";"
<operator>    ::= "!" | "!=" | "+" | "-" | "*" | "/" | "=" | "==" | ">" | "<" | "<=" | ">=" | "->" | "&&" | "||"
<keyword>     ::= "let" | "mut" | "fn" | "enum" | "record" | "interface" | "impl" | "check" | "match"
<identifier>  ::= [_a-zA-Z] [_a-zA-Z0-9]*   ; a keyword is never an identifier
<string>      ::= '"' <char>* '"'           ; no escapes, the first '"' after the opening one closes it
<unknown>     ::= <char>                    ; any single character that matches nothing above
```
"""

import enum
from dataclasses import dataclass, field


class TokenKind(enum.Enum):
    """Every category of token the scanner can produce."""

    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    DOT = "."
    COMMA = ","
    COLON = ":"
    SEMICOLON = ";"

    BANG = "!"
    BANG_EQUAL = "!="
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    LESS = "<"
    LESS_EQUAL = "<="
    GREATER_EQUAL = ">="
    RIGHT_ARROW = "->"
    AND = "&&"
    OR = "||"

    LET = "let"
    MUT = "mut"
    FN = "fn"
    ENUM = "enum"
    RECORD = "record"
    INTERFACE = "interface"
    IMPL = "impl"
    CHECK = "check"
    MATCH = "match"

    IDENTIFIER = "<identifier>"
    STRING = "<string>"
    UNKNOWN = "<unknown>"


# reserved words, looked up once a maximal identifier-shaped run has been read
KEYWORDS = {
    kind.value: kind for kind in (
        TokenKind.LET, TokenKind.MUT, TokenKind.FN, TokenKind.ENUM, TokenKind.RECORD,
        TokenKind.INTERFACE, TokenKind.IMPL, TokenKind.CHECK, TokenKind.MATCH,
    )
}

# operators/punctuation that are a single character and never the prefix of a longer token
SINGLE = {kind.value: kind for kind in TokenKind if len(kind.value) == 1 and kind.value not in "!-=><"}

# first char: {second char: longer kind}, tried before falling back to SINGLE_FALLBACK
DOUBLE = {
    "!": {"=": TokenKind.BANG_EQUAL},
    "-": {">": TokenKind.RIGHT_ARROW},
    "=": {"=": TokenKind.EQUAL_EQUAL},
    ">": {"=": TokenKind.GREATER_EQUAL},
    "<": {"=": TokenKind.LESS_EQUAL},
    "&": {"&": TokenKind.AND},
    "|": {"|": TokenKind.OR},
}

# '&' and '|' are deliberately missing: on their own they are UNKNOWN
SINGLE_FALLBACK = {
    "!": TokenKind.BANG,
    "-": TokenKind.MINUS,
    "=": TokenKind.EQUAL,
    ">": TokenKind.GREATER,
    "<": TokenKind.LESS,
}


@dataclass(frozen=True)
class Token:
    """A classified unit of source text.

    Attributes:
        kind: the TokenKind of this token.
        lexeme: the exact source substring that produced the token (string literals keep their quotes).
        offset: index of the token's first character in the source. Only used for error messages, so it takes no
            part in equality.
    """
    kind: TokenKind
    lexeme: str
    offset: int = field(default=0, compare=False)

    @property
    def value(self):
        """Payload of a STRING token (its lexeme without the surrounding quotes), otherwise the lexeme itself."""
        if self.kind is not TokenKind.STRING:
            return self.lexeme

        text = self.lexeme[1:]
        if text.endswith("\""):
            text = text[:-1]
        return text

    @property
    def end(self):
        return self.offset + len(self.lexeme)

    @classmethod
    def identifier(cls, name, offset=0):
        return cls(TokenKind.IDENTIFIER, name, offset)

    @classmethod
    def string(cls, text, offset=0):
        """Token a scanner would produce for the quoted literal "text"."""
        return cls(TokenKind.STRING, f"\"{text}\"", offset)

    def __repr__(self):
        return f"Token({self.kind.name}, {self.lexeme!r})"
