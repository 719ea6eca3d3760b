"""Abstract syntax tree for Ei. The parser builds these bottom-up and the interpreter walks them.

The grammar the tree mirrors can be loosely defined as follows:

```
<program>     ::= <stmt>*
<stmt>        ::= <expression> ";"                        ; "expression statement", the only statement so far
<expression>  ::= <primary>
                | <primary> "(" [<expression> ("," <expression>)*] ")"   ; "function application"
<primary>     ::= <identifier>
                | <string>                                ; "literal"
```

Each node exclusively owns its children: there is no sharing and there are no cycles, so plain recursion is enough to
walk, compare or dump a tree.
"""

from dataclasses import dataclass, field
from typing import List, Union

from ei.syntax.tokens import Token

INDENT = "    "


class Node:
    """Superclass of every syntax tree node. Provides the structural dump used by `ei dump-ast`."""

    def children(self):
        """Nodes owned by this one, in source order."""
        return []

    def label(self):
        """Single-line description of this node, without its children."""
        return type(self).__name__

    def display(self, indents=0):
        """Recursively displays the tree rooted at this node in a readable format.

        Format:
        <label>[
            <label>[
                ...
                <label>  # <-- if there are no children
            ]
        ]
        """
        result = f"{INDENT * indents}{self.label()}"
        nodes = self.children()
        if nodes:
            result += "["
            for node in nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{INDENT * indents}]"
        return result

    def __str__(self):
        return self.display()


@dataclass
class StringLiteral(Node):
    text: str

    def label(self):
        return f"String({self.text!r})"


@dataclass
class Identifier(Node):
    name: Token

    @classmethod
    def named(cls, name):
        return cls(Token.identifier(name))

    def label(self):
        return f"Identifier({self.name.lexeme!r})"


@dataclass
class Literal(Node):
    value: StringLiteral
    token: Token = field(default=None, compare=False, repr=False)  # only kept for error messages

    @classmethod
    def of(cls, text):
        return cls(StringLiteral(text), Token.string(text))

    def label(self):
        return f"Literal({self.value.label()})"


@dataclass
class FunctionApplication(Node):
    callee: "Expression"
    args: List["Expression"] = field(default_factory=list)

    def children(self):
        return [self.callee] + self.args

    def label(self):
        return f"FunctionApplication(args={len(self.args)})"


Expression = Union[Identifier, Literal, FunctionApplication]


@dataclass
class ExprStmt(Node):
    """An expression evaluated for its effect, terminated by ';' in source."""
    expression: Expression

    def children(self):
        return [self.expression]

    def label(self):
        return "Expr"


Stmt = ExprStmt


@dataclass
class Program(Node):
    statements: List[Stmt] = field(default_factory=list)

    @classmethod
    def empty(cls):
        return cls([])

    @classmethod
    def with_statements(cls, statements):
        return cls(list(statements))

    def children(self):
        return self.statements

    def label(self):
        return f"Program(statements={len(self.statements)})"

    def __len__(self):
        return len(self.statements)

    def __iter__(self):
        return iter(self.statements)
