"""Runtime values. Produced only by evaluating an expression and never kept beyond the statement that made them."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NativeFunctionReference:
    """Names an entry of the interpreter's function table. The name is only resolved when the reference is called."""
    name: str

    def __str__(self):
        return f"<native fn {self.name}>"


@dataclass(frozen=True)
class StringValue:
    text: str

    def __str__(self):
        return self.text


class Void:
    """The value of a call that returns nothing. Use the VOID singleton."""

    def __repr__(self):
        return "Void"

    def __str__(self):
        return "void"


VOID = Void()


def type_name(value):
    """Name of value's type as it appears in error messages."""
    if isinstance(value, NativeFunctionReference):
        return "function"
    elif isinstance(value, StringValue):
        return "string"
    elif isinstance(value, Void):
        return "void"
    return type(value).__name__
