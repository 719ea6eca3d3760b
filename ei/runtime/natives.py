"""Native callables: functions implemented in Python and exposed to Ei programs by name.

A native callable takes the list of evaluated argument Values and returns a Value. It must validate its arguments
before doing anything observable, so a bad call never produces partial output.
"""

from ei.lang.error import ArgumentTypeError, ArityError
from ei.runtime.values import VOID, StringValue, type_name


def expect_arity(name, args, arity):
    if len(args) != arity:
        msg = "wrong number of arguments to '{}': expected " + f"{arity}, got {len(args)}"
        raise ArityError(msg, name)


def expect_string(name, args, idx):
    arg = args[idx]
    if not isinstance(arg, StringValue):
        msg = "argument " + f"{idx + 1}" + " of '{}' must be a string, got {}"
        raise ArgumentTypeError(msg, (name, type_name(arg)))
    return arg.text


def make_print_ln(out):
    """Returns print_ln bound to the sink out, which only needs a write(str) method."""

    def print_ln(args):
        expect_arity("print_ln", args, 1)
        text = expect_string("print_ln", args, 0)

        out.write(text + "\n")
        return VOID

    return print_ln


def standard_natives(out):
    """Returns the default function table, with every native writing to out."""
    return {
        "print_ln": make_print_ln(out),
    }
