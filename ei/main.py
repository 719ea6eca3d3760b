"""Command-line front end for Ei: runs or dumps a .ei file, or starts the interactive shell. Also uses the error handling
context manager. Called from the ei console script and from `python -m ei`.
"""

import argparse

from ei import __version__
from ei.lang.error import ErrorHandler
from ei.lang.session import Session
from ei.lang.shell import Shell

WARN_SKIPPED_HELP = "warn about statements that could not be parsed and were left out"


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ei",
        description="The larval form of a dependently-typed scripting language.",
        epilog="Ei is currently just a lexer, parser and tree-walking interpreter, but maybe one day it will be a "
               "dependently-typed interpreted scripting language.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-W", "--warn-skipped", action="store_true", help=WARN_SKIPPED_HELP)

    # also accepted after the subcommand, where leaving it out keeps the top-level value
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-W", "--warn-skipped", action="store_true", default=argparse.SUPPRESS, help=WARN_SKIPPED_HELP)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    run = subparsers.add_parser("run", parents=[common], help="run the provided .ei file")
    run.add_argument("path", help="file to interpret and run")

    dump = subparsers.add_parser("dump-ast", parents=[common],
                                 help="dump a readable description of the syntax tree of the provided file")
    dump.add_argument("path", help="file to parse")

    return parser


def main(argv=None):
    """Runs the Ei interpreter. With no command, goes to command-line mode."""
    with ErrorHandler() as error_handler:
        args = build_parser().parse_args(argv)

        if args.command == "run":
            sess = Session(error_handler, args.path, warn_skipped=args.warn_skipped)
            sess.run()

        elif args.command == "dump-ast":
            sess = Session(error_handler, args.path, warn_skipped=args.warn_skipped)
            print(sess.dump())

        else:
            Shell(Session(error_handler, Session.SH_FILE, warn_skipped=args.warn_skipped, cmd_line=True)).cmdloop()
