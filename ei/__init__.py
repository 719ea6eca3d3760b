"""Ei: the front end of a small scripting language.

Basic program flow:
    1. Scanner: turns source text into a stream of tokens, one token at a time (see ei/syntax/scanner.py)
        - Never fails: characters it does not recognize become UNKNOWN tokens
    2. Parser: pulls tokens with one token of lookahead and builds a syntax tree (see ei/syntax/parser.py)
        - Never fails either: statements that do not parse are left out of the tree
    3. Interpreter: walks the tree, calling native functions by name (see ei/runtime/interpreter.py)
        - Strict: any error while evaluating stops the run

"""

__version__ = "0.0.1"
