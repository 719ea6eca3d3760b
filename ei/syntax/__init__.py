"""Lexical scanning, syntax tree and parsing for Ei."""
