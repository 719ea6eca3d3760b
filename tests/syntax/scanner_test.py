import unittest

from ei.syntax.scanner import Scanner, scan
from ei.syntax.tokens import KEYWORDS, Token, TokenKind


def kinds(source):
    return [token.kind for token in scan(source)]


class ScannerTestCase(unittest.TestCase):

    def test_empty_source(self):
        should_be_empty = ["", " ", "\n\t  \r\n"]
        for case in should_be_empty:
            self.assertEqual([], list(scan(case)), repr(case))

    def test_whitespace_is_skipped(self):
        expected = [TokenKind.LEFT_BRACE, TokenKind.PLUS, TokenKind.RIGHT_BRACE, TokenKind.MINUS]
        self.assertEqual(expected, kinds("{    + \n  }\n   -"))
        self.assertEqual([TokenKind.PLUS, TokenKind.MINUS], kinds("\u00a0+\u2028\u3000-\x0b"))

    def test_separators_are_not_whitespace(self):
        for case in ["\x1c", "\x1d", "\x1e", "\x1f"]:
            self.assertEqual([Token(TokenKind.UNKNOWN, case)], list(scan(case)), repr(case))
        self.assertEqual([TokenKind.PLUS, TokenKind.UNKNOWN, TokenKind.MINUS], kinds("+ \x1f -"))

    def test_static_tokens(self):
        cases = {
            "{": TokenKind.LEFT_BRACE,
            "}": TokenKind.RIGHT_BRACE,
            "(": TokenKind.LEFT_PAREN,
            ")": TokenKind.RIGHT_PAREN,
            ".": TokenKind.DOT,
            ",": TokenKind.COMMA,
            ":": TokenKind.COLON,
            ";": TokenKind.SEMICOLON,
            "!": TokenKind.BANG,
            "+": TokenKind.PLUS,
            "-": TokenKind.MINUS,
            "*": TokenKind.STAR,
            "/": TokenKind.SLASH,
            "=": TokenKind.EQUAL,
            ">": TokenKind.GREATER,
            "<": TokenKind.LESS,
            "->": TokenKind.RIGHT_ARROW,
            "<=": TokenKind.LESS_EQUAL,
            ">=": TokenKind.GREATER_EQUAL,
            "==": TokenKind.EQUAL_EQUAL,
            "!=": TokenKind.BANG_EQUAL,
            "&&": TokenKind.AND,
            "||": TokenKind.OR,
        }
        for case, expected in cases.items():
            self.assertEqual([Token(expected, case)], list(scan(case)), case)

    def test_longest_match(self):
        cases = {
            "!!=": [TokenKind.BANG, TokenKind.BANG_EQUAL],
            "-->": [TokenKind.MINUS, TokenKind.RIGHT_ARROW],
            "===": [TokenKind.EQUAL_EQUAL, TokenKind.EQUAL],
            "> =": [TokenKind.GREATER, TokenKind.EQUAL],
            "<<=": [TokenKind.LESS, TokenKind.LESS_EQUAL],
            "&&&": [TokenKind.AND, TokenKind.UNKNOWN],
            "|||": [TokenKind.OR, TokenKind.UNKNOWN],
            "-a": [TokenKind.MINUS, TokenKind.IDENTIFIER],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, kinds(case), case)

    def test_lone_ampersand_and_pipe_are_unknown(self):
        should_be_unknown = ["&", "|"]
        for case in should_be_unknown:
            self.assertEqual([Token(TokenKind.UNKNOWN, case)], list(scan(case)), case)

    def test_keywords(self):
        for keyword, kind in KEYWORDS.items():
            self.assertEqual([Token(kind, keyword)], list(scan(keyword)), keyword)

    def test_identifiers(self):
        should_pass = ["a", "eggs", "_name", "d1m12", "hello_world", "lets", "fnord", "_", "Match", "print_ln"]
        for case in should_pass:
            self.assertEqual([Token.identifier(case)], list(scan(case)), case)

    def test_identifier_is_maximal(self):
        self.assertEqual([Token.identifier("ab12_c"), Token(TokenKind.UNKNOWN, "$")], list(scan("ab12_c$")))
        self.assertEqual([Token(TokenKind.UNKNOWN, "1"), Token.identifier("a")], list(scan("1a")))

    def test_string_literals(self):
        cases = {
            "\"\"": "",
            "\"a\"": "a",
            "\"abacus\"": "abacus",
            "\"hi wrld\"": "hi wrld",
            "\"let fn ( ;\"": "let fn ( ;",
            "\"multi\nline\"": "multi\nline",
        }
        for case, expected in cases.items():
            tokens = list(scan(case))
            self.assertEqual([Token(TokenKind.STRING, case)], tokens, case)
            self.assertEqual(expected, tokens[0].value, case)

    def test_unterminated_string(self):
        tokens = list(scan("f(\"abc"))
        self.assertEqual(TokenKind.STRING, tokens[-1].kind)
        self.assertEqual("\"abc", tokens[-1].lexeme)
        self.assertEqual("abc", tokens[-1].value)

        tokens = list(scan("\""))
        self.assertEqual([Token(TokenKind.STRING, "\"")], tokens)
        self.assertEqual("", tokens[0].value)

    def test_unknown_characters(self):
        should_be_unknown = ["$", "#", "@", "1", "[", "]", "λ", "\\", "'"]
        for case in should_be_unknown:
            self.assertEqual([Token(TokenKind.UNKNOWN, case)], list(scan(case)), case)

    def test_lexemes_are_source_slices(self):
        cases = [
            "print_ln(\"hi\");",
            "  let x = \"a b\" -> f(y, z) && !w != v ;\n",
            "$$ @ fn\t\"unterminated",
            "\n\n   ",
            "a(b(), c)",
        ]
        for case in cases:
            rebuilt = ""
            for token in scan(case):
                self.assertEqual(case[token.offset:token.end], token.lexeme, case)
                self.assertTrue(case[len(rebuilt):token.offset].isspace() or token.offset == len(rebuilt), case)
                rebuilt = case[:token.offset] + token.lexeme
            self.assertTrue(case[len(rebuilt):] == "" or case[len(rebuilt):].isspace(), case)

    def test_offsets(self):
        tokens = list(scan("  f (\n\"x\");"))
        self.assertEqual([2, 4, 6, 9, 10], [token.offset for token in tokens])

    def test_not_restartable(self):
        scanner = Scanner("a b")
        self.assertEqual(2, len(list(scanner)))
        self.assertEqual([], list(scanner))
        self.assertEqual(2, len(list(scan("a b"))))

    def test_lazy(self):
        scanner = scan("a \"unterminated")
        self.assertEqual(Token.identifier("a"), next(scanner))
        self.assertEqual(1, scanner.pos)  # nothing past "a" has been read


if __name__ == '__main__':
    unittest.main()
