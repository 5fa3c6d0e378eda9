"""
Test suite for the Lox scanner.

Tests cover:
- Token classification and ordering
- Maximal munch for two-character operators
- Number, string and identifier literals
- Comments, whitespace and line tracking
- Error reporting for unterminated strings
"""

import unittest
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer.scanner import Scanner, scan_string, scan_file
from lox.lexer.tokens import Token, TokenType, KEYWORDS
from lox.lexer.errors import LexerError
from lox.reporter import ErrorReporter


def types_of(source: str):
    return [token.type for token in Scanner(source).scan_tokens()]


class TestScanner(unittest.TestCase):
    """Test cases for token production."""

    def test_while_loop_token_sequence(self):
        """Test the full token sequence of a small loop."""
        expected = [
            TokenType.WHILE, TokenType.LEFT_PAREN, TokenType.IDENTIFIER,
            TokenType.GREATER, TokenType.NUMBER, TokenType.RIGHT_PAREN,
            TokenType.LEFT_BRACE, TokenType.IDENTIFIER, TokenType.EQUAL,
            TokenType.IDENTIFIER, TokenType.SLASH, TokenType.NUMBER,
            TokenType.SEMICOLON, TokenType.RIGHT_BRACE, TokenType.EOF,
        ]
        self.assertEqual(types_of("while(x > 2) { x = x / 2; }"), expected)

    def test_empty_source(self):
        """Test that empty input yields exactly one EOF token."""
        tokens = Scanner("").scan_tokens()
        self.assertEqual(tokens, [Token(TokenType.EOF, "", None, 1)])

    def test_single_eof_at_end(self):
        """Test that EOF appears once and only as the last token."""
        for source in ["", "1", "a + b", "// only a comment", '"abc', "\n\n", "@#$"]:
            with self.subTest(source=source):
                kinds = types_of(source)
                self.assertEqual(kinds[-1], TokenType.EOF)
                self.assertEqual(kinds.count(TokenType.EOF), 1)

    def test_single_character_tokens(self):
        """Test every single-character punctuation token."""
        kinds = types_of("(){},.-+;*/")
        self.assertEqual(kinds, [
            TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN,
            TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
            TokenType.COMMA, TokenType.DOT, TokenType.MINUS, TokenType.PLUS,
            TokenType.SEMICOLON, TokenType.STAR, TokenType.SLASH, TokenType.EOF,
        ])

    def test_two_character_operators(self):
        """Test maximal munch on ! = < >."""
        kinds = types_of("! != = == < <= > >=")
        self.assertEqual(kinds, [
            TokenType.BANG, TokenType.BANG_EQUAL,
            TokenType.EQUAL, TokenType.EQUAL_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
            TokenType.EOF,
        ])

    def test_operators_without_spaces(self):
        """Test that '===' splits as '==' then '='."""
        self.assertEqual(types_of("a===b"), [
            TokenType.IDENTIFIER, TokenType.EQUAL_EQUAL, TokenType.EQUAL,
            TokenType.IDENTIFIER, TokenType.EOF,
        ])

    def test_keywords(self):
        """Test that every reserved word is recognized."""
        for word, token_type in KEYWORDS.items():
            with self.subTest(word=word):
                tokens = Scanner(word).scan_tokens()
                self.assertEqual(tokens[0].type, token_type)
                self.assertEqual(tokens[0].lexeme, word)
                self.assertIsNone(tokens[0].literal)

    def test_identifiers_are_not_keywords(self):
        """Test that identifiers containing keywords stay identifiers."""
        for word in ["orchid", "classy", "_if", "While", "nil2", "x_1"]:
            with self.subTest(word=word):
                self.assertEqual(types_of(word)[0], TokenType.IDENTIFIER)

    def test_number_literals(self):
        """Test integer and decimal numbers."""
        tokens = Scanner("123 45.67 0").scan_tokens()
        self.assertEqual([t.literal for t in tokens[:-1]], [123.0, 45.67, 0.0])
        self.assertEqual([t.lexeme for t in tokens[:-1]], ["123", "45.67", "0"])
        for token in tokens[:-1]:
            self.assertIsInstance(token.literal, float)

    def test_trailing_dot_not_absorbed(self):
        """Test that '1.' scans as NUMBER then DOT."""
        tokens = Scanner("1.").scan_tokens()
        self.assertEqual([t.type for t in tokens],
                         [TokenType.NUMBER, TokenType.DOT, TokenType.EOF])
        self.assertEqual(tokens[0].lexeme, "1")

    def test_method_call_on_number(self):
        """Test that '1.foo' does not swallow the dot."""
        self.assertEqual(types_of("1.foo"), [
            TokenType.NUMBER, TokenType.DOT, TokenType.IDENTIFIER, TokenType.EOF,
        ])

    def test_leading_dot_is_not_a_number(self):
        """Test that '.5' scans as DOT then NUMBER."""
        self.assertEqual(types_of(".5"), [TokenType.DOT, TokenType.NUMBER, TokenType.EOF])

    def test_digit_before_identifier(self):
        """Test that digits are classified before identifier characters."""
        tokens = Scanner("3abc").scan_tokens()
        self.assertEqual(tokens[0].type, TokenType.NUMBER)
        self.assertEqual(tokens[1].type, TokenType.IDENTIFIER)
        self.assertEqual(tokens[1].lexeme, "abc")

    def test_string_literal(self):
        """Test that the literal excludes the quotes and keeps backslashes."""
        tokens = Scanner('"hello \\n world"').scan_tokens()
        self.assertEqual(tokens[0].type, TokenType.STRING)
        self.assertEqual(tokens[0].lexeme, '"hello \\n world"')
        self.assertEqual(tokens[0].literal, "hello \\n world")

    def test_empty_string_literal(self):
        tokens = Scanner('""').scan_tokens()
        self.assertEqual(tokens[0].literal, "")

    def test_multiline_string_counts_lines(self):
        """Test that newlines inside strings advance the line counter."""
        tokens = Scanner('"a\nb"\nx').scan_tokens()
        self.assertEqual(tokens[0].literal, "a\nb")
        self.assertEqual(tokens[0].line, 2)
        self.assertEqual(tokens[1].line, 3)

    def test_line_comment(self):
        """Test that comments produce no tokens."""
        tokens = Scanner("1 // the rest is ignored + 2\n3").scan_tokens()
        self.assertEqual([t.lexeme for t in tokens], ["1", "3", ""])
        self.assertEqual(tokens[1].line, 2)

    def test_comment_at_end_of_input(self):
        self.assertEqual(types_of("// nothing"), [TokenType.EOF])

    def test_whitespace_and_newlines(self):
        """Test that whitespace is skipped and newlines bump the line."""
        tokens = Scanner(" \t\r1\n\n  2").scan_tokens()
        self.assertEqual([(t.lexeme, t.line) for t in tokens],
                         [("1", 1), ("2", 3), ("", 3)])

    def test_unrecognized_characters_skipped(self):
        """Test that unknown characters vanish without a diagnostic."""
        scanner = Scanner("1 @ # $ 2")
        tokens = scanner.scan_tokens()
        self.assertEqual([t.lexeme for t in tokens], ["1", "2", ""])
        self.assertFalse(scanner.has_errors())

    def test_rescanning_lexemes(self):
        """Test that each lexeme rescanned alone yields the same kind."""
        source = 'var x = (1.5 + "s") <= y != !z; // c\nclass Foo {}'
        for token in Scanner(source).scan_tokens()[:-1]:
            with self.subTest(lexeme=token.lexeme):
                again = Scanner(token.lexeme).scan_tokens()
                self.assertEqual(len(again), 2)
                self.assertEqual(again[0].type, token.type)
                self.assertEqual(again[0].literal, token.literal)

    def test_scan_tokens_is_repeatable(self):
        """Test that calling scan_tokens twice yields the same tokens."""
        scanner = Scanner("a + 1\nb")
        first = list(scanner.scan_tokens())
        second = scanner.scan_tokens()
        self.assertEqual(first, second)


class TestScannerErrors(unittest.TestCase):
    """Test cases for lexical error reporting."""

    def test_unterminated_string(self):
        """Test one diagnostic, no STRING token and a trailing EOF."""
        reporter = ErrorReporter()
        tokens = Scanner('"abc', reporter).scan_tokens()

        self.assertEqual([t.type for t in tokens], [TokenType.EOF])
        self.assertEqual(len(reporter.diagnostics), 1)
        diagnostic = reporter.diagnostics[0]
        self.assertEqual(diagnostic.message, "Unterminated string.")
        self.assertEqual(diagnostic.line, 1)
        self.assertEqual(diagnostic.where, "")

    def test_unterminated_string_keeps_prior_tokens(self):
        """Test that tokens before the bad string survive."""
        scanner = Scanner('x = 1;\nprint "oops\nmore')
        tokens = scanner.scan_tokens()

        self.assertEqual([t.type for t in tokens], [
            TokenType.IDENTIFIER, TokenType.EQUAL, TokenType.NUMBER,
            TokenType.SEMICOLON, TokenType.PRINT, TokenType.EOF,
        ])
        self.assertTrue(scanner.has_errors())
        self.assertEqual(scanner.diagnostics[0].line, 3)
        self.assertEqual(tokens[-1].line, 3)

    def test_scanner_owns_reporter_by_default(self):
        scanner = Scanner("1")
        self.assertIsInstance(scanner.reporter, ErrorReporter)
        scanner.scan_tokens()
        self.assertFalse(scanner.has_errors())


class TestScanHelpers(unittest.TestCase):
    """Test cases for scan_string and scan_file."""

    def test_scan_string(self):
        tokens = scan_string("1 + 2")
        self.assertEqual(len(tokens), 4)

    def test_scan_string_raises_first_error(self):
        with self.assertRaises(LexerError) as ctx:
            scan_string('1\n"open')
        self.assertEqual(ctx.exception.line, 2)
        self.assertEqual(str(ctx.exception), "[line 2] Error: Unterminated string.")

    def test_scan_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "script.lox")
            with open(path, "w", encoding="utf-8") as f:
                f.write("print \"hi\";\n")
            tokens = scan_file(path)

        self.assertEqual([t.type for t in tokens], [
            TokenType.PRINT, TokenType.STRING, TokenType.SEMICOLON, TokenType.EOF,
        ])
        self.assertEqual(tokens[-1].line, 2)


class TestToken(unittest.TestCase):
    """Test cases for the token value type."""

    def test_structural_equality(self):
        a = Token(TokenType.NUMBER, "1", 1.0, 1)
        b = Token(TokenType.NUMBER, "1", 1.0, 1)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_immutable(self):
        token = Token(TokenType.IDENTIFIER, "x", None, 1)
        with self.assertRaises(AttributeError):
            token.lexeme = "y"

    def test_predicates(self):
        self.assertTrue(Token(TokenType.NUMBER, "1", 1.0, 1).is_literal)
        self.assertTrue(Token(TokenType.NIL, "nil", None, 1).is_literal)
        self.assertTrue(Token(TokenType.WHILE, "while", None, 1).is_keyword)
        self.assertTrue(Token(TokenType.BANG_EQUAL, "!=", None, 1).is_operator)
        self.assertFalse(Token(TokenType.IDENTIFIER, "x", None, 1).is_keyword)

    def test_str(self):
        self.assertEqual(str(Token(TokenType.NUMBER, "12", 12.0, 1)), "NUMBER '12' 12.0")
        self.assertEqual(str(Token(TokenType.EOF, "", None, 1)), "EOF ''")


if __name__ == '__main__':
    unittest.main()
