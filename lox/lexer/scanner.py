"""
Lox Scanner - turns source text into a flat list of tokens

Single forward pass with a `start`/`current` cursor pair. Lexical errors
go to the ErrorReporter and scanning carries on, so a bad string literal
never hides the tokens around it.

Author: lox-frontend contributors
"""

import logging
from typing import List, Optional

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, ONE_OR_TWO_CHAR_TOKENS
)
from .errors import LexerError, Diagnostic, UNTERMINATED_STRING
from ..reporter import ErrorReporter

logger = logging.getLogger(__name__)

WHITESPACE = " \r\t"


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def is_alphanumeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


class Scanner:
    """
    Lox lexical analyzer.

    Converts source text into tokens terminated by exactly one EOF token.
    """

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text
            reporter: Where lexical errors go; a private one is created if omitted
        """
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with the EOF token
        """
        self.tokens = []
        self.start = 0
        self.current = 0
        self.line = 1

        while not self._is_at_end():
            self.start = self.current
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def _scan_token(self):
        """Classify and consume one lexeme starting at `self.start`."""
        char = self._advance()

        if is_digit(char):
            self._number()
        elif is_alpha(char):
            self._identifier()
        elif char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in ONE_OR_TWO_CHAR_TOKENS:
            single, double = ONE_OR_TWO_CHAR_TOKENS[char]
            self._add_token(double if self._match("=") else single)
        elif char == "/":
            if self._match("/"):
                # Line comment runs to the newline, which is left for the next pass
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char == '"':
            self._string()
        elif char == "\n":
            self.line += 1
        elif char in WHITESPACE:
            pass
        else:
            # Unrecognized characters are dropped without a diagnostic
            logger.debug("skipping unrecognized character %r on line %d", char, self.line)

    def _number(self):
        """Scan a NUMBER; a trailing '.' is only consumed when a digit follows it."""
        while is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()  # Consume the '.'
            while is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _identifier(self):
        """Scan an identifier, promoting it to a keyword on an exact match."""
        while is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _string(self):
        """Scan a string literal. No escape sequences; newlines are allowed inside."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            self.reporter.error(self.line, UNTERMINATED_STRING, code="L001")
            return

        self._advance()  # Closing quote

        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _add_token(self, token_type: TokenType, literal=None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line))

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is `expected`."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _advance(self) -> str:
        self.current += 1
        return self.source[self.current - 1]

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def has_errors(self) -> bool:
        """Check if the scanner reported any errors."""
        return self.reporter.had_error

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return self.reporter.diagnostics


def scan_string(source: str) -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning reported an error
    """
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()

    if scanner.has_errors():
        # Raise the first error encountered
        raise LexerError.from_diagnostic(scanner.diagnostics[0])

    return tokens


def scan_file(filepath: str) -> List[Token]:
    """
    Convenience function to scan a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning reported an error
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return scan_string(source)
