"""
Error handling for the Lox parser.

A ParseError unwinds the recursive descent back to Parser.parse(), which
has already reported it. The factories below build the two syntax errors
the expression grammar can produce.

Author: lox-frontend contributors
"""

from typing import Optional

from ..lexer.tokens import Token
from ..reporter import location_phrase


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Carries the token at the failure point for position information.
    """

    def __init__(self, message: str, token: Token, code: Optional[str] = None):
        super().__init__(message)
        if code is not None and code not in PARSER_ERROR_CODES:
            raise ValueError(f"unknown parser error code {code!r}")
        self.message = message
        self.token = token
        self.code = code

    @property
    def line(self) -> int:
        return self.token.line

    @property
    def where(self) -> str:
        return location_phrase(self.token)

    @property
    def description(self) -> Optional[str]:
        """Category text for this error's code, if it has one."""
        return PARSER_ERROR_CODES.get(self.code)

    def __str__(self) -> str:
        return f"[line {self.line}] Error {self.where}: {self.message}"


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Expected an expression",
    "P002": "Unclosed parenthesis",
}

EXPECT_EXPRESSION = "Expect expression."
EXPECT_RIGHT_PAREN = "Expected ')' after expression."


def create_expect_expression_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    return ParseError(EXPECT_EXPRESSION, found, code="P001")


def create_missing_paren_error(found: Token) -> ParseError:
    """Create an error for a group missing its closing ')'."""
    return ParseError(EXPECT_RIGHT_PAREN, found, code="P002")
