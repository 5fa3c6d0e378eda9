"""
Lox Recursive Descent Parser

One method per precedence level, lowest first. Each binary level parses an
operand from the level above and then folds operators in a loop, which
keeps every level left-associative without left recursion:

    expression     -> equality
    equality       -> comparison ( ( "!=" | "==" ) comparison )*
    comparison     -> addition ( ( "<" | ">" | "<=" | ">=" ) addition )*
    addition       -> multiplication ( ( "+" | "-" ) multiplication )*
    multiplication -> unary ( ( "*" | "/" ) unary )*
    unary          -> ( "-" | "!" ) primary | primary
    primary        -> NUMBER | STRING | "true" | "false" | "nil"
                    | "(" expression ")"

Author: lox-frontend contributors
"""

import logging
from typing import Callable, List, Optional

from ..lexer.tokens import Token, TokenType
from ..reporter import ErrorReporter
from .ast_nodes import Expression, Binary, Grouping, Literal, Unary
from .errors import (
    ParseError, create_expect_expression_error, create_missing_paren_error
)

logger = logging.getLogger(__name__)

EQUALITY_OPERATORS = (TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)
COMPARISON_OPERATORS = (
    TokenType.LESS, TokenType.GREATER, TokenType.LESS_EQUAL, TokenType.GREATER_EQUAL,
)
ADDITION_OPERATORS = (TokenType.PLUS, TokenType.MINUS)
MULTIPLICATION_OPERATORS = (TokenType.STAR, TokenType.SLASH)
UNARY_OPERATORS = (TokenType.MINUS, TokenType.BANG)

KEYWORD_LITERALS = {
    TokenType.TRUE: True,
    TokenType.FALSE: False,
    TokenType.NIL: None,
}


class Parser:
    """
    Lox expression parser.

    Consumes a token list ending in EOF and builds one expression tree per
    call to parse(). The first syntax error is reported and aborts the call.
    """

    def __init__(self, tokens: List[Token], reporter: Optional[ErrorReporter] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Tokens from the scanner, terminated by EOF
            reporter: Where syntax errors go; a private one is created if omitted
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token list must end with an EOF token")
        self.tokens = tokens
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.current = 0
        self.last_error: Optional[ParseError] = None

    def parse(self) -> Optional[Expression]:
        """
        Parse one expression starting at the cursor.

        Returns:
            The expression tree, or None if a syntax error was reported
        """
        self.last_error = None
        try:
            return self._expression()
        except ParseError as e:
            self.last_error = e
            logger.debug("parse aborted at token %d: %s", self.current, e.message)
            return None

    def _expression(self) -> Expression:
        return self._equality()

    def _equality(self) -> Expression:
        return self._binary_level(self._comparison, EQUALITY_OPERATORS)

    def _comparison(self) -> Expression:
        return self._binary_level(self._addition, COMPARISON_OPERATORS)

    def _addition(self) -> Expression:
        return self._binary_level(self._multiplication, ADDITION_OPERATORS)

    def _multiplication(self) -> Expression:
        return self._binary_level(self._unary, MULTIPLICATION_OPERATORS)

    def _binary_level(self, operand: Callable[[], Expression], operators) -> Expression:
        """Parse `operand (op operand)*`, folding to the left."""
        expr = operand()

        while self._match(*operators):
            operator = self._previous()
            right = operand()
            expr = Binary(expr, operator, right)

        return expr

    def _unary(self) -> Expression:
        # A single prefix operator applies directly to a primary; "--1" is rejected
        if self._match(*UNARY_OPERATORS):
            operator = self._previous()
            right = self._primary()
            return Unary(operator, right)

        return self._primary()

    def _primary(self) -> Expression:
        if self._match(*KEYWORD_LITERALS):
            return Literal(KEYWORD_LITERALS[self._previous().type])

        if self._match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self._previous().literal)

        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, create_missing_paren_error)
            return Grouping(expr)

        raise self._error(create_expect_expression_error(self._peek()))

    # Utility methods

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it has any of the given types."""
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token; never moves past EOF."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def _consume(self, token_type: TokenType,
                 make_error: Callable[[Token], ParseError]) -> Token:
        """Consume token of expected type or raise the error built from the current token."""
        if self._check(token_type):
            return self._advance()

        raise self._error(make_error(self._peek()))

    def _error(self, error: ParseError) -> ParseError:
        """Report `error` and hand it back for the caller to raise."""
        self.reporter.error_at(error.token, error.message, code=error.code)
        return error


def parse_string(source: str) -> Expression:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string

    Returns:
        Expression AST

    Raises:
        LexerError: If scanning fails
        ParseError: If parsing fails
    """
    from ..lexer import scan_string

    tokens = scan_string(source)
    parser = Parser(tokens)
    expr = parser.parse()
    if expr is None:
        raise parser.last_error
    return expr


def parse_file(filepath: str) -> Expression:
    """
    Convenience function to parse a source file.

    Args:
        filepath: Path to source file

    Returns:
        Expression AST

    Raises:
        LexerError: If scanning fails
        ParseError: If parsing fails
        OSError: If file cannot be read
    """
    from ..lexer import scan_file

    tokens = scan_file(filepath)
    parser = Parser(tokens)
    expr = parser.parse()
    if expr is None:
        raise parser.last_error
    return expr
