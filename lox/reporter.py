"""
Error reporter shared by the scanner and the parser.

One reporter is created per invocation and handed to the stages that need
it; the driver inspects `had_error` afterwards instead of a global flag.

Author: lox-frontend contributors
"""

import logging
from typing import List, Optional, TextIO

from .lexer.errors import Diagnostic
from .lexer.tokens import Token, TokenType

logger = logging.getLogger(__name__)


class ErrorReporter:
    """
    Collects diagnostics and optionally echoes them to a stream.

    Args:
        stream: If given, each diagnostic is written to it as it is reported
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.diagnostics: List[Diagnostic] = []

    @property
    def had_error(self) -> bool:
        return any(d.severity == "error" for d in self.diagnostics)

    def report(self, line: int, where: str, message: str,
               code: Optional[str] = None) -> Diagnostic:
        """Record a diagnostic at `line` with the given location phrase."""
        diagnostic = Diagnostic(line=line, where=where, message=message, code=code)
        self.diagnostics.append(diagnostic)
        logger.debug("reported %s", diagnostic)
        if self.stream is not None:
            print(diagnostic, file=self.stream)
        return diagnostic

    def error(self, line: int, message: str, code: Optional[str] = None) -> Diagnostic:
        """Report a lexical error, which carries no location phrase."""
        return self.report(line, "", message, code)

    def error_at(self, token: Token, message: str, code: Optional[str] = None) -> Diagnostic:
        """Report a syntax error positioned at `token`."""
        return self.report(token.line, location_phrase(token), message, code)

    def reset(self):
        """Forget everything reported so far."""
        self.diagnostics.clear()

    def __len__(self) -> int:
        return len(self.diagnostics)


def location_phrase(token: Token) -> str:
    """Describe where a syntax error occurred: "at end" or "at '<lexeme>'"."""
    if token.type == TokenType.EOF:
        return "at end"
    return f"at '{token.lexeme}'"
