"""
Error handling for the Lox scanner.

Provides the diagnostic record shared by the scanner, the parser and the
error reporter, plus the exception raised by the strict scanning helpers.

Author: lox-frontend contributors
"""

from typing import Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem: line, location phrase and message."""
    line: int
    where: str                      # "", "at end" or "at '<lexeme>'"
    message: str
    severity: str = "error"
    code: Optional[str] = None

    def __str__(self) -> str:
        label = self.severity.capitalize()
        if self.where:
            return f"[line {self.line}] {label} {self.where}: {self.message}"
        return f"[line {self.line}] {label}: {self.message}"


class LexerError(Exception):
    """
    Exception raised by scan_string/scan_file when the scanner reported an error.

    The scanner itself never raises; it reports and keeps going.
    """

    def __init__(self, message: str, line: int, code: Optional[str] = None):
        super().__init__(message)
        if code is not None and code not in ERROR_CODES:
            raise ValueError(f"unknown lexer error code {code!r}")
        self.diagnostic = Diagnostic(line=line, where="", message=message, code=code)

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic) -> "LexerError":
        return cls(diagnostic.message, diagnostic.line, code=diagnostic.code)

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def description(self) -> Optional[str]:
        """Category text for this error's code, if it has one."""
        return ERROR_CODES.get(self.diagnostic.code)

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unterminated string literal",
}

UNTERMINATED_STRING = "Unterminated string."
