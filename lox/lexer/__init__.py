"""
Lox Lexer Package

Implements the scanner for Lox: a single left-to-right pass turning source
text into tokens, with maximal-munch operators, line comments, string and
number literals and keyword recognition.

Author: lox-frontend contributors
"""

from .tokens import Token, TokenType, KEYWORDS
from .scanner import Scanner, scan_string, scan_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Scanner",
    "scan_string",
    "scan_file",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "LexerError",
]
