"""
Lox Front End Package

Scanner and expression parser for Lox, a small C-like scripting language.

Architecture:
    lox/
    ├── lexer/           # Tokens and the scanner
    ├── parser/          # Expression AST, recursive descent parser, printer
    ├── reporter.py      # Diagnostic collection shared by both stages
    └── cli.py           # File / prompt driver

Author: lox-frontend contributors
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType
from .parser import Parser, AstPrinter
from .reporter import ErrorReporter

__all__ = [
    # Core classes
    "Scanner",
    "Parser",
    "Token",
    "TokenType",
    "AstPrinter",
    "ErrorReporter",

    # Version info
    "__version__",
    "__license__",
]
