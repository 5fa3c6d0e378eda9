"""
Token definitions for the Lox scanner.

This module defines the closed vocabulary of token types:
- Single-character punctuation
- One- or two-character operators
- Literals (identifiers, strings, numbers)
- Reserved keywords

Author: lox-frontend contributors
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # breakfast, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()                    # End of input


@dataclass(frozen=True)
class Token:
    """
    A lexical token: its type, the raw lexeme, the literal value (for
    strings and numbers) and the 1-based line it started on.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Any                    # float for NUMBER, str for STRING, else None
    line: int

    def __str__(self) -> str:
        if self.literal is not None:
            return f"{self.type.name} {self.lexeme!r} {self.literal!r}"
        return f"{self.type.name} {self.lexeme!r}"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token denotes a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is a unary or binary operator."""
        return self.type in OPERATOR_TYPES


# Lookup tables used by the scanner

KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

# "/" is absent on purpose: the scanner has to look ahead for "//" comments
SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Maps the leading character to (type without "=", type with "=")
ONE_OR_TWO_CHAR_TOKENS = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

LITERAL_TYPES = frozenset({
    TokenType.STRING, TokenType.NUMBER,
    TokenType.TRUE, TokenType.FALSE, TokenType.NIL,
})

OPERATOR_TYPES = frozenset({
    TokenType.MINUS, TokenType.PLUS, TokenType.SLASH, TokenType.STAR,
    TokenType.BANG, TokenType.BANG_EQUAL,
    TokenType.EQUAL, TokenType.EQUAL_EQUAL,
    TokenType.GREATER, TokenType.GREATER_EQUAL,
    TokenType.LESS, TokenType.LESS_EQUAL,
    TokenType.AND, TokenType.OR,
})
