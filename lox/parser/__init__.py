"""
Lox Parser Package

Implements a recursive descent parser with one procedure per precedence
level, producing immutable expression trees.

Key Features:
- Left-associative binary folding at every level
- Closed expression variant set for exhaustive matching downstream
- First syntax error aborts the parse and is reported with its location

Author: lox-frontend contributors
"""

from .ast_nodes import *
from .parser import Parser, parse_string, parse_file
from .printer import AstPrinter, print_ast
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "parse_string", "parse_file",

    # AST nodes
    "ASTNodeType", "ASTVisitor", "Expression", "EXPRESSION_TYPES",
    "Literal", "Grouping", "Unary", "Binary", "Logical",
    "Variable", "Assign", "Call", "Get", "Set", "This", "Super",

    # Printing
    "AstPrinter", "print_ast",

    # Error handling
    "ParseError",
]
