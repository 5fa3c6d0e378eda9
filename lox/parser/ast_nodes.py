"""
Abstract Syntax Tree node definitions for Lox expressions.

The variant set is closed: every expression is one of the twelve classes
listed in EXPRESSION_TYPES. Nodes are frozen dataclasses that own their
children outright, so a tree is built bottom-up and never changes after.

Only Literal, Grouping, Unary and Binary are produced by the current
expression grammar. The remaining variants belong to the statement and
class grammar and are declared here so consumers can match on the full set.

Author: lox-frontend contributors
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Tuple
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import Token


class ASTNodeType(Enum):
    """Enumeration of all expression node types."""

    LITERAL = "Literal"
    GROUPING = "Grouping"
    UNARY = "Unary"
    BINARY = "Binary"
    LOGICAL = "Logical"
    VARIABLE = "Variable"
    ASSIGN = "Assign"
    CALL = "Call"
    GET = "Get"
    SET = "Set"
    THIS = "This"
    SUPER = "Super"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing expression trees."""

    @abstractmethod
    def visit(self, node: 'Expression') -> Any:
        """Visit an expression node."""
        pass


class Expression(ABC):
    """Base class for all expression nodes."""

    node_type: ClassVar[ASTNodeType]

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get the direct sub-expressions, in source order."""
        pass

    def walk(self):
        """Yield this node and every descendant, pre-order."""
        yield self
        for child in self.children():
            yield from child.walk()


# ============================================================================
# Produced by the expression grammar
# ============================================================================

@dataclass(frozen=True)
class Literal(Expression):
    """Literal value: float, str, bool or None."""
    value: Any

    node_type: ClassVar[ASTNodeType] = ASTNodeType.LITERAL

    # bool is an int subclass, so True == 1.0; compare the value's type too
    def __eq__(self, other) -> bool:
        if not isinstance(other, Literal):
            return NotImplemented
        return (type(self.value), self.value) == (type(other.value), other.value)

    def __hash__(self) -> int:
        return hash((type(self.value), self.value))

    def children(self) -> List[Expression]:
        return []


@dataclass(frozen=True)
class Grouping(Expression):
    """Parenthesized expression."""
    expression: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.GROUPING

    def children(self) -> List[Expression]:
        return [self.expression]


@dataclass(frozen=True)
class Unary(Expression):
    """Prefix operation, operator is '-' or '!'."""
    operator: Token
    right: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.UNARY

    def children(self) -> List[Expression]:
        return [self.right]


@dataclass(frozen=True)
class Binary(Expression):
    """Arithmetic, comparison or equality operation."""
    left: Expression
    operator: Token
    right: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY

    def children(self) -> List[Expression]:
        return [self.left, self.right]


# ============================================================================
# Declared for the statement and class grammar
# ============================================================================

@dataclass(frozen=True)
class Logical(Expression):
    """Short-circuit 'and' / 'or'. Same shape as Binary, evaluated lazily."""
    left: Expression
    operator: Token
    right: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.LOGICAL

    def children(self) -> List[Expression]:
        return [self.left, self.right]


@dataclass(frozen=True)
class Variable(Expression):
    """Variable reference."""
    name: Token

    node_type: ClassVar[ASTNodeType] = ASTNodeType.VARIABLE

    def children(self) -> List[Expression]:
        return []


@dataclass(frozen=True)
class Assign(Expression):
    """Assignment to a named variable."""
    name: Token
    value: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.ASSIGN

    def children(self) -> List[Expression]:
        return [self.value]


@dataclass(frozen=True)
class Call(Expression):
    """Call expression. `paren` is the closing parenthesis, kept for error lines."""
    callee: Expression
    paren: Token
    args: Tuple[Expression, ...]

    node_type: ClassVar[ASTNodeType] = ASTNodeType.CALL

    def __post_init__(self):
        # Accept any sequence but store a tuple so the node stays immutable
        object.__setattr__(self, "args", tuple(self.args))

    def children(self) -> List[Expression]:
        return [self.callee, *self.args]


@dataclass(frozen=True)
class Get(Expression):
    """Property access."""
    object: Expression
    name: Token

    node_type: ClassVar[ASTNodeType] = ASTNodeType.GET

    def children(self) -> List[Expression]:
        return [self.object]


@dataclass(frozen=True)
class Set(Expression):
    """Property assignment."""
    object: Expression
    name: Token
    value: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.SET

    def children(self) -> List[Expression]:
        return [self.object, self.value]


@dataclass(frozen=True)
class This(Expression):
    keyword: Token

    node_type: ClassVar[ASTNodeType] = ASTNodeType.THIS

    def children(self) -> List[Expression]:
        return []


@dataclass(frozen=True)
class Super(Expression):
    keyword: Token
    method: Token

    node_type: ClassVar[ASTNodeType] = ASTNodeType.SUPER

    def children(self) -> List[Expression]:
        return []


EXPRESSION_TYPES = (
    Literal, Grouping, Unary, Binary, Logical,
    Variable, Assign, Call, Get, Set, This, Super,
)
