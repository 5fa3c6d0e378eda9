"""
Parenthesized prefix rendering of expression trees.

    1 + 2 * 3   ->   (+ 1 (* 2 3))

Author: lox-frontend contributors
"""

from typing import Any

from .ast_nodes import (
    ASTVisitor, Expression, Literal, Grouping, Unary, Binary, Logical,
    Variable, Assign, Call, Get, Set, This, Super
)


class AstPrinter(ASTVisitor):
    """Renders any expression of the closed variant set as a string."""

    def print(self, expr: Expression) -> str:
        return expr.accept(self)

    def visit(self, node: Expression) -> str:
        if isinstance(node, Literal):
            return format_value(node.value)
        if isinstance(node, Grouping):
            return self._parenthesize("group", node.expression)
        if isinstance(node, Unary):
            return self._parenthesize(node.operator.lexeme, node.right)
        if isinstance(node, (Binary, Logical)):
            return self._parenthesize(node.operator.lexeme, node.left, node.right)
        if isinstance(node, Variable):
            return node.name.lexeme
        if isinstance(node, Assign):
            return self._parenthesize(f"= {node.name.lexeme}", node.value)
        if isinstance(node, Call):
            return self._parenthesize("call", node.callee, *node.args)
        if isinstance(node, Get):
            return self._parenthesize(f". {node.name.lexeme}", node.object)
        if isinstance(node, Set):
            return self._parenthesize(f"= . {node.name.lexeme}", node.object, node.value)
        if isinstance(node, This):
            return "this"
        if isinstance(node, Super):
            return f"(super {node.method.lexeme})"
        raise TypeError(f"unknown expression node {type(node).__name__}")

    def _parenthesize(self, name: str, *exprs: Expression) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return "(" + " ".join(parts) + ")"


def format_value(value: Any) -> str:
    """Render a literal value the way Lox source would spell it."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def print_ast(expr: Expression) -> str:
    """Convenience wrapper around AstPrinter."""
    return AstPrinter().print(expr)
