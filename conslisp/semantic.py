"""Turning syntax trees into s-expressions."""

from __future__ import annotations

from typing import Iterable

from .errors import SemanticError
from .sexpr import (
    ConsCell,
    Nil,
    Number,
    SExpression,
    String,
    Symbol,
    cons,
    from_iterable,
)
from .syntax import (
    Syntax,
    SyntaxDot,
    SyntaxList,
    SyntaxNumber,
    SyntaxString,
    SyntaxSymbol,
)


def analyze(trees: Iterable[Syntax]) -> list[SExpression]:
    """Convert every tree, stopping at the first error."""
    return [analyze_tree(tree) for tree in trees]


def analyze_tree(tree: Syntax) -> SExpression:
    """Convert one syntax tree into an s-expression."""
    if isinstance(tree, SyntaxList):
        return _analyze_list(tree.items)
    if isinstance(tree, SyntaxNumber):
        return Number(tree.value)
    if isinstance(tree, SyntaxString):
        return String(tree.value)
    if isinstance(tree, SyntaxSymbol):
        return Symbol(tree.name)
    if isinstance(tree, SyntaxDot):
        raise SemanticError()
    raise TypeError(f"not a syntax tree: {tree!r}")


def _optional(tree: Syntax | None) -> SExpression:
    return Nil() if tree is None else analyze_tree(tree)


def _analyze_list(items: list[Syntax]) -> SExpression:
    if not items:
        return Nil()

    dot_positions = [i for i, item in enumerate(items) if isinstance(item, SyntaxDot)]
    if not dot_positions:
        return from_iterable(analyze_tree(item) for item in items)
    if dot_positions[0] != len(items) - 1:
        raise SemanticError()

    *leading, dot = items
    result: SExpression = ConsCell(_optional(dot.car), _optional(dot.cdr))
    for item in reversed(leading):
        result = cons(analyze_tree(item), result)
    return result