"""Macro values: macros written in lisp and natively implemented ones."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .errors import ParseError
from .parser import parse
from .sexpr import SExpression, car, cdr

NativeMacroCallable = Callable[[SExpression, Any], SExpression]


class Macro(SExpression):
    """Base class of every macro value."""


@dataclass
class LispMacro(Macro):
    """A macro: argument names and a body."""

    args: list[str]
    definition: SExpression

    def __post_init__(self) -> None:
        self.args = list(self.args)

    @classmethod
    def from_sexpr(cls, expr: SExpression) -> LispMacro:
        """Build from a form shaped like (macro (args...) body)."""
        args = [
            name for name in (item.as_symbol() for item in car(cdr(expr)))
            if name is not None
        ]
        definition = car(cdr(cdr(expr)))
        return cls(args, definition)

    @classmethod
    def from_text(cls, text: str) -> LispMacro:
        """Parse text and build from its first expression."""
        expressions = parse(text)
        if not expressions:
            raise ParseError("no expression to read")
        return cls.from_sexpr(expressions[0])

    def __str__(self) -> str:
        return "[LispMacro]"


class NativeMacro(Macro):
    """A macro implemented by a Python callable taking (expr, env)."""

    def __init__(self, func: NativeMacroCallable) -> None:
        self.func = func

    def execute(self, expr: SExpression, env: Any) -> SExpression:
        return self.func(expr, env)

    def __eq__(self, other: object) -> bool:
        raise TypeError("native macros cannot be compared")

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "[NativeMacro]"

    def __str__(self) -> str:
        return "[NativeMacro]"