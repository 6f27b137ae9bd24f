"""Callable values: lambdas, labelled lambdas and natively implemented functions."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from typing import Any, Callable, Iterable, Optional

from .errors import ParseError
from .parser import parse
from .sexpr import ConsCell, Nil, SExpression, Symbol, car, cdr

Lookup = Callable[[str], SExpression]
NativeCallable = Callable[[list, Any], SExpression]


def _unbound(name: str) -> SExpression:
    return Nil()


def _first_expression(text: str) -> SExpression:
    expressions = parse(text)
    if not expressions:
        raise ParseError("no expression to read")
    return expressions[0]


def _symbol_names(expr: SExpression) -> list[str]:
    return [name for name in (item.as_symbol() for item in expr) if name is not None]


def capture_symbols(
    expr: SExpression, excluded: Iterable[str], lookup: Lookup
) -> list[tuple[str, SExpression]]:
    """Pair every free symbol in expr with the value lookup gives for it.

    Symbols named in excluded are skipped; quoted forms are not searched.
    """
    excluded = set(excluded)

    def walk(node: SExpression) -> list[tuple[str, SExpression]]:
        if isinstance(node, Symbol):
            return [] if node.name in excluded else [(node.name, lookup(node.name))]
        if isinstance(node, ConsCell):
            return [pair for child in node for pair in walk(child)]
        return []

    return walk(expr)


class Function(SExpression):
    """Base class of every function value."""


@dataclass
class LispFunction(Function):
    """A lambda: argument names, a body and the free symbols it captured."""

    args: list[str]
    definition: SExpression
    lookup: InitVar[Optional[Lookup]] = None
    closure: dict[str, SExpression] = field(init=False)

    def __post_init__(self, lookup: Optional[Lookup]) -> None:
        self.args = list(self.args)
        self.closure = dict(
            capture_symbols(self.definition, self.args, lookup or _unbound)
        )

    @classmethod
    def from_sexpr(cls, expr: SExpression) -> LispFunction:
        """Build from a form shaped like (lambda (args...) body)."""
        args = _symbol_names(car(cdr(expr)))
        definition = car(cdr(cdr(expr)))
        return cls(args, definition)

    @classmethod
    def from_text(cls, text: str) -> LispFunction:
        """Parse text and build from its first expression."""
        return cls.from_sexpr(_first_expression(text))

    def __str__(self) -> str:
        return "[LispFunction]"


@dataclass
class LabelFunction(Function):
    """A function bound to a name it can use to call itself."""

    label: Optional[str]
    function: SExpression

    @classmethod
    def from_sexpr(cls, expr: SExpression) -> LabelFunction:
        """Build from a form shaped like (label name (lambda ...))."""
        label = car(cdr(expr)).as_symbol()
        function = LispFunction.from_sexpr(car(cdr(cdr(expr))))
        return cls(label, function)

    @classmethod
    def from_text(cls, text: str) -> LabelFunction:
        """Parse text and build from its first expression."""
        return cls.from_sexpr(_first_expression(text))

    def __str__(self) -> str:
        return "[LabelFunction]"


class NativeFunction(Function):
    """A function implemented by a Python callable taking (args, env)."""

    def __init__(self, func: NativeCallable) -> None:
        self.func = func

    def execute(self, args: Iterable[SExpression], env: Any) -> SExpression:
        return self.func(list(args), env)

    def __eq__(self, other: object) -> bool:
        raise TypeError("native functions cannot be compared")

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "[NativeFunction]"

    def __str__(self) -> str:
        return "[NativeFunction]"