"""S-expression values and the basic list operations on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


class SExpression:
    """Base class of every value the interpreter handles."""

    def is_nil(self) -> bool:
        return isinstance(self, Nil)

    def is_cons_cell(self) -> bool:
        return isinstance(self, ConsCell)

    def as_symbol(self) -> Optional[str]:
        """Return the symbol's name, or None if this is not a symbol."""
        return self.name if isinstance(self, Symbol) else None

    def __iter__(self) -> Iterator[SExpression]:
        """Yield the elements of the list headed by this value."""
        current: SExpression = self
        while isinstance(current, ConsCell):
            yield current.car
            current = current.cdr

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Nil(SExpression):
    """The empty list."""

    def __str__(self) -> str:
        return "NIL"


@dataclass(frozen=True)
class Number(SExpression):
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class String(SExpression):
    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True)
class Symbol(SExpression):
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Quote(SExpression):
    value: SExpression

    def __str__(self) -> str:
        return f"'{self.value}"


@dataclass(frozen=True)
class ConsCell(SExpression):
    car: SExpression
    cdr: SExpression

    def __iter__(self) -> Iterator[SExpression]:
        yield self.car
        yield from self.cdr

    def __str__(self) -> str:
        parts = []
        current: ConsCell = self
        while True:
            parts.append(str(current.car))
            tail = current.cdr
            if isinstance(tail, Nil):
                break
            if isinstance(tail, ConsCell):
                current = tail
                continue
            parts.append(f". {tail}")
            break
        return "(" + " ".join(parts) + ")"


NIL = Nil()


def car(expr: SExpression) -> SExpression:
    """First element of a cons cell; NIL for anything else."""
    return expr.car if isinstance(expr, ConsCell) else Nil()


def cdr(expr: SExpression) -> SExpression:
    """Rest of a cons cell; NIL for anything else."""
    return expr.cdr if isinstance(expr, ConsCell) else Nil()


def cons(head: SExpression, tail: SExpression) -> ConsCell:
    return ConsCell(head, tail)


def from_iterable(items: Iterable[SExpression]) -> SExpression:
    """Build a proper list from the given elements, in order."""
    result: SExpression = Nil()
    for item in reversed(list(items)):
        result = ConsCell(item, result)
    return result


def push(lst: SExpression, item: SExpression) -> SExpression:
    """Return a new list with item appended at the end.

    A non-nil terminator (or a lone atom) becomes an element before item.
    """
    elements = []
    current = lst
    while isinstance(current, ConsCell):
        elements.append(current.car)
        current = current.cdr
    if not isinstance(current, Nil):
        elements.append(current)
    elements.append(item)
    return from_iterable(elements)