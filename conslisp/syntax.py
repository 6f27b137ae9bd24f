"""Turning a token stream into s-expressions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Union

from .errors import LispSyntaxError, SyntaxErrorKind
from .lexer import Token, TokenKind
from .sexpr import (
    ConsCell,
    Nil,
    Number,
    Quote,
    SExpression,
    String,
    Symbol,
    cons,
    from_iterable,
)


@dataclass
class SyntaxDot:
    """Dotted-pair notation: the item before the dot and the item after it."""

    car: Optional[Syntax] = None
    cdr: Optional[Syntax] = None


@dataclass
class SyntaxList:
    items: List[Syntax] = field(default_factory=list)


@dataclass(frozen=True)
class SyntaxNumber:
    value: int


@dataclass(frozen=True)
class SyntaxString:
    value: str


@dataclass(frozen=True)
class SyntaxSymbol:
    name: str


Syntax = Union[SyntaxDot, SyntaxList, SyntaxNumber, SyntaxString, SyntaxSymbol]

_ATOM_KINDS = (TokenKind.NUMBER, TokenKind.STRING, TokenKind.SYMBOL)


def _atom(token: Token) -> SExpression:
    if token.kind is TokenKind.NUMBER:
        return Number(token.value)
    if token.kind is TokenKind.STRING:
        return String(token.value)
    return Symbol(token.value)


def parse_tokens(tokens: Iterable[Token]) -> list[SExpression]:
    """Build one s-expression for each top-level list in the tokens."""
    stream = iter(tokens)
    result = []
    for token in stream:
        if token.kind is TokenKind.OPEN_LIST:
            result.append(_parse_list(stream))
        elif token.kind is TokenKind.CLOSE_LIST:
            raise LispSyntaxError(SyntaxErrorKind.UNMATCHED_CLOSE_LIST)
        elif token.kind is TokenKind.DOT:
            raise LispSyntaxError(SyntaxErrorKind.BAD_INFIX_DOT_NOTATION)
        else:
            raise LispSyntaxError(SyntaxErrorKind.FREE_ATOM)
    return result


def _parse_quote(tokens: Iterator[Token]) -> SExpression:
    token = next(tokens, None)
    if token is None:
        raise LispSyntaxError(SyntaxErrorKind.QUOTE_MISSING_ITEM)

    if token.kind is TokenKind.QUOTE:
        quoted = _parse_quote(tokens)
    elif token.kind is TokenKind.OPEN_LIST:
        quoted = _parse_list(tokens)
    elif token.kind in _ATOM_KINDS:
        quoted = _atom(token)
    else:
        raise LispSyntaxError(SyntaxErrorKind.QUOTE_MISSING_ITEM)

    return Quote(quoted)


def _parse_list(tokens: Iterator[Token]) -> SExpression:
    items: list[SExpression] = []

    for token in tokens:
        kind = token.kind
        if kind is TokenKind.DOT:
            head = items.pop() if items else Nil()
            tail = parse_dot(tokens)
            result: SExpression = ConsCell(head, tail)
            for item in reversed(items):
                result = cons(item, result)
            return result
        if kind is TokenKind.QUOTE:
            items.append(_parse_quote(tokens))
        elif kind is TokenKind.OPEN_LIST:
            items.append(_parse_list(tokens))
        elif kind is TokenKind.CLOSE_LIST:
            return from_iterable(items)
        else:
            items.append(_atom(token))

    raise LispSyntaxError(SyntaxErrorKind.UNMATCHED_OPEN_LIST)


def parse_dot(tokens: Iterable[Token]) -> SExpression:
    """Read what follows a dot, including the closing parenthesis.

    Returns the cdr of the dotted pair, NIL if the list closes at once.
    """
    stream = iter(tokens)
    token = next(stream, None)
    if token is None:
        raise LispSyntaxError(SyntaxErrorKind.UNMATCHED_OPEN_LIST)

    kind = token.kind
    if kind is TokenKind.DOT:
        raise LispSyntaxError(SyntaxErrorKind.BAD_INFIX_DOT_NOTATION)
    if kind is TokenKind.CLOSE_LIST:
        return Nil()
    if kind is TokenKind.OPEN_LIST:
        tail = _parse_list(stream)
    elif kind is TokenKind.QUOTE:
        tail = _parse_quote(stream)
    else:
        tail = _atom(token)

    following = next(stream, None)
    if following is None:
        raise LispSyntaxError(SyntaxErrorKind.UNMATCHED_OPEN_LIST)
    if following.kind is not TokenKind.CLOSE_LIST:
        raise LispSyntaxError(SyntaxErrorKind.BAD_INFIX_DOT_NOTATION)
    return tail