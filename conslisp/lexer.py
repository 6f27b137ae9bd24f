"""Splitting program text into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Union

from .errors import LexError, UnterminatedStringError


class TokenKind(Enum):
    CLOSE_LIST = auto()
    DOT = auto()
    NUMBER = auto()
    OPEN_LIST = auto()
    QUOTE = auto()
    STRING = auto()
    SYMBOL = auto()


@dataclass(frozen=True)
class Token:
    """One lexical unit; value is set for numbers, strings and symbols."""

    kind: TokenKind
    value: Optional[Union[int, str]] = None

    @staticmethod
    def string(value: str) -> Token:
        return Token(TokenKind.STRING, value)

    @staticmethod
    def symbol(value: str) -> Token:
        return Token(TokenKind.SYMBOL, value)

    @staticmethod
    def number(value: int) -> Token:
        return Token(TokenKind.NUMBER, value)

    def __str__(self) -> str:
        if self.kind is TokenKind.CLOSE_LIST:
            return ")"
        if self.kind is TokenKind.OPEN_LIST:
            return "("
        if self.kind is TokenKind.QUOTE:
            return "'"
        if self.kind is TokenKind.DOT:
            return "."
        if self.kind is TokenKind.STRING:
            return f'"{self.value}"'
        return str(self.value)


OPEN_LIST = Token(TokenKind.OPEN_LIST)
CLOSE_LIST = Token(TokenKind.CLOSE_LIST)
DOT = Token(TokenKind.DOT)
QUOTE = Token(TokenKind.QUOTE)

_WHITESPACE = frozenset(" \t\n\r")
_NUMBER_START = frozenset("1234567890-")
_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "0": "\0"}


def could_be_number(char: str) -> bool:
    """True if char may start a number literal."""
    return char in _NUMBER_START


class _State(Enum):
    DOT = auto()
    IN_ATOM = auto()
    IN_LIST = auto()
    IN_NUMBER = auto()
    IN_STRING = auto()
    SLASH_QUOTE = auto()
    MAYBE_COMMENT = auto()
    LINE_COMMENT = auto()
    COMMENT = auto()
    MAYBE_END_COMMENT = auto()


class _Lexer:
    def __init__(self, text: str) -> None:
        self.text = text
        self.state = _State.IN_LIST
        self.buf: list[str] = []
        self.tokens: list[Token] = []
        self.string_start = 0
        self.handlers: dict[_State, Callable[[int, str], None]] = {
            _State.DOT: self._dot,
            _State.IN_ATOM: self._in_atom,
            _State.IN_LIST: self._in_list,
            _State.IN_NUMBER: self._in_number,
            _State.IN_STRING: self._in_string,
            _State.SLASH_QUOTE: self._slash_quote,
            _State.MAYBE_COMMENT: self._maybe_comment,
            _State.LINE_COMMENT: self._line_comment,
            _State.COMMENT: self._comment,
            _State.MAYBE_END_COMMENT: self._maybe_end_comment,
        }

    def run(self) -> list[Token]:
        for pos, ch in enumerate(self.text):
            self.handlers[self.state](pos, ch)

        if self.state is _State.IN_ATOM:
            self.tokens.append(Token.symbol(self._take()))
        elif self.state is _State.IN_NUMBER:
            self.tokens.append(self._number_token())
        elif self.state is _State.IN_STRING:
            raise self._unterminated()
        return self.tokens

    def _take(self) -> str:
        text = "".join(self.buf)
        self.buf.clear()
        return text

    def _number_token(self) -> Token:
        literal = self._take()
        try:
            return Token.number(int(literal))
        except ValueError:
            raise LexError(f"Invalid number literal {literal!r}") from None

    def _unterminated(self) -> UnterminatedStringError:
        bad_string = '"' + "".join(self.buf)
        before = self.text[: self.string_start]
        line = before.count("\n") + 1
        column = self.string_start - before.rfind("\n")
        return UnterminatedStringError(bad_string, line, column)

    def _finish(self, token: Token, ch: str) -> None:
        self.tokens.append(token)
        if ch == "(":
            self.tokens.append(OPEN_LIST)
        elif ch == ")":
            self.tokens.append(CLOSE_LIST)
        self.state = _State.IN_LIST

    @staticmethod
    def _ends_atom(ch: str) -> bool:
        return ch in _WHITESPACE or ch in "()"

    def _maybe_end_comment(self, pos: int, ch: str) -> None:
        self.state = _State.IN_LIST if ch == "/" else _State.COMMENT

    def _comment(self, pos: int, ch: str) -> None:
        if ch == "*":
            self.state = _State.MAYBE_END_COMMENT

    def _line_comment(self, pos: int, ch: str) -> None:
        if ch == "\n":
            self.state = _State.IN_LIST

    def _maybe_comment(self, pos: int, ch: str) -> None:
        if ch == "/":
            self.state = _State.LINE_COMMENT
        elif ch == "*":
            self.state = _State.COMMENT
        else:
            self.buf.extend(("/", ch))
            self.state = _State.IN_ATOM

    def _in_list(self, pos: int, ch: str) -> None:
        if ch == "'":
            self.tokens.append(QUOTE)
        elif ch in _WHITESPACE:
            pass
        elif ch == "(":
            self.tokens.append(OPEN_LIST)
        elif ch == ")":
            self.tokens.append(CLOSE_LIST)
        elif ch == '"':
            self.string_start = pos
            self.state = _State.IN_STRING
        elif ch == ".":
            self.state = _State.DOT
        elif ch == "/":
            self.state = _State.MAYBE_COMMENT
        elif could_be_number(ch):
            self.buf.append(ch)
            self.state = _State.IN_NUMBER
        else:
            self.buf.append(ch)
            self.state = _State.IN_ATOM

    def _in_atom(self, pos: int, ch: str) -> None:
        if self._ends_atom(ch):
            self._finish(Token.symbol(self._take()), ch)
        else:
            self.buf.append(ch)

    def _slash_quote(self, pos: int, ch: str) -> None:
        self.buf.append(_ESCAPES.get(ch, ch))
        self.state = _State.IN_STRING

    def _in_string(self, pos: int, ch: str) -> None:
        if ch == '"':
            self.tokens.append(Token.string(self._take()))
            self.state = _State.IN_LIST
        elif ch == "\\":
            self.state = _State.SLASH_QUOTE
        else:
            self.buf.append(ch)

    def _in_number(self, pos: int, ch: str) -> None:
        if self._ends_atom(ch):
            self._finish(self._number_token(), ch)
        else:
            self.buf.append(ch)
            if not ch.isnumeric():
                self.state = _State.IN_ATOM

    def _dot(self, pos: int, ch: str) -> None:
        if self._ends_atom(ch):
            self._finish(DOT, ch)
        else:
            self.buf.extend((".", ch))
            self.state = _State.IN_ATOM


def tokenize(text: str) -> list[Token]:
    """Split text into tokens, dropping whitespace and comments.

    Raises UnterminatedStringError if a string literal is left open.
    """
    return _Lexer(text).run()