"""Errors raised while reading program text."""

from __future__ import annotations

from enum import Enum


class ParseError(Exception):
    """Any failure to turn text into s-expressions."""


class LexError(ParseError):
    """A failure while splitting text into tokens."""


class UnterminatedStringError(LexError):
    """A string literal is still open when the text ends."""

    def __init__(self, string: str, line: int, column: int) -> None:
        super().__init__(string, line, column)
        self.string = string
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return (
            f'Unterminated string "{self.string}" '
            f"at line {self.line} column {self.column}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnterminatedStringError):
            return NotImplemented
        return (self.string, self.line, self.column) == (
            other.string,
            other.line,
            other.column,
        )

    def __hash__(self) -> int:
        return hash((self.string, self.line, self.column))


class SyntaxErrorKind(Enum):
    """The ways a token stream can be malformed, with their messages."""

    BAD_INFIX_DOT_NOTATION = (
        "Bad infix dot notation. Dot must be last or second to last item "
        "if it is in list"
    )
    FREE_ATOM = "FreeAtom: Atoms must be enclosed in a list"
    QUOTE_MISSING_ITEM = "Quote is missing an item after it"
    UNEXPECTED_TRAILING_TOKENS = "Unexpected Trailing tokens"
    UNMATCHED_CLOSE_LIST = (
        "Unmatched Close List: Close parenthesis is missing open parenthesis"
    )
    UNMATCHED_OPEN_LIST = (
        "Unmatched Open List: Open parenthesis is missing close parenthesis"
    )


class LispSyntaxError(ParseError):
    """The tokens do not form valid list structure."""

    def __init__(self, kind: SyntaxErrorKind) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"SyntaxError: {self.kind.value}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LispSyntaxError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class SemanticError(ParseError):
    """A dot appears somewhere other than at the end of a list."""

    def __str__(self) -> str:
        return (
            "SemanticError: DotSyntaxNotAtListEnd: Dot syntax token must be "
            "last or second to last item in list."
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(SemanticError)