"""Reading program text into s-expressions."""

from __future__ import annotations

from .lexer import tokenize
from .sexpr import SExpression
from .syntax import parse_tokens


def parse(text: str) -> list[SExpression]:
    """Parse text into its top-level s-expressions.

    Raises a ParseError subclass if the text is malformed.
    """
    return parse_tokens(tokenize(text))