"""S-expressions, a reader, and function and macro objects for a small Lisp."""

__version__ = "0.1.0"

__all__ = ["errors", "functions", "lexer", "macros", "parser", "semantic", "sexpr", "syntax"]