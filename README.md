# conslisp

Building blocks for a small Lisp:

- an S-expression data model built from cons cells;
- a reader that turns program text into S-expressions;
- function and macro objects that can be built from Lisp source.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Reading text

`conslisp.parser.parse` takes program text and returns a list of
top-level S-expressions:

```python
from conslisp.parser import parse

(expr,) = parse("(cons x '(1 \"two\" . 3))")
print(expr)          # (cons x '(1 "two" . 3))
print(len(expr))     # 3
```

The reader understands:

- lists `( ... )` and dotted pairs `(a . b)`;
- quoting with `'`;
- integers such as `42` and `-7`;
- strings in double quotes. The escapes `\n`, `\r`, `\t` and `\0` give a
  newline, carriage return, tab and NUL. Any other escaped character
  stands for itself, so `\"` is a quote and `\\` is a backslash;
- symbols: anything else, up to whitespace or a parenthesis;
- `// line comments` and `/* block comments */`.

Every top-level form must be a list.

### Errors

Failures raise a subclass of `conslisp.errors.ParseError`:

- `LexError` is raised for a number literal that is not a valid integer,
  such as a lone `-`.
- `UnterminatedStringError`, a kind of `LexError`, is raised for a string
  with no closing quote. It has `string`, `line` and `column` attributes
  for where the string began.
- `LispSyntaxError` has a `kind` attribute holding a `SyntaxErrorKind`,
  for example `UNMATCHED_OPEN_LIST`, `UNMATCHED_CLOSE_LIST`, `FREE_ATOM`,
  `QUOTE_MISSING_ITEM` or `BAD_INFIX_DOT_NOTATION`. A bare atom, quote or
  dot at the top level is one of these errors.
- `SemanticError` is raised by `conslisp.semantic` for a `SyntaxDot` that
  is not the last item of a `SyntaxList`.

### Using the stages one at a time

The reader can also be used one stage at a time:

- `conslisp.lexer.tokenize(text)` gives a list of `Token`s. Each token has
  a `kind`, which is a `TokenKind`, and, for numbers, strings and symbols,
  a `value`.
- `conslisp.syntax.parse_tokens(tokens)` turns tokens into
  S-expressions. `conslisp.syntax.parse_dot(tokens)` reads what follows a
  dot.
- `conslisp.semantic.analyze(trees)` and `analyze_tree(tree)` turn syntax
  trees into S-expressions. The trees are `SyntaxList`, `SyntaxDot`,
  `SyntaxNumber`, `SyntaxString` and `SyntaxSymbol`.

## S-expressions

`conslisp.sexpr` defines these classes, all subclasses of `SExpression`:

- `Nil`
- `Number`
- `String`
- `Symbol`
- `Quote`
- `ConsCell`

Iterating over a value walks the list it heads, and `len()` counts its
elements. Atoms are empty lists for this purpose.

The module also has the usual list operations:

```python
from conslisp.sexpr import Number, car, cdr, cons, push, from_iterable

lst = from_iterable([Number(1), Number(2)])
print(push(lst, Number(3)))             # (1 2 3)
print(car(lst), cdr(lst))               # 1 (2)
print(cons(Number(1), Number(2)))       # (1 . 2)
print([str(x) for x in lst])            # ['1', '2']
```

`car` and `cdr` of anything that is not a cons cell give `NIL`.

## Functions and macros

`conslisp.functions` provides three kinds of function:

- `LispFunction`: a lambda with its `args`, its `definition` and a
  `closure`. The closure pairs each free symbol in the body with a value.
  The value comes from an optional `lookup` callable, or is `NIL` when no
  lookup is given.
- `LabelFunction`: a function with a `label` it is bound to.
- `NativeFunction`: wraps a Python callable taking `(args, env)`, and
  `execute` calls it.

`capture_symbols(expr, excluded, lookup)` finds the free symbols of an
expression, as the closure of a `LispFunction` does.

`conslisp.macros` provides two kinds of macro:

- `LispMacro`, with `args` and a `definition`;
- `NativeMacro`, whose `execute(expr, env)` calls a Python callable.

The Lisp variants can be built from a parsed form with `from_sexpr`, or
from text with `from_text`:

```python
from conslisp.functions import LispFunction, LabelFunction
from conslisp.macros import LispMacro

f = LispFunction.from_text("(lambda (x) (cons x '(x ())))")
print(f.args)        # ['x']
print(f.definition)  # (cons x '(x NIL))

g = LabelFunction.from_text("(label self (lambda (x) x))")
print(g.label)       # self

m = LispMacro.from_text("(macro (form) form)")
```

`from_text` raises `ParseError` if the text holds no expression. Native
functions and macros cannot be compared: `==` raises `TypeError`.

## What this package does not do

There is no evaluator, environment or read-eval-print loop here.

- `LispFunction`, `LabelFunction` and `LispMacro` hold their argument
  names and bodies, but cannot be run.
- Only `NativeFunction` and `NativeMacro` execute anything. They pass the
  `env` argument through to their callable untouched.