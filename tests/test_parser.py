import pytest

from conslisp.errors import LispSyntaxError, SyntaxErrorKind, UnterminatedStringError
from conslisp.parser import parse
from conslisp.sexpr import ConsCell, Number, Quote, String, Symbol, from_iterable


def test_full_parse():
    subject = '((lambda (x) (cons x ("foo" 2))) (car (3 "bar")))'

    lambda_expr = from_iterable(
        [
            Symbol("lambda"),
            from_iterable([Symbol("x")]),
            from_iterable(
                [
                    Symbol("cons"),
                    Symbol("x"),
                    from_iterable([String("foo"), Number(2)]),
                ]
            ),
        ]
    )
    car_expr = from_iterable(
        [Symbol("car"), from_iterable([Number(3), String("bar")])]
    )
    expected = [from_iterable([lambda_expr, car_expr])]

    assert parse(subject) == expected


def test_parse_multiple_roots_with_quote_and_dot():
    result = parse("(car '(a b)) (1 . 2)")
    assert result == [
        from_iterable([Symbol("car"), Quote(from_iterable([Symbol("a"), Symbol("b")]))]),
        ConsCell(Number(1), Number(2)),
    ]


def test_parse_then_print_round_trip():
    assert [str(expr) for expr in parse("(1 2 . 3) (a (b c))")] == [
        "(1 2 . 3)",
        "(a (b c))",
    ]


def test_parse_unterminated_string_raises():
    with pytest.raises(UnterminatedStringError) as excinfo:
        parse('(\nfoo "bar)')
    assert (excinfo.value.line, excinfo.value.column) == (2, 5)


def test_parse_unclosed_list_raises():
    with pytest.raises(LispSyntaxError) as excinfo:
        parse("(1 2")
    assert excinfo.value.kind is SyntaxErrorKind.UNMATCHED_OPEN_LIST


def test_parse_empty_text():
    assert parse("") == []