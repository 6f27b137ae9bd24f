import pytest

from conslisp.errors import LispSyntaxError, ParseError, SyntaxErrorKind
from conslisp.functions import (
    LabelFunction,
    LispFunction,
    NativeFunction,
    capture_symbols,
)
from conslisp.sexpr import Nil, Number, Quote, Symbol, from_iterable


def sym(name):
    return Symbol(name)


def test_gets_correct_args_and_def_when_function_made_from_sexpr():
    subject = from_iterable([
        sym("FAKE LAMBDA"),
        from_iterable([sym("a"), sym("b")]),
        Number(2),
    ])
    actual = LispFunction.from_sexpr(subject)
    assert actual.args == ["a", "b"]
    assert actual.definition == Number(2)


def test_args_empty_when_non_list_args():
    subject = from_iterable([sym("FAKE LAMBDA"), Number(1), Number(2)])
    actual = LispFunction.from_sexpr(subject)
    assert actual.args == []
    assert actual.definition == Number(2)


def test_args_empty_when_nil_args():
    subject = from_iterable([sym("FAKE LAMBDA"), Nil(), Number(2)])
    actual = LispFunction.from_sexpr(subject)
    assert actual.args == []
    assert actual.definition == Number(2)


def test_from_text_works():
    actual = LispFunction.from_text("(lambda (x) (cons x '(x ())))")
    assert actual.args == ["x"]
    assert actual.definition == from_iterable([
        sym("cons"),
        sym("x"),
        Quote(from_iterable([sym("x"), Nil()])),
    ])


def test_from_text_captures_free_symbols_only():
    actual = LispFunction.from_text("(lambda (x) (cons x '(y ())))")
    assert actual.closure == {"cons": Nil()}


def test_text_missing_args_works():
    actual = LispFunction.from_text("(lambda)")
    assert actual.args == []
    assert actual.definition == Nil()


def test_bad_lisp_fails_to_become_function():
    with pytest.raises(LispSyntaxError) as info:
        LispFunction.from_text("(lambda")
    assert info.value.kind is SyntaxErrorKind.UNMATCHED_OPEN_LIST


def test_empty_text_fails_to_become_function():
    with pytest.raises(ParseError):
        LispFunction.from_text("")


def test_args_returns_list_of_args():
    subject = LispFunction(["x", "y"], Nil())
    assert subject.args == ["x", "y"]


def test_definition_returns_lambda_definition():
    subject = LispFunction([], Number(1))
    assert subject.definition == Number(1)


def test_closure_uses_lookup():
    definition = from_iterable([sym("f"), sym("x"), sym("g")])
    subject = LispFunction(["x"], definition, lambda name: Number(len(name) * 10))
    assert subject.closure == {"f": Number(10), "g": Number(10)}


def test_capture_symbols_skips_excluded_and_quoted():
    expr = from_iterable([
        sym("a"),
        from_iterable([sym("b"), sym("c")]),
        Quote(sym("d")),
        Number(3),
    ])
    pairs = capture_symbols(expr, ["b"], lambda name: Symbol(name.upper()))
    assert pairs == [("a", Symbol("A")), ("c", Symbol("C"))]


def test_capture_symbols_on_bare_symbol():
    assert capture_symbols(sym("z"), [], lambda name: Number(1)) == [("z", Number(1))]
    assert capture_symbols(sym("z"), ["z"], lambda name: Number(1)) == []


def test_lisp_function_str():
    assert str(LispFunction([], Nil())) == "[LispFunction]"


def test_label_gets_correct_label_and_function_from_sexpr():
    subject = from_iterable([
        sym("Label"),
        sym("foo"),
        from_iterable([
            sym("lambda"),
            from_iterable([sym("a"), sym("b")]),
            Number(2),
        ]),
    ])
    expected = LabelFunction("foo", LispFunction(["a", "b"], Number(2)))
    assert LabelFunction.from_sexpr(subject) == expected


def test_label_from_text():
    subject = "(label foo (lambda (x) (cons x '(x ()))))"
    expected = LabelFunction(
        "foo",
        LispFunction(
            ["x"],
            from_iterable([
                sym("cons"),
                sym("x"),
                Quote(from_iterable([sym("x"), Nil()])),
            ]),
        ),
    )
    assert LabelFunction.from_text(subject) == expected


def test_label_text_missing_args_works():
    expected = LabelFunction(None, LispFunction([], Nil()))
    assert LabelFunction.from_text("(label)") == expected


def test_bad_lisp_fails_to_become_label_function():
    with pytest.raises(LispSyntaxError):
        LabelFunction.from_text("(label")


def test_label_returns_label():
    assert LabelFunction("foo", Nil()).label == "foo"


def test_function_returns_function():
    assert LabelFunction("foo", Number(1)).function == Number(1)


def test_label_function_str():
    assert str(LabelFunction(None, Nil())) == "[LabelFunction]"


def test_native_execute_works():
    subject = NativeFunction(lambda args, env: args.pop(0))
    assert subject.execute([Number(1)], object()) == Number(1)


def test_native_execute_passes_env():
    env = {"k": Number(5)}
    subject = NativeFunction(lambda args, e: e["k"])
    assert subject.execute([], env) == Number(5)


def test_native_function_cannot_be_compared():
    subject = NativeFunction(lambda args, env: Number(7))
    with pytest.raises(TypeError) as info:
        _ = subject == subject
    assert info.type == TypeError
    assert subject.execute([], None) == Number(7)


def test_native_function_str():
    assert str(NativeFunction(lambda args, env: Nil())) == "[NativeFunction]"