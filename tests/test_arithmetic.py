import pytest

from lispcell.builtin.env_builtin import truncating_div
from lispcell.types.integer import wrap_int
from lispcell.types.sentinel import FALSE, TRUE


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(+ 1 2 3 4)", 10),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(/ 100 5 2)", 10),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(* 1 2 3 4 5 6)", 720),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(+ 0x10 1)", 17),
        ("(+ 5)", 5),
        ("(- 5)", 5),
        ("(+ 9223372036854775807 1)", -9223372036854775808),
        ("(* 9223372036854775807 2)", -2),
        ("(+ 9223372036854775808)", -9223372036854775808),
        ("(+ 99999999999999999999 0)", 7766279631452241919),
        ("(- 0xFFFFFFFFFFFFFFFF 1)", -2),
    ]
)
def test_arithmetic(interp, source, expected):
    assert interp.eval(source) == expected


@pytest.mark.parametrize(
    "source",
    [
        "(+)",
        '(+ 1 "a")',
        "(+ 1 (quote a))",
        "(* 2 1.5)",
        "(- 1 ())",
        "(+ 1 undefined_name)",
        "(/ 1 0)",
    ]
)
def test_arithmetic_failures_are_false(interp, source):
    assert interp.eval(source) is FALSE


def test_division_by_zero_is_reported(interp):
    assert interp.eval("(/ 10 (- 2 2))") is FALSE
    assert interp.diagnostics == ["division by zero"]


def test_arithmetic_with_variables_and_calls(interp):
    interp.eval("(define a 4) (define twice (lambda (n) (* n 2)))")
    assert interp.eval("(+ a (twice a) (twice 1))") == 14


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 1 2 3)", TRUE),
        ("(< 1 3 2)", FALSE),
        ("(> 3 2 1)", TRUE),
        ("(> 3 1 2)", FALSE),
        ("(>= 3 3 1)", TRUE),
        ("(<= 1 1 2)", TRUE),
        ("(<= 2 1)", FALSE),
        ("(eq 2 2 2)", TRUE),
        ("(eq 2 2 3)", FALSE),
        ("(ne 1 2)", TRUE),
        ("(ne 1 1)", FALSE),
        ("(< 1)", TRUE),
        ("(<)", FALSE),
        ('(< 1 "x")', FALSE),
        ("(eq (quote a) (quote a))", FALSE),
        ("(< (+ 1 1) (* 2 2))", TRUE),
    ]
)
def test_comparison(interp, source, expected):
    assert interp.eval(source) is expected


def test_comparison_stops_at_first_failing_pair(interp):
    interp.eval("(define hits 0)")
    assert interp.eval("(< 2 1 (begin (setq hits 1) 5))") is FALSE
    assert interp.eval("hits") == 0
    assert interp.eval("(< 1 2 (begin (setq hits 1) 5))") is TRUE
    assert interp.eval("hits") == 1


@pytest.mark.parametrize(
    "a,b,expected",
    [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (0, 5, 0)],
)
def test_truncating_div(a, b, expected):
    assert truncating_div(a, b) == expected


def test_wrap_int():
    assert wrap_int(2 ** 63) == -(2 ** 63)
    assert wrap_int(-(2 ** 63) - 1) == 2 ** 63 - 1
    assert wrap_int(123) == 123


def test_oversized_literals_stay_in_range(interp):
    value = interp.eval("(+ 99999999999999999999)")
    assert -(2 ** 63) <= value < 2 ** 63
    assert interp.eval("(> 99999999999999999999 0)") is TRUE
