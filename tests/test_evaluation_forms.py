import pytest

from lispcell.printer import to_string
from lispcell.types.pair import Pair, from_iterable
from lispcell.types.sentinel import ERROR, FALSE, NIL, TRUE
from lispcell.types.symbol import Symbol


# -----------------------------------------------------
# if / begin
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if (< 1 2) 10 20)", 10),
        ("(if (> 1 2) 10 20)", 20),
        ("(if #f 1 2)", 2),
        ("(if #t 1 2)", 1),
        ("(if nil 1 2)", 1),
        ("(if () 1 2)", 1),
        ("(if (+) 1 2)", 2),
    ]
)
def test_if(interp, source, expected):
    assert interp.eval(source) == expected


@pytest.mark.parametrize("source", ["(if)", "(if #t)", "(if #t 1)", "(if #t 1 2 3)"])
def test_if_requires_three_operands(interp, source):
    assert interp.eval(source) is ERROR


def test_if_evaluates_only_the_chosen_branch(interp):
    assert interp.eval("(if #t 1 (setq undefined_q 2))") == 1
    assert interp.diagnostics == []


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(begin 1 2)", 2),
        ("(begin 1)", 1),
        ("(begin (define a 1) (+ a 1))", 2),
        ("(begin 1 2 3)", 2),
    ]
)
def test_begin(interp, source, expected):
    assert interp.eval(source) == expected


def test_empty_begin(interp):
    assert interp.eval("(begin)") is None


# -----------------------------------------------------
# define / setq
# -----------------------------------------------------

def test_define_returns_value_and_binds(interp):
    assert interp.eval("(define x 5)") == 5
    assert interp.eval("x") == 5
    assert interp.eval("(define x (+ x 1))") == 6
    assert interp.eval("x") == 6


@pytest.mark.parametrize("source", ["(define 5 1)", "(define x)", "(define)", "(setq (quote a) 1)"])
def test_malformed_define(interp, source):
    assert interp.eval(source) is ERROR


def test_setq_existing_binding(interp):
    assert interp.eval("(define z 1) (setq z 2) z") == 2


def test_setq_unbound_reports_and_does_not_create(interp):
    assert interp.eval("(setq y 5)") is NIL
    assert interp.diagnostics == ["Variable 'y' does not exist."]
    assert Symbol("y") not in interp.env
    assert interp.eval("y") is NIL
    assert interp.diagnostics == ["Undefined symbol 'y'"]


# -----------------------------------------------------
# car / cdr / cons / list
# -----------------------------------------------------

def test_quote_car_cdr(interp):
    assert to_string(interp.eval("(quote (1 2 3))")) == "(1 2 3)"
    assert interp.eval("(car (quote (1 2 3)))") == 1
    assert to_string(interp.eval("(cdr (quote (1 2 3)))")) == "(2 3)"
    assert interp.eval("(cdr (quote (1)))") is None


@pytest.mark.parametrize("source", ["(car 5)", "(cdr (quote a))", "(car ())", '(cdr "s")'])
def test_car_cdr_of_atom_is_error(interp, source):
    assert interp.eval(source) is ERROR


def test_car_without_operand(interp):
    assert interp.eval("(car)") is None
    assert interp.eval("(cdr)") is None


def test_cons(interp):
    assert interp.eval("(cons 1 2)") == Pair(1, 2)
    assert interp.eval("(cons 1 (quote (2 3)))") == from_iterable([1, 2, 3])
    assert interp.eval("(cons (+ 1 1) ())") == from_iterable([2])
    assert to_string(interp.eval("(car (cons (quote a) (quote b)))")) == "a"


def test_list(interp):
    assert interp.eval("(list 1 (+ 1 1) (quote a))") == from_iterable([1, 2, Symbol("a")])
    assert interp.eval("(list (list 1 2) 3)") == from_iterable([from_iterable([1, 2]), 3])
    assert interp.eval("(list)") is None


# -----------------------------------------------------
# Closures
# -----------------------------------------------------

def test_simple_function(interp):
    assert interp.eval("(define sq (lambda (x) (* x x))) (sq 7)") == 49


def test_arguments_are_evaluated_in_the_callers_scope(interp):
    interp.eval("(define add (lambda (a b) (+ a b)))")
    interp.eval("(define g (lambda (x y) (add x y)))")
    assert interp.eval("(g 3 4)") == 7


def test_closure_captures_defining_environment(interp):
    interp.eval("(define make_adder (lambda (n) (lambda (x) (+ x n))))")
    interp.eval("(define add5 (make_adder 5))")
    interp.eval("(define n 100)")
    assert interp.eval("(add5 10)") == 15


def test_recursion(interp):
    interp.eval("(define fact (lambda (n) (if (<= n 1) 1 (* n (fact (- n 1))))))")
    assert interp.eval("(fact 10)") == 3628800


def test_variadic_parameters(interp):
    assert interp.eval("(define f (lambda args args)) (f 1 (+ 1 1) 3)") == from_iterable([1, 2, 3])
    assert interp.eval("(f)") is None


def test_body_forms_run_in_order_in_call_frame(interp):
    interp.eval("(define f (lambda (x) (define y (* x 2)) (+ y 1)))")
    assert interp.eval("(f 4)") == 9
    assert Symbol("y") not in interp.env


def test_setq_inside_closure_hits_the_parameter(interp):
    assert interp.eval("(define x 1) ((lambda (x) (setq x 2)) x) x") == 1


def test_closure_sees_later_rebinding_of_captured_name(interp):
    assert interp.eval("(define x 1) (define f (lambda () x)) (define x 2) (f)") == 2


def test_counter_keeps_its_frame_alive(interp):
    interp.eval("(define make_counter (lambda () (begin (define n 0) (lambda () (setq n (+ n 1))))))")
    interp.eval("(define c (make_counter))")
    assert interp.eval("(c)") == 1
    assert interp.eval("(c)") == 2
    assert Symbol("n") not in interp.env


def test_self_referencing_closure_stays_callable(interp):
    interp.eval("(define countdown (lambda (n) (if (eq n 0) (quote done) (countdown (- n 1)))))")
    interp.eval("(define alias countdown) (define countdown 0)")
    assert interp.eval("(alias 0)") == Symbol("done")
    assert interp.eval("(alias 3)") is None


def test_arity_mismatch_is_permissive(interp):
    interp.eval("(define first (lambda (a b) a)) (define second (lambda (a b) b))")
    assert interp.eval("(first 1)") == 1
    assert interp.eval("(first 1 2 3)") == 1
    assert interp.eval("(second 1)") is NIL
    assert interp.diagnostics == ["Undefined symbol 'b'"]


def test_truthiness_uses_identity_with_false(interp):
    interp.eval("(define is_small (lambda (n) (< n 10)))")
    assert interp.eval("(if (is_small 3) (quote yes) (quote no))") == Symbol("yes")
    assert interp.eval("(if (is_small 30) (quote yes) (quote no))") == Symbol("no")
    assert interp.eval("(is_small 3)") is TRUE
    assert interp.eval("(is_small 30)") is FALSE
