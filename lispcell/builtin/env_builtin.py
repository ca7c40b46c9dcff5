"""Built-in procedures for the lispcell runtime environment.

Every builtin receives its operands *unevaluated* together with the calling
environment, the session and the evaluator, so forms such as `if`, `define`
or `setq` are plain builtins rather than evaluator cases.

Failures are values: arithmetic and comparison return #f, list operations
return #error, and malformed special forms return #error.
"""
from __future__ import annotations

import operator
from typing import Callable, Optional

from lispcell import EvaluatorFn, LispValue, SExpression
from lispcell.types.bind import evaluate_list
from lispcell.types.builtin import Builtin
from lispcell.types.environment import Environment
from lispcell.types.integer import wrap_int
from lispcell.types.pair import Pair, iter_list
from lispcell.types.sentinel import ERROR, FALSE, NIL, TRUE
from lispcell.types.symbol import Symbol


def _operand(args: SExpression, index: int) -> SExpression:
    """Return the index-th operand, or None when the list is shorter."""
    for i, expr in enumerate(iter_list(args)):
        if i == index:
            return expr
    return None


def _count(args: SExpression) -> int:
    return sum(1 for _ in iter_list(args))


def _integer(expr: SExpression, env: Environment, session, evaluate_fn: EvaluatorFn) -> Optional[int]:
    value = evaluate_fn(expr, env, session)
    return value if type(value) is int else None


# -------------------------------
# Arithmetic
# -------------------------------
def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _arithmetic(op: Callable[[int, int], int]):
    def reduce_operands(args: SExpression, env: Environment, session, evaluate_fn: EvaluatorFn) -> LispValue:
        """Left fold over integer operands; any failure makes the call #f."""
        acc: Optional[int] = None
        for expr in iter_list(args):
            n = _integer(expr, env, session, evaluate_fn)
            if n is None:
                return FALSE
            if acc is None:
                acc = n
                continue
            try:
                acc = wrap_int(op(acc, n))
            except ZeroDivisionError:
                session.report("division by zero")
                return FALSE
        return FALSE if acc is None else acc

    return reduce_operands


add = _arithmetic(operator.add)
sub = _arithmetic(operator.sub)
mul = _arithmetic(operator.mul)
div = _arithmetic(truncating_div)


# -------------------------------
# Comparison
# -------------------------------
def _comparison(op: Callable[[int, int], bool]):
    def compare_operands(args: SExpression, env: Environment, session, evaluate_fn: EvaluatorFn) -> LispValue:
        """#t if every adjacent pair satisfies `op`; stops at the first pair that fails."""
        prev: Optional[int] = None
        for expr in iter_list(args):
            n = _integer(expr, env, session, evaluate_fn)
            if n is None:
                return FALSE
            if prev is not None and not op(prev, n):
                return FALSE
            prev = n
        return FALSE if prev is None else TRUE

    return compare_operands


gt = _comparison(operator.gt)
gte = _comparison(operator.ge)
lt = _comparison(operator.lt)
lte = _comparison(operator.le)
eq = _comparison(operator.eq)
ne = _comparison(operator.ne)


# -------------------------------
# List processing
# -------------------------------
def car(args: SExpression, env: Environment, session, evaluate_fn: EvaluatorFn) -> LispValue:
    """(car expr): head of the evaluated pair, #error for an atom."""
    if args is None:
        return None
    value = evaluate_fn(_operand(args, 0), env, session)
    if not isinstance(value, Pair):
        return ERROR
    return value.car


def cdr(args: SExpression, env: Environment, session, evaluate_fn: EvaluatorFn) -> LispValue:
    """(cdr expr): tail of the evaluated pair, #error for an atom."""
    if args is None:
        return None
    value = evaluate_fn(_operand(args, 0), env, session)
    if not isinstance(value, Pair):
        return ERROR
    return value.cdr


def cons(args: SExpression, env: Environment, session, evaluate_fn: EvaluatorFn) -> Pair:
    head = evaluate_fn(_operand(args, 0), env, session)
    tail = evaluate_fn(_operand(args, 1), env, session)
    return Pair(head, tail)


def list_builtin(args: SExpression, env: Environment, session, evaluate_fn: EvaluatorFn) -> LispValue:
    return evaluate_list(args, env, session, evaluate_fn)


# -------------------------------
# Control and binding
# -------------------------------
def if_builtin(args: SExpression, env: Environment, session, evaluate_fn: EvaluatorFn) -> LispValue:
    """(if cond then else): only the #f sentinel counts as false."""
    if _count(args) != 3:
        return ERROR
    cond, then, otherwise = iter_list(args)
    if evaluate_fn(cond, env, session) is not FALSE:
        return evaluate_fn(then, env, session)
    return evaluate_fn(otherwise, env, session)


def begin(args: SExpression, env: Environment, session, evaluate_fn: EvaluatorFn) -> LispValue:
    """(begin a b): evaluate a, then b if present; only two operands are looked at."""
    if not isinstance(args, Pair):
        return evaluate_fn(args, env, session)
    value = evaluate_fn(args.car, env, session)
    if args.cdr is not None:
        value = evaluate_fn(_operand(args.cdr, 0), env, session)
    return value


def _bind(args: SExpression, env: Environment, session, evaluate_fn: EvaluatorFn, is_define: bool) -> LispValue:
    if _count(args) != 2:
        return ERROR
    name, val_expr = iter_list(args)
    if not isinstance(name, Symbol):
        return ERROR
    value = evaluate_fn(val_expr, env, session)
    if env.update(name, value, is_define):
        return value
    session.report(f"Variable '{name}' does not exist.")
    return NIL


def define(args: SExpression, env: Environment, session, evaluate_fn: EvaluatorFn) -> LispValue:
    """(define name value): bind in the current frame, rebinding in place."""
    return _bind(args, env, session, evaluate_fn, True)


def setq(args: SExpression, env: Environment, session, evaluate_fn: EvaluatorFn) -> LispValue:
    """(setq name value): rebind the nearest existing binding; never creates one."""
    return _bind(args, env, session, evaluate_fn, False)


BUILTINS: dict[str, Callable[..., LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    ">": gt,
    "<": lt,
    "<=": lte,
    ">=": gte,
    "eq": eq,
    "ne": ne,
    "begin": begin,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "define": define,
    "if": if_builtin,
    "list": list_builtin,
    "setq": setq,
}


def register(env: Environment) -> None:
    """Register the sentinel constants and every builtin into the given environment."""
    env.define(Symbol("nil"), NIL)
    env.define(Symbol("#f"), FALSE)
    env.define(Symbol("#t"), TRUE)
    env.define_all({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
