"""Core evaluator for the lispcell interpreter.

Dispatches atoms against pairs, handles the quote/lambda special forms and
hands everything else to the application engine. Failures are values: an
unresolved symbol yields #nil, a malformed call yields #error.
"""

from __future__ import annotations

from lispcell import SExpression, LispValue
from lispcell.errors import LispUnboundSymbol
from lispcell.session import Session
from lispcell.types.environment import Environment
from lispcell.types.pair import Pair, is_constant
from lispcell.types.sentinel import ERROR, NIL, Sentinel
from lispcell.types.symbol import Symbol
from lispcell.evaluation.apply import apply
from lispcell.evaluation.special_forms import SPECIAL_FORMS


def evaluate(
    expr: SExpression, env: Environment, session: Session | None = None
) -> LispValue:
    """Evaluate `expr` in `env`.

    `session` carries per-input state (undefined-symbol reports); a fresh one
    is used when none is given.
    """
    if session is None:
        session = Session()

    match expr:
        case Symbol():
            return _resolve(expr, env, session, NIL)

        case Pair(car=head, cdr=tail):
            if head is None or isinstance(head, Sentinel) or is_constant(head):
                return ERROR

            if isinstance(head, Symbol):
                form = SPECIAL_FORMS.get(head)
                if form is not None:
                    return form(tail, env, session, evaluate)
                fn = _resolve(head, env, session, ERROR)
                if fn is ERROR:
                    return ERROR
                return apply(fn, tail, env, session, evaluate)

            # Computed head, e.g. ((lambda (x) ...) 1)
            if isinstance(head, Pair):
                head = evaluate(head, env, session)
            return apply(head, tail, env, session, evaluate)

    # --- None, sentinels, constants and procedures return as-is ---
    return expr


def _resolve(name: Symbol, env: Environment, session: Session, missing: LispValue) -> LispValue:
    try:
        return env.lookup(name)
    except LispUnboundSymbol:
        session.undefined(name.id)
        return missing
