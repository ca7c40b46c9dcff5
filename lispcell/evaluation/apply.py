"""Application engine for lispcell.

Centralizes what happens once the head of a form has been resolved:
- Closures get a fresh frame chained to their captured environment and run
  their body there.
- Builtins receive the raw operand list and evaluate what they need.
- Anything else is not callable and yields no value.
"""

from __future__ import annotations

import logging

from lispcell import EvaluatorFn, LispValue, SExpression
from lispcell.types.bind import bind_arguments
from lispcell.types.builtin import Builtin
from lispcell.types.closure import Closure
from lispcell.types.environment import Environment
from lispcell.types.pair import Pair

logger = logging.getLogger(__name__)


def apply_closure(
    fn: Closure,
    args: SExpression,
    caller_env: Environment,
    session,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Call a closure with unevaluated `args` from `caller_env`.

    Arguments are evaluated in the caller's environment; the body runs in a
    new frame whose outer is the closure's captured environment.
    """
    call_env = bind_arguments(fn.params, args, fn.env, caller_env, evaluate_fn, session)
    logger.debug("apply closure with bindings %s", call_env)
    result: LispValue = None
    body = fn.body
    while isinstance(body, Pair):
        result = evaluate_fn(body.car, call_env, session)
        body = body.cdr
    return result


def apply(
    head: LispValue,
    args: SExpression,
    env: Environment,
    session,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if isinstance(head, Closure):
        return apply_closure(head, args, env, session, evaluate_fn)
    if isinstance(head, Builtin):
        return head(args, env, session, evaluate_fn)
    logger.debug("cannot apply non-procedure %r", head)
    return None
