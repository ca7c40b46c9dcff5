from __future__ import annotations

import logging

from lispcell import EvaluatorFn, SExpression
from lispcell.types.environment import Environment
from lispcell.types.pair import Pair
from lispcell.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate_list(args: SExpression, env: Environment, session, evaluate_fn: EvaluatorFn):
    """Evaluate every element of an argument chain into a fresh chain.

    An improper trailing element is evaluated and kept in the tail slot.
    """
    if not isinstance(args, Pair):
        return evaluate_fn(args, env, session)
    items = []
    while isinstance(args, Pair):
        items.append(evaluate_fn(args.car, env, session))
        args = args.cdr
    result = evaluate_fn(args, env, session) if args is not None else None
    for item in reversed(items):
        result = Pair(item, result)
    return result


def bind_arguments(
    params: SExpression,
    args: SExpression,
    closure_env: Environment,
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
    session=None,
) -> Environment:
    """
    Build the call frame for a closure invocation.

    Walks the parameter spec and the *unevaluated* argument list in lock-step,
    evaluating each argument in `caller_env` and binding it in a new frame
    whose outer is `closure_env`.

    - A parameter spec (or spec tail) that is a bare Symbol collects the
      evaluation of every remaining argument as a list.
    - Binding stops as soon as either list runs out: missing parameters stay
      unbound and surplus arguments are never evaluated.
    - Parameter positions that are not Symbols are skipped.
    """
    local_env = Environment(outer=closure_env)

    while params is not None:
        if isinstance(params, Symbol):
            local_env.define(params, evaluate_list(args, caller_env, session, evaluate_fn))
            break
        if not isinstance(params, Pair) or not isinstance(args, Pair):
            if params is not None and args is None:
                logger.debug("missing arguments for parameters %r", params)
            break
        if isinstance(params.car, Symbol):
            local_env.define(params.car, evaluate_fn(args.car, caller_env, session))
        params = params.cdr
        args = args.cdr

    if params is None and args is not None:
        logger.debug("ignoring surplus arguments %r", args)
    return local_env
