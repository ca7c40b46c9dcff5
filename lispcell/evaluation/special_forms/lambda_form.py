from lispcell import EvaluatorFn
from lispcell import SExpression, LispValue
from lispcell.types.closure import Closure
from lispcell.types.environment import Environment
from lispcell.types.pair import Pair
from lispcell.types.symbol import Symbol


def lambda_form(
    tail: SExpression,
    env: Environment,
    session,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda params body...)

    params is a list of symbols, () or a single symbol collecting all
    arguments. The body forms run in order and the last value is returned.
    A malformed form yields no value (None).
    """
    if not isinstance(tail, Pair):
        return None
    params, body = tail.car, tail.cdr
    if params is not None and not isinstance(params, (Pair, Symbol)):
        return None
    if not isinstance(body, Pair):
        return None
    return Closure(params, body, env)
