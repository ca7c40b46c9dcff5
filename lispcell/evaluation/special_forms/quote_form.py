from lispcell import EvaluatorFn
from lispcell import SExpression, LispValue
from lispcell.types.environment import Environment
from lispcell.types.pair import Pair


def quote_form(
    tail: SExpression,
    env: Environment,
    session,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (quote expr) returns expr unevaluated.
    Any other operand count returns the operand list itself, verbatim.
    """
    if isinstance(tail, Pair) and tail.cdr is None:
        return tail.car
    return tail
