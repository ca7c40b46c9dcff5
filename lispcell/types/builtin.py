from __future__ import annotations

from typing import Callable

from lispcell import LispValue


class Builtin:
    """Handle to a native procedure.

    The wrapped function receives the *unevaluated* argument list, the calling
    environment, the evaluation session and the evaluator, and decides itself
    which operands to evaluate.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args, env, session, evaluate_fn) -> LispValue:
        return self.fn(args, env, session, evaluate_fn)

    def __repr__(self):
        return f"#<builtin {self.name}>"
