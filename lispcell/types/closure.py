"""Closure representation."""

from __future__ import annotations

from lispcell import SExpression
from lispcell.types.environment import Environment


class Closure:
    """A first-class function: parameter spec, body forms and defining env.

    `params` is a Pair chain of Symbols, `None` for no parameters, or a bare
    Symbol that collects every argument. `body` is the Pair chain of forms
    evaluated in order on each call.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: Environment):
        object.__setattr__(self, "params", params)
        object.__setattr__(self, "body", body)
        # Not copied: later rebinding in the defining scope stays visible
        object.__setattr__(self, "env", env)

    def __setattr__(self, name, value):
        raise AttributeError("Closure is immutable")

    def __repr__(self) -> str:
        return "#<lambda>"
