"""Runtime value types for lispcell."""

from lispcell.types.symbol import Symbol
from lispcell.types.sentinel import Sentinel, FALSE, TRUE, NIL, ERROR
from lispcell.types.pair import Pair, is_constant, iter_list, from_iterable
from lispcell.types.builtin import Builtin
from lispcell.types.closure import Closure
from lispcell.types.environment import Environment

__all__ = [
    "Symbol",
    "Sentinel",
    "FALSE",
    "TRUE",
    "NIL",
    "ERROR",
    "Pair",
    "is_constant",
    "iter_list",
    "from_iterable",
    "Builtin",
    "Closure",
    "Environment",
]
