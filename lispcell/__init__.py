# Core type aliases for lispcell's data model.
# Atoms are plain Python values (int, float, str) or small classes (Symbol,
# Sentinel, Builtin, Closure); lists are built from immutable Pair cells.
# `None` is the absent value: an empty list or a missing slot.
#
# Naming guidance:
# - SExpression: use in reader/printer code to denote syntactic forms.
# - LispValue:   use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any`; forms and values share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, handed to builtins and binding helpers
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
