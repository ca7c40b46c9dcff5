"""Render values back to text.

The output of `to_string` reads back to a structurally equal tree for atoms
and proper lists (floats only to six decimals); closures and builtins print as opaque markers.
"""

from __future__ import annotations

from io import StringIO

from lispcell import LispValue
from lispcell.types.builtin import Builtin
from lispcell.types.closure import Closure
from lispcell.types.pair import Pair
from lispcell.types.sentinel import NIL, Sentinel
from lispcell.types.symbol import Symbol


class _Text(str):
    """Punctuation queued between values; kept apart from Lisp strings."""


def to_string(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()


def _write(value: LispValue, buffer: StringIO) -> None:
    # Explicit work stack so neither long nor deeply nested lists recurse
    pending: list[LispValue] = [value]
    while pending:
        item = pending.pop()
        if isinstance(item, _Text):
            buffer.write(item)
        elif isinstance(item, Pair):
            pending.extend(reversed(_pair_parts(item)))
        else:
            buffer.write(_atom_text(item))


def _pair_parts(pair: Pair) -> list[LispValue]:
    parts: list[LispValue] = [_Text("(")]
    while True:
        parts.append(pair.car)
        tail = pair.cdr
        if tail is None or tail is NIL:
            break
        parts.append(_Text(" "))
        if not isinstance(tail, Pair):
            parts.append(tail)
            break
        pair = tail
    parts.append(_Text(")"))
    return parts


def _atom_text(value: LispValue) -> str:
    match value:
        case None:
            return "()"
        case Sentinel() | Symbol():
            return str(value)
        case bool():
            # never produced by the reader; keep it out of the int case
            return repr(value)
        case int():
            return str(value)
        case float():
            # fixed point, six decimals; finer fractions do not survive a reread
            return f"{value:f}"
        case str():
            return f'"{value}"'
        case Closure() | Builtin():
            return repr(value)
        case _:
            return f"#<unknown {value!r}>"
