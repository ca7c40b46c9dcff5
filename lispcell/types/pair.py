"""Cons cells and the small helpers used to walk them."""

from __future__ import annotations

from typing import Iterable, Iterator

from lispcell import LispValue


class Pair:
    """An immutable cons cell. Either slot may be `None` (absent)."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue = None, cdr: LispValue = None):
        object.__setattr__(self, "car", car)
        object.__setattr__(self, "cdr", cdr)

    def __setattr__(self, name, value):
        raise AttributeError("Pair is immutable")

    def __delattr__(self, name):
        raise AttributeError("Pair is immutable")

    def __eq__(self, other: object) -> bool:
        # Structural equality with an explicit stack; neither length nor depth recurses
        pending = [(self, other)]
        while pending:
            a, b = pending.pop()
            if a is b:
                continue
            if isinstance(a, Pair) and isinstance(b, Pair):
                pending.append((a.cdr, b.cdr))
                pending.append((a.car, b.car))
            elif not _atom_equal(a, b):
                return False
        return True

    def __hash__(self):
        return hash(tuple(iter_list(self)))

    def __iter__(self) -> Iterator[LispValue]:
        return iter_list(self)

    def __repr__(self):
        return f"Pair({self.car!r}, {self.cdr!r})"


def _atom_equal(a: LispValue, b: LispValue) -> bool:
    if isinstance(a, Pair) or isinstance(b, Pair):
        return False
    # 1 and 1.0 (or True) must not compare equal across variants
    return type(a) is type(b) and a == b


def is_constant(value: LispValue) -> bool:
    """Integer, Float and StringLiteral evaluate to themselves."""
    return type(value) in (int, float, str)


def iter_list(expr: LispValue) -> Iterator[LispValue]:
    """Yield the elements of a Pair chain.

    A non-Pair, non-None tail (an improper list) is yielded as the final
    element.
    """
    while isinstance(expr, Pair):
        yield expr.car
        expr = expr.cdr
    if expr is not None:
        yield expr


def from_iterable(items: Iterable[LispValue], tail: LispValue = None) -> LispValue:
    """Build a proper list (or one ending in `tail`) from Python values."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result
