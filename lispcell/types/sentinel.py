"""The four process-wide sentinel values.

`#f`, `#t`, `#nil` and `#error` exist exactly once. Every check against them
uses identity (`is`); no component may create another instance.
"""

from __future__ import annotations


class Sentinel:
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return self.name

    def __str__(self):
        return self.name

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


FALSE = Sentinel("#f")
TRUE = Sentinel("#t")
NIL = Sentinel("#nil")
ERROR = Sentinel("#error")
