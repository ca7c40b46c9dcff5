from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class Session:
    """State scoped to one top-level evaluation.

    Operand reductions may evaluate the same symbol several times; the
    session makes sure an undefined name is reported at most once per input.
    Every report is logged and kept in `diagnostics` for the caller to show.
    """

    __slots__ = ("undefined_symbols", "diagnostics")

    def __init__(self):
        self.undefined_symbols: set[str] = set()
        self.diagnostics: list[str] = []

    def report(self, message: str) -> None:
        logger.warning(message)
        self.diagnostics.append(message)

    def undefined(self, name: str) -> None:
        if name in self.undefined_symbols:
            return
        self.undefined_symbols.add(name)
        self.report(f"Undefined symbol '{name}'")
