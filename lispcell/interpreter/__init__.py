from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

from lispcell import LispValue, SExpression
from lispcell.builtin.env_builtin import register
from lispcell.config import get_recursion_limit
from lispcell.errors import LispStackExhausted
from lispcell.evaluation.evaluator import evaluate
from lispcell.reader.parser import ReadResult, read, read_all
from lispcell.session import Session
from lispcell.types.environment import Environment

logger = logging.getLogger(__name__)


@contextmanager
def _recursion_limit(limit: int) -> Iterator[None]:
    previous = sys.getrecursionlimit()
    if limit > previous:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Interpreter:
    """
    Orchestrates reading and evaluating lispcell code.
    Maintains the global Environment across calls; each call to `read`,
    `eval` or `eval_expr` runs in a fresh Session whose diagnostics are kept
    in `diagnostics` until the next call.
    """

    def __init__(self, prelude: str | None = None, *, recursion_limit: Optional[int] = None):
        self.env: Environment = Environment()
        register(self.env)
        self.recursion_limit = recursion_limit or get_recursion_limit()
        self.session = Session()
        if prelude:
            self.eval(prelude)

    @property
    def diagnostics(self) -> list[str]:
        return self.session.diagnostics

    def new_session(self) -> Session:
        self.session = Session()
        return self.session

    def read(self, line: str) -> ReadResult:
        """Read the first tree of a line (raises LispSyntaxError)."""
        return read(line, self.new_session())

    def eval_expr(self, expr: SExpression, session: Session | None = None) -> LispValue:
        """Evaluate one tree in the global environment."""
        if session is None:
            session = self.new_session()
        with _recursion_limit(self.recursion_limit):
            try:
                return evaluate(expr, self.env, session)
            except RecursionError:
                logger.error("stack exhausted while evaluating")
                raise LispStackExhausted("Stack exhausted: recursion too deep") from None

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code` and return the last value.

        The whole source is rejected before any evaluation when its
        parentheses don't balance.
        """
        session = self.new_session()
        result: LispValue = None
        for expr in read_all(code, session):
            # each top-level form gets its own undefined-symbol dedup
            session.undefined_symbols.clear()
            result = self.eval_expr(expr, session)
        return result
