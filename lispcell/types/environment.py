"""Runtime environment for lispcell.

The Environment stores bindings of symbol names to evaluated Lisp values and
supports nested scopes via an `outer` link. The global environment has no
outer; every closure call gets a fresh frame chained to the closure's
captured environment.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lispcell import LispValue
from lispcell.errors import LispInvalidSymbol, LispUnboundSymbol
from lispcell.types.symbol import Symbol


def _key(name: Symbol | str) -> str:
    if isinstance(name, Symbol):
        return name.id
    if isinstance(name, str):
        return name
    raise LispInvalidSymbol(f"Cannot use {name!r} as a symbol")


class Environment:
    """Hierarchical mapping from symbol names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol | str) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises LispUnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise LispUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[_key(name)]

    def update(
        self, name: Symbol | str, value: LispValue, current_scope_only: bool
    ) -> bool:
        """Bind or rebind `name`.

        An existing local binding is overwritten in place. Otherwise, with
        `current_scope_only` the binding is created here (define); without it
        the request is passed outwards (setq) and fails at the global frame.
        """
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars or current_scope_only:
                env.vars[key] = value
                return True
            env = env.outer
        return False

    def define(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame."""
        self.update(name, value, True)

    def set(self, name: Symbol | str, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises LispUnboundSymbol if the symbol is not found.
        """
        if not self.update(name, value, False):
            raise LispUnboundSymbol(f"Cannot set unbound symbol {name}")

    def define_all(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def global_env(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def __contains__(self, name: Symbol | str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; frames listed innermost first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
