"""Runtime environment for liswat.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Frames are ordinary heap objects, so a
closure keeps the frame it captured alive after the call that created it has
returned, and several closures may share one frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from liswat import LispValue
from liswat.errors import LiswatTypeError, LiswatUndefinedVariable
from liswat.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        Raises LiswatTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LiswatTypeError(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def _frame_of(self, symbol: Symbol) -> Optional[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def find(self, symbol: Symbol) -> Optional[LispValue]:
        """Value bound to `symbol` in the nearest frame, or None if unbound."""
        env = self._frame_of(symbol)
        if env is None:
            return None
        return env.vars[symbol]

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises LiswatUndefinedVariable if the symbol is not bound anywhere.
        """
        env = self._frame_of(name)
        if env is None:
            raise LiswatUndefinedVariable(f"Cannot set undefined variable {name}")
        env.vars[name] = value

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings{' (nested)' if self.outer else ''}>"
