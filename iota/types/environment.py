"""Runtime environment for Iota.

An Environment is one frame of bindings from Symbols to evaluated values plus
an optional link to exactly one enclosing frame (`outer`). Frames form a tree
rooted at the global environment.

Reads are chained: `lookup` walks this frame and then every ancestor, and the
nearest binding wins. Writes are local: `define` only ever touches this frame,
even when an ancestor already binds the name.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from iota import LispValue
from iota.types.errors import IotaTypeError, IotaUndefinedSymbol
from iota.types.symbol import Symbol

class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def child_of(cls, parent: Environment) -> Environment:
        """Create a new, empty frame whose sole parent is `parent`."""
        return cls(outer=parent)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any ancestor binding.

        Raises IotaTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise IotaTypeError(f"Cannot define {name!r}: name must be a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, walking outward from this frame.

        Raises IotaUndefinedSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise IotaUndefinedSymbol(f"Undefined symbol '{name}'")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

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
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
