"""Runtime environment for lispy.

The Environment stores bindings of Symbols to Lisp values and supports nested
scopes via an `outer` link. Lookup walks outward through the chain.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lispy import LispValue
from lispy.errors import LispyTypeMismatch, LispyUnboundSymbol
from lispy.types.symbol import Symbol
from lispy.types.values import copy_value


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises LispyTypeMismatch if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispyTypeMismatch(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update the nearest existing binding for `name`.

        If no scope binds `name`, it is bound in this frame, never at the root.
        """
        env = self.find(name)
        if env is None:
            env = self
        env.define(name, value)

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises LispyUnboundSymbol if not found anywhere in the chain.
        """
        env = self.find(name)
        if env is None:
            raise LispyUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def bindings(self) -> list[tuple[Symbol, LispValue]]:
        """This frame's bindings, ordered by name."""
        return sorted(self.vars.items(), key=lambda kv: kv[0].text)

    def snapshot(self) -> Environment:
        """Clone every frame of the chain, copying bound values.

        The result shares no frame with `self`; mutating either chain later is
        invisible to the other.
        """
        frames: list[Environment] = []
        env: Optional[Environment] = self
        while env is not None:
            frames.append(env)
            env = env.outer
        copy: Optional[Environment] = None
        for frame in reversed(frames):
            copy_frame = Environment(outer=copy)
            copy_frame.vars = {k: copy_value(v) for k, v in frame.vars.items()}
            copy = copy_frame
        return copy

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's bindings, sorted by name, with printed values."""
        from lispy.printer import to_repr
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {to_repr(v)}" for k, v in self.bindings()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
