"""Runtime environment for tinylisp.

An Environment is one node of a persistent, newest-first chain of
(name, value) bindings. Extending never touches the receiver: it allocates a
new head that shares the old chain as its tail, so a closure can keep a
reference to the chain that was current when it was built.

The empty environment is a node without a binding and without an outer link.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional, TYPE_CHECKING

from tinylisp import LispValue

if TYPE_CHECKING:
    from tinylisp.types.store import ValueStore


class Environment:
    """One binding plus a link to the rest of the chain."""

    __slots__ = ("name", "value", "outer", "handle")

    def __init__(
        self,
        name: Optional[str] = None,
        value: LispValue = None,
        outer: Optional[Environment] = None,
    ):
        self.name: Optional[str] = name
        self.value: LispValue = value
        self.outer: Optional[Environment] = outer
        self.handle: int | None = None

    def is_empty(self) -> bool:
        return self.name is None and self.outer is None

    def extend(self, store: ValueStore, name: str, value: LispValue) -> Environment:
        """Return a new chain head binding `name` in front of this chain."""
        return store.bind(self, name, value)

    def lookup(self, name: str) -> Optional[LispValue]:
        """Return the newest value bound to `name`, or None if unbound."""
        env: Optional[Environment] = self
        while env is not None:
            if env.name == name:
                return env.value
            env = env.outer
        return None

    def __contains__(self, name: str) -> bool:
        return self.lookup(name) is not None

    def __iter__(self) -> Iterator[tuple[str, LispValue]]:
        env: Optional[Environment] = self
        while env is not None:
            if env.name is not None:
                yield env.name, env.value
            env = env.outer

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            buffer.write(" -> ".join(f"{k}={v!r}" for k, v in self))
            buffer.write(">")
            return buffer.getvalue()
