from __future__ import annotations

from tinylisp import BuiltinFn


class Primitive:
    """A builtin operation: `fn(runtime, env, args) -> value`."""

    __slots__ = ("name", "fn", "handle")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn
        self.handle: int | None = None

    def __repr__(self):
        return f"Primitive({self.name!r})"

    def __str__(self):
        return "<built-in function>"
