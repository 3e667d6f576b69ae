"""Pair cells and the structural helpers built on them.

`car` and `cdr` here are the forgiving projections used throughout the
runtime: applied to anything but a Pair they report a type error and yield
nil instead of raising.
"""

from __future__ import annotations

from typing import Iterator

from tinylisp import LispValue
from tinylisp.types import diagnostics
from tinylisp.types.errors import TinyLispTypeError
from tinylisp.types.nil import Nil


class Pair:
    __slots__ = ("car", "cdr", "handle")

    def __init__(self, car: LispValue, cdr: LispValue):
        self.car = car
        self.cdr = cdr
        self.handle: int | None = None

    def __repr__(self):
        return f"Pair({self.car!r}, {self.cdr!r})"

    def __str__(self):
        from tinylisp.printer import to_str

        return to_str(self)


def car(value: LispValue) -> LispValue:
    if not isinstance(value, Pair):
        diagnostics.report(TinyLispTypeError("CAR: not a cons cell"))
        return Nil
    return value.car


def cdr(value: LispValue) -> LispValue:
    if not isinstance(value, Pair):
        diagnostics.report(TinyLispTypeError("CDR: not a cons cell"))
        return Nil
    return value.cdr


def iter_list(value: LispValue) -> Iterator[LispValue]:
    """Yield the elements along the cdr spine, stopping at the first non-Pair."""
    while isinstance(value, Pair):
        yield value.car
        value = value.cdr
