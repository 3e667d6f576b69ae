"""Closure representation and argument binding for tinylisp."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tinylisp import SExpression, LispValue
from tinylisp.types import diagnostics
from tinylisp.types.environment import Environment
from tinylisp.types.errors import TinyLispTypeError
from tinylisp.types.nil import Nil
from tinylisp.types.pair import Pair
from tinylisp.types.symbol import Symbol

if TYPE_CHECKING:
    from tinylisp.types.store import ValueStore


class Closure:
    """A user-defined function: parameter list, one body expression, captured env."""

    __slots__ = ("params", "body", "env", "handle")

    def __init__(self, params: SExpression, body: SExpression, env: Environment):
        self.params: SExpression = params
        self.body: SExpression = body
        self.env: Environment = env
        self.handle: int | None = None

    def __str__(self) -> str:
        return "<lambda>"

    def __repr__(self) -> str:
        return f"Closure({self.params!s} {self.body!s})"

    def extend_env(self, store: ValueStore, args: list[LispValue]) -> Environment:
        """
        Bind argument values to parameters pairwise on top of the captured
        environment.

        Binding stops at the shorter of the two lists; there is no arity
        check. A parameter that is not a Symbol is reported and skipped.
        """
        env = self.env
        params = self.params
        if not isinstance(params, Pair) and params is not Nil:
            diagnostics.report(TinyLispTypeError(f"lambda: parameter list {params} is not a list"))
            return env
        for value in args:
            if not isinstance(params, Pair):
                break
            name = params.car
            if isinstance(name, Symbol):
                env = env.extend(store, name.name, value)
            else:
                diagnostics.report(TinyLispTypeError(f"lambda: parameter {name} is not a symbol"))
            params = params.cdr
        return env
