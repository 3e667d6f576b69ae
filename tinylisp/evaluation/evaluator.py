"""Core evaluator for the tinylisp interpreter.

A direct recursive tree walk. The current environment is threaded through
every call as an argument; the global environment is read from the runtime
only as a fallback for symbol lookup. Special forms are dispatched by head
name before ordinary application.
"""

from __future__ import annotations

from tinylisp import SExpression, LispValue
from tinylisp.runtime_context import Runtime
from tinylisp.types import diagnostics
from tinylisp.types.environment import Environment
from tinylisp.types.errors import TinyLispUnboundSymbol
from tinylisp.types.integer import Integer
from tinylisp.types.nil import Nil, RESERVED
from tinylisp.types.pair import Pair
from tinylisp.types.symbol import Symbol
from tinylisp.evaluation.apply import apply, evaluate_args, is_applicable
from tinylisp.evaluation.special_forms import SPECIAL_FORMS, special_form_for


def lookup_symbol(symbol: Symbol, env: Environment, runtime: Runtime) -> LispValue:
    """Resolve `symbol`: reserved names, then `env`, then the global env."""
    reserved = RESERVED.get(symbol.name)
    if reserved is not None:
        return reserved
    value = env.lookup(symbol.name)
    if value is None:
        value = runtime.global_env.lookup(symbol.name)
    if value is None:
        diagnostics.report(TinyLispUnboundSymbol(f"Undefined symbol: {symbol.name}"))
        return Nil
    return value


def evaluate(expr: SExpression, env: Environment, runtime: Runtime) -> LispValue:
    """
    Evaluate `expr` in `env`.

    Never raises for a bad program: every non-fatal condition is reported
    and replaced by a fallback value. Only CapacityExceeded and host stack
    exhaustion escape.
    """
    if expr is None:
        return Nil

    if isinstance(expr, Integer):
        return expr

    if isinstance(expr, Symbol):
        return lookup_symbol(expr, env, runtime)

    if isinstance(expr, Pair):
        head, tail = expr.car, expr.cdr

        # --- Special forms handling ---
        form = special_form_for(head)
        if form is not None:
            return SPECIAL_FORMS[form](tail, env, runtime, evaluate)

        # --- Application ---
        fn = evaluate(head, env, runtime)
        # arguments are left unevaluated for a head that cannot be applied
        args = evaluate_args(tail, env, runtime, evaluate) if is_applicable(fn) else []
        return apply(fn, args, env, runtime, evaluate)

    # --- Primitives and closures evaluate to themselves ---
    return expr
