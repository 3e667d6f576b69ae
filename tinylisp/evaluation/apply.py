"""Application engine for tinylisp.

Centralizes function application for the evaluator:
- Primitives are called with the already-evaluated argument list. Any
  absorbable error they raise is reported and replaced by its fallback value.
- Closures extend their captured environment with the argument bindings and
  evaluate their body there. This is a plain recursive call, with no
  tail-call optimization.
- Anything else in head position is reported and yields nil.
"""

from __future__ import annotations

from tinylisp import LispValue, EvaluatorFn, SExpression
from tinylisp.runtime_context import Runtime
from tinylisp.types import diagnostics
from tinylisp.types.environment import Environment
from tinylisp.types.errors import TinyLispError, TinyLispNotCallable
from tinylisp.types.lambda_fn import Closure
from tinylisp.types.nil import Nil
from tinylisp.types.pair import iter_list
from tinylisp.types.primitive import Primitive
from tinylisp.types.store import ValueStore


def is_applicable(fn: LispValue) -> bool:
    return isinstance(fn, (Primitive, Closure))


def absorb(error: TinyLispError, store: ValueStore) -> LispValue:
    """Report `error` and return its fallback as a value."""
    diagnostics.report(error)
    if error.fallback is None:
        return Nil
    return store.integer(error.fallback)


def evaluate_args(
    arg_exprs: SExpression, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn
) -> list[LispValue]:
    """Evaluate each argument expression left to right in the caller's env."""
    return [evaluate_fn(arg, env, runtime) for arg in iter_list(arg_exprs)]


def apply(
    fn: LispValue,
    args: list[LispValue],
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply `fn` to evaluated `args`; `env` is the caller's environment."""
    if isinstance(fn, Primitive):
        try:
            return fn.fn(runtime, env, args)
        except TinyLispError as e:
            return absorb(e, runtime.store)

    if isinstance(fn, Closure):
        new_env = fn.extend_env(runtime.store, args)
        return evaluate_fn(fn.body, new_env, runtime)

    return absorb(TinyLispNotCallable("Not a function"), runtime.store)
