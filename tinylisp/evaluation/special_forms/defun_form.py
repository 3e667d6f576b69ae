from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.runtime_context import Runtime
from tinylisp.types import diagnostics
from tinylisp.types.environment import Environment
from tinylisp.types.errors import TinyLispTypeError
from tinylisp.types.nil import Nil
from tinylisp.types.pair import car, cdr
from tinylisp.types.symbol import Symbol


def defun_form(
    tail: SExpression,
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (params) body)

    The closure captures the global environment, not the caller's, and is
    bound there by replacing the global chain head. Returns the name.
    """
    name = car(tail)
    params = car(cdr(tail))
    body = car(cdr(cdr(tail)))
    if not isinstance(name, Symbol):
        diagnostics.report(TinyLispTypeError(f"defun: {name} is not a symbol"))
        return Nil

    closure = runtime.store.closure(params, body, runtime.global_env)
    runtime.define_global(name.name, closure)
    return name
