from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.runtime_context import Runtime
from tinylisp.types.environment import Environment
from tinylisp.types.pair import car, cdr


def lambda_form(
    tail: SExpression,
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): the closure keeps the environment it was built in.
    # Only the first body form is kept; the body is not evaluated here.
    params = car(tail)
    body = car(cdr(tail))
    return runtime.store.closure(params, body, env)
