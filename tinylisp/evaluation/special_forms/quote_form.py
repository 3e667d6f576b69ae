from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.runtime_context import Runtime
from tinylisp.types.environment import Environment
from tinylisp.types.pair import car


def quote_form(
    tail: SExpression,
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote expr) returns expr unevaluated."""
    return car(tail)
