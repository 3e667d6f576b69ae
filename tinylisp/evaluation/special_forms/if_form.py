from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.runtime_context import Runtime
from tinylisp.types.environment import Environment
from tinylisp.types.nil import Nil
from tinylisp.types.pair import car, cdr


def if_form(
    tail: SExpression,
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(if cond then [else]); only the selected branch is evaluated."""
    cond = evaluate_fn(car(tail), env, runtime)
    # Lisp truthiness: anything but nil is true
    if cond is not Nil:
        return evaluate_fn(car(cdr(tail)), env, runtime)
    rest = cdr(cdr(tail))
    if rest is not Nil:
        return evaluate_fn(car(rest), env, runtime)
    return Nil
