"""Built-in functions for the tinylisp runtime environment.

This module defines the fixed primitive catalogue (list structure,
arithmetic, comparison, output) and the registration that installs it into
a runtime's global environment.

Every builtin takes `(runtime, env, args)`, where `args` is the list of
already-evaluated arguments and `env` is the caller's environment (unused
here). Arithmetic failures are raised as absorbable errors carrying the
value to substitute; the application engine reports them and returns that
fallback.
"""
from __future__ import annotations

from tinylisp import LispValue
from tinylisp.printer import to_str
from tinylisp.runtime_context import Runtime
from tinylisp.types.environment import Environment
from tinylisp.types.errors import TinyLispArithmeticError
from tinylisp.types.integer import Integer, wrap_i64
from tinylisp.types.nil import Nil, truth
from tinylisp.types.pair import car as pair_car, cdr as pair_cdr


# -------------------------------
# List structure
# -------------------------------
def car(runtime: Runtime, env: Environment, args: list[LispValue]) -> LispValue:
    """(car pair) => head; nil for no argument or a non-pair."""
    if not args:
        return Nil
    return pair_car(args[0])


def cdr(runtime: Runtime, env: Environment, args: list[LispValue]) -> LispValue:
    """(cdr pair) => tail; nil for no argument or a non-pair."""
    if not args:
        return Nil
    return pair_cdr(args[0])


def cons(runtime: Runtime, env: Environment, args: list[LispValue]) -> LispValue:
    """(cons a b) => new pair; nil with fewer than two arguments."""
    if len(args) < 2:
        return Nil
    return runtime.store.cons(args[0], args[1])


# -------------------------------
# Arithmetic
# -------------------------------
def _operands(name: str, args: list[LispValue], fallback: int) -> list[int]:
    for arg in args:
        if not isinstance(arg, Integer):
            raise TinyLispArithmeticError(f"{name}: expected integer", fallback)
    return [arg.value for arg in args]


def _truncating_div(a: int, b: int) -> int:
    # C semantics: round toward zero
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def add(runtime: Runtime, env: Environment, args: list[LispValue]) -> LispValue:
    """Sum of all arguments; 0 with a diagnostic if any is not an integer."""
    return runtime.store.integer(sum(_operands("+", args, 0)))


def sub(runtime: Runtime, env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract the rest from the first; unary negation; 0 for no arguments."""
    if not args:
        return runtime.store.integer(0)
    first, *rest = _operands("-", args, 0)
    if not rest:
        return runtime.store.integer(-first)
    for x in rest:
        first -= x
    return runtime.store.integer(first)


def mul(runtime: Runtime, env: Environment, args: list[LispValue]) -> LispValue:
    """Product of all arguments; 1 with a diagnostic if any is not an integer."""
    result = 1
    for x in _operands("*", args, 1):
        result = wrap_i64(result * x)
    return runtime.store.integer(result)


def div(runtime: Runtime, env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left to right; a single argument is returned unchanged.

    A zero divisor or a non-integer operand yields 0 with a diagnostic.
    """
    if not args:
        return runtime.store.integer(1)
    try:
        first, *rest = _operands("/", args, 0)
    except TinyLispArithmeticError:
        raise TinyLispArithmeticError("/: division by zero or bad argument", 0) from None
    for x in rest:
        if x == 0:
            raise TinyLispArithmeticError("/: division by zero or bad argument", 0)
        first = wrap_i64(_truncating_div(first, x))
    return runtime.store.integer(first)


# -------------------------------
# Comparison
# -------------------------------
def eq(runtime: Runtime, env: Environment, args: list[LispValue]) -> LispValue:
    """Integers compare by value, everything else by identity."""
    if len(args) < 2:
        return Nil
    a, b = args[0], args[1]
    if type(a) is not type(b):
        return Nil
    if isinstance(a, Integer):
        return truth(a.value == b.value)
    return truth(a is b)


def lt(runtime: Runtime, env: Environment, args: list[LispValue]) -> LispValue:
    """(< a b) for integers; nil for anything else."""
    if len(args) < 2:
        return Nil
    a, b = args[0], args[1]
    if not isinstance(a, Integer) or not isinstance(b, Integer):
        return Nil
    return truth(a.value < b.value)


# -------------------------------
# Output
# -------------------------------
def print_builtin(runtime: Runtime, env: Environment, args: list[LispValue]) -> LispValue:
    """Write each argument on its own line and return nil."""
    out = runtime.output
    for arg in args:
        out.write(to_str(arg))
        out.write("\n")
    return Nil


BUILTINS = (
    ("car", car),
    ("cdr", cdr),
    ("cons", cons),
    ("+", add),
    ("-", sub),
    ("*", mul),
    ("/", div),
    ("eq", eq),
    ("<", lt),
    ("print", print_builtin),
)


def register(runtime: Runtime) -> None:
    """Install every builtin into the runtime's global environment."""
    for name, fn in BUILTINS:
        runtime.define_global(name, runtime.store.primitive(name, fn))
