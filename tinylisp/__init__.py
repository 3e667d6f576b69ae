# Core type aliases for the tinylisp data model.
#
# Every runtime value is one of the five classes in tinylisp.types
# (Integer, Symbol, Pair, Primitive, Closure) and is owned by a ValueStore.
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

# Builtin signature: fn(runtime, env, args) -> LispValue
BuiltinFn = Callable[..., LispValue]
