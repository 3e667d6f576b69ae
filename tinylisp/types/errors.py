from __future__ import annotations


class TinyLispError(Exception):
    """ Base class for all absorbable tinylisp errors.

    These never escape `evaluate`: the application boundary logs them and
    substitutes `fallback` (an int for an Integer result, None for nil).
    """

    def __init__(self, message: str, fallback: int | None = None):
        super().__init__(message)
        self.message = message
        self.fallback = fallback


class TinyLispSyntaxError(TinyLispError):
    """ Raised when the reader meets unbalanced or truncated input"""


class TinyLispTypeError(TinyLispError):
    """ Raised when an operation expected a Pair or Integer and got another variant"""


class TinyLispUnboundSymbol(TinyLispError):
    """ Raised when a symbol is bound in neither the local nor the global environment"""


class TinyLispArithmeticError(TinyLispError):
    """ Raised on division by zero or a non-numeric operand"""


class TinyLispNotCallable(TinyLispError):
    """ Raised when the head of a call is neither a Primitive nor a Closure"""


class TinyLispFatalError(Exception):
    """ Base class for errors that terminate the interpreter"""


class CapacityExceeded(TinyLispFatalError):
    """ Raised when the value store is asked to allocate past its ceiling"""

    def __init__(self, capacity: int):
        super().__init__(f"Out of memory: object limit {capacity} reached")
        self.capacity = capacity
