"""The value store: an append-only arena that owns every runtime object.

Objects are never freed. Each allocation is stamped with its index in the
arena, which serves as a stable handle for the life of the store. Once the
configured ceiling is reached further allocation raises CapacityExceeded,
which is the interpreter's only fatal condition.
"""

from __future__ import annotations

from typing import Optional

from tinylisp import BuiltinFn, LispValue, SExpression
from tinylisp.config import get_max_objects
from tinylisp.types.environment import Environment
from tinylisp.types.errors import CapacityExceeded
from tinylisp.types.integer import Integer
from tinylisp.types.lambda_fn import Closure
from tinylisp.types.nil import Nil, T
from tinylisp.types.pair import Pair
from tinylisp.types.primitive import Primitive
from tinylisp.types.symbol import Symbol

# nil and t are shared by every store and always sit at these handles.
NIL_HANDLE = 0
T_HANDLE = 1

Nil.handle = NIL_HANDLE
T.handle = T_HANDLE


class ValueStore:
    __slots__ = ("objects", "capacity")

    def __init__(self, capacity: Optional[int] = None):
        self.capacity: int = capacity if capacity is not None else get_max_objects()
        self.objects: list[LispValue] = [Nil, T]

    def allocate(self, obj):
        """Take ownership of `obj`, stamp its handle and return it."""
        if len(self.objects) >= self.capacity:
            raise CapacityExceeded(self.capacity)
        obj.handle = len(self.objects)
        self.objects.append(obj)
        return obj

    # --- Factories ---
    def integer(self, value: int) -> Integer:
        return self.allocate(Integer(value))

    def symbol(self, name: str) -> Symbol:
        return self.allocate(Symbol(name))

    def cons(self, car: LispValue, cdr: LispValue) -> Pair:
        return self.allocate(Pair(car, cdr))

    def primitive(self, name: str, fn: BuiltinFn) -> Primitive:
        return self.allocate(Primitive(name, fn))

    def closure(self, params: SExpression, body: SExpression, env: Environment) -> Closure:
        return self.allocate(Closure(params, body, env))

    def bind(self, outer: Environment, name: str, value: LispValue) -> Environment:
        return self.allocate(Environment(name, value, outer))

    def empty_env(self) -> Environment:
        return self.allocate(Environment())

    def list(self, *items: LispValue) -> LispValue:
        """Build a proper list of `items`, terminated by nil."""
        result: LispValue = Nil
        for item in reversed(items):
            result = self.cons(item, result)
        return result

    def __getitem__(self, handle: int) -> LispValue:
        return self.objects[handle]

    def __len__(self) -> int:
        return len(self.objects)

    def __repr__(self) -> str:
        return f"<ValueStore {len(self.objects)}/{self.capacity} objects>"
