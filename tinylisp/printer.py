"""Printed representation of tinylisp values."""

from __future__ import annotations

from io import StringIO

from tinylisp import LispValue
from tinylisp.types.integer import Integer
from tinylisp.types.lambda_fn import Closure
from tinylisp.types.nil import Nil
from tinylisp.types.pair import Pair
from tinylisp.types.primitive import Primitive
from tinylisp.types.symbol import Symbol


def to_str(value: LispValue) -> str:
    with StringIO() as buffer:
        write_value(buffer, value)
        return buffer.getvalue()


def write_value(buffer: StringIO, value: LispValue) -> None:
    if value is None:
        buffer.write("NULL")
    elif isinstance(value, Integer):
        buffer.write(str(value.value))
    elif isinstance(value, Symbol):
        buffer.write(value.name)
    elif isinstance(value, Pair):
        buffer.write("(")
        write_value(buffer, value.car)
        rest = value.cdr
        # walk the spine iteratively; only nested cars recurse
        while rest is not Nil:
            if isinstance(rest, Pair):
                buffer.write(" ")
                write_value(buffer, rest.car)
                rest = rest.cdr
            else:
                buffer.write(" . ")
                write_value(buffer, rest)
                break
        buffer.write(")")
    elif isinstance(value, (Primitive, Closure)):
        buffer.write(str(value))
    else:
        buffer.write(repr(value))
