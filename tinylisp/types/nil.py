from __future__ import annotations

from tinylisp.types.symbol import Symbol

# The empty list / false, and true. Every ValueStore registers both at
# handles 0 and 1.
Nil = Symbol("nil")
T = Symbol("t")

RESERVED = {"nil": Nil, "t": T}


def truth(flag: bool) -> Symbol:
    return T if flag else Nil
