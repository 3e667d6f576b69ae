from __future__ import annotations

_WORD = 1 << 64
_SIGN = 1 << 63


def wrap_i64(n: int) -> int:
    """Reduce `n` to the signed 64-bit range, two's complement."""
    n &= _WORD - 1
    return n - _WORD if n & _SIGN else n


class Integer:
    __slots__ = ("value", "handle")

    def __init__(self, value: int):
        self.value: int = wrap_i64(value)
        self.handle: int | None = None

    def __repr__(self):
        return f"Integer({self.value})"

    def __str__(self):
        return str(self.value)
