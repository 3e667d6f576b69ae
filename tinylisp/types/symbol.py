from __future__ import annotations


class Symbol:
    """A named atom.

    Symbols are compared by identity: the store does not intern them, so two
    occurrences of the same name read from source are distinct objects.
    """

    __slots__ = ("name", "handle")

    def __init__(self, name: str):
        self.name: str = name
        self.handle: int | None = None

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
