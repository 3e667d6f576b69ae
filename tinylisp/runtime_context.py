from __future__ import annotations

import sys
from typing import Optional, TextIO

from tinylisp.types.environment import Environment
from tinylisp.types.store import ValueStore


class Runtime:
    """The process-wide mutable state of one interpreter.

    Holds the value store, the output stream used by `print`, and the single
    cell holding the global environment. `defun` replaces the cell's chain
    head; nothing else writes to it.
    """

    # NOTE: single-threaded. If threading is introduced, both the store and
    # the global_env cell need a lock.

    __slots__ = ("store", "global_env", "_output")

    def __init__(self, store: Optional[ValueStore] = None, output: Optional[TextIO] = None):
        self.store: ValueStore = store if store is not None else ValueStore()
        self.global_env: Environment = self.store.empty_env()
        self._output = output

    @property
    def output(self) -> TextIO:
        # Resolve lazily so that redirected stdout (capsys, contextlib) is honoured.
        return self._output if self._output is not None else sys.stdout

    def define_global(self, name: str, value) -> None:
        self.global_env = self.global_env.extend(self.store, name, value)
