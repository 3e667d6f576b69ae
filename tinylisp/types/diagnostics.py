"""Side channel for absorbed errors.

Non-fatal conditions never travel through the evaluator's return values.
They are handed to `report`, which logs them and, when a `collecting()`
block is active, records them for the caller to inspect.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from tinylisp.types.errors import TinyLispError

logger = logging.getLogger(__name__)

# NOTE: process-global like the rest of the runtime state. If threading is
# introduced, switch to contextvars.
_collectors: list[list[TinyLispError]] = []


def report(error: TinyLispError) -> None:
    """Log `error` and hand it to every active collector."""
    logger.warning(error.message)
    for sink in _collectors:
        sink.append(error)


@contextmanager
def collecting() -> Iterator[list[TinyLispError]]:
    """Collect every error reported inside the block."""
    sink: list[TinyLispError] = []
    _collectors.append(sink)
    try:
        yield sink
    finally:
        _collectors.pop()
