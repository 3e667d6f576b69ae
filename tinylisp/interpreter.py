from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from tinylisp import LispValue, SExpression
from tinylisp.builtin.env_builtin import register
from tinylisp.config import get_recursion_limit
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.reader.parser import ParseFailure, ParseResult, TokenStream, parse_one
from tinylisp.runtime_context import Runtime
from tinylisp.types.nil import Nil
from tinylisp.types.store import ValueStore

logger = logging.getLogger(__name__)


def raise_recursion_limit(limit: int) -> int:
    """Raise the host recursion limit to at least `limit`; never lowers it."""
    current = sys.getrecursionlimit()
    if limit > current:
        logger.debug("raising recursion limit from %d to %d", current, limit)
        sys.setrecursionlimit(limit)
        return limit
    return current


class Interpreter:
    """
    Orchestrates reading and evaluating tinylisp code.
    Keeps one Runtime (store, global environment, output) across calls, so
    definitions persist between evaluations.
    """

    def __init__(
        self,
        prelude: str | None = None,
        *,
        capacity: Optional[int] = None,
        output: Optional[TextIO] = None,
        recursion_limit: Optional[int] = None,
    ):
        # Lisp recursion runs on the Python stack
        raise_recursion_limit(recursion_limit or get_recursion_limit())
        self.runtime = Runtime(ValueStore(capacity), output)
        register(self.runtime)
        if prelude:
            self.eval_prelude(prelude)

    @property
    def store(self) -> ValueStore:
        return self.runtime.store

    def evaluate(self, parsed: ParseResult) -> LispValue:
        """Evaluate one reader result against the global environment."""
        if isinstance(parsed, ParseFailure):
            # Degraded AST: the reader already reported what was wrong
            logger.debug("evaluating degraded expression %s", parsed.expr)
            parsed = parsed.expr
        return evaluate(parsed, self.runtime.global_env, self.runtime)

    def read(self, code: str) -> list[SExpression]:
        """Parse every expression in `code` without evaluating."""
        return list(TokenStream(code, self.store).parse_all())

    def eval_prelude(self, code: str) -> None:
        for parsed in TokenStream(code, self.store).parse_all():
            self.evaluate(parsed)

    def eval_one(self, code: str, pos: int = 0) -> tuple[LispValue | None, int]:
        """Evaluate the single expression starting at `pos`.

        Returns (None, pos) when only whitespace or comments remain.
        """
        parsed, end = parse_one(code, self.store, pos)
        if parsed is None:
            return None, end
        return self.evaluate(parsed), end

    def eval(self, code: str) -> LispValue:
        results: list[LispValue] = [
            self.evaluate(parsed) for parsed in TokenStream(code, self.store).parse_all()
        ]
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results

    def eval_last(self, code: str) -> LispValue:
        """Evaluate everything in `code` and return the last result (nil if none)."""
        result: LispValue = Nil
        for parsed in TokenStream(code, self.store).parse_all():
            result = self.evaluate(parsed)
        return result
