"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing: tokens are scanned on demand from a cursor into
  the source text, and `parse_expr` stops right after one complete
  expression, so a driver can interleave reading and evaluating.
- Builds store-resident values:

    - integers -> Integer   (-?[0-9]+, wrapped to 64 bits)
    - nil / t  -> the Nil / T singletons
    - symbols  -> Symbol    (a fresh object per occurrence)
    - lists    -> right-nested Pair chain terminated by nil
    - 'expr    -> (quote expr)

- Malformed input never raises. The reader reports what went wrong, closes
  any open list with nil and hands back a ParseFailure wrapping the degraded
  expression.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Union

from tinylisp import SExpression
from tinylisp.types import diagnostics
from tinylisp.types.errors import TinyLispSyntaxError
from tinylisp.types.nil import Nil, RESERVED
from tinylisp.types.store import ValueStore


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # quote shorthand
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<symbol>[^\s()]+)"  # anything else up to whitespace or a paren
    r")"
)

INTEGER_RE = re.compile(r"-?[0-9]+")


class ParseFailure:
    """A degraded expression produced from malformed input."""

    __slots__ = ("expr", "errors")

    def __init__(self, expr: SExpression, errors: list[TinyLispSyntaxError]):
        self.expr = expr
        self.errors = errors

    @property
    def message(self) -> str:
        return "; ".join(e.message for e in self.errors)

    def __repr__(self):
        return f"ParseFailure({self.expr!r}, {self.message!r})"


ParseResult = Union[SExpression, ParseFailure, None]


class TokenStream:
    def __init__(self, source: str, store: ValueStore, pos: int = 0):
        self.source = source
        self.store = store
        # Offset just past the last consumed token
        self.pos = pos
        self._peeked: Optional[tuple[str, str, int]] = None
        self._errors: list[TinyLispSyntaxError] = []

    # --- Tokens ---
    def _scan(self) -> Optional[tuple[str, str, int]]:
        at = self.pos
        while True:
            match = TOKEN_RE.match(self.source, at)
            if match is None:
                # only whitespace left
                return None
            kind = match.lastgroup
            if kind == "comment":
                at = match.end()
                continue
            return kind, match.group(kind), match.end()

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if self._peeked is None:
            self._peeked = self._scan()
            if self._peeked is None:
                return None, None
        return self._peeked[0], self._peeked[1]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        tok_type, tok_val = self.peek()
        if self._peeked is not None:
            self.pos = self._peeked[2]
            self._peeked = None
        return tok_type, tok_val

    # --- Parsing ---
    def _fail(self, message: str) -> None:
        error = TinyLispSyntaxError(message)
        diagnostics.report(error)
        self._errors.append(error)

    def parse_expr(self) -> ParseResult:
        """Read one expression.

        Returns the expression, None when the input holds nothing more, or a
        ParseFailure when the expression was malformed.
        """
        self._errors = []
        expr = self._read()
        if self._errors:
            return ParseFailure(expr if expr is not None else Nil, self._errors)
        return expr

    def _read(self) -> Optional[SExpression]:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            if INTEGER_RE.fullmatch(tok_val):
                return self.store.integer(int(tok_val))
            if tok_val in RESERVED:
                return RESERVED[tok_val]
            return self.store.symbol(tok_val)

        if tok_type == "quote":
            if self.peek()[0] in (None, "rparen"):
                self._fail("Expected expression after quote")
                quoted = Nil
            else:
                quoted = self._read()
            return self.store.list(self.store.symbol("quote"), quoted)

        if tok_type == "lparen":
            lst = self._read_list()
            if self.peek()[0] == "rparen":
                self.advance()
            else:
                self._fail("Expected ')'")
            return lst

        # Stray ')' at top level
        self._fail("Unexpected ')'")
        return Nil

    def _read_list(self) -> SExpression:
        """Read elements up to (not including) the closing paren."""
        items = []
        while True:
            tok_type, _ = self.peek()
            if tok_type == "rparen":
                break
            if tok_type is None:
                self._fail("Unexpected EOF in list")
                break
            items.append(self._read())
        return self.store.list(*items)

    def parse_all(self) -> Iterator[ParseResult]:
        while True:
            expr = self.parse_expr()
            if expr is None:
                break
            yield expr


def parse_one(source: str, store: ValueStore, pos: int = 0) -> tuple[ParseResult, int]:
    """Read a single expression starting at `pos`.

    Returns the result (expression, ParseFailure, or None at end of input)
    and the offset just past what was consumed.
    """
    stream = TokenStream(source, store, pos)
    result = stream.parse_expr()
    return result, stream.pos


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    while True:
        match = TOKEN_RE.match(source, pos)
        if match is None:
            return
        pos = match.end()
        kind = match.lastgroup
        if kind != "comment":
            yield kind, match.group(kind)
