"""
Interactive front end for tinylisp.

Lines are accumulated until the parentheses balance, then everything read
is evaluated and each result printed. Diagnostics go to stderr through
logging; results go to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional, TextIO

from tinylisp import __version__
from tinylisp.config import get_log_level, get_max_objects, get_recursion_limit
from tinylisp.interpreter import Interpreter
from tinylisp.printer import to_str
from tinylisp.reader.parser import TokenStream
from tinylisp.types.errors import CapacityExceeded

logger = logging.getLogger(__name__)

BANNER = (
    "Tiny LISP Interpreter\n"
    "Type expressions to evaluate. Press Ctrl+D to exit.\n"
    "Multi-line expressions are supported.\n\n"
)
PROMPT = "> "
CONTINUATION_PROMPT = "  "


def _code_part(line: str) -> str:
    """Strip a trailing `;` comment."""
    return line.split(";", 1)[0]


class Feed(Enum):
    SKIP = "skip"  # blank or comment-only first line, nothing buffered
    MORE = "more"  # parentheses still open
    READY = "ready"  # buffer holds a balanced entry


class ParenCounter:
    """Accumulates input lines until the parentheses balance."""

    def __init__(self):
        self.lines: list[str] = []
        self.depth = 0

    def is_empty(self) -> bool:
        return not self.lines

    def feed(self, line: str) -> Feed:
        code = _code_part(line)
        if not self.lines and not code.strip():
            return Feed.SKIP
        self.lines.append(line)
        self.depth += code.count("(") - code.count(")")
        if self.depth <= 0 and self.has_content():
            return Feed.READY
        return Feed.MORE

    def has_content(self) -> bool:
        return any(_code_part(line).strip() for line in self.lines)

    def take(self) -> str:
        text = "".join(self.lines)
        self.lines = []
        self.depth = 0
        return text


def run_entry(interp: Interpreter, text: str, stdout: TextIO) -> None:
    """Evaluate every expression in `text`, echoing each result."""
    for parsed in TokenStream(text, interp.store).parse_all():
        result = interp.evaluate(parsed)
        stdout.write(to_str(result))
        stdout.write("\n")


def repl(
    interp: Interpreter,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    banner: bool = True,
) -> None:
    """Read-eval-print until end of input."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    if banner:
        stdout.write(BANNER)
    counter = ParenCounter()
    while True:
        stdout.write(PROMPT if counter.is_empty() else CONTINUATION_PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            if counter.is_empty():
                stdout.write("\n")
                return
            run_entry(interp, counter.take(), stdout)
            continue
        if counter.feed(line) is Feed.READY:
            run_entry(interp, counter.take(), stdout)


def run_file(interp: Interpreter, path: Path) -> None:
    interp.eval_prelude(path.read_text())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinylisp", description="Tiny LISP interpreter"
    )
    parser.add_argument("file", nargs="?", type=Path, help="Source file to run instead of the REPL")
    parser.add_argument(
        "--max-objects",
        type=int,
        default=None,
        help="Object ceiling for the value store (default: $TINYLISP_MAX_OBJECTS or %d)"
        % get_max_objects(),
    )
    parser.add_argument(
        "--recursion-limit",
        type=int,
        default=None,
        help="Host recursion limit bounding call depth (default: $TINYLISP_RECURSION_LIMIT or %d)"
        % get_recursion_limit(),
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Diagnostics level (default: $TINYLISP_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--quiet", action="store_true", help="Do not print the banner")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        format="%(message)s",
        level=args.log_level or get_log_level(),
    )

    try:
        interp = Interpreter(
            capacity=args.max_objects, recursion_limit=args.recursion_limit
        )
        if args.file is not None:
            run_file(interp, args.file)
        else:
            repl(interp, banner=not args.quiet)
    except CapacityExceeded:
        logger.error("Out of memory")
        return 1
    except RecursionError:
        logger.error("Stack overflow")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
