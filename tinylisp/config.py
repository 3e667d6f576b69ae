from __future__ import annotations
import logging
import os

# Defaults
DEFAULT_MAX_OBJECTS = 1_000_000
DEFAULT_LOG_LEVEL = "WARNING"
# Each Lisp call level costs about seven Python frames
DEFAULT_RECURSION_LIMIT = 20_000


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_max_objects() -> int:
    """Object ceiling for a new ValueStore (TINYLISP_MAX_OBJECTS)."""
    return int_from_env('TINYLISP_MAX_OBJECTS', DEFAULT_MAX_OBJECTS)


def get_log_level() -> str:
    """Diagnostics level for the command line front end (TINYLISP_LOG_LEVEL)."""
    raw = os.environ.get('TINYLISP_LOG_LEVEL', '').strip().upper()
    if raw and isinstance(logging.getLevelName(raw), int):
        return raw
    return DEFAULT_LOG_LEVEL


def get_recursion_limit() -> int:
    """Python recursion limit an Interpreter raises to (TINYLISP_RECURSION_LIMIT)."""
    return int_from_env('TINYLISP_RECURSION_LIMIT', DEFAULT_RECURSION_LIMIT)
