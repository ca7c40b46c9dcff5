from __future__ import annotations
import logging
import os
import sys
from typing import Optional

_DEFAULT_PROMPT = "L> "
_DEFAULT_LOG_LEVEL = "ERROR"
_DEFAULT_RECURSION_LIMIT = 10000

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_prompt() -> str:
    return os.environ.get("LISPCELL_PROMPT", _DEFAULT_PROMPT)


def get_log_level() -> str:
    return os.environ.get("LISPCELL_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> int:
    raw = os.environ.get("LISPCELL_RECURSION_LIMIT")
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"LISPCELL_RECURSION_LIMIT must be an integer, got {raw!r}") from None


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger for command-line use; diagnostics go to stderr."""
    name = (level or get_log_level()).upper()
    numeric_level = getattr(logging, name, logging.WARNING)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stderr)
