from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


_DEFAULT_PROMPT = "lc> "
_DEFAULT_HISTORY_FILE = Path.home() / ".lispy_history"


def get_prompt() -> str:
    return os.environ.get("LISPY_PROMPT", _DEFAULT_PROMPT)


def get_history_file() -> Optional[Path]:
    # An empty LISPY_HISTORY_FILE disables history persistence
    raw = os.environ.get("LISPY_HISTORY_FILE")
    if raw is None:
        return _DEFAULT_HISTORY_FILE
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get("LISPY_RECURSION_LIMIT", "").strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"LISPY_RECURSION_LIMIT must be an integer, got {raw!r}")
    if limit <= 0:
        raise ValueError(f"LISPY_RECURSION_LIMIT must be positive, got {limit}")
    return limit


def get_log_level() -> int:
    raw = os.environ.get("LISPY_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING
