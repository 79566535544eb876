# src/byteprims/engine/utils/log.py
"""
log.py.

Does: Topic-filtered debug printer controlled by BYTEPRIMS_DEBUG_TOPICS
      (comma-separated topics, or 'all').
Returns: Timestamped "[topic][LEVEL] msg" lines on stderr. Used by the demo CLI.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "enabled"]

_ENV_VAR = "BYTEPRIMS_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(_ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Re-read BYTEPRIMS_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enabled(topic: str) -> bool:
    """True when `topic` (or 'all') is switched on."""
    return "all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "engine",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Print a timestamped line if `topic` is enabled. Silent when no topics are set."""
    if not enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
