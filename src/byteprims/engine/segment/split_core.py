# src/byteprims/engine/segment/split_core.py

"""
split_core.py.

Does: Pattern-driven splitting of a byte string into segments, optionally
      keeping separators and capping the number of separators consumed,
      plus match enumeration helpers built on the same scan.
Returns: Lists of bytes (segments / matches), frozensets, counts.
Used by: Host tokenizers (header fields, path components, indicator lists).
"""
from __future__ import annotations

import logging

from ..types import ByteLike, PatternMatcher, as_bytes
from .scan import iter_cut_points

__all__ = [
    "split",
    "split1",
    "split_all",
    "find_all",
    "find_all_ordered",
    "find_first",
    "count_matches",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


def _check_limit(max_splits: int) -> int:
    if not isinstance(max_splits, int) or isinstance(max_splits, bool) or max_splits < 0:
        raise ValueError(f"max_splits must be a non-negative int, got {max_splits!r}")
    return max_splits


# ─────────────────────────────────────────────────────────────────────────────
# Split
# ─────────────────────────────────────────────────────────────────────────────


def split(
    data: ByteLike,
    pattern: PatternMatcher,
    include_separators: bool = False,
    max_splits: int = 0,
) -> list[bytes]:
    """
    Does: Scan left to right; every match closes the current segment
          (and is emitted itself when include_separators is True).
          With max_splits > 0, the text after the last allowed separator
          is returned as one final segment.
    Returns: Ordered list of bytes; [b""] for empty input, a trailing b""
             when the pattern matches at the very end.
    """
    buf = as_bytes(data, "data")
    limit = _check_limit(max_splits)

    parts: list[bytes] = []
    seg_start = 0
    for cut in iter_cut_points(buf, pattern, limit):
        parts.append(buf[seg_start : cut.start])
        if include_separators:
            parts.append(buf[cut.start : cut.end])
        seg_start = cut.end
    parts.append(buf[seg_start:])

    log.debug("split |data|=%d -> %d parts (limit=%d)", len(buf), len(parts), limit)
    return parts


def split1(data: ByteLike, pattern: PatternMatcher) -> list[bytes]:
    """Split at the first separator only; separator dropped."""
    return split(data, pattern, include_separators=False, max_splits=1)


def split_all(data: ByteLike, pattern: PatternMatcher) -> list[bytes]:
    """Split everywhere, separators kept at the odd indices."""
    return split(data, pattern, include_separators=True, max_splits=0)


# ─────────────────────────────────────────────────────────────────────────────
# Match enumeration
# ─────────────────────────────────────────────────────────────────────────────


def find_all_ordered(data: ByteLike, pattern: PatternMatcher) -> list[bytes]:
    """
    Does: Collect every non-overlapping match in scan order.
    Returns: list[bytes], duplicates preserved.
    """
    buf = as_bytes(data, "data")
    return [buf[c.start : c.end] for c in iter_cut_points(buf, pattern)]


def find_all(data: ByteLike, pattern: PatternMatcher) -> frozenset[bytes]:
    """Distinct matched byte strings."""
    return frozenset(find_all_ordered(data, pattern))


def find_first(data: ByteLike, pattern: PatternMatcher) -> bytes:
    """First match, or b"" when the pattern never matches."""
    buf = as_bytes(data, "data")
    for c in iter_cut_points(buf, pattern, limit=1):
        return buf[c.start : c.end]
    return b""


def count_matches(data: ByteLike, pattern: PatternMatcher) -> int:
    """Number of non-overlapping matches."""
    buf = as_bytes(data, "data")
    return sum(1 for _ in iter_cut_points(buf, pattern))
