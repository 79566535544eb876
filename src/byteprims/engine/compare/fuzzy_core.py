# src/byteprims/engine/compare/fuzzy_core.py
from __future__ import annotations

"""
fuzzy_core.py

Does: Approximate byte-string comparison on top of rapidfuzz: normalized
      similarity ratio, strong-match test, and safe best match against a
      candidate collection (exact / single-edit shortcuts before scoring).
Returns: Scores in [0, 100], booleans, best candidate or None.
Used by: Host rules that tolerate typos in indicators.
"""

import logging
from typing import Iterable, Optional

from rapidfuzz import fuzz, process

from ..types import ByteLike, as_bytes
from .exact import is_single_substitution, is_single_transposition

__all__ = [
    "similarity_ratio",
    "is_strong_match",
    "best_match",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
STRONG_THRESHOLD = 82
LENGTH_DELTA_SKIP = 2  # pre-filter for best-match loop


def similarity_ratio(a: ByteLike, b: ByteLike) -> float:
    """
    Does: Indel-normalized similarity (rapidfuzz ratio) over raw bytes.
    Returns: Float in [0, 100]; 100 for two empty inputs.
    """
    x, y = as_bytes(a, "a"), as_bytes(b, "b")
    if x == y:
        return 100.0
    return float(fuzz.ratio(x, y))


def is_strong_match(a: ByteLike, b: ByteLike, threshold: float = STRONG_THRESHOLD) -> bool:
    """
    Does: Single-edit shortcuts first, then ratio >= threshold.
    Returns: Boolean.
    """
    x, y = as_bytes(a, "a"), as_bytes(b, "b")
    if x == y or is_single_transposition(x, y):
        return True
    return similarity_ratio(x, y) >= float(threshold)


def best_match(
    needle: ByteLike,
    candidates: Iterable[ByteLike],
    threshold: float = STRONG_THRESHOLD,
    debug: bool = False,
) -> Optional[bytes]:
    """
    Does: Safe best match: exact → single transposition → single substitution
          → rapidfuzz extractOne over length-compatible candidates.
    Returns: The winning candidate (as bytes) or None below threshold.
    """
    raw = as_bytes(needle, "needle")
    if not raw:
        return None

    pool: list[bytes] = []
    for cand in candidates:
        c = as_bytes(cand, "candidate")
        if not c:
            continue
        if c == raw:
            return c
        if abs(len(c) - len(raw)) > LENGTH_DELTA_SKIP:
            if debug:
                log.debug("[SKIP len] %r vs %r", raw, c)
            continue
        pool.append(c)

    for c in pool:
        if is_single_transposition(raw, c) or is_single_substitution(raw, c):
            if debug:
                log.debug("[EDIT1] %r ~ %r", raw, c)
            return c

    if not pool:
        return None

    hit = process.extractOne(raw, pool, scorer=fuzz.ratio, score_cutoff=float(threshold))
    if hit is None:
        return None
    choice, score, _ = hit
    if debug:
        log.debug("[FUZZY>=%s] %r -> %r (%.1f)", threshold, raw, choice, score)
    return choice
