# src/byteprims/engine/distance/levenshtein.py
from __future__ import annotations

"""
levenshtein.py

Does: Classical Levenshtein edit distance between two byte strings
      (unit-cost insert / delete / substitute) via the full DP table.
Returns: Non-negative int.
Used by: Host policy code comparing indicators; fuzzy helpers.
"""

import logging

from ..types import ByteLike, as_bytes

__all__ = ["levenshtein", "edit_table"]

__docformat__ = "google"

log = logging.getLogger(__name__)


def edit_table(s1: bytes, s2: bytes) -> list[list[int]]:
    """
    Does: Build the (len(s1)+1) x (len(s2)+1) edit-distance table.
    Returns: Table d where d[i][j] is the distance between s1[:i] and s2[:j].
    """
    n, m = len(s1), len(s2)
    d = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        d[i][0] = i
    for j in range(m + 1):
        d[0][j] = j

    for i in range(1, n + 1):
        a = s1[i - 1]
        prev, row = d[i - 1], d[i]
        for j in range(1, m + 1):
            row[j] = min(
                prev[j] + 1,                          # delete
                row[j - 1] + 1,                       # insert
                prev[j - 1] + (a != s2[j - 1]),       # substitute / match
            )
    return d


def levenshtein(s1: ByteLike, s2: ByteLike) -> int:
    """
    Does: Edit distance; short-circuits when either side is empty.
    Returns: int >= 0, symmetric, 0 iff inputs are equal.
    """
    a = as_bytes(s1, "s1")
    b = as_bytes(s2, "s2")
    if not a:
        return len(b)
    if not b:
        return len(a)

    dist = edit_table(a, b)[len(a)][len(b)]
    log.debug("levenshtein |s1|=%d |s2|=%d -> %d", len(a), len(b), dist)
    return dist
