# src/byteprims/engine/segment/scan.py
from __future__ import annotations

"""
scan.py

Does: Shared left-to-right prefix-advance scan: probe the matcher at each
      position, validate what it reports, and yield cut points.
      Zero-width matches count as "no match" so the scan always advances.
Returns: probe(), iter_cut_points().
Used by: split_core and substitute.
"""

import logging
from collections.abc import Iterator
from typing import Optional

from ..errors import MatcherContractError
from ..types import CutPoint, PatternMatcher

__all__ = ["probe", "iter_cut_points"]

__docformat__ = "google"

log = logging.getLogger(__name__)


def probe(pattern: PatternMatcher, buffer: bytes, position: int) -> Optional[int]:
    """
    Does: Ask `pattern` for a match anchored at `position` and check the answer.
    Returns: Match length >= 1, or None for no match / zero-width match.
    Raises: MatcherContractError when the length is not an int in [0, remaining].
    """
    remaining = len(buffer) - position
    n = pattern.match_at(buffer, position)
    if n is None:
        return None
    if not isinstance(n, int) or isinstance(n, bool) or n < 0 or n > remaining:
        raise MatcherContractError(pattern, position, n, remaining)
    if n == 0:
        return None
    return n


def iter_cut_points(
    buffer: bytes,
    pattern: PatternMatcher,
    limit: int = 0,
) -> Iterator[CutPoint]:
    """
    Does: Yield successive non-overlapping match spans, resuming right after
          each match and stepping one byte on a miss.
    Returns: Iterator of CutPoint; stops after `limit` spans when limit > 0.
    """
    size = len(buffer)
    pos = 0
    found = 0
    while pos < size:
        n = probe(pattern, buffer, pos)
        if n is None:
            pos += 1
            continue
        yield CutPoint.checked(pos, pos + n, size)
        found += 1
        pos += n
        if limit and found >= limit:
            log.debug("scan stopped at limit=%d (pos=%d/%d)", limit, pos, size)
            return
