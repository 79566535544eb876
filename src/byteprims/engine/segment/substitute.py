# src/byteprims/engine/segment/substitute.py
from __future__ import annotations

"""
substitute.py

Does: Replace pattern matches in a byte string: first occurrence or all,
      by collecting cut points in one scan and assembling the result from
      verbatim gaps plus the replacement.
Returns: bytes.
Used by: Host normalizers (redaction, canonicalization of separators).
"""

import logging
from collections.abc import Sequence

from ..types import ByteLike, CutPoint, PatternMatcher, as_bytes
from .scan import iter_cut_points

__all__ = ["substitute", "substitute_all", "assemble"]

__docformat__ = "google"

log = logging.getLogger(__name__)


def assemble(buffer: bytes, cuts: Sequence[CutPoint], replacement: bytes) -> bytes:
    """
    Does: Copy every gap between cut points verbatim and put `replacement`
          in place of each cut, in left-to-right order.
    Returns: New bytes. Raises ValueError for unordered/overlapping cuts.
    """
    pieces: list[bytes] = []
    last = 0
    for cut in cuts:
        if cut.start < last or cut.end > len(buffer):
            raise ValueError(f"cut points out of order or out of bounds at {cut}")
        pieces.append(buffer[last : cut.start])
        pieces.append(replacement)
        last = cut.end
    pieces.append(buffer[last:])
    return b"".join(pieces)


def substitute(
    data: ByteLike,
    pattern: PatternMatcher,
    replacement: ByteLike,
    all: bool = False,
) -> bytes:
    """
    Does: Replace the first match (all=False) or every non-overlapping match
          (all=True) of `pattern` with `replacement`.
    Returns: New bytes; an unchanged copy when nothing matches.
    """
    buf = as_bytes(data, "data")
    repl = as_bytes(replacement, "replacement")

    cuts = list(iter_cut_points(buf, pattern, limit=0 if all else 1))
    if not cuts:
        return bytes(buf)

    out = assemble(buf, cuts, repl)

    matched = sum(c.length for c in cuts)
    expected = len(buf) - matched + len(repl) * len(cuts)
    if len(out) != expected:
        raise RuntimeError(f"substitute produced {len(out)} bytes, expected {expected}")

    log.debug("substitute all=%s cuts=%d |in|=%d |out|=%d", all, len(cuts), len(buf), len(out))
    return out


def substitute_all(data: ByteLike, pattern: PatternMatcher, replacement: ByteLike) -> bytes:
    """Replace every match."""
    return substitute(data, pattern, replacement, all=True)
