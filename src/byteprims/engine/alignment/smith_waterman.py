# src/byteprims/engine/alignment/smith_waterman.py
from __future__ import annotations

"""
smith_waterman.py

Does: Smith–Waterman local alignment over byte strings: one full score
      matrix per call, independent read-only traceback from every local
      alignment end, then deterministic ordering and suppression of
      tracebacks that reuse a DP cell of an accepted path.
Returns: Ordered list[SubstringMatch] (score desc, offset1 asc, offset2 asc).
Used by: Host policy code looking for shared fragments between two buffers.
"""

import logging
from typing import Optional

from ..types import ByteLike, as_bytes
from .scoring import ScoringScheme, get_scheme
from .types import AlignmentParams, SubstringMatch

__all__ = [
    "score_matrix",
    "local_alignments",
    "local_alignment_score",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

Matrix = list[list[int]]
Cells = frozenset[tuple[int, int]]


# ─────────────────────────────────────────────────────────────────────────────
# 1) Score matrix
# ─────────────────────────────────────────────────────────────────────────────

def score_matrix(a: bytes, b: bytes, scheme: ScoringScheme) -> Matrix:
    """
    Does: Fill H where H[i][j] = max(0, diag + sub, up + gap, left + gap).
    Returns: (len(a)+1) x (len(b)+1) matrix; row/column 0 are zeros.
    """
    n, m = len(a), len(b)
    gap = scheme.gap
    H = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        sub = scheme.row(a[i - 1])
        prev, cur = H[i - 1], H[i]
        for j in range(1, m + 1):
            best = prev[j - 1] + sub[b[j - 1]]
            up = prev[j] + gap
            if up > best:
                best = up
            left = cur[j - 1] + gap
            if left > best:
                best = left
            # floor at zero: this is what makes the alignment local
            cur[j] = best if best > 0 else 0
    return H


# ─────────────────────────────────────────────────────────────────────────────
# 2) Alignment ends + traceback
# ─────────────────────────────────────────────────────────────────────────────

def _is_alignment_end(H: Matrix, a: bytes, b: bytes, scheme: ScoringScheme, i: int, j: int) -> bool:
    """
    A cell ends an alignment when H > 0, it was reached by a diagonal step
    with a positive substitution score (H[i][j] == H[i-1][j-1] + sub), and
    the next diagonal pair does not score positively (or an input ends).
    Cells reached only through a gap or a mismatch never end an alignment.
    """
    v = H[i][j]
    if v <= 0:
        return False
    step = scheme.score(a[i - 1], b[j - 1])
    if step <= 0 or v != H[i - 1][j - 1] + step:
        return False
    if i < len(a) and j < len(b) and scheme.score(a[i], b[j]) > 0:
        return False
    return True


def _traceback(H: Matrix, a: bytes, b: bytes, scheme: ScoringScheme, i: int, j: int) -> tuple[int, int, Cells]:
    """
    Does: Walk back from (i, j) while H > 0, preferring diagonal, then up, then left.
    Returns: (i0, j0, cells): where the walk hit zero and every visited cell
             with H > 0. H is never written.
    """
    gap = scheme.gap
    cells: list[tuple[int, int]] = []
    while H[i][j] > 0:
        cells.append((i, j))
        v = H[i][j]
        if v == H[i - 1][j - 1] + scheme.score(a[i - 1], b[j - 1]):
            i -= 1
            j -= 1
        elif v == H[i - 1][j] + gap:
            i -= 1
        elif v == H[i][j - 1] + gap:
            j -= 1
        else:
            raise RuntimeError(f"score matrix inconsistent at ({i}, {j})")
    return i, j, frozenset(cells)


def _collect(
    H: Matrix, a: bytes, b: bytes, scheme: ScoringScheme, min_length: int
) -> list[tuple[SubstringMatch, Cells]]:
    found: list[tuple[SubstringMatch, Cells]] = []
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            if not _is_alignment_end(H, a, b, scheme, i, j):
                continue
            i0, j0, cells = _traceback(H, a, b, scheme, i, j)
            m = SubstringMatch(offset1=i0, length1=i - i0, offset2=j0, length2=j - j0, score=H[i][j])
            if min(m.length1, m.length2) >= min_length:
                found.append((m, cells))
    return found


# ─────────────────────────────────────────────────────────────────────────────
# 3) Public entry points
# ─────────────────────────────────────────────────────────────────────────────

def local_alignments(
    s1: ByteLike,
    s2: ByteLike,
    params: Optional[AlignmentParams] = None,
) -> list[SubstringMatch]:
    """
    Does: Compute every qualifying local alignment between s1 and s2.
          Each alignment end is traced back independently; results are
          sorted by (score desc, offset1, offset2) and accepted greedily.
          A traceback sharing any DP cell with an accepted path is dropped.
    Returns: list[SubstringMatch]; empty when either input is empty.
    Raises: AlignmentConfigError from AlignmentParams for bad settings.
    """
    params = params or AlignmentParams()
    scheme = get_scheme(params.variant)
    a = as_bytes(s1, "s1")
    b = as_bytes(s2, "s2")
    if not a or not b:
        return []

    H = score_matrix(a, b, scheme)
    candidates = _collect(H, a, b, scheme, params.min_length)
    candidates.sort(key=lambda c: (-c[0].score, c[0].offset1, c[0].offset2))

    accepted: list[SubstringMatch] = []
    used: set[tuple[int, int]] = set()
    for cand, cells in candidates:
        if not used.isdisjoint(cells):
            continue
        accepted.append(cand)
        used |= cells
        if params.mode == "single":
            break

    log.debug(
        "smith-waterman variant=%s |s1|=%d |s2|=%d candidates=%d accepted=%d",
        scheme.name, len(a), len(b), len(candidates), len(accepted),
    )
    return accepted


def local_alignment_score(s1: ByteLike, s2: ByteLike, variant: str = "basic") -> int:
    """Best local alignment score (0 when nothing aligns)."""
    scheme = get_scheme(variant)
    a = as_bytes(s1, "s1")
    b = as_bytes(s2, "s2")
    if not a or not b:
        return 0
    return max(max(row) for row in score_matrix(a, b, scheme))
