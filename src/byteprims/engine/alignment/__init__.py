# src/byteprims/engine/alignment/__init__.py
"""
alignment.

Does: Facade for the Smith–Waterman local-alignment engine and its
      configurable scoring variants.
Returns: local_alignments, local_alignment_score, AlignmentParams,
         SubstringMatch, scoring registry helpers.
"""

from __future__ import annotations

from .scoring import (
    ScoringScheme,
    clear_scheme_cache,
    get_scheme,
    list_variants,
)
from .smith_waterman import (
    local_alignment_score,
    local_alignments,
    score_matrix,
)
from .types import AlignmentParams, SubstringMatch

__all__ = [
    # Engine
    "local_alignments",
    "local_alignment_score",
    "score_matrix",
    # Records
    "AlignmentParams",
    "SubstringMatch",
    # Scoring
    "ScoringScheme",
    "get_scheme",
    "list_variants",
    "clear_scheme_cache",
]

__docformat__ = "google"
