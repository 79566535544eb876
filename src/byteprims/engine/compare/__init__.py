# src/byteprims/engine/compare/__init__.py
"""
compare.

Does: Facade exposing exact and approximate byte-string comparison.
Returns: Exact checks, single-edit detectors, rapidfuzz-backed similarity
         and safe best match.
"""

from __future__ import annotations

# ── Exact ────────────────────────────────────────────────────────────────────
from .exact import (
    common_prefix_len,
    is_exact_match,
    is_single_substitution,
    is_single_transposition,
)

# ── Fuzzy ────────────────────────────────────────────────────────────────────
from .fuzzy_core import (
    best_match,
    is_strong_match,
    similarity_ratio,
)

__all__ = [
    # Exact
    "is_exact_match",
    "common_prefix_len",
    "is_single_substitution",
    "is_single_transposition",
    # Fuzzy
    "similarity_ratio",
    "is_strong_match",
    "best_match",
]

__docformat__ = "google"
