# src/byteprims/primitives.py
from __future__ import annotations

"""
primitives.py
=============

Does: The caller-facing primitive surface handed to the host scripting
      environment. Host values (bytes, bytes regexes, matcher objects,
      plain ints/strings for alignment settings) are coerced here and the
      call is dispatched to the matching engine.
Returns:
  - levenshtein(s1, s2) -> int
  - local_alignments(s1, s2, params | min_length/variant/mode) -> list[SubstringMatch]
  - split(data, pattern, include_separators, max_splits) -> list[bytes]
  - substitute(data, pattern, replacement, all) -> bytes
  - plus find/compare/transform helpers re-exported unchanged.
Used by: Host policy code and the demo CLI.
"""

import re
from typing import Optional, Union

from byteprims.engine.alignment import (
    AlignmentParams,
    SubstringMatch,
    list_variants,
    local_alignment_score,
)
from byteprims.engine.alignment import local_alignments as _local_alignments
from byteprims.engine.compare import (
    best_match,
    common_prefix_len,
    is_exact_match,
    is_single_substitution,
    is_single_transposition,
    is_strong_match,
    similarity_ratio,
)
from byteprims.engine.distance import levenshtein
from byteprims.engine.errors import (
    AlignmentConfigError,
    ByteprimsError,
    MatcherContractError,
)
from byteprims.engine.pattern import (
    LiteralPattern,
    LiteralSetPattern,
    RegexPattern,
    as_pattern,
)
from byteprims.engine import segment as _segment
from byteprims.engine.transform import (
    cat,
    hexdump,
    join,
    lstrip,
    reverse,
    rstrip,
    safe_shell_quote,
    sort_bytes,
    strip,
    to_lower,
    to_upper,
)
from byteprims.engine.types import ByteLike, PatternMatcher

PatternLike = Union[PatternMatcher, ByteLike, re.Pattern]

__all__ = [
    # Core
    "levenshtein",
    "local_alignments",
    "local_alignment_score",
    "split",
    "substitute",
    # Segmentation extras
    "split1",
    "split_all",
    "substitute_all",
    "find_all",
    "find_all_ordered",
    "find_first",
    "count_matches",
    # Records / params
    "AlignmentParams",
    "SubstringMatch",
    "list_variants",
    # Patterns
    "PatternMatcher",
    "LiteralPattern",
    "LiteralSetPattern",
    "RegexPattern",
    "as_pattern",
    # Compare
    "is_exact_match",
    "common_prefix_len",
    "is_single_substitution",
    "is_single_transposition",
    "similarity_ratio",
    "is_strong_match",
    "best_match",
    # Transform
    "to_lower",
    "to_upper",
    "strip",
    "lstrip",
    "rstrip",
    "safe_shell_quote",
    "hexdump",
    "cat",
    "join",
    "sort_bytes",
    "reverse",
    # Errors
    "ByteprimsError",
    "AlignmentConfigError",
    "MatcherContractError",
]


# ─────────────────────────────────────────────────────────────────────────────
# Alignment
# ─────────────────────────────────────────────────────────────────────────────

def local_alignments(
    s1: ByteLike,
    s2: ByteLike,
    params: Optional[AlignmentParams] = None,
    *,
    min_length: Optional[int] = None,
    variant: Optional[str] = None,
    mode: Optional[str] = None,
) -> list[SubstringMatch]:
    """
    Does: Run Smith–Waterman; accepts either a ready AlignmentParams or the
          individual settings (validated before any DP work).
    Returns: Ordered list[SubstringMatch].
    """
    if params is None:
        params = AlignmentParams(
            min_length=0 if min_length is None else min_length,
            variant="basic" if variant is None else variant,
            mode="multiple" if mode is None else mode,  # type: ignore[arg-type]
        )
    elif min_length is not None or variant is not None or mode is not None:
        raise TypeError("pass either params or min_length/variant/mode, not both")
    return _local_alignments(s1, s2, params)


# ─────────────────────────────────────────────────────────────────────────────
# Segmentation
# ─────────────────────────────────────────────────────────────────────────────

def split(
    data: ByteLike,
    pattern: PatternLike,
    include_separators: bool = False,
    max_splits: int = 0,
) -> list[bytes]:
    """Split `data` at matches of `pattern` (see segment.split)."""
    return _segment.split(data, as_pattern(pattern), include_separators, max_splits)


def split1(data: ByteLike, pattern: PatternLike) -> list[bytes]:
    return _segment.split1(data, as_pattern(pattern))


def split_all(data: ByteLike, pattern: PatternLike) -> list[bytes]:
    return _segment.split_all(data, as_pattern(pattern))


def substitute(
    data: ByteLike,
    pattern: PatternLike,
    replacement: ByteLike,
    all: bool = False,
) -> bytes:
    """Replace the first (or every) match of `pattern` (see segment.substitute)."""
    return _segment.substitute(data, as_pattern(pattern), replacement, all)


def substitute_all(data: ByteLike, pattern: PatternLike, replacement: ByteLike) -> bytes:
    return _segment.substitute_all(data, as_pattern(pattern), replacement)


def find_all(data: ByteLike, pattern: PatternLike) -> frozenset[bytes]:
    return _segment.find_all(data, as_pattern(pattern))


def find_all_ordered(data: ByteLike, pattern: PatternLike) -> list[bytes]:
    return _segment.find_all_ordered(data, as_pattern(pattern))


def find_first(data: ByteLike, pattern: PatternLike) -> bytes:
    return _segment.find_first(data, as_pattern(pattern))


def count_matches(data: ByteLike, pattern: PatternLike) -> int:
    return _segment.count_matches(data, as_pattern(pattern))
