# src/byteprims/engine/compare/exact.py
from __future__ import annotations

"""
exact.py

Does: Exact byte comparisons and cheap single-edit detectors.
Returns: Booleans / prefix lengths.
"""

from ..types import ByteLike, as_bytes

__all__ = [
    "is_exact_match",
    "common_prefix_len",
    "is_single_substitution",
    "is_single_transposition",
]


def is_exact_match(a: ByteLike, b: ByteLike, *, fold_case: bool = False) -> bool:
    """
    Does: Bytewise equality, optionally ignoring ASCII case.
    Returns: Boolean.
    """
    x, y = as_bytes(a, "a"), as_bytes(b, "b")
    if fold_case:
        return x.lower() == y.lower()
    return x == y


def common_prefix_len(a: ByteLike, b: ByteLike) -> int:
    x, y = as_bytes(a, "a"), as_bytes(b, "b")
    n = min(len(x), len(y))
    i = 0
    while i < n and x[i] == y[i]:
        i += 1
    return i


def is_single_substitution(a: ByteLike, b: ByteLike) -> bool:
    """Exactly one differing position between equal-length inputs."""
    x, y = as_bytes(a, "a"), as_bytes(b, "b")
    if len(x) != len(y):
        return False
    return sum(1 for p, q in zip(x, y) if p != q) == 1


def is_single_transposition(a: ByteLike, b: ByteLike) -> bool:
    """One adjacent swap between equal-length inputs ('abcd' vs 'abdc')."""
    x, y = as_bytes(a, "a"), as_bytes(b, "b")
    if len(x) != len(y):
        return False
    diffs = [i for i in range(len(x)) if x[i] != y[i]]
    if len(diffs) != 2 or diffs[1] != diffs[0] + 1:
        return False
    i, j = diffs
    return x[i] == y[j] and x[j] == y[i]
