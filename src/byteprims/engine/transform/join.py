# src/byteprims/engine/transform/join.py
from __future__ import annotations

"""
join.py

Does: Concatenate, join, sort and reverse byte strings.
Returns: New bytes / lists; inputs are never mutated.
"""

from typing import Iterable

from ..types import ByteLike, as_bytes

__all__ = ["cat", "join", "sort_bytes", "reverse"]


def cat(*parts: ByteLike) -> bytes:
    """Concatenate all arguments."""
    return b"".join(as_bytes(p, "part") for p in parts)


def join(parts: Iterable[ByteLike], separator: ByteLike = b"") -> bytes:
    return as_bytes(separator, "separator").join(as_bytes(p, "part") for p in parts)


def sort_bytes(parts: Iterable[ByteLike], *, reverse: bool = False) -> list[bytes]:
    """Bytewise (unsigned, lexicographic) order."""
    return sorted((as_bytes(p, "part") for p in parts), reverse=reverse)


def reverse(data: ByteLike) -> bytes:
    return as_bytes(data, "data")[::-1]
