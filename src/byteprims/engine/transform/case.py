# src/byteprims/engine/transform/case.py
"""
case.py.

Does: ASCII-only case folding; non-letter and high bytes pass through.
"""

from ..types import ByteLike, as_bytes

__all__ = ["to_lower", "to_upper"]


def to_lower(data: ByteLike) -> bytes:
    return as_bytes(data, "data").lower()


def to_upper(data: ByteLike) -> bytes:
    return as_bytes(data, "data").upper()
