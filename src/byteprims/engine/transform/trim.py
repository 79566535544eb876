# src/byteprims/engine/transform/trim.py
from __future__ import annotations

"""
trim.py

Does: Strip leading/trailing bytes: ASCII whitespace by default, or any
      byte in an explicit set.
Returns: New bytes.
"""

from typing import Optional

from ..types import ByteLike, as_bytes

__all__ = ["strip", "lstrip", "rstrip"]

WHITESPACE = b" \t\n\r\x0b\x0c"


def _chars(chars: Optional[ByteLike]) -> bytes:
    return WHITESPACE if chars is None else as_bytes(chars, "chars")


def strip(data: ByteLike, chars: Optional[ByteLike] = None) -> bytes:
    return as_bytes(data, "data").strip(_chars(chars))


def lstrip(data: ByteLike, chars: Optional[ByteLike] = None) -> bytes:
    return as_bytes(data, "data").lstrip(_chars(chars))


def rstrip(data: ByteLike, chars: Optional[ByteLike] = None) -> bytes:
    return as_bytes(data, "data").rstrip(_chars(chars))
