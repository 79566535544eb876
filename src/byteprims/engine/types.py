# src/byteprims/engine/types.py
from __future__ import annotations

"""
types.py.

Does: Define the byte-string coercion helper, the PatternMatcher protocol
      consumed by the segmentation engine, and the CutPoint span type.
"""

from typing import NamedTuple, Optional, Protocol, Union, runtime_checkable

__all__ = ["ByteLike", "as_bytes", "PatternMatcher", "CutPoint"]

__docformat__ = "google"

ByteLike = Union[bytes, bytearray, memoryview]


def as_bytes(value: ByteLike, name: str = "value") -> bytes:
    """
    Does: Coerce bytes-like input to an immutable `bytes` copy.
    Returns: bytes. Raises TypeError for str (no implicit encoding) or other types.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        raise TypeError(f"{name} must be bytes, not str (encode it first)")
    raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")


@runtime_checkable
class PatternMatcher(Protocol):
    """Anchored prefix matcher: length of the longest match starting at `position`."""

    def match_at(self, buffer: bytes, position: int) -> Optional[int]: ...


class CutPoint(NamedTuple):
    """Half-open span [start, end) marked for removal or replacement."""

    start: int
    end: int

    @classmethod
    def checked(cls, start: int, end: int, size: int) -> CutPoint:
        if not 0 <= start <= end <= size:
            raise ValueError(f"cut point [{start}, {end}) outside buffer of size {size}")
        return cls(start, end)

    @property
    def length(self) -> int:
        return self.end - self.start
