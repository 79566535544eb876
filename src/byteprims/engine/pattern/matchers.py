# src/byteprims/engine/pattern/matchers.py
from __future__ import annotations

"""
matchers.py

Does: Adapters that satisfy the PatternMatcher protocol
      (match_at(buffer, position) -> length | None) for byte literals,
      sets of literals (longest wins) and compiled `re` byte patterns.
Returns: LiteralPattern, LiteralSetPattern, RegexPattern, as_pattern().
Used by: Segmentation/substitution engine and host callers that hold
         plain bytes or regexes instead of a compiled matcher.
"""

import re
from typing import Iterable, Optional, Union

from ..types import ByteLike, PatternMatcher, as_bytes

__all__ = [
    "LiteralPattern",
    "LiteralSetPattern",
    "RegexPattern",
    "as_pattern",
]

__docformat__ = "google"


class LiteralPattern:
    """Matches one fixed byte string."""

    __slots__ = ("needle",)

    def __init__(self, needle: ByteLike):
        self.needle = as_bytes(needle, "needle")

    def match_at(self, buffer: bytes, position: int) -> Optional[int]:
        if buffer.startswith(self.needle, position):
            return len(self.needle)
        return None

    def __repr__(self) -> str:
        return f"LiteralPattern({self.needle!r})"


class LiteralSetPattern:
    """Matches any of several literals; the longest one anchored at `position` wins."""

    __slots__ = ("needles",)

    def __init__(self, needles: Iterable[ByteLike]):
        uniq = {as_bytes(n, "needle") for n in needles}
        # Deterministic: length desc, then bytewise asc
        self.needles: tuple[bytes, ...] = tuple(sorted(uniq, key=lambda n: (-len(n), n)))

    def match_at(self, buffer: bytes, position: int) -> Optional[int]:
        for n in self.needles:
            if buffer.startswith(n, position):
                return len(n)
        return None

    def __repr__(self) -> str:
        return f"LiteralSetPattern({list(self.needles)!r})"


class RegexPattern:
    """
    Anchored `re` match at `position` (re.Pattern.match with pos).

    `re` is leftmost-first, not leftmost-longest: for alternations list
    longer branches first when the longest match matters.
    """

    __slots__ = ("regex",)

    def __init__(self, pattern: Union[ByteLike, re.Pattern], flags: int = 0):
        if isinstance(pattern, re.Pattern):
            if not isinstance(pattern.pattern, bytes):
                raise TypeError("RegexPattern needs a bytes regex, got a str pattern")
            if flags:
                raise ValueError("flags cannot be combined with a compiled pattern")
            self.regex = pattern
        else:
            self.regex = re.compile(as_bytes(pattern, "pattern"), flags)

    def match_at(self, buffer: bytes, position: int) -> Optional[int]:
        m = self.regex.match(buffer, position)
        if m is None:
            return None
        return m.end() - position

    def __repr__(self) -> str:
        return f"RegexPattern({self.regex.pattern!r})"


def as_pattern(obj: Union[PatternMatcher, ByteLike, re.Pattern]) -> PatternMatcher:
    """
    Does: Coerce host values into a matcher: objects with match_at pass through,
          compiled bytes regexes become RegexPattern, raw bytes a LiteralPattern.
    Returns: PatternMatcher. Raises TypeError for anything else (str included).
    """
    if isinstance(obj, re.Pattern):
        return RegexPattern(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return LiteralPattern(obj)
    if isinstance(obj, PatternMatcher):
        return obj
    raise TypeError(f"expected a pattern matcher, bytes or bytes regex, got {type(obj).__name__}")
