# src/byteprims/engine/pattern/__init__.py
"""
pattern
=======

Does: Expose PatternMatcher adapters for literals and `re` byte regexes.
Exports: LiteralPattern, LiteralSetPattern, RegexPattern, as_pattern
"""

from .matchers import (
    LiteralPattern,
    LiteralSetPattern,
    RegexPattern,
    as_pattern,
)

__all__ = [
    "LiteralPattern",
    "LiteralSetPattern",
    "RegexPattern",
    "as_pattern",
]
