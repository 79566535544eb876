# src/byteprims/engine/transform/__init__.py
"""
transform
=========

Does: Straight-line byte transforms: case folding, trimming, shell quoting,
      hex dumping, concatenation/join, sorting.
"""

from .case import to_lower, to_upper
from .escape import safe_shell_quote
from .hexdump import hexdump
from .join import cat, join, reverse, sort_bytes
from .trim import lstrip, rstrip, strip

__all__ = [
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
]
