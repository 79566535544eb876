# src/byteprims/engine/transform/escape.py
from __future__ import annotations

"""
escape.py

Does: Quote a byte string for safe interpolation into a POSIX shell
      command: wrap in double quotes and backslash-escape the bytes the
      shell still interprets inside them (list in data/shell_escape.json).
Returns: New bytes, always double-quoted.
"""

import logging
from functools import lru_cache

from ..types import ByteLike, as_bytes
from ..utils.load_config import load_config

__all__ = ["safe_shell_quote", "shell_metachars"]

log = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _byte_values(chars: frozenset[bytes]) -> frozenset[int]:
    return frozenset(c[0] for c in chars if len(c) == 1)


def shell_metachars() -> frozenset[int]:
    """Byte values escaped inside double quotes, from the active data dir."""
    return _byte_values(load_config("shell_escape", mode="set"))


def safe_shell_quote(data: ByteLike) -> bytes:
    buf = as_bytes(data, "data")
    special = shell_metachars()
    out = bytearray(b'"')
    for byte in buf:
        if byte in special:
            out.append(0x5C)  # backslash
        out.append(byte)
    out.append(0x22)
    return bytes(out)
