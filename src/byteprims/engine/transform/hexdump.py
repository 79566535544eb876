# src/byteprims/engine/transform/hexdump.py
from __future__ import annotations

"""
hexdump.py

Does: Render bytes as a classic offset / hex / ASCII dump, 16 bytes per
      line with an extra gap after the 8th byte; non-printables shown as '.'.
Returns: bytes (ASCII), one line per 16 input bytes, each ending in b"\\n".
"""

from ..types import ByteLike, as_bytes

__all__ = ["hexdump"]

BYTES_PER_LINE = 16
_HEX_WIDTH = BYTES_PER_LINE * 3 + 1


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte < 0x7F else "."


def hexdump(data: ByteLike) -> bytes:
    buf = as_bytes(data, "data")
    lines: list[str] = []
    for off in range(0, len(buf), BYTES_PER_LINE):
        chunk = buf[off : off + BYTES_PER_LINE]
        left = " ".join(f"{b:02x}" for b in chunk[:8])
        right = " ".join(f"{b:02x}" for b in chunk[8:])
        hex_part = f"{left}  {right}" if right else left
        ascii_part = "".join(_printable(b) for b in chunk)
        lines.append(f"{off:04x}  {hex_part:<{_HEX_WIDTH}}  {ascii_part}\n")
    return "".join(lines).encode("ascii")
