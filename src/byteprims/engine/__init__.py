# src/byteprims/engine/__init__.py

"""
engine.
======

Does: Group the byte-string engines (distance, alignment, segment) and
      their shared collaborators (pattern adapters, compare, transform, utils).
Returns: Subpackages only; the caller-facing surface lives in byteprims.primitives.
"""
from __future__ import annotations

__all__: list[str] = []
__docformat__ = "google"
