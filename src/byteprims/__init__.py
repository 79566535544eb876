# src/byteprims/__init__.py
"""
byteprims
=========

Does: Byte-string primitives for host policy code: edit distance,
      Smith–Waterman local alignment, pattern-driven split/substitute,
      and byte transforms.
Returns: The stable primitive surface re-exported from `byteprims.primitives`.
"""

from .primitives import *  # noqa: F401,F403
from .primitives import __all__ as _primitives_all

__all__: list[str] = list(_primitives_all)
__version__ = "0.1.0"
__docformat__ = "google"
