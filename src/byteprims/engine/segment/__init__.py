# src/byteprims/engine/segment/__init__.py
"""
segment
=======

Does: Expose pattern-driven split / substitute / find utilities.
Exports: split, split1, split_all, substitute, substitute_all,
         find_all, find_all_ordered, find_first, count_matches
Used by: Host tokenizers and normalizers.
"""

from .split_core import (
    count_matches,
    find_all,
    find_all_ordered,
    find_first,
    split,
    split1,
    split_all,
)
from .substitute import substitute, substitute_all

__all__ = [
    # split
    "split",
    "split1",
    "split_all",
    # substitute
    "substitute",
    "substitute_all",
    # find
    "find_all",
    "find_all_ordered",
    "find_first",
    "count_matches",
]
