# src/byteprims/engine/distance/__init__.py
"""
distance
========

Does: Expose the edit-distance engine.
Exports: levenshtein, edit_table
"""

from .levenshtein import edit_table, levenshtein

__all__ = ["levenshtein", "edit_table"]
