# src/byteprims/engine/alignment/scoring.py
from __future__ import annotations

"""
scoring.py

Does: Load and validate the Smith–Waterman scoring variants from
      data/scoring_schemes.json ("basic" match/mismatch/gap, "amino" BLOSUM62)
      into immutable ScoringScheme objects with a precomputed 256x256 byte table.
Returns: get_scheme(), list_variants(), ScoringScheme.
Used by: smith_waterman (cell recurrence) and AlignmentParams validation.
"""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..errors import AlignmentConfigError
from ..utils.load_config import ConfigTypeError, config_path, load_config

__all__ = [
    "ScoringScheme",
    "get_scheme",
    "list_variants",
    "clear_scheme_cache",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

SCHEMES_FILE = "scoring_schemes"
_KINDS = ("simple", "matrix")

_LOCK = threading.Lock()
# key: resolved scheme file path, mtime
_SCHEMES: dict[tuple[Path, float], dict[str, ScoringScheme]] = {}


@dataclass(frozen=True)
class ScoringScheme:
    """
    A byte-level substitution table plus a linear gap penalty.

    `table` is flat: table[a * 256 + b] is the score for aligning byte a with byte b.
    """

    name: str
    gap: int
    table: tuple[int, ...]

    def score(self, a: int, b: int) -> int:
        return self.table[(a << 8) | b]

    def row(self, a: int) -> tuple[int, ...]:
        """All 256 scores for byte `a` against every byte."""
        start = a << 8
        return self.table[start : start + 256]


# ─────────────────────────────────────────────────────────────────────────────
# Validation
# ─────────────────────────────────────────────────────────────────────────────

def _require_int(name: str, spec: dict[str, Any], key: str) -> int:
    v = spec.get(key)
    if not isinstance(v, int) or isinstance(v, bool):
        raise ConfigTypeError(f"scheme {name!r}: {key!r} must be an int, got {v!r}")
    return v


def _simple_table(name: str, spec: dict[str, Any]) -> tuple[int, ...]:
    match = _require_int(name, spec, "match")
    mismatch = _require_int(name, spec, "mismatch")
    return tuple(match if a == b else mismatch for a in range(256) for b in range(256))


def _matrix_table(name: str, spec: dict[str, Any]) -> tuple[int, ...]:
    alphabet = spec.get("alphabet")
    matrix = spec.get("matrix")
    if not isinstance(alphabet, str) or not alphabet or not alphabet.isascii():
        raise ConfigTypeError(f"scheme {name!r}: 'alphabet' must be a non-empty ASCII string")
    if len(set(alphabet)) != len(alphabet):
        raise ConfigTypeError(f"scheme {name!r}: 'alphabet' has duplicate symbols")
    n = len(alphabet)
    if (
        not isinstance(matrix, list)
        or len(matrix) != n
        or any(not isinstance(r, list) or len(r) != n for r in matrix)
    ):
        raise ConfigTypeError(f"scheme {name!r}: 'matrix' must be {n}x{n} to match the alphabet")
    for r in matrix:
        for v in r:
            if not isinstance(v, int) or isinstance(v, bool):
                raise ConfigTypeError(f"scheme {name!r}: matrix entries must be ints, got {v!r}")

    unknown_match = _require_int(name, spec, "unknown_match")
    unknown_mismatch = _require_int(name, spec, "unknown_mismatch")
    fold_case = bool(spec.get("fold_case", False))

    index = {ord(ch): i for i, ch in enumerate(alphabet)}
    if fold_case:
        for ch in alphabet:
            index.setdefault(ord(ch.lower()), index[ord(ch)])
            index.setdefault(ord(ch.upper()), index[ord(ch)])

    def cell(a: int, b: int) -> int:
        ia, ib = index.get(a), index.get(b)
        if ia is not None and ib is not None:
            return matrix[ia][ib]
        return unknown_match if a == b else unknown_mismatch

    return tuple(cell(a, b) for a in range(256) for b in range(256))


def _build_schemes(data: dict[str, Any]) -> dict[str, ScoringScheme]:
    """Validator for load_config: raw JSON dict -> {variant: ScoringScheme}."""
    if not data:
        raise ConfigTypeError(f"{SCHEMES_FILE}: no scoring variants defined")
    out: dict[str, ScoringScheme] = {}
    for name, spec in data.items():
        if not isinstance(spec, dict):
            raise ConfigTypeError(f"scheme {name!r}: expected object, got {type(spec).__name__}")
        kind = spec.get("kind")
        if kind == "simple":
            table = _simple_table(name, spec)
        elif kind == "matrix":
            table = _matrix_table(name, spec)
        else:
            raise ConfigTypeError(f"scheme {name!r}: 'kind' must be one of {_KINDS}, got {kind!r}")
        gap = _require_int(name, spec, "gap")
        if gap >= 0:
            raise ConfigTypeError(f"scheme {name!r}: 'gap' must be negative, got {gap}")
        out[name] = ScoringScheme(name=name, gap=gap, table=table)
    return out


# ─────────────────────────────────────────────────────────────────────────────
# Registry
# ─────────────────────────────────────────────────────────────────────────────

def _schemes() -> dict[str, ScoringScheme]:
    """Schemes for the active data dir, rebuilt when the path or mtime changes."""
    path = config_path(SCHEMES_FILE)
    try:
        key = (path, path.stat().st_mtime)
    except OSError:
        key = None  # load_config reports the missing file
    with _LOCK:
        if key is not None and key in _SCHEMES:
            return _SCHEMES[key]
        schemes = load_config(SCHEMES_FILE, mode="validated_dict", validator=_build_schemes)
        if key is not None:
            _SCHEMES[key] = schemes
        log.debug("Loaded scoring variants from %s: %s", path, sorted(schemes))
        return schemes


def clear_scheme_cache() -> None:
    """Forget loaded schemes so the next lookup re-reads the data dir."""
    with _LOCK:
        _SCHEMES.clear()


def list_variants() -> tuple[str, ...]:
    """Registered variant names, sorted."""
    return tuple(sorted(_schemes()))


def get_scheme(variant: str) -> ScoringScheme:
    """
    Does: Resolve a variant name to its ScoringScheme.
    Returns: ScoringScheme. Raises AlignmentConfigError for unknown names.
    """
    schemes = _schemes()
    if not isinstance(variant, str) or variant not in schemes:
        raise AlignmentConfigError("variant", variant, f"one of {sorted(schemes)}")
    return schemes[variant]
