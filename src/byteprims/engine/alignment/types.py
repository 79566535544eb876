# src/byteprims/engine/alignment/types.py
from __future__ import annotations

"""
types.py.

Does: Parameter and result records for the local-alignment engine.
"""

from dataclasses import dataclass
from typing import Literal

from ..errors import AlignmentConfigError
from .scoring import get_scheme

__all__ = ["AlignmentParams", "SubstringMatch", "Mode", "MODES"]

__docformat__ = "google"

Mode = Literal["multiple", "single"]
MODES: tuple[str, ...] = ("multiple", "single")


@dataclass(frozen=True)
class AlignmentParams:
    """
    Caller-supplied alignment settings, validated on construction.

    Attributes:
        min_length: Shortest span (in both inputs) worth reporting.
        variant: Scoring scheme name, see scoring.list_variants().
        mode: "multiple" reports every alignment whose path shares no cell
              with a better one,
              "single" only the best one.
    """

    min_length: int = 0
    variant: str = "basic"
    mode: Mode = "multiple"

    def __post_init__(self) -> None:
        if not isinstance(self.min_length, int) or isinstance(self.min_length, bool):
            raise AlignmentConfigError("min_length", self.min_length, "a non-negative int")
        if self.min_length < 0:
            raise AlignmentConfigError("min_length", self.min_length, "a non-negative int")
        if self.mode not in MODES:
            raise AlignmentConfigError("mode", self.mode, f"one of {list(MODES)}")
        get_scheme(self.variant)


@dataclass(frozen=True)
class SubstringMatch:
    """A locally similar span pair: s1[offset1:offset1+length1] ~ s2[offset2:offset2+length2]."""

    offset1: int
    length1: int
    offset2: int
    length2: int
    score: int

    @property
    def end1(self) -> int:
        return self.offset1 + self.length1

    @property
    def end2(self) -> int:
        return self.offset2 + self.length2

    def slice1(self, s1: bytes) -> bytes:
        return bytes(s1[self.offset1 : self.end1])

    def slice2(self, s2: bytes) -> bytes:
        return bytes(s2[self.offset2 : self.end2])
