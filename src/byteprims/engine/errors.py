# src/byteprims/engine/errors.py
from __future__ import annotations

"""
errors.py

Does: Exception taxonomy shared by the engines.
      - AlignmentConfigError: bad caller parameters, raised before any work.
      - MatcherContractError: a pattern collaborator broke its contract; fatal.
Degenerate inputs (empty strings, never-matching patterns) never raise.
"""

__all__ = [
    "ByteprimsError",
    "AlignmentConfigError",
    "MatcherContractError",
]

__docformat__ = "google"


class ByteprimsError(Exception):
    """Root of every error raised by byteprims engines."""


class AlignmentConfigError(ByteprimsError, ValueError):
    """Raise when AlignmentParams (variant, mode, min_length) are malformed."""

    def __init__(self, param: str, value: object, expected: str):
        self.param = param
        self.value = value
        self.expected = expected
        super().__init__(f"invalid {param}={value!r}; expected {expected}")


class MatcherContractError(ByteprimsError, RuntimeError):
    """Raise when a pattern reports a match length outside [0, remaining]."""

    def __init__(self, pattern: object, position: int, reported: object, remaining: int):
        self.pattern = pattern
        self.position = position
        self.reported = reported
        self.remaining = remaining
        super().__init__(
            f"{pattern!r}.match_at(pos={position}) returned {reported!r}; "
            f"expected None or an int in [0, {remaining}]"
        )
