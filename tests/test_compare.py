# tests/test_compare.py
from __future__ import annotations

import logging

import pytest

from byteprims.engine.compare import (
    best_match,
    common_prefix_len,
    is_exact_match,
    is_single_substitution,
    is_single_transposition,
    is_strong_match,
    similarity_ratio,
)

# ─────────────────────────────────────────────────────────────────────────────
# Exact helpers
# ─────────────────────────────────────────────────────────────────────────────

def test_is_exact_match_and_case_folding():
    assert is_exact_match(b"Host", b"Host")
    assert not is_exact_match(b"Host", b"host")
    assert is_exact_match(b"Host", bytearray(b"host"), fold_case=True)
    # high bytes are not folded
    assert not is_exact_match(b"\xc9", b"\xe9", fold_case=True)


@pytest.mark.parametrize(
    "a,b,n",
    [(b"", b"abc", 0), (b"abc", b"abd", 2), (b"abc", b"abc", 3), (b"x", b"y", 0), (b"ab", b"abc", 2)],
)
def test_common_prefix_len(a, b, n):
    assert common_prefix_len(a, b) == n


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (b"abcd", b"abdc", True),
        (b"ab", b"ba", True),
        (b"abcd", b"dbca", False),  # swap, not adjacent
        (b"abcd", b"abcd", False),
        (b"abc", b"abcd", False),
        (b"abcd", b"abce", False),
    ],
)
def test_is_single_transposition(a, b, expected):
    assert is_single_transposition(a, b) is expected


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (b"evil.com", b"evil.con", True),
        (b"a", b"b", True),
        (b"abc", b"abc", False),
        (b"abc", b"xbz", False),
        (b"abc", b"ab", False),
    ],
)
def test_is_single_substitution(a, b, expected):
    assert is_single_substitution(a, b) is expected


# ─────────────────────────────────────────────────────────────────────────────
# Fuzzy helpers
# ─────────────────────────────────────────────────────────────────────────────

def test_similarity_ratio_values():
    assert similarity_ratio(b"abcd", b"abce") == pytest.approx(75.0)
    assert similarity_ratio(b"same", b"same") == 100.0
    assert similarity_ratio(b"", b"") == 100.0
    assert similarity_ratio(b"abc", b"xyz") == pytest.approx(0.0)


def test_is_strong_match():
    assert is_strong_match(b"abcd", b"abdc")
    assert is_strong_match(b"example.com", b"examp1e.com")
    assert not is_strong_match(b"abcd", b"wxyz")
    assert is_strong_match(b"abcd", b"abce", threshold=75)


def test_best_match_single_edit_shortcut():
    assert best_match(b"evil.com", [b"evil.con", b"good.org"]) == b"evil.con"
    assert best_match(b"abcd", [b"zzzz", b"abdc"]) == b"abdc"


def test_best_match_exact_wins_over_earlier_edit():
    assert best_match(b"abcd", [b"abce", b"abcd"]) == b"abcd"


def test_best_match_none_when_nothing_close():
    assert best_match(b"evil.com", [b"good.org", b"x"]) is None
    assert best_match(b"", [b"a"]) is None
    assert best_match(b"abc", []) is None


def test_best_match_fuzzy_fallback():
    got = best_match(b"download-center", [b"downloads-centre", b"upload", b"zzz"])
    assert got == b"downloads-centre"


def test_best_match_skips_length_outliers():
    # ratio would pass, but the length gap exceeds the pre-filter
    assert best_match(b"abcdefgh", [b"abcdefghijk"], threshold=50) is None


def test_best_match_debug_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="byteprims.engine.compare.fuzzy_core"):
        best_match(b"evil.com", [b"evil.con"], debug=True)
    assert any("EDIT1" in r.getMessage() for r in caplog.records)
