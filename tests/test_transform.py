# tests/test_transform.py
from __future__ import annotations

import json

import pytest

from byteprims.engine.transform import (
    cat,
    hexdump,
    join,
    lstrip,
    reverse,
    rstrip,
    safe_shell_quote,
    sort_bytes,
    strip,
    to_lower,
    to_upper,
)
from byteprims.engine.transform.escape import shell_metachars
from byteprims.engine.utils.load_config import temp_data_dir

# ─────────────────────────────────────────────────────────────────────────────
# Case / trim
# ─────────────────────────────────────────────────────────────────────────────

def test_case_folding_is_ascii_only():
    assert to_lower(b"GET /Index.HTML") == b"get /index.html"
    assert to_upper(b"get\xe9") == b"GET\xe9"
    assert to_lower(bytearray(b"\xc9A")) == b"\xc9a"


@pytest.mark.parametrize(
    "fn,expected",
    [(strip, b"a b"), (lstrip, b"a b \r\n"), (rstrip, b"\t a b")],
)
def test_trim_default_whitespace(fn, expected):
    assert fn(b"\t a b \r\n") == expected


def test_trim_explicit_chars():
    assert strip(b"--=x=--", b"-=") == b"x"
    assert lstrip(b"\x00\x00ab\x00", b"\x00") == b"ab\x00"
    assert rstrip(b"", b"x") == b""


# ─────────────────────────────────────────────────────────────────────────────
# Shell quoting
# ─────────────────────────────────────────────────────────────────────────────

def test_shell_metachars_loaded_from_data():
    assert shell_metachars() == frozenset(b'"\\$`')


def test_shell_metachars_follow_temp_data_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("BYTEPRIMS_DATA_DIR", raising=False)
    assert safe_shell_quote(b"$x") == b'"\\$x"'
    data = tmp_path / "data"
    data.mkdir()
    (data / "shell_escape.json").write_text(json.dumps(["!"]), encoding="utf-8")
    with temp_data_dir(data):
        assert shell_metachars() == frozenset(b"!")
        assert safe_shell_quote(b"$x!") == b'"$x\\!"'
    assert safe_shell_quote(b"$x") == b'"\\$x"'


@pytest.mark.parametrize(
    "raw,quoted",
    [
        (b"plain", b'"plain"'),
        (b"", b'""'),
        (b'a"b$c`d\\e', b'"a\\"b\\$c\\`d\\\\e"'),
        (b"it's; rm -rf *", b'"it\'s; rm -rf *"'),
    ],
)
def test_safe_shell_quote(raw, quoted):
    assert safe_shell_quote(raw) == quoted


# ─────────────────────────────────────────────────────────────────────────────
# Hexdump
# ─────────────────────────────────────────────────────────────────────────────

def test_hexdump_short_line():
    out = hexdump(b"abc")
    assert out.startswith(b"0000  61 62 63 ")
    assert out.endswith(b"  abc\n")
    assert len(out) == 61


def test_hexdump_full_and_continuation_lines():
    out = hexdump(b"0123456789abcdef" + b"\x00")
    lines = out.split(b"\n")
    assert lines[-1] == b""
    first, second = lines[0], lines[1]
    assert b"37  38" in first
    assert first.endswith(b"  0123456789abcdef")
    assert second.startswith(b"0010  00 ")
    assert second.endswith(b"  .")


def test_hexdump_non_printables_and_empty():
    assert hexdump(b"").strip() == b""
    assert hexdump(b"\x00\x7f\xff").endswith(b"  ...\n")


# ─────────────────────────────────────────────────────────────────────────────
# Join / sort / reverse
# ─────────────────────────────────────────────────────────────────────────────

def test_cat_and_join():
    assert cat(b"a", bytearray(b"b"), memoryview(b"c")) == b"abc"
    assert cat() == b""
    assert join([b"a", b"b", b"c"], b", ") == b"a, b, c"
    assert join([], b",") == b""


def test_sort_bytes_is_unsigned_lexicographic():
    assert sort_bytes([b"b", b"\xff", b"a", b"ab", b""]) == [b"", b"a", b"ab", b"b", b"\xff"]
    assert sort_bytes([b"a", b"b"], reverse=True) == [b"b", b"a"]


def test_reverse():
    assert reverse(b"abc") == b"cba"
    assert reverse(b"") == b""


def test_transforms_reject_str():
    with pytest.raises(TypeError):
        to_lower("abc")
    with pytest.raises(TypeError):
        join(["a"], b",")
