# tests/test_utils.py
"""End-to-end tests for engine utils (load_config, log) with cache/env fallbacks."""

from __future__ import annotations

import json
import os
from importlib import import_module
from types import SimpleNamespace

import pytest

LC = import_module("byteprims.engine.utils.load_config")
LOG = import_module("byteprims.engine.utils.log")

ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via BYTEPRIMS_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("BYTEPRIMS_DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and config cache between tests."""
    monkeypatch.delenv("BYTEPRIMS_DEBUG_TOPICS", raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    clear_config_cache()


# ---------- load_config tests ----------
def test_load_config_set_and_cache_hit(tmp_data_dir):
    p = tmp_data_dir / "bytes.json"
    p.write_text(json.dumps(["ab", "ÿ", 0, 65]), encoding="utf-8")

    out1 = load_config("bytes", mode="set")
    assert out1 == frozenset({b"ab", b"\xff", b"\x00", b"A"})
    assert load_config("bytes", mode="set") is out1  # cached

    clear_config_cache()
    out2 = load_config("bytes.json", mode="set")
    assert out2 == out1
    assert out2 is not out1


@pytest.mark.parametrize("bad", [[256], [-1], [True], ["Ā"], [1.5], {"a": 1}])
def test_load_config_set_rejects_non_bytes(tmp_data_dir, bad):
    (tmp_data_dir / "bad.json").write_text(json.dumps(bad), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("bad", mode="set")


def test_load_config_validated_dict_and_errors(tmp_data_dir):
    conf = tmp_data_dir / "settings.json"
    conf.write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d = dict(d)
        d["beta"] = "ok"
        return d

    out = load_config("settings", mode="validated_dict", validator=validator)
    assert out == {"alpha": 1, "beta": "ok"}

    def broken(d: dict) -> dict:
        raise KeyError("gamma")

    with pytest.raises(ConfigParseError):
        load_config("settings", mode="validated_dict", validator=broken)

    conf2 = tmp_data_dir / "oops.json"
    conf2.write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("oops", mode="validated_dict")

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist", mode="raw")

    with pytest.raises(ValueError):
        load_config("settings", mode="bogus")


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{nope", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_allow_comments_with_fake_json5(tmp_data_dir, monkeypatch):
    cfg = tmp_data_dir / "cmt.json"
    cfg.write_text('{"a":1, /*c*/ "b":2, }', encoding="utf-8")

    fake_json5 = SimpleNamespace(load=lambda f: {"a": 1, "b": 2})
    monkeypatch.setattr(LC, "_json5", fake_json5)

    out = load_config("cmt", mode="raw", allow_comments=True)
    assert out == {"a": 1, "b": 2}


def test_load_config_allow_comments_without_json5(tmp_data_dir, monkeypatch):
    (tmp_data_dir / "cmt.json").write_text("{}", encoding="utf-8")
    monkeypatch.setattr(LC, "_json5", None)
    with pytest.raises(ConfigParseError, match="json5"):
        load_config("cmt", allow_comments=True)


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret", mode="raw")


def test_load_config_ignores_generic_data_dir_env(tmp_path, monkeypatch):
    unrelated = tmp_path / "data"
    unrelated.mkdir()
    monkeypatch.delenv("BYTEPRIMS_DATA_DIR", raising=False)
    monkeypatch.setenv("DATA_DIR", str(unrelated))
    schemes = load_config("scoring_schemes")
    assert {"basic", "amino"} <= set(schemes)
    assert LC.config_path("scoring_schemes").parent != unrelated.resolve()


def test_config_path_resolves_without_reading(tmp_data_dir):
    assert LC.config_path("missing") == (tmp_data_dir / "missing.json").resolve()
    with pytest.raises(ConfigFileNotFound):
        LC.config_path("../secret")


def test_temp_data_dir_restores_env(tmp_path, monkeypatch):
    monkeypatch.setenv("BYTEPRIMS_DATA_DIR", "/previous")
    data = tmp_path / "data"
    data.mkdir()
    (data / "x.json").write_text('{"k": 2}', encoding="utf-8")
    with LC.temp_data_dir(data):
        assert load_config("x") == {"k": 2}
    assert os.environ["BYTEPRIMS_DATA_DIR"] == "/previous"


# ---------- log.debug tests ----------
def test_log_debug_silent_by_default(capsys):
    LOG.debug("nobody listens", topic="segment")
    assert capsys.readouterr().err == ""


def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("BYTEPRIMS_DEBUG_TOPICS", "segment")
    LOG.reload_topics()

    LOG.debug("hello on segment", topic="segment")
    LOG.debug("should be silent", topic="other")

    captured = capsys.readouterr()
    assert "hello on segment" in captured.err
    assert "[segment][DEBUG]" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("BYTEPRIMS_DEBUG_TOPICS", "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="warning")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "m2" in captured.err
    assert "[bar][WARNING]" in captured.err
