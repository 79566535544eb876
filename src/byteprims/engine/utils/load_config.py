# src/byteprims/engine/utils/load_config.py

"""Load JSON tables (scoring schemes, byte sets) from a <data/> directory.

Modes:
- "raw"             -> parsed JSON as-is
- "set"             -> frozenset[bytes] (strings encoded as latin-1, ints as single bytes)
- "validated_dict"  -> dict[str, Any] after an optional validator

Used by the alignment scoring registry and by tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal

# json5 is an optional extra; only needed for allow_comments=True
try:
    import json5 as _json5
except ImportError:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "set", "validated_dict"]
__all__ = [
    "Mode",
    "load_config",
    "config_path",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

_ENV_VARS = ("BYTEPRIMS_DATA_DIR",)


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# key: path, mtime, mode, allow_comments
_CONFIG_CACHE: dict[tuple[Path, float, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (pytest / hot reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the nearest existing <data/> above `start` or raise."""
    cands = _candidate_data_dirs(start)
    for cand in cands:
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(str(p) for p in cands)
    )


def _env_data_dir() -> Path | None:
    for var in _ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def _to_byte_set(name: str, data: Any) -> frozenset[bytes]:
    if not isinstance(data, list):
        raise ConfigTypeError(
            f"{name}: expected list for mode 'set', got {type(data).__name__}"
        )
    out: set[bytes] = set()
    for item in data:
        if isinstance(item, str):
            try:
                out.add(item.encode("latin-1"))
            except UnicodeEncodeError as e:
                raise ConfigTypeError(f"{name}: {item!r} is not a byte string") from e
        elif isinstance(item, int) and not isinstance(item, bool) and 0 <= item <= 255:
            out.add(bytes((item,)))
        else:
            raise ConfigTypeError(
                f"{name}: 'set' entries must be latin-1 strings or ints 0..255, got {item!r}"
            )
    return frozenset(out)


def config_path(file: str | os.PathLike[str], *, base_dir: Path | None = None) -> Path:
    """Resolve <data>/<file>.json against the active data dir (env first).

    Raises ConfigFileNotFound when the name escapes the data dir. The file
    itself need not exist.
    """
    if base_dir is None:
        base_dir = _env_data_dir() or _default_data_dir()
    data_dir = Path(base_dir).resolve()

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e
    return path


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    validator: Callable[[dict[str, Any]], Any] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>.json, parse, coerce by mode, and cache results.

    Results are cached by (path, mtime, mode) unless a validator is given,
    since validators may build fresh objects per call.
    """
    path = config_path(file, base_dir=base_dir)
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, allow_comments)
    if validator is None:
        with _CACHE_LOCK:
            if cache_key in _CONFIG_CACHE:
                log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
                return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding="utf-8") as f:
            if allow_comments:
                if _json5 is None:
                    raise ConfigParseError(
                        "json5 requested (allow_comments=True) but not installed"
                    )
                data = _json5.load(f)
            else:
                data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if mode == "raw":
        result: Any = data
    elif mode == "set":
        result = _to_byte_set(path.name, data)
    elif mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
            )
        result = data
        if validator is not None:
            try:
                result = validator(data)
            except (ConfigTypeError, ConfigParseError):
                raise
            except Exception as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
    else:
        raise ValueError(f"Unknown mode '{mode}'")

    if validator is None:
        with _CACHE_LOCK:
            _CONFIG_CACHE[cache_key] = result
        log.debug("Config cache MISS -> STORED: %s (mode=%s)", path.name, mode)
    else:
        log.debug("Config loaded (validator present, not cached): %s", path.name)

    return result


class temp_data_dir:
    """Temporarily point the loader at another data directory."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get("BYTEPRIMS_DATA_DIR")
        os.environ["BYTEPRIMS_DATA_DIR"] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop("BYTEPRIMS_DATA_DIR", None)
        else:
            os.environ["BYTEPRIMS_DATA_DIR"] = self._old
        clear_config_cache()
