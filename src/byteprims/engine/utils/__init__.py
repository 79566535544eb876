# src/byteprims/engine/utils/__init__.py
"""
utils.

Does: Provide config loading and topic-filtered debug logging for the engines.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Alignment scoring registry, transforms, demo CLI, tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    config_path,
    load_config,
    temp_data_dir,
)
from .log import (
    debug,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "config_path",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "reload_topics",
]
