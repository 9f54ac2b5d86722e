"""JSON config helpers.

Reads the baseline hidden-entry and color preferences plus the CLI log
level from a user-edited file; colortree never writes it. All access is
defensive: malformed or missing config falls back to built-in defaults.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "colortree"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "COLORTREE_CONFIG"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _config_path() -> Path:
    """Return the env-var override when set, otherwise ``CONFIG_PATH``."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(_config_path().read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(key: str, default: bool) -> bool:
    value = load_config().get(key)
    return value if isinstance(value, bool) else default


def load_show_hidden() -> bool:
    """Return persisted hidden-entry preference; non-booleans read as ``False``."""
    return _load_bool("show_hidden", False)


def load_use_color() -> bool:
    """Return persisted color preference.

    A non-empty ``NO_COLOR`` environment variable wins over the file.
    """
    if os.environ.get("NO_COLOR"):
        return False
    return _load_bool("use_color", True)


def load_log_level() -> str:
    """Return an upper-cased stdlib level name, falling back to ``WARNING``."""
    value = load_config().get("log_level")
    if not isinstance(value, str):
        return DEFAULT_LOG_LEVEL
    candidate = value.strip().upper()
    return candidate if candidate in _LOG_LEVELS else DEFAULT_LOG_LEVEL


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_LOG_LEVEL",
    "load_config",
    "load_show_hidden",
    "load_use_color",
    "load_log_level",
]
