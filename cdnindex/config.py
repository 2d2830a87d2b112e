"""Persistent JSON config helpers.

Reads indexing preferences that the command line can override.
All access is defensive: malformed or missing config falls back safely.
The file is edited by hand; nothing in cdnindex writes it.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "cdnindex"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(key: str) -> bool:
    """Only explicit booleans are accepted; anything else means ``False``."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def load_quiet() -> bool:
    """Return whether per-directory progress logging is suppressed."""
    return _load_bool("quiet")


def load_skip_hidden() -> bool:
    """Return whether dot-prefixed children are left out of listings."""
    return _load_bool("skip_hidden")
