"""Persistent JSON config helpers.

Reads preview and visibility preferences from the user config directory.
Malformed or missing config falls back to defaults key by key.
The session never writes config back.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "panefm"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_SYNTAX_STYLE = "monokai"
DEFAULT_THEME_NAME = "default"


@dataclass(frozen=True)
class Settings:
    """User preferences consumed at startup."""

    pretty_markdown: bool = True
    syntax_highlight: bool = True
    syntax_style: str = DEFAULT_SYNTAX_STYLE
    show_hidden: bool = False
    theme: str = DEFAULT_THEME_NAME


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else means ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _load_name(data: dict[str, object], key: str, default: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        return default
    return value.strip()


def load_settings(path: Path | None = None) -> Settings:
    """Return validated ``Settings`` from the config file."""
    data = load_config(path)
    defaults = Settings()
    return Settings(
        pretty_markdown=_load_bool(data, "pretty_markdown", defaults.pretty_markdown),
        syntax_highlight=_load_bool(data, "syntax_highlight", defaults.syntax_highlight),
        syntax_style=_load_name(data, "syntax_style", defaults.syntax_style),
        show_hidden=_load_bool(data, "show_hidden", defaults.show_hidden),
        theme=_load_name(data, "theme", defaults.theme),
    )
