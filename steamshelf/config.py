"""Configuration: JSON preferences, platform directories, and credentials.

The JSON file is read-only from the app's point of view. All access is
defensive: malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_cache_dir, user_config_dir, user_log_dir

from .artwork.cache import DEFAULT_MAX_ENTRIES
from .artwork.renderer import RENDERER_CHOICES
from .render.frame import DEFAULT_LEFT_PANE_PERCENT

APP_NAME = "steamshelf"
CONFIG_FILENAME = "config.json"
LOG_FILENAME = "steamshelf.log"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_ARTWORK_DIR = Path(user_cache_dir(APP_NAME, appauthor=False)) / "artwork"
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME

API_KEY_ENV = "STEAM_API_KEY"
STEAM_ID_ENV = "STEAM_ID"


class ConfigError(ValueError):
    """Raised when required credentials are missing."""


@dataclass(frozen=True)
class Credentials:
    api_key: str
    steam_id: str


@dataclass(frozen=True)
class Settings:
    """Resolved preferences with defaults applied."""

    artwork_cache_max_entries: int = DEFAULT_MAX_ENTRIES
    artwork_renderer: str = "auto"
    left_pane_percent: float = DEFAULT_LEFT_PANE_PERCENT
    theme: str = "default"
    enrich_genres: bool = False
    artwork_dir: Path = DEFAULT_ARTWORK_DIR


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _positive_int(value: object, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


def _percent(value: object, default: float) -> float:
    """Accept a percentage in the open interval (0, 100)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value <= 0 or value >= 100:
        return default
    return float(value)


def _choice(value: object, choices: tuple[str, ...], default: str) -> str:
    if not isinstance(value, str):
        return default
    candidate = value.strip().lower()
    return candidate if candidate in choices else default


def _nonempty_str(value: object, default: str) -> str:
    if not isinstance(value, str) or not value.strip():
        return default
    return value.strip()


def load_settings(data: Mapping[str, object] | None = None) -> Settings:
    """Build ``Settings`` from config data (loaded from disk when omitted)."""
    raw = load_config() if data is None else data
    enrich = raw.get("enrich_genres")
    return Settings(
        artwork_cache_max_entries=_positive_int(raw.get("artwork_cache_max_entries"), DEFAULT_MAX_ENTRIES),
        artwork_renderer=_choice(raw.get("artwork_renderer"), RENDERER_CHOICES, "auto"),
        left_pane_percent=_percent(raw.get("left_pane_percent"), DEFAULT_LEFT_PANE_PERCENT),
        theme=_nonempty_str(raw.get("theme"), "default"),
        enrich_genres=enrich if isinstance(enrich, bool) else False,
    )


def load_credentials(environ: Mapping[str, str] | None = None) -> Credentials:
    """Read Steam credentials from the environment.

    Raises ``ConfigError`` naming the first missing variable.
    """
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    for name in (API_KEY_ENV, STEAM_ID_ENV):
        value = env.get(name, "").strip()
        if not value:
            raise ConfigError(f"Missing {name} in environment")
        values[name] = value
    return Credentials(api_key=values[API_KEY_ENV], steam_id=values[STEAM_ID_ENV])
