"""User display preferences loaded from a JSON file.

Only presentation is configurable here (theme, symbol set, color). The file
is read, never written; malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .theme import PromptTheme, SymbolSet, resolve_symbols, resolve_theme

APP_NAME = "lazyprompt"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayPreferences:
    """Resolved presentation defaults for new prompts."""

    theme: PromptTheme
    symbols: SymbolSet


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        log.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name() -> str | None:
    """Load configured theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_symbol_set_name() -> str | None:
    """Load configured symbol set (``"unicode"`` or ``"ascii"``)."""
    value = load_config().get("symbols")
    if not isinstance(value, str):
        return None
    stripped = value.strip().lower()
    return stripped if stripped else None


def load_no_color() -> bool:
    """Return whether color is disabled by config or the ``NO_COLOR`` env var."""
    if os.environ.get("NO_COLOR"):
        return True
    value = load_config().get("no_color")
    return bool(value) if isinstance(value, bool) else False


def load_display_preferences(theme_name: str | None = None, *, no_color: bool | None = None) -> DisplayPreferences:
    """Resolve theme and symbols, letting explicit arguments beat the config file."""
    if no_color is None:
        no_color = load_no_color()
    if theme_name is None:
        theme_name = load_theme_name()
    return DisplayPreferences(
        theme=resolve_theme(theme_name, no_color=no_color),
        symbols=resolve_symbols(load_symbol_set_name()),
    )


__all__ = [
    "CONFIG_PATH",
    "DisplayPreferences",
    "load_config",
    "load_theme_name",
    "load_symbol_set_name",
    "load_no_color",
    "load_display_preferences",
]
