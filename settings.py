"""JSON-based settings persistence for the trip date picker."""

import json
import os

from loguru import logger

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".trip-date-picker-settings.json")

_DEFAULTS = {
    "showing_months": 12,
    "window_width": None,
    "window_height": None,
    "uniform_past_filter": False,
    "endpoint_times": False,
}

_INT_KEYS = ("window_width", "window_height")
_BOOL_KEYS = ("uniform_past_filter", "endpoint_times")


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    path = path or _SETTINGS_PATH
    settings = dict(_DEFAULTS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file {}: {}", path, exc)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file {}: expected an object", path)
        return settings

    months = stored.get("showing_months")
    if isinstance(months, int) and not isinstance(months, bool) and 1 <= months <= 24:
        settings["showing_months"] = months
    for key in _INT_KEYS:
        if isinstance(stored.get(key), int) and not isinstance(stored[key], bool):
            settings[key] = stored[key]
    for key in _BOOL_KEYS:
        if isinstance(stored.get(key), bool):
            settings[key] = stored[key]
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    path = path or _SETTINGS_PATH
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    logger.debug("Saved settings to {}", path)
