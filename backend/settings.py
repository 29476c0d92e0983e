from __future__ import annotations

"""Utility functions for loading and saving user settings.

The settings are stored as a list of dictionaries to preserve order.
Each dictionary contains ``key``, ``value`` and ``type`` entries. They live
in the same key-value store as the workouts, under ``settings``.
"""

import logging
from typing import Any, List, Dict

from backend import DEFAULT_REST_DURATION, STATS_DAYS
from backend.storage import Storage

SETTINGS_KEY = "settings"

# Default settings to initialize the store on first run.
DEFAULT_SETTINGS: List[Dict[str, Any]] = [
    {"key": "rest_duration", "value": DEFAULT_REST_DURATION, "type": "int"},
    {"key": "chart_days", "value": STATS_DAYS, "type": "int"},
]


def load_settings(store: Storage) -> List[Dict[str, Any]]:
    """Load settings from ``store`` or create defaults."""
    data = store.load(SETTINGS_KEY, None)
    if isinstance(data, list) and all(isinstance(item, dict) for item in data):
        return data
    if data is not None:
        logging.warning("Discarding malformed settings: %r", data)
    defaults = [item.copy() for item in DEFAULT_SETTINGS]
    save_settings(store, defaults)
    return defaults


def save_settings(store: Storage, settings: List[Dict[str, Any]]) -> None:
    """Persist ``settings`` to ``store``."""
    store.save(SETTINGS_KEY, settings)


def get_value(store: Storage, key: str) -> Any:
    """Fetch the value associated with ``key``.

    Falls back to the default when the stored list has no entry for it.
    """
    for item in load_settings(store):
        if item.get("key") == key:
            return item.get("value")
    for item in DEFAULT_SETTINGS:
        if item["key"] == key:
            return item["value"]
    return None


def set_value(store: Storage, key: str, value: Any) -> None:
    """Update ``key`` with ``value`` and persist the change."""
    settings = load_settings(store)
    for item in settings:
        if item.get("key") == key:
            item["value"] = value
            break
    else:
        settings.append({"key": key, "value": value, "type": type(value).__name__})
    save_settings(store, settings)
