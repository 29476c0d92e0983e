"""Shared constants and globals for backend modules."""

from __future__ import annotations

import os
from pathlib import Path

# Path to the SQLite file backing the key-value store
DEFAULT_DB_PATH = Path(
    os.environ.get(
        "WORKOUT_LOG_DB",
        Path(__file__).resolve().parent.parent / "data" / "workout_log.db",
    )
)

# Values a freshly added set starts with
DEFAULT_REPS = 10
DEFAULT_WEIGHT = 0

# Increment/decrement steps of the set controls
WEIGHT_STEP = 5
REPS_STEP = 1

# Rest timer
DEFAULT_REST_DURATION = 60
REST_PRESETS = (30, 60, 90, 120)
REST_PROGRESS_SPAN = 120

# Statistics
STATS_DAYS = 7
PERSONAL_RECORD_LIMIT = 5

__all__ = [
    "DEFAULT_DB_PATH",
    "DEFAULT_REPS",
    "DEFAULT_WEIGHT",
    "WEIGHT_STEP",
    "REPS_STEP",
    "DEFAULT_REST_DURATION",
    "REST_PRESETS",
    "REST_PROGRESS_SPAN",
    "STATS_DAYS",
    "PERSONAL_RECORD_LIMIT",
]
