"""Convenience imports for the user interface.

Screens import from here rather than reaching into individual backend
modules.
"""

from __future__ import annotations

from backend import (
    DEFAULT_DB_PATH,
    DEFAULT_REPS,
    DEFAULT_REST_DURATION,
    DEFAULT_WEIGHT,
    PERSONAL_RECORD_LIMIT,
    REPS_STEP,
    REST_PRESETS,
    STATS_DAYS,
    WEIGHT_STEP,
)
from backend.exercises import (
    EXERCISES,
    get_exercise_by_id,
    get_exercises_by_category,
    search_exercises,
)
from backend.models import CATEGORIES, Exercise, Workout, WorkoutExercise, WorkoutSet
from backend.sessions import (
    format_workout_date,
    get_workout_history,
    history_summary,
    last_workout,
    load_workouts,
)
from backend.stats import (
    bar_fractions,
    calculate_stats,
    chart_summary,
    completed_set_count,
    format_volume,
    personal_records,
    weekly_volume,
    workout_volume,
)
from backend.storage import MemoryStore, SQLiteStore, Storage, StorageError
from backend.timer import RestTimer, Timer, format_time
from backend.workout_session import WorkoutSession

__all__ = [
    "DEFAULT_DB_PATH",
    "DEFAULT_REPS",
    "DEFAULT_REST_DURATION",
    "DEFAULT_WEIGHT",
    "PERSONAL_RECORD_LIMIT",
    "REPS_STEP",
    "REST_PRESETS",
    "STATS_DAYS",
    "WEIGHT_STEP",
    "EXERCISES",
    "get_exercise_by_id",
    "get_exercises_by_category",
    "search_exercises",
    "CATEGORIES",
    "Exercise",
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
    "format_workout_date",
    "get_workout_history",
    "history_summary",
    "last_workout",
    "load_workouts",
    "bar_fractions",
    "calculate_stats",
    "chart_summary",
    "completed_set_count",
    "format_volume",
    "personal_records",
    "weekly_volume",
    "workout_volume",
    "MemoryStore",
    "SQLiteStore",
    "Storage",
    "StorageError",
    "RestTimer",
    "Timer",
    "format_time",
    "WorkoutSession",
]
