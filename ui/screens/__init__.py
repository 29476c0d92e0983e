"""UI screen modules for WorkoutLog."""

from .session import (
    ExercisePickerScreen,
    WorkoutActiveScreen,
)
from .general import (
    HomeScreen,
    SettingsScreen,
    StatsScreen,
    WorkoutHistoryScreen,
)

__all__ = [
    "ExercisePickerScreen",
    "HomeScreen",
    "SettingsScreen",
    "StatsScreen",
    "WorkoutActiveScreen",
    "WorkoutHistoryScreen",
]
