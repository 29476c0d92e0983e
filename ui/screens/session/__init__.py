"""Screens used during an active workout session."""

from .exercise_picker_screen import ExercisePickerScreen
from .workout_active_screen import WorkoutActiveScreen

__all__ = [
    "ExercisePickerScreen",
    "WorkoutActiveScreen",
]
