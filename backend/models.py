"""Workout records.

All records are frozen dataclasses. Sequences are stored as tuples and
changes are made by building a new value with :func:`dataclasses.replace`
so a record read from storage is never modified behind the caller's back.

``to_dict``/``from_dict`` convert to and from the JSON exchange shape,
which uses camelCase keys (``exerciseId``, ``exerciseName`` ...).
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from numbers import Real

from backend.utils import parse_date

CATEGORIES = ("chest", "back", "legs", "shoulders", "arms", "core")


def _amount(data: dict, name: str):
    """Return the non-negative number stored under ``name``."""
    value = data[name]
    if isinstance(value, bool) or not isinstance(value, Real) or value < 0:
        raise ValueError(f"{name} must be a non-negative number, got {value!r}")
    return value


def _flag(data: dict, name: str) -> bool:
    value = data.get(name, False)
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean, got {value!r}")
    return value


def _timestamp(data: dict) -> str:
    value = data["date"]
    if not isinstance(value, str):
        raise ValueError(f"date must be a string, got {value!r}")
    parse_date(value)
    return value


@dataclass(frozen=True)
class Exercise:
    """Catalog entry."""

    id: str
    name: str
    category: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "category": self.category}


@dataclass(frozen=True)
class WorkoutSet:
    id: str
    reps: int
    weight: float
    completed: bool = False

    @property
    def volume(self) -> float:
        return self.reps * self.weight

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "reps": self.reps,
            "weight": self.weight,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutSet":
        return cls(
            id=data["id"],
            reps=_amount(data, "reps"),
            weight=_amount(data, "weight"),
            completed=_flag(data, "completed"),
        )


@dataclass(frozen=True)
class WorkoutExercise:
    id: str
    exercise_id: str
    exercise_name: str
    sets: tuple[WorkoutSet, ...] = ()

    def find_set(self, set_id: str) -> WorkoutSet | None:
        for workout_set in self.sets:
            if workout_set.id == set_id:
                return workout_set
        return None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "exerciseId": self.exercise_id,
            "exerciseName": self.exercise_name,
            "sets": [s.to_dict() for s in self.sets],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutExercise":
        return cls(
            id=data["id"],
            exercise_id=data["exerciseId"],
            exercise_name=data["exerciseName"],
            sets=tuple(WorkoutSet.from_dict(s) for s in data.get("sets", [])),
        )


@dataclass(frozen=True)
class Workout:
    """A logged session, in progress (``completed=False``) or finished."""

    id: str
    date: str
    duration: int = 0
    exercises: tuple[WorkoutExercise, ...] = ()
    completed: bool = False

    def find_exercise(self, exercise_id: str) -> WorkoutExercise | None:
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        return None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date,
            "duration": self.duration,
            "exercises": [e.to_dict() for e in self.exercises],
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Workout":
        """Build a :class:`Workout` from its JSON shape.

        Raises ``KeyError`` or ``TypeError`` when required fields are missing
        or the data is not a mapping, and ``ValueError`` when ``date`` is not
        an ISO-8601 timestamp or a number or flag has the wrong type.
        """

        return cls(
            id=data["id"],
            date=_timestamp(data),
            duration=_amount(data, "duration") if "duration" in data else 0,
            exercises=tuple(
                WorkoutExercise.from_dict(e) for e in data.get("exercises", [])
            ),
            completed=_flag(data, "completed"),
        )


@dataclass(frozen=True)
class WorkoutStats:
    """Aggregate totals derived from the workout history."""

    total_workouts: int = 0
    total_volume: float = 0
    total_sets: int = 0
    total_reps: int = 0
    this_week_workouts: int = 0

    def to_dict(self) -> dict:
        return {
            "totalWorkouts": self.total_workouts,
            "totalVolume": self.total_volume,
            "totalSets": self.total_sets,
            "totalReps": self.total_reps,
            "thisWeekWorkouts": self.this_week_workouts,
        }


@dataclass(frozen=True)
class PersonalRecord:
    exercise: str
    weight: float
    reps: int

    @property
    def volume(self) -> float:
        return self.weight * self.reps


@dataclass(frozen=True)
class DayVolume:
    """One bar of the weekly volume chart."""

    date: datetime.date
    label: str
    volume: float = 0
    has_workout: bool = False
