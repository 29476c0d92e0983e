"""Helpers for the persisted workout slots.

Two independent keys are used in the store:

``workouts``
    JSON array of finished workouts, appended to when a session finishes.
``current-workout``
    JSON object of the single in-progress workout. Absent when no session
    is running.

Reading validates the stored records. Data that does not decode into
:class:`~backend.models.Workout` values is logged and replaced with the
slot's default instead of propagating into the screens.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from backend.models import Workout
from backend.stats import completed_set_count
from backend.storage import Storage
from backend.utils import parse_date

WORKOUTS_KEY = "workouts"
CURRENT_WORKOUT_KEY = "current-workout"


def load_workouts(store: Storage) -> list[Workout]:
    """Return all finished workouts in the order they were saved."""

    data = store.load(WORKOUTS_KEY, [])
    try:
        return [Workout.from_dict(item) for item in data]
    except (KeyError, TypeError, ValueError, AttributeError):
        logging.exception("Stored workout history is malformed; ignoring it")
        return []


def save_workouts(store: Storage, workouts: Iterable[Workout]) -> None:
    store.save(WORKOUTS_KEY, [w.to_dict() for w in workouts])


def append_workout(store: Storage, workout: Workout) -> None:
    """Add ``workout`` to the end of the history."""

    workouts = load_workouts(store)
    workouts.append(workout)
    save_workouts(store, workouts)


def load_current_workout(store: Storage) -> Workout | None:
    """Return the in-progress workout, if any."""

    data = store.load(CURRENT_WORKOUT_KEY, None)
    if data is None:
        return None
    try:
        return Workout.from_dict(data)
    except (KeyError, TypeError, ValueError, AttributeError):
        logging.exception("Stored in-progress workout is malformed; ignoring it")
        return None


def save_current_workout(store: Storage, workout: Workout | None) -> None:
    """Persist ``workout`` as the in-progress session; ``None`` clears it."""

    if workout is None:
        store.remove(CURRENT_WORKOUT_KEY)
    else:
        store.save(CURRENT_WORKOUT_KEY, workout.to_dict())


def get_workout_history(workouts: Iterable[Workout]) -> list[Workout]:
    """Return completed workouts ordered with the most recent first."""

    finished = [w for w in workouts if w.completed]
    return sorted(finished, key=lambda w: parse_date(w.date), reverse=True)


def last_workout(workouts: Iterable[Workout]) -> Workout | None:
    history = get_workout_history(workouts)
    return history[0] if history else None


def history_summary(workouts: Iterable[Workout]) -> dict:
    """Return counts shown above the history list.

    The mapping contains ``workouts``, ``exercises`` and ``sets`` where
    ``sets`` only counts completed sets.
    """

    history = get_workout_history(workouts)
    return {
        "workouts": len(history),
        "exercises": sum(len(w.exercises) for w in history),
        "sets": sum(completed_set_count(w) for w in history),
    }


def format_workout_date(workout: Workout) -> str:
    """Return the local date of ``workout`` such as ``"Monday, Oct 19"``."""

    dt: datetime = parse_date(workout.date).astimezone()
    return f"{dt.strftime('%A')}, {dt.strftime('%b')} {dt.day}"
