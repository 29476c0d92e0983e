"""The in-progress workout and the commands that edit it.

See :class:`WorkoutSession`. Finished workouts are handed to
:mod:`backend.sessions`, which owns the persisted history.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from numbers import Real

from backend import DEFAULT_REPS, DEFAULT_WEIGHT
from backend.models import Exercise, Workout, WorkoutExercise, WorkoutSet
from backend.sessions import (
    append_workout,
    load_current_workout,
    save_current_workout,
)
from backend.storage import Storage
from backend.timer import Timer
from backend.utils import generate_id, now_iso

SET_FIELDS = ("reps", "weight", "completed")


class WorkoutSession:
    """Owner of the in-progress workout.

    The workout itself is kept in the store under ``current-workout``. Every
    command reads the stored value, builds a new :class:`Workout` and writes
    the whole value back, so the store always reflects the last change.

    Commands issued while no workout is in progress do nothing and return
    ``False`` (or ``None`` for :meth:`finish`).

    ``timer`` is the count-up stopwatch whose value becomes the workout's
    ``duration`` when it is finished.
    """

    def __init__(self, store: Storage, timer: Timer | None = None):
        self.store = store
        self.timer = timer if timer is not None else Timer()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def current(self) -> Workout | None:
        """The in-progress workout as currently stored."""

        return load_current_workout(self.store)

    @property
    def is_active(self) -> bool:
        return self.current is not None

    def _commit(self, workout: Workout) -> Workout:
        save_current_workout(self.store, workout)
        return workout

    def _replace_exercise(self, workout: Workout, exercise: WorkoutExercise) -> Workout:
        exercises = tuple(
            exercise if e.id == exercise.id else e for e in workout.exercises
        )
        return replace(workout, exercises=exercises)

    @staticmethod
    def _new_exercise(exercise: Exercise) -> WorkoutExercise:
        return WorkoutExercise(
            id=generate_id(),
            exercise_id=exercise.id,
            exercise_name=exercise.name,
            sets=(
                WorkoutSet(
                    id=generate_id(),
                    reps=DEFAULT_REPS,
                    weight=DEFAULT_WEIGHT,
                    completed=False,
                ),
            ),
        )

    @staticmethod
    def _validate_changes(changes: dict) -> None:
        """Raise ``ValueError`` unless ``changes`` are valid set fields."""

        for name, value in changes.items():
            if name not in SET_FIELDS:
                raise ValueError(f"Unknown set field '{name}'")
            if name == "completed":
                if not isinstance(value, bool):
                    raise ValueError("completed must be a boolean")
                continue
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"{name} must be a number")
            if value < 0:
                raise ValueError(f"{name} cannot be negative")
            if name == "reps" and int(value) != value:
                raise ValueError("reps must be a whole number")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> Workout:
        """Resume the in-progress workout or begin a new one.

        The stopwatch is started either way.
        """

        workout = self.current
        if workout is None:
            workout = Workout(
                id=generate_id(),
                date=now_iso(),
                duration=0,
                exercises=(),
                completed=False,
            )
            self._commit(workout)
            logging.info("Started workout %s", workout.id)
        self.timer.start()
        return workout

    def finish(self) -> Workout | None:
        """Complete the workout and move it into the history.

        The elapsed stopwatch value is recorded as ``duration``. Returns the
        finished workout, or ``None`` when nothing was in progress.
        """

        workout = self.current
        if workout is None:
            return None
        self.timer.pause()
        finished = replace(workout, duration=int(self.timer.seconds), completed=True)
        append_workout(self.store, finished)
        save_current_workout(self.store, None)
        self.timer.reset()
        logging.info(
            "Finished workout %s after %s seconds", finished.id, finished.duration
        )
        return finished

    def cancel(self, confirmed: bool = False) -> bool:
        """Discard the in-progress workout.

        Nothing happens unless ``confirmed`` is true; callers obtain the
        user's confirmation first. Returns ``True`` if a workout was
        discarded.
        """

        if not confirmed:
            return False
        workout = self.current
        if workout is None:
            return False
        save_current_workout(self.store, None)
        self.timer.reset()
        logging.info("Cancelled workout %s", workout.id)
        return True

    # ------------------------------------------------------------------
    # Exercises
    # ------------------------------------------------------------------

    def add_exercise(self, exercise: Exercise) -> bool:
        return self.add_exercises([exercise])

    def add_exercises(self, exercises) -> bool:
        """Append one entry per exercise, each seeded with a default set."""

        workout = self.current
        if workout is None:
            return False
        added = tuple(self._new_exercise(e) for e in exercises)
        self._commit(replace(workout, exercises=workout.exercises + added))
        return True

    def remove_exercise(self, exercise_id: str) -> bool:
        workout = self.current
        if workout is None or workout.find_exercise(exercise_id) is None:
            return False
        exercises = tuple(e for e in workout.exercises if e.id != exercise_id)
        self._commit(replace(workout, exercises=exercises))
        return True

    # ------------------------------------------------------------------
    # Sets
    # ------------------------------------------------------------------

    def add_set(self, exercise_id: str) -> bool:
        """Append a set copying the reps and weight of the previous one."""

        workout = self.current
        exercise = workout.find_exercise(exercise_id) if workout else None
        if exercise is None:
            return False
        if exercise.sets:
            last = exercise.sets[-1]
            reps, weight = last.reps, last.weight
        else:
            reps, weight = DEFAULT_REPS, DEFAULT_WEIGHT
        new_set = WorkoutSet(id=generate_id(), reps=reps, weight=weight, completed=False)
        updated = replace(exercise, sets=exercise.sets + (new_set,))
        self._commit(self._replace_exercise(workout, updated))
        return True

    def update_set(self, exercise_id: str, set_id: str, **changes) -> bool:
        """Merge ``changes`` (``reps``, ``weight``, ``completed``) into a set.

        Raises ``ValueError`` for unknown fields and for negative or
        non-numeric values. Returns ``False`` when the set does not exist.
        """

        self._validate_changes(changes)
        workout = self.current
        exercise = workout.find_exercise(exercise_id) if workout else None
        if exercise is None or exercise.find_set(set_id) is None:
            return False
        sets = tuple(
            replace(s, **changes) if s.id == set_id else s for s in exercise.sets
        )
        self._commit(self._replace_exercise(workout, replace(exercise, sets=sets)))
        return True

    def adjust_set(
        self, exercise_id: str, set_id: str, reps: int = 0, weight: float = 0
    ) -> bool:
        """Add ``reps``/``weight`` deltas to a set, never going below zero."""

        workout = self.current
        exercise = workout.find_exercise(exercise_id) if workout else None
        workout_set = exercise.find_set(set_id) if exercise else None
        if workout_set is None:
            return False
        return self.update_set(
            exercise_id,
            set_id,
            reps=max(0, workout_set.reps + reps),
            weight=max(0, workout_set.weight + weight),
        )

    def toggle_set(self, exercise_id: str, set_id: str) -> bool:
        workout = self.current
        exercise = workout.find_exercise(exercise_id) if workout else None
        workout_set = exercise.find_set(set_id) if exercise else None
        if workout_set is None:
            return False
        return self.update_set(exercise_id, set_id, completed=not workout_set.completed)

    def progress(self) -> tuple[int, int]:
        """Return ``(completed_sets, total_sets)`` of the current workout."""

        workout = self.current
        if workout is None:
            return 0, 0
        done = total = 0
        for exercise in workout.exercises:
            total += len(exercise.sets)
            done += sum(1 for s in exercise.sets if s.completed)
        return done, total
