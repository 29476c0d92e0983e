from datetime import datetime, timezone

from backend.models import Workout, WorkoutExercise, WorkoutSet

_counter = 0


def _next_id(prefix: str) -> str:
    global _counter
    _counter += 1
    return f"{prefix}{_counter}"


def make_set(reps: int = 10, weight: float = 100, completed: bool = True) -> WorkoutSet:
    return WorkoutSet(id=_next_id("s"), reps=reps, weight=weight, completed=completed)


def make_exercise(name: str = "Bench Press", *sets: WorkoutSet) -> WorkoutExercise:
    return WorkoutExercise(
        id=_next_id("e"),
        exercise_id=name.lower().replace(" ", "-"),
        exercise_name=name,
        sets=tuple(sets),
    )


def make_workout(
    when: datetime | None = None,
    *exercises: WorkoutExercise,
    completed: bool = True,
    duration: int = 1800,
) -> Workout:
    """Build a workout dated ``when`` (default: now, UTC)."""
    when = when or datetime.now(timezone.utc)
    return Workout(
        id=_next_id("w"),
        date=when.isoformat(),
        duration=duration,
        exercises=tuple(exercises),
        completed=completed,
    )
