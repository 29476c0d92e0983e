"""Statistics derived from the workout history.

Everything here is a pure function of a list of :class:`Workout` records.
Nothing is cached; callers recompute whenever they display a view.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Iterable

from backend import PERSONAL_RECORD_LIMIT, STATS_DAYS
from backend.models import DayVolume, PersonalRecord, Workout, WorkoutStats
from backend.utils import parse_date

_DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def completed_sets(workout: Workout):
    """Yield ``(exercise, set)`` pairs for every completed set of ``workout``."""

    for exercise in workout.exercises:
        for workout_set in exercise.sets:
            if workout_set.completed:
                yield exercise, workout_set


def workout_volume(workout: Workout) -> float:
    return sum(s.reps * s.weight for _, s in completed_sets(workout))


def completed_set_count(workout: Workout) -> int:
    return sum(1 for _ in completed_sets(workout))


def total_set_count(workout: Workout) -> int:
    return sum(len(e.sets) for e in workout.exercises)


def calculate_stats(workouts: Iterable[Workout], now: datetime | None = None) -> WorkoutStats:
    """Return totals over completed sets of completed workouts.

    ``this_week_workouts`` counts completed workouts dated no earlier than
    seven days before ``now``.
    """

    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.astimezone()
    week_ago = now - timedelta(days=7)

    total_workouts = 0
    total_volume = 0
    total_sets = 0
    total_reps = 0
    this_week = 0

    for workout in workouts:
        if not workout.completed:
            continue
        total_workouts += 1
        if parse_date(workout.date) >= week_ago:
            this_week += 1
        for _, workout_set in completed_sets(workout):
            total_sets += 1
            total_reps += workout_set.reps
            total_volume += workout_set.reps * workout_set.weight

    return WorkoutStats(
        total_workouts=total_workouts,
        total_volume=total_volume,
        total_sets=total_sets,
        total_reps=total_reps,
        this_week_workouts=this_week,
    )


def local_date(workout: Workout) -> date:
    """Return the calendar date of ``workout`` in local time."""

    return parse_date(workout.date).astimezone().date()


def weekly_volume(
    workouts: Iterable[Workout],
    days: int = STATS_DAYS,
    today: date | None = None,
) -> list[DayVolume]:
    """Return one :class:`DayVolume` per day of the trailing window.

    Buckets run from the oldest day to ``today``. Workouts are matched to a
    bucket by their local calendar date, not by timestamp.
    """

    today = today or date.today()
    by_day: dict[date, list[Workout]] = {}
    for workout in workouts:
        if workout.completed:
            by_day.setdefault(local_date(workout), []).append(workout)

    buckets = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        matching = by_day.get(day, [])
        buckets.append(
            DayVolume(
                date=day,
                label=_DAY_LABELS[day.weekday()],
                volume=sum(workout_volume(w) for w in matching),
                has_workout=bool(matching),
            )
        )
    return buckets


def chart_scale(buckets: list[DayVolume]) -> float:
    """Largest bucket volume, never less than 1."""

    return max([b.volume for b in buckets] + [1])


def bar_fractions(buckets: list[DayVolume]) -> list[float]:
    scale = chart_scale(buckets)
    return [b.volume / scale for b in buckets]


def chart_summary(buckets: list[DayVolume]) -> dict:
    """Return the total volume and number of active days in ``buckets``."""

    return {
        "total_volume": sum(b.volume for b in buckets),
        "active_days": sum(1 for b in buckets if b.has_workout),
        "days": len(buckets),
    }


def personal_records(
    workouts: Iterable[Workout], limit: int = PERSONAL_RECORD_LIMIT
) -> list[PersonalRecord]:
    """Return the best set per exercise name, highest volume first.

    Only completed sets with a non-zero weight from completed workouts are
    considered. A record is replaced only by a strictly larger
    ``reps * weight``, so ties keep the set seen first.
    """

    records: dict[str, PersonalRecord] = {}
    for workout in workouts:
        if not workout.completed:
            continue
        for exercise, workout_set in completed_sets(workout):
            if workout_set.weight == 0:
                continue
            existing = records.get(exercise.exercise_name)
            if existing is None or workout_set.volume > existing.volume:
                records[exercise.exercise_name] = PersonalRecord(
                    exercise=exercise.exercise_name,
                    weight=workout_set.weight,
                    reps=workout_set.reps,
                )

    ranked = sorted(records.values(), key=lambda r: r.volume, reverse=True)
    return ranked[:limit]


def format_volume(volume: float) -> str:
    """Return ``volume`` in thousands with one decimal, e.g. ``"12.3k"``."""

    return f"{volume / 1000:.1f}k"
