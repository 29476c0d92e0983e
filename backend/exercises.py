"""Exercise catalog helpers.

The catalog is a static list built into the application. Workouts copy
the exercise name when an exercise is added, so editing this list never
changes logged history.
"""

from __future__ import annotations

from backend.models import CATEGORIES, Exercise


def _build(category: str, *entries: tuple[str, str]) -> list[Exercise]:
    return [Exercise(id=eid, name=name, category=category) for eid, name in entries]


EXERCISES: tuple[Exercise, ...] = tuple(
    _build(
        "chest",
        ("bench-press", "Bench Press"),
        ("incline-bench", "Incline Bench Press"),
        ("dumbbell-fly", "Dumbbell Fly"),
        ("push-ups", "Push Ups"),
        ("cable-crossover", "Cable Crossover"),
    )
    + _build(
        "back",
        ("deadlift", "Deadlift"),
        ("pull-ups", "Pull Ups"),
        ("barbell-row", "Barbell Row"),
        ("lat-pulldown", "Lat Pulldown"),
        ("seated-row", "Seated Cable Row"),
    )
    + _build(
        "legs",
        ("squat", "Squat"),
        ("leg-press", "Leg Press"),
        ("lunges", "Lunges"),
        ("leg-curl", "Leg Curl"),
        ("leg-extension", "Leg Extension"),
        ("calf-raises", "Calf Raises"),
    )
    + _build(
        "shoulders",
        ("overhead-press", "Overhead Press"),
        ("lateral-raise", "Lateral Raise"),
        ("front-raise", "Front Raise"),
        ("face-pull", "Face Pull"),
        ("shrugs", "Shrugs"),
    )
    + _build(
        "arms",
        ("bicep-curl", "Bicep Curl"),
        ("hammer-curl", "Hammer Curl"),
        ("tricep-pushdown", "Tricep Pushdown"),
        ("tricep-dip", "Tricep Dip"),
        ("skull-crusher", "Skull Crusher"),
    )
    + _build(
        "core",
        ("plank", "Plank"),
        ("crunches", "Crunches"),
        ("leg-raises", "Leg Raises"),
        ("russian-twist", "Russian Twist"),
        ("cable-crunch", "Cable Crunch"),
    )
)


def get_all_exercises() -> list[Exercise]:
    return list(EXERCISES)


def get_exercise_by_id(exercise_id: str) -> Exercise | None:
    """Return the catalog entry for ``exercise_id`` or ``None``."""

    for exercise in EXERCISES:
        if exercise.id == exercise_id:
            return exercise
    return None


def get_exercises_by_category(category: str) -> list[Exercise]:
    return [e for e in EXERCISES if e.category == category]


def search_exercises(text: str = "", category: str | None = None) -> list[Exercise]:
    """Return exercises whose name contains ``text``.

    Matching is case-insensitive. When ``category`` is given only that
    category is searched; ``None`` searches all of them. Unknown categories
    raise ``ValueError``.
    """

    if category is not None and category not in CATEGORIES:
        raise ValueError(f"Unknown category '{category}'")
    needle = text.strip().lower()
    return [
        e
        for e in EXERCISES
        if needle in e.name.lower() and (category is None or e.category == category)
    ]
