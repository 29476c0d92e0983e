import pytest

from backend.exercises import (
    EXERCISES,
    get_all_exercises,
    get_exercise_by_id,
    get_exercises_by_category,
    search_exercises,
)
from backend.models import CATEGORIES


def test_catalog_ids_are_unique_and_categorised():
    ids = [e.id for e in EXERCISES]
    assert len(ids) == len(set(ids))
    assert {e.category for e in EXERCISES} == set(CATEGORIES)
    assert len(get_all_exercises()) == len(EXERCISES) == 31


def test_lookup_by_id():
    assert get_exercise_by_id("squat").name == "Squat"
    assert get_exercise_by_id("unknown") is None


def test_by_category():
    legs = get_exercises_by_category("legs")
    assert len(legs) == 6
    assert all(e.category == "legs" for e in legs)
    assert get_exercises_by_category("cardio") == []


def test_search_is_case_insensitive():
    names = [e.name for e in search_exercises("  CURL ")]
    assert names == ["Leg Curl", "Bicep Curl", "Hammer Curl"]


def test_search_within_category():
    names = [e.name for e in search_exercises("curl", category="arms")]
    assert names == ["Bicep Curl", "Hammer Curl"]
    assert search_exercises("", category="core") == get_exercises_by_category("core")


def test_empty_search_returns_everything():
    assert search_exercises() == get_all_exercises()


def test_unknown_category_is_rejected():
    with pytest.raises(ValueError):
        search_exercises("press", category="cardio")
