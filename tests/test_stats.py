from datetime import date, datetime, timedelta, timezone

import pytest

from backend.stats import (
    bar_fractions,
    calculate_stats,
    chart_scale,
    chart_summary,
    format_volume,
    personal_records,
    weekly_volume,
    workout_volume,
)
from utils import make_exercise, make_set, make_workout

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _local_noon(day: date) -> datetime:
    """Noon local time on ``day`` so the local calendar date is unambiguous."""
    return datetime(day.year, day.month, day.day, 12).astimezone()


def test_stats_ignore_incomplete_sets_and_workouts():
    finished = make_workout(
        NOW - timedelta(days=1),
        make_exercise("Squat", make_set(5, 200), make_set(5, 200, completed=False)),
        make_exercise("Bench Press", make_set(10, 100)),
    )
    unfinished = make_workout(
        NOW, make_exercise("Deadlift", make_set(5, 300)), completed=False
    )

    stats = calculate_stats([finished, unfinished], now=NOW)

    assert stats.total_workouts == 1
    assert stats.total_sets == 2
    assert stats.total_reps == 15
    assert stats.total_volume == 5 * 200 + 10 * 100
    assert stats.this_week_workouts == 1


def test_stats_for_empty_history():
    stats = calculate_stats([], now=NOW)
    assert stats.to_dict() == {
        "totalWorkouts": 0,
        "totalVolume": 0,
        "totalSets": 0,
        "totalReps": 0,
        "thisWeekWorkouts": 0,
    }


def test_this_week_boundary():
    inside = make_workout(NOW - timedelta(days=7) + timedelta(seconds=1))
    outside = make_workout(NOW - timedelta(days=7) - timedelta(seconds=1))
    stats = calculate_stats([inside, outside], now=NOW)
    assert stats.total_workouts == 2
    assert stats.this_week_workouts == 1


def test_this_week_accepts_naive_now():
    recent = make_workout(datetime.now(timezone.utc) - timedelta(hours=1))
    assert calculate_stats([recent], now=datetime.now()).this_week_workouts == 1


def test_weekly_buckets_run_oldest_to_today():
    today = date(2026, 10, 19)
    buckets = weekly_volume([], days=7, today=today)
    assert [b.date for b in buckets] == [today - timedelta(days=i) for i in range(6, -1, -1)]
    assert buckets[-1].label == "Mon"
    assert not any(b.has_workout for b in buckets)
    assert chart_scale(buckets) == 1
    assert bar_fractions(buckets) == [0] * 7


def test_weekly_buckets_group_by_local_date():
    today = date(2026, 10, 19)
    morning = make_workout(_local_noon(today) - timedelta(hours=3), make_exercise("Squat", make_set(10, 100)))
    evening = make_workout(_local_noon(today) + timedelta(hours=6), make_exercise("Squat", make_set(5, 100)))
    two_days_ago = make_workout(_local_noon(today - timedelta(days=2)), make_exercise("Row", make_set(10, 50)))
    not_finished = make_workout(_local_noon(today), make_exercise("Squat", make_set(10, 999)), completed=False)

    buckets = weekly_volume([morning, evening, two_days_ago, not_finished], today=today)

    assert buckets[-1].volume == 1500
    assert buckets[-1].has_workout
    assert buckets[-3].volume == 500
    assert buckets[-2].volume == 0
    assert not buckets[-2].has_workout
    assert bar_fractions(buckets)[-3] == pytest.approx(500 / 1500)
    assert chart_summary(buckets) == {"total_volume": 2000, "active_days": 2, "days": 7}


def test_zero_volume_workout_still_marks_day_active():
    today = date(2026, 10, 19)
    bodyweight = make_workout(_local_noon(today), make_exercise("Push Ups", make_set(20, 0)))
    buckets = weekly_volume([bodyweight], today=today)
    assert buckets[-1].has_workout
    assert buckets[-1].volume == 0


def test_weekly_total_matches_stats_when_window_covers_history():
    today = date(2026, 10, 19)
    workouts = [
        make_workout(_local_noon(today - timedelta(days=i)), make_exercise("Squat", make_set(5, 100 + i)))
        for i in range(5)
    ]
    buckets = weekly_volume(workouts, days=7, today=today)
    total = calculate_stats(workouts).total_volume
    assert sum(b.volume for b in buckets) == total


def test_personal_record_keeps_first_higher_volume():
    workout = make_workout(
        NOW,
        make_exercise("Bench Press", make_set(10, 100), make_set(8, 120)),
    )
    (record,) = personal_records([workout])
    assert (record.exercise, record.reps, record.weight) == ("Bench Press", 10, 100)


def test_personal_record_ties_keep_first_seen():
    first = make_workout(NOW - timedelta(days=1), make_exercise("Squat", make_set(10, 100)))
    second = make_workout(NOW, make_exercise("Squat", make_set(5, 200)))
    (record,) = personal_records([first, second])
    assert record.reps == 10


def test_personal_records_skip_zero_weight_and_incomplete():
    workout = make_workout(
        NOW,
        make_exercise("Pull Ups", make_set(50, 0)),
        make_exercise("Deadlift", make_set(5, 400, completed=False)),
        make_exercise("Row", make_set(10, 50)),
    )
    unfinished = make_workout(NOW, make_exercise("Curl", make_set(10, 40)), completed=False)
    records = personal_records([workout, unfinished])
    assert [r.exercise for r in records] == ["Row"]


def test_personal_records_ranked_and_limited():
    exercises = [
        make_exercise(f"Lift {i}", make_set(1, 10 * i)) for i in range(1, 8)
    ]
    records = personal_records([make_workout(NOW, *exercises)])
    assert [r.exercise for r in records] == ["Lift 7", "Lift 6", "Lift 5", "Lift 4", "Lift 3"]
    assert len(personal_records([make_workout(NOW, *exercises)], limit=2)) == 2


def test_workout_volume_and_format():
    workout = make_workout(NOW, make_exercise("Squat", make_set(10, 126), make_set(10, 126, completed=False)))
    assert workout_volume(workout) == 1260
    assert format_volume(1260) == "1.3k"
    assert format_volume(0) == "0.0k"
