from fittrack_etl.models import ExerciseSet
from fittrack_etl.sessions import aggregate_sessions, session_volume


def make_set(date, workout, exercise="Squat", weight=100.0, reps=5.0, duration="60m", order=1):
    return ExerciseSet(
        date=date,
        workout_name=workout,
        duration=duration,
        exercise_name=exercise,
        set_order=order,
        weight=weight,
        reps=reps,
    )


def test_sets_group_by_date_and_workout_name():
    sessions = aggregate_sessions(
        [
            make_set("2025-01-01 10:00:00", "Full Body"),
            make_set("2025-01-01 10:00:00", "Full Body", order=2),
            make_set("2025-01-01 10:00:00", "full body"),
            make_set("2025-01-01 10:00:01", "Full Body"),
        ]
    )
    assert [len(s.sets) for s in sessions] == [2, 1, 1]
    assert sessions[0].id == "2025-01-01 10:00:00-Full Body"


def test_first_set_seeds_session_fields():
    sessions = aggregate_sessions(
        [
            make_set("2025-01-01 10:00:00", "Legs", duration="45m"),
            make_set("2025-01-01 10:00:00", "Legs", duration="90m"),
        ]
    )
    assert sessions[0].duration == "45m"
    assert [s.duration for s in sessions[0].sets] == ["45m", "90m"]


def test_volume_skips_bodyweight_sets():
    sets = [make_set("2025-01-01 10:00:00", "Full Body") for _ in range(3)]
    sets.append(make_set("2025-01-01 10:00:00", "Full Body", exercise="Pull Up", weight=0.0, reps=10.0))
    sessions = aggregate_sessions(sets)
    assert sessions[0].volume == 1500
    assert session_volume(sessions[0].sets) == sessions[0].volume


def test_sessions_sorted_chronologically_and_stable():
    sessions = aggregate_sessions(
        [
            make_set("2025-01-03 10:00:00", "Upper"),
            make_set("2025-01-01 10:00:00", "B"),
            make_set("2025-01-01T10:00:00", "A"),
        ]
    )
    assert [s.name for s in sessions] == ["B", "A", "Upper"]


def test_unparseable_dates_sort_last():
    sessions = aggregate_sessions([make_set("sometime", "X"), make_set("2025-01-01 10:00:00", "Y")])
    assert [s.name for s in sessions] == ["Y", "X"]


def test_names_with_separator_do_not_collide():
    sessions = aggregate_sessions(
        [
            make_set("2025-01-01", "x-y"),
            make_set("2025-01-01-x", "y"),
        ]
    )
    assert len(sessions) == 2


def test_each_call_starts_fresh():
    first = aggregate_sessions([make_set("2025-01-01 10:00:00", "A")])
    second = aggregate_sessions([make_set("2025-01-01 10:00:00", "A")])
    assert len(first[0].sets) == 1
    assert len(second[0].sets) == 1
    assert first[0] is not second[0]
