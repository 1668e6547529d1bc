from __future__ import annotations

from collections import Counter
from dataclasses import asdict
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from .coerce import chronological_key, parse_timestamp, round_half_up
from .models import (
    AppData,
    BodyMetric,
    DashboardSummary,
    ExercisePoint,
    ExerciseSeries,
    WeeklyVolume,
    WorkoutSession,
)

TOP_EXERCISE_LIMIT = 6

# date-fns "MMM" abbreviations for the fr locale
FRENCH_MONTHS = [
    "janv.",
    "févr.",
    "mars",
    "avr.",
    "mai",
    "juin",
    "juil.",
    "août",
    "sept.",
    "oct.",
    "nov.",
    "déc.",
]


def estimate_one_rep_max(weight: float, reps: float) -> int:
    """Epley estimate: weight * (1 + reps / 30), rounded half up."""
    return round_half_up(weight * (1 + reps / 30))


def week_start(ts: datetime) -> date:
    d = ts.date()
    return d - timedelta(days=d.weekday())


def week_label(day: date) -> str:
    return f"{day.day:02d} {FRENCH_MONTHS[day.month - 1]}"


def _by_date(workouts: Iterable[WorkoutSession]) -> List[WorkoutSession]:
    return sorted(workouts, key=lambda w: chronological_key(w.timestamp))


def weekly_volume(workouts: Iterable[WorkoutSession]) -> List[WeeklyVolume]:
    """
    Sum session volume per Monday-start week.

    Only weeks that contain a session appear. Sessions whose date cannot be
    parsed have no week and are left out.
    """
    weeks: List[WeeklyVolume] = []
    current: Optional[date] = None
    volume = 0.0
    count = 0

    for w in _by_date(workouts):
        ts = w.timestamp
        if ts is None:
            continue
        start = week_start(ts)
        if current is None:
            current = start
        if start == current:
            volume += w.volume
            count += 1
            continue
        weeks.append(WeeklyVolume(current, week_label(current), round_half_up(volume), count))
        current = start
        volume = w.volume
        count = 1

    if current is not None:
        weeks.append(WeeklyVolume(current, week_label(current), round_half_up(volume), count))
    return weeks


def exercise_counts(workouts: Iterable[WorkoutSession]) -> Counter:
    counts: Counter = Counter()
    for w in workouts:
        for s in w.sets:
            counts[s.exercise_name] += 1
    return counts


def _points_for(workouts: Iterable[WorkoutSession], name: str) -> List[ExercisePoint]:
    points = [
        ExercisePoint(date=w.date, weight=s.weight, reps=s.reps, e1rm=estimate_one_rep_max(s.weight, s.reps))
        for w in workouts
        for s in w.sets
        if s.exercise_name == name
    ]
    points.sort(key=lambda p: chronological_key(parse_timestamp(p.date)))
    return points


def top_exercises(workouts: List[WorkoutSession], limit: int = TOP_EXERCISE_LIMIT) -> List[ExerciseSeries]:
    # sorted() is stable, so equal counts keep first-encounter order
    ranked = sorted(exercise_counts(workouts).items(), key=lambda kv: -kv[1])[:limit]
    return [ExerciseSeries(name=name, points=_points_for(workouts, name)) for name, _ in ranked]


def exercise_progress(workouts: List[WorkoutSession], exercise_name: str) -> List[ExercisePoint]:
    return _points_for(workouts, exercise_name)


def unique_exercises(workouts: Iterable[WorkoutSession]) -> List[str]:
    return sorted({s.exercise_name for w in workouts for s in w.sets})


def weighed_metrics(metrics: Iterable[BodyMetric]) -> List[BodyMetric]:
    return [m for m in metrics if m.weight and m.weight > 0]


def summarize(data: AppData) -> DashboardSummary:
    weighed = weighed_metrics(data.metrics)
    latest = weighed[-1] if weighed else None
    weeks = weekly_volume(data.workouts)
    return DashboardSummary(
        latest_weight=latest.weight if latest else None,
        latest_weigh_in=latest.date if latest else None,
        workout_count=len(data.workouts),
        peak_weekly_volume=max((w.volume for w in weeks), default=0),
    )


def _jsonable(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


def build_aggregates(data: AppData, exercise: Optional[str] = None) -> Dict[str, object]:
    """Bundle every derived view into JSON-serialisable structures, one key per artifact."""
    aggregates: Dict[str, object] = {
        "summary": asdict(summarize(data)),
        "weekly_volume": [asdict(w) for w in weekly_volume(data.workouts)],
        "top_exercises": [asdict(s) for s in top_exercises(data.workouts)],
        "exercises": unique_exercises(data.workouts),
        "body_metrics": [asdict(m) for m in weighed_metrics(data.metrics)],
    }
    if exercise:
        aggregates["exercise_progress"] = {
            "name": exercise,
            "points": [asdict(p) for p in exercise_progress(data.workouts, exercise)],
        }
    return {name: _jsonable(value) for name, value in aggregates.items()}
