from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from .coerce import chronological_key
from .models import ExerciseSet, WorkoutSession


def set_volume(item: ExerciseSet) -> float:
    # bodyweight sets (weight 0) and sets without reps add nothing
    if item.weight and item.reps:
        return item.weight * item.reps
    return 0.0


def session_volume(sets: Iterable[ExerciseSet]) -> float:
    return sum(set_volume(s) for s in sets)


def aggregate_sessions(sets: Iterable[ExerciseSet]) -> List[WorkoutSession]:
    """
    Group sets into workout sessions keyed by (date text, workout name).

    The first set of a session fixes its date, name and duration. Sessions
    come back sorted by date, ties in first-seen order.
    """
    sessions: Dict[Tuple[str, str], WorkoutSession] = {}

    for item in sets:
        key = (item.date, item.workout_name)
        session = sessions.get(key)
        if session is None:
            session = WorkoutSession(
                id=f"{item.date}-{item.workout_name}",
                date=item.date,
                name=item.workout_name,
                duration=item.duration,
            )
            sessions[key] = session
        session.sets.append(item)
        session.volume += set_volume(item)

    return sorted(sessions.values(), key=lambda s: chronological_key(s.timestamp))
