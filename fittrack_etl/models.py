"""
Records produced by the pipeline.

- BodyMetric: one body-composition reading
- ExerciseSet: one row of the strength log
- WorkoutSession: the sets sharing a (date, workout name) pair
- AppData: the normalized dataset handed to the aggregates
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, List, Optional

from .coerce import parse_timestamp


@dataclass(frozen=True)
class BodyMetric:
    date: datetime
    weight: Optional[float] = None
    fat: Optional[float] = None
    muscle: Optional[float] = None
    water: Optional[float] = None
    bone: Optional[float] = None


@dataclass(frozen=True)
class ExerciseSet:
    date: str  # timestamp text, e.g. "2025-08-21 12:52:22"
    workout_name: str
    duration: Optional[str]
    exercise_name: str
    set_order: Optional[int]  # None when the cell was not an integer
    weight: float
    reps: float
    distance: Any = None
    seconds: Any = None
    rpe: Any = None
    notes: Optional[str] = None

    @property
    def timestamp(self) -> Optional[datetime]:
        return parse_timestamp(self.date)


@dataclass
class WorkoutSession:
    id: str
    date: str
    name: str
    duration: Optional[str]
    sets: List[ExerciseSet] = field(default_factory=list)
    volume: float = 0.0

    @property
    def timestamp(self) -> Optional[datetime]:
        return parse_timestamp(self.date)


@dataclass
class AppData:
    metrics: List[BodyMetric] = field(default_factory=list)
    workouts: List[WorkoutSession] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.metrics and not self.workouts


@dataclass(frozen=True)
class WeeklyVolume:
    week_start: date
    label: str
    volume: int
    workouts: int


@dataclass(frozen=True)
class ExercisePoint:
    date: str
    weight: float
    reps: float
    e1rm: int


@dataclass
class ExerciseSeries:
    name: str
    points: List[ExercisePoint] = field(default_factory=list)


@dataclass(frozen=True)
class DashboardSummary:
    latest_weight: Optional[float]
    latest_weigh_in: Optional[datetime]
    workout_count: int
    peak_weekly_volume: int
