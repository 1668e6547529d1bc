"""
Fitness data pipeline: body-metric JSON and Strong CSV in, normalized dataset
and training aggregates out.

`etl.py` is the CLI entrypoint; the implementation lives in `fittrack_etl/*`.
"""

from .aggregates import (
    build_aggregates,
    estimate_one_rep_max,
    exercise_counts,
    exercise_progress,
    summarize,
    top_exercises,
    unique_exercises,
    weekly_volume,
    weighed_metrics,
)
from .io import classify_files, load_default_inputs, read_text, write_artifacts
from .measurements import normalize_measurements
from .models import (
    AppData,
    BodyMetric,
    DashboardSummary,
    ExercisePoint,
    ExerciseSeries,
    ExerciseSet,
    WeeklyVolume,
    WorkoutSession,
)
from .pipeline import parse_file_content
from .sessions import aggregate_sessions, session_volume
from .sets import StrongColumns, default_strong_columns, extract_sets, load_strong_columns

__all__ = [
    "AppData",
    "BodyMetric",
    "DashboardSummary",
    "ExercisePoint",
    "ExerciseSeries",
    "ExerciseSet",
    "StrongColumns",
    "WeeklyVolume",
    "WorkoutSession",
    "aggregate_sessions",
    "build_aggregates",
    "classify_files",
    "default_strong_columns",
    "estimate_one_rep_max",
    "exercise_counts",
    "exercise_progress",
    "extract_sets",
    "load_default_inputs",
    "load_strong_columns",
    "normalize_measurements",
    "parse_file_content",
    "read_text",
    "session_volume",
    "summarize",
    "top_exercises",
    "unique_exercises",
    "weekly_volume",
    "weighed_metrics",
    "write_artifacts",
]
