from __future__ import annotations

from typing import Optional

from .measurements import normalize_measurements
from .models import AppData
from .sessions import aggregate_sessions
from .sets import StrongColumns, extract_sets


def parse_file_content(
    json_text: Optional[str],
    csv_text: Optional[str],
    columns: Optional[StrongColumns] = None,
) -> AppData:
    """
    Build the normalized dataset from the raw measurement JSON and workout CSV.

    Either input may be None. The two inputs are parsed independently, so a
    broken measurement document still leaves the workouts intact and vice versa.
    """
    metrics = normalize_measurements(json_text)
    workouts = aggregate_sessions(extract_sets(csv_text, columns))
    return AppData(metrics=metrics, workouts=workouts)
