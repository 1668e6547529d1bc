from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

import yaml
from loguru import logger

from .coerce import coerce_cell, parse_float, parse_int
from .models import ExerciseSet

FIELDS = (
    "date",
    "workout_name",
    "duration",
    "exercise_name",
    "set_order",
    "weight",
    "reps",
    "distance",
    "seconds",
    "rpe",
    "notes",
)


@dataclass(frozen=True)
class StrongColumns:
    headers: Dict[str, str]
    rest_timer: str
    numeric: FrozenSet[str]

    def header(self, name: str) -> str:
        return self.headers.get(name, name)


def load_strong_columns(config_dir: Optional[Path] = None) -> StrongColumns:
    """
    Read the Strong CSV column layout.

    Without `config_dir` the layout shipped inside the package is used, so a
    plain (non-editable) install reads the same file.
    """
    if config_dir is None:
        resource = resources.files(__package__) / "config" / "strong_columns.yml"
        source = str(resource)
        data = yaml.safe_load(resource.read_text(encoding="utf-8")) or {}
    else:
        config_path = config_dir / "strong_columns.yml"
        source = str(config_path)
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    headers = {str(k): str(v) for k, v in (data.get("columns") or {}).items()}
    missing = [name for name in FIELDS if name not in headers]
    if missing:
        raise ValueError(f"{source}: missing column headers for {', '.join(missing)}")
    return StrongColumns(
        headers=headers,
        rest_timer=str(data.get("rest_timer") or ""),
        numeric=frozenset(data.get("numeric") or []),
    )


@lru_cache(maxsize=None)
def default_strong_columns() -> StrongColumns:
    return load_strong_columns()


def _cell(row: Dict[Optional[str], Any], columns: StrongColumns, name: str) -> Any:
    raw = row.get(columns.header(name))
    if not isinstance(raw, str):
        return None
    if name in columns.numeric:
        return coerce_cell(raw)
    return raw.strip() or None


def _number_or_zero(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return parse_float(value, 0.0)


def is_rest_timer(row: Dict[Optional[str], Any], columns: StrongColumns) -> bool:
    raw = row.get(columns.header("set_order"))
    return isinstance(raw, str) and raw.strip() == columns.rest_timer


def row_to_set(row: Dict[Optional[str], Any], columns: StrongColumns) -> Optional[ExerciseSet]:
    """Map one CSV row to an ExerciseSet; None for rest-timer rows and undated rows."""
    if is_rest_timer(row, columns):
        return None
    date_text = _cell(row, columns, "date")
    if not date_text:
        return None
    return ExerciseSet(
        date=str(date_text),
        workout_name=str(_cell(row, columns, "workout_name") or ""),
        duration=_cell(row, columns, "duration"),
        exercise_name=str(_cell(row, columns, "exercise_name") or ""),
        set_order=parse_int(_cell(row, columns, "set_order")),
        weight=_number_or_zero(_cell(row, columns, "weight")),
        reps=_number_or_zero(_cell(row, columns, "reps")),
        distance=_cell(row, columns, "distance"),
        seconds=_cell(row, columns, "seconds"),
        rpe=_cell(row, columns, "rpe"),
        notes=_cell(row, columns, "notes"),
    )


def extract_sets(csv_text: Optional[str], columns: Optional[StrongColumns] = None) -> List[ExerciseSet]:
    """
    Parse a Strong CSV export into ExerciseSet records, in row order.

    Rest-timer rows and rows without a date are skipped. Weight and reps fall
    back to 0 when the cell is not numeric. A malformed document yields an
    empty list.
    """
    if not csv_text:
        return []
    columns = columns or default_strong_columns()

    sets: List[ExerciseSet] = []
    skipped = 0
    try:
        reader = csv.DictReader(io.StringIO(csv_text.lstrip("\ufeff")))
        for row in reader:
            item = row_to_set(row, columns)
            if item is None:
                skipped += 1
                continue
            sets.append(item)
    except csv.Error as e:
        logger.warning(f"Could not parse workout CSV: {e}")
        return []

    if skipped:
        logger.debug(f"Skipped {skipped} rest-timer or undated row(s)")
    return sets
