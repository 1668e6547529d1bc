from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from loguru import logger

from .paths import DATA_DIR, DEFAULT_MEASUREMENTS_FILE, DEFAULT_WORKOUTS_FILE, DERIVED_DIR


def ensure_dirs(out_dir: Path = DERIVED_DIR) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)


def read_text(path: Path) -> Optional[str]:
    if not path.exists():
        return None
    return path.read_text(encoding="utf-8-sig")


def load_default_inputs(data_dir: Path = DATA_DIR) -> Tuple[Optional[str], Optional[str]]:
    """Read the bundled measurement JSON and workout CSV; missing files come back as None."""
    json_text = read_text(data_dir / DEFAULT_MEASUREMENTS_FILE)
    csv_text = read_text(data_dir / DEFAULT_WORKOUTS_FILE)
    if json_text is None and csv_text is None:
        logger.warning(f"No default data files found in {data_dir}")
    return json_text, csv_text


def classify_files(paths: Iterable[Path]) -> Tuple[Optional[str], Optional[str]]:
    """
    Sort dropped files into the measurement and workout slots by extension.

    `.json` feeds measurements, `.csv` feeds workouts; a later file of the
    same kind replaces an earlier one and anything else is ignored.
    """
    json_text: Optional[str] = None
    csv_text: Optional[str] = None
    for path in paths:
        suffix = path.suffix.lower()
        if suffix == ".json":
            json_text = read_text(path)
        elif suffix == ".csv":
            csv_text = read_text(path)
        else:
            logger.debug(f"Ignoring {path}: not a .json or .csv file")
    return json_text, csv_text


def write_artifacts(aggregates: Dict[str, object], out_dir: Path = DERIVED_DIR) -> Path:
    ensure_dirs(out_dir)
    for name, data in aggregates.items():
        out_path = out_dir / f"{name}.json"
        with out_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    summary = aggregates.get("summary") or {}
    version_path = out_dir / "data_version.json"
    version = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "total_workouts": summary.get("workout_count", 0) if isinstance(summary, dict) else 0,
        "total_measurements": len(aggregates.get("body_metrics") or []),
    }
    with version_path.open("w", encoding="utf-8") as f:
        json.dump(version, f, indent=2)

    print(f"Wrote aggregates -> {out_dir}")
    return out_dir
