from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
DATA_DIR = ROOT / "data"
DERIVED_DIR = DATA_DIR / "derived"

DEFAULT_MEASUREMENTS_FILE = "my-fitness-data.json"
DEFAULT_WORKOUTS_FILE = "strong_workouts.csv"
