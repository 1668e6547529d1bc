from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from typing import Any, Optional, Tuple

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?)")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a loosely-typed date value into a naive datetime.

    Accepts datetime/date objects, epoch milliseconds and ISO-8601 text
    ("2025-01-01", "2025-08-21 12:52:22", "2025-01-01T08:00:00Z").
    Aware values are converted to UTC and made naive so every result compares.
    Returns None when the value is missing or not a valid point in time.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        dt_obj = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif _is_number(value):
        if not math.isfinite(value):
            return None
        try:
            dt_obj = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            dt_obj = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if dt_obj.tzinfo is not None:
        dt_obj = dt_obj.astimezone(timezone.utc).replace(tzinfo=None)
    return dt_obj


def chronological_key(ts: Optional[datetime]) -> Tuple[bool, datetime]:
    # unparseable dates sort after every real one
    return (ts is None, ts or datetime.min)


def coerce_cell(text: Any) -> Any:
    """Dynamic typing for a CSV cell: numbers, booleans, None for empty."""
    if not isinstance(text, str):
        return text
    cell = text.strip()
    if not cell:
        return None
    lowered = cell.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if _INT_RE.match(cell):
        return int(cell)
    if _FLOAT_RE.match(cell):
        number = float(cell)
        # overflowing literals such as "1e400" stay text
        return number if math.isfinite(number) else cell
    return cell


def parse_int(value: Any) -> Optional[int]:
    if _is_number(value):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        m = _LEADING_INT_RE.match(value)
        if m:
            return int(m.group(1))
    return None


def _finite(number: float) -> Optional[float]:
    return number if math.isfinite(number) else None


def parse_float(value: Any, default: float = 0.0) -> float:
    """Leading-prefix float parse ("12.5kg" -> 12.5); default on failure or non-finite values."""
    number: Optional[float] = None
    if _is_number(value):
        number = _finite(float(value))
    elif isinstance(value, str):
        m = _LEADING_FLOAT_RE.match(value)
        if m:
            number = _finite(float(m.group(1)))
    return default if number is None else number


def optional_float(value: Any) -> Optional[float]:
    if _is_number(value):
        return _finite(float(value))
    if isinstance(value, str) and _FLOAT_RE.match(value.strip()):
        return _finite(float(value.strip()))
    return None


def round_half_up(x: float) -> int:
    """Half-up rounding; non-finite input (an overflowed product) rounds to 0."""
    if not math.isfinite(x):
        return 0
    return int(math.floor(x + 0.5))
