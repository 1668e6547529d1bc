from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from loguru import logger

from .coerce import chronological_key, optional_float, parse_timestamp
from .models import BodyMetric


def _metric_from_record(raw_date: Any, record: Dict[str, Any], *, with_water: bool) -> Optional[BodyMetric]:
    ts = parse_timestamp(raw_date) if raw_date else None
    if ts is None:
        return None
    return BodyMetric(
        date=ts,
        weight=optional_float(record.get("weight")),
        fat=optional_float(record.get("fat")),
        muscle=optional_float(record.get("muscle")),
        water=optional_float(record.get("water")) if with_water else None,
        bone=optional_float(record.get("bone")),
    )


def _list_field(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def normalize_measurements(json_text: Optional[str]) -> List[BodyMetric]:
    """
    Normalize a body-metrics document into BodyMetric records.

    `measurements` entries carry their date in `date`; `stats` entries in `day`
    with `date` as fallback. Both lists are concatenated (measurements first),
    records without a usable date are dropped and the result is sorted by date.
    A malformed document yields an empty list.
    """
    if not json_text:
        return []

    try:
        data = json.loads(json_text)
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        measurements = _list_field(data, "measurements")
        stats = _list_field(data, "stats")
    except (ValueError, TypeError, RecursionError) as e:
        logger.warning(f"Could not parse measurement document: {e}")
        return []

    metrics: List[BodyMetric] = []
    skipped = 0
    for m in measurements:
        metric = _metric_from_record(m.get("date"), m, with_water=True) if isinstance(m, dict) else None
        if metric is None:
            skipped += 1
            continue
        metrics.append(metric)
    for s in stats:
        metric = _metric_from_record(s.get("day") or s.get("date"), s, with_water=False) if isinstance(s, dict) else None
        if metric is None:
            skipped += 1
            continue
        metrics.append(metric)

    if skipped:
        logger.debug(f"Skipped {skipped} measurement record(s) without a valid date")

    metrics.sort(key=lambda m: chronological_key(m.date))
    return metrics
