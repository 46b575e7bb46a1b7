# src/pedigree_builder/records/loader.py

"""
Read fact-record exports from disk.

The live system reads rows straight from the survey database; this module
covers the file exports used by the CLI, the pipeline and the tests.

Supported formats:
    - JSON: a list of row objects, or {"records": [...]}
    - CSV:  one row per record, header row with survey column names
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Iterable, List, Union

from pedigree_builder.core.exceptions import RecordLoadError
from pedigree_builder.logging import get_logger
from pedigree_builder.records.fact_record import FactRecord

log = get_logger(__name__)


def _sort_key(record: FactRecord):
    # Rows without a degree code go last
    degree = record.relationship
    return (degree is None, degree if degree is not None else 0, record.step)


def sort_fact_records(records: Iterable[FactRecord]) -> List[FactRecord]:
    """Order records by relationship degree, then step name (stable)."""
    return sorted(records, key=_sort_key)


def _read_json_rows(path: Path) -> List[Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as exc:
        raise RecordLoadError(f"{path}: invalid JSON ({exc})") from exc

    if isinstance(payload, dict):
        payload = payload.get("records")
    if not isinstance(payload, list):
        raise RecordLoadError(f"{path}: expected a list of records")
    return payload


def _read_csv_rows(path: Path) -> List[Any]:
    with path.open("r", encoding="utf-8", newline="") as f:
        return list(csv.DictReader(f))


def load_fact_records(path: Union[str, Path]) -> List[FactRecord]:
    """
    Load and sort the fact records stored in ``path``.

    Raises RecordLoadError for unreadable or malformed exports.
    """
    path = Path(path)
    if not path.exists():
        raise RecordLoadError(f"Fact record file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        rows = _read_json_rows(path)
    elif suffix == ".csv":
        rows = _read_csv_rows(path)
    else:
        raise RecordLoadError(f"Unsupported fact record format: {path.suffix or '(none)'}")

    records = []
    for idx, row in enumerate(rows, start=1):
        if not isinstance(row, dict):
            raise RecordLoadError(f"{path}: record {idx} is not an object")
        records.append(FactRecord.from_mapping(row))

    log.info("Loaded %d fact records from %s", len(records), path)
    return sort_fact_records(records)
