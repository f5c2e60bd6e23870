"""
Snapshot file loader for the ``society-health score`` command.

Two formats are accepted, detected by extension.

JSON (``.json``)
----------------
Either a single object or an array. Each object is one of:

  - a batch entry: ``{"society_id": "...", "metrics": {...},
    "previous_overall": 78, "critical_override": 40}``
    (camelCase keys such as ``societyId`` / ``previousOverall`` also accepted)
  - a bare metrics object: ``{"totalResidents": 150, ...}``. Its society id is
    the file stem, suffixed ``-1``, ``-2`` ... when the file holds an array.

CSV (``.csv``)
--------------
Header row plus one snapshot per row. Metric columns use the metric field
names (snake_case or camelCase). Optional columns:
  society_id, previous_overall, critical_override

Empty cells are treated as absent, so optional counters fall back to their
defaults and a missing required metric fails validation.

All rows are validated before any are returned. If **any** row fails, a single
``ValueError`` lists the first 10 failures.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from society_health.scoring.batch import SocietySnapshot

logger = logging.getLogger(__name__)

_ENTRY_KEYS = ("society_id", "societyId", "previous_overall", "previousOverall",
               "critical_override", "criticalOverride")

_MAX_ERRORS_SHOWN = 10


def load_snapshots(path: Path) -> list[SocietySnapshot]:
    """Load and validate every snapshot in a JSON or CSV file.

    Args:
        path: Snapshot file (``.json`` or ``.csv``).

    Returns:
        Validated ``SocietySnapshot`` list in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On unsupported extension, malformed file, or any entry
            failing validation.
    """
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    fmt = path.suffix.lower()
    if fmt == ".json":
        raw_entries = _read_json_entries(path)
    elif fmt == ".csv":
        raw_entries = _read_csv_entries(path)
    else:
        raise ValueError(f"Unsupported file format '{fmt}'. Use .json or .csv.")

    multiple = len(raw_entries) > 1 or fmt == ".csv"
    snapshots: list[SocietySnapshot] = []
    errors: list[tuple[int, str]] = []

    for i, raw in enumerate(raw_entries):
        default_id = f"{path.stem}-{i + 1}" if multiple else path.stem
        try:
            snapshots.append(_to_snapshot(raw, default_id))
        except (ValueError, ValidationError) as exc:
            errors.append((i + 1, str(exc)))

    if errors:
        detail = "\n".join(f"  Entry {n}: {msg}" for n, msg in errors[:_MAX_ERRORS_SHOWN])
        suffix = (
            f"\n  … and {len(errors) - _MAX_ERRORS_SHOWN} more"
            if len(errors) > _MAX_ERRORS_SHOWN else ""
        )
        raise ValueError(
            f"{len(errors)} entr{'y' if len(errors) == 1 else 'ies'} failed "
            f"validation in {path.name}:\n{detail}{suffix}"
        )

    logger.info("Loaded %d snapshot(s) from %s", len(snapshots), path.name)
    return snapshots


# ── Private helpers ────────────────────────────────────────────────────────────

def _read_json_entries(path: Path) -> list[Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ValueError(f"JSON parse error in {path.name}: {exc}") from exc

    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        if not data:
            logger.warning("Snapshot JSON is an empty array: %s", path)
        return data
    raise ValueError("JSON snapshot file must contain an object or an array.")


def _read_csv_entries(path: Path) -> list[dict[str, Any]]:
    with open(path, encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None:
            raise ValueError(f"CSV file is empty or has no header row: {path}")
        rows = list(reader)

    if not rows:
        logger.warning("Snapshot CSV is empty (header only): %s", path)

    entries: list[dict[str, Any]] = []
    for row in rows:
        cells = {k.strip(): v.strip() for k, v in row.items() if k and v and v.strip()}
        entry = {k: cells.pop(k) for k in _ENTRY_KEYS if k in cells}
        entry["metrics"] = cells
        entries.append(entry)
    return entries


def _to_snapshot(raw: Any, default_id: str) -> SocietySnapshot:
    """Convert one raw JSON/CSV entry into a validated ``SocietySnapshot``."""
    if not isinstance(raw, dict):
        raise ValueError(f"Expected an object, got {type(raw).__name__}.")

    if "metrics" in raw:
        entry = dict(raw)
    else:
        entry = {k: raw[k] for k in _ENTRY_KEYS if k in raw}
        entry["metrics"] = {k: v for k, v in raw.items() if k not in _ENTRY_KEYS}

    if "society_id" not in entry and "societyId" not in entry:
        entry["society_id"] = default_id

    return SocietySnapshot.model_validate(entry)
