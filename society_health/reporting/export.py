"""
Export helpers for scored results.

All functions write to disk and return the written ``Path``.

JSON exports use the platform's camelCase payload (``HealthResult.to_payload``)
so the persistence layer or a dashboard can consume them unchanged. CSV
exports are flat — one row per society, one column per dimension — so they
load directly in a spreadsheet or pandas without pre-processing.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

from society_health.scoring.batch import SocietyScore
from society_health.taxonomy.dimension_taxonomy import Dimension


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Args:
        data: Dict or list to serialise.
        path: Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    return path


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def scores_to_payload(scores: list[SocietyScore]) -> list[dict]:
    """``[{"societyId": ..., **result.to_payload()}, ...]`` in input order."""
    return [{"societyId": s.society_id, **s.result.to_payload()} for s in scores]


def flatten_scores_for_export(scores: list[SocietyScore]) -> list[dict]:
    """Flatten scored societies into one row each.

    Each row contains ``society_id``, ``overall``, ``status``,
    ``trend_direction``, ``trend_change_pct``, ``trend_period``, one
    ``dim_<dimension>`` column per dimension, ``n_recommendations`` and
    ``top_recommendation`` (empty when there is none).
    """
    rows: list[dict] = []
    for s in scores:
        r = s.result
        row: dict = {
            "society_id":       s.society_id,
            "overall":          r.overall,
            "status":           r.status.value,
            "trend_direction":  r.trend.direction.value,
            "trend_change_pct": r.trend.change_percentage,
            "trend_period":     r.trend.period,
        }
        for dim in Dimension:
            row[f"dim_{dim.value}"] = r.breakdown[dim]
        row["n_recommendations"] = len(r.recommendations)
        row["top_recommendation"] = r.recommendations[0] if r.recommendations else ""
        rows.append(row)
    return rows
