"""
Shared pytest fixtures for the society health test suite.

Provides:
  - ``thriving_metrics``: a healthy 150-resident society (overall 86).
  - ``struggling_metrics``: a society in trouble on every front (overall 39).
  - ``all_clear_breakdown`` / ``mixed_breakdown``: hand-built breakdowns for
    recommendation and formatting tests.
  - ``write_json``: helper fixture writing JSON content to a tmp file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from society_health.models.metrics import HealthMetrics
from society_health.taxonomy.dimension_taxonomy import Dimension


# ── Snapshots ─────────────────────────────────────────────────────────────────

@pytest.fixture
def thriving_metrics() -> HealthMetrics:
    """150 residents, 142 active, 3 open / 47 resolved issues, 92.3% compliance.

    No notification or maintenance telemetry (zero demand → no penalty).
    Breakdown: engagement 82.8, issue 72.31, financial 92.3, communication 100,
    maintenance 100, satisfaction 84 → overall 86.
    """
    return HealthMetrics(
        total_residents=150,
        active_residents=142,
        open_issues=3,
        resolved_issues=47,
        payment_compliance_rate=92.3,
        resident_satisfaction_score=4.2,
        community_participation=65.0,
    )


@pytest.fixture
def struggling_metrics() -> HealthMetrics:
    """60 residents, 20 active, 15 open / 8 resolved issues, 70% compliance.

    Breakdown: engagement 26, issue 13.91, financial 70, communication 54,
    maintenance 25, satisfaction 56 → overall 39.
    """
    return HealthMetrics(
        total_residents=60,
        active_residents=20,
        open_issues=15,
        resolved_issues=8,
        payment_compliance_rate=70.0,
        resident_satisfaction_score=2.8,
        community_participation=15.0,
        notifications_sent=200,
        notifications_delivered=180,
        notifications_read=60,
        maintenance_response_time=96.0,
    )


@pytest.fixture
def thriving_payload() -> dict[str, Any]:
    """``thriving_metrics`` as the platform's camelCase JSON payload."""
    return {
        "totalResidents": 150,
        "activeResidents": 142,
        "openIssues": 3,
        "resolvedIssues": 47,
        "paymentComplianceRate": 92.3,
        "residentSatisfactionScore": 4.2,
        "communityParticipation": 65,
    }


# ── Breakdowns ────────────────────────────────────────────────────────────────

@pytest.fixture
def all_clear_breakdown() -> dict[Dimension, float]:
    """Every dimension at or above 70."""
    return {
        Dimension.ENGAGEMENT:       70.0,
        Dimension.ISSUE_MANAGEMENT: 88.0,
        Dimension.FINANCIAL:        95.0,
        Dimension.COMMUNICATION:    71.5,
        Dimension.MAINTENANCE:      100.0,
        Dimension.SATISFACTION:     84.0,
    }


@pytest.fixture
def mixed_breakdown() -> dict[Dimension, float]:
    """Three sub-threshold dimensions: maintenance 30, financial 55, engagement 69.9."""
    return {
        Dimension.ENGAGEMENT:       69.9,
        Dimension.ISSUE_MANAGEMENT: 90.0,
        Dimension.FINANCIAL:        55.0,
        Dimension.COMMUNICATION:    80.0,
        Dimension.MAINTENANCE:      30.0,
        Dimension.SATISFACTION:     70.0,
    }


# ── Files ─────────────────────────────────────────────────────────────────────

@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Return a helper ``write_json(name, data) -> Path`` rooted at ``tmp_path``."""

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
