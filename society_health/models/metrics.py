"""
Input snapshot model for society health scoring.

``HealthMetrics`` is the only thing the scoring engine reads. It is assembled
by the caller (backend fetch, CSV export, mock data in a demo screen) and is
frozen so that a snapshot cannot change while it is being scored.

Field names are snake_case; the camelCase keys used by the platform's JSON
payloads (``totalResidents``, ``paymentComplianceRate`` ...) are accepted as
aliases, so a backend payload can be passed straight to ``model_validate``.

Domain rules
------------
Counts and times must be non-negative and every float must be finite. Those
violations raise ``pydantic.ValidationError`` before any scoring happens.

Percentages and ratings above their nominal maximum (compliance of 103%, a
satisfaction of 5.2) are NOT rejected: upstream systems occasionally report
them, and the normalizer clamps each dimension into [0, 100] instead.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HealthMetrics(BaseModel):
    """Raw operational telemetry for one society at one point in time.

    Attributes:
        total_residents: Registered residents in the society.
        active_residents: Residents active on the platform during the period.
        open_issues: Reported issues not yet resolved.
        resolved_issues: Issues resolved during the period.
        payment_compliance_rate: Share of dues paid on time (0–100).
        resident_satisfaction_score: Mean survey rating (0–5).
        community_participation: Share of residents taking part in community
            activity (0–100).
        notifications_sent: Notices and announcements sent during the period.
        notifications_delivered: Of those, how many reached a device.
        notifications_read: Of those, how many were opened.
        maintenance_response_time: Mean hours from maintenance request to first
            response, or ``None`` when no requests were raised.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    total_residents: int = Field(ge=0)
    active_residents: int = Field(ge=0)
    open_issues: int = Field(ge=0)
    resolved_issues: int = Field(ge=0)
    payment_compliance_rate: float = Field(ge=0.0)
    resident_satisfaction_score: float = Field(ge=0.0)
    community_participation: float = Field(ge=0.0)

    notifications_sent: int = Field(default=0, ge=0)
    notifications_delivered: int = Field(default=0, ge=0)
    notifications_read: int = Field(default=0, ge=0)
    maintenance_response_time: Optional[float] = Field(default=None, ge=0.0)


def sample_health_metrics() -> HealthMetrics:
    """Return a representative snapshot of a well-run 150-resident society.

    Used by the ``society-health sample`` command and by demo screens that
    have no backend data yet.
    """
    return HealthMetrics(
        total_residents=150,
        active_residents=120,
        open_issues=3,
        resolved_issues=64,
        payment_compliance_rate=92.0,
        resident_satisfaction_score=4.1,
        community_participation=65.0,
        notifications_sent=420,
        notifications_delivered=405,
        notifications_read=298,
        maintenance_response_time=18.0,
    )
