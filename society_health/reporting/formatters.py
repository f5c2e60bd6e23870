"""
ASCII terminal formatters and display helpers for health results.

All formatters accept ``HealthResult`` / ``SocietyScore`` objects and return
plain multi-line strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Grade labels
------------
``grade_label()`` gives the five-step wording used on manager dashboards::

    >= 90  Excellent
    >= 75  Good
    >= 60  Fair
    >= 40  Poor
    <  40  Critical

The grade is a display aid only; the status band from the classifier is the
authoritative triage signal.
"""

from __future__ import annotations

from society_health.models.result import HealthResult
from society_health.scoring.batch import SocietyScore, status_counts
from society_health.taxonomy.dimension_taxonomy import Dimension, HealthStatus

_GRADES: tuple[tuple[float, str], ...] = (
    (90.0, "Excellent"),
    (75.0, "Good"),
    (60.0, "Fair"),
    (40.0, "Poor"),
)

STATUS_COLORS: dict[HealthStatus, str] = {
    HealthStatus.HEALTHY:          "#059669",  # green
    HealthStatus.ATTENTION_NEEDED: "#d97706",  # amber
    HealthStatus.CRITICAL:         "#dc2626",  # red
}

_STATUS_TAGS: dict[HealthStatus, str] = {
    HealthStatus.HEALTHY:          "[HEALTHY]",
    HealthStatus.ATTENTION_NEEDED: "[ATTENTION NEEDED]",
    HealthStatus.CRITICAL:         "[CRITICAL]",
}

_DIMENSION_LABELS: dict[Dimension, str] = {
    Dimension.ENGAGEMENT:       "Engagement",
    Dimension.ISSUE_MANAGEMENT: "Issue management",
    Dimension.FINANCIAL:        "Financial",
    Dimension.COMMUNICATION:    "Communication",
    Dimension.MAINTENANCE:      "Maintenance",
    Dimension.SATISFACTION:     "Satisfaction",
}

_BAR_WIDTH = 20


def grade_label(score: float) -> str:
    """Dashboard wording for a 0–100 score."""
    for floor, label in _GRADES:
        if score >= floor:
            return label
    return "Critical"


def status_color(status: HealthStatus) -> str:
    """Hex colour used to render a status badge."""
    return STATUS_COLORS[status]


def dimension_label(dim: Dimension) -> str:
    return _DIMENSION_LABELS[dim]


# ── Single society ────────────────────────────────────────────────────────────


def format_health_report(result: HealthResult, society_id: str = "") -> str:
    """Format one result as an ASCII report.

    Example::

        === Society Health: green-acres ===
          Overall: 86 / 100  (Good)  [HEALTHY]
          Trend:   stable (+0.0% over last_30_days)

          Dimension           Score
          ------------------------------------------
          Engagement           82.8  ################....
          ...

          Recommendations:
            (none — every dimension at or above threshold)
    """
    title = f"=== Society Health: {society_id} ===" if society_id else "=== Society Health ==="
    trend = result.trend

    lines: list[str] = ["", title]
    lines.append(
        f"  Overall: {result.overall} / 100  ({grade_label(result.overall)})  "
        f"{_STATUS_TAGS[result.status]}"
    )
    lines.append(
        f"  Trend:   {trend.direction.value} "
        f"({trend.change_percentage:+.1f}% over {trend.period})"
    )
    lines.append("")

    header = f"  {'Dimension':<18}  {'Score':>6}"
    lines.append(header)
    lines.append("  " + "-" * (len(header) + _BAR_WIDTH))
    for dim in Dimension:
        score = result.breakdown[dim]
        lines.append(f"  {dimension_label(dim):<18}  {score:>6.1f}  {_bar(score)}")

    lines.append("")
    lines.append("  Recommendations:")
    if not result.recommendations:
        lines.append("    (none — every dimension at or above threshold)")
    for rank, rec in enumerate(result.recommendations, start=1):
        lines.append(f"    {rank}. {rec}")

    return "\n".join(lines)


# ── Batch ─────────────────────────────────────────────────────────────────────


def format_batch_table(scores: list[SocietyScore]) -> str:
    """Format many societies as one table plus a status summary line.

    Rows keep the order given (callers typically pass ``rank_by_urgency``).
    """
    lines: list[str] = ["", "=== Society Health Summary ==="]

    if not scores:
        lines.append("  (no societies scored)")
        return "\n".join(lines)

    id_width = max(10, min(30, max(len(s.society_id) for s in scores)))
    header = (
        f"  {'Society':<{id_width}}  {'Overall':>7}  {'Status':<16}  "
        f"{'Trend':<9}  {'Weakest':<16}  {'Recs':>4}"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))

    for s in scores:
        r = s.result
        lines.append(
            f"  {s.society_id[:id_width]:<{id_width}}  {r.overall:>7}  "
            f"{r.status.value:<16}  {r.trend.direction.value:<9}  "
            f"{r.weakest_dimension.value:<16}  {len(r.recommendations):>4}"
        )

    counts = status_counts(scores)
    lines.append("")
    lines.append(
        "  "
        + "  ".join(f"{status.value}: {counts[status]}" for status in HealthStatus)
    )
    return "\n".join(lines)


def _bar(score: float) -> str:
    filled = int(round(score / 100.0 * _BAR_WIDTH))
    return "#" * filled + "." * (_BAR_WIDTH - filled)
