"""Over-estimate checks for work items."""

from __future__ import annotations

from typing import Any, Mapping

from devboard.core.models import EstimateSummary, Severity

ORIGINAL_ESTIMATE_FIELD = "Microsoft.VSTS.Scheduling.OriginalEstimate"
COMPLETED_WORK_FIELD = "Microsoft.VSTS.Scheduling.CompletedWork"
REMAINING_WORK_FIELD = "Microsoft.VSTS.Scheduling.RemainingWork"

_SEVERITY_COLORS = {
    Severity.MILD: "charts.yellow",
    Severity.MODERATE: "charts.orange",
    Severity.SEVERE: "charts.red",
}


def _field(fields: Mapping[str, Any], name: str) -> float:
    return fields.get(name) or 0


def is_over_estimate(fields: Mapping[str, Any]) -> bool:
    """True when completed + remaining work exceeds a non-zero original estimate."""
    original = _field(fields, ORIGINAL_ESTIMATE_FIELD)
    if not original:
        return False
    total = _field(fields, COMPLETED_WORK_FIELD) + _field(fields, REMAINING_WORK_FIELD)
    return total > original


def over_estimate_percentage(fields: Mapping[str, Any]) -> float:
    """How far over the estimate the item is, in percent (25 means 25% over)."""
    original = _field(fields, ORIGINAL_ESTIMATE_FIELD)
    if not original:
        return 0.0
    total = _field(fields, COMPLETED_WORK_FIELD) + _field(fields, REMAINING_WORK_FIELD)
    return (total - original) / original * 100


def estimate_summary(fields: Mapping[str, Any]) -> EstimateSummary:
    original = _field(fields, ORIGINAL_ESTIMATE_FIELD)
    completed = _field(fields, COMPLETED_WORK_FIELD)
    remaining = _field(fields, REMAINING_WORK_FIELD)
    total = completed + remaining
    over_by = total - original
    return EstimateSummary(
        original_estimate=original,
        completed_work=completed,
        remaining_work=remaining,
        total_work=total,
        over_by=over_by,
        percentage=over_by / original * 100 if original > 0 else 0.0,
        is_over=original > 0 and total > original,
    )


def severity_level(percentage: float) -> Severity:
    if percentage <= 10:
        return Severity.MILD
    if percentage <= 25:
        return Severity.MODERATE
    return Severity.SEVERE


def severity_color(severity: Severity) -> str:
    return _SEVERITY_COLORS.get(severity, "charts.yellow")
