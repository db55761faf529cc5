"""Smart deadline analysis.

Compares each milestone's due date against a recommended date derived from
industry-standard buffers before release, and rolls the per-milestone risk
into an overall project risk.
"""

from collections.abc import Sequence
from datetime import date, timedelta

from release_engine.core.release.types import (
    CRITICAL_MILESTONES,
    DEFAULT_BUFFER_DAYS,
    MILESTONE_BUFFERS,
    DeadlineAnalysis,
    DeadlineRecommendation,
    RiskLevel,
)
from release_engine.core.schemas_release import Milestone


def get_recommended_buffer(milestone_name: str) -> int:
    """Buffer in days before release for a milestone name (exact match)."""
    return MILESTONE_BUFFERS.get(milestone_name, DEFAULT_BUFFER_DAYS)


def is_critical_milestone(milestone_name: str) -> bool:
    return milestone_name in CRITICAL_MILESTONES


def calculate_recommended_date(milestone_name: str, release_date: date) -> date:
    return release_date - timedelta(days=get_recommended_buffer(milestone_name))


def classify_risk(days_difference: int) -> RiskLevel:
    """Negative difference means the milestone lands before its recommended date."""
    if days_difference <= -7:
        return RiskLevel.SAFE
    if days_difference <= 0:
        return RiskLevel.TIGHT
    if days_difference <= 7:
        return RiskLevel.RISKY
    return RiskLevel.CRITICAL


def _recommendation_reason(days_difference: int, buffer_days: int, is_critical: bool) -> str:
    if days_difference <= -7:
        return f"Excellent! {abs(days_difference)} days of extra buffer time."
    if days_difference <= 0:
        return f"On track with {buffer_days} day industry-standard buffer."
    if days_difference <= 7:
        return (
            f"{days_difference} days late. Consider moving earlier to avoid "
            f"{'critical ' if is_critical else ''}delays."
        )
    if is_critical:
        return (
            f"{days_difference} days past recommended deadline. "
            "This is a critical milestone - immediate action required!"
        )
    return f"{days_difference} days past recommended deadline. Adjust timeline ASAP."


def analyze_milestone_deadline(milestone: Milestone, release_date: date) -> DeadlineRecommendation:
    buffer_days = get_recommended_buffer(milestone.name)
    recommended_date = release_date - timedelta(days=buffer_days)
    days_difference = (milestone.due_date - recommended_date).days
    is_critical = is_critical_milestone(milestone.name) or milestone.blocks_release

    return DeadlineRecommendation(
        milestone_id=milestone.id,
        milestone_name=milestone.name,
        actual_date=milestone.due_date,
        recommended_date=recommended_date,
        days_difference=days_difference,
        buffer_days=buffer_days,
        risk_level=classify_risk(days_difference),
        recommendation_reason=_recommendation_reason(days_difference, buffer_days, is_critical),
        is_critical=is_critical,
    )


def overall_risk(recommendations: Sequence[DeadlineRecommendation]) -> RiskLevel:
    """Roll per-milestone risk into a project-level risk."""
    critical_count = sum(1 for r in recommendations if r.risk_level == RiskLevel.CRITICAL)
    risky_count = sum(1 for r in recommendations if r.risk_level == RiskLevel.RISKY)
    conflict_count = sum(1 for r in recommendations if r.days_difference > 0)

    if critical_count > 0:
        return RiskLevel.CRITICAL
    if risky_count > 2:
        return RiskLevel.RISKY
    if risky_count > 0 or conflict_count > 3:
        return RiskLevel.TIGHT
    return RiskLevel.SAFE


def analyze_deadlines(
    milestones: Sequence[Milestone],
    release_date: date,
    today: date | None = None,
) -> DeadlineAnalysis:
    """
    Analyze every milestone against its recommended deadline.

    Args:
        milestones: Project milestones
        release_date: Project release date
        today: Reference date for total_days_to_release (defaults to today)

    Returns:
        DeadlineAnalysis with per-milestone recommendations and overall risk
    """
    reference = today or date.today()
    recommendations = [analyze_milestone_deadline(m, release_date) for m in milestones]
    conflict_count = sum(1 for r in recommendations if r.days_difference > 0)

    return DeadlineAnalysis(
        release_date=release_date,
        total_days_to_release=(release_date - reference).days,
        recommendations=recommendations,
        overall_risk=overall_risk(recommendations),
        has_conflicts=conflict_count > 0,
        conflict_count=conflict_count,
    )
