"""Cleared-for-release aggregation.

Only three things gate release:
1. every blocking milestone is complete
2. every blocking milestone meets its content quota
3. the teaser requirement is met

Budget and deadline findings are reported as advisories and never flip the
verdict on their own.
"""

from collections.abc import Mapping, Sequence

from release_engine.core.release.types import (
    AlertSeverity,
    BudgetAlerts,
    BudgetStatus,
    BudgetSummary,
    DeadlineAnalysis,
    MissingRequirements,
    QuotaStatus,
    ReadinessState,
    ReadinessVerdict,
    RiskLevel,
    TeaserRequirement,
)
from release_engine.core.schemas_release import Milestone, Project


def _budget_findings(
    budget_summary: BudgetSummary, budget_alerts: BudgetAlerts | None
) -> list[str]:
    findings: list[str] = []

    for category, breakdown in budget_summary.by_category.items():
        if breakdown.status == BudgetStatus.CRITICAL:
            findings.append(
                f"{category.value} spending at {breakdown.percent_of_recommended:.0f}% "
                "of recommended allocation"
            )

    if budget_summary.total_spent > budget_summary.total_budget:
        findings.append(
            f"Budget overspent: ${budget_summary.total_spent:.2f} / "
            f"${budget_summary.total_budget:.2f}"
        )

    if budget_alerts:
        # Overage alerts repeat the category statuses above
        for alert in budget_alerts.alerts:
            if alert.type == "marketing_underspend" and alert.severity == AlertSeverity.CRITICAL:
                findings.append(alert.message)

    return findings


def _deadline_findings(deadline_analysis: DeadlineAnalysis) -> list[str]:
    return [
        f"{r.milestone_name} is {r.days_difference} days past its recommended deadline"
        for r in deadline_analysis.recommendations
        if r.is_critical and r.risk_level == RiskLevel.CRITICAL
    ]


def compute_clearance(
    project: Project,
    milestones: Sequence[Milestone],
    quota_statuses: Mapping[str, QuotaStatus],
    budget_summary: BudgetSummary,
    deadline_analysis: DeadlineAnalysis,
    teaser_status: TeaserRequirement,
    budget_alerts: BudgetAlerts | None = None,
) -> ReadinessVerdict:
    """
    Decide whether a project is cleared for release.

    Args:
        project: The project being evaluated
        milestones: All project milestones
        quota_statuses: Quota status keyed by milestone id (absent = no requirements)
        budget_summary: Output of analyze_budget
        deadline_analysis: Output of analyze_deadlines
        teaser_status: Output of check_teaser_requirement
        budget_alerts: Output of generate_budget_alerts, if computed

    Returns:
        ReadinessVerdict with gating reasons and grouped advisories
    """
    missing = MissingRequirements()
    reasons: list[str] = []

    for milestone in milestones:
        if not milestone.blocks_release:
            continue

        if not milestone.is_complete:
            reason = f"Milestone '{milestone.name}' incomplete"
            reasons.append(reason)
            missing.milestones.append(reason)

            if milestone.proof_required and not milestone.proof_file:
                missing.files.append(f"Proof of completion for '{milestone.name}'")

        quota = quota_statuses.get(milestone.id)
        if quota is not None and not quota.quota_met:
            reason = f"Content quota not met for milestone '{milestone.name}'"
            reasons.append(reason)
            missing.milestones.append(reason)

    if not teaser_status.met:
        reason = (
            f"Teaser requirement not met: {teaser_status.actual} of "
            f"{teaser_status.required} posts"
        )
        reasons.append(reason)
        missing.milestones.append(reason)

    missing.budget.extend(_budget_findings(budget_summary, budget_alerts))
    advisories = list(missing.budget) + _deadline_findings(deadline_analysis)

    cleared = not reasons

    return ReadinessVerdict(
        project_id=project.id,
        cleared=cleared,
        status=ReadinessState.CLEARED if cleared else ReadinessState.NOT_CLEARED,
        reasons=reasons,
        advisories=advisories,
        missing_requirements=missing,
        deadline_risk=deadline_analysis.overall_risk,
    )
