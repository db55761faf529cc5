"""Action items requiring attention on a release project."""

from datetime import date

from release_engine.core.release.budget import analyze_budget
from release_engine.core.release.quota import evaluate_quota
from release_engine.core.release.types import (
    ACTION_TYPE_ORDER,
    SEVERITY_ORDER,
    ActionItem,
    ActionItems,
    BudgetStatus,
)
from release_engine.core.schemas_release import ReleaseSnapshot


def _quota_severity(days_until_due: int) -> str:
    if days_until_due <= 3:
        return "high"
    if days_until_due <= 7:
        return "medium"
    return "low"


def collect_action_items(snapshot: ReleaseSnapshot, today: date) -> ActionItems:
    """
    Collect prioritized action items for a project.

    Args:
        snapshot: Materialized project records
        today: Reference date for due/overdue calculations

    Returns:
        ActionItems sorted by severity, then by action type
    """
    actions: list[ActionItem] = []
    incomplete = [m for m in snapshot.milestones if not m.is_complete]

    # Content quotas on incomplete milestones
    for milestone in incomplete:
        requirements = snapshot.requirements.get(milestone.id, [])
        if not requirements:
            continue

        quota = evaluate_quota(requirements, snapshot.content_counts.get(milestone.id, {}))
        if quota.quota_met:
            continue

        days_until_due = (milestone.due_date - today).days
        still_needed = ", ".join(
            f"{r.content_type.replace('_', ' ')}: {r.missing} more"
            for r in quota.requirements
            if not r.met
        )
        actions.append(
            ActionItem(
                id=f"quota-{milestone.id}",
                type="content_quota",
                severity=_quota_severity(days_until_due),
                title=f"Content Quota Not Met: {milestone.name}",
                description=f"Still needed: {still_needed}",
                dismissible=True,
                metadata={
                    "milestone_id": milestone.id,
                    "days_until_due": days_until_due,
                    "requirements": [r.model_dump() for r in quota.requirements],
                },
            )
        )

    # Critical budget overspend
    summary = analyze_budget(
        snapshot.project.total_budget,
        snapshot.spend_by_category,
        snapshot.item_count_by_category,
    )
    critical = [
        (category, breakdown)
        for category, breakdown in summary.by_category.items()
        if breakdown.status == BudgetStatus.CRITICAL
    ]
    if critical:
        messages = [
            f"{category.value} at {breakdown.percent_of_recommended:.0f}% of recommended allocation"
            for category, breakdown in critical
        ]
        actions.append(
            ActionItem(
                id="budget-critical",
                type="budget_warning",
                severity="high",
                title=(
                    f"Budget overspend in {len(critical)} "
                    f"categor{'y' if len(critical) == 1 else 'ies'}"
                ),
                description=messages[0],
                dismissible=True,
                metadata={
                    "alerts": [
                        {
                            "category": category.value,
                            "message": message,
                            "spent": float(breakdown.spent),
                            "recommended": float(breakdown.recommended_amount),
                        }
                        for (category, breakdown), message in zip(critical, messages)
                    ]
                },
            )
        )

    # Overdue milestones, oldest first
    overdue = sorted((m for m in incomplete if m.due_date < today), key=lambda m: m.due_date)
    for milestone in overdue:
        days_overdue = (today - milestone.due_date).days
        actions.append(
            ActionItem(
                id=f"overdue-{milestone.id}",
                type="milestone_overdue",
                severity="high" if milestone.blocks_release else "medium",
                title=f"{milestone.name} is overdue",
                description=(
                    f"Due date was {milestone.due_date.isoformat()} ({days_overdue} days ago)"
                ),
                dismissible=False,
                metadata={
                    "milestone_id": milestone.id,
                    "blocks_release": milestone.blocks_release,
                    "days_overdue": days_overdue,
                },
            )
        )

    # Proof of completion on blocking milestones
    for milestone in incomplete:
        if milestone.blocks_release and milestone.proof_required and not milestone.proof_file:
            actions.append(
                ActionItem(
                    id=f"proof-{milestone.id}",
                    type="proof_required",
                    severity="high",
                    title=f"Proof required: {milestone.name}",
                    description="Upload proof of completion (screenshot, receipt, etc.)",
                    dismissible=False,
                    metadata={"milestone_id": milestone.id},
                )
            )

    # sorted() is stable, so ties keep collection order
    actions = sorted(
        actions,
        key=lambda a: (SEVERITY_ORDER[a.severity], ACTION_TYPE_ORDER[a.type]),
    )

    return ActionItems(actions=actions, count=len(actions))
