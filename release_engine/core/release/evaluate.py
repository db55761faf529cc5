"""Release evaluation service.

This module orchestrates an evaluation by:
1. Fetching one snapshot of the project's records through a ReleaseStore
2. Running the pure evaluators over that snapshot
3. Returning None when the project (or milestone) does not exist

It is the only part of the engine that talks to persistence.
"""

import logging
from datetime import date

from release_engine.core.logging import get_logger, log_with_context
from release_engine.core.release.actions import collect_action_items
from release_engine.core.release.budget import (
    analyze_budget,
    days_until_release,
    generate_budget_alerts,
)
from release_engine.core.release.clearance import compute_clearance
from release_engine.core.release.completion import check_milestone_completion
from release_engine.core.release.deadlines import analyze_deadlines
from release_engine.core.release.quota import evaluate_quota
from release_engine.core.release.store import ReleaseStore
from release_engine.core.release.teasers import check_teaser_requirement, teaser_status
from release_engine.core.release.types import (
    ActionItems,
    BudgetAlerts,
    BudgetSummary,
    CompletionCheck,
    DeadlineAnalysis,
    QuotaStatus,
    ReadinessVerdict,
    TeaserStatus,
)
from release_engine.core.schemas_release import ReleaseSnapshot

logger = get_logger(__name__)


def load_release_snapshot(project_id: str, store: ReleaseStore) -> ReleaseSnapshot | None:
    """
    Fetch everything one evaluation needs, once.

    Args:
        project_id: Project identifier
        store: Persistence collaborator

    Returns:
        ReleaseSnapshot, or None if the project does not exist
    """
    project = store.get_project(project_id)
    if project is None:
        logger.info(f"Project {project_id} not found", extra={"project_id": project_id})
        return None

    milestones = store.list_milestones(project_id)

    snapshot = ReleaseSnapshot(
        project=project,
        milestones=milestones,
        requirements={m.id: store.list_content_requirements(m.id) for m in milestones},
        content_counts={m.id: store.count_content_by_type(m.id) for m in milestones},
        spend_by_category=store.sum_budget_by_category(project_id),
        item_count_by_category=store.count_budget_by_category(project_id),
        teaser_count=store.count_teasers(project_id),
    )

    logger.debug(
        f"Loaded snapshot for project {project_id}: "
        f"{len(milestones)} milestones, {snapshot.teaser_count} teasers",
        extra={"project_id": project_id},
    )
    return snapshot


def compute_quota_statuses(snapshot: ReleaseSnapshot) -> dict[str, QuotaStatus]:
    return {
        m.id: evaluate_quota(
            snapshot.requirements.get(m.id, []),
            snapshot.content_counts.get(m.id, {}),
        )
        for m in snapshot.milestones
    }


def evaluate_snapshot(snapshot: ReleaseSnapshot, today: date | None = None) -> ReadinessVerdict:
    """Run every evaluator over a snapshot and fold the results into a verdict."""
    reference = today or date.today()
    project = snapshot.project

    budget_summary = analyze_budget(
        project.total_budget, snapshot.spend_by_category, snapshot.item_count_by_category
    )
    budget_alerts = generate_budget_alerts(
        project.total_budget,
        snapshot.spend_by_category,
        days_until_release(project.release_date, reference),
    )

    return compute_clearance(
        project=project,
        milestones=snapshot.milestones,
        quota_statuses=compute_quota_statuses(snapshot),
        budget_summary=budget_summary,
        deadline_analysis=analyze_deadlines(snapshot.milestones, project.release_date, reference),
        teaser_status=check_teaser_requirement(snapshot.teaser_count),
        budget_alerts=budget_alerts,
    )


# =============================================================================
# Project-scoped entry points (None = project not found)
# =============================================================================


def evaluate_clearance(
    project_id: str, store: ReleaseStore, today: date | None = None
) -> ReadinessVerdict | None:
    snapshot = load_release_snapshot(project_id, store)
    if snapshot is None:
        return None

    verdict = evaluate_snapshot(snapshot, today)

    log_with_context(
        logger,
        logging.INFO,
        f"Clearance for project {project_id}: {verdict.status.value}",
        project_id=project_id,
        cleared=verdict.cleared,
        reasons=len(verdict.reasons),
        advisories=len(verdict.advisories),
    )
    return verdict


def evaluate_budget(project_id: str, store: ReleaseStore) -> BudgetSummary | None:
    project = store.get_project(project_id)
    if project is None:
        return None

    return analyze_budget(
        project.total_budget,
        store.sum_budget_by_category(project_id),
        store.count_budget_by_category(project_id),
    )


def evaluate_budget_alerts(
    project_id: str, store: ReleaseStore, today: date | None = None
) -> BudgetAlerts | None:
    project = store.get_project(project_id)
    if project is None:
        return None

    reference = today or date.today()
    alerts = generate_budget_alerts(
        project.total_budget,
        store.sum_budget_by_category(project_id),
        days_until_release(project.release_date, reference),
    )

    if alerts.has_critical:
        logger.warning(
            f"Critical budget alerts for project {project_id}",
            extra={"project_id": project_id, "extra_data": {"alert_count": alerts.alert_count}},
        )
    return alerts


def evaluate_deadlines(
    project_id: str, store: ReleaseStore, today: date | None = None
) -> DeadlineAnalysis | None:
    project = store.get_project(project_id)
    if project is None:
        return None

    return analyze_deadlines(store.list_milestones(project_id), project.release_date, today)


def evaluate_teasers(project_id: str, store: ReleaseStore) -> TeaserStatus | None:
    project = store.get_project(project_id)
    if project is None:
        return None

    return teaser_status(store.count_teasers(project_id), project.release_date)


def evaluate_action_items(
    project_id: str, store: ReleaseStore, today: date | None = None
) -> ActionItems | None:
    snapshot = load_release_snapshot(project_id, store)
    if snapshot is None:
        return None

    return collect_action_items(snapshot, today or date.today())


# =============================================================================
# Milestone-scoped entry points (None = milestone not found)
# =============================================================================


def evaluate_milestone_quota(milestone_id: str, store: ReleaseStore) -> QuotaStatus | None:
    milestone = store.get_milestone(milestone_id)
    if milestone is None:
        return None

    return evaluate_quota(
        store.list_content_requirements(milestone_id),
        store.count_content_by_type(milestone_id),
    )


def evaluate_milestone_completion(
    milestone_id: str, store: ReleaseStore
) -> CompletionCheck | None:
    milestone = store.get_milestone(milestone_id)
    if milestone is None:
        return None

    quota = evaluate_quota(
        store.list_content_requirements(milestone_id),
        store.count_content_by_type(milestone_id),
    )
    teaser_count = store.count_teasers(milestone.project_id) if milestone.project_id else 0

    check = check_milestone_completion(milestone, quota, teaser_count)
    if not check.allowed:
        logger.info(
            f"Completion blocked for milestone {milestone_id}: {check.error_code}",
            extra={"project_id": milestone.project_id},
        )
    return check
