"""Release readiness & compliance engine.

Decides whether a release project is cleared for release from four rule
subsystems:
- Content quotas per milestone
- Budget category health vs recommended allocations
- Deadline risk vs industry-standard buffers
- Minimum teaser post count

Usage:
    from release_engine.core.release import evaluate_clearance

    verdict = evaluate_clearance(project_id, store)
    print(f"Cleared: {verdict.cleared} ({len(verdict.reasons)} blocking)")
"""

from release_engine.core.release.budget import analyze_budget, generate_budget_alerts
from release_engine.core.release.clearance import compute_clearance
from release_engine.core.release.completion import check_milestone_completion
from release_engine.core.release.deadlines import analyze_deadlines
from release_engine.core.release.evaluate import (
    evaluate_action_items,
    evaluate_budget,
    evaluate_budget_alerts,
    evaluate_clearance,
    evaluate_deadlines,
    evaluate_milestone_completion,
    evaluate_milestone_quota,
    evaluate_snapshot,
    evaluate_teasers,
    load_release_snapshot,
)
from release_engine.core.release.quota import evaluate_quota
from release_engine.core.release.store import ReleaseStore
from release_engine.core.release.teasers import check_teaser_requirement, optimal_posting_window
from release_engine.core.release.types import (
    BudgetAlerts,
    BudgetSummary,
    DeadlineAnalysis,
    InvalidInputError,
    QuotaStatus,
    ReadinessVerdict,
)

__all__ = [
    "evaluate_quota",
    "analyze_budget",
    "generate_budget_alerts",
    "analyze_deadlines",
    "check_teaser_requirement",
    "optimal_posting_window",
    "compute_clearance",
    "check_milestone_completion",
    "load_release_snapshot",
    "evaluate_snapshot",
    "evaluate_clearance",
    "evaluate_budget",
    "evaluate_budget_alerts",
    "evaluate_deadlines",
    "evaluate_teasers",
    "evaluate_action_items",
    "evaluate_milestone_quota",
    "evaluate_milestone_completion",
    "ReleaseStore",
    "InvalidInputError",
    "QuotaStatus",
    "BudgetSummary",
    "BudgetAlerts",
    "DeadlineAnalysis",
    "ReadinessVerdict",
]
