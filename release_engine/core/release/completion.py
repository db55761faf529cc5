"""Milestone completion gate.

Reports whether a milestone may be marked complete. The status itself is
changed by the caller's completion action, never here.
"""

from release_engine.core.release.teasers import check_teaser_requirement
from release_engine.core.release.types import (
    TEASER_MILESTONE_NAME,
    CompletionCheck,
    QuotaStatus,
)
from release_engine.core.schemas_release import Milestone


def check_milestone_completion(
    milestone: Milestone,
    quota_status: QuotaStatus,
    teaser_count: int,
) -> CompletionCheck:
    """
    Check whether a milestone can be completed.

    Args:
        milestone: Milestone to complete
        quota_status: Its content quota status
        teaser_count: Number of teaser posts on the project

    Returns:
        CompletionCheck; error_code names the first failing rule
    """
    if milestone.is_complete:
        return CompletionCheck(
            milestone_id=milestone.id,
            allowed=False,
            error_code="ALREADY_COMPLETE",
            message="Milestone is already complete",
            quota_status=quota_status,
        )

    if not quota_status.quota_met:
        return CompletionCheck(
            milestone_id=milestone.id,
            allowed=False,
            error_code="QUOTA_NOT_MET",
            message="Cannot complete milestone: content requirements not met",
            quota_status=quota_status,
        )

    if milestone.name == TEASER_MILESTONE_NAME:
        teaser = check_teaser_requirement(teaser_count)
        if not teaser.met:
            return CompletionCheck(
                milestone_id=milestone.id,
                allowed=False,
                error_code="TEASER_REQUIREMENT_NOT_MET",
                message=(
                    f"Cannot complete milestone: minimum {teaser.required} "
                    "teaser posts required"
                ),
                quota_status=quota_status,
                teaser_status=teaser,
            )
        return CompletionCheck(
            milestone_id=milestone.id,
            allowed=True,
            message="Milestone can be completed",
            quota_status=quota_status,
            teaser_status=teaser,
        )

    return CompletionCheck(
        milestone_id=milestone.id,
        allowed=True,
        message="Milestone can be completed",
        quota_status=quota_status,
    )
