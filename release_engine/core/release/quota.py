"""Content quota evaluation for a single milestone."""

from collections.abc import Mapping, Sequence

from release_engine.core.release.types import (
    InvalidInputError,
    QuotaRequirementStatus,
    QuotaStatus,
)
from release_engine.core.schemas_release import ContentRequirement


def evaluate_quota(
    requirements: Sequence[ContentRequirement],
    content_counts: Mapping[str, int],
) -> QuotaStatus:
    """
    Compare a milestone's required content counts against captured content.

    Args:
        requirements: Requirement rows for one milestone
        content_counts: Captured content counts keyed by content type

    Returns:
        QuotaStatus with per-type detail

    Raises:
        InvalidInputError: If any count or minimum is negative
    """
    for content_type, count in content_counts.items():
        if count < 0:
            raise InvalidInputError(f"Negative content count for {content_type}: {count}")

    if not requirements:
        return QuotaStatus(
            quota_met=True,
            requirements=[],
            message="No content requirements for this milestone",
        )

    details: list[QuotaRequirementStatus] = []
    for requirement in requirements:
        if requirement.minimum_count < 0:
            raise InvalidInputError(
                f"Negative minimum count for {requirement.content_type}: "
                f"{requirement.minimum_count}"
            )

        required = requirement.minimum_count
        actual = content_counts.get(requirement.content_type, 0)
        details.append(
            QuotaRequirementStatus(
                content_type=requirement.content_type,
                required=required,
                actual=actual,
                missing=max(0, required - actual),
                met=actual >= required,
            )
        )

    quota_met = all(d.met for d in details)

    return QuotaStatus(
        quota_met=quota_met,
        requirements=details,
        message="All content requirements met" if quota_met else "Content quota not met",
    )
