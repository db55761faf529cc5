"""API endpoints for milestone quota, completion gating and templates."""

from fastapi import APIRouter, Depends, HTTPException

from release_engine.api.dependencies import get_release_store
from release_engine.core.logging import get_logger
from release_engine.core.release import (
    InvalidInputError,
    QuotaStatus,
    ReleaseStore,
    evaluate_milestone_completion,
    evaluate_milestone_quota,
)
from release_engine.core.release.templates import MILESTONE_TEMPLATES
from release_engine.core.release.types import CompletionCheck

logger = get_logger(__name__)

router = APIRouter()


@router.get("/milestones/{milestone_id}/quota", response_model=QuotaStatus)
async def get_milestone_quota(
    milestone_id: str,
    store: ReleaseStore = Depends(get_release_store),  # noqa: B008
) -> QuotaStatus:
    """
    Get content quota status for a milestone.

    Raises:
        HTTPException 404: If milestone not found
        HTTPException 500: If evaluation fails
    """
    try:
        quota = evaluate_milestone_quota(milestone_id, store)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logger.exception(f"Failed to evaluate quota for milestone {milestone_id}")
        raise HTTPException(status_code=500, detail="Failed to evaluate content quota") from e

    if quota is None:
        raise HTTPException(status_code=404, detail="Milestone not found")
    return quota


@router.get("/milestones/{milestone_id}/completion-check", response_model=CompletionCheck)
async def get_milestone_completion_check(
    milestone_id: str,
    store: ReleaseStore = Depends(get_release_store),  # noqa: B008
) -> CompletionCheck:
    """
    Check whether a milestone may be marked complete.

    The completion action itself belongs to the calling layer; this endpoint
    only reports whether it should be blocked and why.

    Raises:
        HTTPException 404: If milestone not found
        HTTPException 500: If evaluation fails
    """
    try:
        check = evaluate_milestone_completion(milestone_id, store)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logger.exception(f"Failed to check completion for milestone {milestone_id}")
        raise HTTPException(status_code=500, detail="Failed to check milestone completion") from e

    if check is None:
        raise HTTPException(status_code=404, detail="Milestone not found")
    return check


@router.get("/milestone-templates")
async def list_milestone_templates() -> list[dict]:
    """List the default milestone plan used for new projects."""
    return [
        {
            "name": t.name,
            "description": t.description,
            "days_before_release": t.days_before_release,
            "blocks_release": t.blocks_release,
            "proof_required": t.proof_required,
            "content_requirements": [
                {"type": content_type, "count": count}
                for content_type, count in t.content_requirements
            ],
        }
        for t in MILESTONE_TEMPLATES
    ]
