"""API endpoints for cleared-for-release status and action items."""

from fastapi import APIRouter, Depends, HTTPException

from release_engine.api.dependencies import get_release_store
from release_engine.core.logging import get_logger
from release_engine.core.release import (
    InvalidInputError,
    ReadinessVerdict,
    ReleaseStore,
    evaluate_action_items,
    evaluate_clearance,
)
from release_engine.core.release.types import ActionItems

logger = get_logger(__name__)

router = APIRouter()


@router.get("/projects/{project_id}/clearance", response_model=ReadinessVerdict)
async def get_project_clearance(
    project_id: str,
    store: ReleaseStore = Depends(get_release_store),  # noqa: B008
) -> ReadinessVerdict:
    """
    Get the cleared-for-release verdict for a project.

    Always computed fresh from current records (no caching).

    Args:
        project_id: Project identifier

    Returns:
        ReadinessVerdict with blocking reasons and budget/deadline advisories

    Raises:
        HTTPException 404: If project not found
        HTTPException 422: If stored records violate evaluator contracts
        HTTPException 500: If computation fails
    """
    try:
        verdict = evaluate_clearance(project_id, store)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logger.exception(f"Failed to compute clearance for project {project_id}")
        raise HTTPException(status_code=500, detail="Failed to compute release clearance") from e

    if verdict is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return verdict


@router.get("/projects/{project_id}/actions", response_model=ActionItems)
async def get_project_actions(
    project_id: str,
    store: ReleaseStore = Depends(get_release_store),  # noqa: B008
) -> ActionItems:
    """
    Get prioritized action items (quotas, overdue milestones, proof, budget).

    Raises:
        HTTPException 404: If project not found
        HTTPException 500: If collection fails
    """
    try:
        items = evaluate_action_items(project_id, store)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logger.exception(f"Failed to collect actions for project {project_id}")
        raise HTTPException(status_code=500, detail="Failed to collect action items") from e

    if items is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return items
