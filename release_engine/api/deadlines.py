"""API endpoints for smart deadline analysis and teaser compliance."""

from fastapi import APIRouter, Depends, HTTPException

from release_engine.api.dependencies import get_release_store
from release_engine.core.logging import get_logger
from release_engine.core.release import (
    DeadlineAnalysis,
    InvalidInputError,
    ReleaseStore,
    evaluate_deadlines,
    evaluate_teasers,
)
from release_engine.core.release.types import TeaserStatus

logger = get_logger(__name__)

router = APIRouter()


@router.get("/projects/{project_id}/deadlines", response_model=DeadlineAnalysis)
async def get_project_deadlines(
    project_id: str,
    store: ReleaseStore = Depends(get_release_store),  # noqa: B008
) -> DeadlineAnalysis:
    """
    Compare milestone due dates against industry-standard buffers.

    Raises:
        HTTPException 404: If project not found
        HTTPException 422: If stored records are invalid
        HTTPException 500: If analysis fails
    """
    try:
        analysis = evaluate_deadlines(project_id, store)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logger.exception(f"Failed to analyze deadlines for project {project_id}")
        raise HTTPException(status_code=500, detail="Failed to analyze deadlines") from e

    if analysis is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return analysis


@router.get("/projects/{project_id}/teasers/requirement", response_model=TeaserStatus)
async def get_teaser_requirement(
    project_id: str,
    store: ReleaseStore = Depends(get_release_store),  # noqa: B008
) -> TeaserStatus:
    """
    Get teaser post requirement status and the advisory posting window.

    Raises:
        HTTPException 404: If project not found
        HTTPException 500: If check fails
    """
    try:
        status = evaluate_teasers(project_id, store)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logger.exception(f"Failed to check teasers for project {project_id}")
        raise HTTPException(status_code=500, detail="Failed to check teaser requirement") from e

    if status is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return status
