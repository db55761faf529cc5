"""API endpoints for budget health and alerts."""

from fastapi import APIRouter, Depends, HTTPException

from release_engine.api.dependencies import get_release_store
from release_engine.core.logging import get_logger
from release_engine.core.release import (
    BudgetAlerts,
    BudgetSummary,
    InvalidInputError,
    ReleaseStore,
    evaluate_budget,
    evaluate_budget_alerts,
)

logger = get_logger(__name__)

router = APIRouter()


@router.get("/projects/{project_id}/budget", response_model=BudgetSummary)
async def get_project_budget(
    project_id: str,
    store: ReleaseStore = Depends(get_release_store),  # noqa: B008
) -> BudgetSummary:
    """
    Get budget summary with per-category allocation health.

    Raises:
        HTTPException 404: If project not found
        HTTPException 422: If stored budget data is invalid
        HTTPException 500: If computation fails
    """
    try:
        summary = evaluate_budget(project_id, store)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logger.exception(f"Failed to compute budget for project {project_id}")
        raise HTTPException(status_code=500, detail="Failed to compute budget summary") from e

    if summary is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return summary


@router.get("/projects/{project_id}/budget/alerts", response_model=BudgetAlerts)
async def get_project_budget_alerts(
    project_id: str,
    store: ReleaseStore = Depends(get_release_store),  # noqa: B008
) -> BudgetAlerts:
    """
    Get budget alerts (category overages, marketing underspend near release).

    Raises:
        HTTPException 404: If project not found
        HTTPException 422: If stored budget data is invalid
        HTTPException 500: If computation fails
    """
    try:
        alerts = evaluate_budget_alerts(project_id, store)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logger.exception(f"Failed to compute budget alerts for project {project_id}")
        raise HTTPException(status_code=500, detail="Failed to compute budget alerts") from e

    if alerts is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return alerts
