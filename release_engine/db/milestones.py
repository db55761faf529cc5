"""Milestones and content requirement database operations."""

from typing import Any

from release_engine.core.config import get_settings
from release_engine.core.logging import get_logger
from release_engine.db.supabase_client import get_supabase

logger = get_logger(__name__)


def get_milestone(milestone_id: str) -> dict[str, Any] | None:
    """
    Get a milestone by ID.

    Args:
        milestone_id: Milestone identifier

    Returns:
        Milestone row as dict or None if not found
    """
    supabase = get_supabase()
    settings = get_settings()

    try:
        response = (
            supabase.table(settings.MILESTONES_TABLE)
            .select("*")
            .eq("id", milestone_id)
            .execute()
        )

        return response.data[0] if response.data else None

    except Exception as e:
        logger.error(f"Failed to get milestone {milestone_id}: {e}")
        raise RuntimeError(f"Supabase error reading milestones: {str(e)}") from e


def list_project_milestones(project_id: str) -> list[dict[str, Any]]:
    """
    List a project's milestones ordered by due date.

    Args:
        project_id: Project identifier

    Returns:
        List of milestone rows (empty if none)
    """
    supabase = get_supabase()
    settings = get_settings()

    try:
        response = (
            supabase.table(settings.MILESTONES_TABLE)
            .select("*")
            .eq("project_id", project_id)
            .order("due_date", desc=False)
            .execute()
        )

        return response.data or []

    except Exception as e:
        logger.error(f"Failed to list milestones for project {project_id}: {e}")
        raise RuntimeError(f"Supabase error reading milestones: {str(e)}") from e


def list_content_requirements(milestone_id: str) -> list[dict[str, Any]]:
    """List content requirement rows for a milestone."""
    supabase = get_supabase()
    settings = get_settings()

    try:
        response = (
            supabase.table(settings.REQUIREMENTS_TABLE)
            .select("milestone_id, content_type, minimum_count")
            .eq("milestone_id", milestone_id)
            .execute()
        )

        return response.data or []

    except Exception as e:
        logger.error(f"Failed to list content requirements for milestone {milestone_id}: {e}")
        raise RuntimeError(
            f"Supabase error reading milestone_content_requirements: {str(e)}"
        ) from e
