"""Projects database operations."""

from typing import Any

from release_engine.core.config import get_settings
from release_engine.core.logging import get_logger
from release_engine.db.supabase_client import get_supabase

logger = get_logger(__name__)


def get_project(project_id: str) -> dict[str, Any] | None:
    """
    Get a project by ID.

    Args:
        project_id: Project identifier

    Returns:
        Project row as dict or None if not found

    Raises:
        RuntimeError: If the database read fails
    """
    supabase = get_supabase()
    settings = get_settings()

    try:
        response = (
            supabase.table(settings.PROJECTS_TABLE)
            .select("id, total_budget, release_date, release_type, artist_name, release_title")
            .eq("id", project_id)
            .execute()
        )

        return response.data[0] if response.data else None

    except Exception as e:
        logger.error(f"Failed to get project {project_id}: {e}")
        raise RuntimeError(f"Supabase error reading projects: {str(e)}") from e
