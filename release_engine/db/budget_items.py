"""Budget item database operations."""

from typing import Any

from release_engine.core.config import get_settings
from release_engine.core.logging import get_logger
from release_engine.db.supabase_client import get_supabase

logger = get_logger(__name__)


def list_budget_items(project_id: str) -> list[dict[str, Any]]:
    """
    List budget items for a project.

    Args:
        project_id: Project identifier

    Returns:
        List of budget item rows with category, amount and approval_status
    """
    supabase = get_supabase()
    settings = get_settings()

    try:
        response = (
            supabase.table(settings.BUDGET_ITEMS_TABLE)
            .select("category, amount, approval_status")
            .eq("project_id", project_id)
            .execute()
        )

        return response.data or []

    except Exception as e:
        logger.error(f"Failed to list budget items for project {project_id}: {e}")
        raise RuntimeError(f"Supabase error reading budget_items: {str(e)}") from e
