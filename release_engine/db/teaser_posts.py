"""Teaser post database operations.

The studio UI calls these "Social" posts; the table keeps the teaser name.
"""

from release_engine.core.config import get_settings
from release_engine.core.logging import get_logger
from release_engine.db.supabase_client import get_supabase

logger = get_logger(__name__)


def count_teaser_posts(project_id: str) -> int:
    """
    Count teaser posts for a project.

    Args:
        project_id: Project identifier

    Returns:
        Number of teaser posts (0 if none)
    """
    supabase = get_supabase()
    settings = get_settings()

    try:
        response = (
            supabase.table(settings.TEASER_POSTS_TABLE)
            .select("id", count="exact")
            .eq("project_id", project_id)
            .execute()
        )

        return response.count or 0

    except Exception as e:
        logger.error(f"Failed to count teaser posts for project {project_id}: {e}")
        raise RuntimeError(f"Supabase error reading teaser_posts: {str(e)}") from e
