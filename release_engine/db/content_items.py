"""Content item database operations."""

from collections import Counter

from release_engine.core.config import get_settings
from release_engine.core.logging import get_logger
from release_engine.db.supabase_client import get_supabase

logger = get_logger(__name__)


def count_content_by_type(milestone_id: str) -> dict[str, int]:
    """
    Count content items tagged to a milestone, per content type.

    Args:
        milestone_id: Milestone identifier

    Returns:
        Dict of content_type -> count (empty if nothing captured)
    """
    supabase = get_supabase()
    settings = get_settings()

    try:
        response = (
            supabase.table(settings.CONTENT_ITEMS_TABLE)
            .select("content_type")
            .eq("milestone_id", milestone_id)
            .execute()
        )

        return dict(Counter(row["content_type"] for row in response.data or []))

    except Exception as e:
        logger.error(f"Failed to count content for milestone {milestone_id}: {e}")
        raise RuntimeError(f"Supabase error reading content_items: {str(e)}") from e
