"""Shared FastAPI dependencies."""

from release_engine.core.release.store import ReleaseStore
from release_engine.db.release_store import SupabaseReleaseStore


def get_release_store() -> ReleaseStore:
    """Persistence collaborator for release evaluations (overridden in tests)."""
    return SupabaseReleaseStore()
