"""Configuration management for the Release Readiness Engine."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # Sandboxed environments may not expose .env; rely on the process environment
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Supabase configuration (required)
    SUPABASE_URL: str = Field(..., description="Supabase project URL")
    SUPABASE_SERVICE_ROLE_KEY: str = Field(..., description="Supabase service role key")

    # Environment
    RELEASE_ENGINE_ENV: str = Field(
        default="dev", description="Environment: dev, staging, prod, test"
    )

    # Table names (the schema is shared with the studio frontend)
    PROJECTS_TABLE: str = Field(default="projects", description="Projects table")
    MILESTONES_TABLE: str = Field(default="milestones", description="Milestones table")
    REQUIREMENTS_TABLE: str = Field(
        default="milestone_content_requirements",
        description="Per-milestone content requirement rows",
    )
    CONTENT_ITEMS_TABLE: str = Field(default="content_items", description="Content items table")
    BUDGET_ITEMS_TABLE: str = Field(default="budget_items", description="Budget items table")
    TEASER_POSTS_TABLE: str = Field(default="teaser_posts", description="Teaser posts table")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If required environment variables are missing
    """
    return Settings()
