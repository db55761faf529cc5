"""Pydantic schemas for persisted release-project records."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class ReleaseType(str, Enum):
    """Kind of release a project ships."""

    SINGLE = "single"
    EP = "EP"
    ALBUM = "album"


class MilestoneStatus(str, Enum):
    """Milestone workflow status (set by the completion action, read here)."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"
    OVERDUE = "overdue"


class BudgetCategory(str, Enum):
    """Closed set of budget spending categories."""

    PRODUCTION = "production"
    MARKETING = "marketing"
    CONTENT_CREATION = "content_creation"
    DISTRIBUTION = "distribution"
    ADMIN = "admin"
    CONTINGENCY = "contingency"


class ApprovalStatus(str, Enum):
    """Approval state of a budget item."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


def _to_date(value: Any) -> Any:
    """Accept ISO datetime strings and datetimes where a calendar date is stored."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10 and value[10] in ("T", " "):
        return value[:10]
    return value


class Project(BaseModel):
    """A music release project."""

    id: str = Field(..., description="Project identifier")
    total_budget: Decimal = Field(..., gt=0, description="Total budget for the release")
    release_date: date = Field(..., description="Scheduled release date")
    release_type: ReleaseType = Field(..., description="single, EP or album")
    artist_name: str | None = Field(None, description="Artist name")
    release_title: str | None = Field(None, description="Release title")

    @field_validator("release_date", mode="before")
    @classmethod
    def coerce_release_date(cls, value: Any) -> Any:
        return _to_date(value)


class Milestone(BaseModel):
    """A milestone in a project's release plan."""

    id: str = Field(..., description="Milestone identifier")
    project_id: Optional[str] = Field(None, description="Owning project")
    name: str = Field(..., min_length=1, description="Milestone name")
    due_date: date = Field(..., description="Scheduled due date")
    status: MilestoneStatus = Field(default=MilestoneStatus.PENDING)
    blocks_release: bool = Field(default=False, description="Whether release waits on it")
    proof_required: bool = Field(default=False, description="Whether proof must be attached")
    proof_file: Optional[str] = Field(None, description="Storage key of proof of completion")
    description: Optional[str] = Field(None, description="Milestone description")

    @field_validator("due_date", mode="before")
    @classmethod
    def coerce_due_date(cls, value: Any) -> Any:
        return _to_date(value)

    @property
    def is_complete(self) -> bool:
        return self.status == MilestoneStatus.COMPLETE


class ContentRequirement(BaseModel):
    """Minimum count of one content type required for a milestone."""

    milestone_id: str
    content_type: str = Field(..., min_length=1)
    minimum_count: int = Field(..., ge=0)


class ContentItem(BaseModel):
    """One captured content asset."""

    project_id: str
    milestone_id: Optional[str] = None
    content_type: str
    created_at: datetime


class BudgetItem(BaseModel):
    """One spend line on a project's budget."""

    project_id: str
    category: BudgetCategory
    amount: Decimal = Field(..., ge=0)
    approval_status: ApprovalStatus = ApprovalStatus.PENDING


class TeaserPost(BaseModel):
    """A promotional social post referencing the upcoming release."""

    project_id: str
    platform: str
    posted_at: datetime


class ReleaseSnapshot(BaseModel):
    """Fully materialized input for one evaluation pass.

    Fetched once by the caller; the engine never reads the store itself.
    """

    project: Project
    milestones: list[Milestone] = Field(default_factory=list)
    requirements: dict[str, list[ContentRequirement]] = Field(
        default_factory=dict, description="Requirement rows keyed by milestone id"
    )
    content_counts: dict[str, dict[str, int]] = Field(
        default_factory=dict, description="Content type counts keyed by milestone id"
    )
    spend_by_category: dict[BudgetCategory, Decimal] = Field(default_factory=dict)
    item_count_by_category: dict[BudgetCategory, int] = Field(default_factory=dict)
    teaser_count: int = Field(default=0, ge=0)
