"""Pydantic models and fixed rule tables for release readiness evaluation."""

from datetime import date
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, PlainSerializer

from release_engine.core.schemas_release import BudgetCategory


class InvalidInputError(ValueError):
    """Input violates an evaluator contract (negative counts, non-positive budget)."""


# Exact arithmetic internally, plain numbers on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# =============================================================================
# Rule tables
# =============================================================================

# Fraction of total budget recommended per category - must sum to 1.00
RECOMMENDED_ALLOCATIONS = MappingProxyType(
    {
        BudgetCategory.PRODUCTION: Decimal("0.35"),
        BudgetCategory.MARKETING: Decimal("0.30"),
        BudgetCategory.CONTENT_CREATION: Decimal("0.10"),
        BudgetCategory.DISTRIBUTION: Decimal("0.10"),
        BudgetCategory.ADMIN: Decimal("0.10"),
        BudgetCategory.CONTINGENCY: Decimal("0.05"),
    }
)

# Percent-of-recommended thresholds
CRITICAL_OVERAGE_PERCENT = Decimal("130")
WARNING_OVERAGE_PERCENT = Decimal("115")
ON_TRACK_PERCENT = Decimal("90")

# Marketing must reach this share of total budget once release is this close
MARKETING_UNDERSPEND_WINDOW_DAYS = 30
MARKETING_MINIMUM_SHARE = Decimal("0.25")

# Days before release each milestone should be done, by exact milestone name
MILESTONE_BUFFERS = MappingProxyType(
    {
        # Production
        "Recording Complete": 90,
        "Mixing Complete": 60,
        "Mastering Complete": 45,
        # Administrative
        "Metadata Tagging Complete": 35,
        "Artwork Finalized": 35,
        # Distribution
        "Upload to Distributor": 30,
        "Spotify Playlist Submission": 28,
        # Marketing
        "Teaser Content Released": 21,
        "Marketing Campaign Launch": 14,
        "Pre-Save Campaign Active": 14,
        # Release
        "Release Day": 0,
    }
)
DEFAULT_BUFFER_DAYS = 30

CRITICAL_MILESTONES = frozenset(
    {
        "Upload to Distributor",
        "Spotify Playlist Submission",
        "Release Day",
        "Metadata Tagging Complete",
    }
)

TEASER_MINIMUM_POSTS = 2
TEASER_WINDOW_START_DAYS = 28
TEASER_WINDOW_END_DAYS = 21
TEASER_MILESTONE_NAME = "Teaser Content Released"


# =============================================================================
# Quota
# =============================================================================


class QuotaRequirementStatus(BaseModel):
    """Required vs captured count for one content type."""

    content_type: str
    required: int = Field(..., ge=0)
    actual: int = Field(..., ge=0)
    missing: int = Field(..., ge=0)
    met: bool


class QuotaStatus(BaseModel):
    """Content quota status for one milestone."""

    quota_met: bool
    requirements: list[QuotaRequirementStatus] = Field(default_factory=list)
    message: str


# =============================================================================
# Budget
# =============================================================================


class BudgetStatus(str, Enum):
    UNDER = "under"
    ON_TRACK = "on-track"
    WARNING = "warning"
    CRITICAL = "critical"


class AlertSeverity(str, Enum):
    WARNING = "warning"
    CRITICAL = "critical"


class CategoryBreakdown(BaseModel):
    """Spend for one category against its recommended allocation."""

    spent: Money = Field(default=Decimal("0"))
    count: int = Field(default=0, ge=0, description="Number of budget items")
    percentage: Money = Field(..., description="Spend as a percent of total budget")
    recommended_amount: Money
    recommended_percentage: Money
    percent_of_recommended: Money
    status: BudgetStatus


class BudgetSummary(BaseModel):
    """Budget health across every known category."""

    total_budget: Money
    total_spent: Money
    remaining: Money
    percentage_spent: Money
    by_category: dict[BudgetCategory, CategoryBreakdown]
    recommended_allocations: dict[BudgetCategory, Money]


class BudgetAlert(BaseModel):
    """A single budget alert."""

    type: Literal["budget_overage", "marketing_underspend"]
    severity: AlertSeverity
    category: BudgetCategory
    message: str
    details: dict[str, Union[Money, int]] = Field(default_factory=dict)


class BudgetAlerts(BaseModel):
    alerts: list[BudgetAlert] = Field(default_factory=list)
    alert_count: int = 0
    has_critical: bool = False
    has_warnings: bool = False


# =============================================================================
# Deadlines
# =============================================================================


class RiskLevel(str, Enum):
    SAFE = "safe"
    TIGHT = "tight"
    RISKY = "risky"
    CRITICAL = "critical"


class DeadlineRecommendation(BaseModel):
    """Actual vs recommended date for one milestone."""

    milestone_id: str
    milestone_name: str
    actual_date: date
    recommended_date: date
    days_difference: int = Field(
        ..., description="Positive: scheduled later than recommended"
    )
    buffer_days: int
    risk_level: RiskLevel
    recommendation_reason: str
    is_critical: bool


class DeadlineAnalysis(BaseModel):
    release_date: date
    total_days_to_release: int
    recommendations: list[DeadlineRecommendation] = Field(default_factory=list)
    overall_risk: RiskLevel
    has_conflicts: bool
    conflict_count: int


# =============================================================================
# Teasers
# =============================================================================


class TeaserRequirement(BaseModel):
    required: int = TEASER_MINIMUM_POSTS
    actual: int = Field(..., ge=0)
    met: bool
    missing: int = Field(..., ge=0)


class PostingWindow(BaseModel):
    """Advisory window for teaser posting; never gates release."""

    start: date
    end: date


class TeaserStatus(BaseModel):
    count: int = Field(..., ge=0)
    requirement: TeaserRequirement
    optimal_posting_window: PostingWindow


# =============================================================================
# Readiness verdict
# =============================================================================


class ReadinessState(str, Enum):
    CLEARED = "cleared"
    NOT_CLEARED = "not_cleared"


class MissingRequirements(BaseModel):
    """Reasons grouped by category."""

    milestones: list[str] = Field(default_factory=list)
    budget: list[str] = Field(default_factory=list, description="Informational only")
    legal: list[str] = Field(
        default_factory=list, description="Reserved for proof-of-rights gating"
    )
    files: list[str] = Field(default_factory=list, description="Proof-of-completion attachments")


class ReadinessVerdict(BaseModel):
    """Cleared-for-release verdict for a project."""

    project_id: str
    cleared: bool
    status: ReadinessState
    reasons: list[str] = Field(default_factory=list, description="Reasons blocking release")
    advisories: list[str] = Field(
        default_factory=list, description="Budget and deadline findings that do not gate release"
    )
    missing_requirements: MissingRequirements = Field(default_factory=MissingRequirements)
    deadline_risk: Optional[RiskLevel] = None


# =============================================================================
# Milestone completion
# =============================================================================


class CompletionCheck(BaseModel):
    """Whether a milestone may be marked complete right now."""

    milestone_id: str
    allowed: bool
    error_code: Optional[
        Literal["ALREADY_COMPLETE", "QUOTA_NOT_MET", "TEASER_REQUIREMENT_NOT_MET"]
    ] = None
    message: str
    quota_status: QuotaStatus
    teaser_status: Optional[TeaserRequirement] = None


# =============================================================================
# Action items
# =============================================================================


ActionType = Literal["content_quota", "budget_warning", "milestone_overdue", "proof_required"]
ActionSeverity = Literal["high", "medium", "low"]

SEVERITY_ORDER = MappingProxyType({"high": 0, "medium": 1, "low": 2})
ACTION_TYPE_ORDER = MappingProxyType(
    {
        "milestone_overdue": 0,
        "proof_required": 1,
        "content_quota": 2,
        "budget_warning": 3,
    }
)


class ActionItem(BaseModel):
    id: str
    type: ActionType
    severity: ActionSeverity
    title: str
    description: str
    dismissible: bool
    metadata: dict[str, Any] = Field(default_factory=dict)


class ActionItems(BaseModel):
    actions: list[ActionItem] = Field(default_factory=list)
    count: int = 0
