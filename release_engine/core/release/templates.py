"""Default milestone plan for new release projects."""

from dataclasses import dataclass, field
from datetime import date, timedelta

from pydantic import BaseModel, Field

from release_engine.core.schemas_release import MilestoneStatus


@dataclass(frozen=True)
class MilestoneTemplate:
    """Definition of a default milestone."""

    name: str
    description: str
    days_before_release: int
    blocks_release: bool = False
    proof_required: bool = False
    content_requirements: tuple[tuple[str, int], ...] = field(default_factory=tuple)


MILESTONE_TEMPLATES: tuple[MilestoneTemplate, ...] = (
    MilestoneTemplate(
        name="Recording Complete",
        description="All tracks recorded and ready for mixing",
        days_before_release=90,
        content_requirements=(("short_video", 3), ("photo", 10), ("voice_memo", 1)),
    ),
    MilestoneTemplate(
        name="Mixing Complete",
        description="All tracks mixed and ready for mastering",
        days_before_release=60,
        content_requirements=(("short_video", 2), ("photo", 5), ("voice_memo", 1)),
    ),
    MilestoneTemplate(
        name="Mastering Complete",
        description="Final master approved and ready for distribution",
        days_before_release=45,
        content_requirements=(("short_video", 2), ("photo", 5)),
    ),
    MilestoneTemplate(
        name="Metadata Tagging Complete",
        description="All metadata (ISRC, UPC, credits) finalized",
        days_before_release=35,
        blocks_release=True,
        proof_required=True,
    ),
    MilestoneTemplate(
        name="Artwork Finalized",
        description="Album artwork approved and ready",
        days_before_release=30,
        proof_required=True,
    ),
    MilestoneTemplate(
        name="Teaser Content Released",
        description="Minimum 2 teaser posts published",
        days_before_release=24,  # midpoint of the 21-28 day posting window
    ),
    MilestoneTemplate(
        name="Upload to Distributor",
        description="Release uploaded to distribution platform",
        days_before_release=30,
        blocks_release=True,
        proof_required=True,
    ),
    MilestoneTemplate(
        name="Spotify Playlist Submission",
        description="Submitted for Spotify editorial consideration",
        days_before_release=28,
        blocks_release=True,
        proof_required=True,
    ),
    MilestoneTemplate(
        name="Marketing Campaign Launch",
        description="Active marketing campaign running",
        days_before_release=21,
        content_requirements=(("short_video", 6), ("photo", 15)),
    ),
    MilestoneTemplate(
        name="Pre-Save Campaign Active",
        description="Pre-save/pre-add links live and promoted",
        days_before_release=21,
    ),
    MilestoneTemplate(
        name="Release Day",
        description="Music goes live on all platforms",
        days_before_release=0,
        blocks_release=True,
    ),
)


class PlannedRequirement(BaseModel):
    content_type: str
    minimum_count: int = Field(..., ge=0)


class PlannedMilestone(BaseModel):
    """A milestone generated from a template, ready to persist."""

    name: str
    description: str
    due_date: date
    status: MilestoneStatus = MilestoneStatus.PENDING
    blocks_release: bool
    proof_required: bool
    content_requirements: list[PlannedRequirement] = Field(default_factory=list)


def calculate_milestone_due_date(release_date: date, days_before_release: int) -> date:
    return release_date - timedelta(days=days_before_release)


def generate_milestone_plan(release_date: date) -> list[PlannedMilestone]:
    """Generate the default milestone plan for a release date."""
    return [
        PlannedMilestone(
            name=template.name,
            description=template.description,
            due_date=calculate_milestone_due_date(release_date, template.days_before_release),
            blocks_release=template.blocks_release,
            proof_required=template.proof_required,
            content_requirements=[
                PlannedRequirement(content_type=content_type, minimum_count=count)
                for content_type, count in template.content_requirements
            ],
        )
        for template in MILESTONE_TEMPLATES
    ]
