"""Unit tests for the cleared-for-release aggregator."""

from datetime import date
from decimal import Decimal

import pytest

from release_engine.core.release.budget import analyze_budget, generate_budget_alerts
from release_engine.core.release.clearance import compute_clearance
from release_engine.core.release.deadlines import analyze_deadlines
from release_engine.core.release.quota import evaluate_quota
from release_engine.core.release.teasers import check_teaser_requirement
from release_engine.core.release.types import ReadinessState, RiskLevel
from release_engine.core.schemas_release import (
    ContentRequirement,
    Milestone,
    MilestoneStatus,
    Project,
)

RELEASE = date(2025, 12, 31)
TODAY = date(2025, 10, 1)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def project():
    return Project(
        id="proj-1",
        total_budget=Decimal("100000"),
        release_date=RELEASE,
        release_type="single",
    )


@pytest.fixture
def healthy_budget(project):
    return analyze_budget(project.total_budget, {"production": 30000, "marketing": 28000})


def _milestone(
    mid: str,
    name: str,
    due: date,
    status: MilestoneStatus = MilestoneStatus.COMPLETE,
    blocks_release: bool = True,
    proof_required: bool = False,
    proof_file: str | None = None,
) -> Milestone:
    return Milestone(
        id=mid,
        project_id="proj-1",
        name=name,
        due_date=due,
        status=status,
        blocks_release=blocks_release,
        proof_required=proof_required,
        proof_file=proof_file,
    )


def _met_quota():
    return evaluate_quota([], {})


def _unmet_quota(milestone_id: str):
    return evaluate_quota(
        [ContentRequirement(milestone_id=milestone_id, content_type="photo", minimum_count=3)],
        {"photo": 1},
    )


def _clearance(project, milestones, quotas, budget, teasers=2, alerts=None):
    return compute_clearance(
        project=project,
        milestones=milestones,
        quota_statuses=quotas,
        budget_summary=budget,
        deadline_analysis=analyze_deadlines(milestones, project.release_date, TODAY),
        teaser_status=check_teaser_requirement(teasers),
        budget_alerts=alerts,
    )


# =============================================================================
# Tests
# =============================================================================


class TestComputeClearance:
    def test_all_gates_satisfied_is_cleared(self, project, healthy_budget):
        milestones = [
            _milestone("m-1", "Upload to Distributor", date(2025, 11, 20)),
            _milestone("m-2", "Release Day", RELEASE),
        ]

        verdict = _clearance(
            project, milestones, {"m-1": _met_quota(), "m-2": _met_quota()}, healthy_budget
        )

        assert verdict.cleared is True
        assert verdict.status == ReadinessState.CLEARED
        assert verdict.reasons == []
        assert verdict.missing_requirements.milestones == []
        assert verdict.missing_requirements.legal == []

    def test_incomplete_blocking_milestone_blocks(self, project, healthy_budget):
        milestones = [
            _milestone("m-1", "Upload to Distributor", date(2025, 11, 20), MilestoneStatus.IN_PROGRESS),
        ]

        verdict = _clearance(project, milestones, {"m-1": _met_quota()}, healthy_budget)

        assert verdict.cleared is False
        assert verdict.status == ReadinessState.NOT_CLEARED
        assert verdict.reasons == ["Milestone 'Upload to Distributor' incomplete"]
        assert verdict.missing_requirements.milestones == verdict.reasons

    def test_incomplete_non_blocking_milestone_does_not_block(self, project, healthy_budget):
        milestones = [
            _milestone("m-1", "Mixing Complete", date(2025, 11, 1), MilestoneStatus.PENDING, blocks_release=False),
        ]

        verdict = _clearance(project, milestones, {"m-1": _unmet_quota("m-1")}, healthy_budget)

        assert verdict.cleared is True

    def test_blocking_milestone_with_unmet_quota_blocks(self, project, healthy_budget):
        milestones = [_milestone("m-1", "Release Day", RELEASE)]

        verdict = _clearance(project, milestones, {"m-1": _unmet_quota("m-1")}, healthy_budget)

        assert verdict.cleared is False
        assert verdict.reasons == ["Content quota not met for milestone 'Release Day'"]

    def test_missing_quota_status_means_no_requirements(self, project, healthy_budget):
        milestones = [_milestone("m-1", "Release Day", RELEASE)]

        assert _clearance(project, milestones, {}, healthy_budget).cleared is True

    def test_teaser_requirement_blocks(self, project, healthy_budget):
        verdict = _clearance(project, [], {}, healthy_budget, teasers=1)

        assert verdict.cleared is False
        assert verdict.reasons == ["Teaser requirement not met: 1 of 2 posts"]

    def test_incomplete_blocking_milestone_blocks_regardless_of_budget_and_teasers(self, project):
        milestones = [
            _milestone("m-1", "Release Day", RELEASE, MilestoneStatus.PENDING),
        ]
        perfect_budget = analyze_budget(
            project.total_budget,
            {
                "production": 35000,
                "marketing": 30000,
                "content_creation": 10000,
                "distribution": 10000,
                "admin": 10000,
                "contingency": 5000,
            },
        )

        verdict = _clearance(project, milestones, {"m-1": _met_quota()}, perfect_budget, teasers=10)

        assert verdict.cleared is False
        assert verdict.missing_requirements.milestones

    def test_critical_budget_is_advisory_only(self, project):
        budget = analyze_budget(project.total_budget, {"production": 60000})
        alerts = generate_budget_alerts(project.total_budget, {"production": 60000}, 10)

        verdict = _clearance(project, [], {}, budget, alerts=alerts)

        assert verdict.cleared is True
        assert verdict.reasons == []
        assert verdict.missing_requirements.budget == [
            "production spending at 171% of recommended allocation",
            "Marketing spend only 0% with 10 days until release",
        ]
        assert verdict.advisories == verdict.missing_requirements.budget

    def test_total_overspend_is_advisory(self, project):
        budget = analyze_budget(project.total_budget, {"production": 90000, "marketing": 30000})

        verdict = _clearance(project, [], {}, budget)

        assert verdict.cleared is True
        assert "Budget overspent: $120000.00 / $100000.00" in verdict.missing_requirements.budget

    def test_missing_proof_listed_under_files(self, project, healthy_budget):
        milestones = [
            _milestone(
                "m-1",
                "Spotify Playlist Submission",
                date(2025, 12, 3),
                MilestoneStatus.PENDING,
                proof_required=True,
            ),
            _milestone(
                "m-2",
                "Upload to Distributor",
                date(2025, 12, 1),
                MilestoneStatus.PENDING,
                proof_required=True,
                proof_file="proofs/upload.png",
            ),
        ]

        verdict = _clearance(project, milestones, {}, healthy_budget)

        assert verdict.missing_requirements.files == [
            "Proof of completion for 'Spotify Playlist Submission'"
        ]
        assert verdict.cleared is False

    def test_critical_deadline_is_advisory(self, project, healthy_budget):
        # Due 15 days after its recommended date, but complete
        milestones = [_milestone("m-1", "Upload to Distributor", date(2025, 12, 16))]

        verdict = _clearance(project, milestones, {}, healthy_budget)

        assert verdict.cleared is True
        assert verdict.deadline_risk == RiskLevel.CRITICAL
        assert verdict.advisories == [
            "Upload to Distributor is 15 days past its recommended deadline"
        ]

    def test_same_input_same_output(self, project, healthy_budget):
        milestones = [_milestone("m-1", "Release Day", RELEASE, MilestoneStatus.PENDING)]
        quotas = {"m-1": _unmet_quota("m-1")}

        first = _clearance(project, milestones, quotas, healthy_budget, teasers=1)
        second = _clearance(project, milestones, quotas, healthy_budget, teasers=1)

        assert first.model_dump_json() == second.model_dump_json()
