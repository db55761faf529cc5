"""Tests for the Supabase-backed release store with mocked Supabase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from release_engine.core.release.types import InvalidInputError
from release_engine.core.schemas_release import BudgetCategory, MilestoneStatus
from release_engine.db.release_store import SupabaseReleaseStore


def _patched_client(module: str):
    return patch(f"release_engine.db.{module}.get_supabase")


@pytest.fixture
def store():
    return SupabaseReleaseStore()


class TestProjects:
    def test_get_project_maps_row(self, store):
        row = {
            "id": "proj-1",
            "total_budget": "25000.00",
            "release_date": "2026-03-20T00:00:00+00:00",
            "release_type": "EP",
            "artist_name": "Nova Lane",
            "release_title": "Glasshouse",
        }
        with _patched_client("projects") as mock_get_supabase:
            mock_client = MagicMock()
            mock_get_supabase.return_value = mock_client
            mock_select = mock_client.table.return_value.select.return_value
            mock_select.eq.return_value.execute.return_value = MagicMock(data=[row])

            project = store.get_project("proj-1")

        assert project.total_budget == Decimal("25000.00")
        assert project.release_date == date(2026, 3, 20)
        mock_client.table.assert_called_with("projects")

    def test_get_project_not_found(self, store):
        with _patched_client("projects") as mock_get_supabase:
            mock_client = MagicMock()
            mock_get_supabase.return_value = mock_client
            mock_select = mock_client.table.return_value.select.return_value
            mock_select.eq.return_value.execute.return_value = MagicMock(data=[])

            assert store.get_project("missing") is None

    def test_invalid_row_raises_invalid_input(self, store):
        row = {"id": "proj-1", "total_budget": -5, "release_date": "2026-03-20", "release_type": "EP"}
        with _patched_client("projects") as mock_get_supabase:
            mock_client = MagicMock()
            mock_get_supabase.return_value = mock_client
            mock_select = mock_client.table.return_value.select.return_value
            mock_select.eq.return_value.execute.return_value = MagicMock(data=[row])

            with pytest.raises(InvalidInputError, match="Invalid Project record"):
                store.get_project("proj-1")

    def test_supabase_failure_raises_runtime_error(self, store):
        with _patched_client("projects") as mock_get_supabase:
            mock_client = MagicMock()
            mock_get_supabase.return_value = mock_client
            mock_client.table.return_value.select.side_effect = Exception("connection reset")

            with pytest.raises(RuntimeError, match="Supabase error reading projects"):
                store.get_project("proj-1")


class TestMilestones:
    def test_list_milestones_parses_iso_timestamps(self, store):
        rows = [
            {
                "id": "m-1",
                "project_id": "proj-1",
                "name": "Recording Complete",
                "due_date": "2025-12-21T00:00:00.000Z",
                "status": "in_progress",
                "blocks_release": 0,
                "proof_required": 0,
                "proof_file": None,
                "description": "All tracks recorded",
            }
        ]
        with _patched_client("milestones") as mock_get_supabase:
            mock_client = MagicMock()
            mock_get_supabase.return_value = mock_client
            mock_eq = mock_client.table.return_value.select.return_value.eq.return_value
            mock_eq.order.return_value.execute.return_value = MagicMock(data=rows)

            milestones = store.list_milestones("proj-1")

        assert len(milestones) == 1
        assert milestones[0].due_date == date(2025, 12, 21)
        assert milestones[0].status == MilestoneStatus.IN_PROGRESS
        assert milestones[0].blocks_release is False
        mock_eq.order.assert_called_once_with("due_date", desc=False)

    def test_content_requirements_read_from_requirements_table(self, store):
        rows = [{"milestone_id": "m-1", "content_type": "photo", "minimum_count": 10}]
        with _patched_client("milestones") as mock_get_supabase:
            mock_client = MagicMock()
            mock_get_supabase.return_value = mock_client
            mock_select = mock_client.table.return_value.select.return_value
            mock_select.eq.return_value.execute.return_value = MagicMock(data=rows)

            requirements = store.list_content_requirements("m-1")

        assert requirements[0].minimum_count == 10
        mock_client.table.assert_called_with("milestone_content_requirements")


class TestAggregates:
    def test_content_counted_per_type(self, store):
        rows = [{"content_type": "photo"}, {"content_type": "photo"}, {"content_type": "reel"}]
        with _patched_client("content_items") as mock_get_supabase:
            mock_client = MagicMock()
            mock_get_supabase.return_value = mock_client
            mock_select = mock_client.table.return_value.select.return_value
            mock_select.eq.return_value.execute.return_value = MagicMock(data=rows)

            assert store.count_content_by_type("m-1") == {"photo": 2, "reel": 1}

    def test_budget_skips_unknown_categories(self, store):
        rows = [
            {"category": "production", "amount": 1200.5, "approval_status": "approved"},
            {"category": "production", "amount": "300", "approval_status": "pending"},
            {"category": "catering", "amount": 90, "approval_status": "approved"},
            {"category": "marketing", "amount": None, "approval_status": "rejected"},
        ]
        with _patched_client("budget_items") as mock_get_supabase:
            mock_client = MagicMock()
            mock_get_supabase.return_value = mock_client
            mock_select = mock_client.table.return_value.select.return_value
            mock_select.eq.return_value.execute.return_value = MagicMock(data=rows)

            spend = store.sum_budget_by_category("proj-1")
            counts = store.count_budget_by_category("proj-1")

        assert spend == {
            BudgetCategory.PRODUCTION: Decimal("1500.5"),
            BudgetCategory.MARKETING: Decimal("0"),
        }
        assert counts == {BudgetCategory.PRODUCTION: 2, BudgetCategory.MARKETING: 1}

    def test_teasers_use_exact_count(self, store):
        with _patched_client("teaser_posts") as mock_get_supabase:
            mock_client = MagicMock()
            mock_get_supabase.return_value = mock_client
            mock_select = mock_client.table.return_value.select.return_value
            mock_select.eq.return_value.execute.return_value = MagicMock(data=[], count=3)

            assert store.count_teasers("proj-1") == 3

        mock_client.table.return_value.select.assert_called_once_with("id", count="exact")

    def test_teasers_none_count_is_zero(self, store):
        with _patched_client("teaser_posts") as mock_get_supabase:
            mock_client = MagicMock()
            mock_get_supabase.return_value = mock_client
            mock_select = mock_client.table.return_value.select.return_value
            mock_select.eq.return_value.execute.return_value = MagicMock(data=None, count=None)

            assert store.count_teasers("proj-1") == 0
