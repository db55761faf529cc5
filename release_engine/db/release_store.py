"""Supabase-backed ReleaseStore."""

from decimal import Decimal
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from release_engine.core.logging import get_logger
from release_engine.core.release.types import InvalidInputError
from release_engine.core.schemas_release import (
    BudgetCategory,
    ContentRequirement,
    Milestone,
    Project,
)
from release_engine.db import budget_items, content_items, milestones, projects, teaser_posts

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _to_model(model: type[ModelT], row: dict[str, Any]) -> ModelT:
    """Validate a row into a model; bad stored data raises InvalidInputError."""
    try:
        return model.model_validate(row)
    except ValidationError as e:
        logger.warning(f"Invalid {model.__name__} row {row.get('id')!r}: {e.error_count()} errors")
        raise InvalidInputError(f"Invalid {model.__name__} record: {e}") from e


class SupabaseReleaseStore:
    """Reads release records from Supabase and maps rows to schema models."""

    def get_project(self, project_id: str) -> Project | None:
        row = projects.get_project(project_id)
        return _to_model(Project, row) if row else None

    def get_milestone(self, milestone_id: str) -> Milestone | None:
        row = milestones.get_milestone(milestone_id)
        return _to_model(Milestone, row) if row else None

    def list_milestones(self, project_id: str) -> list[Milestone]:
        return [_to_model(Milestone, row) for row in milestones.list_project_milestones(project_id)]

    def list_content_requirements(self, milestone_id: str) -> list[ContentRequirement]:
        return [
            _to_model(ContentRequirement, row)
            for row in milestones.list_content_requirements(milestone_id)
        ]

    def count_content_by_type(self, milestone_id: str) -> dict[str, int]:
        return content_items.count_content_by_type(milestone_id)

    def _known_budget_rows(self, project_id: str) -> list[tuple[BudgetCategory, Decimal]]:
        rows: list[tuple[BudgetCategory, Decimal]] = []
        for row in budget_items.list_budget_items(project_id):
            try:
                category = BudgetCategory(row["category"])
            except ValueError:
                logger.warning(
                    f"Skipping budget item with unknown category {row['category']!r}",
                    extra={"project_id": project_id},
                )
                continue
            rows.append((category, Decimal(str(row["amount"] or 0))))
        return rows

    def sum_budget_by_category(self, project_id: str) -> dict[BudgetCategory, Decimal]:
        totals: dict[BudgetCategory, Decimal] = {}
        for category, amount in self._known_budget_rows(project_id):
            totals[category] = totals.get(category, Decimal("0")) + amount
        return totals

    def count_budget_by_category(self, project_id: str) -> dict[BudgetCategory, int]:
        counts: dict[BudgetCategory, int] = {}
        for category, _ in self._known_budget_rows(project_id):
            counts[category] = counts.get(category, 0) + 1
        return counts

    def count_teasers(self, project_id: str) -> int:
        return teaser_posts.count_teaser_posts(project_id)
