"""Read interface the evaluation service needs from persistence.

Absent entities are signalled with None / empty values, never exceptions, so
callers can tell "project does not exist" from "project has no items".
"""

from decimal import Decimal
from typing import Protocol

from release_engine.core.schemas_release import (
    BudgetCategory,
    ContentRequirement,
    Milestone,
    Project,
)


class ReleaseStore(Protocol):
    def get_project(self, project_id: str) -> Project | None: ...

    def get_milestone(self, milestone_id: str) -> Milestone | None: ...

    def list_milestones(self, project_id: str) -> list[Milestone]: ...

    def list_content_requirements(self, milestone_id: str) -> list[ContentRequirement]: ...

    def count_content_by_type(self, milestone_id: str) -> dict[str, int]: ...

    def sum_budget_by_category(self, project_id: str) -> dict[BudgetCategory, Decimal]: ...

    def count_budget_by_category(self, project_id: str) -> dict[BudgetCategory, int]: ...

    def count_teasers(self, project_id: str) -> int: ...
