"""Budget health analysis against industry-standard allocations.

Every category is measured against a fixed fraction of the project's single
total budget:

    production 35% | marketing 30% | content_creation 10%
    distribution 10% | admin 10% | contingency 5%

Category status uses spend as a percent of the recommended amount:
    > 130  critical
    > 115  warning
    >= 90  on-track
    else   under

Alerts are a separate rule family: per-category overage alerts, plus a
marketing underspend alert when release is 30 days out or less.
"""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Union

from release_engine.core.release.types import (
    CRITICAL_OVERAGE_PERCENT,
    MARKETING_MINIMUM_SHARE,
    MARKETING_UNDERSPEND_WINDOW_DAYS,
    ON_TRACK_PERCENT,
    RECOMMENDED_ALLOCATIONS,
    WARNING_OVERAGE_PERCENT,
    AlertSeverity,
    BudgetAlert,
    BudgetAlerts,
    BudgetStatus,
    BudgetSummary,
    CategoryBreakdown,
    InvalidInputError,
)
from release_engine.core.schemas_release import BudgetCategory

Amount = Union[Decimal, int, float, str]

HUNDRED = Decimal("100")


def _as_decimal(value: Amount) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() first so floats keep their printed value
    return Decimal(str(value))


def _to_category(key: BudgetCategory | str) -> BudgetCategory:
    try:
        return BudgetCategory(key)
    except ValueError as e:
        raise InvalidInputError(f"Unknown budget category: {key}") from e


def _normalize_spend(
    spend_by_category: Mapping[BudgetCategory | str, Amount],
) -> dict[BudgetCategory, Decimal]:
    spend: dict[BudgetCategory, Decimal] = {}
    for key, value in spend_by_category.items():
        category = _to_category(key)
        amount = _as_decimal(value)
        if amount < 0:
            raise InvalidInputError(f"Negative spend for {category.value}: {amount}")
        spend[category] = spend.get(category, Decimal("0")) + amount
    return spend


def _require_positive_budget(total_budget: Amount) -> Decimal:
    total = _as_decimal(total_budget)
    if total <= 0:
        raise InvalidInputError(f"Total budget must be positive, got {total}")
    return total


def classify_spend(percent_of_recommended: Decimal) -> BudgetStatus:
    """Map percent-of-recommended spend to a status (first match wins)."""
    if percent_of_recommended > CRITICAL_OVERAGE_PERCENT:
        return BudgetStatus.CRITICAL
    if percent_of_recommended > WARNING_OVERAGE_PERCENT:
        return BudgetStatus.WARNING
    if percent_of_recommended >= ON_TRACK_PERCENT:
        return BudgetStatus.ON_TRACK
    return BudgetStatus.UNDER


def analyze_budget(
    total_budget: Amount,
    spend_by_category: Mapping[BudgetCategory | str, Amount],
    item_count_by_category: Mapping[BudgetCategory | str, int] | None = None,
) -> BudgetSummary:
    """
    Build the budget summary for a project.

    Args:
        total_budget: Project total budget
        spend_by_category: Summed spend keyed by category (missing = zero)
        item_count_by_category: Optional number of budget items per category

    Returns:
        BudgetSummary covering every known category

    Raises:
        InvalidInputError: If the budget is not positive, a spend is negative
            or a category is unknown
    """
    total = _require_positive_budget(total_budget)
    spend = _normalize_spend(spend_by_category)
    counts = {_to_category(k): v for k, v in (item_count_by_category or {}).items()}

    by_category: dict[BudgetCategory, CategoryBreakdown] = {}
    for category, fraction in RECOMMENDED_ALLOCATIONS.items():
        spent = spend.get(category, Decimal("0"))
        recommended_amount = total * fraction
        percent_of_recommended = spent / recommended_amount * HUNDRED

        by_category[category] = CategoryBreakdown(
            spent=spent,
            count=counts.get(category, 0),
            percentage=spent / total * HUNDRED,
            recommended_amount=recommended_amount,
            recommended_percentage=fraction * HUNDRED,
            percent_of_recommended=percent_of_recommended,
            status=classify_spend(percent_of_recommended),
        )

    total_spent = sum(spend.values(), Decimal("0"))

    return BudgetSummary(
        total_budget=total,
        total_spent=total_spent,
        remaining=total - total_spent,
        percentage_spent=total_spent / total * HUNDRED,
        by_category=by_category,
        recommended_allocations=dict(RECOMMENDED_ALLOCATIONS),
    )


def days_until_release(release_date: date, today: date) -> int:
    """Whole days from today until release (negative once released)."""
    return (release_date - today).days


def generate_budget_alerts(
    total_budget: Amount,
    spend_by_category: Mapping[BudgetCategory | str, Amount],
    days_until_release: int,
) -> BudgetAlerts:
    """
    Generate budget alerts for category overages and marketing underspend.

    The two rule families are independent: marketing can be "under" its own
    allocation and still raise the release-proximity alert.

    Args:
        total_budget: Project total budget
        spend_by_category: Summed spend keyed by category
        days_until_release: Days from the evaluation date to release

    Returns:
        BudgetAlerts with summary flags
    """
    total = _require_positive_budget(total_budget)
    spend = _normalize_spend(spend_by_category)

    alerts: list[BudgetAlert] = []

    for category, fraction in RECOMMENDED_ALLOCATIONS.items():
        spent = spend.get(category)
        if spent is None:
            continue

        recommended = total * fraction
        percent_of_recommended = spent / recommended * HUNDRED

        if percent_of_recommended > CRITICAL_OVERAGE_PERCENT:
            severity = AlertSeverity.CRITICAL
        elif percent_of_recommended > WARNING_OVERAGE_PERCENT:
            severity = AlertSeverity.WARNING
        else:
            continue

        alerts.append(
            BudgetAlert(
                type="budget_overage",
                severity=severity,
                category=category,
                message=(
                    f"{category.value} spending at {percent_of_recommended:.0f}% "
                    "of recommended allocation"
                ),
                details={
                    "spent": spent,
                    "recommended": recommended,
                    "overage": spent - recommended,
                    "percent_of_recommended": percent_of_recommended,
                },
            )
        )

    marketing_spent = spend.get(BudgetCategory.MARKETING, Decimal("0"))
    marketing_percentage = marketing_spent / total * HUNDRED

    if (
        days_until_release <= MARKETING_UNDERSPEND_WINDOW_DAYS
        and marketing_percentage < MARKETING_MINIMUM_SHARE * HUNDRED
    ):
        alerts.append(
            BudgetAlert(
                type="marketing_underspend",
                severity=AlertSeverity.CRITICAL,
                category=BudgetCategory.MARKETING,
                message=(
                    f"Marketing spend only {marketing_percentage:.0f}% "
                    f"with {days_until_release} days until release"
                ),
                details={
                    "spent": marketing_spent,
                    "percentage": marketing_percentage,
                    "days_until_release": days_until_release,
                    "recommended_minimum": total * MARKETING_MINIMUM_SHARE,
                },
            )
        )

    return BudgetAlerts(
        alerts=alerts,
        alert_count=len(alerts),
        has_critical=any(a.severity == AlertSeverity.CRITICAL for a in alerts),
        has_warnings=any(a.severity == AlertSeverity.WARNING for a in alerts),
    )
