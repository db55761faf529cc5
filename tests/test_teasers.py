"""Unit tests for teaser compliance."""

from datetime import date

import pytest

from release_engine.core.release.teasers import (
    check_teaser_requirement,
    optimal_posting_window,
    teaser_status,
)
from release_engine.core.release.types import InvalidInputError


def test_one_teaser_not_met():
    requirement = check_teaser_requirement(1)

    assert requirement.required == 2
    assert requirement.actual == 1
    assert requirement.met is False
    assert requirement.missing == 1


def test_two_teasers_met():
    requirement = check_teaser_requirement(2)

    assert requirement.met is True
    assert requirement.missing == 0


def test_zero_teasers():
    requirement = check_teaser_requirement(0)

    assert requirement.met is False
    assert requirement.missing == 2


def test_negative_count_rejected():
    with pytest.raises(InvalidInputError):
        check_teaser_requirement(-1)


def test_optimal_window():
    window = optimal_posting_window(date(2025, 12, 31))

    assert window.start == date(2025, 12, 3)
    assert window.end == date(2025, 12, 10)


def test_status_combines_requirement_and_window():
    status = teaser_status(3, date(2025, 12, 31))

    assert status.count == 3
    assert status.requirement.met is True
    assert status.optimal_posting_window.start == date(2025, 12, 3)
