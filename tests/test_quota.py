"""Unit tests for content quota evaluation."""

import pytest

from release_engine.core.release.quota import evaluate_quota
from release_engine.core.release.types import InvalidInputError
from release_engine.core.schemas_release import ContentRequirement


def _req(content_type: str, minimum: int, milestone_id: str = "m-1") -> ContentRequirement:
    return ContentRequirement(
        milestone_id=milestone_id, content_type=content_type, minimum_count=minimum
    )


class TestEvaluateQuota:
    def test_no_requirements_is_trivially_met(self):
        status = evaluate_quota([], {"photo": 0})

        assert status.quota_met is True
        assert status.requirements == []
        assert status.message == "No content requirements for this milestone"

    def test_no_requirements_and_no_content(self):
        assert evaluate_quota([], {}).quota_met is True

    def test_missing_photos(self):
        status = evaluate_quota([_req("photo", 3)], {"photo": 1})

        detail = status.requirements[0]
        assert detail.content_type == "photo"
        assert detail.required == 3
        assert detail.actual == 1
        assert detail.missing == 2
        assert detail.met is False
        assert status.quota_met is False
        assert status.message == "Content quota not met"

    def test_uncaptured_type_counts_as_zero(self):
        status = evaluate_quota([_req("voice_memo", 1)], {"photo": 12})

        assert status.requirements[0].actual == 0
        assert status.requirements[0].missing == 1
        assert status.quota_met is False

    def test_surplus_never_reports_negative_missing(self):
        status = evaluate_quota([_req("short_video", 2)], {"short_video": 5})

        assert status.requirements[0].missing == 0
        assert status.requirements[0].met is True
        assert status.quota_met is True

    def test_quota_met_is_and_of_all_requirements(self):
        requirements = [_req("short_video", 3), _req("photo", 10), _req("voice_memo", 1)]

        partial = evaluate_quota(requirements, {"short_video": 3, "photo": 10})
        assert [d.met for d in partial.requirements] == [True, True, False]
        assert partial.quota_met is False

        full = evaluate_quota(requirements, {"short_video": 3, "photo": 10, "voice_memo": 1})
        assert full.quota_met is True
        assert full.message == "All content requirements met"

    def test_zero_minimum_is_always_met(self):
        assert evaluate_quota([_req("photo", 0)], {}).quota_met is True

    def test_negative_count_rejected(self):
        with pytest.raises(InvalidInputError):
            evaluate_quota([_req("photo", 1)], {"photo": -1})

    def test_same_input_same_output(self):
        requirements = [_req("photo", 5), _req("short_video", 2)]
        counts = {"photo": 4, "short_video": 2}

        first = evaluate_quota(requirements, counts)
        second = evaluate_quota(requirements, counts)

        assert first.model_dump_json() == second.model_dump_json()
