"""Teaser post compliance."""

from datetime import date, timedelta

from release_engine.core.release.types import (
    TEASER_MINIMUM_POSTS,
    TEASER_WINDOW_END_DAYS,
    TEASER_WINDOW_START_DAYS,
    InvalidInputError,
    PostingWindow,
    TeaserRequirement,
    TeaserStatus,
)


def check_teaser_requirement(count: int) -> TeaserRequirement:
    """Check the teaser post count against the fixed minimum."""
    if count < 0:
        raise InvalidInputError(f"Negative teaser count: {count}")

    return TeaserRequirement(
        required=TEASER_MINIMUM_POSTS,
        actual=count,
        met=count >= TEASER_MINIMUM_POSTS,
        missing=max(0, TEASER_MINIMUM_POSTS - count),
    )


def optimal_posting_window(release_date: date) -> PostingWindow:
    """Advisory posting window: four to three weeks before release."""
    return PostingWindow(
        start=release_date - timedelta(days=TEASER_WINDOW_START_DAYS),
        end=release_date - timedelta(days=TEASER_WINDOW_END_DAYS),
    )


def teaser_status(count: int, release_date: date) -> TeaserStatus:
    return TeaserStatus(
        count=count,
        requirement=check_teaser_requirement(count),
        optimal_posting_window=optimal_posting_window(release_date),
    )
