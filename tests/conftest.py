"""Pytest configuration and fixtures."""

import os
from datetime import date

import pytest

from tests.fakes.fake_store import FakeReleaseStore


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["SUPABASE_URL"] = "https://test.supabase.co"
    os.environ["SUPABASE_SERVICE_ROLE_KEY"] = "test-key"
    os.environ["RELEASE_ENGINE_ENV"] = "test"


@pytest.fixture
def release_date():
    """Release date used across fixtures."""
    return date(2025, 12, 31)


@pytest.fixture
def fake_store():
    """Empty in-memory release store."""
    return FakeReleaseStore()
