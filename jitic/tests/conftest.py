"""Pytest fixtures for jitic tests."""

import pytest

from jitic.config import Settings, get_settings
from jitic.tests.mocks.mock_services import MockIssueTracker


@pytest.fixture(autouse=True)
def clean_settings_cache():
    """Drop cached settings so environment changes apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Create settings that do not read the environment or .env files."""
    return Settings(
        _env_file=None,
        jira_url="https://jira.example.com",
        request_timeout=5,
    )


@pytest.fixture
def prefixes() -> frozenset[str]:
    """Default project keys."""
    return frozenset({"WEB", "SYS", "PRD"})


@pytest.fixture
def mock_tracker() -> MockIssueTracker:
    """Create mock tracker with a few existing issues."""
    return MockIssueTracker(
        projects=["WEB", "SYS", "PRD"],
        issues={
            "WEB-4711": "WEB-4711",
            "WEB-22861": "WEB-22861",
            "SYS-1234": "SYS-1234",
            "PRD-5678": "PRD-5678",
        },
    )
