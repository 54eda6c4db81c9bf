"""Mock services for testing."""

from jitic.tests.mocks.mock_services import MockIssueTracker

__all__ = [
    "MockIssueTracker",
]
