"""Services module - external API wrappers."""

from jitic.services.base import BaseService, IssueTracker
from jitic.services.jira_service import JiraService, split_credentials

__all__ = [
    "BaseService",
    "IssueTracker",
    "JiraService",
    "split_credentials",
]
