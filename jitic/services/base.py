"""Base service class and the issue tracker capability."""

import logging
from abc import ABC
from typing import Any, Protocol, runtime_checkable

from jitic.config import Settings, get_settings


@runtime_checkable
class IssueTracker(Protocol):
    """Read-only capability the validation pipeline needs from a tracker.

    Implementations raise ``TransportError`` for network or HTTP failures and
    ``NotFoundError`` when an issue does not exist.
    """

    def list_projects(self) -> list[dict[str, Any]]:
        """Return all projects visible to the current user (each with ``key``)."""
        ...

    def get_issue(self, key: str) -> dict[str, Any]:
        """Return the issue addressed by ``key`` (with its canonical ``key``)."""
        ...


class BaseService(ABC):
    """Base for tracker services: settings plus a per-class logger."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.logger = logging.getLogger(self.__class__.__name__)

    @staticmethod
    def _format_context(context: dict[str, Any]) -> str:
        return " ".join(f"{k}={v}" for k, v in context.items())

    def _log_error(self, operation: str, error: Exception, **context: Any) -> None:
        """Log a failed tracker call, e.g. ``get_issue failed: ... key=WEB-1``."""
        self.logger.error(
            f"{operation} failed: {error} {self._format_context(context)}".strip()
        )

    def _log_info(self, message: str, **context: Any) -> None:
        """Log info with context."""
        self.logger.info(f"{message} {self._format_context(context)}".strip())
