"""Project registry: the set of project keys issue keys are matched against."""

import logging
from collections.abc import Iterable

from jitic.core.errors import RegistryError, TransportError
from jitic.core.messages import ErrorMessages, InfoMessages
from jitic.services.base import IssueTracker

logger = logging.getLogger(__name__)


def _normalize(keys: Iterable[str]) -> frozenset[str]:
    return frozenset(key.strip().upper() for key in keys if key and key.strip())


def load_projects(tracker: IssueTracker) -> frozenset[str]:
    """Fetch the project keys known to the tracker.

    A single attempt is made. Transport failures and an empty project list
    both raise ``RegistryError``; issue keys cannot be validated without
    projects.
    """
    try:
        projects = tracker.list_projects()
    except TransportError as e:
        raise RegistryError(
            message=ErrorMessages.PROJECTS_FETCH_FAILED.format(error=e.message),
            details=e.details,
        ) from e

    prefixes = _normalize(
        project.get("key", "") for project in projects if isinstance(project, dict)
    )
    if not prefixes:
        raise RegistryError()

    logger.info(InfoMessages.PROJECTS_LOADED.format(count=len(prefixes)))
    logger.debug(f"Projects: {', '.join(sorted(prefixes))}")
    return prefixes


def fixed_projects(keys: Iterable[str]) -> frozenset[str]:
    """Build a project set from keys given up front instead of the tracker."""
    prefixes = _normalize(keys)
    if not prefixes:
        raise RegistryError()
    return prefixes
