"""Verification of a single issue key against the tracker."""

import logging

from jitic.core.errors import NotFoundError, TransportError
from jitic.core.messages import ErrorMessages, InfoMessages
from jitic.core.models import OutcomeStatus, VerificationOutcome
from jitic.services.base import IssueTracker

logger = logging.getLogger(__name__)


def verify_issue(key: str, tracker: IssueTracker) -> VerificationOutcome:
    """Look up ``key`` once and classify the answer.

    The tracker may resolve keys loosely, so the returned key has to equal
    the requested one (ignoring case) to count as confirmed.
    """
    try:
        issue = tracker.get_issue(key)
    except NotFoundError as e:
        return VerificationOutcome(
            key=key,
            status=OutcomeStatus.NOT_FOUND,
            status_code=e.status_code,
            message=e.message,
        )
    except TransportError as e:
        return VerificationOutcome(
            key=key,
            status=OutcomeStatus.TRANSPORT_ERROR,
            status_code=e.status_code,
            message=ErrorMessages.ISSUE_LOOKUP_FAILED.format(key=key, error=e.message),
        )

    canonical_key = str(issue.get("key") or "")
    if canonical_key.upper() != key.upper():
        return VerificationOutcome(
            key=key,
            status=OutcomeStatus.KEY_MISMATCH,
            canonical_key=canonical_key,
            message=ErrorMessages.ISSUE_KEY_MISMATCH.format(
                key=key, canonical_key=canonical_key
            ),
        )

    logger.debug(InfoMessages.ISSUE_CONFIRMED.format(key=canonical_key))
    return VerificationOutcome(
        key=key,
        status=OutcomeStatus.CONFIRMED,
        canonical_key=canonical_key,
        message=InfoMessages.ISSUE_CONFIRMED.format(key=canonical_key),
    )
