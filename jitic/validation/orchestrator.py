"""Validation runs: extraction plus verification under a policy."""

import logging
from collections.abc import Collection, Iterable

from jitic.core.errors import JiticError, NoIssueConfirmedError, NoKeysFoundError
from jitic.core.messages import InfoMessages
from jitic.core.models import Policy, RunResult
from jitic.services.base import IssueTracker
from jitic.validation.extractor import extract_issue_keys
from jitic.validation.verifier import verify_issue

logger = logging.getLogger(__name__)


def _fail(result: RunResult, error: JiticError, log: logging.Logger) -> RunResult:
    log.info(f"Run failed: {error.message}")
    result.success = False
    result.error = error.to_response()
    result.messages.append(error.message)
    return result


def run_validation(
    text: str,
    prefixes: Collection[str],
    tracker: IssueTracker,
    policy: Policy = Policy.ALL_MUST_PASS,
    log: logging.Logger | None = None,
) -> RunResult:
    """Validate every issue key referenced in ``text``.

    With ``Policy.ALL_MUST_PASS`` the run stops at the first key that cannot
    be confirmed. With ``Policy.ONE_MUST_PASS`` it stops at the first
    confirmed key and only fails once every key has been tried. Keys are
    verified in text order, once per occurrence.

    Args:
        text: Commit message or any other block of text
        prefixes: Known project keys
        tracker: Issue tracker used for the lookups
        policy: Success criterion for the run
        log: Logger for diagnostics (default: module logger)

    Returns:
        Finalized run result
    """
    log = log or logger
    result = RunResult(policy=policy, text=text)

    result.keys = extract_issue_keys(prefixes, text)
    if not result.keys:
        return _fail(result, NoKeysFoundError(text), log)

    log.info(InfoMessages.ISSUE_KEYS_FOUND.format(keys=", ".join(result.keys)))

    for key in result.keys:
        outcome = verify_issue(key, tracker)
        result.outcomes.append(outcome)

        if outcome.confirmed:
            log.info(outcome.message)
            if policy == Policy.ONE_MUST_PASS:
                result.success = True
                result.confirmed_key = outcome.canonical_key
                result.messages.append(outcome.message)
                return result
            continue

        error = outcome.to_error()
        if policy == Policy.ALL_MUST_PASS and error is not None:
            return _fail(result, error, log)

        # One-must-pass: note the failure and keep looking
        log.info(outcome.message)
        result.messages.append(outcome.message)

    if policy == Policy.ONE_MUST_PASS:
        return _fail(result, NoIssueConfirmedError(result.attempted_keys), log)

    log.info(InfoMessages.ALL_CONFIRMED.format(count=len(result.outcomes)))
    result.success = True
    return result


class ValidationOrchestrator:
    """Runs validations against one tracker and one loaded project set."""

    def __init__(
        self,
        prefixes: Collection[str],
        tracker: IssueTracker,
        policy: Policy = Policy.ALL_MUST_PASS,
        log: logging.Logger | None = None,
    ) -> None:
        self.prefixes = frozenset(prefixes)
        self.tracker = tracker
        self.policy = policy
        self.log = log or logger

    def run(self, text: str) -> RunResult:
        """Validate a single block of text."""
        return run_validation(
            text, self.prefixes, self.tracker, policy=self.policy, log=self.log
        )

    def run_stream(self, lines: Iterable[str]) -> RunResult:
        """Validate each line as an independent run.

        Stops at the first failing line and returns its result; otherwise
        returns the result of the last line.
        """
        result: RunResult | None = None
        for line in lines:
            result = self.run(line.rstrip("\r\n"))
            if not result.success:
                return result

        if result is None:
            return _fail(
                RunResult(policy=self.policy), NoKeysFoundError(), self.log
            )
        return result
