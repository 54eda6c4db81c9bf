"""Error classes for jitic."""

from typing import Any

from pydantic import BaseModel

from jitic.core.messages import ErrorMessages


class ErrorResponse(BaseModel):
    """Standard error description attached to failed runs."""

    error: str
    message: str
    details: dict[str, Any] | None = None


class JiticError(Exception):
    """Base exception for jitic errors."""

    def __init__(
        self,
        error: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.error = error
        self.message = message
        self.details = details
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert exception to error response model."""
        return ErrorResponse(
            error=self.error,
            message=self.message,
            details=self.details,
        )


class ConfigurationError(JiticError):
    """Invalid or incomplete configuration."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            error="configuration_error",
            message=message,
            details=details,
        )


class RegistryError(JiticError):
    """The set of valid project keys could not be established."""

    def __init__(
        self,
        message: str = ErrorMessages.NO_PROJECTS_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            error="registry_error",
            message=message,
            details=details,
        )


class NoKeysFoundError(JiticError):
    """The text did not contain a single issue key."""

    def __init__(self, text: str = "") -> None:
        super().__init__(
            error="no_keys_found",
            message=ErrorMessages.NO_ISSUE_KEYS_FOUND,
            details={"text": text},
        )


class TransportError(JiticError):
    """Network or HTTP failure while talking to Jira."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        details = dict(details or {})
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            error="transport_error",
            message=message,
            details=details or None,
        )


class NotFoundError(JiticError):
    """Jira has no issue with the requested key."""

    def __init__(self, key: str, status_code: int | None = 404) -> None:
        self.key = key
        self.status_code = status_code
        super().__init__(
            error="not_found",
            message=ErrorMessages.ISSUE_NOT_FOUND.format(key=key),
            details={"key": key, "status_code": status_code},
        )


class KeyMismatchError(JiticError):
    """Jira resolved the requested key to a different issue key."""

    def __init__(self, key: str, canonical_key: str) -> None:
        self.key = key
        self.canonical_key = canonical_key
        super().__init__(
            error="key_mismatch",
            message=ErrorMessages.ISSUE_KEY_MISMATCH.format(
                key=key, canonical_key=canonical_key
            ),
            details={"key": key, "canonical_key": canonical_key},
        )


class NoIssueConfirmedError(JiticError):
    """No extracted key could be verified while only one was required."""

    def __init__(self, keys: list[str]) -> None:
        self.keys = keys
        super().__init__(
            error="no_issue_confirmed",
            message=ErrorMessages.NO_ISSUE_CONFIRMED.format(keys=", ".join(keys)),
            details={"keys": keys},
        )
