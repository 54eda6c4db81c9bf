"""Shared Pydantic models for the validation pipeline."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from jitic.core.errors import (
    ErrorResponse,
    JiticError,
    KeyMismatchError,
    NotFoundError,
    TransportError,
)


class BaseJiticModel(BaseModel):
    """Base model with common configuration for all jitic models."""

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )


class Policy(str, Enum):
    """Run-level success criterion."""

    ALL_MUST_PASS = "all"
    ONE_MUST_PASS = "one"


class OutcomeStatus(str, Enum):
    """Result of looking up a single issue key."""

    CONFIRMED = "confirmed"
    NOT_FOUND = "not_found"
    KEY_MISMATCH = "key_mismatch"
    TRANSPORT_ERROR = "transport_error"


class VerificationOutcome(BaseJiticModel):
    """Outcome of verifying one issue key against Jira."""

    key: str = Field(description="Issue key as found in the text")
    status: OutcomeStatus = Field(description="Verification result")
    canonical_key: str | None = Field(
        default=None, description="Issue key as reported by Jira"
    )
    status_code: int | None = Field(
        default=None, description="HTTP status code of a failed lookup"
    )
    message: str = Field(default="", description="Human readable diagnostic")

    @property
    def confirmed(self) -> bool:
        return self.status == OutcomeStatus.CONFIRMED

    def to_error(self) -> JiticError | None:
        """Map a non-confirmed outcome to the matching error."""
        if self.status == OutcomeStatus.NOT_FOUND:
            return NotFoundError(self.key, status_code=self.status_code)
        if self.status == OutcomeStatus.KEY_MISMATCH:
            return KeyMismatchError(self.key, self.canonical_key or "")
        if self.status == OutcomeStatus.TRANSPORT_ERROR:
            return TransportError(
                self.message,
                status_code=self.status_code,
                details={"key": self.key},
            )
        return None


class RunResult(BaseJiticModel):
    """Aggregate of one validation run over a block of text."""

    policy: Policy
    text: str = ""
    keys: list[str] = Field(
        default_factory=list, description="Issue keys extracted from the text"
    )
    outcomes: list[VerificationOutcome] = Field(
        default_factory=list, description="Outcomes in verification order"
    )
    success: bool = False
    confirmed_key: str | None = Field(
        default=None, description="Key that satisfied the one-must-pass policy"
    )
    error: ErrorResponse | None = None
    messages: list[str] = Field(default_factory=list)

    @property
    def attempted_keys(self) -> list[str]:
        return [outcome.key for outcome in self.outcomes]
