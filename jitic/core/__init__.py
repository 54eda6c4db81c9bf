"""Core module - errors, models."""

from jitic.core.errors import (
    ConfigurationError,
    ErrorResponse,
    JiticError,
    KeyMismatchError,
    NoIssueConfirmedError,
    NoKeysFoundError,
    NotFoundError,
    RegistryError,
    TransportError,
)
from jitic.core.models import (
    BaseJiticModel,
    OutcomeStatus,
    Policy,
    RunResult,
    VerificationOutcome,
)

__all__ = [
    "BaseJiticModel",
    "ConfigurationError",
    "ErrorResponse",
    "JiticError",
    "KeyMismatchError",
    "NoIssueConfirmedError",
    "NoKeysFoundError",
    "NotFoundError",
    "OutcomeStatus",
    "Policy",
    "RegistryError",
    "RunResult",
    "TransportError",
    "VerificationOutcome",
]
