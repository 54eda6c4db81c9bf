"""Validation pipeline - project registry, extraction, verification."""

from jitic.validation.extractor import build_issue_key_pattern, extract_issue_keys
from jitic.validation.orchestrator import ValidationOrchestrator, run_validation
from jitic.validation.registry import fixed_projects, load_projects
from jitic.validation.verifier import verify_issue

__all__ = [
    "ValidationOrchestrator",
    "build_issue_key_pattern",
    "extract_issue_keys",
    "fixed_projects",
    "load_projects",
    "run_validation",
    "verify_issue",
]
