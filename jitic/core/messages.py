"""User-facing messages for jitic."""


class ErrorMessages:
    """Error messages surfaced on failed runs."""

    # Project registry
    PROJECTS_FETCH_FAILED = "Unable to fetch projects from Jira: {error}"
    NO_PROJECTS_FOUND = "No JIRA projects found. Issue keys cannot be validated."

    # Extraction
    NO_ISSUE_KEYS_FOUND = "No JIRA-Ticket(s) found."

    # Verification
    ISSUE_NOT_FOUND = "Issue {key} does not exist in JIRA."
    ISSUE_LOOKUP_FAILED = "Lookup of issue {key} failed: {error}"
    ISSUE_KEY_MISMATCH = (
        "Used issue {key} is not the same as {canonical_key} (provided by JIRA)"
    )
    NO_ISSUE_CONFIRMED = "None of the JIRA-Ticket(s) exist: {keys}"

    # Configuration
    MISSING_URL = "JIRA URL is missing. Pass --url or set JIRA_URL."
    MISSING_INPUT = "Nothing to validate. Pass --tickets or --stdin."


class InfoMessages:
    """Informational messages written to the log."""

    PROJECTS_LOADED = "Loaded {count} JIRA project(s)"
    ISSUE_KEYS_FOUND = "Found issue key(s): {keys}"
    ISSUE_CONFIRMED = "Issue {key} exists in JIRA"
    ALL_CONFIRMED = "All {count} issue key(s) exist in JIRA"
