"""Entry point for running jitic as a module.

Usage:
    python -m jitic check --url https://jira.example.com --tickets "WEB-1 fix"
    git log -1 --pretty=%s | python -m jitic check --stdin

Environment Variables:
    JIRA_URL: JIRA instance URL
    JIRA_USERNAME / JIRA_PASSWORD: Credentials (optional)
    JITIC_PROJECTS: Comma-separated project keys (optional)
"""

from jitic.cli import app


def main() -> None:
    """Run the jitic command line."""
    app()


if __name__ == "__main__":
    main()
