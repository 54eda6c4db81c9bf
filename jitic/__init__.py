"""jitic - validate Jira issue keys referenced in commit messages."""

__version__ = "0.3.0"
