"""Issue key extraction from free text such as commit messages.

Keys are only recognised for known project keys, which keeps tokens like
``UTF-8`` or ``ISO-9001`` out of the result. A numeric part of zero is never a
valid issue number, so version-like tokens such as ``PSR-0`` are dropped even
when ``PSR`` is a real project.
"""

import re
from collections.abc import Collection


def build_issue_key_pattern(prefixes: Collection[str]) -> re.Pattern[str] | None:
    """Compile a case-insensitive pattern matching ``<prefix>-<number>``.

    Returns None for an empty prefix set; an empty alternation would match
    everywhere.
    """
    if not prefixes:
        return None

    # Longest first so WEBX-1 is not reported as WEB-... when both exist
    ordered = sorted(prefixes, key=lambda prefix: (-len(prefix), prefix))
    alternation = "|".join(re.escape(prefix) for prefix in ordered)
    return re.compile(rf"(?:{alternation})-([0-9]+)", re.IGNORECASE)


def extract_issue_keys(prefixes: Collection[str], text: str) -> list[str]:
    """Return issue keys in order of appearance.

    Casing is kept as written and duplicates are preserved.

    Example:
        >>> extract_issue_keys({"WEB"}, "[WEB-22861] remove authentication")
        ['WEB-22861']
    """
    pattern = build_issue_key_pattern(prefixes)
    if pattern is None or not text:
        return []

    # A non-zero digit means value > 0; int() rejects runs over 4300 digits
    return [
        match.group(0)
        for match in pattern.finditer(text)
        if match.group(1).strip("0")
    ]
