"""Regex exclusion of scanned paths."""

from __future__ import annotations

import re

# Pre-filled in the UI; matched against paths relative to the picked folder
DEFAULT_EXCLUDE = r"(^|/)\.git/, (^|/)node_modules/, __pycache__/, \.DS_Store$"


def parse_pattern_input(raw: str) -> list[str]:
    """Split a comma-separated string into individual pattern strings.

    Whitespace around each pattern is stripped. Empty segments are ignored.
    """
    if not raw or not raw.strip():
        return []
    return [p.strip() for p in raw.split(",") if p.strip()]


def validate_patterns(patterns: list[str]) -> list[str]:
    """Return a list of error messages for invalid regex patterns.

    An empty list means all patterns are valid.
    """
    errors: list[str] = []
    for p in patterns:
        try:
            re.compile(p)
        except re.error as exc:
            errors.append(f"`{p}`: {exc}")
    return errors


def compile_patterns(patterns: list[str]) -> list[re.Pattern[str]]:
    """Compile pattern strings, leaving out the ones that do not compile."""
    compiled: list[re.Pattern[str]] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error:
            continue
    return compiled


def matches_any_pattern(path: str, compiled: list[re.Pattern[str]]) -> bool:
    """Return True if *path* matches any of the compiled patterns.

    Uses `re.search`, so a pattern can match anywhere in the path. With no
    patterns nothing matches, i.e. nothing is excluded.
    """
    return any(pat.search(path) for pat in compiled)
