"""Regex helpers for user supplied patterns."""

from __future__ import annotations

import re

from kuberviz.models.errors import PatternError


def compile_pattern(pattern: str, field: str) -> re.Pattern[str]:
    """Compile a user supplied pattern.

    Args:
        pattern: Regular expression source.
        field: Name of the setting the pattern belongs to, for messages.

    Raises:
        PatternError: If the pattern is not a valid regular expression.
    """
    try:
        return re.compile(pattern)
    except (re.error, TypeError) as exc:
        raise PatternError(field, str(pattern), str(exc)) from exc


def compile_optional_pattern(pattern: str | None, field: str) -> re.Pattern[str] | None:
    """Compile ``pattern`` unless it is empty, in which case return None."""
    if not pattern:
        return None
    return compile_pattern(pattern, field)
