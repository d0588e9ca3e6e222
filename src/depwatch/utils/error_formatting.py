"""Shared value and message formatting utilities."""

from typing import Any, Optional, Sequence


def format_value(value: Any, max_length: int = 40) -> str:
    """Render a dependency value for display, truncating long reprs."""
    text = repr(value)
    if len(text) > max_length:
        return text[: max_length - 3] + "..."
    return text


def format_dependencies(values: Optional[Sequence[Any]]) -> str:
    """
    Format a dependency list for display.

    Returns:
        "<none>" for a missing list, otherwise "[a, b, ...]"
    """
    if values is None:
        return "<none>"
    return "[" + ", ".join(format_value(v) for v in values) + "]"


def format_expectation_failure(name: str, expected: bool, actual: bool) -> str:
    """Format a scenario expectation failure message."""
    return f"{name}: expected changed={expected} (actual: {actual})"
