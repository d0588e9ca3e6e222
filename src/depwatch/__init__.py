"""Positional change detection for dependency lists."""

from depwatch.core import (
    DependencyDiff,
    MemoCell,
    diff_dependencies,
    freeze_dependencies,
    has_changed,
    memoize,
    object_is,
)

__version__ = "0.1.0"

__all__ = [
    "has_changed",
    "diff_dependencies",
    "freeze_dependencies",
    "DependencyDiff",
    "MemoCell",
    "memoize",
    "object_is",
]
