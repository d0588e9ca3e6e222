"""
Positional change detection over dependency lists.

``has_changed`` answers whether a memoized computation, effect or callback
must run again. ``diff_dependencies`` reports the full picture for display.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from depwatch.core.strategies import resolve_equality
from depwatch.core.types import ChangeReason, DependencyList, EqualityLike, FrozenDependencies

logger = logging.getLogger(__name__)


def has_changed(
    previous: Optional[DependencyList],
    next: DependencyList,
    equals: EqualityLike = None,
) -> bool:
    """
    Decide whether a dependency list changed since the previous evaluation.

    Args:
        previous: List from the preceding evaluation, or None on the first one
        next: List for the current evaluation
        equals: Equality function or registered strategy name (identity by default)

    Returns:
        True on the first evaluation, on a length mismatch, or when any
        position differs under ``equals``; False otherwise
    """
    if previous is None:
        return True
    if len(previous) != len(next):
        return True
    same = resolve_equality(equals)
    for before, after in zip(previous, next):
        if not same(before, after):
            return True
    return False


def freeze_dependencies(values: Optional[DependencyList]) -> Optional[FrozenDependencies]:
    """Capture a dependency list as an immutable tuple."""
    if values is None:
        return None
    return tuple(values)


class DependencyChange(BaseModel):
    """A single position that differs between two dependency lists."""

    index: int
    before: Any
    after: Any

    model_config = {"arbitrary_types_allowed": True}


class DependencyDiff(BaseModel):
    """Result of comparing every position of two dependency lists."""

    changed: bool
    reason: ChangeReason
    changed_indices: List[int] = Field(default_factory=list)
    previous_length: Optional[int] = None
    next_length: int

    def changes(self, previous: Optional[DependencyList], next: DependencyList) -> List[DependencyChange]:
        """Pair each changed index with its before/after values."""
        if self.reason != "value" or previous is None:
            return []
        return [DependencyChange(index=i, before=previous[i], after=next[i]) for i in self.changed_indices]

    def describe(self) -> str:
        if self.reason == "initial":
            return "changed: first evaluation"
        if self.reason == "length":
            return f"changed: length {self.previous_length} -> {self.next_length}"
        if self.reason == "value":
            positions = ", ".join(str(i) for i in self.changed_indices)
            return f"changed at position(s) {positions}"
        return "unchanged"


def diff_dependencies(
    previous: Optional[DependencyList],
    next: DependencyList,
    equals: EqualityLike = None,
) -> DependencyDiff:
    """
    Compare two dependency lists position by position.

    Unlike ``has_changed`` this visits every position so that all changed
    indices are reported. ``changed`` always agrees with ``has_changed``.
    """
    next_length = len(next)
    if previous is None:
        diff = DependencyDiff(changed=True, reason="initial", next_length=next_length)
    elif len(previous) != next_length:
        diff = DependencyDiff(
            changed=True,
            reason="length",
            previous_length=len(previous),
            next_length=next_length,
        )
    else:
        same = resolve_equality(equals)
        indices = [i for i, (before, after) in enumerate(zip(previous, next)) if not same(before, after)]
        diff = DependencyDiff(
            changed=bool(indices),
            reason="value" if indices else "unchanged",
            changed_indices=indices,
            previous_length=len(previous),
            next_length=next_length,
        )
    logger.debug("Dependency diff: %s", diff.describe())
    return diff


__all__ = [
    "has_changed",
    "freeze_dependencies",
    "diff_dependencies",
    "DependencyDiff",
    "DependencyChange",
]
