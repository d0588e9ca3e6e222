"""Caller-side memo cell that owns the previous dependency list."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, Optional

from depwatch.core.comparator import freeze_dependencies, has_changed
from depwatch.core.strategies import resolve_equality
from depwatch.core.types import DependencyList, EqualityLike, FrozenDependencies

logger = logging.getLogger(__name__)

_UNSET = object()


class MemoCell:
    """Cache one value and recompute it when its dependencies change."""

    def __init__(self, equals: EqualityLike = None):
        self.equals = resolve_equality(equals)
        self.deps: Optional[FrozenDependencies] = None
        self.recompute_count = 0
        self._value: Any = _UNSET

    @property
    def value(self) -> Any:
        if self._value is _UNSET:
            raise LookupError("MemoCell has not computed a value yet")
        return self._value

    @property
    def has_value(self) -> bool:
        return self._value is not _UNSET

    def get(self, factory: Callable[[], Any], deps: Optional[DependencyList]) -> Any:
        """
        Return the cached value, recomputing it when ``deps`` changed.

        Passing ``deps=None`` recomputes on every call. An exception from
        ``factory`` propagates and leaves the cell untouched.
        """
        if deps is not None and self.has_value and not has_changed(self.deps, deps, self.equals):
            return self._value
        value = factory()
        self.deps = freeze_dependencies(deps)
        self._value = value
        self.recompute_count += 1
        logger.debug("Recomputed memo value (count=%d, deps=%r)", self.recompute_count, self.deps)
        return value

    def reset(self) -> None:
        self.deps = None
        self._value = _UNSET


def memoize(
    deps_fn: Callable[..., DependencyList],
    equals: EqualityLike = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator caching the last result until ``deps_fn(*args, **kwargs)`` changes."""

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        cell = MemoCell(equals)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            deps = deps_fn(*args, **kwargs)
            return cell.get(lambda: func(*args, **kwargs), deps)

        _wrapper.memo_cell = cell  # type: ignore[attr-defined]
        return _wrapper

    return _decorator


__all__ = ["MemoCell", "memoize"]
