from .comparator import DependencyChange, DependencyDiff, diff_dependencies, freeze_dependencies, has_changed
from .equality import approx_equals, object_is, shallow_equals, value_equals
from .memo import MemoCell, memoize
from .strategies import (
    EqualityRegistry,
    UnknownStrategyError,
    build_equality,
    get_equality_registry,
    register_equality,
    resolve_equality,
)

__all__ = [
    "has_changed",
    "diff_dependencies",
    "freeze_dependencies",
    "DependencyDiff",
    "DependencyChange",
    "object_is",
    "value_equals",
    "shallow_equals",
    "approx_equals",
    "MemoCell",
    "memoize",
    "EqualityRegistry",
    "UnknownStrategyError",
    "build_equality",
    "get_equality_registry",
    "register_equality",
    "resolve_equality",
]
