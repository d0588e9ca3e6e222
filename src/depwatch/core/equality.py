"""
Equality strategies for dependency comparison.

All strategies are pure two-argument predicates. ``object_is`` is the
default: values are the same when they are the same object, or the same
immutable scalar of the same type.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any

from depwatch.core.types import EqualityFn

_SCALAR_TYPES = (type(None), bool, int, float, complex, str, bytes)


def _same_float(a: float, b: float) -> bool:
    if math.isnan(a) and math.isnan(b):
        return True
    if a == 0.0 and b == 0.0:
        # 0.0 and -0.0 are distinct values
        return math.copysign(1.0, a) == math.copysign(1.0, b)
    return a == b


def object_is(a: Any, b: Any) -> bool:
    """Identity equality with value semantics for immutable scalars.

    ``1`` and ``True`` differ, as do ``1`` and ``1.0``; ``nan`` is the same
    as ``nan``. Containers and other objects are only equal to themselves.
    """
    if a is b:
        return True
    if type(a) is not type(b) or not isinstance(a, _SCALAR_TYPES):
        return False
    if isinstance(a, float):
        return _same_float(a, b)
    if isinstance(a, complex):
        return _same_float(a.real, b.real) and _same_float(a.imag, b.imag)
    return a == b


def value_equals(a: Any, b: Any) -> bool:
    """Structural equality using ``==``."""
    return bool(a == b)


def shallow_equals(a: Any, b: Any) -> bool:
    """Compare containers one level deep, items by ``object_is``."""
    if object_is(a, b):
        return True
    if isinstance(a, (list, tuple)) and type(a) is type(b):
        return len(a) == len(b) and all(object_is(x, y) for x, y in zip(a, b))
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(object_is(a[key], b[key]) for key in a)
    return False


def approx_equals(rel_tol: float = 1e-9, abs_tol: float = 0.0) -> EqualityFn:
    """Build an equality function tolerant to small numeric differences.

    Args:
        rel_tol: Relative tolerance passed to ``math.isclose``
        abs_tol: Absolute tolerance passed to ``math.isclose``

    Returns:
        Predicate comparing real numbers with ``math.isclose`` and anything
        else with ``object_is``
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError("Tolerances must be non-negative")

    def _approx(a: Any, b: Any) -> bool:
        if isinstance(a, Real) and isinstance(b, Real) and not isinstance(a, bool) and not isinstance(b, bool):
            return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
        return object_is(a, b)

    return _approx


__all__ = [
    "object_is",
    "value_equals",
    "shallow_equals",
    "approx_equals",
]
