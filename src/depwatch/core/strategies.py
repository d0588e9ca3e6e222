"""Strategy Registry: named equality strategies for dependency comparison."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional

from pydantic import BaseModel, Field

from depwatch.core.equality import approx_equals, object_is, shallow_equals, value_equals
from depwatch.core.types import EqualityFn, EqualityLike


class UnknownStrategyError(KeyError):
    """Raised when an equality strategy name is not registered."""

    def __init__(self, name: str, available: Iterable[str]):
        self.name = name
        self.available = list(available)
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown equality strategy: {self.name}. Available: {', '.join(self.available)}"


class EqualityRegistry(BaseModel):
    """Registry mapping strategy names to equality functions."""

    items: Dict[str, EqualityFn] = Field(default_factory=dict)

    model_config = {"arbitrary_types_allowed": True}

    def register(self, name: str, equals: EqualityFn) -> None:
        """
        Register a new equality strategy.

        Args:
            name: Strategy name used in scenario files and on the CLI
            equals: Pure two-argument predicate

        Raises:
            ValueError: If the name is already registered
            TypeError: If equals is not callable
        """
        if name in self.items:
            raise ValueError(f"Duplicate registration: {name}")
        if not callable(equals):
            raise TypeError(f"Equality strategy '{name}' must be callable")
        self.items[name] = equals

    def get(self, name: str) -> EqualityFn:
        if name not in self.items:
            raise UnknownStrategyError(name, self.names())
        return self.items[name]

    def names(self) -> list[str]:
        return sorted(self.items.keys())

    def __contains__(self, name: object) -> bool:
        return name in self.items

    @classmethod
    def with_defaults(cls) -> "EqualityRegistry":
        registry = cls()
        registry.register("identity", object_is)
        registry.register("value", value_equals)
        registry.register("shallow", shallow_equals)
        registry.register("approx", approx_equals())
        return registry


# Strategies that accept an absolute tolerance
_TOLERANT_FACTORIES: Dict[str, Callable[[float], EqualityFn]] = {
    "approx": lambda tolerance: approx_equals(abs_tol=tolerance),
}

# Global singleton instance
_global_equality_registry = EqualityRegistry.with_defaults()


def get_equality_registry() -> EqualityRegistry:
    """Get the global equality registry instance."""
    return _global_equality_registry


def register_equality(name: str, equals: EqualityFn) -> None:
    """Convenience function to register a strategy on the global registry."""
    _global_equality_registry.register(name, equals)


def resolve_equality(equals: EqualityLike, registry: Optional[EqualityRegistry] = None) -> EqualityFn:
    """
    Turn an equality argument into a callable.

    ``None`` selects identity equality, a string is looked up in the
    registry and a callable is returned unchanged.
    """
    if equals is None:
        return object_is
    if isinstance(equals, str):
        return (registry or _global_equality_registry).get(equals)
    if callable(equals):
        return equals
    raise TypeError(f"equals must be a callable or a strategy name, got {type(equals).__name__}")


def build_equality(
    name: str,
    tolerance: Optional[float] = None,
    registry: Optional[EqualityRegistry] = None,
) -> EqualityFn:
    """
    Build a named strategy, optionally with an absolute tolerance.

    Raises:
        UnknownStrategyError: If the name is not registered
        ValueError: If a tolerance is given for a strategy that has none
    """
    equals = resolve_equality(name, registry)
    if tolerance is None:
        return equals
    factory = _TOLERANT_FACTORIES.get(name)
    if factory is None:
        raise ValueError(f"Strategy '{name}' does not accept a tolerance")
    return factory(tolerance)


__all__ = [
    "EqualityRegistry",
    "UnknownStrategyError",
    "get_equality_registry",
    "register_equality",
    "resolve_equality",
    "build_equality",
]
