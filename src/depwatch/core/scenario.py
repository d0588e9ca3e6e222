from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from depwatch.core.comparator import DependencyDiff, diff_dependencies
from depwatch.core.strategies import build_equality


class ScenarioResult(BaseModel):
    scenario: "Scenario"
    diff: DependencyDiff

    @property
    def passed(self) -> Optional[bool]:
        """None when the scenario carries no expectation."""
        if self.scenario.expected is None:
            return None
        return self.diff.changed == self.scenario.expected


class Scenario(BaseModel):
    """A pair of dependency lists compared under a named strategy."""

    name: str
    previous: Optional[List[Any]] = None
    next: List[Any] = Field(default_factory=list)
    strategy: str = "identity"
    tolerance: Optional[float] = None
    expected: Optional[bool] = None
    source: Optional[str] = None

    def evaluate(self) -> ScenarioResult:
        equals = build_equality(self.strategy, self.tolerance)
        return ScenarioResult(scenario=self, diff=diff_dependencies(self.previous, self.next, equals))


ScenarioResult.model_rebuild()

__all__ = ["Scenario", "ScenarioResult"]
