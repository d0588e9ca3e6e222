"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from rich.markup import escape
from rich.table import Table

from depwatch.core.comparator import DependencyDiff
from depwatch.core.scenario import ScenarioResult
from depwatch.utils.error_formatting import format_dependencies, format_value


def format_status(passed: Optional[bool]) -> str:
    if passed is None:
        return "[dim]-[/dim]"
    return "[green]PASS[/green]" if passed else "[red]FAIL[/red]"


def build_diff_table(
    diff: DependencyDiff,
    previous: Optional[Sequence[Any]],
    next: Sequence[Any],
) -> Table:
    """Table of positional comparisons between two dependency lists."""
    table = Table(title=diff.describe())
    table.add_column("Index", justify="right")
    table.add_column("Before")
    table.add_column("After")
    table.add_column("Changed")

    changed = set(diff.changed_indices)
    width = max(len(previous) if previous is not None else 0, len(next))
    for idx in range(width):
        before = escape(format_value(previous[idx])) if previous is not None and idx < len(previous) else "-"
        after = escape(format_value(next[idx])) if idx < len(next) else "-"
        if diff.reason == "value":
            mark = "[yellow]yes[/yellow]" if idx in changed else "no"
        else:
            mark = "[dim]n/a[/dim]"
        table.add_row(str(idx), before, after, mark)
    return table


def build_results_table(results: Sequence[ScenarioResult]) -> Table:
    table = Table(title="Scenario Results")
    table.add_column("Scenario")
    table.add_column("Strategy")
    table.add_column("Previous")
    table.add_column("Next")
    table.add_column("Result")
    table.add_column("Status")

    for result in results:
        scenario = result.scenario
        strategy = scenario.strategy
        if scenario.tolerance is not None:
            strategy = f"{strategy} (±{scenario.tolerance})"
        table.add_row(
            escape(scenario.name),
            strategy,
            escape(format_dependencies(scenario.previous)),
            escape(format_dependencies(scenario.next)),
            result.diff.describe(),
            format_status(result.passed),
        )
    return table


__all__ = ["build_diff_table", "build_results_table", "format_status"]
