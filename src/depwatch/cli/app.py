"""
depwatch CLI: compare dependency lists and check scenario files.

- compare: diff two dependency lists given inline as YAML sequences
- check: evaluate scenario files and verify their expectations
- strategies: list registered equality strategies
"""

from __future__ import annotations

from typing import Any, List, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from depwatch.cli.formatters import build_diff_table, build_results_table
from depwatch.cli.load_helpers import load_or_exit
from depwatch.cli.paths import scenarios_path
from depwatch.core.comparator import diff_dependencies
from depwatch.core.strategies import UnknownStrategyError, build_equality, get_equality_registry
from depwatch.io import load_scenarios
from depwatch.utils.error_formatting import format_expectation_failure
from depwatch.utils.logging import configure_logging, log_calls

app = typer.Typer(help="depwatch CLI: compare dependency lists and check scenario files.")
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"),
) -> None:
    try:
        configure_logging(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level")


def _parse_list(text: str, param_hint: str, *, allow_none: bool = False) -> Optional[List[Any]]:
    try:
        value = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise typer.BadParameter(f"not valid YAML: {exc}", param_hint=param_hint)
    if value is None and allow_none:
        return None
    if not isinstance(value, list):
        raise typer.BadParameter("expected a YAML sequence such as '[1, a]'", param_hint=param_hint)
    return value


@app.command()
@log_calls()
def compare(
    previous: str = typer.Argument(..., help="Previous dependency list, e.g. '[1, a]' or 'null'"),
    next: str = typer.Argument(..., help="Next dependency list, e.g. '[2, a]'"),
    strategy: str = typer.Option("identity", "--strategy", "-s", help="Equality strategy name"),
    tolerance: Optional[float] = typer.Option(None, "--tolerance", "-t", help="Absolute tolerance (approx only)"),
) -> None:
    """Compare two dependency lists."""
    prev_values = _parse_list(previous, "PREVIOUS", allow_none=True)
    next_values = _parse_list(next, "NEXT")

    try:
        equals = build_equality(strategy, tolerance)
    except (UnknownStrategyError, ValueError) as exc:
        console.print(f"[red]Invalid strategy:[/red] {exc}")
        raise typer.Exit(code=2)

    diff = diff_dependencies(prev_values, next_values, equals)
    console.print(build_diff_table(diff, prev_values, next_values))
    verdict = "[yellow]changed[/yellow]" if diff.changed else "[green]unchanged[/green]"
    console.print(f"Result: {verdict}")


@app.command()
@log_calls()
def check(
    path: Optional[str] = typer.Argument(None, help="Scenario file or folder (default: ./scenarios)"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Evaluate scenario files and verify their expectations."""
    scenarios = load_or_exit(load_scenarios, scenarios_path(path), console=console, verbose_errors=verbose)
    if not scenarios:
        console.print("[yellow]No scenarios found[/yellow]")
        return

    results = [scenario.evaluate() for scenario in scenarios]
    console.print(build_results_table(results))

    failures = [r for r in results if r.passed is False]
    if failures:
        console.print(f"[red]{len(failures)} scenario(s) failed:[/red]")
        for result in failures:
            expected = bool(result.scenario.expected)
            message = format_expectation_failure(result.scenario.name, expected, result.diff.changed)
            console.print(f" - {escape(message)}")
        raise typer.Exit(code=1)

    console.print(f"[green]OK[/green] Evaluated {len(results)} scenario(s)")


@app.command()
def strategies() -> None:
    """List registered equality strategies."""
    for name in get_equality_registry().names():
        console.print(name)


if __name__ == "__main__":
    app()
