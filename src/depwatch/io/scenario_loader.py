from __future__ import annotations
import glob
import logging
import os
from typing import Any, Dict, List
import yaml
from pydantic import ValidationError
from depwatch.core.scenario import Scenario
from depwatch.core.strategies import UnknownStrategyError, build_equality
from depwatch.io.errors import LoaderError
from depwatch.io.file_spec import ScenarioFileSpec

logger = logging.getLogger(__name__)


def _read_yaml_file(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Invalid YAML", cause=exc) from exc
    if not isinstance(data, dict):
        raise LoaderError(path, "Scenario file must contain a mapping")
    return data


def _scenario_files(path: str) -> List[str]:
    if os.path.isfile(path):
        return [path]
    files = glob.glob(os.path.join(path, "**", "*.yaml"), recursive=True)
    files += glob.glob(os.path.join(path, "**", "*.yml"), recursive=True)
    return sorted(files)


def load_scenarios(path: str) -> List[Scenario]:
    """Load comparison scenarios from a YAML file or a directory tree.

    Expected format:
    scenarios:
      - name: numbers_unchanged
        previous: [1, a]
        next: [1, a]
        strategy: identity
        expected: false
    """
    if not os.path.exists(path):
        return []
    scenarios: List[Scenario] = []
    seen: Dict[str, str] = {}
    for fp in _scenario_files(path):
        data = _read_yaml_file(fp)
        try:
            spec = ScenarioFileSpec.model_validate(data)
        except ValidationError as exc:
            raise LoaderError(fp, "Invalid scenario definition", cause=exc) from exc
        for entry in spec.scenarios:
            if entry.name in seen:
                raise LoaderError(fp, f"Duplicate scenario '{entry.name}' (first defined in {seen[entry.name]})")
            try:
                build_equality(entry.strategy, entry.tolerance)
            except (UnknownStrategyError, ValueError) as exc:
                raise LoaderError(fp, f"Invalid strategy for scenario '{entry.name}'", cause=exc) from exc
            seen[entry.name] = fp
            scenarios.append(entry.build(source=fp))
        logger.debug("Loaded %d scenario(s) from %s", len(spec.scenarios), fp)
    return scenarios
