from __future__ import annotations

"""Utilities for resolving default scenario paths."""

from pathlib import Path


def scenarios_path(path: str | None) -> str:
    return path or str(Path.cwd() / "scenarios")


__all__ = ["scenarios_path"]
