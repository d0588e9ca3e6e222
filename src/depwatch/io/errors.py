from __future__ import annotations

"""Errors raised while loading scenario files."""

import os
from typing import Iterable

import yaml
from pydantic import ValidationError

MAX_REPORTED_ERRORS = 3


class LoaderError(RuntimeError):
    """Scenario loading failure carrying the offending file path."""

    def __init__(self, file_path: str, message: str, *, cause: Exception | None = None):
        self.file_path = file_path
        self.message = message
        self.cause = cause
        super().__init__(self._build_message())

    @property
    def location(self) -> str:
        """Relative file path, with line and column for YAML syntax errors."""
        path = self._relative_path(self.file_path)
        mark = getattr(self.cause, "problem_mark", None)
        if isinstance(self.cause, yaml.MarkedYAMLError) and mark is not None:
            return f"{path}:{mark.line + 1}:{mark.column + 1}"
        return path

    def _build_message(self) -> str:
        base = f"{self.message} ({self.location})"
        if isinstance(self.cause, ValidationError):
            return f"{base}: {self._format_validation_errors(self.cause.errors())}"
        if isinstance(self.cause, yaml.MarkedYAMLError):
            return f"{base}: {self.cause.problem}"
        if self.cause:
            return f"{base}: {self.cause}"
        return base

    @staticmethod
    def _relative_path(path: str) -> str:
        try:
            return os.path.relpath(path)
        except ValueError:  # pragma: no cover - path on another drive
            return path

    @staticmethod
    def _format_validation_errors(errors: Iterable[dict]) -> str:
        error_list = list(errors)
        snippets = [
            f"{'.'.join(str(entry) for entry in err.get('loc', ())) or '<root>'}: "
            f"{err.get('msg') or err.get('type') or 'validation error'}"
            for err in error_list[:MAX_REPORTED_ERRORS]
        ]
        if len(error_list) > MAX_REPORTED_ERRORS:
            snippets.append(f"... ({len(error_list) - MAX_REPORTED_ERRORS} more)")
        return "; ".join(snippets)

    def __str__(self) -> str:
        return self._build_message()


__all__ = ["LoaderError", "MAX_REPORTED_ERRORS"]
