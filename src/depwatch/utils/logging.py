from __future__ import annotations
import logging
from functools import wraps
from typing import Any, Callable

from depwatch.utils.error_formatting import format_value

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging for CLI runs."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)


def log_calls(logger_name: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator tracing calls at DEBUG level; argument reprs are truncated."""

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        logger = logging.getLogger(logger_name or func.__module__)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            if logger.isEnabledFor(logging.DEBUG):
                rendered = [format_value(a) for a in args]
                rendered += [f"{k}={format_value(v)}" for k, v in kwargs.items()]
                logger.debug("%s(%s)", func.__name__, ", ".join(rendered))
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                logger.debug("%s raised %s", func.__name__, type(exc).__name__, exc_info=True)
                raise

        return _wrapper

    return _decorator
