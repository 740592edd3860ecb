"""Centralized logging helpers.

Provides a single ``configure_logging`` entry point plus small helpers used by
modules to attach structured context to debug records without paying for it
when debug logging is off.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict

from constants import Constants

_CONTEXT_KEYS = ("event", "component", "action", "outcome", "target", "count")


def _level_from_env() -> int:
    name = os.environ.get(Constants.ENV_LOG_LEVEL, "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Configure the root logger once.

    Level is read from ``PROJMGR_LOG_LEVEL`` (default INFO). Calling this more
    than once only updates the level.
    """
    root = logging.getLogger()
    level = _level_from_env()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True if ``logger`` would emit DEBUG records."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping for structured log records.

    None values are dropped. Unknown keys are kept under ``ctx_`` to avoid
    clashing with reserved LogRecord attributes.

    Example:
        logger.debug("Parsed", extra=extra_context(event="function_exit",
                                                   component="codec"))
    """
    extra: Dict[str, Any] = {}
    for key, value in fields.items():
        if value is None:
            continue
        if key in _CONTEXT_KEYS:
            extra[key] = value
        else:
            extra[f"ctx_{key}"] = value
    return extra


class Timer:
    """Context manager measuring elapsed wall time in milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: float = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = 0.0
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        """Elapsed milliseconds; measured up to now while still running."""
        end = self._end or time.perf_counter()
        return int((end - self._start) * 1000)
