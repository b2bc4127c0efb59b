"""Centralized logging helpers.

One place configures the root logger so every module can simply call
``logging.getLogger(__name__)``. DEBUG traces carry structured context in the
``extra`` mapping; ``extra_context`` keeps those keys consistent.
"""
from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Optional
from urllib.parse import urlsplit, urlunsplit

from constants import Constants

_CONFIGURED_HANDLER_NAME = "spring_cli_console"


def _level_from_env(default: int = logging.INFO) -> int:
    name = os.environ.get(Constants.ENV_LOG_LEVEL, "").strip().upper()
    if not name:
        return default
    value = getattr(logging, name, None)
    return value if isinstance(value, int) else default


def configure_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> None:
    """Configure the root logger once; repeated calls only adjust the level.

    Args:
        level: Explicit level; falls back to SPRING_CLI_LOG_LEVEL, then INFO.
        log_file: Optional path of an additional file handler.
    """
    root = logging.getLogger()
    resolved = level if level is not None else _level_from_env()

    if not any(getattr(h, "name", None) == _CONFIGURED_HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_CONFIGURED_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(Constants.LOG_FILE_FORMAT))
        root.addHandler(file_handler)

    root.setLevel(resolved)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build the ``extra`` mapping for a structured log record.

    None values are dropped so records only carry what is known.
    """
    return {k: v for k, v in fields.items() if v is not None}


def safe_url(url: str) -> str:
    """Strip credentials and query strings from a URL before logging it."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return "<invalid-url>"
    netloc = parts.hostname or ""
    if parts.port:
        netloc = f"{netloc}:{parts.port}"
    return urlunsplit((parts.scheme, netloc, parts.path, "", ""))


class Timer:
    """Context manager measuring wall-clock duration in milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)
