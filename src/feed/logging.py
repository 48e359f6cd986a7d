"""Logging utilities for the feed builder."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import FeedSettings, build_settings
from .logging_safe import SafeFormatter, SafeJSONFormatter, _make_formatter

ERROR_LOG_NAME = "errors.log"
DIAGNOSTICS_LOG_NAME = "diagnostics.log"

_LOGGING_CONFIGURED = False


class MaxLevelFilter(logging.Filter):
    """Filter that only lets records up to ``max_level`` through."""

    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - simple predicate
        return record.levelno <= self._max_level


def configure_logging(settings: Optional[FeedSettings] = None, *, force: bool = False) -> None:
    """Configure the default logging handlers for the feed builder."""

    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED and not force:
        return

    settings = settings or build_settings()

    level = getattr(logging, settings.log_level, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, force=force)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    safe_formatter = _make_formatter(settings.log_format)

    for handler in root_logger.handlers:
        handler.setFormatter(safe_formatter)
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(level)

    if settings.log_dir is not None:
        settings.log_dir.mkdir(parents=True, exist_ok=True)

        error_handler = RotatingFileHandler(
            settings.log_dir / ERROR_LOG_NAME,
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(safe_formatter)
        root_logger.addHandler(error_handler)

        diagnostics_handler = RotatingFileHandler(
            settings.log_dir / DIAGNOSTICS_LOG_NAME,
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
            encoding="utf-8",
        )
        diagnostics_handler.setLevel(logging.INFO)
        diagnostics_handler.addFilter(MaxLevelFilter(logging.ERROR - 1))
        diagnostics_handler.setFormatter(safe_formatter)
        root_logger.addHandler(diagnostics_handler)

    _LOGGING_CONFIGURED = True


__all__ = [
    "DIAGNOSTICS_LOG_NAME",
    "ERROR_LOG_NAME",
    "MaxLevelFilter",
    "SafeFormatter",
    "SafeJSONFormatter",
    "configure_logging",
]
