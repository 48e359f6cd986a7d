from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Dict

from ..utils.logging import sanitize_log_message
from .config import LOG_TIMEZONE


class SafeFormatter(logging.Formatter):
    """
    A logging formatter that sanitizes messages before formatting.

    This ensures that:
    1. Credentials embedded in URLs are masked.
    2. Control characters (newlines, etc.) are escaped to prevent log injection.
    3. ANSI codes are stripped.
    """

    def format(self, record: logging.LogRecord) -> str:
        # Merge args first so scraped values passed as arguments are covered too.
        record.msg = sanitize_log_message(record.getMessage())
        record.args = ()
        return super().format(record)


class SafeJSONFormatter(logging.Formatter):
    """JSON logging formatter that sanitizes values."""

    _DEFAULT_FIELDS = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        sanitized_msg = sanitize_log_message(record.getMessage())

        timestamp = datetime.fromtimestamp(record.created, LOG_TIMEZONE)
        payload: Dict[str, Any] = {
            "timestamp": timestamp.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "message": sanitized_msg,
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)

        extras: Dict[str, Any] = {}
        for key, value in record.__dict__.items():
            if key in self._DEFAULT_FIELDS:
                continue
            if isinstance(value, str):
                extras[key] = sanitize_log_message(value)
            else:
                extras[key] = value
        if extras:
            payload["extra"] = extras

        return json.dumps(payload, ensure_ascii=False, default=str)


def _moscow_time_converter(timestamp: float | None) -> tuple:
    effective_timestamp = (
        timestamp
        if timestamp is not None
        else datetime.now(tz=LOG_TIMEZONE).timestamp()
    )
    return datetime.fromtimestamp(effective_timestamp, LOG_TIMEZONE).timetuple()


def _make_formatter(log_format: str = "plain") -> logging.Formatter:
    if log_format == "json":
        return SafeJSONFormatter()

    fmt = "%(asctime)s %(levelname)s %(threadName)s %(name)s: %(message)s"
    formatter = SafeFormatter(fmt)
    formatter.converter = _moscow_time_converter
    return formatter
