"""Structured logging infrastructure for tabchart.

This module provides JSON-formatted structured logging with arbitrary extra
fields. Log records go to stderr by default because stdout may carry the
exported chart.
"""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

__all__ = ["StructuredLogger", "configure_logging", "get_logger"]

LOG_LEVEL_ENV = "TABCHART_LOG_LEVEL"

_RESERVED_FIELDS = {
    "name",
    "msg",
    "args",
    "created",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "thread",
    "threadName",
    "taskName",
    "exc_info",
    "exc_text",
    "stack_info",
}


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs JSON-structured log entries."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: The log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_entry = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_entry.update({key: value for key, value in record.__dict__.items() if key not in _RESERVED_FIELDS})
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class StructuredLogger:
    """Wrapper around standard logger with structured logging support."""

    def __init__(self, logger: logging.Logger) -> None:
        """Initialize structured logger.

        Args:
            logger: The underlying Python logger instance.
        """
        self._logger = logger

    def _log(self, level: int, msg: str, **kwargs: Any) -> None:
        self._logger.log(level, msg, extra=dict(kwargs))

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log error message with the active exception traceback."""
        self._logger.error(msg, exc_info=True, extra=dict(kwargs))


def _level_from_env(default: str = "INFO") -> int:
    return getattr(logging, os.getenv(LOG_LEVEL_ENV, default).upper(), logging.INFO)


def configure_logging(level: int | None = None, stream: TextIO | None = None) -> None:
    """Install the JSON formatter on the tabchart root logger.

    Args:
        level: Log level; defaults to TABCHART_LOG_LEVEL or INFO.
        stream: Destination stream; defaults to stderr.
    """
    root = logging.getLogger("tabchart")
    root.handlers.clear()
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter())
    root.addHandler(handler)
    root.propagate = False
    root.setLevel(level if level is not None else _level_from_env())


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance.

    Loggers under the `tabchart` namespace inherit the handler installed by
    `configure_logging`; any other name gets its own stderr handler.

    Args:
        name: Logger name (typically __name__ of the calling module).

    Returns:
        Configured StructuredLogger instance.
    """
    logger = logging.getLogger(name)

    if not name.startswith("tabchart") and not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False
        logger.setLevel(_level_from_env())

    return StructuredLogger(logger)
