"""Structured logging configuration for clreport.

This module provides:
- Structured JSON logging for machine consumption (interactive output uses
  rich in the CLI)
- Context managers for tagging records with the report being rendered
- Timing of render operations
"""

import json
import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Generator

from clreport.core.exceptions import ConfigurationError

LOGGER_NAMESPACE = "clreport"

# Context variables for render tracking
report_id_var: ContextVar[str | None] = ContextVar("report_id", default=None)
classloader_var: ContextVar[str | None] = ContextVar("classloader", default=None)

_RESERVED_RECORD_KEYS = frozenset({
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "taskName", "message",
})


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        report_id = report_id_var.get()
        if report_id:
            log_data["report_id"] = report_id

        classloader = classloader_var.get()
        if classloader:
            log_data["classloader"] = classloader

        log_data["source"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        # Extra fields passed through `extra=`
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def configure_logging(
    level: str = "WARNING",
    stream: Any = None,
) -> None:
    """Configure structured JSON logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Output stream (defaults to sys.stderr)

    Raises:
        ConfigurationError: If the level name is unknown
    """
    if stream is None:
        stream = sys.stderr

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ConfigurationError("log_level", f"Unknown log level: {level}", level)

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric_level)
    handler.setFormatter(StructuredFormatter())

    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the clreport namespace.

    Args:
        name: Logger name (will be prefixed with 'clreport.')

    Returns:
        Logger instance
    """
    if name != LOGGER_NAMESPACE and not name.startswith(f"{LOGGER_NAMESPACE}."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return logging.getLogger(name)


@contextmanager
def log_context(
    report_id: str | None = None,
    classloader: str | None = None,
) -> Generator[None, None, None]:
    """Context manager to add logging context.

    Args:
        report_id: Optional identifier of the report being rendered
        classloader: Optional description of the classloader being rendered
    """
    report_token = report_id_var.set(report_id) if report_id is not None else None
    loader_token = classloader_var.set(classloader) if classloader is not None else None

    try:
        yield
    finally:
        if loader_token is not None:
            classloader_var.reset(loader_token)
        if report_token is not None:
            report_id_var.reset(report_token)


@contextmanager
def log_timing(
    logger: logging.Logger,
    operation: str,
    level: int = logging.DEBUG,
) -> Generator[dict[str, Any], None, None]:
    """Context manager to log operation timing.

    Args:
        logger: Logger to use
        operation: Description of the operation
        level: Logging level for timing messages

    Yields:
        Dictionary that will be populated with timing info
    """
    timing_info: dict[str, Any] = {"operation": operation}
    start_time = time.perf_counter()

    logger.log(level, f"Starting: {operation}")

    try:
        yield timing_info
        timing_info["success"] = True
    except Exception as e:
        timing_info["success"] = False
        timing_info["error"] = str(e)
        raise
    finally:
        elapsed = time.perf_counter() - start_time
        timing_info["duration_ms"] = round(elapsed * 1000, 2)

        status = "completed" if timing_info.get("success") else "failed"
        logger.log(
            level,
            f"Finished: {operation} ({status} in {timing_info['duration_ms']:.2f}ms)",
            extra={"timing": timing_info},
        )
