"""
app/core/logging.py

Purpose: Logging configuration

- Standardizes log format
- Controls log levels
- JSON logs in production, readable logs in development
- Context tracking via `extra` or LogContext (booking_id, user_id, location_id, table)
"""

import logging
import sys
import json
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict
from app.core.config import settings


# Record attributes rendered when a caller attaches them via `extra`
CONTEXT_FIELDS = ("booking_id", "user_id", "location_id", "table")

# Fields bound by the innermost active LogContext in this task
_log_context: ContextVar[Dict[str, Any]] = ContextVar("log_context", default={})


class LogContext:
    """
    Binds context fields to every log line written inside the block.

    Usage:
        with LogContext(user_id=user_id) as ctx:
            ...
            ctx.update(booking_id=booking_id)

    Values live in a ContextVar, so concurrent requests do not see each
    other's fields. Explicit `extra` values on a single call take precedence.
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._token = None

    def __enter__(self) -> "LogContext":
        self._token = _log_context.set({**_log_context.get(), **self.fields})
        return self

    def update(self, **fields: Any) -> None:
        self.fields.update(fields)
        _log_context.set({**_log_context.get(), **fields})

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _log_context.reset(self._token)


_base_record_factory = logging.getLogRecordFactory()


def _record_factory(*args, **kwargs) -> logging.LogRecord:
    # Snapshot under its own attribute; `extra` may not overwrite record attributes
    record = _base_record_factory(*args, **kwargs)
    record.log_context = dict(_log_context.get())
    return record


logging.setLogRecordFactory(_record_factory)


def context_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """
    Returns the context fields for a record: active LogContext values
    overlaid by anything passed through `extra`.
    """
    bound = getattr(record, "log_context", {})
    fields = {k: v for k, v in bound.items() if k in CONTEXT_FIELDS and v is not None}
    for field in CONTEXT_FIELDS:
        if hasattr(record, field):
            fields[field] = getattr(record, field)
    return fields


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for production so logs can be parsed by monitoring tools.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        log_data.update(context_fields(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class DevelopmentFormatter(logging.Formatter):
    """
    Human-readable formatter for development environment.
    """

    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[35m",   # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        message = f"{color}[{timestamp}] {record.levelname:<8}{self.RESET} {record.name}: {record.getMessage()}"

        context_parts = [f"{field}={value}" for field, value in context_fields(record).items()]
        if context_parts:
            message += f" [{', '.join(context_parts)}]"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


def setup_logging():
    """
    Configures application-wide logging with appropriate formatters.
    Uses JSON format in production, human-readable in development.
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)

    if settings.is_production:
        formatter = StructuredFormatter()
    else:
        formatter = DevelopmentFormatter()

    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # Third-party noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logger = logging.getLogger("bagdrop")
    logger.info(
        f"Logging configured (environment={settings.ENVIRONMENT}, level={settings.LOG_LEVEL})"
    )

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger namespaced under "bagdrop"
    """
    return logging.getLogger(f"bagdrop.{name}")
