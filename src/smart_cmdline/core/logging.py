"""Logging helpers for smart-cmdline."""

import json
import logging
import os
import sys
from datetime import UTC, datetime

from smart_cmdline.core.constants import VALID_LOG_FORMATS, VALID_LOG_LEVELS

_LOG_RECORD_RESERVED_FIELDS = set(logging.makeLogRecord({}).__dict__.keys()) | {"message", "asctime", "extra_fields"}


def _safe_record_message(record: logging.LogRecord) -> str:
    try:
        return record.getMessage()
    except Exception:
        # Bad placeholders must not break the log line itself.
        return f"{getattr(record, 'msg', '')} [log-message-format-error]"


def _is_reserved_or_private_record_key(key: object) -> bool:
    if not isinstance(key, str):
        return True
    return key in _LOG_RECORD_RESERVED_FIELDS or key.startswith("_")


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging output.

    Each log record becomes a single JSON object on one line. Contextual
    fields attached through ``extra`` or ``with_log_context`` are merged
    into the object.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": _safe_record_message(record),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extra_fields = {}
        record_extra_fields = getattr(record, "extra_fields", None)
        if isinstance(record_extra_fields, dict):
            extra_fields.update(record_extra_fields)

        for key, value in record.__dict__.items():
            if _is_reserved_or_private_record_key(key):
                continue
            extra_fields.setdefault(key, value)

        log_entry.update(extra_fields)
        return json.dumps(log_entry, default=str)


class ContextLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges contextual fields into record extras."""

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra")
        merged_extra = dict(self.extra)
        if isinstance(extra, dict):
            merged_extra.update(extra)
        kwargs["extra"] = merged_extra
        return msg, kwargs


def with_log_context(
    logger: logging.Logger | logging.LoggerAdapter, **context: object
) -> logging.Logger | logging.LoggerAdapter:
    """Return a logger enriched with persistent contextual fields."""
    base_logger = logger
    existing_context: dict[str, object] = {}
    if isinstance(logger, logging.LoggerAdapter):
        existing_context = dict(getattr(logger, "extra", None) or {})
        base_logger = logger.logger

    if not isinstance(base_logger, logging.Logger):
        # Test doubles are passed through untouched.
        return logger

    existing_context.update({k: v for k, v in context.items() if v is not None})
    return ContextLoggerAdapter(base_logger, existing_context)


def setup_logging(log_level: str | None = None, log_format: str = "text") -> logging.Logger:
    """Setup console logging on stderr.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format - "text" (default) or "json" for structured logging

    Returns:
        The package logger

    Priority: 1) Passed parameter, 2) Environment variable LOG_LEVEL, 3) Default INFO
    """
    if log_level is None:
        log_level = os.environ.get("LOG_LEVEL", "INFO")

    if log_level.upper() not in VALID_LOG_LEVELS:
        print(f"Warning: Invalid log level '{log_level}', using INFO", file=sys.stderr)
        log_level = "INFO"

    if log_format.lower() not in VALID_LOG_FORMATS:
        print(f"Warning: Invalid log format '{log_format}', using text", file=sys.stderr)
        log_format = "text"

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    # Clear any existing handlers from root logger
    for handler in logging.root.handlers[:]:
        handler.close()
        logging.root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if log_format.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s"))
    handler.setLevel(numeric_level)
    logging.root.addHandler(handler)
    logging.root.setLevel(numeric_level)

    logger = logging.getLogger("smart_cmdline")
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logger.debug(f"Logging initialized at {log_level.upper()} ({log_format.lower()})")
    return logger
