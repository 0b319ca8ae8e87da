"""Structured logging with secret redaction for KNoT Cloud clients.

JSON structured logging to stderr, with device tokens scrubbed from every
record before it is emitted.
"""

import json
import logging
import os
import sys
import threading
from datetime import datetime, timezone
from typing import Optional, Set


ENV_LOG_LEVEL = "KNOT_CLOUD_LOG_LEVEL"
REDACTED = "[REDACTED]"

# Global registry for secrets to redact
_SECRET_REGISTRY: Set[str] = set()
_SECRET_REGISTRY_LOCK = threading.Lock()


class SecretRedactionFilter(logging.Filter):
    """Logging filter that automatically redacts registered secrets."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter log records to redact secrets."""
        if isinstance(record.msg, str):
            record.msg = redact_secrets(record.msg)

        if record.args and isinstance(record.args, tuple):
            record.args = tuple(
                redact_secrets(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )

        return True


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add extra fields if present
        if hasattr(record, 'extra_fields'):
            log_entry.update(record.extra_fields)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def init_module(level: Optional[str] = None) -> logging.Handler:
    """Initialize stderr logging with JSON format and secret redaction.

    Call this once from the application entry point, before connecting.

    Sets up a logging configuration that:
    - Writes JSON logs to stderr
    - Automatically redacts registered secrets
    - Respects the KNOT_CLOUD_LOG_LEVEL environment variable
      (an explicit ``level`` argument wins)

    Returns:
        The installed handler, so callers can detach it again.
    """
    log_level = (level or os.getenv(ENV_LOG_LEVEL, "INFO")).upper()

    numeric_level = getattr(logging, log_level, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(numeric_level)
    stderr_handler.addFilter(SecretRedactionFilter())
    stderr_handler.setFormatter(JSONFormatter())

    root_logger.addHandler(stderr_handler)

    logging.getLogger(__name__).info("KNoT Cloud SDK logging initialized", extra={
        'extra_fields': {
            'log_level': log_level,
            'handler': 'stderr',
            'format': 'json'
        }
    })
    return stderr_handler


def register_secret_for_redaction(secret_value: Optional[str]) -> None:
    """Register a secret value for automatic redaction in logs.

    Args:
        secret_value: The secret string to redact from logs
    """
    if not secret_value or len(secret_value.strip()) == 0:
        return

    with _SECRET_REGISTRY_LOCK:
        _SECRET_REGISTRY.add(secret_value.strip())


def redact_secrets(text: str) -> str:
    """Redact all registered secrets from the given text.

    Args:
        text: The text to redact secrets from

    Returns:
        The text with secrets replaced by [REDACTED]
    """
    if not text:
        return text

    result = text
    with _SECRET_REGISTRY_LOCK:
        for secret in _SECRET_REGISTRY:
            if secret in result:
                result = result.replace(secret, REDACTED)

    return result


def clear_secret_registry() -> None:
    """Clear all registered secrets (mainly for testing)."""
    with _SECRET_REGISTRY_LOCK:
        _SECRET_REGISTRY.clear()


def get_registered_secrets_count() -> int:
    """Get the number of registered secrets (for testing/debugging)."""
    with _SECRET_REGISTRY_LOCK:
        return len(_SECRET_REGISTRY)
