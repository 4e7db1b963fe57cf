"""Structured logging for secret sharing operations.

Provides:
- JSON structured output for log aggregation
- Human-readable colored output for development
- Session / party correlation for multiparty protocol runs
- Sensitive data masking (secrets and share values never reach a handler)
- Operation timing

Usage:
    from secretshares.logging import get_logger, sharing_context

    logger = get_logger(__name__)

    with sharing_context(session_id="auction-7", party_id=3):
        logger.info("Combining shares", n_shares=len(shares))
"""

import json
import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Callable, Iterator

# Context variables for protocol-run scoped data
session_id_var: ContextVar[str | None] = ContextVar("session_id", default=None)
party_id_var: ContextVar[int | None] = ContextVar("party_id", default=None)

# Field names whose values must never be logged
SENSITIVE_FIELDS = {
    "secret", "coefficient", "share_value", "password", "token", "private_key",
}
# Exact field names (too short to match as substrings)
SENSITIVE_NAMES = {"y", "value", "values", "shares"}


def mask_sensitive(data: dict[str, Any]) -> dict[str, Any]:
    """Mask sensitive values in a dictionary."""
    masked = {}
    for key, value in data.items():
        key_lower = key.lower()
        if key_lower in SENSITIVE_NAMES or any(s in key_lower for s in SENSITIVE_FIELDS):
            masked[key] = "[REDACTED]"
        elif isinstance(value, dict):
            masked[key] = mask_sensitive(value)
        else:
            masked[key] = value
    return masked


def _context_fields() -> dict[str, Any]:
    fields: dict[str, Any] = {}
    if (session_id := session_id_var.get()) is not None:
        fields["session_id"] = session_id
    if (party_id := party_id_var.get()) is not None:
        fields["party_id"] = party_id
    return fields


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_entry.update(_context_fields())

        if hasattr(record, "extra_fields"):
            log_entry.update(mask_sensitive(record.extra_fields))

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Source location for warnings and above
        if record.levelno >= logging.WARNING:
            log_entry["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(log_entry, default=str)


class HumanFormatter(logging.Formatter):
    """Human-readable log formatter for development."""

    COLORS = {
        "DEBUG": "\033[36m",    # Cyan
        "INFO": "\033[32m",     # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",    # Red
        "CRITICAL": "\033[35m", # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")

        context = _context_fields()
        prefix_parts = []
        if "session_id" in context:
            prefix_parts.append(f"session={str(context['session_id'])[:8]}")
        if "party_id" in context:
            prefix_parts.append(f"party={context['party_id']}")
        prefix = f"[{' '.join(prefix_parts)}] " if prefix_parts else ""

        extra_str = ""
        if hasattr(record, "extra_fields") and record.extra_fields:
            masked = mask_sensitive(record.extra_fields)
            extra_str = " | " + " ".join(f"{k}={v}" for k, v in masked.items())

        timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        level = record.levelname[:4]

        message = (
            f"{color}{timestamp} {level}{self.RESET} "
            f"[{record.name}] {prefix}{record.getMessage()}{extra_str}"
        )

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class StructuredLogger(logging.Logger):
    """Logger with structured logging support."""

    def _log_with_extra(
        self,
        level: int,
        msg: str,
        args: tuple,
        exc_info: Any = None,
        **kwargs,
    ):
        """Log with extra structured fields."""
        extra = {"extra_fields": kwargs} if kwargs else {}
        super()._log(level, msg, args, exc_info=exc_info, extra=extra)

    def debug(self, msg: str, *args, **kwargs):
        if self.isEnabledFor(logging.DEBUG):
            self._log_with_extra(logging.DEBUG, msg, args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        if self.isEnabledFor(logging.INFO):
            self._log_with_extra(logging.INFO, msg, args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        if self.isEnabledFor(logging.WARNING):
            self._log_with_extra(logging.WARNING, msg, args, **kwargs)

    def error(self, msg: str, *args, exc_info: Any = None, **kwargs):
        if self.isEnabledFor(logging.ERROR):
            self._log_with_extra(logging.ERROR, msg, args, exc_info=exc_info, **kwargs)

    def critical(self, msg: str, *args, exc_info: Any = None, **kwargs):
        if self.isEnabledFor(logging.CRITICAL):
            self._log_with_extra(logging.CRITICAL, msg, args, exc_info=exc_info, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger for a module."""
    logging.setLoggerClass(StructuredLogger)
    logger = logging.getLogger(name)
    logging.setLoggerClass(logging.Logger)
    return logger


def setup_logging(json_output: bool | None = None, level: str | None = None):
    """Configure logging for applications embedding the library.

    Args:
        json_output: Use JSON format (defaults to settings.log_json)
        level: Logging level (defaults to settings.log_level)
    """
    from secretshares.config import get_settings

    settings = get_settings()
    if json_output is None:
        json_output = settings.log_json
    if level is None:
        level = settings.log_level

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(HumanFormatter())

    root_logger.addHandler(handler)


@contextmanager
def sharing_context(
    session_id: str | None = None,
    party_id: int | None = None,
) -> Iterator[None]:
    """Tag log records emitted inside the block with a protocol run."""
    session_token = session_id_var.set(session_id)
    party_token = party_id_var.set(party_id)
    try:
        yield
    finally:
        session_id_var.reset(session_token)
        party_id_var.reset(party_token)


def log_operation(operation: str):
    """Decorator to log function execution with timing.

    Completion is logged at DEBUG, failure at WARNING; the exception is
    always re-raised.
    """
    def decorator(func: Callable):
        logger = get_logger(func.__module__)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            start = time.monotonic()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration_ms = (time.monotonic() - start) * 1000
                logger.warning(
                    f"{operation} failed",
                    operation=operation,
                    error=str(e),
                    error_kind=getattr(getattr(e, "kind", None), "value", None),
                    duration_ms=round(duration_ms, 2),
                )
                raise
            duration_ms = (time.monotonic() - start) * 1000
            logger.debug(
                f"{operation} completed",
                operation=operation,
                duration_ms=round(duration_ms, 2),
            )
            return result

        return sync_wrapper

    return decorator


# Library logging stays silent unless the application configures handlers
logging.getLogger("secretshares").addHandler(logging.NullHandler())
