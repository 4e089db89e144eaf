"""
Centralized logging configuration for the lost-and-found service.

This module sets up structured logging with:
- Settings-driven configuration (dev vs production)
- JSON formatting for production, pretty console for development
- Email hashing for privacy in production
- Redaction of OTP codes and other secrets
"""

from __future__ import annotations

import hashlib
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import structlog
from structlog.types import EventDict, Processor

from config import LoggingSettings

# Toggled by setup_logging(); module-level so processors stay plain functions
_state = {"production": False}

# Sensitive fields to redact from logs
REDACTED_FIELDS = {
    "password",
    "token",
    "api_key",
    "authorization",
    "cookie",
    "secret",
    "code",
    "otp",
    "otp_code",
    "code_hash",
}

_REDACTED_SUBSTRINGS = ("password", "token", "secret", "otp_code")
_PRESERVED_KEYS = ("level", "event", "timestamp", "logger")


def hash_email(email: str) -> str:
    """
    Hash an email address for privacy in production.

    In production, returns SHA-256 hash (first 16 chars).
    In development, returns the original address for easier debugging.
    """
    if _state["production"] and email:
        return hashlib.sha256(email.encode()).hexdigest()[:16]
    return email


def add_timestamp(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add ISO format timestamp to event dict."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def redact_sensitive_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Redact sensitive fields from logs."""
    for key in list(event_dict.keys()):
        if key in _PRESERVED_KEYS:
            continue
        lowered = key.lower()
        if lowered in REDACTED_FIELDS or any(s in lowered for s in _REDACTED_SUBSTRINGS):
            event_dict[key] = "***REDACTED***"
    return event_dict


def configure_structlog(log_format: str) -> None:
    """
    Configure structlog with appropriate processors for the environment.

    Production: JSON formatting for easy parsing
    Development: Pretty console formatting with colors
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        redact_sensitive_fields,
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            pad_event=15,
            sort_keys=False,
        )

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_stdlib_logging(log_level: str) -> None:
    """Route stdlib logging to stdout and quiet noisy third-party loggers."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


def setup_logging(settings: Optional[LoggingSettings] = None, *, env: str = "development") -> None:
    """
    Initialize logging system for the application.

    Called once from create_app() before any collaborator is built.
    """
    if settings is None:
        settings = LoggingSettings()
    _state["production"] = env == "production"

    configure_stdlib_logging(settings.log_level)
    configure_structlog(settings.log_format)

    structlog.get_logger(__name__).info(
        "logging_initialized",
        env=env,
        log_level=settings.log_level,
        log_format=settings.log_format,
    )
