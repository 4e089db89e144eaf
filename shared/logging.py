"""
Logger factory and helpers.

Provides:
- get_logger(): Get a configured logger instance
- log_with_context(): Bind common context to a logger
- hash_email / setup_logging re-exported from shared.logging_config
"""

from __future__ import annotations

import structlog
from structlog.stdlib import BoundLogger

from shared.logging_config import hash_email, setup_logging


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Example:
        >>> log = get_logger(__name__)
        >>> log.info("otp_issued", email=hash_email("a@x.edu"))
    """
    return structlog.get_logger(name)


def log_with_context(logger: BoundLogger, **context) -> BoundLogger:
    """Bind context to a logger for all subsequent log calls."""
    return logger.bind(**context)


__all__ = [
    "get_logger",
    "hash_email",
    "log_with_context",
    "setup_logging",
]
