"""Structured logging setup.

Uses structlog on top of stdlib logging, with JSON output by default.
Library modules log through ``logging.getLogger(__name__)``; applications
call :func:`setup_logging` once at start-up.  Entries from structlog
loggers (:func:`get_logger`) are stamped with the process topic namespace;
records from plain stdlib loggers go through the root handler unstamped.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from monky_utilities.topics.namespace import namespace_prefix


def _add_namespace(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: add the topic namespace to structlog entries."""
    event_dict.setdefault("namespace", namespace_prefix().rstrip("."))
    return event_dict


def setup_logging(
    level: str = "INFO",
    format: str = "json",
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        format: "json" for production, "console" for development.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        _add_namespace,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )


def setup_logging_from_settings(settings: Any) -> None:
    """Configure logging from a :class:`~monky_utilities.core.config.Settings`."""
    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)
