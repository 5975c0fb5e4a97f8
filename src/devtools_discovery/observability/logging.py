"""Structured logging configuration for the discovery responder.

This module configures structlog for structured logging with support for
both development (console) and production (JSON) output formats.

Environment Variables:
    DEVTOOLS_DISCOVERY_LOG_FORMAT: "json" for JSON output, "console" for colored output
    DEVTOOLS_DISCOVERY_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR)
    DEVTOOLS_DISCOVERY_SERVICE_NAME: Service name to include in logs
    DEVTOOLS_DISCOVERY_DEBUG: "true" or "1" to expose interactive API docs

Example:
    >>> from devtools_discovery.observability.logging import get_logger, configure_logging
    >>>
    >>> configure_logging(log_format="json", log_level="INFO")
    >>> logger = get_logger("devtools_discovery.discovery.responder")
    >>> logger.info("discovery.request.handled", path="/json", status=200)
"""

import logging
import os
import sys
from typing import Any

import structlog
from structlog.typing import Processor

# Default configuration
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "console"
DEFAULT_SERVICE_NAME = "devtools-discovery"

# Environment variable names
ENV_LOG_FORMAT = "DEVTOOLS_DISCOVERY_LOG_FORMAT"
ENV_LOG_LEVEL = "DEVTOOLS_DISCOVERY_LOG_LEVEL"
ENV_SERVICE_NAME = "DEVTOOLS_DISCOVERY_SERVICE_NAME"
ENV_DEBUG = "DEVTOOLS_DISCOVERY_DEBUG"

_logging_configured = False


def is_debug_mode() -> bool:
    """Return True if DEVTOOLS_DISCOVERY_DEBUG is set to a truthy value."""
    value = os.environ.get(ENV_DEBUG, "").strip().lower()
    return value in ("true", "1", "yes", "on")


def _get_log_level() -> str:
    return os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()


def _get_log_format() -> str:
    return os.environ.get(ENV_LOG_FORMAT, DEFAULT_LOG_FORMAT).lower()


def _get_service_name() -> str:
    return os.environ.get(ENV_SERVICE_NAME, DEFAULT_SERVICE_NAME)


def _get_shared_processors() -> list[Processor]:
    """Get shared processors for all log formats."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _get_renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.plain_traceback,
    )


def configure_logging(
    log_format: str | None = None,
    log_level: str | None = None,
    service_name: str | None = None,
    force: bool = False,
) -> None:
    """Configure structured logging for the application.

    Args:
        log_format: Output format - "json" or "console". Defaults to env var or "console"
        log_level: Minimum log level. Defaults to env var or "INFO"
        service_name: Service name for log context. Defaults to env var or "devtools-discovery"
        force: If True, reconfigure even if already configured

    Raises:
        ValueError: If log_level is not a known logging level name
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    log_format = (log_format or _get_log_format()).lower()
    log_level = (log_level or _get_log_level()).upper()
    service_name = service_name or _get_service_name()

    level = logging.getLevelName(log_level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    shared_processors = _get_shared_processors()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(log_format),
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    structlog.contextvars.bind_contextvars(service=service_name)

    _logging_configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given name.

    Configures logging with defaults on first use if nobody did it yet.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("discovery.chrome_version.detected", chrome_version=120)
    """
    if not _logging_configured:
        configure_logging()

    return structlog.stdlib.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent logs of this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove the given keys from the bound log context.

    Called at the end of each request so one caller's context never leaks
    into the next request's log lines.
    """
    structlog.contextvars.unbind_contextvars(*keys)
