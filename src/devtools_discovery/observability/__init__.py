"""Observability module for the discovery responder.

Provides structlog-based structured logging with console output for
development and JSON output for production.

Example:
    >>> from devtools_discovery.observability import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info("discovery.server.started", port=9222)
"""

from devtools_discovery.observability.logging import (
    bind_context,
    configure_logging,
    get_logger,
    is_debug_mode,
    unbind_context,
)

__all__ = [
    "bind_context",
    "configure_logging",
    "get_logger",
    "is_debug_mode",
    "unbind_context",
]
