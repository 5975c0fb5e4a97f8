"""Discovery Error Taxonomy.

This module defines the error hierarchy for the discovery responder,
providing structured error handling with specific error codes
and context information.
"""
from __future__ import annotations

from typing import Any


class DiscoveryError(Exception):
    """Base exception for all discovery errors.

    Attributes:
        code: Error code following the discovery:<area>/<reason> pattern
        message: Human-readable error message
        details: Optional additional error context
    """

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{code, message, details}`` dict."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class PayloadBuildError(DiscoveryError):
    """Raised when a JSON payload cannot be validated or serialized.

    The responder turns this into a 500 response for the current request
    only; the next request starts from scratch.

    Attributes:
        payload: Name of the payload being built (e.g. "version", "page_list")
    """

    def __init__(self, payload: str, reason: str, details: dict[str, Any] | None = None) -> None:
        message = f"Failed to build {payload} payload: {reason}"
        super().__init__(
            code="discovery:payload/build_failed",
            message=message,
            details={"payload": payload, **(details or {})},
        )
        self.payload = payload
        self.reason = reason


class AppMetadataError(DiscoveryError):
    """Raised when the host application's identity cannot be resolved.

    A debugging target without a discoverable identity is useless, so this
    error is not converted into an HTTP response; it propagates to whoever
    is running the responder.

    Attributes:
        field: The metadata field that could not be resolved
    """

    def __init__(self, field: str, reason: str, details: dict[str, Any] | None = None) -> None:
        message = f"Cannot resolve application {field}: {reason}"
        super().__init__(
            code="discovery:host/metadata_unavailable",
            message=message,
            details={"field": field, **(details or {})},
        )
        self.field = field
        self.reason = reason


class HandlerNotFoundError(DiscoveryError):
    """Raised when no handler is registered for a request path.

    Attributes:
        path: The request path that has no handler

    Example:
        >>> try:
        ...     raise HandlerNotFoundError("/json/new")
        ... except HandlerNotFoundError as exc:
        ...     exc.path
        '/json/new'
    """

    def __init__(self, path: str) -> None:
        message = f"No handler found for {path}"
        super().__init__(
            code="discovery:transport/handler_not_found",
            message=message,
            details={"path": path},
        )
        self.path = path
