"""FastAPI adapter serving the discovery responder over HTTP.

This module turns Starlette requests into DiscoveryRequest values, routes
them through a PathRegistry and renders the filled DiscoveryResponse:

- Registered paths go to their handler (the responder answers all four
  discovery paths)
- Any other path gets 404 ``No handler found for <path>``

Example:
    >>> from devtools_discovery.discovery.responder import ChromeDiscoveryResponder
    >>> from devtools_discovery.host import StaticHostContext
    >>> from devtools_discovery.transport.server import create_app
    >>>
    >>> host = StaticHostContext(label="Example", version="1.0", package_name="com.example")
    >>> app = create_app(ChromeDiscoveryResponder(host, "localhost:9222/inspector"))
    >>>
    >>> # Run with: uvicorn.run(app, host="127.0.0.1", port=9222)
"""

from __future__ import annotations

import os

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from devtools_discovery.discovery.responder import ChromeDiscoveryResponder
from devtools_discovery.errors import HandlerNotFoundError
from devtools_discovery.models.constants import DEFAULT_INSPECTOR_PATH, HTTP_NOT_FOUND
from devtools_discovery.models.http import DiscoveryRequest, DiscoveryResponse
from devtools_discovery.observability import (
    bind_context,
    get_logger,
    is_debug_mode,
    unbind_context,
)
from devtools_discovery.transport.handlers import PathRegistry

logger = get_logger(__name__)

ENV_INSPECTOR_PATH = "DEVTOOLS_DISCOVERY_INSPECTOR_PATH"

# Chrome only issues GETs; other verbs are accepted for lenient clients
ALLOWED_METHODS = ["GET", "POST", "PUT"]


def resolve_inspector_path(inspector_path: str | None = None) -> str:
    """Return ``inspector_path`` or the environment/default value."""
    if inspector_path:
        return inspector_path
    return os.getenv(ENV_INSPECTOR_PATH, DEFAULT_INSPECTOR_PATH)


def to_discovery_request(request: Request) -> DiscoveryRequest:
    """Convert a Starlette request into a DiscoveryRequest.

    Header pairs keep their order and repetitions.
    """
    return DiscoveryRequest(
        path=request.url.path,
        headers=tuple(request.headers.items()),
    )


def to_http_response(response: DiscoveryResponse) -> Response:
    """Render a filled DiscoveryResponse as a Starlette response."""
    return Response(
        content=response.body.content,
        status_code=response.code,
        media_type=response.body.content_type,
    )


def create_app(
    responder: ChromeDiscoveryResponder,
    registry: PathRegistry | None = None,
) -> FastAPI:
    """Create a FastAPI application serving the discovery paths.

    Args:
        responder: The discovery responder; it registers itself on the registry
        registry: Optional registry holding additional handlers. A fresh one
            is created when omitted.

    Returns:
        Configured FastAPI application ready to run
    """
    if registry is None:
        registry = PathRegistry()
    responder.register(registry)

    app = FastAPI(
        title="DevTools Discovery",
        description=f"chrome://inspect discovery for {responder.host.get_package_name()}",
        docs_url="/docs" if is_debug_mode() else None,
        redoc_url=None,
        openapi_url="/openapi.json" if is_debug_mode() else None,
    )
    app.state.registry = registry
    app.state.responder = responder

    logger.info(
        "discovery.server.app_created",
        inspector_path=responder.inspector_path,
        paths=[repr(m) for m in registry.list_matchers()],
    )

    @app.api_route("/{full_path:path}", methods=ALLOWED_METHODS, include_in_schema=False)
    async def dispatch(request: Request) -> Response:
        """Route every request through the registry."""
        discovery_request = to_discovery_request(request)
        path = discovery_request.path
        bind_context(request_path=path)
        try:
            try:
                handler = registry.lookup(path)
            except HandlerNotFoundError as exc:
                logger.info("discovery.request.unrouted", path=path)
                return PlainTextResponse(f"{exc.message}\n", status_code=HTTP_NOT_FOUND)

            discovery_response = DiscoveryResponse()
            handler.handle_request(discovery_request, discovery_response)
            logger.info(
                "discovery.request.completed",
                path=path,
                status=discovery_response.code,
                user_agent=discovery_request.get_first_header("User-Agent"),
            )
            return to_http_response(discovery_response)
        finally:
            unbind_context("request_path")

    return app
