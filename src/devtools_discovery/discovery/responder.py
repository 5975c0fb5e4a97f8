"""Chrome discovery responder.

Provides sufficient responses to convince ``chrome://inspect/devices`` that
we're "one of them". Chrome finds the target by the name of its socket and
then probes a handful of fixed paths to learn how to display and inspect it:

- GET /json, GET /json/list: the one inspectable page
- GET /json/version: protocol and browser identity
- GET /json/activate/1: acknowledged and otherwise ignored

Example:
    >>> from devtools_discovery.discovery.responder import ChromeDiscoveryResponder
    >>> from devtools_discovery.host import StaticHostContext
    >>> from devtools_discovery.models.http import DiscoveryRequest
    >>>
    >>> host = StaticHostContext(label="Example", version="1.0", package_name="com.example")
    >>> responder = ChromeDiscoveryResponder(host, "/inspector")
    >>> responder.handle(DiscoveryRequest.from_mapping("/json/version")).code
    200
"""

from __future__ import annotations

from devtools_discovery.discovery.pages import (
    build_page_descriptor,
    build_version_info,
    encode_payload,
)
from devtools_discovery.discovery.version import sniff_chrome_version_from_request
from devtools_discovery.errors import PayloadBuildError
from devtools_discovery.host import HostContext
from devtools_discovery.models.constants import (
    ACTIVATE_ACK,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_TEXT,
    DEFAULT_INSPECTOR_PATH,
    DISCOVERY_PATHS,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_NOT_IMPLEMENTED,
    HTTP_OK,
    PATH_ACTIVATE,
    PATH_PAGE_LIST,
    PATH_PAGE_LIST_ALIAS,
    PATH_VERSION,
)
from devtools_discovery.models.entities import DEFAULT_PROTOCOL_METADATA, ProtocolMetadata
from devtools_discovery.models.http import DiscoveryRequest, DiscoveryResponse, ResponseBody
from devtools_discovery.observability import get_logger
from devtools_discovery.transport.handlers import ExactPathMatcher, PathRegistry

logger = get_logger(__name__)


class ChromeDiscoveryResponder:
    """Answers the Chrome discovery paths for a single inspectable target.

    The responder keeps no per-request state: the caller's Chrome version and
    every payload are computed inside the call that needs them, so one
    instance can serve concurrent requests from callers of different
    versions.

    Attributes:
        host: Source of the application's label, version, package and process
        inspector_path: Where the DevTools WebSocket session is served,
            without scheme (e.g. ``/inspector`` or ``localhost:9222/inspector``)
        protocol: Inspector protocol identity advertised to callers
    """

    def __init__(
        self,
        host: HostContext,
        inspector_path: str = DEFAULT_INSPECTOR_PATH,
        protocol: ProtocolMetadata | None = None,
    ) -> None:
        self.host = host
        self.inspector_path = inspector_path
        self.protocol = protocol or DEFAULT_PROTOCOL_METADATA

    def register(self, registry: PathRegistry) -> None:
        """Register this responder for every discovery path."""
        for path in DISCOVERY_PATHS:
            registry.register(ExactPathMatcher(path), self)

    def handle(self, request: DiscoveryRequest) -> DiscoveryResponse:
        """Handle ``request`` and return a freshly populated response."""
        response = DiscoveryResponse()
        self.handle_request(request, response)
        return response

    def handle_request(self, request: DiscoveryRequest, response: DiscoveryResponse) -> bool:
        """Fill ``response`` for ``request``.

        Unknown paths get 501; a payload that cannot be built gets 500 with
        the error text. Errors from the host context propagate.

        Returns:
            Always True: the transport must not route the request further.
        """
        path = request.path
        chrome_version = sniff_chrome_version_from_request(request)

        try:
            if path == PATH_VERSION:
                self._handle_version(response)
            elif path in (PATH_PAGE_LIST, PATH_PAGE_LIST_ALIAS):
                self._handle_page_list(response, chrome_version)
            elif path == PATH_ACTIVATE:
                self._handle_activate(response)
            else:
                response.set(
                    HTTP_NOT_IMPLEMENTED,
                    "Not implemented",
                    ResponseBody.create(f"No support for {path}\n", CONTENT_TYPE_TEXT),
                )
        except PayloadBuildError as exc:
            logger.error(
                "discovery.payload.build_failed",
                path=path,
                payload=exc.payload,
                error=exc.message,
            )
            response.set(
                HTTP_INTERNAL_SERVER_ERROR,
                "Internal server error",
                ResponseBody.create(f"{exc}\n", CONTENT_TYPE_TEXT),
            )

        logger.debug(
            "discovery.request.handled",
            path=path,
            status=response.code,
            chrome_version=chrome_version,
        )
        return True

    def _handle_version(self, response: DiscoveryResponse) -> None:
        reply = build_version_info(self.host, self.protocol)
        body = ResponseBody(encode_payload(reply, "version"), CONTENT_TYPE_JSON)
        _set_successful_response(response, body)

    def _handle_page_list(self, response: DiscoveryResponse, chrome_version: int) -> None:
        page = build_page_descriptor(self.host, self.inspector_path, chrome_version, self.protocol)
        body = ResponseBody(encode_payload([page], "page_list"), CONTENT_TYPE_JSON)
        _set_successful_response(response, body)

    def _handle_activate(self, response: DiscoveryResponse) -> None:
        # Any response is acceptable to Chrome here
        _set_successful_response(response, ResponseBody.create(ACTIVATE_ACK, CONTENT_TYPE_TEXT))


def _set_successful_response(response: DiscoveryResponse, body: ResponseBody) -> None:
    response.set(HTTP_OK, "OK", body)
