"""Builders for the discovery payloads.

Every function here is pure: it takes the host context, the caller version
and the protocol metadata, and returns a freshly built value. Nothing is
cached, so a payload always reflects the request it was built for.
"""

from __future__ import annotations

from urllib.parse import urlencode, urlunsplit

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from devtools_discovery.errors import PayloadBuildError
from devtools_discovery.host import HostContext
from devtools_discovery.models.base import DiscoveryBaseModel
from devtools_discovery.models.constants import (
    FRONTEND_HOST,
    FRONTEND_PAGE,
    FRONTEND_SCHEME,
    LEGACY_FRONTEND_MAX_VERSION,
    LEGACY_FRONTEND_PAGE,
    LEGACY_FRONTEND_REV,
    TITLE_SUFFIX,
)
from devtools_discovery.models.entities import (
    DEFAULT_PROTOCOL_METADATA,
    PageDescriptor,
    ProtocolMetadata,
    VersionInfo,
)
from devtools_discovery.observability import get_logger

logger = get_logger(__name__)

PAGE_LIST_ADAPTER: TypeAdapter[list[PageDescriptor]] = TypeAdapter(list[PageDescriptor])


def uses_legacy_frontend(chrome_version: int) -> bool:
    """Return True if callers of this version need the legacy devtools.html bundle."""
    return 0 < chrome_version <= LEGACY_FRONTEND_MAX_VERSION


def build_frontend_url(
    inspector_path: str,
    chrome_version: int,
    protocol: ProtocolMetadata = DEFAULT_PROTOCOL_METADATA,
) -> str:
    """Build the DevTools front-end URL offered to a caller.

    Example:
        >>> build_frontend_url("/inspector", 80)
        'http://chrome-devtools-frontend.appspot.com/serve_rev/@188492/devtools.html?ws=%2Finspector'
    """
    if uses_legacy_frontend(chrome_version):
        logger.debug("discovery.frontend.legacy", chrome_version=chrome_version)
        segments = ("serve_rev", LEGACY_FRONTEND_REV, LEGACY_FRONTEND_PAGE)
    else:
        segments = ("serve_rev", protocol.webkit_rev, FRONTEND_PAGE)

    path = "/" + "/".join(segments)
    query = urlencode({"ws": inspector_path})
    return urlunsplit((FRONTEND_SCHEME, FRONTEND_HOST, path, query, ""))


def _host_text(value: object, field: str, payload: str) -> str:
    """Return a host-supplied value, rejecting anything that is not a string."""
    if not isinstance(value, str):
        reason = f"host {field} must be a string, got {type(value).__name__}"
        raise PayloadBuildError(payload, reason)
    return value


def make_title(host: HostContext) -> str:
    """Build the page title shown in chrome://inspect.

    Non-default processes (``com.example.app:push``) append their suffix,
    colon included, so they can be told apart from the main process.

    Raises:
        PayloadBuildError: If the host label or process name is not a string
    """
    label = _host_text(host.get_app_label(), "label", "page_list")
    process_name = _host_text(host.get_process_name(), "process name", "page_list")
    title = f"{label}{TITLE_SUFFIX}"
    colon = process_name.find(":")
    if colon >= 0:
        title += process_name[colon:]
    return title


def build_version_info(
    host: HostContext,
    protocol: ProtocolMetadata = DEFAULT_PROTOCOL_METADATA,
) -> VersionInfo:
    """Build the GET /json/version payload.

    Raises:
        PayloadBuildError: If the host returned values that do not validate
        AppMetadataError: Propagated from the host context
    """
    label = _host_text(host.get_app_label(), "label", "version")
    app_version = _host_text(host.get_app_version(), "version", "version")
    try:
        return VersionInfo(
            webkit_version=protocol.webkit_version,
            user_agent=protocol.user_agent,
            protocol_version=protocol.protocol_version,
            browser=f"{label}/{app_version}",
            android_package=host.get_package_name(),
        )
    except ValidationError as exc:
        raise PayloadBuildError("version", str(exc)) from exc


def build_page_descriptor(
    host: HostContext,
    inspector_path: str,
    chrome_version: int,
    protocol: ProtocolMetadata = DEFAULT_PROTOCOL_METADATA,
) -> PageDescriptor:
    """Build the single page entry of GET /json.

    Raises:
        PayloadBuildError: If the host returned values that do not validate
    """
    try:
        return PageDescriptor(
            title=make_title(host),
            web_socket_debugger_url=f"ws://{inspector_path}",
            devtools_frontend_url=build_frontend_url(inspector_path, chrome_version, protocol),
        )
    except ValidationError as exc:
        raise PayloadBuildError("page_list", str(exc)) from exc


def encode_payload(payload: DiscoveryBaseModel | list[PageDescriptor], name: str) -> bytes:
    """Encode a payload model, or the page list, as JSON with wire keys.

    Raises:
        PayloadBuildError: If serialization fails
    """
    try:
        if isinstance(payload, list):
            return PAGE_LIST_ADAPTER.dump_json(payload, by_alias=True)
        return payload.model_dump_json(by_alias=True).encode("utf-8")
    except (PydanticSerializationError, ValueError) as exc:
        raise PayloadBuildError(name, str(exc)) from exc
