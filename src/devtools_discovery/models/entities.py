"""Payload models served on the discovery paths.

Models:
    ProtocolMetadata: Static identity of the inspector protocol we speak
    VersionInfo: Body of GET /json/version
    PageDescriptor: One element of the GET /json page list
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, computed_field

from devtools_discovery.models.base import DiscoveryBaseModel
from devtools_discovery.models.constants import (
    PAGE_ID,
    PROTOCOL_VERSION,
    RESPONDER_USER_AGENT,
    WEBKIT_REV,
    WEBKIT_VERSION_PREFIX,
)


class ProtocolMetadata(DiscoveryBaseModel):
    """Inspector protocol identity advertised to the caller.

    Attributes:
        protocol_version: Inspector protocol version string
        webkit_rev: Pinned DevTools front-end revision
        user_agent: Responder identity reported as ``User-Agent``

    Example:
        >>> ProtocolMetadata().webkit_version
        '537.36 (@81b36b9535e3e3b610a52df3da48cd81362ec860)'
    """

    protocol_version: str = Field(default=PROTOCOL_VERSION, min_length=1)
    webkit_rev: str = Field(default=WEBKIT_REV, min_length=1)
    user_agent: str = Field(default=RESPONDER_USER_AGENT, min_length=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def webkit_version(self) -> str:
        """WebKit version string embedding the pinned revision."""
        return f"{WEBKIT_VERSION_PREFIX} ({self.webkit_rev})"


DEFAULT_PROTOCOL_METADATA = ProtocolMetadata()


class VersionInfo(DiscoveryBaseModel):
    """Response model for GET /json/version."""

    webkit_version: str = Field(alias="WebKit-Version")
    user_agent: str = Field(alias="User-Agent")
    protocol_version: str = Field(alias="Protocol-Version")
    browser: str = Field(alias="Browser")
    android_package: str = Field(alias="Android-Package")


class PageDescriptor(DiscoveryBaseModel):
    """The single inspectable target listed by GET /json.

    ``type``, ``id`` and ``description`` are fixed; only the title and the
    two URLs vary with the host and the caller.
    """

    type: Literal["app"] = "app"
    title: str
    id: Literal["1"] = PAGE_ID
    description: Literal[""] = ""
    web_socket_debugger_url: str = Field(alias="webSocketDebuggerUrl")
    devtools_frontend_url: str = Field(alias="devtoolsFrontendUrl")
