"""Discovery data models.

Public exports:
    DiscoveryBaseModel: Base pydantic configuration for payloads
    ProtocolMetadata, DEFAULT_PROTOCOL_METADATA: Inspector protocol identity
    VersionInfo: GET /json/version body
    PageDescriptor: GET /json page entry
    DiscoveryRequest, DiscoveryResponse, ResponseBody: transport-facing values
"""

from devtools_discovery.models.base import DiscoveryBaseModel
from devtools_discovery.models.entities import (
    DEFAULT_PROTOCOL_METADATA,
    PageDescriptor,
    ProtocolMetadata,
    VersionInfo,
)
from devtools_discovery.models.http import (
    EMPTY_BODY,
    DiscoveryRequest,
    DiscoveryResponse,
    ResponseBody,
)

__all__ = [
    "DEFAULT_PROTOCOL_METADATA",
    "DiscoveryBaseModel",
    "DiscoveryRequest",
    "DiscoveryResponse",
    "EMPTY_BODY",
    "PageDescriptor",
    "ProtocolMetadata",
    "ResponseBody",
    "VersionInfo",
]
