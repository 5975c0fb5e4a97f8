"""Chrome discovery layer.

Answers the fixed paths ``chrome://inspect`` probes to find a target:
- GET /json and /json/list: the single inspectable page
- GET /json/version: protocol and browser identity
- GET /json/activate/1: acknowledged, otherwise ignored

Public exports:
    ChromeDiscoveryResponder: handler for the discovery paths
    sniff_chrome_version: caller Chrome major version from User-Agent
"""

from devtools_discovery.discovery.responder import ChromeDiscoveryResponder
from devtools_discovery.discovery.version import (
    sniff_chrome_version,
    sniff_chrome_version_from_request,
)

__all__ = [
    "ChromeDiscoveryResponder",
    "sniff_chrome_version",
    "sniff_chrome_version_from_request",
]
