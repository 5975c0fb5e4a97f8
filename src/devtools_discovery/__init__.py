"""DevTools Discovery - make a process inspectable from chrome://inspect.

Answers the HTTP discovery paths Chrome probes on a debugging socket and
points the caller at a DevTools front-end matching its own version.

PUBLIC API:
  - ChromeDiscoveryResponder: handler for the discovery paths
  - StaticHostContext, DistributionHostContext: host application identity
  - DiscoveryRequest, DiscoveryResponse: transport-facing values
  - __version__: Package version string
"""

from importlib.metadata import PackageNotFoundError, version

from devtools_discovery.discovery.responder import ChromeDiscoveryResponder
from devtools_discovery.host import DistributionHostContext, HostContext, StaticHostContext
from devtools_discovery.models.http import DiscoveryRequest, DiscoveryResponse

try:
    __version__ = version("devtools-discovery")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    "ChromeDiscoveryResponder",
    "DiscoveryRequest",
    "DiscoveryResponse",
    "DistributionHostContext",
    "HostContext",
    "StaticHostContext",
    "__version__",
]
