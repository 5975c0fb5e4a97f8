"""Caller Chrome version sniffing.

chrome://inspect sends its own ``User-Agent`` when probing discovery paths.
The major version decides which DevTools front-end the page list points at.
"""

from __future__ import annotations

import re

from devtools_discovery.models.constants import DEFAULT_CHROME_VERSION
from devtools_discovery.models.http import DiscoveryRequest
from devtools_discovery.observability import get_logger

logger = get_logger(__name__)

USER_AGENT_HEADER = "User-Agent"

CHROME_VERSION_PATTERN = re.compile(r"Chrome/([0-9]+)\.")
"""First ``Chrome/<major>.`` anywhere in the header; not anchored."""


def sniff_chrome_version(user_agent: str | None) -> int:
    """Extract the Chrome major version from a ``User-Agent`` value.

    Args:
        user_agent: Raw header value, or None if the header was absent

    Returns:
        The major version, or DEFAULT_CHROME_VERSION if the header is
        missing, empty, or has no ``Chrome/<digits>.`` substring.

    Example:
        >>> sniff_chrome_version("Mozilla/5.0 Chrome/89.0.4389.90 Safari/537.36")
        89
        >>> sniff_chrome_version("curl/8.4.0")
        99
    """
    if not user_agent:
        return DEFAULT_CHROME_VERSION

    match = CHROME_VERSION_PATTERN.search(user_agent)
    if match is None:
        return DEFAULT_CHROME_VERSION

    try:
        version = int(match.group(1))
    except ValueError:
        # Digit runs past the interpreter's int conversion limit
        logger.warning(
            "discovery.chrome_version.unparseable",
            user_agent=user_agent[:200],
        )
        return DEFAULT_CHROME_VERSION

    logger.debug("discovery.chrome_version.detected", chrome_version=version)
    return version


def sniff_chrome_version_from_request(request: DiscoveryRequest) -> int:
    """Sniff the caller's Chrome version from the first ``User-Agent`` header."""
    return sniff_chrome_version(request.get_first_header(USER_AGENT_HEADER))
