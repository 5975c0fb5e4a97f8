"""Path handler registry for the discovery transport.

The transport owns the socket and HTTP framing. Before handing a request
to anyone it asks the PathRegistry which handler claims the path.

Thread Safety:
    All operations on PathRegistry are thread-safe. The registry uses an
    internal RLock to protect concurrent access to the matcher list.

Example:
    >>> from devtools_discovery.transport.handlers import ExactPathMatcher, PathRegistry
    >>>
    >>> registry = PathRegistry()
    >>> registry.register(ExactPathMatcher("/json"), responder)
    >>> handler = registry.lookup("/json")
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from typing import Protocol, runtime_checkable

from devtools_discovery.errors import HandlerNotFoundError
from devtools_discovery.models.http import DiscoveryRequest, DiscoveryResponse
from devtools_discovery.observability import get_logger

logger = get_logger(__name__)


@runtime_checkable
class HttpHandler(Protocol):
    """Protocol for handlers served by the discovery transport.

    A handler fills in ``response`` and returns True when it handled the
    request, so the transport stops routing.
    """

    def handle_request(self, request: DiscoveryRequest, response: DiscoveryResponse) -> bool: ...


class PathMatcher(Protocol):
    """Decides whether a handler claims a request path."""

    def match(self, path: str) -> bool: ...


@dataclass(frozen=True)
class ExactPathMatcher:
    """Matches a single path exactly (no prefix, no trailing-slash folding)."""

    path: str

    def match(self, path: str) -> bool:
        return path == self.path


class PathRegistry:
    """Registry mapping path matchers to handlers.

    Matchers are tried in registration order. Registering a matcher equal to
    an existing one replaces its handler, so repeated registration is
    harmless.

    Attributes:
        _entries: (matcher, handler) pairs in registration order
        _lock: Reentrant lock for thread-safe operations
    """

    def __init__(self) -> None:
        self._entries: list[tuple[PathMatcher, HttpHandler]] = []
        self._lock = RLock()

    def register(self, matcher: PathMatcher, handler: HttpHandler) -> None:
        with self._lock:
            for index, (existing, _) in enumerate(self._entries):
                if existing == matcher:
                    self._entries[index] = (matcher, handler)
                    logger.debug("discovery.handler.replaced", matcher=repr(matcher))
                    return
            self._entries.append((matcher, handler))
            logger.debug("discovery.handler.registered", matcher=repr(matcher))

    def lookup(self, path: str) -> HttpHandler:
        """Return the first handler whose matcher claims ``path``.

        Raises:
            HandlerNotFoundError: If no matcher claims the path
        """
        with self._lock:
            for matcher, handler in self._entries:
                if matcher.match(path):
                    return handler
        raise HandlerNotFoundError(path)

    def list_matchers(self) -> list[PathMatcher]:
        """List registered matchers in registration order (copy)."""
        with self._lock:
            return [matcher for matcher, _ in self._entries]
