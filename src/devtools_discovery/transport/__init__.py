"""Transport layer for the discovery responder.

Public exports:
    PathRegistry: path matcher to handler registry
    ExactPathMatcher: exact path matcher
    HttpHandler: protocol implemented by handlers

The FastAPI adapter lives in ``devtools_discovery.transport.server``.
"""

from devtools_discovery.transport.handlers import ExactPathMatcher, HttpHandler, PathRegistry

__all__ = [
    "ExactPathMatcher",
    "HttpHandler",
    "PathRegistry",
]
