"""Tests for the path handler registry."""

from __future__ import annotations

import pytest

from devtools_discovery.errors import HandlerNotFoundError
from devtools_discovery.models.http import DiscoveryRequest, DiscoveryResponse
from devtools_discovery.transport.handlers import ExactPathMatcher, HttpHandler, PathRegistry


class _RecordingHandler:
    def __init__(self) -> None:
        self.paths: list[str] = []

    def handle_request(self, request: DiscoveryRequest, response: DiscoveryResponse) -> bool:
        self.paths.append(request.path)
        return True


class TestExactPathMatcher:
    """Tests for ExactPathMatcher."""

    def test_matches_only_exact_path(self) -> None:
        matcher = ExactPathMatcher("/json")

        assert matcher.match("/json") is True
        assert matcher.match("/json/") is False
        assert matcher.match("/json/list") is False
        assert matcher.match("/JSON") is False

    def test_equality(self) -> None:
        assert ExactPathMatcher("/json") == ExactPathMatcher("/json")
        assert ExactPathMatcher("/json") != ExactPathMatcher("/json/list")


class TestPathRegistry:
    """Tests for PathRegistry."""

    def test_lookup_registered_handler(self) -> None:
        registry = PathRegistry()
        handler = _RecordingHandler()
        registry.register(ExactPathMatcher("/json"), handler)

        assert registry.lookup("/json") is handler

    def test_lookup_miss_raises(self) -> None:
        registry = PathRegistry()

        with pytest.raises(HandlerNotFoundError) as exc_info:
            registry.lookup("/missing")

        assert exc_info.value.path == "/missing"

    def test_reregistration_replaces_handler(self) -> None:
        registry = PathRegistry()
        first, second = _RecordingHandler(), _RecordingHandler()
        registry.register(ExactPathMatcher("/json"), first)
        registry.register(ExactPathMatcher("/json"), second)

        assert registry.lookup("/json") is second
        assert registry.list_matchers() == [ExactPathMatcher("/json")]

    def test_first_registered_matcher_wins(self) -> None:
        class _AnyPath:
            def match(self, path: str) -> bool:
                return True

        registry = PathRegistry()
        exact, fallback = _RecordingHandler(), _RecordingHandler()
        registry.register(ExactPathMatcher("/json"), exact)
        registry.register(_AnyPath(), fallback)

        assert registry.lookup("/json") is exact
        assert registry.lookup("/other") is fallback

    def test_list_matchers_returns_copy(self) -> None:
        registry = PathRegistry()
        registry.register(ExactPathMatcher("/json"), _RecordingHandler())
        registry.list_matchers().clear()

        assert len(registry.list_matchers()) == 1

    def test_handler_protocol(self) -> None:
        assert isinstance(_RecordingHandler(), HttpHandler)
