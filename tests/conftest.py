"""Shared pytest fixtures for discovery responder tests.

This module provides the host contexts and responders used across test
modules; plain data helpers live in tests/factories.py.
"""

from __future__ import annotations

import pytest

from devtools_discovery.discovery.responder import ChromeDiscoveryResponder
from devtools_discovery.host import StaticHostContext
from tests.factories import INSPECTOR_PATH


@pytest.fixture
def host() -> StaticHostContext:
    """Host context for the main process of com.example.app."""
    return StaticHostContext(
        label="Example App",
        version="2.4.1",
        package_name="com.example.app",
    )


@pytest.fixture
def push_host() -> StaticHostContext:
    """Host context for a non-default ``:push`` process."""
    return StaticHostContext(
        label="Example App",
        version="2.4.1",
        package_name="com.example.app",
        process_name="com.example.app:push",
    )


@pytest.fixture
def responder(host: StaticHostContext) -> ChromeDiscoveryResponder:
    """Responder for the main-process host."""
    return ChromeDiscoveryResponder(host, INSPECTOR_PATH)
