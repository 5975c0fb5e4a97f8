"""Tests for host application metadata contexts."""

from __future__ import annotations

import sys
from importlib import metadata
from pathlib import Path

import pytest

from devtools_discovery.errors import AppMetadataError
from devtools_discovery.host import (
    DistributionHostContext,
    HostContext,
    StaticHostContext,
    devtools_socket_name,
    get_process_name,
)


class TestStaticHostContext:
    """Tests for StaticHostContext."""

    def test_values(self, push_host: StaticHostContext) -> None:
        assert push_host.get_app_label() == "Example App"
        assert push_host.get_app_version() == "2.4.1"
        assert push_host.get_package_name() == "com.example.app"
        assert push_host.get_process_name() == "com.example.app:push"

    def test_process_name_defaults_to_package(self, host: StaticHostContext) -> None:
        assert host.get_process_name() == "com.example.app"

    def test_satisfies_protocol(self, host: StaticHostContext) -> None:
        assert isinstance(host, HostContext)


class TestDistributionHostContext:
    """Tests for DistributionHostContext."""

    def test_installed_distribution(self) -> None:
        host = DistributionHostContext("pytest")

        assert host.get_app_version() == metadata.version("pytest")
        assert host.get_app_label() == metadata.metadata("pytest")["Name"]
        assert host.get_package_name() == "pytest"
        assert isinstance(host, HostContext)

    def test_label_override(self) -> None:
        assert DistributionHostContext("pytest", label="Runner").get_app_label() == "Runner"

    def test_missing_distribution_version_raises(self) -> None:
        host = DistributionHostContext("definitely-not-installed-dist")

        with pytest.raises(AppMetadataError) as exc_info:
            host.get_app_version()

        assert exc_info.value.field == "version"
        assert exc_info.value.details["distribution"] == "definitely-not-installed-dist"

    def test_missing_distribution_label_raises(self) -> None:
        with pytest.raises(AppMetadataError):
            DistributionHostContext("definitely-not-installed-dist").get_app_label()


class TestGetProcessName:
    """Tests for get_process_name()."""

    def test_reads_first_cmdline_argument(self, tmp_path: Path) -> None:
        cmdline = tmp_path / "cmdline"
        cmdline.write_bytes(b"com.example.app:push\0--flag\0")

        assert get_process_name(cmdline) == "com.example.app:push"

    def test_falls_back_to_argv(self, tmp_path: Path) -> None:
        assert get_process_name(tmp_path / "missing") == sys.argv[0]

    def test_empty_cmdline_falls_back_to_argv(self, tmp_path: Path) -> None:
        cmdline = tmp_path / "cmdline"
        cmdline.write_bytes(b"")

        assert get_process_name(cmdline) == sys.argv[0]


class TestDevtoolsSocketName:
    """Tests for devtools_socket_name()."""

    def test_name(self) -> None:
        assert devtools_socket_name("com.example.app") == "stetho_com.example.app_devtools_remote"
