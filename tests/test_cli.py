"""Tests for the DevTools discovery CLI."""

from __future__ import annotations

import json
import re
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from devtools_discovery import __version__
from devtools_discovery.cli import app
from devtools_discovery.discovery.responder import ChromeDiscoveryResponder
from tests.factories import CHROME_89_UA, LEGACY_SEGMENTS, PINNED_SEGMENTS

# ANSI escape sequence pattern for stripping colors from output
ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

runner = CliRunner()


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


class TestCliVersion:
    """Tests for --version."""

    def test_version_flag(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.stdout.strip() == __version__


class TestCliHelp:
    """Tests for CLI help output."""

    def test_help_displays_commands(self) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        for command in ("serve", "pages", "version-info", "socket-name"):
            assert command in output


class TestPagesCommand:
    """Tests for the pages command."""

    def test_legacy_caller(self) -> None:
        result = runner.invoke(
            app,
            ["pages", "--user-agent", CHROME_89_UA, "--package", "com.example.app"],
        )

        assert result.exit_code == 0
        pages = json.loads(result.stdout)
        assert len(pages) == 1
        assert LEGACY_SEGMENTS in pages[0]["devtoolsFrontendUrl"]
        assert pages[0]["title"] == "com.example.app (powered by Stetho)"

    def test_default_caller_and_process_suffix(self) -> None:
        result = runner.invoke(
            app,
            [
                "pages",
                "--package",
                "com.example.app",
                "--label",
                "Example",
                "--process-name",
                "com.example.app:push",
                "--inspector-path",
                "localhost:9222/inspector",
            ],
        )

        assert result.exit_code == 0
        page = json.loads(result.stdout)[0]
        assert PINNED_SEGMENTS in page["devtoolsFrontendUrl"]
        assert page["title"] == "Example (powered by Stetho):push"
        assert page["webSocketDebuggerUrl"] == "ws://localhost:9222/inspector"


class TestVersionInfoCommand:
    """Tests for the version-info command."""

    def test_prints_version_payload(self) -> None:
        result = runner.invoke(
            app,
            ["version-info", "--package", "com.example.app", "--app-version", "3.0"],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["Browser"] == "com.example.app/3.0"
        assert data["Protocol-Version"] == "1.3"

    def test_missing_distribution_fails(self) -> None:
        result = runner.invoke(
            app, ["version-info", "--distribution", "definitely-not-installed-dist"]
        )

        assert result.exit_code == 1


class TestSocketNameCommand:
    """Tests for the socket-name command."""

    def test_prints_abstract_name(self) -> None:
        result = runner.invoke(app, ["socket-name", "--process-name", "com.example.app"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "@stetho_com.example.app_devtools_remote"


class TestServeCommand:
    """Tests for the serve command (uvicorn is patched out)."""

    def test_serves_on_tcp(self) -> None:
        with patch("devtools_discovery.cli.uvicorn.run") as mock_run:
            result = runner.invoke(
                app,
                ["serve", "--host", "0.0.0.0", "--port", "9333", "--package", "com.example.app"],
            )

        assert result.exit_code == 0
        mock_run.assert_called_once()
        _, kwargs = mock_run.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9333
        served_app = mock_run.call_args.args[0]
        assert isinstance(served_app.state.responder, ChromeDiscoveryResponder)

    def test_port_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEVTOOLS_DISCOVERY_PORT", "9444")
        monkeypatch.delenv("DEVTOOLS_DISCOVERY_HOST", raising=False)
        with patch("devtools_discovery.cli.uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0
        _, kwargs = mock_run.call_args
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9444

    def test_invalid_port_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEVTOOLS_DISCOVERY_PORT", "not-a-port")
        with patch("devtools_discovery.cli.uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code != 0
        mock_run.assert_not_called()

    def test_serves_on_unix_socket(self, tmp_path: Path) -> None:
        socket_path = tmp_path / "devtools.sock"
        with patch("devtools_discovery.cli.uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--uds", str(socket_path)])

        assert result.exit_code == 0
        _, kwargs = mock_run.call_args
        assert kwargs["uds"] == str(socket_path)
        assert "port" not in kwargs

    def test_inspector_path_option(self) -> None:
        with patch("devtools_discovery.cli.uvicorn.run") as mock_run:
            result = runner.invoke(
                app, ["serve", "--inspector-path", "localhost:9333/inspector"]
            )

        assert result.exit_code == 0
        served_app = mock_run.call_args.args[0]
        assert served_app.state.responder.inspector_path == "localhost:9333/inspector"

    def test_invalid_log_level(self) -> None:
        with patch("devtools_discovery.cli.uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--log-level", "LOUD"])

        assert result.exit_code != 0
        mock_run.assert_not_called()
