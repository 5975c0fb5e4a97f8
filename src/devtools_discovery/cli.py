"""Command-line interface for the DevTools discovery responder.

Example:
    >>> # From terminal:
    >>> # devtools-discovery --version
    >>> # devtools-discovery serve --port 9222 --package com.example.app
    >>> # devtools-discovery serve --uds /tmp/devtools.sock --distribution my-app
    >>> # devtools-discovery pages --user-agent "Mozilla/5.0 Chrome/120.0.0.0"
    >>> # devtools-discovery version-info
    >>> # devtools-discovery socket-name --process-name com.example.app:push
"""

import json
import os
from pathlib import Path
from typing import Annotated, Optional

import typer
import uvicorn

from devtools_discovery import __version__
from devtools_discovery.discovery.responder import ChromeDiscoveryResponder
from devtools_discovery.errors import AppMetadataError
from devtools_discovery.host import (
    DistributionHostContext,
    HostContext,
    StaticHostContext,
    devtools_socket_name,
)
from devtools_discovery.models.constants import PATH_PAGE_LIST, PATH_VERSION
from devtools_discovery.models.http import DiscoveryRequest
from devtools_discovery.observability import configure_logging, get_logger
from devtools_discovery.transport.server import create_app, resolve_inspector_path

app = typer.Typer(help="Chrome DevTools discovery responder.")

logger = get_logger(__name__)

ENV_HOST = "DEVTOOLS_DISCOVERY_HOST"
ENV_PORT = "DEVTOOLS_DISCOVERY_PORT"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9222
DEFAULT_PACKAGE = "devtools-discovery"


def _version_callback(value: bool) -> None:
    """Print the version and exit when requested."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


VERSION_OPTION = typer.Option(
    False,
    "--version",
    help="Show DevTools Discovery version and exit.",
    callback=_version_callback,
    is_eager=True,
)

# Host identity options shared by every command that builds a responder
PackageOption = Annotated[
    str,
    typer.Option("--package", help="Application package identifier."),
]
LabelOption = Annotated[
    Optional[str],
    typer.Option("--label", help="Application display label (default: package)."),
]
AppVersionOption = Annotated[
    str,
    typer.Option("--app-version", help="Application version string."),
]
ProcessNameOption = Annotated[
    Optional[str],
    typer.Option("--process-name", help="Process name (default: package)."),
]
DistributionOption = Annotated[
    Optional[str],
    typer.Option(
        "--distribution",
        help="Take label and version from this installed Python distribution.",
    ),
]
InspectorPathOption = Annotated[
    Optional[str],
    typer.Option(
        "--inspector-path",
        help="WebSocket inspector path without scheme (env DEVTOOLS_DISCOVERY_INSPECTOR_PATH).",
    ),
]
UserAgentOption = Annotated[
    Optional[str],
    typer.Option("--user-agent", help="Caller User-Agent to answer for."),
]


@app.callback()
def cli(version: bool = VERSION_OPTION) -> None:
    """DevTools Discovery CLI entrypoint."""


def _build_host(
    package: str,
    label: str | None,
    app_version: str,
    process_name: str | None,
    distribution: str | None,
) -> HostContext:
    if distribution:
        return DistributionHostContext(distribution, label=label)
    return StaticHostContext(
        label=label or package,
        version=app_version,
        package_name=package,
        process_name=process_name,
    )


def _print_payload(responder: ChromeDiscoveryResponder, path: str, user_agent: str | None) -> None:
    headers = {"User-Agent": user_agent} if user_agent else None
    try:
        response = responder.handle(DiscoveryRequest.from_mapping(path, headers))
    except AppMetadataError as exc:
        typer.echo(f"Error: {exc.message}", err=True)
        raise typer.Exit(1) from exc
    if response.code != 200:
        typer.echo(f"Error: {response.code} {response.body.text}", err=True, nl=False)
        raise typer.Exit(1)
    typer.echo(json.dumps(json.loads(response.body.content), indent=2))


@app.command("serve")
def serve(
    host: Annotated[
        Optional[str],
        typer.Option("--host", help="Bind address (env DEVTOOLS_DISCOVERY_HOST)."),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", help="Bind port (env DEVTOOLS_DISCOVERY_PORT)."),
    ] = None,
    uds: Annotated[
        Optional[Path],
        typer.Option("--uds", help="Serve on this Unix domain socket instead of TCP."),
    ] = None,
    inspector_path: InspectorPathOption = None,
    package: PackageOption = DEFAULT_PACKAGE,
    label: LabelOption = None,
    app_version: AppVersionOption = __version__,
    process_name: ProcessNameOption = None,
    distribution: DistributionOption = None,
    log_format: Annotated[
        Optional[str],
        typer.Option("--log-format", help="Log format: console or json."),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)."),
    ] = None,
) -> None:
    """Serve the discovery endpoints with uvicorn."""
    try:
        configure_logging(log_format=log_format, log_level=log_level, force=True)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    host_context = _build_host(package, label, app_version, process_name, distribution)
    responder = ChromeDiscoveryResponder(host_context, resolve_inspector_path(inspector_path))
    discovery_app = create_app(responder)

    if uds is not None:
        logger.info("discovery.server.starting", uds=str(uds))
        uvicorn.run(discovery_app, uds=str(uds), log_config=None)
        return

    bind_host = host or os.getenv(ENV_HOST, DEFAULT_HOST)
    try:
        bind_port = port if port is not None else int(os.getenv(ENV_PORT, str(DEFAULT_PORT)))
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid {ENV_PORT}: {exc}") from exc
    logger.info("discovery.server.starting", host=bind_host, port=bind_port)
    uvicorn.run(discovery_app, host=bind_host, port=bind_port, log_config=None)


@app.command("pages")
def pages(
    user_agent: UserAgentOption = None,
    inspector_path: InspectorPathOption = None,
    package: PackageOption = DEFAULT_PACKAGE,
    label: LabelOption = None,
    app_version: AppVersionOption = __version__,
    process_name: ProcessNameOption = None,
    distribution: DistributionOption = None,
) -> None:
    """Print the GET /json page list served to the given User-Agent."""
    host_context = _build_host(package, label, app_version, process_name, distribution)
    responder = ChromeDiscoveryResponder(host_context, resolve_inspector_path(inspector_path))
    _print_payload(responder, PATH_PAGE_LIST, user_agent)


@app.command("version-info")
def version_info(
    user_agent: UserAgentOption = None,
    package: PackageOption = DEFAULT_PACKAGE,
    label: LabelOption = None,
    app_version: AppVersionOption = __version__,
    distribution: DistributionOption = None,
) -> None:
    """Print the GET /json/version payload."""
    host_context = _build_host(package, label, app_version, None, distribution)
    responder = ChromeDiscoveryResponder(host_context)
    _print_payload(responder, PATH_VERSION, user_agent)


@app.command("socket-name")
def socket_name(
    process_name: Annotated[
        str,
        typer.Option("--process-name", help="Process name the socket is derived from."),
    ] = DEFAULT_PACKAGE,
) -> None:
    """Print the abstract socket name chrome://inspect scans for."""
    typer.echo(f"@{devtools_socket_name(process_name)}")


def main() -> None:
    """Run the DevTools Discovery CLI."""
    app()


if __name__ == "__main__":
    main()
