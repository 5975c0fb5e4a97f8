"""Host application metadata consumed by the discovery responder.

The responder never looks up its own identity; it asks a HostContext for
the display label, version, package identifier and process name of the
application being debugged.

Implementations:
    StaticHostContext: fixed values, e.g. from CLI options or tests
    DistributionHostContext: derived from an installed Python distribution
        and the running process
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from importlib import metadata
from pathlib import Path
from typing import Protocol, runtime_checkable

from devtools_discovery.errors import AppMetadataError
from devtools_discovery.models.constants import DEVTOOLS_SOCKET_PREFIX, DEVTOOLS_SOCKET_SUFFIX
from devtools_discovery.observability import get_logger

logger = get_logger(__name__)

PROC_SELF_CMDLINE = Path("/proc/self/cmdline")


@runtime_checkable
class HostContext(Protocol):
    """Source of the debugged application's identity."""

    def get_app_label(self) -> str: ...

    def get_app_version(self) -> str: ...

    def get_package_name(self) -> str: ...

    def get_process_name(self) -> str: ...


def get_process_name(cmdline_path: Path = PROC_SELF_CMDLINE) -> str:
    """Return the name of the current process.

    Reads the first NUL-separated argument of ``/proc/self/cmdline`` and
    falls back to ``sys.argv[0]`` where procfs is not available.

    Args:
        cmdline_path: Location of the cmdline file (overridable for tests)

    Returns:
        Process name, or an empty string if nothing is known.
    """
    try:
        raw = cmdline_path.read_bytes()
    except OSError:
        raw = b""
    name = raw.split(b"\0", 1)[0].decode("utf-8", errors="replace").strip()
    if name:
        return name
    return sys.argv[0] if sys.argv else ""


@dataclass(frozen=True)
class StaticHostContext:
    """HostContext backed by fixed values.

    Example:
        >>> host = StaticHostContext(
        ...     label="Example", version="1.0", package_name="com.example.app"
        ... )
        >>> host.get_process_name()
        'com.example.app'
    """

    label: str
    version: str
    package_name: str
    process_name: str | None = None

    def get_app_label(self) -> str:
        return self.label

    def get_app_version(self) -> str:
        return self.version

    def get_package_name(self) -> str:
        return self.package_name

    def get_process_name(self) -> str:
        # An app's main process is named after its package
        if self.process_name is None:
            return self.package_name
        return self.process_name


class DistributionHostContext:
    """HostContext describing an installed Python distribution.

    The label defaults to the distribution's ``Name`` metadata; the version
    comes from the installed metadata. A distribution that is not installed
    is a configuration error of the host and raises AppMetadataError.

    Args:
        distribution: Distribution name as known to the package index
        label: Optional display label overriding the metadata name
    """

    def __init__(self, distribution: str, label: str | None = None) -> None:
        self._distribution = distribution
        self._label = label

    def _metadata(self) -> metadata.PackageMetadata:
        try:
            return metadata.metadata(self._distribution)
        except metadata.PackageNotFoundError as exc:
            logger.error(
                "discovery.host.distribution_not_found",
                distribution=self._distribution,
            )
            raise AppMetadataError(
                "metadata",
                f"distribution {self._distribution!r} is not installed",
                details={"distribution": self._distribution},
            ) from exc

    def get_app_label(self) -> str:
        if self._label:
            return self._label
        return self._metadata()["Name"]

    def get_app_version(self) -> str:
        try:
            return metadata.version(self._distribution)
        except metadata.PackageNotFoundError as exc:
            raise AppMetadataError(
                "version",
                f"distribution {self._distribution!r} is not installed",
                details={"distribution": self._distribution},
            ) from exc

    def get_package_name(self) -> str:
        return self._distribution

    def get_process_name(self) -> str:
        return get_process_name()


def devtools_socket_name(process_name: str) -> str:
    """Return the abstract Unix socket name chrome://inspect scans for.

    Example:
        >>> devtools_socket_name("com.example.app:push")
        'stetho_com.example.app:push_devtools_remote'
    """
    return f"{DEVTOOLS_SOCKET_PREFIX}{process_name}{DEVTOOLS_SOCKET_SUFFIX}"
