"""Constants for the Chrome discovery protocol.

This module defines the fixed paths, protocol identifiers and front-end
revisions served to ``chrome://inspect``.
"""

# Single inspectable target
PAGE_ID = "1"

# Discovery paths probed by Chrome
PATH_PAGE_LIST = "/json"
PATH_PAGE_LIST_ALIAS = "/json/list"
PATH_VERSION = "/json/version"
PATH_ACTIVATE = f"/json/activate/{PAGE_ID}"

DISCOVERY_PATHS = (PATH_PAGE_LIST, PATH_PAGE_LIST_ALIAS, PATH_VERSION, PATH_ACTIVATE)
"""All paths the responder answers, in registration order."""

# Inspector protocol identity
PROTOCOL_VERSION = "1.3"
"""Structured version of the WebKit Inspector protocol that we understand."""

WEBKIT_REV = "@81b36b9535e3e3b610a52df3da48cd81362ec860"
"""Latest version of the WebKit Inspector UI that we've tested against."""

WEBKIT_VERSION_PREFIX = "537.36"
RESPONDER_USER_AGENT = "Stetho"
TITLE_SUFFIX = " (powered by Stetho)"

# Front-end selection by caller Chrome version
DEFAULT_CHROME_VERSION = 99
"""Assumed Chrome major version when the caller's cannot be determined.

Routes unknown callers to the newest front-end branch.
"""

LEGACY_FRONTEND_MAX_VERSION = 89
"""Highest Chrome major version that still needs the legacy devtools.html bundle."""

FRONTEND_SCHEME = "http"
FRONTEND_HOST = "chrome-devtools-frontend.appspot.com"
LEGACY_FRONTEND_REV = "@188492"
LEGACY_FRONTEND_PAGE = "devtools.html"
FRONTEND_PAGE = "inspector.html"

# Defaults for the hosting side
DEFAULT_INSPECTOR_PATH = "/inspector"
DEVTOOLS_SOCKET_PREFIX = "stetho_"
DEVTOOLS_SOCKET_SUFFIX = "_devtools_remote"
"""Chrome scans abstract Unix sockets whose name ends with this suffix."""

# Content types and reason phrases
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_TEXT = "text/plain"

HTTP_OK = 200
HTTP_NOT_FOUND = 404
HTTP_INTERNAL_SERVER_ERROR = 500
HTTP_NOT_IMPLEMENTED = 501

ACTIVATE_ACK = "Target activation ignored\n"
