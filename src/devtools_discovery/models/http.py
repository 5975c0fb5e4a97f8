"""HTTP-shaped request and response values exchanged with the transport.

The transport owns sockets and framing; the responder only ever sees a
parsed DiscoveryRequest and fills in a DiscoveryResponse.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from devtools_discovery.models.constants import CONTENT_TYPE_TEXT


@dataclass(frozen=True)
class ResponseBody:
    """Encoded response content plus its MIME type."""

    content: bytes
    content_type: str

    @classmethod
    def create(cls, text: str, content_type: str) -> ResponseBody:
        """Create a body from text, encoded as UTF-8."""
        return cls(content=text.encode("utf-8"), content_type=content_type)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")


EMPTY_BODY = ResponseBody(content=b"", content_type=CONTENT_TYPE_TEXT)


@dataclass(frozen=True)
class DiscoveryRequest:
    """A parsed request as handed over by the transport.

    Headers keep their wire order and may repeat; lookups are
    case-insensitive and return the first match.

    Attributes:
        path: Request path without query string
        headers: (name, value) pairs in the order they were received
    """

    path: str
    headers: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_mapping(
        cls,
        path: str,
        headers: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    ) -> DiscoveryRequest:
        """Build a request from a header mapping or a sequence of pairs.

        Example:
            >>> req = DiscoveryRequest.from_mapping("/json", {"user-agent": "curl/8.0"})
            >>> req.get_first_header("User-Agent")
            'curl/8.0'
        """
        if headers is None:
            pairs: tuple[tuple[str, str], ...] = ()
        elif isinstance(headers, Mapping):
            pairs = tuple((str(k), str(v)) for k, v in headers.items())
        else:
            pairs = tuple((str(k), str(v)) for k, v in headers)
        return cls(path=path, headers=pairs)

    def get_first_header(self, name: str) -> str | None:
        """Return the first value of header ``name`` (case-insensitive), or None."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None


@dataclass
class DiscoveryResponse:
    """Mutable response slot filled in by a handler.

    A fresh instance is an empty 500 until a handler fills it.
    """

    code: int = 500
    reason_phrase: str = ""
    body: ResponseBody = field(default=EMPTY_BODY)

    def set(self, code: int, reason_phrase: str, body: ResponseBody) -> None:
        self.code = code
        self.reason_phrase = reason_phrase
        self.body = body
