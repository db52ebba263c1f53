"""HTTP response with chainable .with_*() transformation API, and Redirect.

Each transformation returns a new Response. Immutable by convention,
built incrementally by design.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from html import escape
from urllib.parse import quote

# Methods whose redirect responses carry a short HTML note
_NOTE_METHODS = frozenset({"GET", "HEAD"})

# Every ASCII character; only bytes past 0x7f are escaped in Location
_ASCII = "".join(map(chr, range(128)))

REASON_PHRASES: dict[int, str] = {
    200: "OK",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    307: "Temporary Redirect",
    308: "Permanent Redirect",
    404: "Not Found",
    500: "Internal Server Error",
}


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations."""

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str) -> Response:
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    # -- Accessors --

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of header *name* (case-insensitive), or *default*."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return default

    @property
    def location(self) -> str | None:
        """The ``Location`` header, if this is a redirect."""
        return self.header("location")

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect to *url*. Rendered into a ``Response`` per request method."""

    url: str
    status: int = 302

    def to_response(self, method: str = "GET") -> Response:
        """Render the redirect.

        ``Location`` carries the URL with non-ASCII bytes percent-encoded
        as UTF-8 and is otherwise verbatim. GET and HEAD get a one-line
        HTML note pointing at the target; other methods get an empty body.
        """
        if method.upper() in _NOTE_METHODS:
            reason = REASON_PHRASES.get(self.status, "Redirect")
            body = f'<a href="{escape(self.url)}">{reason}</a>.\n\n'
            response = Response(body=body, status=self.status, content_type="text/html; charset=utf-8")
        else:
            response = Response(status=self.status)
        return response.with_header("Location", escape_location(self.url))


def escape_location(url: str) -> str:
    """Percent-encode the non-ASCII bytes of *url* so it fits a header.

    ASCII characters, ``%`` included, pass through untouched.
    """
    return quote(url, safe=_ASCII)
