"""Path mapper — redirect known paths, delegate everything else.

``map_handler()`` captures a private, read-only copy of the path table
at construction. The resulting ``MapHandler`` never mutates it, so one
instance can serve any number of concurrent requests without locking.
"""

from collections.abc import Mapping
from types import MappingProxyType

from urlshort.config import DEFAULT_CONFIG, ShortenerConfig
from urlshort.handler import Handler, invoke
from urlshort.http.request import Request
from urlshort.http.response import Redirect, Response


class MapHandler:
    """A handler that redirects mapped paths and falls back otherwise.

    Lookups are exact: case-sensitive, no trailing-slash folding, no
    pattern syntax. A path mapped to ``""`` counts as unmapped.
    """

    __slots__ = ("_fallback", "_paths", "_redirect_status")

    def __init__(
        self,
        paths_to_urls: Mapping[str, str],
        fallback: Handler,
        *,
        config: ShortenerConfig = DEFAULT_CONFIG,
    ) -> None:
        self._paths: Mapping[str, str] = MappingProxyType(dict(paths_to_urls))
        self._fallback = fallback
        self._redirect_status = config.redirect_status

    @property
    def paths(self) -> Mapping[str, str]:
        """The read-only path table."""
        return self._paths

    @property
    def fallback(self) -> Handler:
        return self._fallback

    def lookup(self, path: str) -> str | None:
        """Return the redirect target for *path*, or None to fall back."""
        return self._paths.get(path) or None

    async def __call__(self, request: Request) -> Response:
        url = self.lookup(request.path)
        if url is not None:
            return Redirect(url, status=self._redirect_status).to_response(request.method)
        return await invoke(self._fallback, request)

    def __contains__(self, path: object) -> bool:
        """Whether *path* has an entry in the table, even an empty one."""
        return path in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __repr__(self) -> str:
        return f"MapHandler({len(self._paths)} paths, fallback={self._fallback!r})"


def map_handler(
    paths_to_urls: Mapping[str, str],
    fallback: Handler,
    *,
    config: ShortenerConfig | None = None,
) -> MapHandler:
    """Build a handler that maps paths (keys) to their URLs (values).

    If the request path is not in *paths_to_urls*, *fallback* handles the
    request instead and its response is returned unchanged.

    Usage::

        handler = map_handler(
            {"/urlshort-godoc": "https://godoc.org/github.com/gophercises/urlshort"},
            fallback=not_found,
        )
    """
    return MapHandler(paths_to_urls, fallback, config=config or DEFAULT_CONFIG)
