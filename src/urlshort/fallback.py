"""Ready-made fallback handlers."""

from urlshort.http.request import Request
from urlshort.http.response import Response


async def not_found(request: Request) -> Response:
    """Answer every request with a plain 404."""
    return Response(body="404 page not found\n", status=404)


def text_handler(body: str, *, status: int = 200) -> "TextHandler":
    """A handler that always answers with *body*."""
    return TextHandler(body, status)


class TextHandler:
    """Fixed plain-text response, whatever the path."""

    __slots__ = ("_response",)

    def __init__(self, body: str, status: int = 200) -> None:
        self._response = Response(body=body, status=status)

    async def __call__(self, request: Request) -> Response:
        return self._response

    def __repr__(self) -> str:
        return f"TextHandler({self._response.text!r}, status={self._response.status})"
