"""ASGI adapter — serve any handler under an ASGI server.

The only module that touches raw ASGI messages. Converts the scope to a
``Request``, runs the handler, and writes the ``Response`` back with
exactly one ``http.response.start`` and one ``http.response.body``.
"""

import logging

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort.handler import Handler, invoke
from urlshort.http.request import Request
from urlshort.http.response import Response

logger = logging.getLogger("urlshort.server")

_INTERNAL_ERROR = Response(body="Internal Server Error", status=500)


def _body_allowed(status: int, method: str) -> bool:
    """Whether the response to *method* with *status* may carry a body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    if 100 <= status < 200 or status in {204, 304}:
        return False
    return method != "HEAD"


async def send_response(response: Response, send: Send, *, method: str = "GET") -> None:
    """Translate a Response into ASGI send() calls.

    Raises:
        UnicodeEncodeError: If a header does not fit Latin-1. Nothing has
            been sent by then.
    """
    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", response.content_type.encode("latin-1")),
    ]
    for name, value in response.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

    body = response.body_bytes if _body_allowed(response.status, method) else b""
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )


async def _handle_lifespan(receive: Receive, send: Send) -> None:
    """Acknowledge startup and shutdown; there is nothing to set up."""
    while True:
        message = await receive()
        if message["type"] == "lifespan.startup":
            await send({"type": "lifespan.startup.complete"})
        elif message["type"] == "lifespan.shutdown":
            await send({"type": "lifespan.shutdown.complete"})
            return


class HandlerApp:
    """ASGI 3 application wrapping a single handler.

    Usage::

        handler = yaml_handler(Path("paths.yaml").read_bytes(), not_found)
        app = as_asgi(handler)
        # serve ``app`` with any ASGI server
    """

    __slots__ = ("handler",)

    def __init__(self, handler: Handler) -> None:
        self.handler = handler

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await _handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        request = Request.from_asgi(scope, receive)
        try:
            response = await invoke(self.handler, request)
        except Exception:
            logger.exception("500 %s %s", request.method, request.path)
            response = _INTERNAL_ERROR

        logger.debug("%d %s %s", response.status, request.method, request.path)
        try:
            await send_response(response, send, method=request.method)
        except UnicodeEncodeError:
            logger.exception("500 %s %s", request.method, request.path)
            await send_response(_INTERNAL_ERROR, send, method=request.method)

    def __repr__(self) -> str:
        return f"HandlerApp({self.handler!r})"


def as_asgi(handler: Handler) -> HandlerApp:
    """Wrap *handler* as an ASGI application."""
    return HandlerApp(handler)
