"""Handler protocol and the uniform invoke helper.

A handler is any callable matching::

    async def handler(request: Request) -> Response: ...

No base class required. Plain ``def`` functions and callable objects
qualify too; ``invoke()`` awaits the result only when it is awaitable.
A handler may also return a ``Redirect``, which is rendered for the
request's method.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable
from typing import Protocol

from urlshort.http.request import Request
from urlshort.http.response import Redirect, Response

# Anything a handler may hand back
type HandlerResult = Response | Redirect


class Handler(Protocol):
    """Protocol for request handlers.

    Accepts functions and callable objects alike::

        async def hello(request: Request) -> Response:
            return Response("Hello, world!")

        class Teapot:
            def __call__(self, request: Request) -> Response:
                return Response("short and stout", status=418)
    """

    def __call__(self, request: Request) -> HandlerResult | Awaitable[HandlerResult]: ...


async def invoke(handler: Handler, request: Request) -> Response:
    """Call *handler* with *request* and return a concrete ``Response``.

    Awaits coroutine results, renders ``Redirect`` values.
    """
    result = handler(request)
    if inspect.isawaitable(result):
        result = await result
    if isinstance(result, Redirect):
        return result.to_response(request.method)
    if not isinstance(result, Response):
        msg = f"handler {handler!r} returned {type(result).__name__}, expected Response or Redirect"
        raise TypeError(msg)
    return result
