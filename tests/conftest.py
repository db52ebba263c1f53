"""Shared fixtures for urlshort tests."""

import pytest

from urlshort.http.request import Request
from urlshort.http.response import Response


class RecordingFallback:
    """Fallback that answers with a fixed response and records every request."""

    def __init__(self) -> None:
        self.calls: list[Request] = []
        self.response = (
            Response(body=b"Hello, world!\n", status=200)
            .with_content_type("text/plain; charset=utf-8")
            .with_header("X-Fallback", "yes")
        )

    async def __call__(self, request: Request) -> Response:
        self.calls.append(request)
        return self.response


@pytest.fixture
def fallback() -> RecordingFallback:
    return RecordingFallback()


@pytest.fixture
def paths_yaml() -> bytes:
    return b"""\
- path: /urlshort
  url: https://github.com/gophercises/urlshort
- path: /urlshort-final
  url: https://github.com/gophercises/urlshort/tree/solution
"""
