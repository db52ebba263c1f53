"""Tests for urlshort.http.request and headers — frozen Request with async body."""

import pytest

from urlshort.http.headers import Headers
from urlshort.http.request import Request


def _make_scope(**overrides: object) -> dict[str, object]:
    """Build a minimal valid ASGI HTTP scope."""
    base: dict[str, object] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/",
        "raw_path": b"/",
        "query_string": b"",
        "root_path": "",
        "headers": [],
        "server": ("localhost", 8000),
        "client": ("127.0.0.1", 54321),
    }
    base.update(overrides)
    return base


def _make_receive(*bodies: bytes):
    """Create an ASGI receive callable that yields bodies."""
    messages = []
    for i, body in enumerate(bodies):
        is_last = i == len(bodies) - 1
        messages.append({"type": "http.request", "body": body, "more_body": not is_last})
    if not messages:
        messages.append({"type": "http.request", "body": b"", "more_body": False})
    it = iter(messages)

    async def receive():
        return next(it)

    return receive


class TestRequestFromASGI:
    def test_basic_fields(self) -> None:
        scope = _make_scope(method="POST", path="/urlshort", query_string=b"a=1")
        req = Request.from_asgi(scope, _make_receive())

        assert req.method == "POST"
        assert req.path == "/urlshort"
        assert req.query_string == "a=1"
        assert req.url == "/urlshort?a=1"
        assert req.server == ("localhost", 8000)
        assert req.client == ("127.0.0.1", 54321)

    def test_headers(self) -> None:
        scope = _make_scope(headers=[(b"host", b"example.com"), (b"x-tag", b"a"), (b"X-Tag", b"b")])
        req = Request.from_asgi(scope, _make_receive())

        assert req.headers["Host"] == "example.com"
        assert req.headers.get_list("x-tag") == ["a", "b"]

    def test_missing_server_and_client(self) -> None:
        scope = _make_scope()
        del scope["server"]
        del scope["client"]
        req = Request.from_asgi(scope, _make_receive())
        assert req.server is None
        assert req.client is None

    def test_frozen(self) -> None:
        req = Request.from_asgi(_make_scope(), _make_receive())
        with pytest.raises(AttributeError):
            req.path = "/other"  # type: ignore[misc]


class TestRequestBody:
    async def test_body_joins_chunks(self) -> None:
        req = Request.from_asgi(_make_scope(method="POST"), _make_receive(b"hello ", b"world"))
        assert await req.body() == b"hello world"

    async def test_body_is_cached(self) -> None:
        req = Request.from_asgi(_make_scope(method="POST"), _make_receive(b"once"))
        assert await req.body() == b"once"
        assert await req.body() == b"once"

    async def test_stream_yields_chunks(self) -> None:
        req = Request.from_asgi(_make_scope(method="POST"), _make_receive(b"a", b"b"))
        assert [chunk async for chunk in req.stream()] == [b"a", b"b"]

    async def test_text(self) -> None:
        req = Request.from_asgi(_make_scope(method="POST"), _make_receive("héllo".encode()))
        assert await req.text() == "héllo"

    async def test_built_request_has_empty_body(self) -> None:
        assert await Request.build("/").body() == b""


class TestRequestBuild:
    def test_build(self) -> None:
        req = Request.build("/a", method="post", headers={"Accept": "text/html"}, query_string="x=1")
        assert req.method == "POST"
        assert req.path == "/a"
        assert req.headers["accept"] == "text/html"
        assert req.url == "/a?x=1"

    def test_url_without_query(self) -> None:
        assert Request.build("/a").url == "/a"


class TestHeaders:
    def test_case_insensitive(self) -> None:
        headers = Headers(((b"Content-Type", b"text/plain"),))
        assert headers["content-type"] == "text/plain"
        assert headers["CONTENT-TYPE"] == "text/plain"
        assert "Content-Type" in headers

    def test_first_value_wins_for_getitem(self) -> None:
        headers = Headers(((b"x-a", b"1"), (b"x-a", b"2")))
        assert headers["x-a"] == "1"
        assert len(headers) == 1

    def test_missing(self) -> None:
        headers = Headers()
        assert headers.get("x-missing") is None
        assert headers.get_list("x-missing") == []
        assert 3 not in headers
        with pytest.raises(KeyError):
            headers["x-missing"]

    def test_iteration_yields_lowercase_names(self) -> None:
        headers = Headers.from_dict({"Host": "a", "Accept": "b"})
        assert list(headers) == ["host", "accept"]

    def test_raw(self) -> None:
        raw = ((b"host", b"a"),)
        assert Headers(raw).raw == raw
