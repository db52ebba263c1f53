"""urlshort — redirect request paths to URLs, fall back for the rest.

Build a handler from a dict or from a YAML/JSON record list, then call
it directly or serve it under any ASGI server.

Basic usage::

    from urlshort import map_handler, yaml_handler, not_found, as_asgi

    handler = map_handler({"/dogs": "https://www.somesite.com/a-story-about-dogs"}, not_found)

    handler = yaml_handler(
        b'''
        - path: /urlshort
          url: https://github.com/gophercises/urlshort
        ''',
        fallback=handler,
    )

    app = as_asgi(handler)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DecodeError",
    "Handler",
    "MapHandler",
    "PathURL",
    "Redirect",
    "Request",
    "Response",
    "ShortenerConfig",
    "UrlshortError",
    "as_asgi",
    "json_handler",
    "map_handler",
    "not_found",
    "text_handler",
    "yaml_handler",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import urlshort`` from importing PyYAML until it is needed.
    """
    if name in ("MapHandler", "map_handler"):
        from urlshort import mapper as _mapper

        return getattr(_mapper, name)

    if name in ("yaml_handler", "json_handler"):
        from urlshort import parsers as _parsers

        return getattr(_parsers, name)

    if name == "PathURL":
        from urlshort.records import PathURL

        return PathURL

    if name in ("Request", "Response", "Redirect"):
        from urlshort import http as _http

        return getattr(_http, name)

    if name == "Handler":
        from urlshort.handler import Handler

        return Handler

    if name in ("not_found", "text_handler"):
        from urlshort import fallback as _fallback

        return getattr(_fallback, name)

    if name == "as_asgi":
        from urlshort.asgi import as_asgi

        return as_asgi

    if name == "ShortenerConfig":
        from urlshort.config import ShortenerConfig

        return ShortenerConfig

    if name in ("ConfigurationError", "DecodeError", "UrlshortError"):
        from urlshort import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
