"""Build path mappers straight from record documents.

``yaml_handler()`` and ``json_handler()`` decode raw bytes already in
memory, fold the records into a path table (last occurrence of a path
wins), and hand it to ``map_handler()``. The only failure is
``DecodeError``; when it is raised no handler exists.
"""

from urlshort.config import ShortenerConfig
from urlshort.handler import Handler
from urlshort.mapper import MapHandler, map_handler
from urlshort.records import build_path_map, decode_json_records, decode_yaml_records


def yaml_handler(
    raw: bytes | str,
    fallback: Handler,
    *,
    config: ShortenerConfig | None = None,
) -> MapHandler:
    """Parse YAML records and return a handler that redirects their paths.

    YAML is expected in the form::

        - path: /some-path
          url: https://www.some-url.com/demo

    Paths missing from the document are served by *fallback*.

    Raises:
        DecodeError: If *raw* is not a well-formed list of records.
    """
    records = decode_yaml_records(raw)
    return map_handler(build_path_map(records), fallback, config=config)


def json_handler(
    raw: bytes | str,
    fallback: Handler,
    *,
    config: ShortenerConfig | None = None,
) -> MapHandler:
    """Parse JSON records and return a handler that redirects their paths.

    JSON is expected in the form::

        [{"path": "/some-path", "url": "https://www.some-url.com/demo"}]

    Raises:
        DecodeError: If *raw* is not a well-formed array of records.
    """
    records = decode_json_records(raw)
    return map_handler(build_path_map(records), fallback, config=config)
