"""Read record files from disk.

Kept apart from the parsers, which only ever see bytes already in
memory. The format comes from the file suffix unless given explicitly.
"""

from pathlib import Path

from urlshort.config import ShortenerConfig
from urlshort.handler import Handler
from urlshort.mapper import MapHandler
from urlshort.parsers import json_handler, yaml_handler

FORMATS = ("yaml", "json")

_SUFFIXES = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}


def detect_format(path: str | Path) -> str:
    """Guess the record format from *path*'s suffix. Defaults to YAML."""
    return _SUFFIXES.get(Path(path).suffix.lower(), "yaml")


def load_handler(
    path: str | Path,
    fallback: Handler,
    *,
    format: str | None = None,
    config: ShortenerConfig | None = None,
) -> MapHandler:
    """Read *path* and build a handler from its records.

    Raises:
        OSError: If the file cannot be read.
        DecodeError: If its contents are not a valid record list.
        ValueError: If *format* is not one of ``FORMATS``.
    """
    fmt = format or detect_format(path)
    if fmt not in FORMATS:
        msg = f"unknown format {fmt!r}; expected one of {', '.join(FORMATS)}"
        raise ValueError(msg)
    raw = Path(path).read_bytes()
    if fmt == "json":
        return json_handler(raw, fallback, config=config)
    return yaml_handler(raw, fallback, config=config)
