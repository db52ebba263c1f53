"""Shared file loading for CLI commands.

Turns loader failures into an ``Error:`` line on stderr and exit code 1.
"""

import argparse
import logging
import sys

from urlshort.errors import DecodeError
from urlshort.fallback import not_found
from urlshort.loader import load_handler
from urlshort.mapper import MapHandler

logger = logging.getLogger("urlshort.cli")


def load_or_exit(args: argparse.Namespace) -> MapHandler:
    """Load ``args.file`` into a handler, exiting with status 1 on failure."""
    try:
        handler = load_handler(args.file, not_found, format=args.format)
    except (OSError, DecodeError) as exc:
        print(f"Error: {args.file}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    logger.info("loaded %d paths from %s", len(handler), args.file)
    return handler
