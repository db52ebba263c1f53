"""urlshort CLI — inspect record files without serving them.

Entry point registered as ``urlshort`` in ``pyproject.toml``::

    [project.scripts]
    urlshort = "urlshort.cli:main"
"""

import argparse
import logging
import sys

from urlshort.config import LOG_LEVELS, ShortenerConfig
from urlshort.loader import FORMATS


def _add_file_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="YAML or JSON file of path/url records")
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Record format (default: from the file suffix, else yaml)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``urlshort`` command."""
    parser = argparse.ArgumentParser(
        prog="urlshort",
        description="urlshort — redirect request paths to URLs.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=ShortenerConfig().log_level,
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- urlshort check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a record file and list its paths")
    _add_file_arguments(check_parser)

    # -- urlshort resolve -------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Show where a request path redirects")
    _add_file_arguments(resolve_parser)
    resolve_parser.add_argument("path", help="Request path, e.g. /urlshort")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "check":
        from urlshort.cli._check import run_check

        run_check(args)
    elif args.command == "resolve":
        from urlshort.cli._resolve import run_resolve

        run_resolve(args)
