"""``urlshort resolve`` — show the dispatch decision for one path."""

import argparse

from urlshort.cli._load import load_or_exit


def run_resolve(args: argparse.Namespace) -> None:
    """Print the redirect target for ``args.path``.

    Prints ``fallback`` and exits with status 1 when the path would be
    delegated to the fallback handler.
    """
    handler = load_or_exit(args)
    url = handler.lookup(args.path)
    if url is None:
        print("fallback")
        raise SystemExit(1)
    print(url)
