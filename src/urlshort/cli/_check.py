"""``urlshort check`` — validate a record file and print its path table."""

import argparse

from urlshort.cli._load import load_or_exit


def run_check(args: argparse.Namespace) -> None:
    """Decode ``args.file`` and print PATH / URL rows sorted by path.

    Paths mapped to an empty URL are listed with ``(fallback)`` since
    requests for them are delegated.
    """
    handler = load_or_exit(args)
    paths = handler.paths
    if not paths:
        print("No paths defined.")
        return

    rows = [(path, url or "(fallback)") for path, url in sorted(paths.items())]
    width = max(max(len(path) for path, _ in rows), 4)  # "PATH" header

    fmt = f"{{:<{width}}}  {{}}"
    print(fmt.format("PATH", "URL"))
    print("-" * min(width + 2 + max(len(url) for _, url in rows), 80))
    for path, url in rows:
        print(fmt.format(path, url))
