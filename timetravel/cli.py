"""Command line entry point: rename the files of a directory after their dates."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from .files import PATH_MAX, analyze_filenames
from .finder import find_date


def main(argv: Sequence[str] | None = None) -> int:
    """Rename dated files in the directory given as first argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("ERROR: no directory provided", file=sys.stderr)
        return 1

    directory = args[0]
    if len(os.fsencode(directory)) >= PATH_MAX:
        print("ERROR: directory name is too long", file=sys.stderr)
        return 2

    try:
        with os.scandir(directory):
            pass
    except OSError:
        print("ERROR: directory not found", file=sys.stderr)
        return 3

    print(f"Analyzing filenames in {directory}\n")
    changes = analyze_filenames(directory, find_date)
    print(f"\n{changes} files renamed")
    return 0


if __name__ == "__main__":
    sys.exit(main())