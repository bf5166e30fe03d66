"""Command line entry point: play a map given as a ``.ber`` file."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from solong import render
from solong.validation import load_map

USAGE_MESSAGE = "DATARKA"
MAP_SUFFIX = ".ber"
IMAGE_DIR = Path("image")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the map named by the first argument and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(USAGE_MESSAGE, file=sys.stderr)
        return 1
    path = args[0]
    if len(path) <= len(MAP_SUFFIX) or not path.endswith(MAP_SUFFIX):
        return 1
    try:
        grid = load_map(path)
    except OSError:
        return 1
    except ValueError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    try:
        render.run(grid, IMAGE_DIR)
    except FileNotFoundError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())