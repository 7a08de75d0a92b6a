"""Command-line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import ParseError, parse_args
from .sorter import push_swap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    for operation in push_swap(values):
        sys.stdout.write(operation + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())