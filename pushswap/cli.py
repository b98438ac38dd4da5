"""Command that prints the moves sorting the integers given as arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import ParseError, is_sorted, parse_arguments
from .sorting import sort_stack


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line; print ``Error`` to stderr on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    if not values or is_sorted(values):
        return 0
    for op in sort_stack(values):
        sys.stdout.write(f"{op.value}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())