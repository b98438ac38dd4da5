"""Command that checks whether a list of moves read from stdin sorts the arguments."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .linereader import LineReader
from .operations import Stacks, parse_operation
from .parsing import ParseError, parse_arguments_strict


def execute_instruction(stacks: Stacks, line: str) -> None:
    """Perform the move named by ``line``; raise ValueError if it names none."""
    stacks.apply(parse_operation(line))


def run_checker(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply each line to a fresh pair of stacks and report whether a ends sorted.

    One trailing newline is removed from each line before it is read.
    """
    stacks = Stacks(values)
    for line in lines:
        execute_instruction(stacks, line[:-1] if line.endswith("\n") else line)
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Print ``OK`` or ``KO``; print ``Error`` to stderr on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments_strict(args)
        solved = run_checker(values, LineReader(sys.stdin))
    except ValueError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if solved else "KO\n")
    return 0


__all__ = ["ParseError", "execute_instruction", "run_checker", "main"]


if __name__ == "__main__":
    raise SystemExit(main())