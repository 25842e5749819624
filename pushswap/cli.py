"""Command-line entry points: the solver and the checker."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.stacks import StackError, Stacks

_ERROR = "Error\n"
_MAX_OP_LEN = 3


def _fail() -> int:
    sys.stderr.write(_ERROR)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the given numbers, one per line."""
    from pushswap.sorting import solve

    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        ranks = parse_arguments(args)
    except InputError:
        return _fail()
    for op in solve(ranks):
        sys.stdout.write(f"{op}\n")
    return 0


def checker_main(argv: Sequence[str] | None = None) -> int:
    """Apply operations read from standard input and report OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        ranks = parse_arguments(args)
    except InputError:
        return _fail()
    stacks = Stacks(ranks, record=False)
    *lines, remainder = sys.stdin.read().split("\n")
    try:
        for line in lines:
            if len(line) > _MAX_OP_LEN:
                raise StackError(f"operation too long: {line!r}")
            stacks.execute(line)
    except StackError:
        return _fail()
    if len(remainder) > _MAX_OP_LEN + 1:
        return _fail()
    sys.stdout.write("OK\n" if stacks.is_solved() else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())