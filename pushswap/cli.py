"""Command line entry point: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.algorithm import solve
from pushswap.parsing import InputError, parse_arguments
from pushswap.stacks import Operation


def run(args: Sequence[str]) -> list[Operation]:
    """Parse arguments and return the moves that sort them."""
    return solve(parse_arguments(args))


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line; print ``Error`` on invalid input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    try:
        operations = run(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{op}\n" for op in operations))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())