"""Command-line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parse import InputError, parse_arguments
from pushswap.solver import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on ``argv`` (defaults to the process arguments).

    Returns 1 with no arguments or, after writing ``Error`` to standard
    error, on invalid input; otherwise prints one operation per line and
    returns 0.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for operation in solve(numbers):
        sys.stdout.write(f"{operation}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())