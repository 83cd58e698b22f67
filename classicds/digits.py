"""Count numbers whose digits alternate odd and even from the right."""

from __future__ import annotations

import argparse
import sys


def is_good_number(n: int) -> bool:
    """True if the units digit is odd, the tens digit even, and so on."""
    n = abs(n)
    want_odd = True
    while n:
        if (n % 2 == 1) != want_odd:
            return False
        want_odd = not want_odd
        n //= 10
    return True


def count_good_numbers(n: int) -> int:
    """Return how many of 1..n are good numbers."""
    return sum(1 for i in range(1, n + 1) if is_good_number(i))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="classicds-digits",
        description="Count good numbers from 1 to N (N read from stdin if omitted).",
    )
    parser.add_argument("n", nargs="?", type=int, help="upper bound")
    args = parser.parse_args(argv)
    n = args.n
    if n is None:
        tokens = sys.stdin.read().split()
        if not tokens:
            parser.error("expected an integer on standard input")
        try:
            n = int(tokens[0])
        except ValueError:
            parser.error(f"invalid integer: {tokens[0]!r}")
    print(count_good_numbers(n))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())