"""Command-line entry point for a few of the drills."""

import argparse
from collections.abc import Sequence

from algodrills.numbers import count_digits, gcd
from algodrills.sorting import insertion_sort, merge_sort

DEFAULT_VALUES = [9, 6, 11, 13, 81, 15, 7, 4, 19]

_SORTS = {"insertion": insertion_sort, "merge": merge_sort}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algodrills", description="Run small algorithm drills.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("hello", help="print a greeting")

    digits = commands.add_parser("count-digits", help="count the decimal digits of a number")
    digits.add_argument("number", type=int, nargs="?", default=12345)

    divisor = commands.add_parser("gcd", help="greatest common divisor of two numbers")
    divisor.add_argument("a", type=int, nargs="?", default=52)
    divisor.add_argument("b", type=int, nargs="?", default=10)

    sorter = commands.add_parser("sort", help="sort integers")
    sorter.add_argument("algorithm", choices=sorted(_SORTS))
    sorter.add_argument("values", type=int, nargs="*", default=DEFAULT_VALUES)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen drill, printing its result."""
    args = _build_parser().parse_args(argv)
    if args.command == "hello":
        print("Hello world")
    elif args.command == "count-digits":
        print(count_digits(args.number))
    elif args.command == "gcd":
        try:
            result = gcd(args.a, args.b)
        except ValueError as error:
            raise SystemExit(f"algodrills: {error}") from error
        print(f"GCD is {result}")
    elif args.command == "sort":
        print(" ".join(str(value) for value in _SORTS[args.algorithm](args.values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())