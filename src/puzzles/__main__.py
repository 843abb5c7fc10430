"""
Command line runner for the puzzle programs.

    python -m src.puzzles billboard [--digits N]
    python -m src.puzzles fibonacci [--count N]
    python -m src.puzzles monty-hall [--iterations N] [--seed S]
"""

import argparse
import logging
import random
import sys
from typing import Optional, Sequence

from .billboard import DEFAULT_DIGITS, e_digits, first_prime_window, nth_window_with_digit_sum
from .fibonacci import fibonacci_sequence, staircase_ways
from .monty_hall import DEFAULT_ITERATIONS, simulate

FIBONACCI_DEFAULT_COUNT = 16


def _run_billboard(args: argparse.Namespace) -> int:
    digits = e_digits(args.digits)
    prime = first_prime_window(digits)
    if prime is None:
        print(f"No 10-digit prime in the first {args.digits} digits of e")
        return 1
    print(f"Found: {prime.window}.com (at {prime.start})")

    fifth = nth_window_with_digit_sum(digits, 5)
    if fifth is None:
        print(f"f(5) not reached in the first {args.digits} digits of e")
        return 1
    print(f"Found: f(5) = {fifth.window}")
    return 0


def _run_fibonacci(args: argparse.Namespace) -> int:
    for n, value in enumerate(fibonacci_sequence(args.count)):
        print(f"fibonacci({n}) = {value}")
    for steps in range(1, args.count):
        print(f"{steps} steps: {staircase_ways(steps)} ways")
    return 0


def _run_monty_hall(args: argparse.Namespace) -> int:
    result = simulate(args.iterations, random.Random(args.seed))
    print(
        f"stay: {result.stay_percentage.to_float():.2f}%, "
        f"switch: {result.switch_percentage.to_float():.2f}%"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="python -m src.puzzles", description=__doc__)
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    billboard = commands.add_parser("billboard", help="Digit windows of e")
    billboard.add_argument("--digits", type=int, default=DEFAULT_DIGITS)
    billboard.set_defaults(handler=_run_billboard)

    fib = commands.add_parser("fibonacci", help="Staircase counting")
    fib.add_argument("--count", type=int, default=FIBONACCI_DEFAULT_COUNT)
    fib.set_defaults(handler=_run_fibonacci)

    monty = commands.add_parser("monty-hall", help="Three-door game simulation")
    monty.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    monty.add_argument("--seed", type=int, default=None)
    monty.set_defaults(handler=_run_monty_hall)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
