"""
Puzzle programs built on the core math package.

- billboard: digit windows of e (first 10-digit prime, digit sum 49)
- fibonacci: staircase counting
- monty_hall: three-door game simulation

Run them with `python -m src.puzzles <name>`.
"""

from .billboard import WindowMatch, e_digits, first_prime_window, nth_window_with_digit_sum
from .fibonacci import fibonacci, fibonacci_sequence, staircase_ways
from .monty_hall import MontyHallResult, simulate

__all__ = [
    "WindowMatch",
    "e_digits",
    "first_prime_window",
    "nth_window_with_digit_sum",
    "fibonacci",
    "fibonacci_sequence",
    "staircase_ways",
    "MontyHallResult",
    "simulate",
]
