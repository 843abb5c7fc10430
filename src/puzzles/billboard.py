"""
Billboard — digit windows in the decimal expansion of e

    { first 10-digit prime found in consecutive digits of e }.com

and its follow-up riddle:

    f(1) = 7182818284
    f(2) = 8182845904
    f(3) = 8747135266
    f(4) = 7427466391
    f(5) = ?

where f(n) is the n-th window of ten consecutive digits of e whose digits
sum to 49.

Digits of e are computed with the BigDecimal series, not taken from a table.
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional

from src.core.math import is_integer_text, is_prime, local_context
from src.core.math import e as euler
from src.core.math.numerical_safeguards import pow10, validate_positive_int

logger = logging.getLogger(__name__)

WINDOW_WIDTH: Final[int] = 10

DIGIT_SUM_TARGET: Final[int] = 49

# Digits of e computed by default; both riddles resolve well inside this
DEFAULT_DIGITS: Final[int] = 200

# Extra precision carried while summing the series
GUARD_DIGITS: Final[int] = 10


@dataclass(frozen=True)
class WindowMatch:
    """A window of consecutive digits and its offset in the digit string."""

    start: int
    window: str


def e_digits(count: int = DEFAULT_DIGITS) -> str:
    """
    Leading digits of e, without the decimal point ("27182818...").

    Args:
        count: Number of digits (> 0)

    Returns:
        String of exactly `count` digits
    """
    validate_positive_int(count, "count")
    working = count + GUARD_DIGITS
    with local_context(precision=working):
        value = euler(working)
        digits = (value * pow10(count - 1)).to_int()
    return str(digits)


def first_prime_window(digits: str, width: int = WINDOW_WIDTH) -> Optional[WindowMatch]:
    """
    First window of `width` digits that reads as a `width`-digit prime.

    Windows starting with 0 are skipped (they have fewer than `width` digits).

    Returns:
        The match, or None if the digit string is exhausted
    """
    for start in range(len(digits) - width + 1):
        window = digits[start : start + width]
        if not is_integer_text(window):
            raise ValueError(f"Non-digit characters in window {window!r} at {start}")
        if window[0] == "0":
            continue
        if is_prime(int(window)):
            logger.debug("Prime window %s at %d", window, start)
            return WindowMatch(start=start, window=window)
    return None


def nth_window_with_digit_sum(
    digits: str,
    n: int,
    target: int = DIGIT_SUM_TARGET,
    width: int = WINDOW_WIDTH,
) -> Optional[WindowMatch]:
    """
    n-th window (1-based) of `width` digits whose digit sum equals target.

    Returns:
        The match, or None if the digit string is exhausted first
    """
    validate_positive_int(n, "n")
    found = 0
    for start in range(len(digits) - width + 1):
        window = digits[start : start + width]
        if not is_integer_text(window):
            raise ValueError(f"Non-digit characters in window {window!r} at {start}")
        if sum(int(char) for char in window) == target:
            found += 1
            logger.debug("f(%d) = %s at %d", found, window, start)
            if found == n:
                return WindowMatch(start=start, window=window)
    return None
