"""
Primality — integer primality tests

Range-dependent strategy:
- n < 2^31: trial division by odd numbers up to isqrt(n)
- n < 2^64: deterministic Miller–Rabin with known witness sets
- larger n: probabilistic Miller–Rabin with random witnesses

Witness sets (deterministic up to the stated bound):
    n < 4_759_123_141          → {2, 7, 61}
    n < 341_550_071_728_321    → {2, 3, 5, 7, 11, 13, 17}
    n < 2^64                   → {2, 3, 5, 7, 11, 13, 17, 19, 23}
"""

import math
from typing import Final, Iterable

from src.core.math.randomizer import random_between

TRIAL_DIVISION_LIMIT: Final[int] = 2**31

DETERMINISTIC_LIMIT: Final[int] = 2**64

# Random witnesses per probabilistic test; error probability <= 4^-rounds
MILLER_RABIN_ROUNDS: Final[int] = 40

_WITNESS_TABLE: Final[tuple[tuple[int, tuple[int, ...]], ...]] = (
    (4_759_123_141, (2, 7, 61)),
    (341_550_071_728_321, (2, 3, 5, 7, 11, 13, 17)),
    (DETERMINISTIC_LIMIT, (2, 3, 5, 7, 11, 13, 17, 19, 23)),
)


def is_prime(n: int) -> bool:
    """
    Primality of an integer of any size.

    Examples:
        >>> is_prime(7427466391)
        True
        >>> is_prime(561)
        False
    """
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    if n < TRIAL_DIVISION_LIMIT:
        return is_prime_trial_division(n)
    if n < DETERMINISTIC_LIMIT:
        return miller_rabin(n, deterministic_witnesses(n))
    return miller_rabin(n, (random_between(2, n - 1) for _ in range(MILLER_RABIN_ROUNDS)))


def is_prime_trial_division(n: int) -> bool:
    """Trial division by 2 and odd numbers up to isqrt(n)."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    for divisor in range(3, math.isqrt(n) + 1, 2):
        if n % divisor == 0:
            return False
    return True


def deterministic_witnesses(n: int) -> tuple[int, ...]:
    """
    Witness set that makes Miller–Rabin exact for n.

    Raises:
        ValueError: If n >= 2^64
    """
    for limit, witnesses in _WITNESS_TABLE:
        if n < limit:
            return witnesses
    raise ValueError(f"No deterministic witness set for n >= 2^64, got {n}")


def miller_rabin(n: int, witnesses: Iterable[int]) -> bool:
    """
    Miller–Rabin strong probable-prime test.

    Args:
        n: Odd integer > 3
        witnesses: Bases to test; each is clamped to n - 2

    Returns:
        False if some witness proves n composite, True otherwise
    """
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for witness in witnesses:
        a = min(witness, n - 2)
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True
