"""
Series — approximate exp / pow / e on top of BigDecimal

These are conveniences, not an arbitrary precision transcendental library:
- exp(x) and pow(base, x) evaluate native math.exp / math.pow on chunks of
  the exponent so no single native call overflows, and multiply the chunks
  together as BigDecimal. Each chunk carries only float precision.
- e(max_denominator) sums 2.5 + Σ 1/k! for k = 3..max_denominator with
  BigDecimal division. There is no convergence check: the caller picks
  max_denominator large enough for the digits wanted.

FORMULAS:
    exp(x)       = Π exp(±SERIES_CHUNK) × exp(remainder)
    pow(b, x)    = Π b^(±SERIES_CHUNK) × b^(remainder)
    e(n)         = 2.5 + Σ_{k=3..n} 1/k!
"""

import math
from typing import Final, Optional

from src.core.math.big_decimal import ONE, BigDecimal
from src.core.math.numerical_safeguards import validate_non_negative_int
from src.core.math.parser import parse
from src.core.math.precision import get_context

# Magnitude of exponent peeled off per native call
SERIES_CHUNK: Final[int] = 100

# Seed of the e series: 1/0! + 1/1! + 1/2!
E_SEED: Final[str] = "2.5"


def factorial(n: int) -> int:
    """
    n! as an iterative product 1 × 2 × … × n.

    Raises:
        ValueError: If n is negative

    Examples:
        >>> factorial(5)
        120
    """
    validate_non_negative_int(n, "n")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def exp(x: float) -> BigDecimal:
    """
    Approximate e^x without overflowing the native float range.

    Args:
        x: Exponent

    Returns:
        BigDecimal approximation (float precision per chunk)
    """
    result = ONE
    while abs(x) > SERIES_CHUNK:
        step = SERIES_CHUNK if x > 0 else -SERIES_CHUNK
        result = result * BigDecimal.from_float(math.exp(step))
        x -= step
    return result * BigDecimal.from_float(math.exp(x))


def pow(base: float, x: float) -> BigDecimal:
    """
    Approximate base^x without overflowing the native float range.

    Args:
        base: Base
        x: Exponent

    Returns:
        BigDecimal approximation (float precision per chunk)
    """
    result = ONE
    while abs(x) > SERIES_CHUNK:
        step = SERIES_CHUNK if x > 0 else -SERIES_CHUNK
        result = result * BigDecimal.from_float(math.pow(base, step))
        x -= step
    return result * BigDecimal.from_float(math.pow(base, x))


def e(max_denominator: Optional[int] = None) -> BigDecimal:
    """
    Euler's number from the partial sums of 1/k!.

    Args:
        max_denominator: Last k of the series (default: context precision)

    Returns:
        Approximation of e; each term is divided at the context precision
    """
    limit = max_denominator if max_denominator is not None else get_context().precision
    total = parse(E_SEED)
    for k in range(3, limit + 1):
        total = total + ONE / BigDecimal.from_int(factorial(k))
    return total
