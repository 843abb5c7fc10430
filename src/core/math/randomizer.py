"""
Randomizer — uniform big integers from the OS CSPRNG

random_below(bound) draws a buffer two bytes wider than the bound, so a
sample falls in the biased top fragment (the partial multiple of the bound
below the buffer's range) with probability below 2^-16. Such samples are
rejected and redrawn, which keeps `sample % bound` exactly uniform.

Reads of the OS randomness source are blocking.
"""

import logging
import secrets
from typing import Final

logger = logging.getLogger(__name__)

# Extra bytes drawn on top of the bound's width
EXTRA_BYTES: Final[int] = 2


def random_below(bound: int) -> int:
    """
    Uniform integer in [0, bound).

    Args:
        bound: Exclusive upper bound (> 0)

    Returns:
        Random integer 0 <= r < bound

    Raises:
        ValueError: If bound <= 0
    """
    if bound <= 0:
        raise ValueError(f"bound must be positive, got {bound}")

    width = (bound.bit_length() + 7) // 8 + EXTRA_BYTES
    generated_bound = 1 << (width * 8)
    validity_bound = generated_bound - generated_bound % bound

    while True:
        sample = int.from_bytes(secrets.token_bytes(width), "little")
        if sample < validity_bound:
            return sample % bound
        logger.debug("Random sample in biased fragment, redrawing (bound=%d)", bound)


def random_between(low: int, high: int) -> int:
    """
    Uniform integer in [low, high).

    Raises:
        ValueError: If high <= low
    """
    if high <= low:
        raise ValueError(f"high must be greater than low, got low={low}, high={high}")
    return low + random_below(high - low)
