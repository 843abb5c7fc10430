"""
Numerical Safeguards — Integer & Float Primitives

Low-level helpers shared by the decimal engine, the series helpers and the
primality tests:
- Decimal digit counting for arbitrarily large integers
- Powers of ten and toward-zero integer division
- NaN/Inf detection for native floats entering the engine
- Argument validation with uniform error messages

CRITICAL INVARIANTS:
1. num_digits never goes through str(), so it is not bounded by the
   interpreter's int-to-str digit limit
2. div_toward_zero truncates toward zero (not floor), for every sign pattern
3. All helpers are pure and deterministic
"""

import math
from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

# log10(2), used to estimate decimal digits from the bit length
LOG10_2: Final[float] = 0.30102999566398120

# Largest mantissa bit length for which the log10 estimate is exact
# without a correction step
_EXACT_ESTIMATE_BITS: Final[int] = 53


# =============================================================================
# DIGITS & POWERS OF TEN
# =============================================================================


def pow10(exponent: int) -> int:
    """
    Integer power of ten.

    Args:
        exponent: Non-negative power

    Returns:
        10 ** exponent

    Raises:
        ValueError: If exponent is negative
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return 10**exponent


def num_digits(value: int) -> int:
    """
    Number of decimal digits of |value|, sign not counted.

    Zero has one digit, matching its textual form "0".

    Args:
        value: Any integer

    Returns:
        Digit count >= 1

    Examples:
        >>> num_digits(0)
        1
        >>> num_digits(-12345)
        5
        >>> num_digits(10**100)
        101
    """
    value = abs(value)
    if value < 10:
        return 1

    bits = value.bit_length()
    if bits <= _EXACT_ESTIMATE_BITS:
        return len(str(value))

    # Estimate from bit length, then correct by at most one in either direction
    estimate = int((bits - 1) * LOG10_2) + 1
    if value < 10 ** (estimate - 1):
        return estimate - 1
    if value >= 10**estimate:
        return estimate + 1
    return estimate


def div_toward_zero(numerator: int, denominator: int) -> int:
    """
    Integer division truncating toward zero.

    Python's // floors; the decimal engine needs the quotient of the
    magnitudes with the sign of the true quotient.

    Args:
        numerator: Dividend
        denominator: Divisor (non-zero)

    Returns:
        trunc(numerator / denominator)

    Raises:
        ZeroDivisionError: If denominator is zero

    Examples:
        >>> div_toward_zero(7, 2)
        3
        >>> div_toward_zero(-7, 2)
        -3
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


# =============================================================================
# NaN/Inf DETECTION
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is finite (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if finite, False for NaN or Inf
    """
    return math.isfinite(value)


# =============================================================================
# VALIDATION
# =============================================================================


def validate_positive_int(value: int, name: str) -> None:
    """
    Validate that value is an int strictly greater than zero.

    Args:
        value: Value to check
        name: Parameter name for the error message

    Raises:
        TypeError: If value is not an int (bool is rejected)
        ValueError: If value <= 0
    """
    validate_int(value, name)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Validate that value is an int greater than or equal to zero.

    Raises:
        TypeError: If value is not an int (bool is rejected)
        ValueError: If value < 0
    """
    validate_int(value, name)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_int(value: int, name: str) -> None:
    """Reject non-int values, including bool."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
