"""
BigDecimal — Arbitrary Precision Decimal

A value is an integer mantissa times a power of ten:

    value = mantissa × 10^exponent

All operations are exact except division, which never produces more digits
than the context precision allows (see BigDecimal.divide).

CRITICAL INVARIANTS:
1. Canonical form: the mantissa has no trailing decimal zero; zero is (0, 0)
2. Every construction path normalizes, so equality of canonical parts is
   equality of values
3. Instances are immutable; every operation returns a new instance
4. With PrecisionContext.always_truncate, every constructed value is
   truncated to the context precision right after normalization

FORMULAS:
    align(a, b)   = a.mantissa × 10^(a.exponent − b.exponent), a.exponent > b.exponent
    a + b         = (align + other.mantissa) × 10^min(a.exponent, b.exponent)
    a × b         = (a.mantissa × b.mantissa) × 10^(a.exponent + b.exponent)
    digit_diff    = digits(a.mantissa) − digits(b.mantissa)
    scale_up      = max(0, precision − digit_diff)
    a / b         = trunc(a.mantissa × 10^scale_up / b.mantissa)
                    × 10^(a.exponent − b.exponent − scale_up)
"""

import sys
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from src.core.math.numerical_safeguards import (
    div_toward_zero,
    is_valid_float,
    num_digits,
    pow10,
    validate_int,
    validate_positive_int,
)
from src.core.math.precision import PrecisionContext, get_context

# =============================================================================
# NORMALIZATION & TRUNCATION
# =============================================================================


def normalize(mantissa: int, exponent: int) -> tuple[int, int]:
    """
    Canonical (mantissa, exponent) pair: trailing zeros moved into the exponent.

    Args:
        mantissa: Signed significand
        exponent: Power of ten

    Returns:
        (mantissa', exponent') with no trailing zero in mantissa'; (0, 0) for zero

    Examples:
        >>> normalize(1230000000, 0)
        (123, 7)
        >>> normalize(0, -5)
        (0, 0)
    """
    if mantissa == 0:
        return 0, 0

    shortened, remainder = divmod(mantissa, 10)
    while remainder == 0:
        mantissa = shortened
        exponent += 1
        shortened, remainder = divmod(mantissa, 10)
    return mantissa, exponent


def truncate_parts(mantissa: int, exponent: int, precision: int) -> tuple[int, int]:
    """
    Drop least significant digits until at most `precision` digits remain.

    Digits are cut toward zero (no rounding) and the result is re-normalized.

    Args:
        mantissa: Signed significand
        exponent: Power of ten
        precision: Maximum number of significant digits (> 0)

    Returns:
        Canonical (mantissa', exponent') with num_digits(mantissa') <= precision

    Raises:
        ValueError: If precision <= 0
    """
    validate_positive_int(precision, "precision")
    mantissa, exponent = normalize(mantissa, exponent)

    excess = num_digits(mantissa) - precision
    if excess > 0:
        mantissa = div_toward_zero(mantissa, pow10(excess))
        exponent += excess
        mantissa, exponent = normalize(mantissa, exponent)
    return mantissa, exponent


def _canonical(mantissa: int, exponent: int, context: PrecisionContext) -> tuple[int, int]:
    if context.always_truncate:
        return truncate_parts(mantissa, exponent, context.precision)
    return normalize(mantissa, exponent)


# =============================================================================
# VALUE TYPE
# =============================================================================


@dataclass(frozen=True, eq=False)
class BigDecimal:
    """
    Immutable arbitrary precision decimal.

    BigDecimal(mantissa, exponent) normalizes with the bound PrecisionContext;
    BigDecimal.create(...) does the same with an explicit context.

    Operators + - * / and comparisons accept BigDecimal and int operands.
    Floats and Decimals must be widened explicitly with from_float /
    from_decimal.
    """

    mantissa: int
    exponent: int = 0

    def __post_init__(self) -> None:
        validate_int(self.mantissa, "mantissa")
        validate_int(self.exponent, "exponent")
        self._assign(*_canonical(self.mantissa, self.exponent, get_context()))

    def _assign(self, mantissa: int, exponent: int) -> None:
        object.__setattr__(self, "mantissa", mantissa)
        object.__setattr__(self, "exponent", exponent)

    @classmethod
    def create(
        cls, mantissa: int, exponent: int = 0, context: Optional[PrecisionContext] = None
    ) -> "BigDecimal":
        """
        Build a canonical value under an explicit context.

        Args:
            mantissa: Signed significand
            exponent: Power of ten
            context: Precision context (default: the bound one)

        Raises:
            TypeError: If mantissa or exponent is not an int
        """
        validate_int(mantissa, "mantissa")
        validate_int(exponent, "exponent")
        ctx = context if context is not None else get_context()
        value = object.__new__(cls)
        value._assign(*_canonical(mantissa, exponent, ctx))
        return value

    # -------------------------------------------------------------------------
    # Widening conversions
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int, context: Optional[PrecisionContext] = None) -> "BigDecimal":
        """Exact conversion of an integer (exponent 0 before normalization)."""
        return cls.create(value, 0, context)

    @classmethod
    def from_float(
        cls, value: float, context: Optional[PrecisionContext] = None
    ) -> "BigDecimal":
        """
        Best-effort conversion of a native float.

        Starting from the truncated integer part, the value is scaled by ten
        until the scaled float equals its own truncation, i.e. until the float
        is recovered exactly or its precision is exhausted.

        Raises:
            ValueError: If value is NaN or Inf

        Examples:
            >>> str(BigDecimal.from_float(0.5))
            '5E-1'
        """
        value = float(value)
        if not is_valid_float(value):
            raise ValueError(f"Cannot convert non-finite float to BigDecimal: {value}")

        mantissa = int(value)
        exponent = 0
        scale_factor = 1.0
        while value * scale_factor != mantissa:
            next_factor = scale_factor * 10
            scaled = value * next_factor
            if not is_valid_float(scaled):
                break
            scale_factor = next_factor
            exponent -= 1
            mantissa = int(scaled)
        return cls.create(mantissa, exponent, context)

    @classmethod
    def from_decimal(
        cls, value: Decimal, context: Optional[PrecisionContext] = None
    ) -> "BigDecimal":
        """
        Conversion of a decimal.Decimal using the same scale-by-ten recovery.

        Exact whenever the Decimal fits in the active decimal-module precision.

        Raises:
            ValueError: If value is NaN or Inf
        """
        if not value.is_finite():
            raise ValueError(f"Cannot convert non-finite Decimal to BigDecimal: {value}")

        mantissa = int(value)
        exponent = 0
        scale_factor = Decimal(1)
        while value * scale_factor != mantissa:
            exponent -= 1
            scale_factor *= 10
            mantissa = int(value * scale_factor)
        return cls.create(mantissa, exponent, context)

    # -------------------------------------------------------------------------
    # Narrowing conversions (lossy)
    # -------------------------------------------------------------------------

    def to_float(self) -> float:
        """
        Nearest float.

        Raises:
            OverflowError: If the magnitude exceeds the float range
        """
        if self.exponent >= 0:
            return float(self.mantissa * pow10(self.exponent))
        return self.mantissa / pow10(-self.exponent)

    def to_int(self) -> int:
        """Integer part, truncated toward zero."""
        if self.exponent >= 0:
            return self.mantissa * pow10(self.exponent)
        return div_toward_zero(self.mantissa, pow10(-self.exponent))

    def to_decimal(self) -> Decimal:
        """decimal.Decimal rounded to the active decimal-module precision."""
        return Decimal(self.mantissa).scaleb(self.exponent)

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return self.mantissa != 0

    def __str__(self) -> str:
        return f"{self.mantissa}E{self.exponent}"

    # -------------------------------------------------------------------------
    # Normalization / truncation
    # -------------------------------------------------------------------------

    def normalize(self) -> "BigDecimal":
        # Instances are canonical from construction on.
        return self

    def truncate(
        self, precision: Optional[int] = None, context: Optional[PrecisionContext] = None
    ) -> "BigDecimal":
        """
        Remove least significant digits beyond `precision`.

        Args:
            precision: Maximum significant digits (default: context precision)
            context: Precision context (default: the bound one)

        Returns:
            Value with at most `precision` mantissa digits
        """
        ctx = context if context is not None else get_context()
        limit = precision if precision is not None else ctx.precision
        return BigDecimal.create(*truncate_parts(self.mantissa, self.exponent, limit), ctx)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "BigDecimal", context: Optional[PrecisionContext] = None) -> "BigDecimal":
        """Exact sum; the result takes the smaller of the two exponents."""
        if self.exponent > other.exponent:
            return BigDecimal.create(
                _align(self, other) + other.mantissa, other.exponent, context
            )
        return BigDecimal.create(_align(other, self) + self.mantissa, self.exponent, context)

    def subtract(
        self, other: "BigDecimal", context: Optional[PrecisionContext] = None
    ) -> "BigDecimal":
        """Exact difference."""
        return self.add(other.negate(context), context)

    def multiply(
        self, other: "BigDecimal", context: Optional[PrecisionContext] = None
    ) -> "BigDecimal":
        """Exact product."""
        return BigDecimal.create(
            self.mantissa * other.mantissa, self.exponent + other.exponent, context
        )

    def divide(
        self, other: "BigDecimal", context: Optional[PrecisionContext] = None
    ) -> "BigDecimal":
        """
        Quotient bounded by the context precision.

        The dividend mantissa is scaled up by
        max(0, precision − (digits(self.mantissa) − digits(other.mantissa)))
        powers of ten and divided toward zero; the remainder is dropped.
        Only mantissa digit counts enter the scale-up, the exponents do not,
        so the quotient mantissa holds `precision` or `precision + 1` digits
        (before normalization) depending on the leading digits of the operands.

        Raises:
            ZeroDivisionError: If other is zero
        """
        if other.mantissa == 0:
            raise ZeroDivisionError("BigDecimal division by zero")

        ctx = context if context is not None else get_context()
        digit_diff = num_digits(self.mantissa) - num_digits(other.mantissa)
        scale_up = max(0, ctx.precision - digit_diff)
        quotient = div_toward_zero(self.mantissa * pow10(scale_up), other.mantissa)
        return BigDecimal.create(quotient, self.exponent - other.exponent - scale_up, ctx)

    def negate(self, context: Optional[PrecisionContext] = None) -> "BigDecimal":
        return BigDecimal.create(-self.mantissa, self.exponent, context)

    def increment(self) -> "BigDecimal":
        """self + 1"""
        return self.add(ONE)

    def decrement(self) -> "BigDecimal":
        """self − 1"""
        return self.subtract(ONE)

    def factorial(self) -> "BigDecimal":
        """
        Product 1 × 2 × … × n over the integers n <= self.

        Values below one give one; a fractional value uses its integer floor.

        Examples:
            >>> BigDecimal(5).factorial() == 120
            True
        """
        result = ONE
        counter = ONE
        while counter <= self:
            result = result * counter
            counter = counter.increment()
        return result

    def __neg__(self) -> "BigDecimal":
        return self.negate()

    def __pos__(self) -> "BigDecimal":
        return self

    def __abs__(self) -> "BigDecimal":
        return self.negate() if self.mantissa < 0 else self

    def __add__(self, other: object) -> "BigDecimal":
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return self.add(right)

    def __radd__(self, other: object) -> "BigDecimal":
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return left.add(self)

    def __sub__(self, other: object) -> "BigDecimal":
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return self.subtract(right)

    def __rsub__(self, other: object) -> "BigDecimal":
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return left.subtract(self)

    def __mul__(self, other: object) -> "BigDecimal":
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return self.multiply(right)

    def __rmul__(self, other: object) -> "BigDecimal":
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return left.multiply(self)

    def __truediv__(self, other: object) -> "BigDecimal":
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return self.divide(right)

    def __rtruediv__(self, other: object) -> "BigDecimal":
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return left.divide(self)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare_to(self, other: Union["BigDecimal", int]) -> int:
        """
        Three-way comparison: -1, 0 or 1.

        Exponents are aligned to the smaller one, then mantissas compared.

        Raises:
            TypeError: If other is neither BigDecimal nor int
        """
        right = _coerce(other)
        if right is None:
            raise TypeError(f"Cannot compare BigDecimal with {type(other).__name__}")
        return _compare(self, right)

    def __eq__(self, other: object) -> bool:
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return self.mantissa == right.mantissa and self.exponent == right.exponent

    def __hash__(self) -> int:
        # Numeric hash of mantissa * 10^exponent reduced modulo the hash
        # modulus, equal to the int or Fraction hash of the same value
        reduced = hash(hash(abs(self.mantissa)) * pow(10, self.exponent, _HASH_MODULUS))
        result = reduced if self.mantissa >= 0 else -reduced
        return -2 if result == -1 else result

    def __lt__(self, other: object) -> bool:
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return _compare(self, right) < 0

    def __le__(self, other: object) -> bool:
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return _compare(self, right) <= 0

    def __gt__(self, other: object) -> bool:
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return _compare(self, right) > 0

    def __ge__(self, other: object) -> bool:
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return _compare(self, right) >= 0


# Widening context for constants and int operands: never truncates
_EXACT_CONTEXT = PrecisionContext()

_HASH_MODULUS = sys.hash_info.modulus

ZERO = BigDecimal.create(0, 0, _EXACT_CONTEXT)
ONE = BigDecimal.create(1, 0, _EXACT_CONTEXT)


# =============================================================================
# HELPERS
# =============================================================================


def _align(value: BigDecimal, reference: BigDecimal) -> int:
    """Mantissa of value scaled to the (not larger) exponent of reference."""
    return value.mantissa * pow10(value.exponent - reference.exponent)


def _compare(left: BigDecimal, right: BigDecimal) -> int:
    if left.exponent > right.exponent:
        a, b = _align(left, right), right.mantissa
    else:
        a, b = left.mantissa, _align(right, left)
    return (a > b) - (a < b)


def _coerce(value: object) -> Optional[BigDecimal]:
    if isinstance(value, BigDecimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigDecimal.create(value, 0, _EXACT_CONTEXT)
    return None
