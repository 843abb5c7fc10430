"""
BigDecimalPayload — JSON wire form of a BigDecimal

Immutable Pydantic model matching contracts/schema/big_decimal.json.
The mantissa travels as a string so that JSON number precision never
truncates it; the exponent is a plain integer.

    {"mantissa": "-15", "exponent": -4}   ≡   -0.0015
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.big_decimal import BigDecimal
from src.core.math.precision import PrecisionContext

# Signed decimal integer without leading zeros
MANTISSA_PATTERN: Final[str] = r"^-?(0|[1-9][0-9]*)$"


class BigDecimalPayload(BaseModel):
    """
    Serialized BigDecimal.

    Payloads produced by from_big_decimal are canonical; payloads read from
    the wire are re-normalized by to_big_decimal.
    """

    mantissa: str = Field(..., pattern=MANTISSA_PATTERN, description="Signed mantissa digits")
    exponent: int = Field(..., description="Power of ten applied to the mantissa")

    model_config = {"frozen": True}

    @field_validator("mantissa")
    @classmethod
    def validate_negative_zero(cls, v: str) -> str:
        """Zero has a single spelling."""
        if v == "-0":
            raise ValueError("mantissa '-0' is not allowed, use '0'")
        return v

    @classmethod
    def from_big_decimal(cls, value: BigDecimal) -> "BigDecimalPayload":
        return cls(mantissa=str(value.mantissa), exponent=value.exponent)

    def to_big_decimal(self, context: PrecisionContext | None = None) -> BigDecimal:
        """
        Rebuild the value.

        Args:
            context: Precision context used for normalization (default: bound one)
        """
        return BigDecimal.create(int(self.mantissa), self.exponent, context)
