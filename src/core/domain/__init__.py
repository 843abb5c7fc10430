"""
Domain models

Pydantic models for values exchanged outside the process.
"""

from .decimal_payload import MANTISSA_PATTERN, BigDecimalPayload

__all__ = [
    "MANTISSA_PATTERN",
    "BigDecimalPayload",
]
