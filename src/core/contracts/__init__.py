"""
Contract Validation Module

JSON Schema validation of serialized values.
"""

from .validators import ContractValidator, SchemaLoader, validate_big_decimal

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Functions
    "validate_big_decimal",
]
