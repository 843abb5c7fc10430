"""
Core math modules

Arbitrary precision decimal arithmetic and the integer helpers built on it.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    div_toward_zero,
    is_valid_float,
    num_digits,
    pow10,
    validate_int,
    validate_non_negative_int,
    validate_positive_int,
)

# Precision Policy
from src.core.math.precision import (
    DEFAULT_CONTEXT,
    DEFAULT_PRECISION,
    MAX_PARSE_SCALE,
    PrecisionContext,
    get_context,
    local_context,
    reset_context,
    set_context,
)

# BigDecimal
from src.core.math.big_decimal import (
    ONE,
    ZERO,
    BigDecimal,
    normalize,
    truncate_parts,
)

# Parser
from src.core.math.parser import (
    EmptyValue,
    InvalidCharacter,
    MalformedExponent,
    ParseError,
    ParseResult,
    ParseState,
    is_integer_text,
    parse,
    scan,
    try_parse,
)

# Series
from src.core.math.series import (
    SERIES_CHUNK,
    e,
    exp,
    factorial,
    pow,
)

# Primality & random integers
from src.core.math.primality import (
    MILLER_RABIN_ROUNDS,
    deterministic_witnesses,
    is_prime,
    is_prime_trial_division,
    miller_rabin,
)
from src.core.math.randomizer import random_below, random_between

__all__ = [
    # Numerical Safeguards
    "div_toward_zero",
    "is_valid_float",
    "num_digits",
    "pow10",
    "validate_int",
    "validate_non_negative_int",
    "validate_positive_int",
    # Precision Policy
    "DEFAULT_CONTEXT",
    "DEFAULT_PRECISION",
    "MAX_PARSE_SCALE",
    "PrecisionContext",
    "get_context",
    "local_context",
    "reset_context",
    "set_context",
    # BigDecimal
    "ONE",
    "ZERO",
    "BigDecimal",
    "normalize",
    "truncate_parts",
    # Parser
    "EmptyValue",
    "InvalidCharacter",
    "MalformedExponent",
    "ParseError",
    "ParseResult",
    "ParseState",
    "is_integer_text",
    "parse",
    "scan",
    "try_parse",
    # Series
    "SERIES_CHUNK",
    "e",
    "exp",
    "factorial",
    "pow",
    # Primality & random integers
    "MILLER_RABIN_ROUNDS",
    "deterministic_witnesses",
    "is_prime",
    "is_prime_trial_division",
    "miller_rabin",
    "random_below",
    "random_between",
]
