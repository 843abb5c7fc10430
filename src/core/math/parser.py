"""
Parser — text to BigDecimal

Accepted grammar (informal):
    [+-]?(\\d+(\\.\\d*)?|\\.\\d+)([eE][+-]?\\d+)?

The scanner is a finite-state machine over the characters of the literal:

    START ──digit/sign──▶ INTEGER ──'.'──▶ DECIMAL
      │                     │                 │
      └──'.'──▶ DECIMAL     └──e/E──▶ E ◀──e/E┘
                                      │
                                      └──digit/sign──▶ EXPONENT

While in DECIMAL every digit increments the scale. The scale counter
saturates at PrecisionContext.max_scale; fractional digits past the cap are
truncated from the mantissa. An exponent marker then shifts the scale: a
negative scale becomes a positive result exponent, and a scale pushed past
the cap drops the surplus digits from the mantissa.

scan() never raises for malformed text: it returns a ParseResult carrying
either the value or one of the ParseError kinds. parse() raises that error.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

from src.core.math.big_decimal import BigDecimal
from src.core.math.numerical_safeguards import num_digits, pow10
from src.core.math.precision import PrecisionContext, get_context

logger = logging.getLogger(__name__)

DIGITS: Final[str] = "0123456789"
SIGNS: Final[str] = "+-"
DECIMAL_POINT: Final[str] = "."
EXPONENT_MARKERS: Final[str] = "eE"

# Digits converted per int() call, kept below the interpreter's
# int-to-str conversion limit
_DIGIT_CHUNK: Final[int] = 1000


# =============================================================================
# ERRORS
# =============================================================================


class ParseError(ValueError):
    """Base class for malformed decimal literals."""

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


class InvalidCharacter(ParseError):
    """A character that is not allowed in the current scanner state."""

    def __init__(self, char: str, text: str, position: int):
        super().__init__(f"invalid character {char!r} at {position} in: {text!r}", text)
        self.char = char
        self.position = position


class EmptyValue(ParseError):
    """The literal contains no mantissa digits."""

    def __init__(self, text: str):
        super().__init__(f"string didn't contain a value: {text!r}", text)


class MalformedExponent(ParseError):
    """An exponent marker that is not followed by exponent digits."""

    def __init__(self, text: str):
        super().__init__(f"string contained an 'E' but no exponent value: {text!r}", text)


# =============================================================================
# SCANNER
# =============================================================================


class ParseState(str, Enum):
    """States of the literal scanner."""

    START = "START"
    INTEGER = "INTEGER"
    DECIMAL = "DECIMAL"
    E = "E"
    EXPONENT = "EXPONENT"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of scan(): exactly one of value / error is set."""

    text: str
    value: Optional[BigDecimal] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> BigDecimal:
        """
        Value of a successful scan.

        Raises:
            ParseError: The recorded error of a failed scan
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def scan(text: str, context: Optional[PrecisionContext] = None) -> ParseResult:
    """
    Run the literal scanner and report the outcome as data.

    Args:
        text: Decimal literal
        context: Precision context (default: the bound one); supplies the
            scale cap and the always-truncate policy of the result

    Returns:
        ParseResult with the value, or with InvalidCharacter / EmptyValue /
        MalformedExponent

    Raises:
        TypeError: If text is not a str
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")

    ctx = context if context is not None else get_context()

    state = ParseState.START
    negative = False
    digits: list[str] = []
    scale = 0
    has_exponent = False
    exponent_negative = False
    exponent_digits: list[str] = []

    for position, char in enumerate(text):
        if state is ParseState.START:
            if char in DIGITS:
                digits.append(char)
                state = ParseState.INTEGER
            elif char in SIGNS:
                negative = char == "-"
                state = ParseState.INTEGER
            elif char == DECIMAL_POINT:
                state = ParseState.DECIMAL
            else:
                return _failure(InvalidCharacter(char, text, position))

        elif state is ParseState.INTEGER:
            if char in DIGITS:
                digits.append(char)
            elif char == DECIMAL_POINT:
                state = ParseState.DECIMAL
            elif char in EXPONENT_MARKERS:
                has_exponent = True
                state = ParseState.E
            else:
                return _failure(InvalidCharacter(char, text, position))

        elif state is ParseState.DECIMAL:
            if char in DIGITS:
                # digits past the cap are truncated
                if scale < ctx.max_scale:
                    digits.append(char)
                    scale += 1
            elif char in EXPONENT_MARKERS:
                has_exponent = True
                state = ParseState.E
            else:
                return _failure(InvalidCharacter(char, text, position))

        elif state is ParseState.E:
            if char in DIGITS:
                exponent_digits.append(char)
                state = ParseState.EXPONENT
            elif char in SIGNS:
                exponent_negative = char == "-"
                state = ParseState.EXPONENT
            else:
                return _failure(InvalidCharacter(char, text, position))

        else:
            if char in DIGITS:
                exponent_digits.append(char)
            else:
                return _failure(InvalidCharacter(char, text, position))

    if not digits:
        return _failure(EmptyValue(text))
    if has_exponent and not exponent_digits:
        return _failure(MalformedExponent(text))

    magnitude = _digits_to_int(digits)

    exponent = _digits_to_int(exponent_digits)
    if exponent_negative:
        exponent = -exponent
    # a negative scale is a positive result exponent
    scale -= exponent
    if scale > ctx.max_scale:
        excess = scale - ctx.max_scale
        if excess >= num_digits(magnitude):
            magnitude = 0
        else:
            magnitude //= pow10(excess)
        scale = ctx.max_scale

    mantissa = -magnitude if negative else magnitude
    return ParseResult(text=text, value=BigDecimal.create(mantissa, -scale, ctx))


def parse(text: str, context: Optional[PrecisionContext] = None) -> BigDecimal:
    """
    Parse a decimal literal.

    Args:
        text: Decimal literal, e.g. "123", "-1.5E-3", ".25", "123E+10"
        context: Precision context (default: the bound one)

    Returns:
        Canonical BigDecimal

    Raises:
        InvalidCharacter: Character not allowed at its position
        EmptyValue: No mantissa digits
        MalformedExponent: Exponent marker without exponent digits
        TypeError: If text is not a str

    Examples:
        >>> str(parse("123E7"))
        '123E7'
        >>> str(parse("-1.5E-3"))
        '-15E-4'
    """
    return scan(text, context).unwrap()


def try_parse(text: str, context: Optional[PrecisionContext] = None) -> Optional[BigDecimal]:
    """Parse a decimal literal, returning None instead of raising ParseError."""
    return scan(text, context).value


def is_integer_text(text: str) -> bool:
    """
    Check that text is a non-empty run of ASCII digits (no sign, no blanks).

    Examples:
        >>> is_integer_text("0042")
        True
        >>> is_integer_text("-1")
        False
    """
    return bool(text) and all(char in DIGITS for char in text)


def _digits_to_int(digits: list[str]) -> int:
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start : start + _DIGIT_CHUNK]
        value = value * pow10(len(chunk)) + int("".join(chunk))
    return value


def _failure(error: ParseError) -> ParseResult:
    logger.debug("Decimal literal rejected: %s", error)
    return ParseResult(text=error.text, error=error)
