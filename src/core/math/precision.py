"""
Precision Policy — PrecisionContext

Configuration consulted by the decimal engine:
- precision: maximum significant digits kept by division and truncation
- always_truncate: truncate every constructed value to `precision`
- max_scale: cap of the parser's fractional-digit counter

The active context is bound through a ContextVar, so every thread and every
asyncio task sees its own binding. Rebinding in one thread never changes the
precision used by arithmetic running in another.

DEFAULTS:
    precision = 1000
    always_truncate = False
    max_scale = 65535 (the range of an unsigned 16-bit scale counter)
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Any, Final, Iterator

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_PRECISION: Final[int] = 1000

MAX_PARSE_SCALE: Final[int] = 65535


# =============================================================================
# CONTEXT MODEL
# =============================================================================


class PrecisionContext(BaseModel):
    """
    Immutable precision settings for decimal arithmetic.

    Changing a setting means building a new context, either directly or via
    local_context(**overrides).
    """

    precision: int = Field(
        default=DEFAULT_PRECISION,
        gt=0,
        description="Maximum significant digits kept by division and truncation",
    )
    always_truncate: bool = Field(
        default=False,
        description="Truncate every constructed value to `precision`",
    )
    max_scale: int = Field(
        default=MAX_PARSE_SCALE,
        gt=0,
        description="Saturation bound of the parser's fractional-digit counter",
    )

    model_config = {"frozen": True}

    def replace(self, **overrides: Any) -> "PrecisionContext":
        """
        Copy of this context with some settings changed.

        Unlike model_copy, the result is validated.

        Raises:
            pydantic.ValidationError: If an override is out of range
        """
        return PrecisionContext(**{**self.model_dump(), **overrides})


DEFAULT_CONTEXT: Final[PrecisionContext] = PrecisionContext()

_current_context: ContextVar[PrecisionContext] = ContextVar(
    "precision_context", default=DEFAULT_CONTEXT
)


# =============================================================================
# BINDING
# =============================================================================


def get_context() -> PrecisionContext:
    """Context bound to the current thread / task."""
    return _current_context.get()


def set_context(context: PrecisionContext) -> Token:
    """
    Bind a context for the current thread / task.

    Args:
        context: New active context

    Returns:
        Token accepted by reset_context to restore the previous binding
    """
    logger.debug("Binding precision context: %s", context)
    return _current_context.set(context)


def reset_context(token: Token) -> None:
    """Restore the binding that was active before set_context."""
    _current_context.reset(token)


@contextmanager
def local_context(
    context: PrecisionContext | None = None, **overrides: Any
) -> Iterator[PrecisionContext]:
    """
    Temporarily bind a context inside a with-block.

    Args:
        context: Base context (default: the currently bound one)
        **overrides: Settings to change on top of the base context

    Yields:
        The bound context

    Examples:
        >>> with local_context(precision=50) as ctx:
        ...     ctx.precision
        50
    """
    base = context if context is not None else get_context()
    bound = base.replace(**overrides) if overrides else base
    token = set_context(bound)
    try:
        yield bound
    finally:
        reset_context(token)
