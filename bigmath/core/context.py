"""MathContext, Rounding, and the exact decimal context.

A MathContext is the per-call precision budget: a count of significant
digits and a rounding rule. Precision 0 means "unlimited"; it is valid as a
value but every transcendental function rejects it (ConfigurationError)
because series and Newton loops need a finite error target.

EXACT_CONTEXT is used for the additions, subtractions and multiplications
that must not round (fraction arithmetic, accumulating series sums). It
traps Inexact, so an accidental rounding surfaces as an exception instead
of a silently wrong digit. Never divide under it.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
)
from enum import Enum
from typing import ClassVar, final

from bigmath.core.errors import ConfigurationError
from bigmath.core.result import Created, Err, Ok

EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    rounding=ROUND_HALF_EVEN,
    Emin=MIN_EMIN,
    Emax=MAX_EMAX,
    capitals=1,
    clamp=0,
    flags=[],
    traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
)


class Rounding(Enum):
    """Rounding rules accepted by MathContext (values are decimal.ROUND_*)."""

    UP = ROUND_UP
    DOWN = ROUND_DOWN
    CEILING = ROUND_CEILING
    FLOOR = ROUND_FLOOR
    HALF_UP = ROUND_HALF_UP
    HALF_DOWN = ROUND_HALF_DOWN
    HALF_EVEN = ROUND_HALF_EVEN
    ZERO_FIVE_UP = ROUND_05UP


@final
@dataclass(frozen=True, slots=True)
class MathContext:
    """Precision (significant digits, 0 = unlimited) and rounding rule."""

    precision: int
    rounding: Rounding = Rounding.HALF_UP

    UNLIMITED: ClassVar[MathContext]  # Assigned after class definition
    DECIMAL32: ClassVar[MathContext]
    DECIMAL64: ClassVar[MathContext]
    DECIMAL128: ClassVar[MathContext]

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise TypeError(f"MathContext.precision must be int, got {self.precision!r}")
        if self.precision < 0:
            raise TypeError(f"MathContext.precision must be >= 0, got {self.precision}")
        if not isinstance(self.rounding, Rounding):
            raise TypeError(f"MathContext.rounding must be Rounding, got {self.rounding!r}")

    @staticmethod
    def create(
        precision: int, rounding: Rounding = Rounding.HALF_UP,
    ) -> Created[MathContext]:
        """Validate and build a MathContext without raising."""
        if isinstance(precision, bool) or not isinstance(precision, int):
            return Err(f"MathContext.precision must be int, got {type(precision).__name__}")
        if precision < 0:
            return Err(f"MathContext.precision must be >= 0, got {precision}")
        if not isinstance(rounding, Rounding):
            return Err(f"MathContext.rounding must be Rounding, got {rounding!r}")
        return Ok(MathContext(precision=precision, rounding=rounding))

    @property
    def is_unlimited(self) -> bool:
        return self.precision == 0

    def with_guard(self, digits: int) -> MathContext:
        """Same rounding, precision + digits. Unlimited stays unlimited."""
        if self.is_unlimited:
            return self
        return MathContext(self.precision + digits, self.rounding)

    def with_precision(self, precision: int) -> MathContext:
        return MathContext(precision, self.rounding)

    def to_context(self) -> Context:
        """A fresh stdlib decimal.Context for this precision and rounding."""
        return Context(
            prec=self.precision if self.precision > 0 else MAX_PREC,
            rounding=self.rounding.value,
            Emin=MIN_EMIN,
            Emax=MAX_EMAX,
            capitals=1,
            clamp=0,
            flags=[],
            traps=[InvalidOperation, DivisionByZero, Overflow],
        )

    def round(self, value: Decimal) -> Decimal:
        """Round value to this context. Unlimited returns value unchanged."""
        if self.is_unlimited:
            return value
        return self.to_context().plus(value)


MathContext.UNLIMITED = MathContext(0, Rounding.HALF_UP)
MathContext.DECIMAL32 = MathContext(7, Rounding.HALF_EVEN)
MathContext.DECIMAL64 = MathContext(16, Rounding.HALF_EVEN)
MathContext.DECIMAL128 = MathContext(34, Rounding.HALF_EVEN)


def check_math_context(mc: MathContext, function: str) -> None:
    """Reject unlimited precision for functions that need a finite error bound."""
    if mc.is_unlimited:
        raise ConfigurationError("Unlimited MathContext not supported", function=function)


def acceptable_error(mc: MathContext) -> Decimal:
    """Absolute convergence threshold 10^-(precision + 1)."""
    return Decimal(1).scaleb(-(mc.precision + 1), EXACT_CONTEXT)
