"""ExactFraction — exact rational arithmetic over Decimal numerator/denominator.

Numerator and denominator are stored as Decimal for speed but are always
combined under EXACT_CONTEXT, so add / subtract / multiply / divide / pow
never lose precision. Only ``to_decimal`` rounds.

Invariants (enforced in __post_init__):
    denominator > 0          (sign is moved into the numerator)
    zero is exactly 0/1
Equality is by the (numerator, denominator) pair: 2/4 != 1/2 until reduced.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, final

from bigmath.core.context import EXACT_CONTEXT, MathContext
from bigmath.core.errors import DivideByZeroError
from bigmath.core.result import Created, Err, Ok
from bigmath.infra.config import DEFAULT_ENGINE_CONFIG

_ZERO = Decimal(0)
_ONE = Decimal(1)

_add = EXACT_CONTEXT.add
_sub = EXACT_CONTEXT.subtract
_mul = EXACT_CONTEXT.multiply


def _to_integer(value: Decimal) -> int:
    """Exact int of an integral Decimal (raises on a fraction part)."""
    return int(value.to_integral_exact(context=EXACT_CONTEXT))


def _digit_count(value: Decimal) -> int:
    if value.is_zero():
        return 1
    return value.adjusted() + 1


@final
@dataclass(frozen=True, slots=True)
class ExactFraction:
    """Immutable numerator/denominator pair with zero-loss arithmetic."""

    numerator: Decimal
    denominator: Decimal = _ONE

    ZERO: ClassVar[ExactFraction]  # Assigned after class definition
    ONE: ClassVar[ExactFraction]
    TWO: ClassVar[ExactFraction]
    TEN: ClassVar[ExactFraction]

    def __post_init__(self) -> None:
        num = self.numerator
        den = self.denominator
        if isinstance(num, int) and not isinstance(num, bool):
            num = Decimal(num)
        if isinstance(den, int) and not isinstance(den, bool):
            den = Decimal(den)
        if not isinstance(num, Decimal) or not num.is_finite():
            raise TypeError(f"ExactFraction numerator must be finite Decimal, got {num!r}")
        if not isinstance(den, Decimal) or not den.is_finite():
            raise TypeError(f"ExactFraction denominator must be finite Decimal, got {den!r}")
        if den.is_zero():
            raise DivideByZeroError("Divide by zero", function="ExactFraction")
        if num.is_zero():
            num, den = _ZERO, _ONE
        elif den.is_signed():
            num, den = EXACT_CONTEXT.minus(num), EXACT_CONTEXT.minus(den)
        object.__setattr__(self, "numerator", num)
        object.__setattr__(self, "denominator", den)

    # --- Construction ---

    @staticmethod
    def of(numerator: Decimal | int, denominator: Decimal | int = 1) -> ExactFraction:
        """Build numerator/denominator; raises DivideByZeroError on a zero denominator."""
        return ExactFraction(Decimal(numerator), Decimal(denominator))

    @staticmethod
    def create(
        numerator: Decimal | int, denominator: Decimal | int = 1,
    ) -> Created[ExactFraction]:
        """Non-raising counterpart of ``of``."""
        try:
            num = Decimal(numerator)
            den = Decimal(denominator)
        except TypeError as e:
            return Err(f"ExactFraction requires Decimal or int: {e}")
        if not num.is_finite() or not den.is_finite():
            return Err("ExactFraction requires finite values")
        if den.is_zero():
            return Err("ExactFraction denominator must be non-zero")
        return Ok(ExactFraction(num, den))

    @staticmethod
    def from_int(value: int) -> ExactFraction:
        if value == 0:
            return ExactFraction.ZERO
        if value == 1:
            return ExactFraction.ONE
        return ExactFraction(Decimal(value), _ONE)

    @staticmethod
    def from_decimal(value: Decimal) -> ExactFraction:
        """Exact fraction with an integer numerator and a power-of-ten denominator."""
        if value.is_zero():
            return ExactFraction.ZERO
        sign, digits, exponent = value.as_tuple()
        unscaled = Decimal((sign, digits, 0))
        if exponent >= 0:
            return ExactFraction(unscaled.scaleb(exponent, EXACT_CONTEXT), _ONE)
        return ExactFraction(unscaled, _ONE.scaleb(-exponent, EXACT_CONTEXT))

    # --- Arithmetic (no loss of precision) ---

    def add(self, other: ExactFraction) -> ExactFraction:
        if self.denominator == other.denominator:
            return ExactFraction(_add(self.numerator, other.numerator), self.denominator)
        n = _add(_mul(self.numerator, other.denominator), _mul(other.numerator, self.denominator))
        return ExactFraction(n, _mul(self.denominator, other.denominator))

    def subtract(self, other: ExactFraction) -> ExactFraction:
        return self.add(other.negate())

    def multiply(self, other: ExactFraction) -> ExactFraction:
        return ExactFraction(
            _mul(self.numerator, other.numerator),
            _mul(self.denominator, other.denominator),
        )

    def divide(self, other: ExactFraction) -> ExactFraction:
        if other.is_zero():
            raise DivideByZeroError("Divide by zero", function="ExactFraction.divide")
        return ExactFraction(
            _mul(self.numerator, other.denominator),
            _mul(self.denominator, other.numerator),
        )

    def negate(self) -> ExactFraction:
        if self.is_zero():
            return self
        return ExactFraction(EXACT_CONTEXT.minus(self.numerator), self.denominator)

    def reciprocal(self) -> ExactFraction:
        if self.is_zero():
            raise DivideByZeroError("Divide by zero", function="ExactFraction.reciprocal")
        return ExactFraction(self.denominator, self.numerator)

    def increment(self) -> ExactFraction:
        return ExactFraction(_add(self.numerator, self.denominator), self.denominator)

    def decrement(self) -> ExactFraction:
        return ExactFraction(_sub(self.numerator, self.denominator), self.denominator)

    def abs(self) -> ExactFraction:
        return self.negate() if self.numerator.is_signed() else self

    def pow(self, exponent: int) -> ExactFraction:
        """self ** exponent by repeated squaring; negative exponents invert first."""
        if exponent == 0:
            return ExactFraction.ONE
        if exponent == 1:
            return self
        base = self.reciprocal() if exponent < 0 else self
        remaining = -exponent if exponent < 0 else exponent
        num, den = _ONE, _ONE
        base_num, base_den = base.numerator, base.denominator
        while remaining > 0:
            if remaining & 1:
                num = _mul(num, base_num)
                den = _mul(den, base_den)
            remaining >>= 1
            if remaining:
                base_num = _mul(base_num, base_num)
                base_den = _mul(base_den, base_den)
        return ExactFraction(num, den)

    def reduce(self) -> ExactFraction:
        """Divide numerator and denominator by their gcd (new instance)."""
        num, den = self.numerator, self.denominator
        # Shift both to integers first when either carries decimal places.
        places = max(0, -num.as_tuple().exponent, -den.as_tuple().exponent)
        n = _to_integer(num.scaleb(places, EXACT_CONTEXT))
        d = _to_integer(den.scaleb(places, EXACT_CONTEXT))
        gcd = math.gcd(n, d)
        return ExactFraction(Decimal(n // gcd), Decimal(d // gcd))

    # --- Inspection ---

    def is_zero(self) -> bool:
        return self.numerator.is_zero()

    def signum(self) -> int:
        if self.numerator.is_zero():
            return 0
        return -1 if self.numerator.is_signed() else 1

    def is_integer(self) -> bool:
        """True if the value is an integer (checked on the reduced form)."""
        if self.denominator == _ONE and self.numerator == self.numerator.to_integral_value():
            return True
        return self.reduce().denominator == _ONE

    def integer_part(self) -> ExactFraction:
        """Integer part, truncated toward zero: 7/2 -> 3, -7/2 -> -3."""
        remainder = EXACT_CONTEXT.remainder(self.numerator, self.denominator)
        return ExactFraction(_sub(self.numerator, remainder), self.denominator)

    def fraction_part(self) -> ExactFraction:
        """What remains after integer_part: 7/2 -> 1/2, -7/2 -> -1/2."""
        return ExactFraction(
            EXACT_CONTEXT.remainder(self.numerator, self.denominator), self.denominator,
        )

    def compare(self, other: ExactFraction) -> int:
        """-1, 0 or 1 as self is less than, equal to, or greater than other (by value)."""
        left = _mul(self.numerator, other.denominator)
        right = _mul(other.numerator, self.denominator)
        if left < right:
            return -1
        return 1 if left > right else 0

    # --- Conversion ---

    def to_decimal(self, mc: MathContext | None = None) -> Decimal:
        """numerator / denominator rounded to mc.

        Without mc (or with an unlimited one) the precision is the digit count of numerator plus
        denominator, never less than the configured floor (128), so
        integer-like fractions keep their magnitude.
        """
        if mc is None or mc.is_unlimited:
            precision = max(
                _digit_count(self.numerator) + _digit_count(self.denominator),
                DEFAULT_ENGINE_CONFIG.fraction_min_precision,
            )
            mc = MathContext(precision)
        return mc.to_context().divide(self.numerator, self.denominator)

    def with_precision(self, precision: int) -> ExactFraction:
        """An approximation of self carrying the given significant digits."""
        return ExactFraction.from_decimal(self.to_decimal(MathContext(precision)))

    def to_rational_string(self) -> str:
        if self.is_zero():
            return "0"
        if self.denominator == _ONE:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.to_rational_string()


ExactFraction.ZERO = ExactFraction(_ZERO, _ONE)
ExactFraction.ONE = ExactFraction(_ONE, _ONE)
ExactFraction.TWO = ExactFraction(Decimal(2), _ONE)
ExactFraction.TEN = ExactFraction(Decimal(10), _ONE)
