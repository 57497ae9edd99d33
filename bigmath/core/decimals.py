"""Decimal helper operations used across the function library.

exponent            : Decimal -> int      (power of ten of the leading digit)
mantissa            : Decimal -> Decimal  (x scaled into [1, 10))
integral_part       : Decimal -> Decimal  (truncated toward zero)
fractional_part     : Decimal -> Decimal  (x - integral_part(x), exact)
is_integral         : Decimal -> bool
significant_digits  : Decimal -> int      (ignoring trailing zeros)
round_with_trailing_zeros : Decimal, MathContext -> Decimal
reciprocal          : Decimal, MathContext -> Decimal
fits_float          : Decimal -> bool     (within +/- sys.float_info.max)
"""

from __future__ import annotations

import sys
from decimal import ROUND_DOWN, Decimal

from bigmath.core.context import EXACT_CONTEXT, MathContext, check_math_context
from bigmath.core.errors import DivideByZeroError

_ONE = Decimal(1)
_FLOAT_MAX = Decimal(repr(sys.float_info.max))


def exponent(x: Decimal) -> int:
    """Exponent of the most significant digit: 123.45 -> 2, 0.012 -> -2, 0 -> 0."""
    return x.adjusted()


def mantissa(x: Decimal) -> Decimal:
    """x moved by its exponent so that 1 <= |mantissa| < 10 (0 stays 0)."""
    e = x.adjusted()
    if e == 0:
        return x
    return x.scaleb(-e, EXACT_CONTEXT)


def integral_part(x: Decimal) -> Decimal:
    return x.to_integral_value(rounding=ROUND_DOWN)


def fractional_part(x: Decimal) -> Decimal:
    return EXACT_CONTEXT.subtract(x, integral_part(x))


def is_integral(x: Decimal) -> bool:
    return x.is_finite() and x == x.to_integral_value()


def significant_digits(x: Decimal) -> int:
    """Digits up to the last non-zero one; trailing zeros of integers count.

    123000 -> 6, 123000.00 -> 6, 12.300 -> 3, 0.00123 -> 3, 0 -> 1.
    """
    stripped = x.normalize(EXACT_CONTEXT)
    _, digits, exp = stripped.as_tuple()
    if exp <= 0:
        return len(digits)
    return len(digits) + exp


def round_with_trailing_zeros(x: Decimal, mc: MathContext) -> Decimal:
    """Round to mc and pad so the result shows exactly mc.precision digits.

    1.23 @ 5 digits -> 1.2300, 0 @ 5 digits -> 0.0000.
    """
    check_math_context(mc, "round_with_trailing_zeros")
    if x.is_zero():
        return Decimal((0, (0,), -(mc.precision - 1)))
    rounded = mc.round(x)
    target = rounded.adjusted() - (mc.precision - 1)
    if rounded.as_tuple().exponent == target:
        return rounded
    return rounded.quantize(Decimal((0, (1,), target)), context=mc.to_context())


def reciprocal(x: Decimal, mc: MathContext) -> Decimal:
    if x.is_zero():
        raise DivideByZeroError("Divide by zero", function="reciprocal")
    return mc.to_context().divide(_ONE, x)


def fits_float(x: Decimal) -> bool:
    return -_FLOAT_MAX <= x <= _FLOAT_MAX
