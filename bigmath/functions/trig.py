"""Trigonometric functions and their inverses.

sin and cos reduce x by the nearest multiple of pi/2 and evaluate the
series on |r| <= pi/4 with quadrant symmetry. pi is carried with extra
digits for the magnitude of x, and again for a reduced argument that
lands close to zero.

asin runs its series for |x| < 0.707107 and switches to
acos(sqrt(1 - x^2)) above that, where the series would crawl.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal

from bigmath.core.context import EXACT_CONTEXT, MathContext, check_math_context
from bigmath.core.decimals import exponent, reciprocal
from bigmath.core.errors import DomainError
from bigmath.engine.calculators import asin_series, cos_series, sin_series
from bigmath.functions.constants import LIBRARY_CONSTANTS
from bigmath.functions.elementary import sqrt

_ZERO = Decimal(0)
_ONE = Decimal(1)
_TWO = Decimal(2)
_MINUS_ONE = Decimal(-1)
_QUARTER_PI = Decimal("0.785398")  # slightly below pi/4
_ASIN_SWITCH = Decimal("0.707107")  # just above sqrt(2)/2
_REDUCTION_GUARD = 4


def pi(mc: MathContext) -> Decimal:
    """pi rounded to mc (cached per precision tier)."""
    check_math_context(mc, "pi")
    return LIBRARY_CONSTANTS.pi(mc)


def _half_pi(mc: MathContext) -> Decimal:
    return mc.to_context().divide(pi(mc), _TWO)


# ---------------------------------------------------------------------------
# Argument reduction
# ---------------------------------------------------------------------------


def _reduce(x: Decimal, mc: MathContext) -> tuple[Decimal, int]:
    """(r, q) with x = r + k*pi/2, |r| <= pi/4 and q = k mod 4."""
    if x.copy_abs() <= _QUARTER_PI:
        return x, 0

    pi_mc = mc.with_guard(_REDUCTION_GUARD + max(0, exponent(x)))
    extra = 0
    while True:
        r, k = _reduce_with(x, pi_mc.with_guard(extra))
        if r.is_zero():
            # Every carried digit cancelled.
            extra += pi_mc.precision
            continue
        # A pass is trusted once the digits r cancelled are already carried.
        needed = max(0, -r.adjusted())
        if needed <= extra or r.adjusted() >= -1:
            return r, k % 4
        extra = needed


def _reduce_with(x: Decimal, mc: MathContext) -> tuple[Decimal, int]:
    ctx = mc.to_context()
    half_pi = _half_pi(mc)
    k = ctx.divide(x, half_pi).to_integral_value(rounding=ROUND_HALF_EVEN)
    r = ctx.subtract(x, ctx.multiply(k, half_pi))
    return r, int(k)


# ---------------------------------------------------------------------------
# sin / cos / tan / cot
# ---------------------------------------------------------------------------


def sin(x: Decimal, mc: MathContext) -> Decimal:
    check_math_context(mc, "sin")
    if x.is_zero():
        return _ZERO
    work = mc.with_guard(6)
    r, quadrant = _reduce(x, work)
    if quadrant == 0:
        result = sin_series(r, work).calculate()
    elif quadrant == 1:
        result = cos_series(r, work).calculate()
    elif quadrant == 2:
        result = EXACT_CONTEXT.minus(sin_series(r, work).calculate())
    else:
        result = EXACT_CONTEXT.minus(cos_series(r, work).calculate())
    return mc.round(result)


def cos(x: Decimal, mc: MathContext) -> Decimal:
    check_math_context(mc, "cos")
    if x.is_zero():
        return mc.round(_ONE)
    work = mc.with_guard(6)
    r, quadrant = _reduce(x, work)
    if quadrant == 0:
        result = cos_series(r, work).calculate()
    elif quadrant == 1:
        result = EXACT_CONTEXT.minus(sin_series(r, work).calculate())
    elif quadrant == 2:
        result = EXACT_CONTEXT.minus(cos_series(r, work).calculate())
    else:
        result = sin_series(r, work).calculate()
    return mc.round(result)


def tan(x: Decimal, mc: MathContext) -> Decimal:
    check_math_context(mc, "tan")
    if x.is_zero():
        return _ZERO
    work = mc.with_guard(4)
    return mc.round(work.to_context().divide(sin(x, work), cos(x, work)))


def cot(x: Decimal, mc: MathContext) -> Decimal:
    check_math_context(mc, "cot")
    if x.is_zero():
        raise DomainError("Illegal cot(x) for x = 0", function="cot")
    work = mc.with_guard(4)
    return mc.round(work.to_context().divide(cos(x, work), sin(x, work)))


# ---------------------------------------------------------------------------
# Inverse functions
# ---------------------------------------------------------------------------


def _check_unit_interval(x: Decimal, function: str) -> None:
    if x > _ONE:
        raise DomainError(f"Illegal {function}(x) for x > 1: x = {x}", function=function)
    if x < _MINUS_ONE:
        raise DomainError(f"Illegal {function}(x) for x < -1: x = {x}", function=function)


def _complement(x: Decimal, mc: MathContext) -> Decimal:
    """sqrt(1 - x^2), with 1 - x^2 formed exactly."""
    return sqrt(EXACT_CONTEXT.subtract(_ONE, EXACT_CONTEXT.multiply(x, x)), mc)


def asin(x: Decimal, mc: MathContext) -> Decimal:
    check_math_context(mc, "asin")
    _check_unit_interval(x, "asin")
    if x.is_zero():
        return _ZERO
    if x.is_signed():
        return EXACT_CONTEXT.minus(asin(EXACT_CONTEXT.minus(x), mc))

    work = mc.with_guard(6)
    if x >= _ASIN_SWITCH:
        return mc.round(acos(_complement(x, work), work))
    return mc.round(asin_series(x, work).calculate())


def acos(x: Decimal, mc: MathContext) -> Decimal:
    check_math_context(mc, "acos")
    _check_unit_interval(x, "acos")
    work = mc.with_guard(6)
    if x >= _ASIN_SWITCH:
        return mc.round(asin(_complement(x, work), work))
    ctx = work.to_context()
    return mc.round(ctx.subtract(_half_pi(work), asin(x, work)))


def atan(x: Decimal, mc: MathContext) -> Decimal:
    """atan x = asin(x / sqrt(1 + x^2)) for |x| <= 1, else +-pi/2 - atan(1/x)."""
    check_math_context(mc, "atan")
    if x.is_zero():
        return _ZERO
    work = mc.with_guard(6)
    ctx = work.to_context()
    if x.copy_abs() > _ONE:
        inverse = atan(reciprocal(x, work), work)
        half_pi = _half_pi(work)
        if x.is_signed():
            half_pi = EXACT_CONTEXT.minus(half_pi)
        return mc.round(ctx.subtract(half_pi, inverse))

    hypotenuse = sqrt(EXACT_CONTEXT.add(_ONE, EXACT_CONTEXT.multiply(x, x)), work)
    return mc.round(asin(ctx.divide(x, hypotenuse), work))


def atan2(y: Decimal, x: Decimal, mc: MathContext) -> Decimal:
    """Angle of the point (x, y) in (-pi, pi]."""
    check_math_context(mc, "atan2")
    work = mc.with_guard(3)
    ctx = work.to_context()
    if x > 0:
        return atan(ctx.divide(y, x), mc)
    if x < 0:
        if y > 0:
            return mc.round(ctx.add(atan(ctx.divide(y, x), work), pi(work)))
        if y < 0:
            return mc.round(ctx.subtract(atan(ctx.divide(y, x), work), pi(work)))
        return pi(mc)
    if y > 0:
        return mc.round(_half_pi(work))
    if y < 0:
        return mc.round(EXACT_CONTEXT.minus(_half_pi(work)))
    raise DomainError("Illegal atan2(y, x) for x = 0; y = 0", function="atan2")


def acot(x: Decimal, mc: MathContext) -> Decimal:
    """acot x in (0, pi): atan(1/x) for x > 0, pi/2 - atan(x) otherwise."""
    check_math_context(mc, "acot")
    work = mc.with_guard(4)
    if x > 0:
        return mc.round(atan(reciprocal(x, work), work))
    ctx = work.to_context()
    return mc.round(ctx.subtract(_half_pi(work), atan(x, work)))
