"""Exponential, logarithm, powers and roots.

Every function computes at the caller's precision plus guard digits and
rounds once at its boundary. Unlimited precision is rejected with
ConfigurationError except by power_int with a non-negative exponent.

Functions
---------
exp        : e^x       (series on x/256, then ^256; integral part by power_int)
log        : ln x      (exponent / factors of 2 and 3 reduction, then Newton)
log2, log10
power      : x^y       (power_int for integral y, else exp(y * log x))
power_int  : x^n       (binary exponentiation)
root       : x^(1/n)   (Newton with a float seed, else power)
sqrt
e          : cached constant
"""

from __future__ import annotations

import math
from decimal import Decimal

from bigmath.core.context import EXACT_CONTEXT, MathContext, check_math_context
from bigmath.core.decimals import (
    exponent,
    fits_float,
    fractional_part,
    integral_part,
    is_integral,
    mantissa,
    reciprocal,
)
from bigmath.core.errors import ConfigurationError, DomainError
from bigmath.engine.calculators import exp_series
from bigmath.engine.refiner import float_seed, refine
from bigmath.functions.constants import LIBRARY_CONSTANTS

_ZERO = Decimal(0)
_ONE = Decimal(1)
_TWO = Decimal(2)
_TEN = Decimal(10)
_ONE_HUNDREDTH = Decimal("0.01")
_EXP_SCALE = Decimal(256)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------


def e(mc: MathContext) -> Decimal:
    """Euler's number."""
    return LIBRARY_CONSTANTS.constant("e", mc, lambda tier_mc: exp(_ONE, tier_mc))


def log2_constant(mc: MathContext) -> Decimal:
    return LIBRARY_CONSTANTS.constant("log2", mc, lambda tier_mc: _log_newton(_TWO, tier_mc))


def log3_constant(mc: MathContext) -> Decimal:
    return LIBRARY_CONSTANTS.constant("log3", mc, lambda tier_mc: _log_newton(Decimal(3), tier_mc))


def log10_constant(mc: MathContext) -> Decimal:
    return LIBRARY_CONSTANTS.constant("log10", mc, lambda tier_mc: _log_newton(_TEN, tier_mc))


# ---------------------------------------------------------------------------
# exp
# ---------------------------------------------------------------------------


def exp(x: Decimal, mc: MathContext) -> Decimal:
    """e^x.

    With a zero integral part the series runs on x/256 and the sum is raised
    to the 256th power. Otherwise x = i + f and
    e^x = (e^(1 + f/i))^i, carrying extra digits for the digits of i.
    """
    check_math_context(mc, "exp")
    if x.is_zero():
        return mc.round(_ONE)

    whole = integral_part(x)
    if whole.is_zero():
        return _exp_taylor(x, mc)

    work = mc.with_guard(10 + exponent(whole) + 1)
    ctx = work.to_context()
    z = ctx.add(_ONE, ctx.divide(fractional_part(x), whole))
    t = _exp_taylor(z, work)
    return mc.round(power_int(t, int(whole), work))


def _exp_taylor(x: Decimal, mc: MathContext) -> Decimal:
    work = mc.with_guard(6)
    scaled = work.to_context().divide(x, _EXP_SCALE)
    result = exp_series(scaled, work).calculate()
    return mc.round(power_int(result, 256, work))


# ---------------------------------------------------------------------------
# power_int / power
# ---------------------------------------------------------------------------


def power_int(x: Decimal, n: int, mc: MathContext) -> Decimal:
    """x^n by repeated squaring.

    Unlimited mc is allowed for n >= 0 and gives the exact power.
    Negative n takes the reciprocal (DivideByZeroError for x = 0).
    """
    if mc.is_unlimited and n < 0:
        raise ConfigurationError("Unlimited MathContext not supported", function="power_int")
    work = mc.with_guard(10)
    if n < 0:
        return mc.round(reciprocal(power_int(x, -n, work), work))

    ctx = work.to_context()
    result = _ONE
    base = x
    while n > 0:
        if n & 1:
            result = ctx.multiply(result, base)
        n >>= 1
        if n:
            base = ctx.multiply(base, base)
    return mc.round(result)


def power(x: Decimal, y: Decimal, mc: MathContext) -> Decimal:
    """x^y for real y.

    0^0 = 1, 0^y = 0 for y > 0. A negative base needs an integral y.
    """
    check_math_context(mc, "power")
    if x.is_zero():
        if y.is_zero():
            return mc.round(_ONE)
        if y > 0:
            return _ZERO
        raise DomainError(f"Illegal power(x, y) for x = 0 and y < 0: y = {y}", function="power")

    if is_integral(y):
        return power_int(x, int(y), mc)
    if x < 0:
        raise DomainError(
            f"Illegal power(x, y) for x < 0 and non-integral y: x = {x}, y = {y}",
            function="power",
        )

    work = mc.with_guard(6)
    product = work.to_context().multiply(y, log(x, work))
    # e^p loses one digit of relative accuracy per digit of |p|.
    extra = max(0, exponent(product) + 1)
    if extra:
        work = work.with_guard(extra)
        product = work.to_context().multiply(y, log(x, work))
    return mc.round(exp(product, work))


# ---------------------------------------------------------------------------
# log
# ---------------------------------------------------------------------------


def log(x: Decimal, mc: MathContext) -> Decimal:
    """Natural logarithm, x > 0."""
    check_math_context(mc, "log")
    if x <= 0:
        raise DomainError(f"Illegal log(x) for x <= 0: x = {x}", function="log")
    if x == _ONE:
        return _ZERO

    work = mc
    distance = EXACT_CONTEXT.subtract(x, _ONE)
    if distance.adjusted() < 0:
        # ln x ~ x - 1 near 1: keep its leading digits.
        work = mc.with_guard(-distance.adjusted())

    if x == _TEN:
        result = log10_constant(work)
    elif x > _TEN or x < _ONE_HUNDREDTH:
        result = _log_using_exponent(x, work)
    else:
        result = _log_using_two_three(x, work)
    return mc.round(result)


def log2(x: Decimal, mc: MathContext) -> Decimal:
    check_math_context(mc, "log2")
    work = mc.with_guard(4)
    return mc.round(work.to_context().divide(log(x, work), log2_constant(work)))


def log10(x: Decimal, mc: MathContext) -> Decimal:
    check_math_context(mc, "log10")
    work = mc.with_guard(2)
    return mc.round(work.to_context().divide(log(x, work), log10_constant(work)))


def _log_using_exponent(x: Decimal, mc: MathContext) -> Decimal:
    """ln x = ln(mantissa) + exponent * ln 10."""
    work = mc.with_guard(4)
    scale = exponent(x)
    result = _log_using_two_three(mantissa(x), work)
    if scale:
        ctx = work.to_context()
        result = ctx.add(result, ctx.multiply(Decimal(scale), log10_constant(work)))
    return result


# (upper bound of float(x), factor of two, factor of three): dividing x by
# 2^f2 * 3^f3 brings it within about 0.7 .. 1.4.
_TWO_THREE_FACTORS: tuple[tuple[float, int, int], ...] = (
    (0.115, 0, -2),
    (0.14, -3, 0),
    (0.2, -1, -1),
    (0.3, -2, 0),
    (0.42, 0, -1),
    (0.7, -1, 0),
    (1.4, 0, 0),
    (2.5, 1, 0),
    (3.5, 0, 1),
    (5.0, 2, 0),
    (7.0, 1, 1),
    (8.5, 3, 0),
    (10.0, 0, 2),
)


def _two_three_factors(value: float) -> tuple[int, int]:
    if value < 0.01:
        return 0, 0
    if value < 0.1:
        factor_two = 0
        while value < 0.6:
            value *= 2.0
            factor_two -= 1
        return factor_two, 0
    for upper, factor_two, factor_three in _TWO_THREE_FACTORS:
        if value < upper:
            return factor_two, factor_three
    factor_two = 0
    while value > 1.4:
        value /= 2.0
        factor_two += 1
    return factor_two, 0


def _log_using_two_three(x: Decimal, mc: MathContext) -> Decimal:
    """ln x = f2 ln 2 + f3 ln 3 + ln(x / (2^f2 3^f3))."""
    factor_two, factor_three = _two_three_factors(float(x))
    if factor_two == 0 and factor_three == 0:
        return _log_newton(x, mc)

    work = mc.with_guard(4)
    ctx = work.to_context()
    corrected = x
    result = _ZERO
    if factor_two:
        power_of_two = Decimal(2 ** abs(factor_two))
        if factor_two > 0:
            corrected = ctx.divide(corrected, power_of_two)
        else:
            corrected = ctx.multiply(corrected, power_of_two)
        result = ctx.add(result, ctx.multiply(Decimal(factor_two), log2_constant(work)))
    if factor_three:
        power_of_three = Decimal(3 ** abs(factor_three))
        if factor_three > 0:
            corrected = ctx.divide(corrected, power_of_three)
        else:
            corrected = ctx.multiply(corrected, power_of_three)
        result = ctx.add(result, ctx.multiply(Decimal(factor_three), log3_constant(work)))
    return ctx.add(result, _log_newton(corrected, work))


def _log_newton(x: Decimal, mc: MathContext) -> Decimal:
    """Newton on e^r = x: r += 2 (x - e^r) / (x + e^r)."""

    def step(r: Decimal, working: MathContext) -> Decimal:
        ctx = working.to_context()
        exp_r = exp(r, working)
        return ctx.divide(
            ctx.multiply(_TWO, ctx.subtract(x, exp_r)),
            ctx.add(x, exp_r),
        )

    seed = float_seed(x, math.log)
    if seed is None:
        return refine(mc.to_context().divide(x, _TWO), 1, mc, step, function="log")
    return refine(
        seed, LIBRARY_CONSTANTS.config.newton_seed_precision, mc, step, function="log",
    )


# ---------------------------------------------------------------------------
# roots
# ---------------------------------------------------------------------------


def sqrt(x: Decimal, mc: MathContext) -> Decimal:
    check_math_context(mc, "sqrt")
    if x < 0:
        raise DomainError(f"Illegal sqrt(x) for x < 0: x = {x}", function="sqrt")
    work = mc.with_guard(2)
    return mc.round(work.to_context().sqrt(x))


def root(x: Decimal, n: Decimal | int, mc: MathContext) -> Decimal:
    """n-th root of x for n > 0 and x >= 0."""
    check_math_context(mc, "root")
    n = Decimal(n)
    if n <= 0:
        raise DomainError(f"Illegal root(x, n) for n <= 0: n = {n}", function="root")
    if x.is_zero():
        return _ZERO
    if x < 0:
        raise DomainError(f"Illegal root(x, n) for x < 0: x = {x}", function="root")

    if n > _ONE and fits_float(n):
        inverse_n = 1.0 / float(n)
        seed = float_seed(x, lambda value: value**inverse_n)
        if seed is not None and not seed.is_zero():
            return _root_newton(x, n, seed, mc)

    work = mc.with_guard(6)
    return power(x, reciprocal(n, work), mc)


def _root_newton(x: Decimal, n: Decimal, seed: Decimal, mc: MathContext) -> Decimal:
    """Newton on r^n = x: r += (x / r^(n-1) - r) / n."""
    n_minus_one = EXACT_CONTEXT.subtract(n, _ONE)

    def step(r: Decimal, working: MathContext) -> Decimal:
        ctx = working.to_context()
        quotient = ctx.divide(x, power(r, n_minus_one, working))
        return ctx.divide(ctx.subtract(quotient, r), n)

    return refine(
        seed, LIBRARY_CONSTANTS.config.newton_seed_precision, mc, step, function="root",
    )
