"""Hyperbolic functions and their inverses.

sinh and cosh use their series for |x| < 2 and the exponential identities
beyond, where the series would need many terms. The inverse functions go
through log and add guard digits when the log argument sits close to 1.
"""

from __future__ import annotations

from decimal import Decimal

from bigmath.core.context import EXACT_CONTEXT, MathContext, check_math_context
from bigmath.core.decimals import exponent
from bigmath.core.errors import DomainError
from bigmath.engine.calculators import cosh_series, sinh_series
from bigmath.functions.elementary import exp, log, sqrt

_ZERO = Decimal(0)
_ONE = Decimal(1)
_TWO = Decimal(2)
_HALF = Decimal("0.5")
_SERIES_LIMIT = Decimal(2)


def _guard_for_small(x: Decimal) -> int:
    """Digits of cancellation expected for arguments much smaller than 1."""
    if x.is_zero():
        return 0
    return max(0, -exponent(x))


def sinh(x: Decimal, mc: MathContext) -> Decimal:
    check_math_context(mc, "sinh")
    if x.is_zero():
        return _ZERO
    work = mc.with_guard(4)
    if x.copy_abs() < _SERIES_LIMIT:
        return mc.round(sinh_series(x, work).calculate())
    # (e^x - e^-x) / 2 ; e^-x is negligible or small against e^x here.
    ctx = work.to_context()
    exp_x = exp(x, work)
    return mc.round(ctx.divide(ctx.subtract(exp_x, ctx.divide(_ONE, exp_x)), _TWO))


def cosh(x: Decimal, mc: MathContext) -> Decimal:
    check_math_context(mc, "cosh")
    if x.is_zero():
        return mc.round(_ONE)
    work = mc.with_guard(4)
    if x.copy_abs() < _SERIES_LIMIT:
        return mc.round(cosh_series(x, work).calculate())
    ctx = work.to_context()
    exp_x = exp(x, work)
    return mc.round(ctx.divide(ctx.add(exp_x, ctx.divide(_ONE, exp_x)), _TWO))


def tanh(x: Decimal, mc: MathContext) -> Decimal:
    check_math_context(mc, "tanh")
    if x.is_zero():
        return _ZERO
    work = mc.with_guard(6)
    return mc.round(work.to_context().divide(sinh(x, work), cosh(x, work)))


def coth(x: Decimal, mc: MathContext) -> Decimal:
    check_math_context(mc, "coth")
    if x.is_zero():
        raise DomainError("Illegal coth(x) for x = 0", function="coth")
    work = mc.with_guard(6)
    return mc.round(work.to_context().divide(cosh(x, work), sinh(x, work)))


def asinh(x: Decimal, mc: MathContext) -> Decimal:
    """log(x + sqrt(x^2 + 1)); odd, so negative x uses -asinh(-x)."""
    check_math_context(mc, "asinh")
    if x.is_zero():
        return _ZERO
    if x.is_signed():
        return EXACT_CONTEXT.minus(asinh(EXACT_CONTEXT.minus(x), mc))
    work = mc.with_guard(10 + _guard_for_small(x))
    ctx = work.to_context()
    radicand = EXACT_CONTEXT.add(EXACT_CONTEXT.multiply(x, x), _ONE)
    return mc.round(log(ctx.add(x, sqrt(radicand, work)), work))


def acosh(x: Decimal, mc: MathContext) -> Decimal:
    """log(x + sqrt(x^2 - 1)) for x >= 1."""
    check_math_context(mc, "acosh")
    if x < _ONE:
        raise DomainError(f"Illegal acosh(x) for x < 1: x = {x}", function="acosh")
    if x == _ONE:
        return _ZERO
    distance = EXACT_CONTEXT.subtract(x, _ONE)
    work = mc.with_guard(6 + _guard_for_small(distance))
    ctx = work.to_context()
    radicand = EXACT_CONTEXT.subtract(EXACT_CONTEXT.multiply(x, x), _ONE)
    return mc.round(log(ctx.add(x, sqrt(radicand, work)), work))


def atanh(x: Decimal, mc: MathContext) -> Decimal:
    """log((1 + x) / (1 - x)) / 2 for |x| < 1."""
    check_math_context(mc, "atanh")
    if x >= _ONE:
        raise DomainError(f"Illegal atanh(x) for x >= 1: x = {x}", function="atanh")
    if x <= -_ONE:
        raise DomainError(f"Illegal atanh(x) for x <= -1: x = {x}", function="atanh")
    if x.is_zero():
        return _ZERO
    work = mc.with_guard(6 + _guard_for_small(x))
    ctx = work.to_context()
    ratio = ctx.divide(EXACT_CONTEXT.add(_ONE, x), EXACT_CONTEXT.subtract(_ONE, x))
    return mc.round(ctx.multiply(log(ratio, work), _HALF))


def acoth(x: Decimal, mc: MathContext) -> Decimal:
    """log((x + 1) / (x - 1)) / 2 for |x| > 1."""
    check_math_context(mc, "acoth")
    if x.copy_abs() <= _ONE:
        raise DomainError(f"Illegal acoth(x) for |x| <= 1: x = {x}", function="acoth")
    work = mc.with_guard(6 + max(0, exponent(x)))
    ctx = work.to_context()
    ratio = ctx.divide(EXACT_CONTEXT.add(x, _ONE), EXACT_CONTEXT.subtract(x, _ONE))
    return mc.round(ctx.multiply(log(ratio, work), _HALF))
