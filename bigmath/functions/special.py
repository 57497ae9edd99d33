"""Factorial, gamma and Bernoulli numbers.

factorial(x) is exact for non-negative integers (any MathContext, including
unlimited). For other x it uses Spouge's approximation

    x! ~ (x + a)^(x + 1/2) e^-(x + a) [c0 + sum_{k=1}^{a-1} c_k / (x + k)]

with a = 1.3 * precision, evaluated at twice the requested precision. The
coefficient table for each a is computed once and cached.
"""

from __future__ import annotations

import math
from decimal import Decimal

from bigmath.core.context import EXACT_CONTEXT, MathContext, check_math_context
from bigmath.core.decimals import is_integral
from bigmath.core.errors import DomainError
from bigmath.core.fraction import ExactFraction
from bigmath.functions.constants import LIBRARY_CONSTANTS
from bigmath.functions.elementary import exp, power, sqrt
from bigmath.functions.trig import pi

_ONE = Decimal(1)
_TWO = Decimal(2)
_HALF = Decimal("0.5")


def factorial(x: Decimal | int, mc: MathContext) -> Decimal:
    x = Decimal(x)
    if is_integral(x):
        n = int(x)
        if n < 0:
            raise DomainError(f"Illegal factorial(n) for n < 0: n = {n}", function="factorial")
        return mc.round(Decimal(math.factorial(n)))

    check_math_context(mc, "factorial")
    work = mc.with_precision(mc.precision * 2)
    a = max(2, mc.precision * 13 // 10)
    coefficients = spouge_coefficients(a)
    ctx = work.to_context()

    factor = coefficients[0]
    for k in range(1, a):
        factor = ctx.add(factor, ctx.divide(coefficients[k], ctx.add(x, Decimal(k))))

    shifted = ctx.add(x, Decimal(a))
    if shifted <= 0:
        raise DomainError(
            f"Illegal factorial(x) for x <= -{a} at precision {mc.precision}: x = {x}",
            function="factorial",
        )
    result = power(shifted, ctx.add(x, _HALF), work)
    result = ctx.multiply(result, exp(EXACT_CONTEXT.minus(shifted), work))
    return mc.round(ctx.multiply(result, factor))


def gamma(x: Decimal | int, mc: MathContext) -> Decimal:
    """gamma(x) = (x - 1)!"""
    return factorial(EXACT_CONTEXT.subtract(Decimal(x), _ONE), mc)


def spouge_coefficients(a: int) -> tuple[Decimal, ...]:
    """c_0 .. c_(a-1) for Spouge's approximation with parameter a (cached)."""
    return LIBRARY_CONSTANTS.spouge_coefficients(a, _compute_spouge_coefficients)


def _compute_spouge_coefficients(a: int) -> tuple[Decimal, ...]:
    mc = MathContext(a * 15 // 10)
    ctx = mc.to_context()
    constants = [sqrt(ctx.multiply(pi(mc), _TWO), mc)]
    negative = False
    for k in range(1, a):
        distance = Decimal(a - k)
        ck = power(distance, EXACT_CONTEXT.subtract(Decimal(k), _HALF), mc)
        ck = ctx.multiply(ck, exp(distance, mc))
        ck = ctx.divide(ck, Decimal(math.factorial(k - 1)))
        if negative:
            ck = EXACT_CONTEXT.minus(ck)
        constants.append(ck)
        negative = not negative
    return tuple(constants)


# ---------------------------------------------------------------------------
# Bernoulli numbers
# ---------------------------------------------------------------------------


def bernoulli_fraction(n: int) -> ExactFraction:
    """Exact B_n with B_1 = -1/2 (reduced)."""
    if n < 0:
        raise DomainError(f"Illegal bernoulli(n) for n < 0: n = {n}", function="bernoulli")
    if n == 1:
        return ExactFraction.of(-1, 2)
    if n % 2 == 1:
        return ExactFraction.ZERO
    return LIBRARY_CONSTANTS.bernoulli(n, _compute_bernoulli)


def bernoulli(n: int, mc: MathContext) -> Decimal:
    check_math_context(mc, "bernoulli")
    return bernoulli_fraction(n).to_decimal(mc)


def _compute_bernoulli(n: int) -> ExactFraction:
    """B_n = sum_k 1/(k+1) sum_j (-1)^j C(k, j) j^n."""
    result = ExactFraction.ZERO
    for k in range(n + 1):
        inner = sum((-1) ** j * math.comb(k, j) * j**n for j in range(k + 1))
        result = result.add(ExactFraction.of(inner, k + 1)).reduce()
    return result
