"""Series factories: one fresh engine per function call.

Each factory binds new coefficient and power generators for argument x
to a SeriesSummationEngine at the given working precision. Callers are
responsible for keeping x inside the series' fast-converging region.
"""

from __future__ import annotations

from decimal import Decimal

from bigmath.core.context import MathContext
from bigmath.engine.generators import (
    asin_coefficients,
    cos_coefficients,
    cosh_coefficients,
    even_powers,
    exp_coefficients,
    odd_powers,
    powers,
    sin_coefficients,
    sinh_coefficients,
)
from bigmath.engine.series import SeriesSummationEngine


def exp_series(x: Decimal, mc: MathContext) -> SeriesSummationEngine:
    """sum x^n / n!"""
    return SeriesSummationEngine(mc, exp_coefficients(), powers(x, mc))


def sin_series(x: Decimal, mc: MathContext) -> SeriesSummationEngine:
    """sum (-1)^n x^(2n+1) / (2n+1)!, summed in pairs."""
    return SeriesSummationEngine(mc, sin_coefficients(), odd_powers(x, mc), in_pairs=True)


def cos_series(x: Decimal, mc: MathContext) -> SeriesSummationEngine:
    """sum (-1)^n x^(2n) / (2n)!, summed in pairs."""
    return SeriesSummationEngine(mc, cos_coefficients(), even_powers(x, mc), in_pairs=True)


def sinh_series(x: Decimal, mc: MathContext) -> SeriesSummationEngine:
    return SeriesSummationEngine(mc, sinh_coefficients(), odd_powers(x, mc), in_pairs=True)


def cosh_series(x: Decimal, mc: MathContext) -> SeriesSummationEngine:
    return SeriesSummationEngine(mc, cosh_coefficients(), even_powers(x, mc), in_pairs=True)


def asin_series(x: Decimal, mc: MathContext) -> SeriesSummationEngine:
    """sum C(2n, n) x^(2n+1) / (4^n (2n+1)); all terms share the sign of x."""
    return SeriesSummationEngine(mc, asin_coefficients(), odd_powers(x, mc))
