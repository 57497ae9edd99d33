"""Precision-adaptive Newton refinement.

refine() starts from a cheap seed (usually a float approximation good to
about 15 digits) and applies a caller-supplied correction step while the
working precision grows geometrically (x3 per iteration) up to
target + guard digits. It stops only when the working precision has
reached the cap AND the last correction is no larger than
10^-(target + 1), scaled up by the magnitude of the estimate when it is
1 or more (large roots and logarithms are then judged relatively).

Steps used by the function library:
    log  : r += 2 (x - e^r) / (x + e^r)
    root : r += (x / r^(n-1) - r) / n
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from decimal import Decimal
from typing import TypeAlias

from bigmath.core.context import MathContext, acceptable_error, check_math_context
from bigmath.core.decimals import fits_float
from bigmath.infra.config import DEFAULT_ENGINE_CONFIG

logger = logging.getLogger(__name__)

NewtonStep: TypeAlias = Callable[[Decimal, MathContext], Decimal]
"""(current estimate, working context) -> correction to add."""


def float_seed(x: Decimal, approximate: Callable[[float], float]) -> Decimal | None:
    """approximate(float(x)) as a Decimal, or None when float cannot carry it.

    None when x is outside the float range, does not convert to a positive
    float (underflow included), or the approximation is not finite.
    """
    if not fits_float(x):
        return None
    value = float(x)
    if not value > 0.0:
        return None
    try:
        seed = approximate(value)
    except (OverflowError, ValueError):
        return None
    if not math.isfinite(seed):
        return None
    return Decimal(repr(seed))


def refine(
    seed: Decimal,
    seed_precision: int,
    mc: MathContext,
    step: NewtonStep,
    *,
    function: str = "refine",
) -> Decimal:
    """Iterate result += step(result, working) with a x3 precision ramp.

    Args:
        seed: Initial estimate.
        seed_precision: Significant digits the seed is trusted to.
        mc: Target precision and rounding of the returned value.
        step: Correction for the current estimate at the working precision.
        function: Name reported in errors and log records.
    """
    check_math_context(mc, function)
    config = DEFAULT_ENGINE_CONFIG
    max_precision = mc.precision + config.newton_guard_digits
    base_threshold = acceptable_error(mc)

    working = max(seed_precision, 1)
    result = seed
    iterations = 0
    while True:
        working = min(working * config.newton_growth_factor, max_precision)
        working_mc = mc.with_precision(working)
        correction = step(result, working_mc)
        result = working_mc.to_context().add(result, correction)
        iterations += 1
        if working >= max_precision and correction.copy_abs() <= _threshold(base_threshold, result):
            break

    logger.debug(
        "%s: newton finished after %d iterations at precision %d",
        function, iterations, working,
    )
    return mc.round(result)


def _threshold(base: Decimal, estimate: Decimal) -> Decimal:
    magnitude = estimate.adjusted()
    if estimate.is_zero() or magnitude <= 0:
        return base
    return base.scaleb(magnitude)
