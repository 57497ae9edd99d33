"""Process-wide mathematical constants with precision tiers.

LibraryConstants owns the caches the function library shares:

    values     : (name, tier) -> Decimal          pi, e, log 2, log 3, log 10
    spouge     : a -> tuple[Decimal, ...]         Spouge coefficient tables
    bernoulli  : n -> ExactFraction               Bernoulli numbers

A constant requested at precision P is computed once at the smallest tier
255 * 2^k >= P (rounding HALF_DOWN) and rounded to the caller's context.
Higher precisions therefore never see a value truncated to 255 digits.

The compute functions for e and the logarithms live with exp/log in
bigmath.functions.elementary and are handed in per call; pi is computed
here by the Chudnovsky series.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import TypeAlias, final

from bigmath.core.cache import ConstantCache
from bigmath.core.context import MathContext, Rounding, check_math_context
from bigmath.core.fraction import ExactFraction
from bigmath.infra.config import DEFAULT_ENGINE_CONFIG, EngineConfig

ConstantFactory: TypeAlias = Callable[[MathContext], Decimal]


@final
class LibraryConstants:
    """Compute-once holder for the constants of the function library."""

    def __init__(self, config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> None:
        self._config = config
        self._rounding = Rounding(config.constants_rounding)
        self._values: ConstantCache[tuple[str, int], Decimal] = ConstantCache("constants")
        self._spouge: ConstantCache[int, tuple[Decimal, ...]] = ConstantCache("spouge")
        self._bernoulli: ConstantCache[int, ExactFraction] = ConstantCache("bernoulli")

    @property
    def config(self) -> EngineConfig:
        return self._config

    def tier(self, precision: int) -> int:
        """Smallest base * 2^k that is >= precision."""
        tier = self._config.constants_precision
        while tier < precision:
            tier *= 2
        return tier

    def constant(self, name: str, mc: MathContext, compute: ConstantFactory) -> Decimal:
        """Named constant rounded to mc, computed at most once per tier."""
        check_math_context(mc, name)
        tier = self.tier(mc.precision)
        tier_mc = MathContext(tier, self._rounding)
        value = self._values.get_or_compute((name, tier), lambda: compute(tier_mc))
        return mc.round(value)

    def pi(self, mc: MathContext) -> Decimal:
        return self.constant("pi", mc, chudnovsky_pi)

    def spouge_coefficients(
        self, a: int, compute: Callable[[int], tuple[Decimal, ...]],
    ) -> tuple[Decimal, ...]:
        return self._spouge.get_or_compute(a, lambda: compute(a))

    def bernoulli(self, n: int, compute: Callable[[int], ExactFraction]) -> ExactFraction:
        return self._bernoulli.get_or_compute(n, lambda: compute(n))

    def cached_keys(self) -> int:
        """Total number of entries across all caches."""
        return len(self._values) + len(self._spouge) + len(self._bernoulli)


def chudnovsky_pi(mc: MathContext) -> Decimal:
    """pi by the Chudnovsky series, about 14 digits per term."""
    check_math_context(mc, "pi")
    work = mc.with_guard(10)
    ctx = work.to_context()

    divisor_base = ctx.divide(Decimal(640320**3), Decimal(24))
    sum_a = Decimal(1)
    sum_b = Decimal(0)
    a = Decimal(1)
    # -(6k - 5), 2k - 1, 6k - 1
    term1, term2, term3 = 5, -1, -1
    for k in range(1, (work.precision + 13) // 14 + 1):
        term1 -= 6
        term2 += 2
        term3 += 6
        dividend = Decimal(term1 * term2 * term3)
        divisor = ctx.multiply(Decimal(k * k * k), divisor_base)
        a = ctx.divide(ctx.multiply(a, dividend), divisor)
        sum_a = ctx.add(sum_a, a)
        sum_b = ctx.add(sum_b, ctx.multiply(Decimal(k), a))

    factor = ctx.multiply(Decimal(426880), ctx.sqrt(Decimal(10005)))
    denominator = ctx.add(
        ctx.multiply(Decimal(13591409), sum_a),
        ctx.multiply(Decimal(545140134), sum_b),
    )
    return mc.round(ctx.divide(factor, denominator))


LIBRARY_CONSTANTS = LibraryConstants()
