"""SeriesSummationEngine: sums coefficient[i] * power[i] until convergence.

One concrete engine type, parameterized by a coefficient generator, a
power generator and the pair-mode flag. Calling code builds a fresh
engine per function call (see bigmath.engine.calculators).

Each term is numerator * power (exact) divided by the denominator at the
working precision. The running sum is accumulated exactly and rounded
once at the end. The loop stops when the last added step (a pair of
terms in pair mode) is no larger than 10^-(precision + 1).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from decimal import Context, Decimal
from typing import final

from bigmath.core.context import EXACT_CONTEXT, MathContext, acceptable_error, check_math_context
from bigmath.core.fraction import ExactFraction

logger = logging.getLogger(__name__)

_ZERO = Decimal(0)


@final
class SeriesSummationEngine:
    """Sums a power series built from two lazy generators.

    Args:
        mc: Working precision of every term division and of the result.
        coefficients: Yields ExactFraction coefficients from index 0.
        powers: Yields the matching powers of the argument from index 0.
        in_pairs: Add two consecutive terms before each convergence test.
    """

    __slots__ = ("_coefficients", "_factors", "_in_pairs", "_lock", "_mc", "_powers")

    def __init__(
        self,
        mc: MathContext,
        coefficients: Iterator[ExactFraction],
        powers: Iterator[Decimal],
        *,
        in_pairs: bool = False,
    ) -> None:
        check_math_context(mc, "SeriesSummationEngine")
        self._mc = mc
        self._coefficients = coefficients
        self._powers = powers
        self._in_pairs = in_pairs
        self._factors: list[ExactFraction] = []
        self._lock = threading.Lock()

    @property
    def in_pairs(self) -> bool:
        return self._in_pairs

    @property
    def cached_factors(self) -> int:
        """Number of coefficients pulled from the generator so far."""
        with self._lock:
            return len(self._factors)

    def get_factor(self, index: int) -> ExactFraction:
        """Coefficient at index, pulling forward from the generator as needed.

        The cache is append-only: an index already served is never
        recomputed and its value never changes.
        """
        if index < 0:
            raise IndexError(f"coefficient index must be >= 0, got {index}")
        with self._lock:
            while len(self._factors) <= index:
                self._factors.append(next(self._coefficients))
            return self._factors[index]

    def _term(self, index: int, context: Context) -> Decimal:
        factor = self.get_factor(index)
        power = next(self._powers)
        product = EXACT_CONTEXT.multiply(factor.numerator, power)
        return context.divide(product, factor.denominator)

    def calculate(self) -> Decimal:
        """Sum the series to the engine precision."""
        context = self._mc.to_context()
        threshold = acceptable_error(self._mc)
        total = _ZERO
        index = 0
        while True:
            step = self._term(index, context)
            index += 1
            if self._in_pairs:
                step = EXACT_CONTEXT.add(step, self._term(index, context))
                index += 1
            total = EXACT_CONTEXT.add(total, step)
            if step.copy_abs() <= threshold:
                break

        logger.debug(
            "series converged after %d terms at precision %d (pairs=%s)",
            index, self._mc.precision, self._in_pairs,
        )
        return self._mc.round(total)
