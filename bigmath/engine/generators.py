"""Lazy coefficient and power generators feeding the series engine.

Coefficient generators yield ExactFraction terms of a Maclaurin series,
each derived from the previous one with O(1) exact multiplications:

    exp_coefficients()   1/n!
    sin_coefficients()   (-1)^n / (2n+1)!
    cos_coefficients()   (-1)^n / (2n)!
    sinh_coefficients()  1 / (2n+1)!
    cosh_coefficients()  1 / (2n)!
    asin_coefficients()  (2n)! / (4^n * (n!)^2 * (2n+1))

Power generators yield x^0, x^1, ... / x^0, x^2, ... / x^1, x^3, ...,
each product rounded to the working MathContext.

All generators are single-pass iterators, consumed from index 0 in order.
One fresh instance per calculation; never share one between threads.
"""

from __future__ import annotations

from collections.abc import Iterator
from decimal import Decimal
from typing import final

from bigmath.core.context import MathContext
from bigmath.core.fraction import ExactFraction

_ONE = Decimal(1)


# ---------------------------------------------------------------------------
# Coefficient generators
# ---------------------------------------------------------------------------


@final
class ExpCoefficients(Iterator[ExactFraction]):
    """1/n!, each term the previous one divided by n."""

    __slots__ = ("_n", "_term")

    def __init__(self) -> None:
        self._n = 0
        self._term = ExactFraction.ONE

    def __next__(self) -> ExactFraction:
        value = self._term
        self._n += 1
        self._term = self._term.divide(ExactFraction.from_int(self._n))
        return value


@final
class FactorialCoefficients(Iterator[ExactFraction]):
    """1/(2n+1)! (odd) or 1/(2n)! (even), optionally with alternating sign.

    The running factorial advances by (2n)(2n+1) or (2n-1)(2n) per step.
    """

    __slots__ = ("_alternating", "_factorial", "_n", "_negative", "_odd")

    def __init__(self, *, odd: bool, alternating: bool) -> None:
        self._odd = odd
        self._alternating = alternating
        self._n = 0
        self._negative = False
        self._factorial = ExactFraction.ONE

    def __next__(self) -> ExactFraction:
        factor = self._factorial.reciprocal()
        if self._negative:
            factor = factor.negate()

        self._n += 1
        two_n = 2 * self._n
        step = two_n * (two_n + 1) if self._odd else (two_n - 1) * two_n
        self._factorial = self._factorial.multiply(ExactFraction.from_int(step))
        if self._alternating:
            self._negative = not self._negative
        return factor


@final
class AsinCoefficients(Iterator[ExactFraction]):
    """C(2n, n) / (4^n * (2n+1)) from three running accumulators.

    (2n)!, n! and 4^n are each advanced by one multiplication per step, so
    no factorial of a large n is ever formed from scratch.
    """

    __slots__ = ("_factorial_2n", "_factorial_n", "_four_pow_n", "_n")

    _FOUR = ExactFraction.from_int(4)

    def __init__(self) -> None:
        self._n = 0
        self._factorial_2n = ExactFraction.ONE
        self._factorial_n = ExactFraction.ONE
        self._four_pow_n = ExactFraction.ONE

    def __next__(self) -> ExactFraction:
        n = self._n
        divisor = (
            self._four_pow_n
            .multiply(self._factorial_n)
            .multiply(self._factorial_n)
            .multiply(ExactFraction.from_int(2 * n + 1))
        )
        factor = self._factorial_2n.divide(divisor)

        n += 1
        self._n = n
        self._factorial_2n = self._factorial_2n.multiply(
            ExactFraction.from_int((2 * n - 1) * (2 * n))
        )
        self._factorial_n = self._factorial_n.multiply(ExactFraction.from_int(n))
        self._four_pow_n = self._four_pow_n.multiply(self._FOUR)
        return factor


def exp_coefficients() -> ExpCoefficients:
    return ExpCoefficients()


def sin_coefficients() -> FactorialCoefficients:
    return FactorialCoefficients(odd=True, alternating=True)


def cos_coefficients() -> FactorialCoefficients:
    return FactorialCoefficients(odd=False, alternating=True)


def sinh_coefficients() -> FactorialCoefficients:
    return FactorialCoefficients(odd=True, alternating=False)


def cosh_coefficients() -> FactorialCoefficients:
    return FactorialCoefficients(odd=False, alternating=False)


def asin_coefficients() -> AsinCoefficients:
    return AsinCoefficients()


# ---------------------------------------------------------------------------
# Power generators
# ---------------------------------------------------------------------------


@final
class PowerSequence(Iterator[Decimal]):
    """start, start*step, start*step^2, ... each product rounded to mc."""

    __slots__ = ("_context", "_current", "_step")

    def __init__(self, start: Decimal, step: Decimal, mc: MathContext) -> None:
        self._context = mc.to_context()
        self._current = start
        self._step = step

    def __next__(self) -> Decimal:
        value = self._current
        self._current = self._context.multiply(self._current, self._step)
        return value


def powers(x: Decimal, mc: MathContext) -> PowerSequence:
    """x^0, x^1, x^2, ..."""
    return PowerSequence(_ONE, x, mc)


def even_powers(x: Decimal, mc: MathContext) -> PowerSequence:
    """x^0, x^2, x^4, ..."""
    return PowerSequence(_ONE, mc.to_context().multiply(x, x), mc)


def odd_powers(x: Decimal, mc: MathContext) -> PowerSequence:
    """x^1, x^3, x^5, ..."""
    return PowerSequence(x, mc.to_context().multiply(x, x), mc)
