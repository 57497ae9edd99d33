"""Tests for bigmath.functions.hyperbolic -- sinh, cosh, tanh, coth and inverses."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal, localcontext
from typing import Any

import mpmath
import pytest
from hypothesis import given
from hypothesis import strategies as st
from mpmath import mp

from bigmath.core.context import MathContext
from bigmath.core.errors import DomainError
from bigmath.functions.hyperbolic import acosh, acoth, asinh, atanh, cosh, coth, sinh, tanh

precisions = st.integers(min_value=5, max_value=50)
moderate = st.decimals(
    min_value=Decimal(-30), max_value=Decimal(30), places=6, allow_nan=False, allow_infinity=False,
)


def _reference(fn: Callable[..., Any], x: Decimal, digits: int) -> Decimal:
    with mp.workdps(digits + 50):
        return Decimal(mpmath.nstr(fn(mpmath.mpf(str(x))), digits + 30))


def _assert_within_ulp(actual: Decimal, expected: Decimal, mc: MathContext) -> None:
    with localcontext() as ctx:
        ctx.prec = mc.precision + 80
        scale = max(actual.adjusted(), expected.adjusted())
        assert abs(actual - expected) <= Decimal(1).scaleb(scale - mc.precision + 1), (
            f"{actual} vs {expected}"
        )


# ---------------------------------------------------------------------------
# sinh / cosh / tanh / coth
# ---------------------------------------------------------------------------


class TestDirect:
    def test_zero(self) -> None:
        mc = MathContext(10)
        assert sinh(Decimal(0), mc) == 0
        assert cosh(Decimal(0), mc) == 1
        assert tanh(Decimal(0), mc) == 0

    @given(moderate, precisions)
    def test_sinh(self, x: Decimal, precision: int) -> None:
        mc = MathContext(precision)
        _assert_within_ulp(sinh(x, mc), _reference(mpmath.sinh, x, precision), mc)

    @given(moderate, precisions)
    def test_cosh(self, x: Decimal, precision: int) -> None:
        mc = MathContext(precision)
        _assert_within_ulp(cosh(x, mc), _reference(mpmath.cosh, x, precision), mc)

    @given(moderate, precisions)
    def test_tanh(self, x: Decimal, precision: int) -> None:
        mc = MathContext(precision)
        _assert_within_ulp(tanh(x, mc), _reference(mpmath.tanh, x, precision), mc)

    @pytest.mark.parametrize("x", ["1.999999", "2", "-2.5", "0.0000001", "100"])
    def test_series_boundary(self, x: str) -> None:
        mc = MathContext(40)
        _assert_within_ulp(sinh(Decimal(x), mc), _reference(mpmath.sinh, Decimal(x), 40), mc)
        _assert_within_ulp(cosh(Decimal(x), mc), _reference(mpmath.cosh, Decimal(x), 40), mc)

    def test_coth(self) -> None:
        mc = MathContext(30)
        x = Decimal("0.5")
        _assert_within_ulp(coth(x, mc), _reference(mpmath.coth, x, 30), mc)
        with pytest.raises(DomainError):
            coth(Decimal(0), mc)


# ---------------------------------------------------------------------------
# Inverse functions
# ---------------------------------------------------------------------------


class TestInverse:
    @given(
        st.decimals(min_value=Decimal(-1000000), max_value=Decimal(1000000), places=6,
                    allow_nan=False, allow_infinity=False),
        precisions,
    )
    def test_asinh(self, x: Decimal, precision: int) -> None:
        mc = MathContext(precision)
        _assert_within_ulp(asinh(x, mc), _reference(mpmath.asinh, x, precision), mc)

    def test_asinh_small_argument(self) -> None:
        mc = MathContext(25)
        x = Decimal("1E-20")
        _assert_within_ulp(asinh(x, mc), _reference(mpmath.asinh, x, 25), mc)

    @given(
        st.decimals(min_value=Decimal(1), max_value=Decimal(1000000), places=6,
                    allow_nan=False, allow_infinity=False),
        precisions,
    )
    def test_acosh(self, x: Decimal, precision: int) -> None:
        mc = MathContext(precision)
        _assert_within_ulp(acosh(x, mc), _reference(mpmath.acosh, x, precision), mc)

    def test_acosh_domain(self) -> None:
        mc = MathContext(10)
        assert acosh(Decimal(1), mc) == 0
        with pytest.raises(DomainError):
            acosh(Decimal("0.5"), mc)

    @given(
        st.decimals(min_value=Decimal("-0.999999"), max_value=Decimal("0.999999"), places=6,
                    allow_nan=False, allow_infinity=False),
        precisions,
    )
    def test_atanh(self, x: Decimal, precision: int) -> None:
        mc = MathContext(precision)
        _assert_within_ulp(atanh(x, mc), _reference(mpmath.atanh, x, precision), mc)

    @pytest.mark.parametrize("x", ["1", "-1", "1.5"])
    def test_atanh_domain(self, x: str) -> None:
        with pytest.raises(DomainError):
            atanh(Decimal(x), MathContext(10))

    @pytest.mark.parametrize("x", ["1.000001", "2", "-3", "1E+12"])
    def test_acoth(self, x: str) -> None:
        mc = MathContext(30)
        _assert_within_ulp(acoth(Decimal(x), mc), _reference(mpmath.acoth, Decimal(x), 30), mc)

    @pytest.mark.parametrize("x", ["1", "-1", "0.5", "0"])
    def test_acoth_domain(self, x: str) -> None:
        with pytest.raises(DomainError):
            acoth(Decimal(x), MathContext(10))
