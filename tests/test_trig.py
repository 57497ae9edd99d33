"""Tests for bigmath.functions.trig -- sin, cos, tan, cot and the inverse functions.

Reference values come from mpmath evaluated with 40+ extra digits.
"""

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
from bigmath.core.errors import ConfigurationError, DomainError
from bigmath.functions.trig import acos, acot, asin, atan, atan2, cos, cot, pi, sin, tan

precisions = st.integers(min_value=5, max_value=60)
unit_interval = st.decimals(
    min_value=Decimal(-1), max_value=Decimal(1), places=8, allow_nan=False, allow_infinity=False,
)


def _reference(fn: Callable[..., Any], *args: Decimal, digits: int) -> Decimal:
    with mp.workdps(digits + 50):
        value = fn(*(mpmath.mpf(str(a)) for a in args))
        return Decimal(mpmath.nstr(value, digits + 30))


def _assert_within_ulp(actual: Decimal, expected: Decimal, mc: MathContext, ulps: int = 1) -> None:
    with localcontext() as ctx:
        ctx.prec = mc.precision + 80
        scale = max(actual.adjusted(), expected.adjusted())
        tolerance = Decimal(ulps).scaleb(scale - mc.precision + 1)
        diff = abs(actual - expected)
        assert diff <= tolerance, f"{actual} vs {expected} (diff {diff})"


def _acot(x: Any) -> Any:
    """acot onto (0, pi), the range bigmath uses."""
    return mp.pi / 2 - mpmath.atan(x)


# ---------------------------------------------------------------------------
# sin / cos
# ---------------------------------------------------------------------------


class TestSinCos:
    def test_zero(self) -> None:
        mc = MathContext(10)
        assert sin(Decimal(0), mc) == 0
        assert cos(Decimal(0), mc) == 1

    @given(
        st.decimals(min_value=Decimal(-100), max_value=Decimal(100), places=8,
                    allow_nan=False, allow_infinity=False),
        precisions,
    )
    def test_sin_matches_reference(self, x: Decimal, precision: int) -> None:
        mc = MathContext(precision)
        _assert_within_ulp(sin(x, mc), _reference(mpmath.sin, x, digits=precision), mc)

    @given(
        st.decimals(min_value=Decimal(-100), max_value=Decimal(100), places=8,
                    allow_nan=False, allow_infinity=False),
        precisions,
    )
    def test_cos_matches_reference(self, x: Decimal, precision: int) -> None:
        mc = MathContext(precision)
        _assert_within_ulp(cos(x, mc), _reference(mpmath.cos, x, digits=precision), mc)

    @pytest.mark.parametrize(
        "x",
        ["0.785398", "0.785399", "-0.785399", "1.5707963", "3.14159265358979323846",
         "6.28318530717958647692", "1E+20", "-123456789.123456789", "1E-30"],
    )
    def test_hard_arguments(self, x: str) -> None:
        mc = MathContext(30)
        _assert_within_ulp(sin(Decimal(x), mc), _reference(mpmath.sin, Decimal(x), digits=30), mc)
        _assert_within_ulp(cos(Decimal(x), mc), _reference(mpmath.cos, Decimal(x), digits=30), mc)

    @pytest.mark.parametrize("precision", [10, 30])
    @pytest.mark.parametrize(
        "x",
        ["3.14159265358979323846264338327950288", "1.57079632679489661923132169163975144",
         "-4.71238898038468985769396507491925432"],
    )
    def test_argument_matching_multiple_of_half_pi(self, x: str, precision: int) -> None:
        mc = MathContext(precision)
        for fn, ref in ((sin, mpmath.sin), (cos, mpmath.cos), (tan, mpmath.tan)):
            expected = _reference(ref, Decimal(x), digits=precision)
            _assert_within_ulp(fn(Decimal(x), mc), expected, mc)

    @pytest.mark.parametrize("x", ["0.1", "1", "2.5", "-4", "100"])
    def test_lower_precision_is_rounded_higher(self, x: str) -> None:
        low, high = MathContext(15), MathContext(45)
        _assert_within_ulp(sin(Decimal(x), low), low.round(sin(Decimal(x), high)), low)
        _assert_within_ulp(cos(Decimal(x), low), low.round(cos(Decimal(x), high)), low)

    def test_unlimited_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            sin(Decimal(1), MathContext.UNLIMITED)


# ---------------------------------------------------------------------------
# tan / cot
# ---------------------------------------------------------------------------


class TestTanCot:
    @pytest.mark.parametrize("x", ["0.5", "-1.2", "1.5", "10", "-0.001"])
    def test_tan(self, x: str) -> None:
        mc = MathContext(30)
        _assert_within_ulp(tan(Decimal(x), mc), _reference(mpmath.tan, Decimal(x), digits=30), mc)

    @pytest.mark.parametrize("x", ["0.5", "-1.2", "3"])
    def test_cot(self, x: str) -> None:
        mc = MathContext(30)
        _assert_within_ulp(cot(Decimal(x), mc), _reference(mpmath.cot, Decimal(x), digits=30), mc)

    def test_tan_zero(self) -> None:
        assert tan(Decimal(0), MathContext(10)) == 0

    def test_cot_zero(self) -> None:
        with pytest.raises(DomainError):
            cot(Decimal(0), MathContext(10))


# ---------------------------------------------------------------------------
# asin / acos
# ---------------------------------------------------------------------------


class TestAsinAcos:
    @pytest.mark.parametrize("x", ["1.5", "-1.0000001"])
    def test_outside_unit_interval(self, x: str) -> None:
        mc = MathContext(10)
        with pytest.raises(DomainError):
            asin(Decimal(x), mc)
        with pytest.raises(DomainError):
            acos(Decimal(x), mc)

    def test_endpoints(self) -> None:
        mc = MathContext(30)
        for x in (Decimal(1), Decimal(-1)):
            _assert_within_ulp(asin(x, mc), _reference(mpmath.asin, x, digits=30), mc)
        assert acos(Decimal(1), mc) == 0
        _assert_within_ulp(acos(Decimal(-1), mc), pi(mc), mc)

    @given(unit_interval, precisions)
    def test_asin_matches_reference(self, x: Decimal, precision: int) -> None:
        mc = MathContext(precision)
        _assert_within_ulp(asin(x, mc), _reference(mpmath.asin, x, digits=precision), mc)

    @given(unit_interval, precisions)
    def test_acos_matches_reference(self, x: Decimal, precision: int) -> None:
        mc = MathContext(precision)
        _assert_within_ulp(acos(x, mc), _reference(mpmath.acos, x, digits=precision), mc)

    @pytest.mark.parametrize("x", ["0.707106", "0.707107", "0.7071068", "0.999999", "0.0001"])
    def test_switch_region(self, x: str) -> None:
        mc = MathContext(40)
        _assert_within_ulp(asin(Decimal(x), mc), _reference(mpmath.asin, Decimal(x), digits=40), mc)


# ---------------------------------------------------------------------------
# atan / atan2 / acot
# ---------------------------------------------------------------------------


class TestAtan:
    @given(
        st.decimals(min_value=Decimal(-1000), max_value=Decimal(1000), places=6,
                    allow_nan=False, allow_infinity=False),
        precisions,
    )
    def test_atan_matches_reference(self, x: Decimal, precision: int) -> None:
        mc = MathContext(precision)
        _assert_within_ulp(atan(x, mc), _reference(mpmath.atan, x, digits=precision), mc)

    @pytest.mark.parametrize("x", ["1", "-1", "1E+10", "-3.5", "0.5"])
    def test_atan_points(self, x: str) -> None:
        mc = MathContext(40)
        _assert_within_ulp(atan(Decimal(x), mc), _reference(mpmath.atan, Decimal(x), digits=40), mc)

    @pytest.mark.parametrize(
        ("y", "x"),
        [("1", "1"), ("1", "-1"), ("-1", "-1"), ("-1", "1"), ("0", "-1"), ("2", "0"),
         ("-2", "0"), ("0", "3"), ("1E-10", "-5")],
    )
    def test_atan2_quadrants(self, y: str, x: str) -> None:
        mc = MathContext(30)
        expected = _reference(mpmath.atan2, Decimal(y), Decimal(x), digits=30)
        _assert_within_ulp(atan2(Decimal(y), Decimal(x), mc), expected, mc)

    def test_atan2_origin(self) -> None:
        with pytest.raises(DomainError):
            atan2(Decimal(0), Decimal(0), MathContext(10))

    def test_atan2_negative_x_axis_is_pi(self) -> None:
        mc = MathContext(25)
        assert atan2(Decimal(0), Decimal(-1), mc) == pi(mc)

    def test_acot_zero_is_half_pi(self) -> None:
        mc = MathContext(30)
        _assert_within_ulp(acot(Decimal(0), mc), _reference(_acot, Decimal(0), digits=30), mc)

    @pytest.mark.parametrize("x", ["2", "-2", "0.25", "-1000"])
    def test_acot(self, x: str) -> None:
        mc = MathContext(30)
        result = acot(Decimal(x), mc)
        _assert_within_ulp(result, _reference(_acot, Decimal(x), digits=30), mc)
        assert 0 < result < pi(mc)
