"""Complex numbers over Decimal and complex analogues of the real functions.

ComplexDecimal is an immutable (re, im) pair with named arithmetic. Methods
taking an optional MathContext are exact without one (add, subtract,
multiply, negate) and round each component with one. Functions follow the
textbook identities and call back into the real function library at
precision + 4 (log: +20 for the modulus, +5 for the angle):

    exp(x)   = e^re (cos im, sin im)
    sin(x)   = (sin re cosh im, cos re sinh im)
    cos(x)   = (cos re cosh im, -sin re sinh im)
    atan(x)  = log((i - x) / (i + x)) / (2i)
    acot(x)  = log((x + i) / (x - i)) / (2i)
    asin(x)  = -i log(ix + sqrt(1 - x^2))
    acos(x)  = -i log(x + i sqrt(1 - x^2))
    log(x)   = (log |x|, angle x)
    x^y      = exp(y log x)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, final

from bigmath.core.context import EXACT_CONTEXT, MathContext, check_math_context
from bigmath.core.decimals import is_integral
from bigmath.core.errors import DivideByZeroError, DomainError
from bigmath.functions.elementary import exp, log, power, power_int, sqrt
from bigmath.functions.hyperbolic import cosh, sinh
from bigmath.functions.special import factorial, spouge_coefficients
from bigmath.functions.trig import atan2, cos, sin

_ZERO = Decimal(0)
_ONE = Decimal(1)
_TWO = Decimal(2)
_HALF = Decimal("0.5")


@final
@dataclass(frozen=True, slots=True)
class ComplexDecimal:
    """re + im*i with Decimal components."""

    re: Decimal
    im: Decimal = _ZERO

    ZERO: ClassVar[ComplexDecimal]  # Assigned after class definition
    ONE: ClassVar[ComplexDecimal]
    I: ClassVar[ComplexDecimal]

    def __post_init__(self) -> None:
        for name in ("re", "im"):
            value = getattr(self, name)
            if isinstance(value, int) and not isinstance(value, bool):
                object.__setattr__(self, name, Decimal(value))
            elif not isinstance(value, Decimal) or not value.is_finite():
                raise TypeError(f"ComplexDecimal.{name} must be finite Decimal, got {value!r}")

    @staticmethod
    def of(re: Decimal | int, im: Decimal | int = 0) -> ComplexDecimal:
        return ComplexDecimal(Decimal(re), Decimal(im))

    @staticmethod
    def from_polar(radius: Decimal, angle: Decimal, mc: MathContext) -> ComplexDecimal:
        """radius * (cos angle, sin angle)."""
        if radius.is_zero():
            return ComplexDecimal.ZERO
        ctx = mc.to_context()
        return ComplexDecimal(
            ctx.multiply(radius, cos(angle, mc)),
            ctx.multiply(radius, sin(angle, mc)),
        )

    # --- Arithmetic ---

    def add(self, other: ComplexDecimal, mc: MathContext | None = None) -> ComplexDecimal:
        ctx = EXACT_CONTEXT if mc is None else mc.to_context()
        return ComplexDecimal(ctx.add(self.re, other.re), ctx.add(self.im, other.im))

    def subtract(self, other: ComplexDecimal, mc: MathContext | None = None) -> ComplexDecimal:
        ctx = EXACT_CONTEXT if mc is None else mc.to_context()
        return ComplexDecimal(ctx.subtract(self.re, other.re), ctx.subtract(self.im, other.im))

    def multiply(self, other: ComplexDecimal, mc: MathContext | None = None) -> ComplexDecimal:
        ctx = EXACT_CONTEXT if mc is None else mc.to_context()
        return ComplexDecimal(
            ctx.subtract(ctx.multiply(self.re, other.re), ctx.multiply(self.im, other.im)),
            ctx.add(ctx.multiply(self.re, other.im), ctx.multiply(self.im, other.re)),
        )

    def scale(self, factor: Decimal, mc: MathContext | None = None) -> ComplexDecimal:
        """Multiply both components by a real factor."""
        ctx = EXACT_CONTEXT if mc is None else mc.to_context()
        return ComplexDecimal(ctx.multiply(self.re, factor), ctx.multiply(self.im, factor))

    def divide(self, other: ComplexDecimal, mc: MathContext) -> ComplexDecimal:
        return self.multiply(other.reciprocal(mc), mc)

    def reciprocal(self, mc: MathContext) -> ComplexDecimal:
        """conjugate / |x|^2; DivideByZeroError for zero."""
        if self.is_zero():
            raise DivideByZeroError("Divide by zero", function="ComplexDecimal.reciprocal")
        ctx = mc.to_context()
        scale = self.abs_square(mc)
        return ComplexDecimal(ctx.divide(self.re, scale), ctx.minus(ctx.divide(self.im, scale)))

    def negate(self) -> ComplexDecimal:
        return ComplexDecimal(EXACT_CONTEXT.minus(self.re), EXACT_CONTEXT.minus(self.im))

    def conjugate(self) -> ComplexDecimal:
        return ComplexDecimal(self.re, EXACT_CONTEXT.minus(self.im))

    # --- Inspection ---

    def abs(self, mc: MathContext) -> Decimal:
        return sqrt(self.abs_square(mc), mc)

    def abs_square(self, mc: MathContext) -> Decimal:
        ctx = mc.to_context()
        return ctx.add(ctx.multiply(self.re, self.re), ctx.multiply(self.im, self.im))

    def angle(self, mc: MathContext) -> Decimal:
        """Argument in (-pi, pi]; DomainError for zero."""
        return atan2(self.im, self.re, mc)

    def is_real(self) -> bool:
        return self.im.is_zero()

    def is_zero(self) -> bool:
        return self.re.is_zero() and self.im.is_zero()

    def round(self, mc: MathContext) -> ComplexDecimal:
        return ComplexDecimal(mc.round(self.re), mc.round(self.im))

    def __str__(self) -> str:
        if self.im.is_signed():
            return f"({self.re} - {EXACT_CONTEXT.minus(self.im)} i)"
        return f"({self.re} + {self.im} i)"


ComplexDecimal.ZERO = ComplexDecimal(_ZERO, _ZERO)
ComplexDecimal.ONE = ComplexDecimal(_ONE, _ZERO)
ComplexDecimal.I = ComplexDecimal(_ZERO, _ONE)

_TWO_I = ComplexDecimal(_ZERO, _TWO)


# ---------------------------------------------------------------------------
# Elementary functions
# ---------------------------------------------------------------------------


def cexp(x: ComplexDecimal, mc: MathContext) -> ComplexDecimal:
    check_math_context(mc, "cexp")
    work = mc.with_guard(4)
    ctx = work.to_context()
    exp_re = exp(x.re, work)
    return ComplexDecimal(
        ctx.multiply(exp_re, cos(x.im, work)),
        ctx.multiply(exp_re, sin(x.im, work)),
    ).round(mc)


def clog(x: ComplexDecimal, mc: MathContext) -> ComplexDecimal:
    """Principal logarithm; DomainError for zero."""
    check_math_context(mc, "clog")
    if x.is_zero():
        raise DomainError("Illegal log(x) for x = 0", function="clog")
    modulus_mc = mc.with_guard(20)
    return ComplexDecimal(
        log(x.abs(modulus_mc), modulus_mc),
        x.angle(mc.with_guard(5)),
    ).round(mc)


def csqrt(x: ComplexDecimal, mc: MathContext) -> ComplexDecimal:
    """Principal square root: (x + |x|) / |x + |x|| * sqrt|x|."""
    check_math_context(mc, "csqrt")
    if x.is_zero():
        return ComplexDecimal.ZERO
    work = mc.with_guard(4)
    if x.is_real() and x.re.is_signed():
        # Negative real axis: sqrt(-r) = i sqrt(r).
        return ComplexDecimal(_ZERO, sqrt(EXACT_CONTEXT.minus(x.re), mc))
    magnitude = x.abs(work)
    shifted = x.add(ComplexDecimal(magnitude), work)
    ctx = work.to_context()
    norm = shifted.abs(work)
    direction = ComplexDecimal(ctx.divide(shifted.re, norm), ctx.divide(shifted.im, norm))
    return direction.scale(sqrt(magnitude, work), work).round(mc)


def cpower_int(x: ComplexDecimal, n: int, mc: MathContext) -> ComplexDecimal:
    """x^n by repeated squaring; negative n takes the reciprocal."""
    check_math_context(mc, "cpower_int")
    work = mc.with_guard(10)
    if n < 0:
        return cpower_int(x, -n, work).reciprocal(work).round(mc)
    result = ComplexDecimal.ONE
    base = x
    while n > 0:
        if n & 1:
            result = result.multiply(base, work)
        n >>= 1
        if n:
            base = base.multiply(base, work)
    return result.round(mc)


def cpower(x: ComplexDecimal, y: Decimal, mc: MathContext) -> ComplexDecimal:
    """x^y for real y: |x|^y (cos y*angle, sin y*angle)."""
    check_math_context(mc, "cpower")
    if x.is_zero():
        return ComplexDecimal(power(_ZERO, y, mc))
    work = mc.with_guard(4)
    turned = work.to_context().multiply(x.angle(work), y)
    unit = ComplexDecimal(cos(turned, work), sin(turned, work))
    return unit.scale(power(x.abs(work), y, work), work).round(mc)


def cpower_complex(x: ComplexDecimal, y: ComplexDecimal, mc: MathContext) -> ComplexDecimal:
    """x^y = exp(y log x)."""
    check_math_context(mc, "cpower_complex")
    work = mc.with_guard(4)
    return cexp(y.multiply(clog(x, work), work), work).round(mc)


def croot(x: ComplexDecimal, n: Decimal | ComplexDecimal, mc: MathContext) -> ComplexDecimal:
    """x^(1/n) for a real or complex n."""
    check_math_context(mc, "croot")
    work = mc.with_guard(4)
    if isinstance(n, ComplexDecimal):
        return cpower_complex(x, ComplexDecimal.ONE.divide(n, work), work).round(mc)
    if n.is_zero():
        raise DomainError("Illegal root(x, n) for n = 0", function="croot")
    return cpower(x, work.to_context().divide(_ONE, n), work).round(mc)


# ---------------------------------------------------------------------------
# Trigonometric functions
# ---------------------------------------------------------------------------


def csin(x: ComplexDecimal, mc: MathContext) -> ComplexDecimal:
    check_math_context(mc, "csin")
    work = mc.with_guard(4)
    ctx = work.to_context()
    return ComplexDecimal(
        ctx.multiply(sin(x.re, work), cosh(x.im, work)),
        ctx.multiply(cos(x.re, work), sinh(x.im, work)),
    ).round(mc)


def ccos(x: ComplexDecimal, mc: MathContext) -> ComplexDecimal:
    check_math_context(mc, "ccos")
    work = mc.with_guard(4)
    ctx = work.to_context()
    return ComplexDecimal(
        ctx.multiply(cos(x.re, work), cosh(x.im, work)),
        ctx.minus(ctx.multiply(sin(x.re, work), sinh(x.im, work))),
    ).round(mc)


def ctan(x: ComplexDecimal, mc: MathContext) -> ComplexDecimal:
    check_math_context(mc, "ctan")
    work = mc.with_guard(4)
    return csin(x, work).divide(ccos(x, work), work).round(mc)


def catan(x: ComplexDecimal, mc: MathContext) -> ComplexDecimal:
    check_math_context(mc, "catan")
    work = mc.with_guard(4)
    i = ComplexDecimal.I
    ratio = i.subtract(x, work).divide(i.add(x, work), work)
    return clog(ratio, work).divide(_TWO_I, work).round(mc)


def cacot(x: ComplexDecimal, mc: MathContext) -> ComplexDecimal:
    check_math_context(mc, "cacot")
    work = mc.with_guard(4)
    i = ComplexDecimal.I
    ratio = x.add(i, work).divide(x.subtract(i, work), work)
    return clog(ratio, work).divide(_TWO_I, work).round(mc)


def casin(x: ComplexDecimal, mc: MathContext) -> ComplexDecimal:
    check_math_context(mc, "casin")
    work = mc.with_guard(4)
    root = csqrt(ComplexDecimal.ONE.subtract(x.multiply(x, work), work), work)
    inner = ComplexDecimal.I.multiply(x, work).add(root, work)
    return _times_minus_i(clog(inner, work)).round(mc)


def cacos(x: ComplexDecimal, mc: MathContext) -> ComplexDecimal:
    check_math_context(mc, "cacos")
    work = mc.with_guard(4)
    root = csqrt(ComplexDecimal.ONE.subtract(x.multiply(x, work), work), work)
    inner = x.add(ComplexDecimal.I.multiply(root, work), work)
    return _times_minus_i(clog(inner, work)).round(mc)


def _times_minus_i(x: ComplexDecimal) -> ComplexDecimal:
    """-i * (a + bi) = b - ai (exact)."""
    return ComplexDecimal(x.im, EXACT_CONTEXT.minus(x.re))


# ---------------------------------------------------------------------------
# Factorial / gamma
# ---------------------------------------------------------------------------


def cfactorial(x: ComplexDecimal, mc: MathContext) -> ComplexDecimal:
    """Exact for real integers, Spouge's approximation otherwise."""
    if x.is_real() and is_integral(x.re):
        return ComplexDecimal(factorial(x.re, mc))

    check_math_context(mc, "cfactorial")
    work = mc.with_precision(mc.precision * 2)
    a = max(2, mc.precision * 13 // 10)
    coefficients = spouge_coefficients(a)

    factor = ComplexDecimal(coefficients[0])
    for k in range(1, a):
        shifted_k = x.add(ComplexDecimal(Decimal(k)))
        factor = factor.add(ComplexDecimal(coefficients[k]).divide(shifted_k, work), work)

    shifted = x.add(ComplexDecimal(Decimal(a)))
    exponent = x.add(ComplexDecimal(_HALF))
    result = cpower_complex(shifted, exponent, work)
    result = result.multiply(cexp(shifted.negate(), work), work)
    return result.multiply(factor, work).round(mc)


def cgamma(x: ComplexDecimal, mc: MathContext) -> ComplexDecimal:
    """gamma(x) = (x - 1)!"""
    return cfactorial(x.subtract(ComplexDecimal.ONE), mc)
