"""bigmath.functions — the decimal function library."""

from bigmath.functions.complex_math import ComplexDecimal as ComplexDecimal
from bigmath.functions.complex_math import cacos as cacos
from bigmath.functions.complex_math import cacot as cacot
from bigmath.functions.complex_math import casin as casin
from bigmath.functions.complex_math import catan as catan
from bigmath.functions.complex_math import ccos as ccos
from bigmath.functions.complex_math import cexp as cexp
from bigmath.functions.complex_math import cfactorial as cfactorial
from bigmath.functions.complex_math import cgamma as cgamma
from bigmath.functions.complex_math import clog as clog
from bigmath.functions.complex_math import cpower as cpower
from bigmath.functions.complex_math import cpower_complex as cpower_complex
from bigmath.functions.complex_math import cpower_int as cpower_int
from bigmath.functions.complex_math import croot as croot
from bigmath.functions.complex_math import csin as csin
from bigmath.functions.complex_math import csqrt as csqrt
from bigmath.functions.complex_math import ctan as ctan
from bigmath.functions.constants import LIBRARY_CONSTANTS as LIBRARY_CONSTANTS
from bigmath.functions.constants import LibraryConstants as LibraryConstants
from bigmath.functions.constants import chudnovsky_pi as chudnovsky_pi
from bigmath.functions.elementary import e as e
from bigmath.functions.elementary import exp as exp
from bigmath.functions.elementary import log as log
from bigmath.functions.elementary import log2 as log2
from bigmath.functions.elementary import log10 as log10
from bigmath.functions.elementary import power as power
from bigmath.functions.elementary import power_int as power_int
from bigmath.functions.elementary import root as root
from bigmath.functions.elementary import sqrt as sqrt
from bigmath.functions.hyperbolic import acosh as acosh
from bigmath.functions.hyperbolic import acoth as acoth
from bigmath.functions.hyperbolic import asinh as asinh
from bigmath.functions.hyperbolic import atanh as atanh
from bigmath.functions.hyperbolic import cosh as cosh
from bigmath.functions.hyperbolic import coth as coth
from bigmath.functions.hyperbolic import sinh as sinh
from bigmath.functions.hyperbolic import tanh as tanh
from bigmath.functions.special import bernoulli as bernoulli
from bigmath.functions.special import bernoulli_fraction as bernoulli_fraction
from bigmath.functions.special import factorial as factorial
from bigmath.functions.special import gamma as gamma
from bigmath.functions.trig import acos as acos
from bigmath.functions.trig import acot as acot
from bigmath.functions.trig import asin as asin
from bigmath.functions.trig import atan as atan
from bigmath.functions.trig import atan2 as atan2
from bigmath.functions.trig import cos as cos
from bigmath.functions.trig import cot as cot
from bigmath.functions.trig import pi as pi
from bigmath.functions.trig import sin as sin
from bigmath.functions.trig import tan as tan
