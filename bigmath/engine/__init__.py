"""bigmath.engine — series summation, coefficient generators, Newton refinement."""

from bigmath.engine.calculators import asin_series as asin_series
from bigmath.engine.calculators import cos_series as cos_series
from bigmath.engine.calculators import cosh_series as cosh_series
from bigmath.engine.calculators import exp_series as exp_series
from bigmath.engine.calculators import sin_series as sin_series
from bigmath.engine.calculators import sinh_series as sinh_series
from bigmath.engine.generators import AsinCoefficients as AsinCoefficients
from bigmath.engine.generators import ExpCoefficients as ExpCoefficients
from bigmath.engine.generators import FactorialCoefficients as FactorialCoefficients
from bigmath.engine.generators import PowerSequence as PowerSequence
from bigmath.engine.generators import asin_coefficients as asin_coefficients
from bigmath.engine.generators import cos_coefficients as cos_coefficients
from bigmath.engine.generators import cosh_coefficients as cosh_coefficients
from bigmath.engine.generators import even_powers as even_powers
from bigmath.engine.generators import exp_coefficients as exp_coefficients
from bigmath.engine.generators import odd_powers as odd_powers
from bigmath.engine.generators import powers as powers
from bigmath.engine.generators import sin_coefficients as sin_coefficients
from bigmath.engine.generators import sinh_coefficients as sinh_coefficients
from bigmath.engine.refiner import NewtonStep as NewtonStep
from bigmath.engine.refiner import float_seed as float_seed
from bigmath.engine.refiner import refine as refine
from bigmath.engine.series import SeriesSummationEngine as SeriesSummationEngine
