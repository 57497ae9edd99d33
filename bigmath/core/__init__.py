"""bigmath.core — value types and cross-cutting primitives."""

from bigmath.core.cache import ConstantCache as ConstantCache
from bigmath.core.context import EXACT_CONTEXT as EXACT_CONTEXT
from bigmath.core.context import MathContext as MathContext
from bigmath.core.context import Rounding as Rounding
from bigmath.core.context import acceptable_error as acceptable_error
from bigmath.core.context import check_math_context as check_math_context
from bigmath.core.decimals import exponent as exponent
from bigmath.core.decimals import fits_float as fits_float
from bigmath.core.decimals import fractional_part as fractional_part
from bigmath.core.decimals import integral_part as integral_part
from bigmath.core.decimals import is_integral as is_integral
from bigmath.core.decimals import mantissa as mantissa
from bigmath.core.decimals import reciprocal as reciprocal
from bigmath.core.decimals import round_with_trailing_zeros as round_with_trailing_zeros
from bigmath.core.decimals import significant_digits as significant_digits
from bigmath.core.errors import BigMathError as BigMathError
from bigmath.core.errors import ConfigurationError as ConfigurationError
from bigmath.core.errors import DivideByZeroError as DivideByZeroError
from bigmath.core.errors import DomainError as DomainError
from bigmath.core.fraction import ExactFraction as ExactFraction
from bigmath.core.result import Err as Err
from bigmath.core.result import Ok as Ok
from bigmath.core.result import Created as Created
from bigmath.core.result import unwrap as unwrap
