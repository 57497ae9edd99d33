"""Exception hierarchy for bigmath.

Every public function raises one of these at its boundary. Base class
BigMathError, three concrete subclasses. Each carries a stable ``code`` and
the ``function`` that raised it so callers can log or serialize failures
without parsing messages.
"""

from __future__ import annotations

from typing import ClassVar, final


class BigMathError(ArithmeticError):
    """Base error. NOT @final — has subclasses."""

    code: ClassVar[str] = "BIGMATH"

    def __init__(self, message: str, *, function: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.function = function  # public function that rejected the call

    def with_context(self, context: str) -> BigMathError:
        """Return a copy of the same type with context prepended to message."""
        return type(self)(f"{context}: {self.message}", function=self.function)

    def to_dict(self) -> dict[str, object]:
        """Serialize to dict with stable keys."""
        return {
            "message": self.message,
            "code": self.code,
            "function": self.function,
        }


@final
class DomainError(BigMathError, ValueError):
    """Argument outside the mathematically valid domain of a function."""

    code: ClassVar[str] = "DOMAIN"


@final
class ConfigurationError(BigMathError):
    """A MathContext the function cannot honour (precision 0 = unlimited)."""

    code: ClassVar[str] = "UNSUPPORTED_CONTEXT"


@final
class DivideByZeroError(BigMathError, ZeroDivisionError):
    """Zero denominator, reciprocal of zero, or division by a zero value."""

    code: ClassVar[str] = "DIVIDE_BY_ZERO"
