"""Outcome of the non-raising factories ``MathContext.create`` and ``ExactFraction.create``.

A factory hands back Ok(value) for valid arguments and Err(reason) for
arguments the constructor would reject.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union, final

T = TypeVar("T")


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@final
@dataclass(frozen=True, slots=True)
class Err:
    """Why the factory refused its arguments."""

    reason: str


Created: TypeAlias = Union[Ok[T], Err]


def unwrap(created: Created[T]) -> T:
    """The constructed value; raises ValueError carrying the reason otherwise."""
    if isinstance(created, Ok):
        return created.value
    raise ValueError(created.reason)
