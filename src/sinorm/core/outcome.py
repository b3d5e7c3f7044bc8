"""
sinorm.core.outcome
===================

Value types produced by the grammar rules.

Every rule returns a `ParseOutcome`: what it consumed, what is left, whether
it matched, and (on success) a result. Failures are ordinary values; only the
top-level entry point turns one into an exception.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, TypeVar

from sinorm.core.exponents import EMPTY, Exponents

T = TypeVar("T")

Conversion = Callable[[float], float]


def identity(magnitude: float) -> float:
    return magnitude


def compose(outer: Conversion, inner: Conversion) -> Conversion:
    """Return ``x -> outer(inner(x))``, skipping identities."""
    if inner is identity:
        return outer
    if outer is identity:
        return inner
    return lambda magnitude: outer(inner(magnitude))


@dataclass(frozen=True, slots=True)
class ParseOutcome(Generic[T]):
    """Result of one grammar rule applied to a string cursor."""

    consumed: str
    rest: str
    success: bool
    result: Optional[T] = None

    @classmethod
    def ok(cls, consumed: str, rest: str, result: T) -> "ParseOutcome[T]":
        return cls(consumed, rest, True, result)

    @classmethod
    def fail(cls, consumed: str, rest: str) -> "ParseOutcome[T]":
        return cls(consumed, rest, False, None)

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True, slots=True)
class UnitTerm:
    """Exponent vector of a unit (product) plus the conversion its magnitude needs."""

    exponents: Exponents = EMPTY
    conversion: Conversion = field(default=identity, compare=False)


@dataclass(frozen=True, slots=True)
class Magnitude:
    significand: float
    exponent: int = 0


__all__ = [
    "Conversion",
    "Magnitude",
    "ParseOutcome",
    "UnitTerm",
    "compose",
    "identity",
]
