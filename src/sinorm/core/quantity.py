"""
sinorm.core.quantity
====================

Defines `NormalizedQuantity`, the output of the normalizer: a raw numeric
magnitude together with an exponent vector over the fundamental SI units.

The power of ten accumulated from prefixes, derived units and scientific
notation is kept in the vector's ``10`` entry and is *not* multiplied into the
magnitude. Display code can therefore round or re-format the significand
without re-parsing the expression.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

from sinorm.core.exponents import EMPTY, Exponents
from sinorm.core.utils import (
    format_canonical,
    format_magnitude,
    format_pretty,
    format_units,
)


@dataclass(frozen=True, slots=True)
class NormalizedQuantity:
    """
    A quantity reduced to ``magnitude * 10**exponent * units``.

    Attributes
    ----------
    magnitude : float | None
        The significand after any affine unit conversion. ``nan`` when the
        expression had no number (e.g. ``'kPa'``), ``None`` for empty input.
    exponents : Exponents
        Full exponent vector, power of ten included.
    """

    magnitude: Optional[float]
    exponents: Exponents = EMPTY

    @classmethod
    def empty(cls) -> "NormalizedQuantity":
        return cls(None, EMPTY)

    @property
    def is_empty(self) -> bool:
        return self.magnitude is None

    @property
    def exponent(self) -> int:
        """Accumulated power of ten."""
        return self.exponents.power_of_ten

    @property
    def units(self) -> Dict[str, int]:
        """Non-zero unit exponents in canonical order (``10`` excluded)."""
        return dict(self.exponents.unit_items())

    @property
    def value(self) -> float:
        """Magnitude with the power of ten applied."""
        if self.magnitude is None:
            return math.nan
        return self.magnitude * 10.0 ** self.exponent

    @property
    def magnitude_text(self) -> str:
        return format_magnitude(self.magnitude, self.exponent)

    @property
    def units_text(self) -> str:
        return format_units(self.exponents.unit_items())

    def same_units(self, other: "NormalizedQuantity") -> bool:
        return self.units == other.units

    def isclose(self, other: "NormalizedQuantity", rel_tol: float = 1e-12) -> bool:
        """Same units and numerically equal value, whatever the significand/exponent split."""
        return self.same_units(other) and math.isclose(self.value, other.value, rel_tol=rel_tol, abs_tol=0.0)

    def __str__(self) -> str:
        return format_canonical(self.magnitude, self.exponents)

    def __format__(self, spec: str) -> str:
        """
        Supported specifiers
        --------------------
        "" (empty), or "canonical"
            The canonical ASCII form returned by `normalize`.
        "pretty"
            Unicode superscripts and middle dots, e.g. '50×10⁶ g/(m·s²)'.

        Raises
        ------
        ValueError
            If the format specifier is not one of "", "canonical", or "pretty".
        """
        spec = (spec or "").strip().lower()
        if spec in ("", "canonical"):
            return str(self)
        if spec == "pretty":
            return format_pretty(self.magnitude, self.exponents)
        raise ValueError("Unknown format spec; use '', 'canonical', or 'pretty'")


__all__ = ["NormalizedQuantity"]
