"""
sinorm.core.utils
=================

Formatting helpers for normalized quantities.

Two renderings are supported:

- canonical ASCII, the form `normalize` returns and re-parses
  (e.g. ``'50*10^6 g*m^-1*s^-2'``);
- pretty, with middle dots and unicode superscripts
  (e.g. ``'50×10⁶ g/(m·s²)'``).
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from sinorm.core.exponents import Exponents

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")

# Units that render right next to the number.
_ADJACENT_UNITS = frozenset({"", "%"})


def _sup(n: int) -> str:
    return "" if n == 1 else str(n).translate(_SUPERSCRIPTS)


def format_number(value: Optional[float]) -> str:
    """
    Render a magnitude without a trailing '.0' and without scientific notation.

    ``None`` renders as the empty string and NaN as ``'NaN'``, so the output
    always re-parses as a decimal (except for NaN).
    """
    if value is None:
        return ""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer() and abs(value) < 1e16:
        return str(int(value))

    text = repr(float(value))
    if "e" in text or "E" in text:
        # shortest round-tripping digits, laid out positionally
        text = format(Decimal(text), "f")
    return text


def format_magnitude(value: Optional[float], power_of_ten: int) -> str:
    text = format_number(value)
    if text and power_of_ten != 0:
        text += f"*10^{power_of_ten}"
    return text


def format_units(items: Iterable[Tuple[str, int]]) -> str:
    """``[('g', 1), ('m', -1)] -> 'g*m^-1'``."""
    return "*".join(key if exp == 1 else f"{key}^{exp}" for key, exp in items)


def join_quantity(magnitude: str, units: str) -> str:
    if units in _ADJACENT_UNITS:
        return magnitude + units
    return f"{magnitude} {units}"


def format_canonical(value: Optional[float], exponents: Exponents) -> str:
    magnitude = format_magnitude(value, exponents.power_of_ten)
    units = format_units(exponents.unit_items())
    if not magnitude and not units:
        return ""
    return join_quantity(magnitude, units)


# ---------- pretty rendering ----------
def format_units_pretty(exponents: Exponents) -> str:
    """
    Turn an exponent vector into 'g·s⁻²/m' style, keeping canonical key order.
    """
    num: List[str] = []
    den: List[str] = []
    for key, exp in exponents.unit_items():
        if exp > 0:
            num.append(key + _sup(exp))
        else:
            den.append(key + _sup(-exp))

    if not num and not den:
        return ""
    numerator = "·".join(num) if num else "1"
    denominator = "·".join(den)
    if len(den) > 1:
        denominator = f"({denominator})"
    return f"{numerator}/{denominator}" if denominator else numerator


def format_pretty(value: Optional[float], exponents: Exponents) -> str:
    magnitude = format_number(value)
    if magnitude and exponents.power_of_ten != 0:
        magnitude += "×10" + str(exponents.power_of_ten).translate(_SUPERSCRIPTS)
    units = format_units_pretty(exponents)
    if not magnitude and not units:
        return ""
    return join_quantity(magnitude, units)


__all__ = [
    "format_canonical",
    "format_magnitude",
    "format_number",
    "format_pretty",
    "format_units",
    "format_units_pretty",
    "join_quantity",
]
