"""
sinorm.core.numbers
===================

Small numeric helpers for displaying measured magnitudes: rounding to a
power of ten and counting significant figures. They work on the raw
magnitude and power of ten exposed by `NormalizedQuantity` and never
re-parse unit expressions.
"""

from __future__ import annotations

import math
import re

Number = int | float

_DECIMAL_RE = re.compile(r"^[+-]?(?P<int>\d*)(?P<point>\.?)(?P<frac>\d*)$")


def is_nan(number: Number) -> bool:
    return number != number


def round_to_power(number: Number, power_of_ten: int) -> float:
    """
    Round ``number`` to the nearest multiple of ``10**power_of_ten``.

    Halves round up (towards +inf), e.g. ``round_to_power(5550, 2) == 5600``
    and ``round_to_power(.555, -2) == .56``.
    """
    step = 10.0 ** power_of_ten
    return math.floor(number / step + 0.5) * step


def order_of_magnitude(number: Number) -> int:
    """Number of digits before the decimal point: ``50 -> 2``, ``499 -> 3``."""
    if number == 0 or is_nan(number) or math.isinf(number):
        raise ValueError(f"order of magnitude is undefined for {number!r}")
    return math.floor(math.log10(abs(number))) + 1


def significant_figures(text: str) -> int:
    """
    Count the significant figures of a decimal written as text.

    Leading zeros never count. Trailing zeros count only when a decimal
    point is present (``'100.' -> 3`` but ``'100' -> 1``).
    """
    m = _DECIMAL_RE.match(text.strip())
    if m is None or not (m.group("int") or m.group("frac")):
        raise ValueError(f"Not a decimal number: {text!r}")

    digits = (m.group("int") + m.group("frac")).lstrip("0")
    if not m.group("point"):
        digits = digits.rstrip("0")
    return len(digits)


__all__ = ["is_nan", "order_of_magnitude", "round_to_power", "significant_figures"]
