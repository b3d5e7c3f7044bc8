# sinorm/units/prefixes.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Prefix:
    symbol: str
    power: int  # power of ten


# Order matters: it is the tie-break order of the longest-match rule.
PREFIXES: Tuple[Prefix, ...] = (
    Prefix("Y", 24),
    Prefix("Z", 21),
    Prefix("E", 18),
    Prefix("P", 15),
    Prefix("T", 12),
    Prefix("G", 9),
    Prefix("M", 6),
    Prefix("k", 3),
    Prefix("h", 2),
    Prefix("da", 1),
    Prefix("d", -1),
    Prefix("c", -2),
    Prefix("m", -3),
    Prefix("μ", -6),  # μ, GREEK SMALL LETTER MU
    Prefix("µ", -6),  # µ, MICRO SIGN
    Prefix("n", -9),
    Prefix("p", -12),
    Prefix("f", -15),
    Prefix("a", -18),
    Prefix("z", -21),
    Prefix("y", -24),
)

PREFIX_POWERS: Mapping[str, int] = MappingProxyType({p.symbol: p.power for p in PREFIXES})

__all__ = ["PREFIXES", "PREFIX_POWERS", "Prefix"]
