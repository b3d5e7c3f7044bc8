"""
sinorm.units.registry
=====================

The static unit table the grammar resolves ``<prefix><unit>`` tokens against.

- Base units (m, g, s, A, K, mol, cd) carry exponent 1 on themselves.
- Derived units carry a fixed exponent vector (power of ten included) and an
  optional affine conversion (only °C has one).
- Per-units (%, ppm, ppb, ppt, ppq) are kept as their own dimensionless keys.
- Per-units and °C never take a prefix.

A `UnitTable` is immutable once built: every legal spelling is expanded up
front, ordered so that the first candidate matching the input is the
longest one (ties keep table order). There is no per-call reconstruction and
nothing to lock.
"""
from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from sinorm.core.exponents import BASE_KEYS, PER_UNIT_KEYS, Exponents
from sinorm.core.outcome import Conversion, UnitTerm, identity
from sinorm.units.prefixes import PREFIXES, Prefix

logger = logging.getLogger(__name__)


def celsius_to_kelvin(magnitude: float) -> float:
    return magnitude + 273.15


@dataclass(frozen=True, slots=True)
class UnitDefinition:
    """One unit symbol and what it contributes to the exponent vector."""

    symbol: str
    exponents: Exponents
    conversion: Conversion = field(default=identity, compare=False)
    prefixable: bool = True

    @classmethod
    def base(cls, symbol: str) -> "UnitDefinition":
        return cls(symbol, Exponents.of({symbol: 1}))

    @classmethod
    def per_unit(cls, symbol: str) -> "UnitDefinition":
        return cls(symbol, Exponents.of({symbol: 1}), prefixable=False)

    @classmethod
    def derived(
        cls,
        symbol: str,
        exponents: Mapping[str, int],
        conversion: Conversion = identity,
        prefixable: bool = True,
    ) -> "UnitDefinition":
        return cls(symbol, Exponents.of(exponents), conversion, prefixable)


@dataclass(frozen=True, slots=True)
class Candidate:
    """A concrete spelling: ``prefix.symbol + spelling`` resolving to ``unit``."""

    text: str
    prefix: Optional[Prefix]
    unit: UnitDefinition

    def to_term(self) -> UnitTerm:
        power = self.prefix.power if self.prefix is not None else 0
        return UnitTerm(Exponents.of({"10": power}) * self.unit.exponents, self.unit.conversion)


def normalize_symbol(s: str) -> str:
    """Unicode-normalize user input to NFC (e.g. OHM SIGN U+2126 -> Ω U+03A9)."""
    if not s:
        return s
    return unicodedata.normalize("NFC", s)


class UnitTable:
    """Immutable lookup table of prefixes and units for the base matcher."""

    def __init__(
        self,
        prefixes: Iterable[Prefix],
        units: Iterable[UnitDefinition],
        aliases: Mapping[str, str] | None = None,
    ) -> None:
        self._prefixes: Tuple[Prefix, ...] = tuple(prefixes)

        units_by_symbol: Dict[str, UnitDefinition] = {}
        for unit in units:
            if unit.symbol in units_by_symbol:
                raise ValueError(f"Duplicate unit symbol: {unit.symbol!r}")
            units_by_symbol[unit.symbol] = unit

        # (spelling, unit) in table order; aliases come after the canonical symbols
        spellings: list[Tuple[str, UnitDefinition]] = [(u.symbol, u) for u in units_by_symbol.values()]
        for alias, canonical in (aliases or {}).items():
            if canonical not in units_by_symbol:
                raise ValueError(f"Alias {alias!r} points to unknown unit {canonical!r}")
            if alias in units_by_symbol:
                raise ValueError(f"Alias {alias!r} shadows an existing unit")
            spellings.append((alias, units_by_symbol[canonical]))

        candidates: list[Candidate] = []
        for prefix in self._prefixes:
            for spelling, unit in spellings:
                if unit.prefixable:
                    candidates.append(Candidate(prefix.symbol + spelling, prefix, unit))
        for spelling, unit in spellings:
            candidates.append(Candidate(spelling, None, unit))

        # Stable sort: longest first, equal lengths keep table order.
        self._candidates: Tuple[Candidate, ...] = tuple(
            sorted(candidates, key=lambda c: len(c.text), reverse=True)
        )
        self._exact: Mapping[str, Candidate] = MappingProxyType(
            {c.text: c for c in reversed(self._candidates)}
        )
        self._units: Mapping[str, UnitDefinition] = MappingProxyType(units_by_symbol)
        self._aliases: Mapping[str, str] = MappingProxyType(dict(aliases or {}))

    # -------------------------- public API ---------------------------------
    def match(self, text: str) -> Optional[Candidate]:
        """Longest ``prefix + unit`` spelling that starts ``text``, or None."""
        for candidate in self._candidates:
            if text.startswith(candidate.text):
                return candidate
        return None

    def get(self, symbol: str) -> UnitTerm:
        """Resolve a complete (possibly prefixed) unit symbol.

        Raises `ValueError` if unknown.
        """
        candidate = self._exact.get(normalize_symbol(symbol))
        if candidate is None:
            raise ValueError(f"Unknown unit symbol: {symbol}")
        return candidate.to_term()

    def has(self, symbol: str) -> bool:
        try:
            self.get(symbol)
            return True
        except ValueError:
            return False

    def __contains__(self, symbol: str) -> bool:
        return self.has(symbol)

    def all(self) -> Mapping[str, UnitDefinition]:
        return self._units

    @property
    def prefixes(self) -> Tuple[Prefix, ...]:
        return self._prefixes

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    def __len__(self) -> int:
        return len(self._candidates)

    def __repr__(self) -> str:
        return f"UnitTable({len(self._units)} units, {len(self._prefixes)} prefixes)"


# ---------------------------------------------------------------------------
# Bootstrap the default table with SI units
# ---------------------------------------------------------------------------

def _bootstrap_default_table() -> UnitTable:
    base_units = tuple(UnitDefinition.base(sym) for sym in BASE_KEYS)
    per_units = tuple(UnitDefinition.per_unit(sym) for sym in PER_UNIT_KEYS)

    # Derived (symbol, exponents incl. power of ten)
    derived_units = (
        ("L",   {"10": -3, "m": 3}),                                  # litre
        ("rad", {}),
        ("sr",  {}),
        ("Hz",  {"s": -1}),
        ("N",   {"10": 3, "g": 1, "m": 1, "s": -2}),
        ("Pa",  {"10": 3, "g": 1, "m": -1, "s": -2}),
        ("bar", {"10": 8, "g": 1, "m": -1, "s": -2}),
        ("J",   {"10": 3, "g": 1, "m": 2, "s": -2}),
        ("W",   {"10": 3, "g": 1, "m": 2, "s": -3}),
        ("C",   {"s": 1, "A": 1}),
        ("V",   {"10": 3, "g": 1, "m": 2, "s": -3, "A": -1}),
        ("F",   {"10": -3, "g": -1, "m": -2, "s": 4, "A": 2}),
        ("Ω",   {"10": 3, "g": 1, "m": 2, "s": -3, "A": -2}),
        ("S",   {"10": -3, "g": -1, "m": -2, "s": 3, "A": 2}),
        ("Wb",  {"10": 3, "g": 1, "m": 2, "s": -2, "A": -1}),
        ("T",   {"10": 3, "g": 1, "s": -2, "A": -1}),                 # tesla
        ("H",   {"10": 3, "g": 1, "m": 2, "s": -2, "A": -2}),
        ("lm",  {"cd": 1}),
        ("lx",  {"m": -2, "cd": 1}),
        ("Bq",  {"s": -1}),
        ("Gy",  {"m": 2, "s": -2}),
        ("Sv",  {"m": 2, "s": -2}),
        ("kat", {"mol": 1, "s": -1}),
    )

    units = list(base_units) + list(per_units)
    units.extend(UnitDefinition.derived(sym, exps) for sym, exps in derived_units)

    # Temperature: absolute Celsius converts by offset and never takes a prefix
    units.append(UnitDefinition.derived("°C", {"K": 1}, celsius_to_kelvin, prefixable=False))

    aliases = {
        "ohm": "Ω",
        "degC": "°C",
    }

    table = UnitTable(PREFIXES, units, aliases)
    logger.debug("Bootstrapped %r", table)
    return table


# Public, shared default table
DEFAULT_TABLE: UnitTable = _bootstrap_default_table()


__all__ = [
    "Candidate",
    "DEFAULT_TABLE",
    "UnitDefinition",
    "UnitTable",
    "celsius_to_kelvin",
    "normalize_symbol",
]
