"""
sinorm.units.normalizer
=======================

Public entry points: `normalize` renders the canonical string and
`parse_quantity` returns the structured `NormalizedQuantity`.

Both are pure: the same input always gives the same output, and nothing but
debug logging happens on the side. That makes them safe to wrap in retry or
rate-limiting decorators.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from sinorm.core.errors import UnitParseError
from sinorm.core.outcome import ParseOutcome
from sinorm.core.quantity import NormalizedQuantity
from sinorm.units.parser import match_expression
from sinorm.units.registry import DEFAULT_TABLE, UnitTable, normalize_symbol

logger = logging.getLogger(__name__)


def _prepare(text: str) -> str:
    if not isinstance(text, str):
        raise TypeError(f"'{text!r}' must be of type str but is of type '{type(text).__name__}'.")
    # only spaces are stripped; tabs and newlines stay and fail to parse
    return normalize_symbol(text).replace(" ", "")


# Cache the parse outcome only. Safe because outcomes are immutable and the
# table is part of the key.
@lru_cache(maxsize=4096)
def _parse(prepared: str, table: UnitTable) -> ParseOutcome[NormalizedQuantity]:
    if not prepared:
        return ParseOutcome.ok("", "", NormalizedQuantity.empty())
    return match_expression(prepared, table)


def parse_quantity(
    text: str,
    *,
    strict: bool = False,
    table: UnitTable = DEFAULT_TABLE,
) -> NormalizedQuantity:
    """
    Parse a quantity expression such as ``'50 kPa'`` or ``'5.0*10^4 kg*m^-1*s^-2'``.

    Parameters
    ----------
    text:
        The expression. Space characters are ignored anywhere in it.
    strict:
        When False (default), input left over after the longest valid
        expression is ignored, e.g. ``'5 m)'`` parses as ``'5 m'``. When True,
        leftover input is an error.
    table:
        Unit table to resolve prefixes and units against.

    Returns
    -------
    NormalizedQuantity
        Empty (``magnitude is None``) for blank input.

    Raises
    ------
    TypeError
        If ``text`` is not a string.
    UnitParseError
        If no expression can be parsed (or, with ``strict``, if input is left over).
    """
    prepared = _prepare(text)
    outcome = _parse(prepared, table)

    if not outcome.success:
        logger.debug("parse_quantity: failed after %r in %r", outcome.consumed, text)
        raise UnitParseError(text, outcome.consumed)
    if strict and outcome.rest:
        logger.debug("parse_quantity: trailing %r in %r", outcome.rest, text)
        raise UnitParseError(text, outcome.consumed)
    return outcome.result


def normalize(text: str, *, strict: bool = False, table: UnitTable = DEFAULT_TABLE) -> str:
    """
    Normalize a quantity expression to its canonical string.

    Examples
    --------
    >>> normalize("50 kPa")
    '50*10^6 g*m^-1*s^-2'
    >>> normalize("4 m^-2")
    '4 m^-2'
    >>> normalize("12.5 %")
    '12.5%'
    >>> normalize("")
    ''
    """
    return str(parse_quantity(text, strict=strict, table=table))


__all__ = ["normalize", "parse_quantity"]
