"""
Recursive-descent grammar for SI quantity expressions.

    <expression>  ::= <magnitude> <term>
                    | <magnitude> * <term>
                    | <magnitude> / <term>
                    | <magnitude>
                    | <term>
    <magnitude>   ::= <decimal> [ ( *10^ | E | e ) <integer> ]
    <term>        ::= ( <term> )
                    | <factor> * <term>
                    | <factor> / <term>
                    | <factor>
    <factor>      ::= <base> [ ^ <integer> ]
    <base>        ::= [ <prefix> ] <unit>

Every rule is a pure function from the remaining input to a `ParseOutcome`.
Rules never raise. On failure ``consumed`` holds everything matched up to the
point of failure, so the entry point can report where parsing broke down.

A parenthesised term never falls back: a failure inside the parentheses fails
the term. After a factor, an operator whose right operand fails is left
unconsumed and the bare factor is the result.
"""

from __future__ import annotations

import logging
import math
from typing import TypeVar

from sinorm.core.exponents import Exponents
from sinorm.core.outcome import Magnitude, ParseOutcome, UnitTerm, compose
from sinorm.core.quantity import NormalizedQuantity
from sinorm.units.lexer import match_char, match_decimal, match_integer
from sinorm.units.registry import DEFAULT_TABLE, UnitTable

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TIMES_TEN_TO_THE = "*10^"
_E_NOTATION = ("E", "e")


def _trace(rule: str, text: str, outcome: ParseOutcome[T]) -> ParseOutcome[T]:
    logger.debug("%s(%r) -> %s", rule, text, outcome)
    return outcome


def match_base(text: str, table: UnitTable = DEFAULT_TABLE) -> ParseOutcome[UnitTerm]:
    """Longest ``<prefix><unit>`` at the start of ``text``."""
    candidate = table.match(text)
    if candidate is None:
        return _trace("match_base", text, ParseOutcome.fail("", text))
    consumed = candidate.text
    outcome = ParseOutcome.ok(consumed, text[len(consumed):], candidate.to_term())
    return _trace("match_base", text, outcome)


def match_factor(text: str, table: UnitTable = DEFAULT_TABLE) -> ParseOutcome[UnitTerm]:
    base = match_base(text, table)
    if not base.success:
        return base

    caret = match_char(base.rest, "^")
    if not caret.success:
        return base

    exponent = match_integer(caret.rest)
    consumed = base.consumed + caret.consumed + exponent.consumed
    if not exponent.success:
        return _trace("match_factor", text, ParseOutcome.fail(consumed, text))

    # The conversion is not raised to the power; only identity conversions
    # survive exponentiation meaningfully.
    term = UnitTerm(base.result.exponents ** exponent.result, base.result.conversion)
    return _trace("match_factor", text, ParseOutcome.ok(consumed, exponent.rest, term))


def match_term(text: str, table: UnitTable = DEFAULT_TABLE) -> ParseOutcome[UnitTerm]:
    # ( <term> )
    open_paren = match_char(text, "(")
    if open_paren.success:
        inner = match_term(open_paren.rest, table)
        if not inner.success:
            return ParseOutcome.fail(open_paren.consumed + inner.consumed, text)

        close_paren = match_char(inner.rest, ")")
        consumed = open_paren.consumed + inner.consumed + close_paren.consumed
        if not close_paren.success:
            return _trace("match_term", text, ParseOutcome.fail(consumed, text))
        return _trace("match_term", text, ParseOutcome.ok(consumed, close_paren.rest, inner.result))

    factor = match_factor(text, table)
    if not factor.success:
        return factor

    # <factor> * <term> | <factor> / <term>
    for operator in ("*", "/"):
        op = match_char(factor.rest, operator)
        if not op.success:
            continue

        right = match_term(op.rest, table)
        if not right.success:
            # fall back to the bare factor; the operator stays in ``rest``
            continue
        consumed = factor.consumed + op.consumed + right.consumed

        left_term, right_term = factor.result, right.result
        if operator == "*":
            exponents = left_term.exponents * right_term.exponents
        else:
            exponents = left_term.exponents / right_term.exponents
        # Composed the same way for '/': only sound while one side is the identity.
        conversion = compose(left_term.conversion, right_term.conversion)
        outcome = ParseOutcome.ok(consumed, right.rest, UnitTerm(exponents, conversion))
        return _trace("match_term", text, outcome)

    # <factor>
    return factor


def match_magnitude(text: str) -> ParseOutcome[Magnitude]:
    significand = match_decimal(text)
    if not significand.success:
        return ParseOutcome.fail(significand.consumed, text)

    rest = significand.rest
    if rest.startswith(_TIMES_TEN_TO_THE):
        operator = _TIMES_TEN_TO_THE
    elif rest[:1] in _E_NOTATION:
        operator = rest[0]
    else:
        outcome = ParseOutcome.ok(significand.consumed, rest, Magnitude(significand.result, 0))
        return _trace("match_magnitude", text, outcome)

    exponent = match_integer(rest[len(operator):])
    consumed = significand.consumed + operator + exponent.consumed
    if not exponent.success:
        return _trace("match_magnitude", text, ParseOutcome.fail(consumed, text))

    outcome = ParseOutcome.ok(consumed, exponent.rest, Magnitude(significand.result, exponent.result))
    return _trace("match_magnitude", text, outcome)


def match_expression(text: str, table: UnitTable = DEFAULT_TABLE) -> ParseOutcome[NormalizedQuantity]:
    """Top-level rule: a magnitude, a unit term, or a magnitude combined with a unit term."""
    magnitude = match_magnitude(text)

    if not magnitude.success:
        if magnitude.consumed or not text:
            return _trace("match_expression", text, ParseOutcome.fail(magnitude.consumed, text))

        # No number at all: the whole input must be a unit term.
        term = match_term(text, table)
        if not term.success:
            return _trace("match_expression", text, ParseOutcome.fail(term.consumed, text))
        quantity = NormalizedQuantity(math.nan, term.result.exponents)
        return _trace("match_expression", text, ParseOutcome.ok(term.consumed, term.rest, quantity))

    value = magnitude.result
    if not magnitude.rest:
        quantity = NormalizedQuantity(value.significand, Exponents.of({"10": value.exponent}))
        return _trace("match_expression", text, ParseOutcome.ok(magnitude.consumed, "", quantity))

    rest = magnitude.rest
    operator = rest[0] if rest[0] in ("*", "/") else ""
    term = match_term(rest[len(operator):], table)
    consumed = magnitude.consumed + operator + term.consumed
    if not term.success:
        return _trace("match_expression", text, ParseOutcome.fail(consumed, text))

    exponents = term.result.exponents
    if operator == "/":
        exponents = -exponents
    exponents = exponents.shift_power_of_ten(value.exponent)

    # For '/' the conversion is still applied as-is (only meaningful for identities).
    quantity = NormalizedQuantity(term.result.conversion(value.significand), exponents)
    return _trace("match_expression", text, ParseOutcome.ok(consumed, term.rest, quantity))


__all__ = [
    "match_base",
    "match_expression",
    "match_factor",
    "match_magnitude",
    "match_term",
]
