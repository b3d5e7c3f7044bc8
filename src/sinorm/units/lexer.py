"""
sinorm.units.lexer
==================

Atomic consumers of the input cursor. Each takes the remaining input and
returns a `ParseOutcome`; none of them raise.

    <integer>    ::= + <integer> | - <integer> | <digits>
    <decimal>    ::= + <decimal> | - <decimal> | <digits> <dot-digits>
                   | <digits> | <dot-digits>
    <dot-digits> ::= . <digits>
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from sinorm.core.outcome import ParseOutcome

N = TypeVar("N", int, float)


def _is_digit(ch: str) -> bool:
    # ASCII only; str.isdigit() also accepts e.g. superscripts
    return "0" <= ch <= "9"


def match_char(text: str, char: str) -> ParseOutcome[str]:
    if text[:1] == char:
        return ParseOutcome.ok(char, text[1:], char)
    return ParseOutcome.fail("", text)


def match_digits(text: str) -> ParseOutcome[int]:
    i = 0
    n = len(text)
    while i < n and _is_digit(text[i]):
        i += 1
    if i == 0:
        return ParseOutcome.fail("", text)
    return ParseOutcome.ok(text[:i], text[i:], int(text[:i]))


def _match_signed(
    text: str,
    rule: Callable[[str], ParseOutcome[N]],
) -> Optional[ParseOutcome[N]]:
    """Shared ``'+' rule | '-' rule`` productions; None when no sign leads."""
    for sign in ("+", "-"):
        sign_outcome = match_char(text, sign)
        if not sign_outcome.success:
            continue
        inner = rule(sign_outcome.rest)
        consumed = sign_outcome.consumed + inner.consumed
        if not inner.success:
            return ParseOutcome.fail(consumed, text)
        value = -inner.result if sign == "-" else inner.result
        return ParseOutcome.ok(consumed, inner.rest, value)
    return None


def match_integer(text: str) -> ParseOutcome[int]:
    signed = _match_signed(text, match_integer)
    if signed is not None:
        return signed
    return match_digits(text)


def match_dot_digits(text: str) -> ParseOutcome[float]:
    point = match_char(text, ".")
    if not point.success:
        return ParseOutcome.fail("", text)
    digits = match_digits(point.rest)
    if not digits.success:
        return ParseOutcome.fail(point.consumed, text)
    consumed = point.consumed + digits.consumed
    return ParseOutcome.ok(consumed, digits.rest, float(consumed))


def match_decimal(text: str) -> ParseOutcome[float]:
    signed = _match_signed(text, match_decimal)
    if signed is not None:
        return signed

    digits = match_digits(text)
    if digits.success:
        fraction = match_dot_digits(digits.rest)
        if fraction.success:
            consumed = digits.consumed + fraction.consumed
            # one float() over the whole token keeps full precision
            return ParseOutcome.ok(consumed, fraction.rest, float(consumed))
        if digits.rest[:1] == ".":
            # "5." reads as 5
            consumed = digits.consumed + "."
            return ParseOutcome.ok(consumed, digits.rest[1:], float(digits.consumed))
        return ParseOutcome.ok(digits.consumed, digits.rest, float(digits.consumed))

    fraction = match_dot_digits(text)
    if fraction.success:
        return fraction
    return ParseOutcome.fail(fraction.consumed, text)


__all__ = [
    "match_char",
    "match_decimal",
    "match_digits",
    "match_dot_digits",
    "match_integer",
]
