import logging
import math

import pytest

from sinorm import NormalizedQuantity, UnitParseError, normalize, parse_quantity
from sinorm.core.exponents import Exponents
from sinorm.units.prefixes import Prefix
from sinorm.units.registry import UnitDefinition, UnitTable


# --------------------------
# Canonical output
# --------------------------

@pytest.mark.parametrize("text, expected", [
    ("50 kPa", "50*10^6 g*m^-1*s^-2"),
    ("50*10^3 kg/(m*s^2)", "50*10^6 g*m^-1*s^-2"),
    ("5.0*10^4 kg*m^-1*s^-2", "5*10^7 g*m^-1*s^-2"),
    ("5*10^4 kg*m^-1*s^-2", "5*10^7 g*m^-1*s^-2"),
    ("4 m^2", "4 m^2"),
    ("4 m^-2", "4 m^-2"),
    ("20 °C", "293.15 K"),
    ("20 degC", "293.15 K"),
    ("5%", "5%"),
    ("12.5 %", "12.5%"),
    ("5 ppm", "5 ppm"),
    ("5 kat", "5 s^-1*mol"),
    ("5 S", "5*10^-3 g^-1*m^-2*s^3*A^2"),
    ("3 kohm", "3*10^6 g*m^2*s^-3*A^-2"),
    ("1 rad", "1"),
    ("5", "5"),
    ("5E3", "5*10^3"),
    ("1.5e-7 m", "1.5*10^-7 m"),
    ("-5 m", "-5 m"),
    ("5. m", "5 m"),
    ("2 L", "2*10^-3 m^3"),
    ("10 m/s", "10 m*s^-1"),
    ("10 / s", "10 s^-1"),
    ("9.81 m*s^-2", "9.81 m*s^-2"),
    ("1 mmol/L", "1 m^-3*mol"),
    ("3 dam", "3*10^1 m"),
])
def test_normalize(text, expected):
    assert normalize(text) == expected


def test_micro_sign_and_greek_mu_agree():
    assert normalize("5 \u00b5m") == normalize("5 \u03bcm") == "5*10^-6 m"


def test_ohm_sign_reads_as_omega():
    assert normalize("2 \u2126") == normalize("2 \u03a9") == "2*10^3 g*m^2*s^-3*A^-2"


@pytest.mark.parametrize("text, expected", [
    ("kPa", "NaN*10^6 g*m^-1*s^-2"),
    ("m", "NaN m"),
    ("%", "NaN%"),
])
def test_expression_without_number(text, expected):
    assert normalize(text) == expected


def test_units_without_number_keep_structure():
    q = parse_quantity("kPa")
    assert math.isnan(q.magnitude)
    assert q.exponents == Exponents.of({"10": 6, "g": 1, "m": -1, "s": -2})


@pytest.mark.parametrize("text", ["", "   "])
def test_empty_input(text):
    assert normalize(text) == ""
    q = parse_quantity(text)
    assert q.is_empty
    assert q == NormalizedQuantity.empty()


def test_spaces_are_ignored_everywhere():
    assert normalize(" 5 0  k Pa ") == "50*10^6 g*m^-1*s^-2"
    assert normalize("50*10^3 kg / ( m * s ^ 2 )") == "50*10^6 g*m^-1*s^-2"


@pytest.mark.regression(reason="Only space characters are stripped; other whitespace is not part of the grammar")
@pytest.mark.parametrize("text, consumed", [
    ("5\tm", "5"),
    ("5\nkPa", "5"),
    ("\t", ""),
])
def test_other_whitespace_is_rejected(text, consumed):
    with pytest.raises(UnitParseError) as excinfo:
        normalize(text)
    assert excinfo.value.consumed == consumed


# --------------------------
# Structured result
# --------------------------

def test_equivalent_spellings_are_numerically_equal():
    a = parse_quantity("5*10^4 kg*m^-1*s^-2")
    b = parse_quantity("50 kPa")
    assert a.value == pytest.approx(b.value)
    assert a.units == b.units
    assert a.isclose(b)


def test_parse_quantity_exposes_raw_magnitude_and_power():
    q = parse_quantity("12.5 kPa")
    assert q.magnitude == 12.5
    assert q.exponent == 6
    assert q.magnitude_text == "12.5*10^6"
    assert q.units_text == "g*m^-1*s^-2"
    assert format(q, "pretty") == "12.5×10⁶ g/(m·s²)"


@pytest.mark.parametrize("text", [
    "50 kPa",
    "5.0*10^4 kg*m^-1*s^-2",
    "20 °C",
    "5%",
    "5 kat",
    "5 S",
    "4 m^-2",
    "1.5e-7 m",
    "3 %*m^2",
    "7",
    "1 rad",
])
def test_normalize_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once


def test_results_are_cached():
    assert parse_quantity("50 kPa") is parse_quantity(" 50kPa ")


# --------------------------
# Errors
# --------------------------

def test_unknown_prefix_reports_consumed_number():
    with pytest.raises(UnitParseError) as excinfo:
        normalize("50 qPa")
    err = excinfo.value
    assert err.consumed == "50"
    assert err.text == "50 qPa"
    assert str(err) == (
        "Unable to parse after '50' in '50 qPa'. "
        "Are you sure metric units are being used?"
    )


@pytest.mark.parametrize("text, consumed", [
    ("5 Em", "5E"),
    ("5*", "5*"),
    ("5 m^", "5m^"),
    ("5 (m", "5(m"),
    (".", "."),
    ("-", "-"),
    ("ft", ""),
    ("5 ft", "5"),
])
def test_parse_errors(text, consumed):
    with pytest.raises(UnitParseError) as excinfo:
        normalize(text)
    assert excinfo.value.consumed == consumed


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_quantity("50 qPa")


@pytest.mark.parametrize("bad", [5, None, b"5 m", 3.0])
def test_non_string_input_raises_typeerror(bad):
    with pytest.raises(TypeError) as excinfo:
        normalize(bad)
    assert type(bad).__name__ in str(excinfo.value)


# --------------------------
# strict
# --------------------------

def test_trailing_input_is_ignored_by_default():
    assert normalize("5 m)") == "5 m"
    assert normalize("5 (m)s") == "5 m"


@pytest.mark.regression(reason="An operator without a valid right operand is trailing input, not a parse error")
@pytest.mark.parametrize("text, expected", [
    ("5 km/h", "5*10^3 m"),
    ("5 m*", "5 m"),
    ("5 m/s/", "5 m*s^-1"),
])
def test_dangling_operator_is_ignored_by_default(text, expected):
    assert normalize(text) == expected


def test_strict_rejects_trailing_input():
    with pytest.raises(UnitParseError) as excinfo:
        normalize("5 m)", strict=True)
    assert excinfo.value.consumed == "5m"
    assert normalize("5 m", strict=True) == "5 m"


@pytest.mark.parametrize("text, consumed", [
    ("5 km/h", "5km"),
    ("5 m*", "5m"),
])
def test_strict_rejects_dangling_operator(text, consumed):
    with pytest.raises(UnitParseError) as excinfo:
        normalize(text, strict=True)
    assert excinfo.value.consumed == consumed


# --------------------------
# custom tables
# --------------------------

def test_custom_table():
    table = UnitTable([Prefix("k", 3)], [UnitDefinition.base("m")])
    assert normalize("5 km", table=table) == "5*10^3 m"
    with pytest.raises(UnitParseError):
        normalize("5 s", table=table)


# --------------------------
# logging
# --------------------------

def test_grammar_traces_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="sinorm")
    normalize("5 m")
    assert any(r.name == "sinorm.units.parser" and "match_base" in r.getMessage() for r in caplog.records)


def test_failures_are_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="sinorm")
    with pytest.raises(UnitParseError):
        normalize("50 qPa")
    assert any(r.name == "sinorm.units.normalizer" for r in caplog.records)
