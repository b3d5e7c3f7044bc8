import math

import pytest

from sinorm.core.numbers import (
    is_nan,
    order_of_magnitude,
    round_to_power,
    significant_figures,
)


@pytest.mark.parametrize("number, power, expected", [
    (5550, 2, 5600),
    (5549, 2, 5500),
    (.554, -2, .55),
    (.556, -2, .56),
    (12.3, 0, 12),
    (-12.5, 0, -12),
])
def test_round_to_power(number, power, expected):
    assert round_to_power(number, power) == pytest.approx(expected)


@pytest.mark.parametrize("number, expected", [
    (math.nan, True),
    (float("nan"), True),
    (0, False),
    (1.5, False),
    (math.inf, False),
])
def test_is_nan(number, expected):
    assert is_nan(number) is expected


@pytest.mark.parametrize("number, expected", [
    (50, 2),
    (499, 3),
    (1, 1),
    (9.99, 1),
    (0.5, 0),
    (0.05, -1),
    (-250, 3),
])
def test_order_of_magnitude(number, expected):
    assert order_of_magnitude(number) == expected


@pytest.mark.parametrize("number", [0, math.nan, math.inf])
def test_order_of_magnitude_undefined(number):
    with pytest.raises(ValueError):
        order_of_magnitude(number)


@pytest.mark.parametrize("text, expected", [
    (".90", 2),
    ("0123", 3),
    ("100.", 3),
    ("99.9", 3),
    ("100", 1),
    ("0.0050", 2),
    ("-42", 2),
    ("7", 1),
])
def test_significant_figures(text, expected):
    assert significant_figures(text) == expected


@pytest.mark.parametrize("text", ["", ".", "abc", "1.2.3", "1e5"])
def test_significant_figures_rejects_non_decimals(text):
    with pytest.raises(ValueError):
        significant_figures(text)
