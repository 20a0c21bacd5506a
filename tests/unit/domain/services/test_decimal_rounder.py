import math

import pytest

from deepround.domain.services.decimal_rounder import decimal_round


def test_rounds_pi_up_and_down():
    pi = 3.14159265359

    assert decimal_round(pi, 4) == 3.1416
    assert decimal_round(pi, 2) == 3.14
    assert decimal_round(pi, 2) < pi
    assert f"{decimal_round(pi, 2)}" == "3.14"


def test_tie_break_is_half_away_from_zero():
    assert decimal_round(2.5, 0) == 3
    assert decimal_round(-2.5, 0) == -3
    assert decimal_round(0.5, 0) == 1
    assert decimal_round(-0.5, 0) == -1


def test_negative_precision_rounds_to_multiple_of_ten():
    assert decimal_round(987.654, -1) == 990
    assert decimal_round(987.654, -2) == 1000
    assert decimal_round(-987.654, -1) == -990


def test_zero_precision_returns_whole_number():
    assert decimal_round(5.4321, 0) == 5.0
    assert decimal_round(-5.5, 0) == -6.0


@pytest.mark.parametrize("precision", [0, 1, 2, 3, 5])
@pytest.mark.parametrize(
    "value", [0.0, 1.87654321, -2.87654321, 123.456789, -0.000987, 4.5555555]
)
def test_error_is_bounded_and_rounding_is_idempotent(value, precision):
    # When
    rounded = decimal_round(value, precision)

    # Then
    assert abs(rounded - value) <= 0.5 * 10**-precision + 1e-12
    assert decimal_round(rounded, precision) == rounded


def test_precision_beyond_float_range_keeps_value():
    assert decimal_round(1.23456789, 400) == 1.23456789
    assert decimal_round(1e10, 300) == 1e10


def test_precision_below_float_range_rounds_to_zero():
    assert decimal_round(987.654, -400) == 0.0


def test_non_finite_input_is_returned_unchanged():
    assert decimal_round(math.inf, 2) == math.inf
    assert decimal_round(-math.inf, 2) == -math.inf
    assert math.isnan(decimal_round(math.nan, 2))
