import pytest

from ohmmeter.resistance import (
    COLORS,
    E12_SERIES,
    ERROR,
    ColorCode,
    approximate_resistance,
    color_code,
    measured_resistance,
)


@pytest.mark.parametrize("nominal", E12_SERIES)
@pytest.mark.parametrize("exponent", range(0, 7))
def test_e12_values_are_fixed_points(nominal, exponent):
    value = nominal * 10**exponent
    assert approximate_resistance(value) == pytest.approx(value)


@pytest.mark.parametrize("value", [1.05, 3.7, 47.9, 1234.0, 9999.0, 55555.5, 123456.0])
def test_result_is_an_e12_value_times_a_power_of_ten(value):
    result = approximate_resistance(value)
    decade = 1
    while result / decade >= 10:
        decade *= 10
    assert any(result == pytest.approx(n * decade) for n in E12_SERIES)


@pytest.mark.parametrize("value", [1.05, 47.9, 1234.0, 9999.0, 55555.5])
def test_result_is_nearest_in_decade(value):
    result = approximate_resistance(value)
    decade = 1
    while result / decade >= 10:
        decade *= 10
    candidates = [n * decade for n in E12_SERIES]
    assert abs(value - result) == pytest.approx(min(abs(value - c) for c in candidates))


def test_known_resistor_value():
    assert approximate_resistance(10000) == 10000


def test_below_one_ohm_collapses_to_zero():
    assert approximate_resistance(0.5) == 0


@pytest.mark.parametrize("bad", [0, -10.0, float("inf"), float("nan")])
def test_non_positive_or_non_finite_rejected(bad):
    with pytest.raises(ValueError):
        approximate_resistance(bad)


def test_color_code_for_4700():
    assert color_code(4700) == ColorCode("Amarelo", "Violeta", "Vermelho")


@pytest.mark.parametrize("first", range(1, 10))
@pytest.mark.parametrize("second", range(0, 10))
@pytest.mark.parametrize("exponent", range(0, 7))
def test_color_code_round_trip(first, second, exponent):
    value = (10 * first + second) * 10**exponent
    code = color_code(value)
    digits = COLORS.index(code.band1) * 10 + COLORS.index(code.band2)
    assert digits * 10 ** COLORS.index(code.multiplier) == value
    assert code.is_valid


def test_values_below_one_treated_as_one():
    assert color_code(0.2) == color_code(1)


def test_rounding_overflow_gives_error():
    code = color_code(99.6)
    assert (code.band1, code.band2, code.multiplier) == (ERROR, ERROR, ERROR)
    assert not code.is_valid


def test_value_beyond_largest_multiplier_gives_error():
    assert not color_code(1e12).is_valid


def test_measured_resistance_balanced_divider():
    assert measured_resistance(2047.5, 10000, 4095) == pytest.approx(10000)


def test_measured_resistance_uses_known_leg():
    assert measured_resistance(2047.5, 220, 4095) == pytest.approx(220)


def test_measured_resistance_full_scale_rejected():
    with pytest.raises(ValueError):
        measured_resistance(4095, 10000, 4095)