"""Test Kelvin-hub temperature conversion and physical clamping."""

import math

import numpy as np
import pytest

from unitwise import Temperature
from unitwise.constants import (
    CELSIUS_OFFSET,
    CODATA_PLANCK_TEMPERATURE,
    LEGACY_CELSIUS_OFFSET,
    PLANCK_TEMPERATURE,
)
from unitwise.engine import TemperatureCategory
from unitwise.errors import UnsupportedUnitError
from unitwise.tables.temperature import ALIASES, SYMBOLS, TemperatureUnit

C = TemperatureUnit.CELSIUS
F = TemperatureUnit.FAHRENHEIT
K = TemperatureUnit.KELVIN


class TestConvert:
    def test_boiling_point(self):
        assert math.isclose(float(Temperature.convert(100, C, F)), 212.0, rel_tol=1e-15)
        assert math.isclose(float(Temperature.convert(100, C, K)), 373.15, rel_tol=1e-15)

    def test_fahrenheit_freezing_point(self):
        assert math.isclose(float(Temperature.convert(32, F, C)), 0.0, abs_tol=1e-12)

    def test_minus_forty_is_shared(self):
        assert math.isclose(float(Temperature.convert(-40, C, F)), -40.0, rel_tol=1e-14)

    def test_zero_kelvin_in_celsius(self):
        assert Temperature.convert(0, K, C) == -CELSIUS_OFFSET

    def test_below_absolute_zero_is_floored(self):
        assert Temperature.convert(-500, C, K) == 0
        assert Temperature.convert(-1, K, K) == 0
        assert math.isclose(float(Temperature.convert(-1000, F, C)), -273.15, rel_tol=1e-15)

    def test_identity_above_absolute_zero(self):
        for unit in Temperature.units:
            assert math.isclose(float(Temperature.convert(25.5, unit, unit)), 25.5, rel_tol=1e-15)

    def test_round_trip(self):
        for a in Temperature.units:
            for b in Temperature.units:
                back = Temperature.convert(Temperature.convert(300, a, b), b, a)
                assert math.isclose(float(back), 300.0, rel_tol=1e-13), (a, b)

    def test_kelvin_never_negative(self):
        inputs = np.linspace(-1000.0, 1000.0, 201)
        for unit in Temperature.units:
            kelvin = Temperature.convert(inputs, unit, K)
            assert np.all(kelvin >= 0)

    def test_decimal_string_input(self):
        assert math.isclose(float(Temperature.convert("37.5", C, K)), 310.65, rel_tol=1e-15)

    def test_foreign_unit_raises(self):
        with pytest.raises(UnsupportedUnitError):
            Temperature.convert(1.0, C, "K")


class TestLegs:
    def test_to_kelvin_applies_no_floor(self):
        assert math.isclose(float(Temperature.to_kelvin(-500, C)), -226.85, rel_tol=1e-14)

    def test_from_kelvin_inverts_to_kelvin(self):
        for unit in Temperature.units:
            back = Temperature.from_kelvin(Temperature.to_kelvin(12.25, unit), unit)
            assert math.isclose(float(back), 12.25, rel_tol=1e-14)


class TestOffsets:
    def test_default_offset(self):
        assert Temperature.celsius_offset == CELSIUS_OFFSET

    def test_legacy_offset(self):
        legacy = TemperatureCategory.from_tables(
            "temperature", ALIASES, SYMBOLS, celsius_offset=LEGACY_CELSIUS_OFFSET
        )
        assert math.isclose(float(legacy.convert(0, C, K)), 272.15, rel_tol=1e-15)
        assert legacy.convert(0, K, C) == -LEGACY_CELSIUS_OFFSET

    def test_non_positive_planck_rejected(self):
        with pytest.raises(ValueError, match="above absolute zero"):
            TemperatureCategory.from_tables("temperature", ALIASES, SYMBOLS, planck_temperature=0)


class TestClamp:
    def test_above_planck_is_capped(self):
        assert Temperature.clamp_temperature(1e40, K) == PLANCK_TEMPERATURE

    def test_default_bound(self):
        assert Temperature.planck_temperature == PLANCK_TEMPERATURE
        assert PLANCK_TEMPERATURE == np.longdouble("1.42e35")

    def test_value_below_bound_passes_through(self):
        assert Temperature.clamp_temperature(1e33, K) == np.longdouble(1e33)
        assert Temperature.clamp_temperature(1.4e35, K) == np.longdouble(1.4e35)

    def test_codata_bound_is_opt_in(self):
        strict = TemperatureCategory.from_tables(
            "temperature", ALIASES, SYMBOLS, planck_temperature=CODATA_PLANCK_TEMPERATURE
        )
        assert strict.clamp_temperature(1e33, K) == CODATA_PLANCK_TEMPERATURE

    def test_in_range_value_is_unchanged(self):
        assert math.isclose(float(Temperature.clamp_temperature(20, C)), 20.0, rel_tol=1e-15)

    def test_below_absolute_zero_is_floored(self):
        result = Temperature.clamp_temperature(-500, C)
        assert math.isclose(float(result), -273.15, rel_tol=1e-15)

    def test_array_input(self):
        result = Temperature.clamp_temperature([-10.0, 300.0, 1e40], K)
        assert np.array_equal(result, np.array([0, 300, PLANCK_TEMPERATURE], dtype=result.dtype))

    @pytest.mark.parametrize("value", [-1000.0, 0.0, 36.6, 1e35, 1e40])
    def test_idempotent(self, value):
        for unit in Temperature.units:
            once = Temperature.clamp_temperature(value, unit)
            twice = Temperature.clamp_temperature(once, unit)
            assert math.isclose(float(twice), float(once), rel_tol=1e-15)

    def test_custom_planck_bound(self):
        capped = TemperatureCategory.from_tables(
            "temperature", ALIASES, SYMBOLS, planck_temperature=1000
        )
        assert capped.clamp_temperature(5000, K) == 1000
        assert math.isclose(float(capped.clamp_temperature(5000, C)), 726.85, rel_tol=1e-14)
