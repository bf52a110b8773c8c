"""Test factor-ratio conversion for every linear category."""

import itertools
import math

import numpy as np
import pytest

from unitwise import Area, Distance, Mass, Pressure, Rotation, Speed, Time, Volume
from unitwise.errors import UnsupportedUnitError
from unitwise.scalar import Scalar, has_extended_precision

LINEAR = [Speed, Distance, Rotation, Time, Pressure, Mass, Area, Volume]
REPRESENTATIVE_VALUES = [0.0, 1.0, 123.456, 1e12, 1e-9]


@pytest.mark.parametrize("category", LINEAR, ids=lambda c: c.name)
def test_identity_for_every_unit(category):
    """Converting a unit to itself returns the value unchanged."""
    for unit in category.units:
        for v in REPRESENTATIVE_VALUES:
            assert category.convert(v, unit, unit) == Scalar(v)


@pytest.mark.parametrize("category", LINEAR, ids=lambda c: c.name)
def test_round_trip_for_every_pair(category):
    """A -> B -> A recovers the value within 1e-12 relative error."""
    v = 123.456
    for a, b in itertools.permutations(category.units, 2):
        back = category.convert(category.convert(v, a, b), b, a)
        assert math.isclose(float(back), v, rel_tol=1e-12), (a, b)


@pytest.mark.parametrize("category", LINEAR, ids=lambda c: c.name)
def test_base_unit_has_unit_factor(category):
    assert category.factor(category.base_unit) == 1
    for unit in category.units:
        assert category.factor(unit) > 0


def test_composition_matches_direct_conversion():
    via_mile = Distance.convert(
        Distance.convert(42.195, Distance.Unit.KILOMETRE, Distance.Unit.MILE),
        Distance.Unit.MILE,
        Distance.Unit.FOOT,
    )
    direct = Distance.convert(42.195, Distance.Unit.KILOMETRE, Distance.Unit.FOOT)
    assert math.isclose(float(via_mile), float(direct), rel_tol=1e-14)


class TestScenarios:
    """End-to-end conversions with known answers."""

    def test_kilometre_to_metre(self):
        assert Distance.convert(1.0, Distance.Unit.KILOMETRE, Distance.Unit.METRE) == 1000.0

    def test_kilogram_to_gram(self):
        result = Mass.convert(1.0, Mass.Unit.KILOGRAM, Mass.Unit.GRAM)
        assert math.isclose(float(result), 1000.0, rel_tol=1e-15)

    def test_kilometre_hour_to_metre_second(self):
        result = Speed.convert(1.0, Speed.Unit.KILOMETRE_HOUR, Speed.Unit.METRE_SECOND)
        assert math.isclose(float(result), 0.2777778, rel_tol=1e-12)

    def test_degrees_to_turns(self):
        result = Rotation.convert(360.0, Rotation.Unit.DEGREE, Rotation.Unit.TURN)
        assert math.isclose(float(result), 1.0, rel_tol=1e-15)

    def test_radians_to_degrees_uses_exact_pi(self):
        result = Rotation.convert(math.pi, Rotation.Unit.RADIAN, Rotation.Unit.DEGREE)
        assert math.isclose(float(result), 180.0, rel_tol=1e-15)

    def test_hours_to_seconds(self):
        assert Time.convert(2, Time.Unit.HOUR, Time.Unit.SECOND) == 7200

    def test_bar_to_pascal(self):
        result = Pressure.convert(1.0, Pressure.Unit.BAR, Pressure.Unit.PASCAL)
        # Both factors are 9-digit approximations relative to atm.
        assert math.isclose(float(result), 100000.0, rel_tol=1e-4)

    def test_hectare_to_square_metre(self):
        result = Area.convert(1.0, Area.Unit.HECTARE, Area.Unit.SQUARE_METRE)
        assert math.isclose(float(result), 10000.0, rel_tol=1e-15)

    def test_litres_to_gallons(self):
        result = Volume.convert(3.785411784, Volume.Unit.LITRE, Volume.Unit.GALLON)
        assert math.isclose(float(result), 1.0, rel_tol=1e-12)


@pytest.mark.skipif(not has_extended_precision(), reason="platform longdouble is float64")
class TestExtendedPrecision:
    """Ratios between extreme units keep more digits than a double."""

    def test_gigaton_to_nanogram(self):
        result = Mass.convert(1, Mass.Unit.GIGATON, Mass.Unit.NANOGRAM)
        expected = Scalar("1e24")
        assert abs(result - expected) / expected < Scalar("1e-17")

    def test_parsec_to_millimetre(self):
        result = Distance.convert(1, Distance.Unit.PARSEC, Distance.Unit.MILLIMETRE)
        expected = Scalar("30856775810000000000")
        assert abs(result - expected) / expected < Scalar("1e-17")

    def test_decimal_string_input_is_not_rounded_to_double(self):
        result = Distance.convert("0.1", Distance.Unit.METRE, Distance.Unit.METRE)
        assert result == Scalar("0.1")
        assert result != Scalar(0.1)


def test_array_input_converts_elementwise():
    result = Distance.convert([1, 2, 3], Distance.Unit.KILOMETRE, Distance.Unit.METRE)
    assert isinstance(result, np.ndarray)
    assert result.dtype == Scalar
    assert np.array_equal(result, np.array([1000, 2000, 3000], dtype=Scalar))


def test_non_numeric_string_raises():
    with pytest.raises(ValueError, match="Cannot interpret"):
        Distance.convert("ten", Distance.Unit.METRE, Distance.Unit.KILOMETRE)


class TestUnsupportedUnits:
    def test_foreign_category_unit_raises(self):
        with pytest.raises(UnsupportedUnitError, match="not a distance unit"):
            Distance.convert(1.0, Mass.Unit.KILOGRAM, Distance.Unit.METRE)

    def test_raw_string_unit_raises(self):
        with pytest.raises(UnsupportedUnitError):
            Distance.convert(1.0, Distance.Unit.METRE, "km")

    def test_is_a_type_error(self):
        with pytest.raises(TypeError):
            Speed.factor(Time.Unit.SECOND)
