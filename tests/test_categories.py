"""Test the category registry and the shape of the literal tables."""

import pytest

from unitwise import (
    ALL_CATEGORIES,
    Area,
    Distance,
    Mass,
    Pressure,
    Rotation,
    Speed,
    Temperature,
    Time,
    UnitCategory,
    Volume,
    get_category,
)
from unitwise.engine import Category, FactorTable, LinearCategory, TemperatureCategory
from unitwise.scalar import Scalar

EXPECTED_UNIT_COUNTS = {
    Speed: 7,
    Distance: 12,
    Rotation: 4,
    Time: 7,
    Temperature: 3,
    Pressure: 25,
    Mass: 11,
    Area: 8,
    Volume: 13,
}


def test_declaration_order():
    assert ALL_CATEGORIES == (Speed, Distance, Rotation, Time, Temperature, Pressure, Mass, Area, Volume)
    assert [c.name for c in ALL_CATEGORIES] == [c.value for c in UnitCategory]


@pytest.mark.parametrize("category", ALL_CATEGORIES, ids=lambda c: c.name)
def test_unit_counts(category):
    assert len(category.units) == EXPECTED_UNIT_COUNTS[category]


def test_only_temperature_is_affine():
    for category in ALL_CATEGORIES:
        assert isinstance(category, LinearCategory) != (category is Temperature)
    assert isinstance(Temperature, TemperatureCategory)


class TestGetCategory:
    def test_by_enum(self):
        assert get_category(UnitCategory.MASS) is Mass

    def test_by_name_is_case_insensitive(self):
        assert get_category("Pressure") is Pressure
        assert get_category(" volume ") is Volume

    def test_unknown_raises(self):
        with pytest.raises(KeyError, match="Unknown unit category"):
            get_category("luminosity")


def test_base_units():
    assert Speed.base_unit is Speed.Unit.METRE_SECOND
    assert Distance.base_unit is Distance.Unit.METRE
    assert Rotation.base_unit is Rotation.Unit.DEGREE
    assert Time.base_unit is Time.Unit.SECOND
    assert Pressure.base_unit is Pressure.Unit.ATMOSPHERE
    assert Mass.base_unit is Mass.Unit.KILOGRAM
    assert Area.base_unit is Area.Unit.SQUARE_METRE
    assert Volume.base_unit is Volume.Unit.CUBIC_METRE


def test_factors_are_extended_precision():
    for category in ALL_CATEGORIES:
        if isinstance(category, LinearCategory):
            for unit in category.units:
                assert isinstance(category.factor(unit), Scalar)


def test_factor_literals_are_kept():
    assert Distance.factor_table.literals[Distance.Unit.FOOT] == "0.30479999"
    assert Speed.factor_table.literals[Speed.Unit.KILOMETRE_HOUR] == "0.2777778"


def test_category_base_is_abstract():
    with pytest.raises(TypeError, match="abstract"):
        Category("distance", Distance.Unit, Distance.symbol_table)


def test_repr():
    assert repr(Distance) == "<DistanceCategory distance: 12 units>"


class TestFactorTableValidation:
    def test_missing_factor_raises(self):
        factors = {u: "1.0" for u in Rotation.units if u is not Rotation.Unit.TURN}
        with pytest.raises(ValueError, match="TURN"):
            FactorTable.from_literals("rotation", Rotation.Unit, Rotation.Unit.DEGREE, factors)

    def test_non_positive_factor_raises(self):
        factors = {u: "1.0" for u in Rotation.units}
        factors[Rotation.Unit.TURN] = "0"
        with pytest.raises(ValueError):
            FactorTable.from_literals("rotation", Rotation.Unit, Rotation.Unit.DEGREE, factors)

    def test_base_factor_must_be_one(self):
        factors = {u: "1.0" for u in Rotation.units}
        factors[Rotation.Unit.DEGREE] = "2.0"
        with pytest.raises(ValueError):
            FactorTable.from_literals("rotation", Rotation.Unit, Rotation.Unit.DEGREE, factors)
