"""
Category objects built once from the literal tables.

Every category is validated and frozen at import; afterwards all lookups and
conversions are read-only and safe to call from any thread.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple, Union

from .engine import Category, DistanceCategory, LinearCategory, TemperatureCategory
from .tables import area, distance, mass, pressure, rotation, speed, temperature, time, volume


class UnitCategory(Enum):
    SPEED = "speed"
    DISTANCE = "distance"
    ROTATION = "rotation"
    TIME = "time"
    TEMPERATURE = "temperature"
    PRESSURE = "pressure"
    MASS = "mass"
    AREA = "area"
    VOLUME = "volume"


def _linear(table, name: str, cls=LinearCategory):
    unit_type = type(table.BASE_UNIT)
    return cls.from_tables(
        name, unit_type, table.ALIASES, table.SYMBOLS, table.FACTORS, table.BASE_UNIT
    )


Speed = _linear(speed, "speed")
Distance = _linear(distance, "distance", cls=DistanceCategory)
Rotation = _linear(rotation, "rotation")
Time = _linear(time, "time")
Temperature = TemperatureCategory.from_tables(
    "temperature", temperature.ALIASES, temperature.SYMBOLS
)
Pressure = _linear(pressure, "pressure")
Mass = _linear(mass, "mass")
Area = _linear(area, "area")
Volume = _linear(volume, "volume")

_REGISTRY = {
    UnitCategory.SPEED: Speed,
    UnitCategory.DISTANCE: Distance,
    UnitCategory.ROTATION: Rotation,
    UnitCategory.TIME: Time,
    UnitCategory.TEMPERATURE: Temperature,
    UnitCategory.PRESSURE: Pressure,
    UnitCategory.MASS: Mass,
    UnitCategory.AREA: Area,
    UnitCategory.VOLUME: Volume,
}

ALL_CATEGORIES: Tuple[Category, ...] = tuple(_REGISTRY[c] for c in UnitCategory)


def get_category(category: Union[UnitCategory, str]) -> Category:
    """Return the category object for a ``UnitCategory`` or its name.

    Raises:
        KeyError: If ``category`` names no known category.
    """
    if isinstance(category, UnitCategory):
        return _REGISTRY[category]
    try:
        return _REGISTRY[UnitCategory(str(category).strip().lower())]
    except ValueError:
        known = ", ".join(c.value for c in UnitCategory)
        raise KeyError(f"Unknown unit category {category!r}; expected one of: {known}") from None


def find_categories(symbol: str) -> Tuple[Category, ...]:
    """Return every category that resolves ``symbol``, in declaration order.

    Symbols such as ``"d"`` (degree, day) or ``"c"`` (speed of light,
    Celsius) are registered in several categories; callers pick among the
    returned categories, typically the first one.
    """
    return tuple(c for c in ALL_CATEGORIES if c.try_guess_unit(symbol) is not None)
