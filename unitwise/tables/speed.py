"""Speed units, aliases and factors (base unit: metres per second)."""

from __future__ import annotations

from enum import Enum


class SpeedUnit(Enum):
    KILOMETRE_HOUR = "kilometre per hour"
    FEET_SECOND = "feet per second"
    MILE_HOUR = "mile per hour"
    KNOT = "knot"
    METRE_SECOND = "metre per second"
    MACH = "mach"
    LIGHTSPEED = "speed of light"


BASE_UNIT = SpeedUnit.METRE_SECOND

ALIASES = (
    ("k/h", SpeedUnit.KILOMETRE_HOUR),
    ("km/h", SpeedUnit.KILOMETRE_HOUR),
    ("kph", SpeedUnit.KILOMETRE_HOUR),
    ("f/s", SpeedUnit.FEET_SECOND),
    ("fps", SpeedUnit.FEET_SECOND),
    ("mi/h", SpeedUnit.MILE_HOUR),
    ("mph", SpeedUnit.MILE_HOUR),
    ("kn", SpeedUnit.KNOT),
    ("kt", SpeedUnit.KNOT),
    ("knot", SpeedUnit.KNOT),
    ("knots", SpeedUnit.KNOT),
    ("nmi/h", SpeedUnit.KNOT),
    ("nmiph", SpeedUnit.KNOT),
    ("m/s", SpeedUnit.METRE_SECOND),
    ("mps", SpeedUnit.METRE_SECOND),
    ("mach", SpeedUnit.MACH),
    ("c", SpeedUnit.LIGHTSPEED),
)

SYMBOLS = {
    SpeedUnit.KILOMETRE_HOUR: "km/h",
    SpeedUnit.FEET_SECOND: "f/s",
    SpeedUnit.MILE_HOUR: "mph",
    SpeedUnit.KNOT: "kn",
    SpeedUnit.METRE_SECOND: "m/s",
    SpeedUnit.MACH: "mach",
    SpeedUnit.LIGHTSPEED: "c",
}

# Mach is taken at sea level, 15 °C.
FACTORS = {
    SpeedUnit.KILOMETRE_HOUR: "0.2777778",
    SpeedUnit.FEET_SECOND: "0.3048",
    SpeedUnit.MILE_HOUR: "0.44704",
    SpeedUnit.KNOT: "0.514444",
    SpeedUnit.METRE_SECOND: "1.0",
    SpeedUnit.MACH: "340.29",
    SpeedUnit.LIGHTSPEED: "299792458.0",
}
