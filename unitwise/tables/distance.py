"""Distance units, aliases and factors (base unit: metres)."""

from __future__ import annotations

from enum import Enum


class DistanceUnit(Enum):
    MILLIMETRE = "millimetre"
    CENTIMETRE = "centimetre"
    INCH = "inch"
    FOOT = "foot"
    YARD = "yard"
    METRE = "metre"
    KILOMETRE = "kilometre"
    MILE = "mile"
    NAUTICAL_MILE = "nautical mile"
    ASTRONOMICAL_UNIT = "astronomical unit"
    LIGHTYEAR = "lightyear"
    PARSEC = "parsec"


BASE_UNIT = DistanceUnit.METRE

ALIASES = (
    ("mm", DistanceUnit.MILLIMETRE),
    ("cm", DistanceUnit.CENTIMETRE),
    ('"', DistanceUnit.INCH),
    ("in", DistanceUnit.INCH),
    ("f", DistanceUnit.FOOT),
    ("'", DistanceUnit.FOOT),
    ("ft", DistanceUnit.FOOT),
    ("yards", DistanceUnit.YARD),
    ("yard", DistanceUnit.YARD),
    ("yd", DistanceUnit.YARD),
    ("m", DistanceUnit.METRE),
    ("km", DistanceUnit.KILOMETRE),
    ("mi", DistanceUnit.MILE),
    ("nmi", DistanceUnit.NAUTICAL_MILE),
    ("au", DistanceUnit.ASTRONOMICAL_UNIT),
    ("ly", DistanceUnit.LIGHTYEAR),
    ("lightyear", DistanceUnit.LIGHTYEAR),
    ("lightyears", DistanceUnit.LIGHTYEAR),
    ("pc", DistanceUnit.PARSEC),
    ("parsec", DistanceUnit.PARSEC),
    ("parsecs", DistanceUnit.PARSEC),
)

SYMBOLS = {
    DistanceUnit.MILLIMETRE: "mm",
    DistanceUnit.CENTIMETRE: "cm",
    DistanceUnit.INCH: "in",
    DistanceUnit.FOOT: "ft",
    DistanceUnit.YARD: "yd",
    DistanceUnit.METRE: "m",
    DistanceUnit.KILOMETRE: "km",
    DistanceUnit.MILE: "mi",
    DistanceUnit.NAUTICAL_MILE: "nmi",
    DistanceUnit.ASTRONOMICAL_UNIT: "au",
    DistanceUnit.LIGHTYEAR: "ly",
    DistanceUnit.PARSEC: "pc",
}

FACTORS = {
    DistanceUnit.MILLIMETRE: "0.001",
    DistanceUnit.CENTIMETRE: "0.01",
    DistanceUnit.INCH: "0.0254",
    DistanceUnit.FOOT: "0.30479999",
    DistanceUnit.YARD: "0.9144",
    DistanceUnit.METRE: "1.0",
    DistanceUnit.KILOMETRE: "1000.0",
    DistanceUnit.MILE: "1609.344",
    DistanceUnit.NAUTICAL_MILE: "1852.0",
    DistanceUnit.ASTRONOMICAL_UNIT: "149597870700.0",
    DistanceUnit.LIGHTYEAR: "9460730472580800.0",
    DistanceUnit.PARSEC: "30856775810000000.0",
}
