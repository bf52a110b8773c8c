"""Area units, aliases and factors (base unit: square metres)."""

from __future__ import annotations

from enum import Enum


class AreaUnit(Enum):
    SQUARE_MILLIMETRE = "square millimetre"
    SQUARE_CENTIMETRE = "square centimetre"
    SQUARE_INCH = "square inch"
    SQUARE_METRE = "square metre"
    SQUARE_FOOT = "square foot"
    ACRE = "acre"
    HECTARE = "hectare"
    SQUARE_YARD = "square yard"


BASE_UNIT = AreaUnit.SQUARE_METRE

ALIASES = (
    ("mm2", AreaUnit.SQUARE_MILLIMETRE),
    ("mm^2", AreaUnit.SQUARE_MILLIMETRE),
    ("mm²", AreaUnit.SQUARE_MILLIMETRE),
    ("cm2", AreaUnit.SQUARE_CENTIMETRE),
    ("cm^2", AreaUnit.SQUARE_CENTIMETRE),
    ("cm²", AreaUnit.SQUARE_CENTIMETRE),
    ('"²', AreaUnit.SQUARE_INCH),
    ("in2", AreaUnit.SQUARE_INCH),
    ("in^2", AreaUnit.SQUARE_INCH),
    ("in²", AreaUnit.SQUARE_INCH),
    ("'2", AreaUnit.SQUARE_FOOT),
    ("ft2", AreaUnit.SQUARE_FOOT),
    ("ft^2", AreaUnit.SQUARE_FOOT),
    ("ft²", AreaUnit.SQUARE_FOOT),
    ("yd2", AreaUnit.SQUARE_YARD),
    ("yd^2", AreaUnit.SQUARE_YARD),
    ("yd²", AreaUnit.SQUARE_YARD),
    ("m2", AreaUnit.SQUARE_METRE),
    ("m^2", AreaUnit.SQUARE_METRE),
    ("m²", AreaUnit.SQUARE_METRE),
    ("ac", AreaUnit.ACRE),
    ("acre", AreaUnit.ACRE),
    ("ha", AreaUnit.HECTARE),
    ("hectare", AreaUnit.HECTARE),
)

SYMBOLS = {
    AreaUnit.SQUARE_MILLIMETRE: "mm2",
    AreaUnit.SQUARE_CENTIMETRE: "cm2",
    AreaUnit.SQUARE_INCH: "in2",
    AreaUnit.SQUARE_METRE: "m2",
    AreaUnit.SQUARE_FOOT: "ft2",
    AreaUnit.ACRE: "ac",
    AreaUnit.HECTARE: "ha",
    AreaUnit.SQUARE_YARD: "yd2",
}

FACTORS = {
    AreaUnit.SQUARE_MILLIMETRE: "0.000001",
    AreaUnit.SQUARE_CENTIMETRE: "0.0001",
    AreaUnit.SQUARE_INCH: "0.00064516",
    AreaUnit.SQUARE_FOOT: "0.09290304",
    AreaUnit.SQUARE_YARD: "0.83612736",
    AreaUnit.SQUARE_METRE: "1.0",
    AreaUnit.ACRE: "4046.8564224",
    AreaUnit.HECTARE: "10000.0",
}
