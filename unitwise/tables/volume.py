"""Volume units, aliases and factors (base unit: cubic metres)."""

from __future__ import annotations

from enum import Enum


class VolumeUnit(Enum):
    MILLILITRE = "millilitre"
    CENTILITRE = "centilitre"
    CUBIC_INCH = "cubic inch"
    FLUID_OUNCE = "fluid ounce"
    CUP = "cup"
    PINT = "pint"
    QUART = "quart"
    LITRE = "litre"
    GALLON = "gallon"
    CUBIC_FOOT = "cubic foot"
    BARREL = "barrel"
    CUBIC_YARD = "cubic yard"
    CUBIC_METRE = "cubic metre"


BASE_UNIT = VolumeUnit.CUBIC_METRE

# "in3" names the cubic inch only; older tables also listed it under cubic foot.
ALIASES = (
    ("milliliter", VolumeUnit.MILLILITRE),
    ("millilitre", VolumeUnit.MILLILITRE),
    ("ml", VolumeUnit.MILLILITRE),
    ("centiliter", VolumeUnit.CENTILITRE),
    ("centilitre", VolumeUnit.CENTILITRE),
    ("cl", VolumeUnit.CENTILITRE),
    ('"3', VolumeUnit.CUBIC_INCH),
    ('"^3', VolumeUnit.CUBIC_INCH),
    ('"³', VolumeUnit.CUBIC_INCH),
    ("cu in", VolumeUnit.CUBIC_INCH),
    ("cu. in", VolumeUnit.CUBIC_INCH),
    ("cu. in.", VolumeUnit.CUBIC_INCH),
    ("in. cu", VolumeUnit.CUBIC_INCH),
    ("in. cu.", VolumeUnit.CUBIC_INCH),
    ("in3", VolumeUnit.CUBIC_INCH),
    ("in^3", VolumeUnit.CUBIC_INCH),
    ("in³", VolumeUnit.CUBIC_INCH),
    ("fl oz", VolumeUnit.FLUID_OUNCE),
    ("fl ℥", VolumeUnit.FLUID_OUNCE),
    ("fl. oz", VolumeUnit.FLUID_OUNCE),
    ("fl/oz", VolumeUnit.FLUID_OUNCE),
    ("floz", VolumeUnit.FLUID_OUNCE),
    ("f℥", VolumeUnit.FLUID_OUNCE),
    ("oz. fl", VolumeUnit.FLUID_OUNCE),
    ("oz. fl.", VolumeUnit.FLUID_OUNCE),
    ("ƒ ℥", VolumeUnit.FLUID_OUNCE),
    ("℥", VolumeUnit.FLUID_OUNCE),
    ("cup", VolumeUnit.CUP),
    ("cups", VolumeUnit.CUP),
    ("p", VolumeUnit.PINT),
    ("pint", VolumeUnit.PINT),
    ("pt", VolumeUnit.PINT),
    ("qt", VolumeUnit.QUART),
    ("quart", VolumeUnit.QUART),
    ("l", VolumeUnit.LITRE),
    ("liter", VolumeUnit.LITRE),
    ("litre", VolumeUnit.LITRE),
    ("gal", VolumeUnit.GALLON),
    ("gallon", VolumeUnit.GALLON),
    ("'3", VolumeUnit.CUBIC_FOOT),
    ("'^3", VolumeUnit.CUBIC_FOOT),
    ("'³", VolumeUnit.CUBIC_FOOT),
    ("cu f", VolumeUnit.CUBIC_FOOT),
    ("cu ft", VolumeUnit.CUBIC_FOOT),
    ("cu. f", VolumeUnit.CUBIC_FOOT),
    ("cu. f.", VolumeUnit.CUBIC_FOOT),
    ("cu. ft", VolumeUnit.CUBIC_FOOT),
    ("cu. ft.", VolumeUnit.CUBIC_FOOT),
    ("f. cu", VolumeUnit.CUBIC_FOOT),
    ("f. cu.", VolumeUnit.CUBIC_FOOT),
    ("f^3", VolumeUnit.CUBIC_FOOT),
    ("ft. cu", VolumeUnit.CUBIC_FOOT),
    ("ft. cu.", VolumeUnit.CUBIC_FOOT),
    ("ft3", VolumeUnit.CUBIC_FOOT),
    ("ft^3", VolumeUnit.CUBIC_FOOT),
    ("ft³", VolumeUnit.CUBIC_FOOT),
    ("f³", VolumeUnit.CUBIC_FOOT),
    ("barrel", VolumeUnit.BARREL),
    ("barrels", VolumeUnit.BARREL),
    ("bbl", VolumeUnit.BARREL),
    ("yd3", VolumeUnit.CUBIC_YARD),
    ("yd^3", VolumeUnit.CUBIC_YARD),
    ("yd³", VolumeUnit.CUBIC_YARD),
    ("m3", VolumeUnit.CUBIC_METRE),
    ("m^3", VolumeUnit.CUBIC_METRE),
    ("m³", VolumeUnit.CUBIC_METRE),
)

SYMBOLS = {
    VolumeUnit.MILLILITRE: "ml",
    VolumeUnit.CENTILITRE: "cl",
    VolumeUnit.CUBIC_INCH: "in3",
    VolumeUnit.FLUID_OUNCE: "fl. oz",
    VolumeUnit.CUP: "cup",
    VolumeUnit.PINT: "pt",
    VolumeUnit.QUART: "qt",
    VolumeUnit.LITRE: "l",
    VolumeUnit.GALLON: "gal",
    VolumeUnit.CUBIC_FOOT: "ft3",
    VolumeUnit.BARREL: "bbl",
    VolumeUnit.CUBIC_YARD: "yd3",
    VolumeUnit.CUBIC_METRE: "m3",
}

FACTORS = {
    VolumeUnit.MILLILITRE: "0.000001",
    VolumeUnit.CENTILITRE: "0.00001",
    VolumeUnit.CUBIC_INCH: "0.000016387064",
    VolumeUnit.FLUID_OUNCE: "0.000029574",
    VolumeUnit.CUP: "0.000237",
    VolumeUnit.PINT: "0.000473176473",
    VolumeUnit.QUART: "0.000946",
    VolumeUnit.LITRE: "0.001",
    VolumeUnit.GALLON: "0.003785411784",
    VolumeUnit.CUBIC_FOOT: "0.028316846592",
    VolumeUnit.BARREL: "0.158987294928",
    VolumeUnit.CUBIC_YARD: "0.764554858",
    VolumeUnit.CUBIC_METRE: "1.0",
}
