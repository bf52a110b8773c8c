"""Pressure units, aliases and factors (base unit: standard atmospheres).

Factors after SensorsONE, "atm – Standard Atmosphere Pressure Unit",
https://www.sensorsone.com/atm-standard-atmosphere-pressure-unit/
"""

from __future__ import annotations

from enum import Enum


class PressureUnit(Enum):
    DYNE_SQUARE_CENTIMETRE = "dyne per square centimetre"
    MILLITORR = "millitorr"
    PASCAL = "pascal"
    MILLIMETRE_WATER = "millimetre of water"
    POUND_SQUARE_FOOT = "pound per square foot"
    HECTOPASCAL = "hectopascal"
    CENTIMETRE_WATER = "centimetre of water"
    MILLIMETRE_MERCURY = "millimetre of mercury"
    INCH_WATER = "inch of water"
    OUNCE_SQUARE_INCH = "ounce per square inch"
    DECIBEL = "decibel"
    KILOPASCAL = "kilopascal"
    CENTIMETRE_MERCURY = "centimetre of mercury"
    FEET_WATER = "foot of water"
    INCH_MERCURY = "inch of mercury"
    POUND_SQUARE_INCH = "pound per square inch"
    METRE_WATER = "metre of water"
    TON_SQUARE_FOOT_SHORT = "short ton per square foot"
    TECHNICAL_ATMOSPHERE = "technical atmosphere"
    KILOGRAM_SQUARE_CENTIMETRE = "kilogram per square centimetre"
    BAR = "bar"
    ATMOSPHERE = "atmosphere"
    MEGAPASCAL = "megapascal"
    TON_SQUARE_INCH_SHORT = "short ton per square inch"
    TON_SQUARE_INCH_LONG = "long ton per square inch"


BASE_UNIT = PressureUnit.ATMOSPHERE

ALIASES = (
    ("dyn/cm²", PressureUnit.DYNE_SQUARE_CENTIMETRE),
    ("dyn/cm^2", PressureUnit.DYNE_SQUARE_CENTIMETRE),
    ("dyn/cm2", PressureUnit.DYNE_SQUARE_CENTIMETRE),
    ("mTorr", PressureUnit.MILLITORR),
    ("pascals", PressureUnit.PASCAL),
    ("pascal", PressureUnit.PASCAL),
    ("pa", PressureUnit.PASCAL),
    ("Pa", PressureUnit.PASCAL),
    ("N/m²", PressureUnit.PASCAL),
    ("N/m^2", PressureUnit.PASCAL),
    ("N/m2", PressureUnit.PASCAL),
    ("mmH2O", PressureUnit.MILLIMETRE_WATER),
    ("psf", PressureUnit.POUND_SQUARE_FOOT),
    ("millibars", PressureUnit.HECTOPASCAL),
    ("millibar", PressureUnit.HECTOPASCAL),
    ("mbar", PressureUnit.HECTOPASCAL),
    ("hPa", PressureUnit.HECTOPASCAL),
    ("hectopascals", PressureUnit.HECTOPASCAL),
    ("hectopascal", PressureUnit.HECTOPASCAL),
    ("cmH2O", PressureUnit.CENTIMETRE_WATER),
    ("mmHg", PressureUnit.MILLIMETRE_MERCURY),
    ("inH2O", PressureUnit.INCH_WATER),
    ("inH20", PressureUnit.INCH_WATER),  # historical spelling with a zero
    ("oz/in²", PressureUnit.OUNCE_SQUARE_INCH),
    ("oz/in^2", PressureUnit.OUNCE_SQUARE_INCH),
    ("oz/in2", PressureUnit.OUNCE_SQUARE_INCH),
    ("dB", PressureUnit.DECIBEL),
    ("decibel", PressureUnit.DECIBEL),
    ("decibels", PressureUnit.DECIBEL),
    ("kpa", PressureUnit.KILOPASCAL),
    ("kPa", PressureUnit.KILOPASCAL),
    ("kilopascals", PressureUnit.KILOPASCAL),
    ("kilopascal", PressureUnit.KILOPASCAL),
    ("cmHg", PressureUnit.CENTIMETRE_MERCURY),
    ("ftH2O", PressureUnit.FEET_WATER),
    ("inHg", PressureUnit.INCH_MERCURY),
    ("psi", PressureUnit.POUND_SQUARE_INCH),
    ("mH2O", PressureUnit.METRE_WATER),
    ("tsf", PressureUnit.TON_SQUARE_FOOT_SHORT),
    ("tsf_us", PressureUnit.TON_SQUARE_FOOT_SHORT),
    ("tsf_short", PressureUnit.TON_SQUARE_FOOT_SHORT),
    ("at", PressureUnit.TECHNICAL_ATMOSPHERE),
    ("kg/cm²", PressureUnit.KILOGRAM_SQUARE_CENTIMETRE),
    ("kg/cm^2", PressureUnit.KILOGRAM_SQUARE_CENTIMETRE),
    ("kg/cm2", PressureUnit.KILOGRAM_SQUARE_CENTIMETRE),
    ("bars", PressureUnit.BAR),
    ("bar", PressureUnit.BAR),
    ("atmospheres", PressureUnit.ATMOSPHERE),
    ("atmosphere", PressureUnit.ATMOSPHERE),
    ("atm", PressureUnit.ATMOSPHERE),
    ("MPa", PressureUnit.MEGAPASCAL),
    ("megapascals", PressureUnit.MEGAPASCAL),
    ("megapascal", PressureUnit.MEGAPASCAL),
    ("tsi", PressureUnit.TON_SQUARE_INCH_SHORT),
    ("tsi_us", PressureUnit.TON_SQUARE_INCH_SHORT),
    ("tsi_short", PressureUnit.TON_SQUARE_INCH_SHORT),
    ("tsi_uk", PressureUnit.TON_SQUARE_INCH_LONG),
    ("tsi_long", PressureUnit.TON_SQUARE_INCH_LONG),
)

SYMBOLS = {
    PressureUnit.DYNE_SQUARE_CENTIMETRE: "dyn/cm2",
    PressureUnit.MILLITORR: "mTorr",
    PressureUnit.PASCAL: "Pa",
    PressureUnit.MILLIMETRE_WATER: "mmH2O",
    PressureUnit.POUND_SQUARE_FOOT: "psf",
    PressureUnit.HECTOPASCAL: "hPa",
    PressureUnit.CENTIMETRE_WATER: "cmH2O",
    PressureUnit.MILLIMETRE_MERCURY: "mmHg",
    PressureUnit.INCH_WATER: "inH2O",
    PressureUnit.OUNCE_SQUARE_INCH: "oz/in2",
    PressureUnit.DECIBEL: "dB",
    PressureUnit.KILOPASCAL: "kPa",
    PressureUnit.CENTIMETRE_MERCURY: "cmHg",
    PressureUnit.FEET_WATER: "ftH2O",
    PressureUnit.INCH_MERCURY: "inHg",
    PressureUnit.POUND_SQUARE_INCH: "psi",
    PressureUnit.METRE_WATER: "mH2O",
    PressureUnit.TON_SQUARE_FOOT_SHORT: "tsf_short",
    PressureUnit.TECHNICAL_ATMOSPHERE: "at",
    PressureUnit.KILOGRAM_SQUARE_CENTIMETRE: "kg/cm2",
    PressureUnit.BAR: "bar",
    PressureUnit.ATMOSPHERE: "atm",
    PressureUnit.MEGAPASCAL: "MPa",
    PressureUnit.TON_SQUARE_INCH_SHORT: "tsi_short",
    PressureUnit.TON_SQUARE_INCH_LONG: "tsi_long",
}

FACTORS = {
    PressureUnit.DYNE_SQUARE_CENTIMETRE: "0.000000987",
    PressureUnit.MILLITORR: "0.000001316",
    PressureUnit.PASCAL: "0.000009869",
    PressureUnit.MILLIMETRE_WATER: "0.000096784",
    PressureUnit.POUND_SQUARE_FOOT: "0.000472541",
    PressureUnit.HECTOPASCAL: "0.000986923",
    PressureUnit.CENTIMETRE_WATER: "0.000967839",
    PressureUnit.MILLIMETRE_MERCURY: "0.001315789",
    PressureUnit.INCH_WATER: "0.002458319",
    PressureUnit.OUNCE_SQUARE_INCH: "0.004252876",
    PressureUnit.DECIBEL: "0.005154639",
    PressureUnit.KILOPASCAL: "0.009869233",
    PressureUnit.CENTIMETRE_MERCURY: "0.013157895",
    PressureUnit.FEET_WATER: "0.02949983",
    PressureUnit.INCH_MERCURY: "0.033421008",
    PressureUnit.POUND_SQUARE_INCH: "0.06804619",
    PressureUnit.METRE_WATER: "0.096783872",
    PressureUnit.TON_SQUARE_FOOT_SHORT: "0.945081324",
    PressureUnit.TECHNICAL_ATMOSPHERE: "0.967838719",
    PressureUnit.KILOGRAM_SQUARE_CENTIMETRE: "0.967838719",
    PressureUnit.BAR: "0.986923267",
    PressureUnit.ATMOSPHERE: "1.0",
    PressureUnit.MEGAPASCAL: "9.869232667",
    PressureUnit.TON_SQUARE_INCH_SHORT: "136.092009086",
    PressureUnit.TON_SQUARE_INCH_LONG: "152.422992094",
}
