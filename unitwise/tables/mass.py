"""Mass units, aliases and factors (base unit: kilograms)."""

from __future__ import annotations

from enum import Enum


class MassUnit(Enum):
    NANOGRAM = "nanogram"
    MICROGRAM = "microgram"
    MILLIGRAM = "milligram"
    GRAM = "gram"
    OUNCE = "ounce"
    POUND = "pound"
    KILOGRAM = "kilogram"
    TON = "tonne"
    KILOTON = "kilotonne"
    MEGATON = "megatonne"
    GIGATON = "gigatonne"


BASE_UNIT = MassUnit.KILOGRAM

ALIASES = (
    ("nanogram", MassUnit.NANOGRAM),
    ("nanogramme", MassUnit.NANOGRAM),
    ("nanogrammes", MassUnit.NANOGRAM),
    ("nanograms", MassUnit.NANOGRAM),
    ("ng", MassUnit.NANOGRAM),
    ("microgram", MassUnit.MICROGRAM),
    ("microgramme", MassUnit.MICROGRAM),
    ("microgrammes", MassUnit.MICROGRAM),
    ("micrograms", MassUnit.MICROGRAM),
    ("μg", MassUnit.MICROGRAM),  # Greek mu
    ("µg", MassUnit.MICROGRAM),  # micro sign
    ("mg", MassUnit.MILLIGRAM),
    ("milligram", MassUnit.MILLIGRAM),
    ("milligramme", MassUnit.MILLIGRAM),
    ("milligrammes", MassUnit.MILLIGRAM),
    ("milligrams", MassUnit.MILLIGRAM),
    ("g", MassUnit.GRAM),
    ("gram", MassUnit.GRAM),
    ("gramme", MassUnit.GRAM),
    ("grammes", MassUnit.GRAM),
    ("grams", MassUnit.GRAM),
    ("ounce", MassUnit.OUNCE),
    ("oz", MassUnit.OUNCE),
    ("lb", MassUnit.POUND),
    ("pound", MassUnit.POUND),
    ("kg", MassUnit.KILOGRAM),
    ("kilogram", MassUnit.KILOGRAM),
    ("kilogramme", MassUnit.KILOGRAM),
    ("kilogrammes", MassUnit.KILOGRAM),
    ("kilograms", MassUnit.KILOGRAM),
    ("t", MassUnit.TON),
    ("ton", MassUnit.TON),
    ("tonne", MassUnit.TON),
    ("tonnes", MassUnit.TON),
    ("tons", MassUnit.TON),
    ("kilotonne", MassUnit.KILOTON),
    ("kiloton", MassUnit.KILOTON),
    ("kilotonnes", MassUnit.KILOTON),
    ("kilotons", MassUnit.KILOTON),
    ("kt", MassUnit.KILOTON),
    ("megaton", MassUnit.MEGATON),
    ("megatonne", MassUnit.MEGATON),
    ("megatonnes", MassUnit.MEGATON),
    ("megatons", MassUnit.MEGATON),
    ("Mt", MassUnit.MEGATON),
    ("gigaton", MassUnit.GIGATON),
    ("gigatonne", MassUnit.GIGATON),
    ("gigatonnes", MassUnit.GIGATON),
    ("gigatons", MassUnit.GIGATON),
    ("Gt", MassUnit.GIGATON),
)

SYMBOLS = {
    MassUnit.NANOGRAM: "ng",
    MassUnit.MICROGRAM: "μg",
    MassUnit.MILLIGRAM: "mg",
    MassUnit.GRAM: "g",
    MassUnit.OUNCE: "oz",
    MassUnit.POUND: "lb",
    MassUnit.KILOGRAM: "kg",
    MassUnit.TON: "t",
    MassUnit.KILOTON: "kt",
    MassUnit.MEGATON: "Mt",
    MassUnit.GIGATON: "Gt",
}

FACTORS = {
    MassUnit.NANOGRAM: "0.000000000001",
    MassUnit.MICROGRAM: "0.000000001",
    MassUnit.MILLIGRAM: "0.000001",
    MassUnit.GRAM: "0.001",
    MassUnit.OUNCE: "0.02834952",
    MassUnit.POUND: "0.4535923",
    MassUnit.KILOGRAM: "1.0",
    MassUnit.TON: "1000.0",
    MassUnit.KILOTON: "1000000.0",
    MassUnit.MEGATON: "1000000000.0",
    MassUnit.GIGATON: "1000000000000.0",
}
