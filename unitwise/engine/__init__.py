"""
Generic conversion engine shared by all unit categories.

Modules:
    symbols:
        SymbolTable: exact, case-sensitive alias -> unit resolution and
        unit -> canonical symbol lookup. Validates that alias keys are
        disjoint and that every unit has one self-resolving symbol.

    category:
        Category base class exposing try_guess_unit / resolve_unit /
        symbol / aliases over one closed unit enumeration.

    linear:
        FactorTable and LinearCategory: ``value * factor(from) / factor(to)``
        for every category whose units scale one base unit.

    temperature:
        TemperatureCategory: Kelvin hub conversion, absolute-zero floor and
        Planck-temperature clamp.

    geospatial:
        Arc-second <-> metre conversion scaled by latitude, and the
        DistanceCategory that exposes it.

Design Principle:
    This subpackage holds no unit data. Literal tables live in
    ``unitwise.tables``; the engine only validates and evaluates them.
"""

from .category import Category
from .geospatial import DistanceCategory, arc_seconds_to_metres, metres_to_arc_seconds
from .linear import FactorTable, LinearCategory
from .symbols import SymbolTable
from .temperature import TemperatureCategory

__all__ = [
    "Category",
    "DistanceCategory",
    "FactorTable",
    "LinearCategory",
    "SymbolTable",
    "TemperatureCategory",
    "arc_seconds_to_metres",
    "metres_to_arc_seconds",
]
