"""
A Python package for resolving unit symbols and converting physical quantities.

Covers speed, distance, rotation, time, temperature, pressure, mass, area and
volume at extended (``numpy.longdouble``) precision.

Modules:
    - categories: The nine category objects (Speed, Distance, ...) and lookup helpers.
    - engine: Symbol tables, linear factor conversion, temperature hub, geospatial helpers.
    - tables: Literal alias, symbol and factor data per category.
    - reporting: Quantity formatting and pandas unit tables.
    - data_processing: Batch conversion of pandas columns.
    - plotting: Factor-ladder and temperature-scale figures.
"""

__version__ = "1.0.0"

from .categories import (
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
    find_categories,
    get_category,
)
from .errors import UnresolvedSymbolError, UnsupportedUnitError
from .reporting import format_quantity, unit_table
from .scalar import Scalar, as_scalar

__all__ = [
    # Categories
    "Speed",
    "Distance",
    "Rotation",
    "Time",
    "Temperature",
    "Pressure",
    "Mass",
    "Area",
    "Volume",
    "ALL_CATEGORIES",
    "UnitCategory",
    "get_category",
    "find_categories",
    # Errors
    "UnresolvedSymbolError",
    "UnsupportedUnitError",
    # Reporting
    "format_quantity",
    "unit_table",
    # Scalar
    "Scalar",
    "as_scalar",
]
