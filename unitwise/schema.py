"""Define standardized column names for unit and conversion DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TableColumns:
    """Container for standardized column labels.

    Attributes:
        category: Category name (``"distance"``, ``"mass"``...).
        unit: Enum member name of the unit, e.g. ``KILOMETRE``.
        symbol: Canonical display symbol of the unit.
        aliases: Comma-separated aliases that resolve to the unit.
        factor: Conversion factor to the category base unit as float64.
            Display-grade only; conversions use the extended-precision
            table, not this column.
        factor_exact: Factor as written in the literal table.
        base_unit: Canonical symbol of the category base unit.
        resolved: Canonical symbol a free-text row resolved to, or empty
            when it matched no alias.
    """

    category: str = "Category"
    unit: str = "Unit"
    symbol: str = "Symbol"
    aliases: str = "Aliases"
    factor: str = "Factor"
    factor_exact: str = "Factor (exact)"
    base_unit: str = "Base Unit"
    resolved: str = "Resolved Unit"


COLUMNS = TableColumns()
