"""Format converted quantities and tabulate unit tables for display.

This module sits after conversion: it renders values with their canonical
symbols and exposes each category's literal tables as pandas DataFrames.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

import numpy as np
import pandas as pd

from .categories import ALL_CATEGORIES, get_category
from .engine import Category, LinearCategory
from .scalar import Scalar, as_scalar
from .schema import COLUMNS

SCIENTIFIC_BELOW = Scalar("1e-4")
SCIENTIFIC_FROM = Scalar("1e15")


def _category_of(unit: Enum) -> Category:
    for category in ALL_CATEGORIES:
        if isinstance(unit, category.Unit):
            return category
    raise TypeError(f"{unit!r} is not a unit of any known category.")


def format_value(value, sig_figs: int = 6) -> str:
    """Format a number to ``sig_figs`` significant figures.

    Args:
        value: Number (including ``numpy.longdouble``) to format.
        sig_figs (int): Significant figures kept, >= 1.

    Returns:
        str: Positional notation when the value rounded to ``sig_figs``
        lies in [1e-4, 1e15), scientific notation otherwise. Trailing
        zeros are trimmed.

    Raises:
        ValueError: If ``sig_figs`` is less than 1.
    """
    if sig_figs < 1:
        raise ValueError("sig_figs must be >= 1")
    x = as_scalar(value)
    if not np.isfinite(x):
        return str(float(x))
    # Decide the notation on the value as rounded to sig_figs.
    magnitude = abs(as_scalar(np.format_float_scientific(x, precision=sig_figs - 1, unique=False)))
    if magnitude != 0 and (magnitude < SCIENTIFIC_BELOW or magnitude >= SCIENTIFIC_FROM):
        return np.format_float_scientific(x, precision=sig_figs - 1, unique=False, trim="-")
    return np.format_float_positional(
        x, precision=sig_figs, unique=False, fractional=False, trim="-"
    )


def format_quantity(
    value, unit: Enum, category: Optional[Category] = None, sig_figs: int = 6
) -> str:
    """Render ``value`` followed by the canonical symbol of ``unit``.

    Args:
        value: Numeric value expressed in ``unit``.
        unit: Unit enum member.
        category: Category owning ``unit``; looked up when omitted.
        sig_figs (int): Significant figures for the value.

    Returns:
        str: e.g. ``"1000 m"`` or ``"9.46073e+15 m"``.
    """
    category = category or _category_of(unit)
    return f"{format_value(value, sig_figs)} {category.symbol(unit)}"


def unit_table(category) -> pd.DataFrame:
    """Tabulate units, symbols, aliases and factors of one category.

    Args:
        category: Category object, ``UnitCategory`` or category name.

    Returns:
        pandas.DataFrame: One row per unit in enumeration order, columns from
        :class:`unitwise.schema.TableColumns`. Factor columns are NaN/empty
        for temperature, which has no linear factors.
    """
    if not isinstance(category, Category):
        category = get_category(category)

    linear = isinstance(category, LinearCategory)
    base_symbol = category.symbol(category.base_unit) if linear else ""
    records = []
    for unit in category.units:
        records.append(
            {
                COLUMNS.category: category.name,
                COLUMNS.unit: unit.name,
                COLUMNS.symbol: category.symbol(unit),
                COLUMNS.aliases: ", ".join(category.aliases(unit)),
                COLUMNS.factor: float(category.factor(unit)) if linear else np.nan,
                COLUMNS.factor_exact: category.factor_table.literals[unit] if linear else "",
                COLUMNS.base_unit: base_symbol,
            }
        )
    return pd.DataFrame.from_records(records)


def all_unit_tables() -> pd.DataFrame:
    """Concatenate :func:`unit_table` for every category."""
    return pd.concat([unit_table(c) for c in ALL_CATEGORIES], ignore_index=True)
