"""
Convert pandas columns of quantities between units.
"""

# Each row carries a number and a free-text unit symbol. Symbols are resolved
# with the category's exact alias lookup. Values (including decimal strings)
# are parsed and converted at extended precision; only the results are stored
# as float64 so the columns stay ordinary pandas numeric columns.

import logging
import warnings

import numpy as np
import pandas as pd

from .categories import get_category
from .engine import Category
from .scalar import Scalar, as_scalar
from .schema import COLUMNS

logger = logging.getLogger(__name__)


def _as_category(category):
    return category if isinstance(category, Category) else get_category(category)


def _as_scalars(values) -> np.ndarray:
    """Parse each entry at extended precision; unparseable entries become NaN."""

    def parse(value):
        try:
            return as_scalar(value)
        except (TypeError, ValueError):
            return Scalar("nan")

    return np.array([parse(v) for v in values], dtype=Scalar)


def convert_series(values, category, from_unit, to_unit):
    """Convert a numeric Series from one unit to another.

    Args:
        values: :class:`pandas.Series` (or array-like) of numbers.
        category: Category object, ``UnitCategory`` or category name.
        from_unit: Unit member (or alias string) the values are in.
        to_unit: Unit member (or alias string) to convert to.

    Returns:
        pd.Series: float64 Series, index preserved when ``values`` is a
        Series.

    Raises:
        UnresolvedSymbolError: If a unit given as a string is unknown.
    """
    category = _as_category(category)
    if isinstance(from_unit, str):
        from_unit = category.resolve_unit(from_unit)
    if isinstance(to_unit, str):
        to_unit = category.resolve_unit(to_unit)

    series = values if isinstance(values, pd.Series) else pd.Series(values)
    converted = category.convert(_as_scalars(series), from_unit, to_unit)
    return pd.Series(np.asarray(converted, dtype=float), index=series.index, name=series.name)


def convert_frame(df, category, to_unit, value_col="value", symbol_col="unit", out_col=None):
    """Convert rows of (value, symbol) pairs to one target unit.

    Args:
        df: DataFrame holding a numeric column and a free-text unit column.
        category: Category object, ``UnitCategory`` or category name.
        to_unit: Target unit member or alias string.
        value_col (str): Column with the numeric values.
        symbol_col (str): Column with the unit symbols as typed.
        out_col (str): Output column; defaults to ``"<value_col> (<symbol>)"``.

    Returns:
        pd.DataFrame: Copy of ``df`` with ``Resolved Unit`` (canonical symbol
        of each row's unit, empty string when unresolved) and ``out_col``.

    Note:
        Rows whose symbol matches no alias get NaN, and a single
        ``UserWarning`` lists the distinct unknown symbols.
    """
    category = _as_category(category)
    if isinstance(to_unit, str):
        to_unit = category.resolve_unit(to_unit)
    missing = {value_col, symbol_col} - set(df.columns)
    if missing:
        raise KeyError(f"Input data is missing required columns: {sorted(missing)}")

    out_col = out_col or f"{value_col} ({category.symbol(to_unit)})"
    result = df.copy()
    values = _as_scalars(result[value_col])
    units = result[symbol_col].map(category.try_guess_unit)

    converted = np.full(len(result), np.nan)
    for unit in units.dropna().unique():
        mask = (units == unit).to_numpy()
        converted[mask] = np.asarray(
            category.convert(values[mask], unit, to_unit), dtype=float
        )

    unresolved = sorted({str(s) for s in result.loc[units.isna(), symbol_col]})
    if unresolved:
        warnings.warn(
            f"{len(unresolved)} unknown {category.name} symbol(s) left as NaN: {unresolved}",
            UserWarning,
            stacklevel=2,
        )

    result[COLUMNS.resolved] = units.map(
        lambda u: category.symbol(u) if isinstance(u, category.Unit) else ""
    )
    result[out_col] = converted
    logger.debug(
        "Converted %d/%d %s rows to %s",
        int(units.notna().sum()),
        len(result),
        category.name,
        category.symbol(to_unit),
    )
    return result
