"""Linear conversion through a category's implicit base unit.

Every linear category stores one factor per unit: "1 unit equals ``factor``
base units". Converting is then a single ratio::

    converted = value * (factor[from_unit] / factor[to_unit])

Identity and composition follow from the ratio structure, so no category
needs pair-specific code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple, Union

import numpy as np

from ..scalar import Scalar, as_scalar
from .category import Category
from .symbols import SymbolTable

logger = logging.getLogger(__name__)

FactorLiteral = Union[str, Scalar]


@dataclass(frozen=True, eq=False)
class FactorTable:
    """Unit -> conversion factor relative to the category base unit.

    Attributes:
        category: Category name used in error messages.
        unit_type: The category's closed unit enumeration.
        base_unit: The unit whose factor is exactly one.
        factors: Read-only unit -> ``Scalar`` mapping, total over
            ``unit_type``.
        literals: Read-only unit -> source text of each factor, kept for
            reporting the exact table entry.

    Raises:
        ValueError: On construction, if a unit has no factor, a factor is not
            finite and strictly positive, or the base unit's factor is not 1.
    """

    category: str
    unit_type: type
    base_unit: Enum
    factors: Mapping[Enum, Scalar]
    literals: Mapping[Enum, str]

    @classmethod
    def from_literals(
        cls,
        category: str,
        unit_type: type,
        base_unit: Enum,
        literals: Mapping[Enum, FactorLiteral],
    ) -> "FactorTable":
        """Parse decimal-string (or ``Scalar``) factors at extended precision."""
        factors = {unit: as_scalar(text) for unit, text in literals.items()}
        texts = {
            unit: text if isinstance(text, str) else np.format_float_positional(text)
            for unit, text in literals.items()
        }
        return cls(category, unit_type, base_unit, factors, texts)

    def __post_init__(self):
        missing = [u.name for u in self.unit_type if u not in self.factors]
        if missing:
            raise ValueError(f"{self.category} units without a conversion factor: {missing}")
        for unit, factor in self.factors.items():
            if not isinstance(unit, self.unit_type):
                raise ValueError(f"{self.category} factor targets foreign unit {unit!r}")
            if not np.isfinite(factor) or factor <= 0:
                raise ValueError(
                    f"{self.category} factor for {unit.name} must be finite and > 0, "
                    f"got {factor!r}"
                )
        if self.factors[self.base_unit] != 1:
            raise ValueError(
                f"{self.category} base unit {self.base_unit.name} must have factor 1."
            )

        object.__setattr__(self, "factors", MappingProxyType(dict(self.factors)))
        object.__setattr__(self, "literals", MappingProxyType(dict(self.literals)))

    def factor(self, unit: Enum) -> Scalar:
        return self.factors[unit]


@dataclass(frozen=True, eq=False)
class LinearCategory(Category):
    """A category whose units are pure scalings of one base unit."""

    factor_table: FactorTable

    @classmethod
    def from_tables(
        cls,
        name: str,
        unit_type: type,
        aliases: Iterable[Tuple[str, Enum]],
        symbols: Mapping[Enum, str],
        factors: Mapping[Enum, FactorLiteral],
        base_unit: Enum,
    ):
        symbol_table = SymbolTable.from_pairs(name, unit_type, aliases, symbols)
        factor_table = FactorTable.from_literals(name, unit_type, base_unit, factors)
        logger.debug("Built linear category %s (base %s)", name, base_unit.name)
        return cls(name, unit_type, symbol_table, factor_table)

    @property
    def base_unit(self) -> Enum:
        return self.factor_table.base_unit

    def factor(self, unit: Enum) -> Scalar:
        """Return how many base units one ``unit`` is."""
        self._check_unit(unit)
        return self.factor_table.factor(unit)

    def convert(self, value, from_unit: Enum, to_unit: Enum):
        """Convert ``value`` from ``from_unit`` to ``to_unit``.

        Args:
            value: Scalar, decimal string or array-like.
            from_unit: Member of ``self.Unit`` the value is expressed in.
            to_unit: Member of ``self.Unit`` to express the value in.

        Returns:
            ``Scalar`` (or ndarray of ``Scalar`` for array input).

        Raises:
            UnsupportedUnitError: If either unit is not a member of
                ``self.Unit``.
        """
        self._check_unit(from_unit)
        self._check_unit(to_unit)
        ratio = self.factor_table.factor(from_unit) / self.factor_table.factor(to_unit)
        return as_scalar(value) * ratio
