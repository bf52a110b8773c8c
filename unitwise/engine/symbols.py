"""Bidirectional alias/symbol lookup for one unit category."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from ..errors import UnresolvedSymbolError, UnsupportedUnitError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class SymbolTable:
    """Alias -> unit and unit -> canonical symbol maps for one category.

    Attributes:
        category: Category name used in error messages.
        unit_type: The category's closed unit enumeration.
        aliases: Read-only alias -> unit mapping. Matching is exact and
            case-sensitive; many aliases may name one unit.
        symbols: Read-only unit -> canonical display symbol mapping, total
            over ``unit_type``.

    Raises:
        ValueError: On construction, if an alias is empty or names two
            different units, if an alias or symbol targets a foreign unit,
            if a unit has no canonical symbol, or if a canonical symbol is
            not itself a registered alias.
    """

    category: str
    unit_type: type
    aliases: Mapping[str, Enum]
    symbols: Mapping[Enum, str]

    @classmethod
    def from_pairs(
        cls,
        category: str,
        unit_type: type,
        alias_pairs: Iterable[Tuple[str, Enum]],
        symbols: Mapping[Enum, str],
    ) -> "SymbolTable":
        """Build a table from ``(alias, unit)`` pairs, rejecting conflicts.

        A plain dict literal would silently keep the last of two conflicting
        entries, so alias tables are declared as pair sequences.
        """
        aliases: dict = {}
        for alias, unit in alias_pairs:
            previous = aliases.get(alias)
            if previous is not None and previous is not unit:
                raise ValueError(
                    f"{category} alias {alias!r} maps to both {previous.name} "
                    f"and {unit.name}."
                )
            aliases[alias] = unit
        return cls(category, unit_type, aliases, symbols)

    def __post_init__(self):
        for alias, unit in self.aliases.items():
            if not isinstance(alias, str) or not alias:
                raise ValueError(f"{self.category} alias must be a non-empty string, got {alias!r}")
            if not isinstance(unit, self.unit_type):
                raise ValueError(f"{self.category} alias {alias!r} targets foreign unit {unit!r}")

        missing = [u.name for u in self.unit_type if u not in self.symbols]
        if missing:
            raise ValueError(f"{self.category} units without a canonical symbol: {missing}")
        for unit, symbol in self.symbols.items():
            if not isinstance(unit, self.unit_type):
                raise ValueError(f"{self.category} symbol {symbol!r} targets foreign unit {unit!r}")
            if self.aliases.get(symbol) is not unit:
                raise ValueError(
                    f"{self.category} canonical symbol {symbol!r} does not resolve "
                    f"to {unit.name}."
                )

        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))
        object.__setattr__(self, "symbols", MappingProxyType(dict(self.symbols)))
        logger.debug(
            "Built %s symbol table: %d units, %d aliases",
            self.category,
            len(self.symbols),
            len(self.aliases),
        )

    def check_unit(self, unit) -> None:
        if not isinstance(unit, self.unit_type):
            raise UnsupportedUnitError(unit, self.category)

    def try_resolve(self, alias) -> Optional[Enum]:
        """Return the unit named by ``alias``, or None when nothing matches."""
        if not isinstance(alias, str):
            return None
        return self.aliases.get(alias)

    def resolve(self, alias: str) -> Enum:
        unit = self.try_resolve(alias)
        if unit is None:
            raise UnresolvedSymbolError(alias, self.category)
        return unit

    def canonical_symbol(self, unit: Enum) -> str:
        self.check_unit(unit)
        return self.symbols[unit]

    def aliases_of(self, unit: Enum) -> Tuple[str, ...]:
        self.check_unit(unit)
        return tuple(sorted(a for a, u in self.aliases.items() if u is unit))
