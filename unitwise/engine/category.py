"""Behaviour shared by every unit category."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .symbols import SymbolTable


@dataclass(frozen=True, eq=False)
class Category(ABC):
    """A measurement dimension with its own closed unit enumeration.

    Subclasses implement ``convert``. Instances are immutable and built once at
    import, so they can be shared freely between threads.
    """

    name: str
    Unit: type
    symbol_table: SymbolTable

    @property
    def units(self) -> Tuple[Enum, ...]:
        return tuple(self.Unit)

    def try_guess_unit(self, symbol: str) -> Optional[Enum]:
        """Resolve a free-text symbol to a unit.

        Args:
            symbol (str): Alias as typed by a user, matched exactly
                (case-sensitive, no normalization).

        Returns:
            The matching member of ``self.Unit``, or None when the symbol is
            not a known alias. A miss is an ordinary outcome for free text.
        """
        return self.symbol_table.try_resolve(symbol)

    def resolve_unit(self, symbol: str) -> Enum:
        """Like :meth:`try_guess_unit` but raise ``UnresolvedSymbolError``."""
        return self.symbol_table.resolve(symbol)

    def symbol(self, unit: Enum) -> str:
        """Return the canonical display symbol of ``unit``."""
        return self.symbol_table.canonical_symbol(unit)

    def aliases(self, unit: Enum) -> Tuple[str, ...]:
        return self.symbol_table.aliases_of(unit)

    def _check_unit(self, unit) -> None:
        self.symbol_table.check_unit(unit)

    @abstractmethod
    def convert(self, value, from_unit: Enum, to_unit: Enum):
        """Convert ``value`` from ``from_unit`` to ``to_unit``."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}: {len(self.Unit)} units>"
