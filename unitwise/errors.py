"""Exceptions raised by unit resolution and conversion."""

from __future__ import annotations

from typing import Optional


class UnresolvedSymbolError(KeyError):
    """A free-text symbol matches no alias in a category.

    Raised by the strict ``resolve_unit``; ``try_guess_unit`` returns
    ``None`` instead. ``category`` is None when the symbol was looked up in
    every category and none of them knows it.
    """

    def __init__(self, symbol: str, category: Optional[str] = None):
        self.symbol = symbol
        self.category = category
        if category is None:
            message = f"No unit in any category matches symbol {symbol!r}."
        else:
            message = f"No {category} unit matches symbol {symbol!r}."
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])


class UnsupportedUnitError(TypeError):
    """A unit outside a category's own enumeration was passed to it."""

    def __init__(self, unit, category: str):
        self.unit = unit
        self.category = category
        super().__init__(f"{unit!r} is not a {category} unit.")
