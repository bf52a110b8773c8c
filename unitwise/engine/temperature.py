"""Temperature conversion through Kelvin, with physical clamping.

Temperature scales do not share a zero point, so there is no single factor
per unit. Conversions route through Kelvin as a hub:

    Celsius    -> Kelvin:  K = C + offset
    Fahrenheit -> Kelvin:  K = (F + 459.67) / 1.8
    Kelvin     -> Kelvin:  identity

The destination leg applies the algebraic inverse. Between the two legs the
Kelvin value is floored at absolute zero, so no conversion can produce a
temperature below 0 K. ``clamp_temperature`` additionally caps a value at
the Planck temperature.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Tuple

import numpy as np

from ..constants import (
    ABSOLUTE_ZERO,
    CELSIUS_OFFSET,
    FAHRENHEIT_OFFSET,
    FAHRENHEIT_SCALE,
    PLANCK_TEMPERATURE,
)
from ..scalar import Scalar, as_scalar
from ..tables.temperature import TemperatureUnit
from .category import Category
from .symbols import SymbolTable


@dataclass(frozen=True, eq=False)
class TemperatureCategory(Category):
    """Celsius, Fahrenheit and Kelvin, converted through Kelvin.

    Attributes:
        celsius_offset: Kelvin value of 0 °C. Defaults to 273.15; pass
            ``LEGACY_CELSIUS_OFFSET`` (272.15) for callers that depend on
            the older constant.
        planck_temperature: Upper bound applied by ``clamp_temperature``.
    """

    celsius_offset: Scalar = CELSIUS_OFFSET
    planck_temperature: Scalar = PLANCK_TEMPERATURE

    @classmethod
    def from_tables(
        cls,
        name: str,
        aliases: Iterable[Tuple[str, Enum]],
        symbols: Mapping[Enum, str],
        **constants,
    ):
        symbol_table = SymbolTable.from_pairs(name, TemperatureUnit, aliases, symbols)
        return cls(name, TemperatureUnit, symbol_table, **constants)

    def __post_init__(self):
        object.__setattr__(self, "celsius_offset", as_scalar(self.celsius_offset))
        object.__setattr__(self, "planck_temperature", as_scalar(self.planck_temperature))
        if not self.planck_temperature > ABSOLUTE_ZERO:
            raise ValueError("planck_temperature must be above absolute zero.")

    def to_kelvin(self, value, unit: TemperatureUnit):
        """Apply the source leg only. No floor is applied."""
        self._check_unit(unit)
        value = as_scalar(value)
        if unit is TemperatureUnit.CELSIUS:
            return value + self.celsius_offset
        if unit is TemperatureUnit.FAHRENHEIT:
            return (value + FAHRENHEIT_OFFSET) / FAHRENHEIT_SCALE
        return value

    def from_kelvin(self, kelvin, unit: TemperatureUnit):
        """Apply the destination leg only."""
        self._check_unit(unit)
        kelvin = as_scalar(kelvin)
        if unit is TemperatureUnit.CELSIUS:
            return kelvin - self.celsius_offset
        if unit is TemperatureUnit.FAHRENHEIT:
            return kelvin * FAHRENHEIT_SCALE - FAHRENHEIT_OFFSET
        return kelvin

    def convert(self, value, from_unit: TemperatureUnit, to_unit: TemperatureUnit):
        """Convert a temperature, flooring the Kelvin intermediate at 0 K.

        Args:
            value: Scalar, decimal string or array-like.
            from_unit: Scale ``value`` is expressed in.
            to_unit: Scale to express the result in.

        Returns:
            ``Scalar`` (or ndarray of ``Scalar`` for array input). Inputs
            below absolute zero come out as absolute zero in ``to_unit``.

        Raises:
            UnsupportedUnitError: If either unit is not a ``TemperatureUnit``.
        """
        self._check_unit(to_unit)
        kelvin = np.maximum(self.to_kelvin(value, from_unit), ABSOLUTE_ZERO)
        return self.from_kelvin(kelvin, to_unit)

    def clamp_temperature(self, value, unit: TemperatureUnit):
        """Bound ``value`` to at most the Planck temperature, in ``unit``.

        The absolute-zero floor comes from the ``convert`` calls, so the
        result always lies in [absolute zero, Planck temperature].
        Applying the clamp twice gives the same result as applying it once.
        """
        kelvin = self.convert(value, unit, TemperatureUnit.KELVIN)
        return self.convert(
            np.minimum(kelvin, self.planck_temperature),
            TemperatureUnit.KELVIN,
            unit,
        )
