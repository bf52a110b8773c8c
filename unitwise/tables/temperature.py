"""Temperature units and aliases. Conversion is affine, see engine.temperature."""

from __future__ import annotations

from enum import Enum


class TemperatureUnit(Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"


ALIASES = (
    ("celsius", TemperatureUnit.CELSIUS),
    ("c", TemperatureUnit.CELSIUS),
    ("C", TemperatureUnit.CELSIUS),
    ("°c", TemperatureUnit.CELSIUS),
    ("°C", TemperatureUnit.CELSIUS),
    ("fahrenheit", TemperatureUnit.FAHRENHEIT),
    ("f", TemperatureUnit.FAHRENHEIT),
    ("F", TemperatureUnit.FAHRENHEIT),
    ("°f", TemperatureUnit.FAHRENHEIT),
    ("°F", TemperatureUnit.FAHRENHEIT),
    ("kelvin", TemperatureUnit.KELVIN),
    ("k", TemperatureUnit.KELVIN),
    ("K", TemperatureUnit.KELVIN),
)

SYMBOLS = {
    TemperatureUnit.CELSIUS: "C",
    TemperatureUnit.FAHRENHEIT: "F",
    TemperatureUnit.KELVIN: "K",
}
