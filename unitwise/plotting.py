"""Diagnostic figures for the unit tables and the temperature policy.

Figures receive category objects and only render what the engine computes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from .categories import Temperature, get_category
from .constants import ABSOLUTE_ZERO
from .engine import Category, LinearCategory
from .reporting import format_value
from .tables.temperature import TemperatureUnit

FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 12.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 11.0
    LINEWIDTH: float = 2.0
    LINEWIDTH_THIN: float = 1.2
    MARKERSIZE: float = 6.0
    GRID_ALPHA: float = 0.20
    FIGSIZE_SINGLE: tuple[float, float] = (7.0, 4.2)


STYLE = StyleConfig()

SCALE_COLORS = {
    TemperatureUnit.CELSIUS: "#1f77b4",
    TemperatureUnit.FAHRENHEIT: "#ff7f0e",
    TemperatureUnit.KELVIN: "#4A4A4A",
}


def setup_plot_style() -> None:
    """Apply the global Matplotlib style once per process."""
    if _STYLE_STATE["initialized"]:
        return
    plt.rcParams.update(
        {
            "font.family": "STIXGeneral",
            "font.size": STYLE.BASE_FONTSIZE,
            "axes.titlesize": STYLE.TITLE_FONTSIZE,
            "axes.labelsize": STYLE.LABEL_FONTSIZE,
            "xtick.labelsize": STYLE.TICK_FONTSIZE,
            "ytick.labelsize": STYLE.TICK_FONTSIZE,
            "mathtext.fontset": "stix",
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "legend.frameon": False,
            "lines.linewidth": STYLE.LINEWIDTH,
            "lines.markersize": STYLE.MARKERSIZE,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.12,
        }
    )
    _STYLE_STATE["initialized"] = True


def _clean_axis(ax: Axes, grid_axis: str = "x") -> None:
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.grid(True, axis=grid_axis, alpha=STYLE.GRID_ALPHA, linestyle=":", linewidth=0.7)


def plot_factor_ladder(category, output_dir: str = "output") -> str:
    """Plot every unit's factor on a log10 axis.

    Args:
        category: Linear category object, ``UnitCategory`` or name.
        output_dir (str): Directory for the PNG file.

    Returns:
        str: Path to ``factor_ladder_<category>.png``.

    Raises:
        TypeError: If the category has no linear factors (temperature).
    """
    if not isinstance(category, Category):
        category = get_category(category)
    if not isinstance(category, LinearCategory):
        raise TypeError(f"{category.name} has no linear conversion factors to plot.")

    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    units = sorted(category.units, key=category.factor)
    factors = np.array([float(category.factor(u)) for u in units])
    labels = [category.symbol(u) for u in units]
    positions = np.arange(len(units))

    height = max(STYLE.FIGSIZE_SINGLE[1], 0.32 * len(units) + 1.0)
    fig, ax = plt.subplots(figsize=(STYLE.FIGSIZE_SINGLE[0], height))
    ax.hlines(positions, factors.min() / 10.0, factors, color="#9a9a9a", linewidth=STYLE.LINEWIDTH_THIN)
    ax.plot(factors, positions, "o", color="#004371")
    for pos, factor, unit in zip(positions, factors, units):
        ax.annotate(
            format_value(category.factor(unit), 4),
            (factor, pos),
            xytext=(6, 0),
            textcoords="offset points",
            va="center",
            fontsize=STYLE.TICK_FONTSIZE - 2,
        )
    ax.set_xscale("log")
    ax.set_yticks(positions)
    ax.set_yticklabels(labels)
    ax.set_xlabel(f"Factor ({category.symbol(category.base_unit)} per unit)")
    ax.set_title(f"{category.name.capitalize()} conversion factors")
    _clean_axis(ax, grid_axis="x")

    path = os.path.join(output_dir, f"factor_ladder_{category.name}.png")
    fig.savefig(path, dpi=FIGURE_DPI)
    plt.close(fig)
    return path


def plot_temperature_scales(output_dir: str = "output", kelvin_max: float = 500.0) -> str:
    """Plot Celsius and Fahrenheit readings against Kelvin.

    The curves are computed by converting Celsius inputs that start below
    absolute zero, so the flat segment at the left shows the 0 K floor.

    Args:
        output_dir (str): Directory for the PNG file.
        kelvin_max (float): Upper end of the plotted range in K.

    Returns:
        str: Path to ``temperature_scales.png``.
    """
    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    floor_c = float(Temperature.from_kelvin(ABSOLUTE_ZERO, TemperatureUnit.CELSIUS))
    celsius_in = np.linspace(floor_c - 100.0, kelvin_max + floor_c, 400)
    kelvin = np.asarray(
        Temperature.convert(celsius_in, TemperatureUnit.CELSIUS, TemperatureUnit.KELVIN), dtype=float
    )

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    for unit in (TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT):
        reading = Temperature.convert(celsius_in, TemperatureUnit.CELSIUS, unit)
        ax.plot(
            celsius_in,
            np.asarray(reading, dtype=float),
            color=SCALE_COLORS[unit],
            label=f"°{Temperature.symbol(unit)}",
        )
    ax.plot(celsius_in, kelvin, color=SCALE_COLORS[TemperatureUnit.KELVIN], label="K")
    ax.axvline(floor_c, color="#a50f15", linestyle="--", linewidth=STYLE.LINEWIDTH_THIN,
               label="absolute zero")
    ax.set_xlabel("Input temperature (°C)")
    ax.set_ylabel("Converted reading")
    ax.set_title("Temperature scales with absolute-zero floor")
    ax.legend(loc="upper left")
    _clean_axis(ax, grid_axis="both")

    path = os.path.join(output_dir, "temperature_scales.png")
    fig.savefig(path, dpi=FIGURE_DPI)
    plt.close(fig)
    return path
