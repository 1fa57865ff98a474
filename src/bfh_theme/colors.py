"""BFH and Region Hovedstaden colors and palettes.

The tables are plain Python dicts and lists so any consumer (matplotlib,
Plotly, CSS) can use them; only the helper functions touch numpy/matplotlib.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import to_hex, to_rgba_array
from matplotlib.patches import Rectangle

from .exceptions import InvalidArgumentError
from .validation import validate_logical_argument, validate_palette_argument

logger = logging.getLogger(__name__)

BFH_COLORS = {
    # Hospital (Bispebjerg og Frederiksberg Hospital)
    "hospital_primary": "#007dbb",      # identity color
    "hospital_blue": "#009ce8",
    "hospital_light_blue1": "#cce5f1",
    "hospital_light_blue2": "#e5f2f8",
    "hospital_grey": "#646c6f",
    "hospital_dark_grey": "#333333",
    "hospital_white": "#ffffff",

    # Region Hovedstaden (koncern)
    "regionh_primary": "#002555",       # identity color
    "regionh_blue": "#007dbb",
    "regionh_light_grey1": "#ccd3dd",
    "regionh_light_grey2": "#e5e9ee",
    "regionh_grey": "#646c6f",
    "regionh_dark_grey": "#333333",
    "regionh_white": "#ffffff",

    # Aliases
    "primary": "#007dbb",
    "blue": "#009ce8",
    "light_blue": "#cce5f1",
    "very_light_blue": "#e5f2f8",
    "grey": "#646c6f",
    "dark_grey": "#333333",
    "white": "#ffffff",
    "regionh_navy": "#002555",
}


def bfh_cols(*names: str) -> dict[str, str]:
    """Look up colors by name; with no names, return the whole table."""
    if not names:
        return dict(BFH_COLORS)

    if not all(isinstance(name, str) for name in names):
        raise InvalidArgumentError("Color names must be character strings")

    unknown = [name for name in names if name not in BFH_COLORS]
    if unknown:
        raise InvalidArgumentError(
            f"Unknown color name(s): {', '.join(unknown)}\n"
            f"Available colors: {', '.join(BFH_COLORS)}"
        )
    return {name: BFH_COLORS[name] for name in names}


def _hexes(*names: str) -> list[str]:
    return list(bfh_cols(*names).values())


BFH_PALETTES = {
    # Hospital
    "main": _hexes("hospital_primary", "hospital_blue", "hospital_grey", "dark_grey"),
    "hospital": _hexes("hospital_primary", "hospital_blue", "hospital_grey", "dark_grey"),
    "hospital_blues": _hexes("hospital_primary", "hospital_blue", "light_blue", "very_light_blue"),
    "hospital_blues_seq": _hexes(
        "hospital_primary", "hospital_blue", "light_blue", "very_light_blue", "white"
    ),
    "hospital_infographic": _hexes(
        "hospital_primary", "hospital_blue", "light_blue", "hospital_grey", "dark_grey"
    ),

    # Region Hovedstaden
    "regionh": _hexes("regionh_primary", "regionh_blue", "regionh_grey", "dark_grey"),
    "regionh_main": _hexes("regionh_primary", "regionh_blue", "regionh_light_grey1", "regionh_grey"),
    "regionh_blues": _hexes(
        "regionh_primary", "regionh_blue", "regionh_light_grey1", "regionh_light_grey2"
    ),
    "regionh_blues_seq": _hexes(
        "regionh_primary", "regionh_blue", "regionh_light_grey1", "regionh_light_grey2", "white"
    ),
    "regionh_infographic": _hexes(
        "regionh_primary", "regionh_blue", "regionh_light_grey1", "regionh_grey", "dark_grey"
    ),

    # Legacy names kept for older report scripts
    "primary": _hexes("hospital_primary", "hospital_blue"),
    "blues": _hexes("hospital_primary", "hospital_blue", "light_blue", "very_light_blue"),
    "blues_sequential": _hexes(
        "hospital_primary", "hospital_blue", "light_blue", "very_light_blue", "white"
    ),
    "greys": _hexes("dark_grey", "hospital_grey", "light_blue", "very_light_blue"),
    "contrast": _hexes("hospital_primary", "hospital_grey", "hospital_blue", "dark_grey"),
    "infographic": _hexes("hospital_primary", "hospital_blue", "light_blue", "hospital_grey", "dark_grey"),
}


def get_palette(palette: str = "main", reverse: bool = False) -> list[str]:
    palette = validate_palette_argument(palette)
    reverse = validate_logical_argument(reverse, "reverse")
    if palette not in BFH_PALETTES:
        raise InvalidArgumentError(
            f"Unknown palette: '{palette}'\n"
            f"Available palettes: {', '.join(BFH_PALETTES)}"
        )
    colors = list(BFH_PALETTES[palette])
    return colors[::-1] if reverse else colors


def _interpolate(colors: list[str], n: int) -> list[str]:
    if n <= 0:
        return []
    rgba = to_rgba_array(colors)
    stops = np.linspace(0, 1, len(colors))
    targets = np.linspace(0, 1, n)
    channels = [np.interp(targets, stops, rgba[:, i]) for i in range(3)]
    return [to_hex(rgb) for rgb in np.column_stack(channels)]


def bfh_pal(palette: str = "main", reverse: bool = False) -> Callable[[int], list[str]]:
    """Return ``f(n)`` giving ``n`` colors interpolated along a palette."""
    colors = get_palette(palette, reverse)

    def pal(n: int) -> list[str]:
        if n == len(colors):
            return list(colors)
        return _interpolate(colors, n)

    return pal


def show_palettes(n: int | None = None):
    """Draw every palette as a row of swatches and return the figure."""
    names = list(BFH_PALETTES)
    fig, axes = plt.subplots(len(names), 1, figsize=(6, 0.45 * len(names)))
    for ax, name in zip(axes, names):
        colors = BFH_PALETTES[name] if n is None else bfh_pal(name)(n)
        for i, color in enumerate(colors):
            ax.add_patch(Rectangle((i, 0), 1, 1, color=color))
        ax.set_xlim(0, len(colors))
        ax.set_ylim(0, 1)
        ax.set_axis_off()
        ax.text(-0.1, 0.5, name, ha="right", va="center", fontsize=8, transform=ax.transData)
    return fig


def check_colorblind_safe(colors: Iterable[str]) -> list[str]:
    colors = list(colors)
    logger.info("For full colorblind accessibility testing use a dedicated simulator")
    logger.info("Number of colors: %d", len(colors))
    return colors
